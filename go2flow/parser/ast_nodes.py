"""
AST node definitions for Go type declarations.

This module contains the dataclasses representing the part of a Go
source file that the transpiler consumes: top-level type declarations
and the type expressions they are built from.

Type expressions form a closed union (see TypeNode). Anything Go allows
outside that union (func, chan, non-empty interface, generics) is
rejected by the parser instead of being represented here.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union


def is_exported(name: str) -> bool:
    """Go exports identifiers that start with an upper-case letter."""
    return bool(name) and name[0].isupper()


# =============================================================================
# BASE NODE
# =============================================================================

@dataclass
class ASTNode:
    """Base class for all AST nodes."""
    pass


# =============================================================================
# TYPE NODES
# =============================================================================

@dataclass
class Identifier(ASTNode):
    """A plain (string) or package-qualified (time.Time) type name."""
    name: str
    qualifier: Optional[str] = None


@dataclass
class PointerType(ASTNode):
    """A pointer type (*T)."""
    inner: 'TypeNode'


@dataclass
class ArrayType(ASTNode):
    """A slice ([]T) or fixed-length array ([N]T)."""
    element: 'TypeNode'
    length: Optional[str] = None  # source text of N, None for slices


@dataclass
class MapType(ASTNode):
    """A map type (map[K]V)."""
    key: 'TypeNode'
    value: 'TypeNode'


@dataclass
class FieldDeclaration(ASTNode):
    """A struct field; no names means an embedded (anonymous) field."""
    type_node: 'TypeNode'
    names: List[str] = field(default_factory=list)
    tag: Optional[str] = None  # raw literal as written, quotes included
    line: int = 0

    @property
    def is_anonymous(self) -> bool:
        return not self.names


@dataclass
class SkippedField(ASTNode):
    """A struct field whose type the parser could not represent."""
    reason: str
    names: List[str] = field(default_factory=list)
    tag: Optional[str] = None
    line: int = 0

    @property
    def is_anonymous(self) -> bool:
        return not self.names


@dataclass
class StructType(ASTNode):
    """A struct type with its fields in declaration order."""
    fields: List[FieldDeclaration] = field(default_factory=list)
    skipped_fields: List[SkippedField] = field(default_factory=list)


TypeNode = Union[Identifier, PointerType, ArrayType, MapType, StructType]


# =============================================================================
# DECLARATION NODES
# =============================================================================

@dataclass
class TypeSpec(ASTNode):
    """A top-level type declaration (type Name T, or type Name = T)."""
    name: str
    type_node: TypeNode
    is_alias: bool = False
    line: int = 0

    @property
    def is_exported(self) -> bool:
        return is_exported(self.name)


@dataclass
class SkippedDeclaration(ASTNode):
    """A type declaration the parser could not represent."""
    name: str
    reason: str
    line: int = 0

    @property
    def is_exported(self) -> bool:
        return is_exported(self.name)


@dataclass
class SourceFile(ASTNode):
    """Root node representing an entire Go source file."""
    package: str = ''
    type_specs: List[TypeSpec] = field(default_factory=list)
    skipped: List[SkippedDeclaration] = field(default_factory=list)
