"""
Type conversion utilities for code generation.

This module provides the TypeConverter class that maps Go type nodes to
their Flow text and answers the two shape questions the field and
declaration generators ask: is a field nullable, and which named type
does an embedded field bring in.
"""

from typing import Optional

from .base import BaseGenerator
from ..parser.ast_nodes import (
    TypeNode,
    Identifier,
    PointerType,
    ArrayType,
    MapType,
    StructType,
)
from ..type_system import go_primitive_to_flow


class UnresolvableTypeError(ValueError):
    """Raised for a type node that has no Flow text (an inline struct)."""


class TypeConverter(BaseGenerator):
    """
    Handles Go to Flow type conversions.

    Mapping, applied recursively:
    - predeclared names (int, float64, bool, string, ...) -> Flow primitives
    - other names -> unchanged; a package qualifier is dropped
    - *T -> T (nullability is expressed on the field, not the type)
    - []T and [N]T -> Array<T>
    - map[K]V -> {[K]: V}
    """

    def go_type_to_flow(self, node: TypeNode) -> str:
        """Convert a Go type node to Flow type text.

        Args:
            node: Any of the five TypeNode variants

        Returns:
            The Flow type string

        Raises:
            UnresolvableTypeError: for an inline struct type
            TypeError: for an object that is not a TypeNode
        """
        if isinstance(node, Identifier):
            if node.qualifier:
                return node.name
            return go_primitive_to_flow(node.name) or node.name
        if isinstance(node, PointerType):
            return self.go_type_to_flow(node.inner)
        if isinstance(node, ArrayType):
            return f'Array<{self.go_type_to_flow(node.element)}>'
        if isinstance(node, MapType):
            key = self.go_type_to_flow(node.key)
            value = self.go_type_to_flow(node.value)
            return f'{{[{key}]: {value}}}'
        if isinstance(node, StructType):
            raise UnresolvableTypeError('inline struct types have no type name')
        raise TypeError(f'Not a type node: {type(node).__name__}')

    def is_nullable(self, node: TypeNode) -> bool:
        """A field is nullable when its declared type is a pointer.

        Only the top level counts: []*T is a non-nullable array whose
        elements happen to be pointers.
        """
        return isinstance(node, PointerType)

    def nominal_name(self, node: TypeNode) -> Optional[str]:
        """Name of the type brought in by an embedded field.

        Accepts T, pkg.T, *T and *pkg.T; anything else has no name.
        """
        if isinstance(node, PointerType):
            node = node.inner
        if isinstance(node, Identifier):
            return node.name
        return None
