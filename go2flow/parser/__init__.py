"""
Parser module for the Go to Flow transpiler.

This module provides AST node definitions and the parser implementation.
"""

from .ast_nodes import (
    # Base
    ASTNode,
    # Top-level
    SourceFile,
    TypeSpec,
    SkippedDeclaration,
    # Types
    TypeNode,
    Identifier,
    PointerType,
    ArrayType,
    MapType,
    StructType,
    FieldDeclaration,
    SkippedField,
)
from .parser import Parser, UnsupportedTypeError

__all__ = [
    # Base
    'ASTNode',
    # Top-level
    'SourceFile',
    'TypeSpec',
    'SkippedDeclaration',
    # Types
    'TypeNode',
    'Identifier',
    'PointerType',
    'ArrayType',
    'MapType',
    'StructType',
    'FieldDeclaration',
    'SkippedField',
    # Parser
    'Parser',
    'UnsupportedTypeError',
]
