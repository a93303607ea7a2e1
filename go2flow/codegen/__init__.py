"""
Code generation module for the Go to Flow transpiler.

This module provides Flow type generation from Go AST nodes.
"""

from .context import CodeGenerationContext
from .base import BaseGenerator
from .tags import TagInfo, parse_tag
from .type_converter import TypeConverter, UnresolvableTypeError
from .field import FieldGenerator
from .definition import DefinitionGenerator
from .generator import FlowCodeGenerator
from .diagnostics import TranspilerDiagnostics, Diagnostic, DiagnosticSeverity

__all__ = [
    'CodeGenerationContext',
    'BaseGenerator',
    'TagInfo',
    'parse_tag',
    'TypeConverter',
    'UnresolvableTypeError',
    'FieldGenerator',
    'DefinitionGenerator',
    'FlowCodeGenerator',
    'TranspilerDiagnostics',
    'Diagnostic',
    'DiagnosticSeverity',
]
