"""
Base generator class with shared utilities.

This module provides the BaseGenerator class that gives every specialized
generator access to the shared context and its diagnostics.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext
    from .diagnostics import TranspilerDiagnostics


class BaseGenerator:
    """
    Base class for all code generators.

    Provides shared access to:
    - Indentation
    - The declaration and file currently being generated
    - The diagnostics collector
    """

    def __init__(self, ctx: 'CodeGenerationContext'):
        """
        Initialize the base generator.

        Args:
            ctx: The code generation context containing all settings
        """
        self._ctx = ctx

    def indent(self) -> str:
        """Return the indentation string for object type members."""
        return self._ctx.indent()

    @property
    def diagnostics(self) -> 'TranspilerDiagnostics':
        return self._ctx.diagnostics

    @property
    def file_path(self) -> str:
        return self._ctx.current_file_path

    @property
    def declaration(self) -> str:
        return self._ctx.current_declaration
