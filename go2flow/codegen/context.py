"""
Code generation context for the Flow code generator.

This module provides a context class that holds the settings and the
diagnostics sink shared by the generators. It carries no per-declaration
output; each declaration's lines are built and returned by the
generator that produced them.
"""

from dataclasses import dataclass, field

from .diagnostics import TranspilerDiagnostics


DEFAULT_TAG_KEY = 'json'
DEFAULT_HEADER = '// @flow'


@dataclass
class CodeGenerationContext:
    """
    Holds the settings and diagnostics used during Flow code generation.
    """

    # Formatting
    indent_str: str = '  '
    header: str = DEFAULT_HEADER

    # Struct tag key whose value names the serialized field
    tag_key: str = DEFAULT_TAG_KEY

    # File context
    current_file_path: str = ''

    # Declaration context, for diagnostics
    current_declaration: str = ''

    diagnostics: TranspilerDiagnostics = field(default_factory=TranspilerDiagnostics)

    def indent(self) -> str:
        """Return the indentation used for object type members."""
        return self.indent_str
