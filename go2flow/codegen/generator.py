"""
Flow code generator for a parsed Go source file.

Wires the specialized generators together and renders every exported
type declaration of a SourceFile, in source order, below the file header.
"""

from typing import List, Optional

from .context import CodeGenerationContext
from .diagnostics import TranspilerDiagnostics
from .type_converter import TypeConverter
from .field import FieldGenerator
from .definition import DefinitionGenerator
from ..parser.ast_nodes import SourceFile, TypeSpec


class FlowCodeGenerator:
    """Generates Flow type definitions from a Go SourceFile AST."""

    def __init__(self, ctx: Optional[CodeGenerationContext] = None):
        self._ctx = ctx or CodeGenerationContext()
        self._type_converter = TypeConverter(self._ctx)
        self._field_generator = FieldGenerator(self._ctx, self._type_converter)
        self._definition_generator = DefinitionGenerator(
            self._ctx, self._type_converter, self._field_generator,
        )

    @property
    def context(self) -> CodeGenerationContext:
        return self._ctx

    @property
    def diagnostics(self) -> TranspilerDiagnostics:
        return self._ctx.diagnostics

    def generate_declaration(self, spec: TypeSpec) -> str:
        """Render a single declaration's fragment ('' if it has no output)."""
        lines = self._definition_generator.generate_type_spec(spec)
        return self._definition_generator.render(lines)

    def generate_fragments(self, unit: SourceFile, file_path: str = '') -> List[str]:
        """Render the fragment of every declaration that produces output."""
        self._ctx.current_file_path = file_path

        # Unexported declarations never produce output, skipped or not
        for skipped in unit.skipped:
            if not skipped.is_exported:
                continue
            self.diagnostics.warn_declaration_skipped(
                skipped.name, skipped.reason, file_path, skipped.line,
            )

        fragments = []
        for spec in unit.type_specs:
            fragment = self.generate_declaration(spec)
            if fragment:
                fragments.append(fragment)
        return fragments

    def generate(self, unit: SourceFile, file_path: str = '') -> str:
        """Generate the Flow text for a whole file.

        Returns an empty string when the file has no exported declarations.
        """
        fragments = self.generate_fragments(unit, file_path)
        if not fragments:
            return ''
        if self._ctx.header:
            return f'{self._ctx.header}\n\n' + ''.join(fragments)
        return ''.join(fragments)
