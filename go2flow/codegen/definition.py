"""
Definition generation for Go to Flow transpilation.

This module turns one Go type declaration into one Flow `export type`
fragment. The fragment is built as a list of lines and returned whole,
so a declaration is either emitted completely or not at all.
"""

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext
    from .field import FieldGenerator
    from .type_converter import TypeConverter

from .base import BaseGenerator
from .type_converter import UnresolvableTypeError
from ..parser.ast_nodes import (
    TypeSpec,
    Identifier,
    PointerType,
    ArrayType,
    MapType,
    StructType,
)


class DefinitionGenerator(BaseGenerator):
    """
    Generates Flow type declarations from Go type declarations.

    This class handles:
    - Aliases of named types (type Name string)
    - Array aliases (type List []Item)
    - Map aliases (type Dict map[string]int)
    - Structs, as object types intersected with their embedded types
    """

    def __init__(
        self,
        ctx: 'CodeGenerationContext',
        type_converter: 'TypeConverter',
        field_generator: 'FieldGenerator',
    ):
        """
        Initialize the definition generator.

        Args:
            ctx: The code generation context
            type_converter: The type converter
            field_generator: The generator for struct members
        """
        super().__init__(ctx)
        self._type_converter = type_converter
        self._field_generator = field_generator

    def generate_type_spec(self, spec: TypeSpec) -> List[str]:
        """Generate the lines of a Flow declaration.

        Args:
            spec: The type declaration AST node

        Returns:
            The fragment's lines ending with a blank line, or an empty
            list when the declaration produces no output
        """
        if not spec.is_exported:
            return []

        self._ctx.current_declaration = spec.name
        node = spec.type_node
        position = ''  # where an inline struct would make the declaration unresolvable

        try:
            if isinstance(node, Identifier):
                lines = [f'export type {spec.name} = {self._type_converter.go_type_to_flow(node)};']
            elif isinstance(node, ArrayType):
                position = 'array element'
                element = self._type_converter.go_type_to_flow(node.element)
                lines = [f'export type {spec.name} = Array<{element}>;']
            elif isinstance(node, MapType):
                position = 'map key'
                key = self._type_converter.go_type_to_flow(node.key)
                position = 'map value'
                value = self._type_converter.go_type_to_flow(node.value)
                lines = [f'export type {spec.name} = {{[{key}]: {value}}};']
            elif isinstance(node, StructType):
                lines = self.generate_struct(spec.name, node)
            elif isinstance(node, PointerType):
                self.diagnostics.info_declaration_omitted(
                    spec.name, 'pointer', self.file_path, spec.line,
                )
                return []
            else:
                raise TypeError(f'Not a type node: {type(node).__name__}')
        except UnresolvableTypeError:
            # e.g. type Rows []struct{...} or type Index map[string]struct{...}
            self.diagnostics.warn_declaration_skipped(
                spec.name, f'inline struct {position}', self.file_path, spec.line,
            )
            return []

        lines.append('')
        return lines

    def generate_struct(self, name: str, struct: StructType) -> List[str]:
        """Generate a Flow object type for a struct.

        Embedded fields become intersection members, in declaration order,
        ahead of the object literal holding the named fields.
        """
        intersections = []
        for field in struct.fields:
            if field.is_anonymous:
                embedded = self._field_generator.embedded_type_name(field)
                if embedded:
                    intersections.append(embedded)

        if intersections:
            lines = [f'export type {name} = {" & ".join(intersections)} & {{']
        else:
            lines = [f'export type {name} = {{']

        for field in struct.fields:
            if field.is_anonymous:
                continue
            member = self._field_generator.generate_field(field)
            if member is not None:
                lines.append(member)

        for skipped in struct.skipped_fields:
            self._field_generator.report_skipped_field(skipped)

        lines.append('}')
        return lines

    @staticmethod
    def render(lines: List[str]) -> str:
        """Join a fragment's lines into text."""
        if not lines:
            return ''
        return '\n'.join(lines) + '\n'
