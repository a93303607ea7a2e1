"""
Field generation for Go struct fields.

A named field becomes one member line of a Flow object type, or nothing
when its struct tag gives it no serialized name. An embedded field
contributes a type name to the owning declaration's intersection.
"""

import json
import re
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext
    from .type_converter import TypeConverter

from .base import BaseGenerator
from .tags import parse_tag
from .type_converter import UnresolvableTypeError
from ..parser.ast_nodes import FieldDeclaration, SkippedField


# Property names that can be written without quotes
PLAIN_PROPERTY = re.compile(r'^[A-Za-z_$][A-Za-z0-9_$]*$')


class FieldGenerator(BaseGenerator):
    """
    Generates Flow object type members from Go struct fields.

    Member markers:
    - `name?: T` when the tag has omitempty (the key may be absent)
    - `name: ?T` when the field is a pointer without omitempty (the key is
      always present but the value may be null)
    - `name: T` otherwise
    """

    def __init__(
        self,
        ctx: 'CodeGenerationContext',
        type_converter: 'TypeConverter',
    ):
        super().__init__(ctx)
        self._type_converter = type_converter

    def generate_field(self, field: FieldDeclaration) -> Optional[str]:
        """Generate the member line for a named field.

        Args:
            field: A named (non-embedded) struct field

        Returns:
            The indented member line, or None if the field is not emitted
        """
        tag = parse_tag(field.tag, self._ctx.tag_key)
        if tag.malformed:
            self.diagnostics.info_malformed_tag(
                self.declaration, field.tag or '', self.file_path, field.line,
            )
        if tag.is_omitted:
            return None

        try:
            flow_type = self._type_converter.go_type_to_flow(field.type_node)
        except UnresolvableTypeError as e:
            self.diagnostics.warn_field_type_unresolved(
                self.declaration, tag.name, str(e), self.file_path, field.line,
            )
            return None

        key = self.property_key(tag.name)
        if tag.optional:
            member = f'{key}?: {flow_type}'
        elif self._type_converter.is_nullable(field.type_node):
            member = f'{key}: ?{flow_type}'
        else:
            member = f'{key}: {flow_type}'
        return f'{self.indent()}{member},'

    def report_skipped_field(self, field: SkippedField) -> None:
        """Report a field the parser skipped, unless it would be dropped anyway."""
        if field.is_anonymous:
            self.diagnostics.warn_embedded_field_unsupported(
                self.declaration, self.file_path, field.line,
            )
            return

        tag = parse_tag(field.tag, self._ctx.tag_key)
        if tag.malformed:
            self.diagnostics.info_malformed_tag(
                self.declaration, field.tag or '', self.file_path, field.line,
            )
        if tag.is_omitted:
            return

        self.diagnostics.warn_field_type_unresolved(
            self.declaration, tag.name, f'{field.reason} not supported',
            self.file_path, field.line,
        )

    def embedded_type_name(self, field: FieldDeclaration) -> Optional[str]:
        """Get the type name an embedded field adds to the intersection."""
        name = self._type_converter.nominal_name(field.type_node)
        if name is None:
            self.diagnostics.warn_embedded_field_unsupported(
                self.declaration, self.file_path, field.line,
            )
        return name

    @staticmethod
    def property_key(name: str) -> str:
        """Quote serialized names that are not valid identifiers (e.g. first-name)."""
        if PLAIN_PROPERTY.match(name):
            return name
        return json.dumps(name, ensure_ascii=False)
