"""
Diagnostic/warning system for the transpiler.

Collects and reports warnings about Go constructs that were skipped or
omitted during translation, so that a missing Flow type or field can be
traced back to the declaration that caused it.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class DiagnosticSeverity(Enum):
    """Severity levels for transpiler diagnostics."""
    WARNING = 'warning'
    INFO = 'info'


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    severity: DiagnosticSeverity
    code: str
    message: str
    file_path: str = ''
    line: Optional[int] = None
    construct: str = ''  # e.g., 'embedded field', 'struct tag'

    def __str__(self) -> str:
        location = self.file_path
        if self.line:
            location = f'{location}:{self.line}'
        if location:
            return f'[{self.severity.value}] {location}: {self.message} ({self.code})'
        return f'[{self.severity.value}] {self.message} ({self.code})'


class TranspilerDiagnostics:
    """
    Collects transpiler warnings/diagnostics during code generation.

    Usage:
        diag = TranspilerDiagnostics()
        diag.warn_embedded_field_unsupported("Account", "models.go", line=42)
        # ... after transpilation ...
        diag.print_summary()
    """

    def __init__(self, verbose: bool = False):
        self._diagnostics: List[Diagnostic] = []
        self._verbose = verbose

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Get all collected diagnostics."""
        return list(self._diagnostics)

    @property
    def warnings(self) -> List[Diagnostic]:
        """Get only warning-level diagnostics."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.WARNING]

    @property
    def count(self) -> int:
        """Get total diagnostic count."""
        return len(self._diagnostics)

    def clear(self) -> None:
        """Clear all diagnostics."""
        self._diagnostics.clear()

    # =========================================================================
    # SPECIFIC WARNING METHODS
    # =========================================================================

    def warn_embedded_field_unsupported(
        self,
        declaration: str,
        file_path: str = '',
        line: Optional[int] = None,
    ) -> None:
        """Warn that an embedded field has no nominal type name to intersect with."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W001',
            message=f'Embedded field in "{declaration}" is not a named type or a pointer '
                    f'to one; it was left out of the intersection.',
            file_path=file_path,
            line=line,
            construct='embedded field',
        ))

    def warn_declaration_skipped(
        self,
        declaration: str,
        reason: str,
        file_path: str = '',
        line: Optional[int] = None,
    ) -> None:
        """Warn that the parser could not represent a type declaration."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W002',
            message=f'Type "{declaration}" was skipped ({reason} not supported).',
            file_path=file_path,
            line=line,
            construct='declaration',
        ))

    def warn_field_type_unresolved(
        self,
        declaration: str,
        field_name: str,
        detail: str,
        file_path: str = '',
        line: Optional[int] = None,
    ) -> None:
        """Warn that a field was dropped because its type has no Flow text."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W003',
            message=f'Field "{field_name}" of "{declaration}" was omitted: {detail}.',
            file_path=file_path,
            line=line,
            construct='field type',
        ))

    def info_declaration_omitted(
        self,
        declaration: str,
        shape: str,
        file_path: str = '',
        line: Optional[int] = None,
    ) -> None:
        """Info that a declaration's underlying shape has no Flow form."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I001',
            message=f'Type "{declaration}" with underlying {shape} type was omitted.',
            file_path=file_path,
            line=line,
            construct='declaration',
        ))

    def info_malformed_tag(
        self,
        declaration: str,
        tag: str,
        file_path: str = '',
        line: Optional[int] = None,
    ) -> None:
        """Info that a struct tag could not be parsed and its field was dropped."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I002',
            message=f'Malformed struct tag {tag} in "{declaration}"; field omitted.',
            file_path=file_path,
            line=line,
            construct='struct tag',
        ))

    # =========================================================================
    # REPORTING
    # =========================================================================

    def print_summary(self, file=None) -> None:
        """Print a summary of all diagnostics to stderr (or specified file)."""
        if file is None:
            file = sys.stderr

        if not self._diagnostics:
            return

        warnings = self.warnings
        infos = [d for d in self._diagnostics if d.severity == DiagnosticSeverity.INFO]

        if warnings:
            print(f'\nTranspiler warnings ({len(warnings)}):', file=file)
            # Group by construct type
            by_construct: dict = {}
            for w in warnings:
                by_construct.setdefault(w.construct or 'other', []).append(w)

            for construct, diags in sorted(by_construct.items()):
                print(f'  {construct}: {len(diags)} occurrence(s)', file=file)
                if self._verbose:
                    for d in diags:
                        print(f'    {d}', file=file)

        if infos and self._verbose:
            print(f'\nTranspiler info ({len(infos)}):', file=file)
            for d in infos:
                print(f'  {d}', file=file)

    def get_summary(self) -> str:
        """Get a summary string of all diagnostics."""
        if not self._diagnostics:
            return 'No transpiler warnings.'

        by_construct: dict = {}
        for w in self.warnings:
            key = w.construct or 'other'
            by_construct[key] = by_construct.get(key, 0) + 1

        if not by_construct:
            return f'No transpiler warnings ({self.count} info).'

        parts = [f'{count} {construct}' for construct, count in sorted(by_construct.items())]
        return f'Transpiler warnings: {", ".join(parts)}'
