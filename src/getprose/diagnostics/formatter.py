"""Rendering of Diagnostic records for terminals and log pipelines.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_ELLIPSIS = "..."


class OutputFormat(StrEnum):
    """How a DiagnosticFormatter lays out each record."""

    BLOCK = "block"
    LINE = "line"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns Diagnostic records into text.

    BLOCK is a header line followed by indented detail lines, LINE is the
    code and message only, JSON is one object per record for log shippers.
    With max_length set, message and hint text longer than the limit is cut
    and suffixed with "...".

    Example:
        >>> diagnostic = ErrorTemplate.unknown_locale("xx")
        >>> print(DiagnosticFormatter().format(diagnostic))
        error[UNKNOWN_LOCALE]: Unknown locale 'xx'
        >>> print(DiagnosticFormatter(OutputFormat.LINE).format(diagnostic))
        UNKNOWN_LOCALE: Unknown locale 'xx'
    """

    output_format: OutputFormat = OutputFormat.BLOCK
    max_length: int | None = None

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured layout."""
        match self.output_format:
            case OutputFormat.BLOCK:
                return self._block(diagnostic)
            case OutputFormat.LINE:
                return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
            case OutputFormat.JSON:
                return self._json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics, one blank line between records."""
        return "\n\n".join(map(self.format, diagnostics))

    def _block(self, diagnostic: Diagnostic) -> str:
        # error[CATALOG_LOAD_FAILED]: Catalog for 'fr_FR' could not be parsed
        #   --> locales/fr_FR/LC_MESSAGES/messages.mo
        #   = locale: fr_FR
        #   = help: Recompile the catalog from its .po source
        lines = [
            f"{diagnostic.severity}[{diagnostic.code.name}]: "
            f"{self._clip(diagnostic.message)}"
        ]
        if diagnostic.source_path:
            lines.append(f"  --> {diagnostic.source_path}")
        if diagnostic.locale:
            lines.append(f"  = locale: {diagnostic.locale}")
        if diagnostic.hint:
            lines.append(f"  = help: {self._clip(diagnostic.hint)}")
        return "\n".join(lines)

    def _json(self, diagnostic: Diagnostic) -> str:
        record: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._clip(diagnostic.message),
            "severity": diagnostic.severity,
        }
        optional = {
            "locale": diagnostic.locale,
            "source_path": diagnostic.source_path,
            "hint": self._clip(diagnostic.hint) if diagnostic.hint else None,
        }
        record.update({key: value for key, value in optional.items() if value})
        return json.dumps(record, ensure_ascii=False)

    def _clip(self, text: str) -> str:
        if self.max_length is None or len(text) <= self.max_length:
            return text
        return text[: self.max_length] + _ELLIPSIS
