"""DiagnosticCode numbering and the Diagnostic record.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Numbered diagnostic codes.

    Ranges:
        1000-1999: Locale errors (unrecognised tags)
        2000-2999: Catalog errors (loading, registry construction)
        3000-3999: Formatting errors (template substitution)
    """

    # Locale errors (1000-1999)
    UNKNOWN_LOCALE = 1001

    # Catalog errors (2000-2999)
    MISSING_FALLBACK = 2001
    CATALOG_LOAD_FAILED = 2002

    # Formatting errors (3000-3999)
    PLACEHOLDER_UNBOUND = 3001
    TEMPLATE_MALFORMED = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One reportable problem, readable by people and by log tooling.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale: Locale tag involved in the error, if any
        source_path: Catalog path involved in the error, if any
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale: str | None = None
    source_path: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return the bare message."""
        return self.message

    def format_error(self) -> str:
        """Render with the default BLOCK layout of DiagnosticFormatter.

        Example output:
            error[MISSING_FALLBACK]: No catalog for fallback locale 'en_GB'
              = locale: en_GB
              = help: Ship a catalog for the fallback locale or mark it as a source locale
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
