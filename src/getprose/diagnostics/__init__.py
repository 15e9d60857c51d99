"""Structured error reporting for getprose.

Every raised error carries a Diagnostic: a numbered code, a message, an
optional fix-it hint and the locale or catalog path involved.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CatalogLoadError,
    FormatError,
    GetproseError,
    MissingFallbackError,
    UnknownLocaleError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CatalogLoadError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FormatError",
    "GetproseError",
    "MissingFallbackError",
    "OutputFormat",
    "UnknownLocaleError",
]
