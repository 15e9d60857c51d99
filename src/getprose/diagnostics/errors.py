"""Exceptions raised by getprose.

Each takes a plain message or a Diagnostic; with a Diagnostic the exception
text is its rendered BLOCK form.

Only construction-time operations (locale parsing, registry building,
catalog loading) and the strict formatting path raise. Lookups and lenient
formatting degrade to source text instead.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "CatalogLoadError",
    "FormatError",
    "GetproseError",
    "MissingFallbackError",
    "UnknownLocaleError",
]


class GetproseError(Exception):
    """Root of the getprose exception tree.

    Attributes:
        diagnostic: The Diagnostic this error was raised with, or None
    """

    def __init__(self, message: str | Diagnostic) -> None:
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnknownLocaleError(GetproseError, ValueError):
    """Locale tag does not match any supported Locale.

    Subclasses ValueError so callers parsing user input can catch it
    alongside other validation errors.

    Attributes:
        tag: The rejected tag, exactly as received
    """

    def __init__(self, message: str | Diagnostic, *, tag: str) -> None:
        super().__init__(message)
        self.tag = tag


class MissingFallbackError(GetproseError):
    """Registry built without a catalog for its fallback locale.

    Raised from registry construction, never deferred to the first lookup.

    Attributes:
        locale: The designated fallback locale
    """

    def __init__(self, message: str | Diagnostic, *, locale: object) -> None:
        super().__init__(message)
        self.locale = locale


class CatalogLoadError(GetproseError):
    """Catalog data was found but could not be parsed.

    Distinguishes corrupt data from an intentionally missing catalog; the
    registry propagates it instead of substituting an empty catalog.

    Attributes:
        locale: Locale whose catalog failed to load
        source_path: Human-readable catalog location, if known
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale: object,
        source_path: str | None = None,
    ) -> None:
        super().__init__(message)
        self.locale = locale
        self.source_path = source_path


class FormatError(GetproseError):
    """Template could not be fully formatted (strict path only).

    Attributes:
        template: The template that failed
        missing: Unbound placeholder names in template order; empty when the
            template itself is malformed
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        template: str,
        missing: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message)
        self.template = template
        self.missing = missing
