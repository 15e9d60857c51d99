"""getprose - locale-aware translation lookup and number formatting.

Binds compiled gettext catalogs to a closed set of locales, resolves
singular, plural and contextual messages with catalog-level fallback, and
renders numbers, dates and templates for display.

Translation using gettext looks like this:

    >>> registry = CatalogRegistry.build(loader, fallback=Locale.DE_DE)
    >>> localizer = registry.localizer(Locale.parse("ru"))
    >>> localizer.gettext("the first singular")
    >>> localizer.pgettext("good_text_context", "the second singular string")
    >>> n = 20
    >>> (FormatBuilder.of(localizer.ngettext("one string", "{count} strings", n))
    ...     .arg("count", format_int(n, localizer.locale))
    ...     .format())

Public API:
    Locale - Supported locales (parse, to_external_identifier)
    CatalogRegistry - Immutable Locale to catalog mapping with fallback
    Localizer - gettext, pgettext, ngettext, npgettext for one locale
    PathCatalogLoader, BytesCatalogLoader - Compiled .mo catalog loaders
    FormatBuilder - {name} placeholder substitution
    format_int, format_f64 - Locale-aware number formatting
    format_date, format_time, format_datetime - Locale-aware dates

Exceptions:
    GetproseError - Base exception class
    UnknownLocaleError - Unrecognised locale tag
    MissingFallbackError - Registry without a fallback catalog
    CatalogLoadError - Corrupt catalog data
    FormatError - Unbound placeholder or malformed template (strict path)

Submodules:
    getprose.localization - Catalog protocol, loaders, registry, localizer
    getprose.runtime - Template, number and date formatting
    getprose.diagnostics - Error types and structured diagnostics
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    CatalogLoadError,
    FormatError,
    GetproseError,
    MissingFallbackError,
    UnknownLocaleError,
)
from .locale import ExternalIdentifiers, Locale
from .localization import (
    BytesCatalogLoader,
    Catalog,
    CatalogRegistry,
    Localizer,
    PathCatalogLoader,
)
from .runtime import (
    FormatBuilder,
    format_date,
    format_datetime,
    format_f64,
    format_int,
    format_time,
    to_format,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("getprose")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BytesCatalogLoader",
    "Catalog",
    "CatalogLoadError",
    "CatalogRegistry",
    "ExternalIdentifiers",
    "FormatBuilder",
    "FormatError",
    "GetproseError",
    "Locale",
    "Localizer",
    "MissingFallbackError",
    "PathCatalogLoader",
    "UnknownLocaleError",
    "__version__",
    "format_date",
    "format_datetime",
    "format_f64",
    "format_int",
    "format_time",
    "to_format",
]
