"""Catalog loading infrastructure for CatalogRegistry.

Provides concrete catalog loaders for compiled GNU gettext (.mo) catalogs
and result/summary data structures for tracking load attempts.

Components:
    PathCatalogLoader - Disk-based loader using a {locale} path template
    BytesCatalogLoader - Loader for catalogs embedded as bytes
    CatalogLoadResult - Immutable result of loading one locale's catalog
    LoadSummary - Immutable aggregate of all load results from a registry build

Both loaders return None for a locale without a catalog and raise
CatalogLoadError for catalog data that cannot be parsed, so that corrupt data
is never mistaken for an intentionally untranslated locale.

Python 3.13+. Uses Babel for .mo parsing.
"""

from __future__ import annotations

import io
import logging
import struct
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import BinaryIO

from babel.support import Translations

from getprose.constants import DEFAULT_CATALOG_PATH, DEFAULT_DOMAIN, MO_SUFFIX
from getprose.diagnostics import CatalogLoadError, ErrorTemplate
from getprose.enums import LoadStatus
from getprose.locale import Locale
from getprose.localization.types import Catalog, empty_catalog

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Concrete loaders
    "PathCatalogLoader",
    "BytesCatalogLoader",
    # Load result types
    "CatalogLoadResult",
    "LoadSummary",
]

logger = logging.getLogger(__name__)

# Errors raised by gettext.GNUTranslations._parse for corrupt input:
# OSError (bad magic, bad version, corrupt offsets), struct.error (truncated
# header), ValueError (undecodable text, invalid Plural-Forms expression),
# LookupError (unknown charset in Content-Type; also covers IndexError from a
# Plural-Forms header without "plural=").
_PARSE_ERRORS = (OSError, struct.error, ValueError, LookupError)


def _parse_mo(
    fp: BinaryIO, locale: Locale, domain: str, source_path: str | None
) -> Translations:
    """Parse a compiled catalog, wrapping parser failures in CatalogLoadError."""
    try:
        return Translations(fp=fp, domain=domain)
    except _PARSE_ERRORS as e:
        diagnostic = ErrorTemplate.catalog_load_failed(locale.tag, str(e), source_path)
        raise CatalogLoadError(diagnostic, locale=locale, source_path=source_path) from e


def _validate_domain(domain: str) -> None:
    """Validate gettext domain for path traversal attacks.

    Raises:
        ValueError: If domain is empty or contains path components
    """
    if not domain:
        msg = "Catalog domain cannot be empty"
        raise ValueError(msg)
    if ".." in domain or "/" in domain or "\\" in domain:
        msg = f"Path components not allowed in catalog domain: '{domain}'"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class PathCatalogLoader:
    """File system catalog loader using path templates.

    Loads ``<base_path>/<domain>.mo`` with ``{locale}`` in base_path replaced
    by the locale tag, i.e. the standard gettext layout
    ``locales/de_DE/LC_MESSAGES/messages.mo``.

    Locales listed in source_locales are served by the empty identity
    catalog without touching the file system: their strings are the message
    keys themselves.

    Example:
        >>> loader = PathCatalogLoader("locales/{locale}/LC_MESSAGES",
        ...                            source_locales=frozenset({Locale.DE_DE}))
        >>> registry = CatalogRegistry.build(loader, fallback=Locale.DE_DE)

    Attributes:
        base_path: Directory template with {locale} placeholder
        domain: gettext domain (file stem of the .mo file)
        source_locales: Locales served by the empty catalog
    """

    base_path: str = DEFAULT_CATALOG_PATH
    domain: str = DEFAULT_DOMAIN
    source_locales: frozenset[Locale] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate template and domain at initialization.

        Raises:
            ValueError: If base_path lacks {locale} or domain is unsafe
        """
        # Without this placeholder, all locales would load from the same path,
        # silently serving one language for every locale.
        if "{locale}" not in self.base_path:
            msg = (
                f"base_path must contain '{{locale}}' placeholder for locale substitution, "
                f"got: '{self.base_path}'"
            )
            raise ValueError(msg)
        _validate_domain(self.domain)

    def catalog_path(self, locale: Locale) -> Path:
        """Path of the compiled catalog for locale."""
        # replace() instead of format(): the template may contain other braces
        directory = self.base_path.replace("{locale}", locale.tag)
        return Path(directory) / f"{self.domain}{MO_SUFFIX}"

    def describe_path(self, locale: Locale) -> str:
        """Human-readable catalog location for diagnostics."""
        return str(self.catalog_path(locale))

    def load(self, locale: Locale) -> Catalog | None:
        """Load the compiled catalog for locale.

        Args:
            locale: Locale to load

        Returns:
            Parsed catalog, the empty catalog for source locales, or None
            when no catalog file exists

        Raises:
            CatalogLoadError: If the file exists but cannot be read or parsed
        """
        if locale in self.source_locales:
            logger.debug("Using empty catalog for source locale %s", locale)
            return empty_catalog()

        path = self.catalog_path(locale)
        source_path = str(path)
        try:
            with path.open("rb") as fp:
                catalog = _parse_mo(fp, locale, self.domain, source_path)
        except FileNotFoundError:
            logger.debug("No catalog for %s at %s", locale, source_path)
            return None
        except OSError as e:
            diagnostic = ErrorTemplate.catalog_load_failed(locale.tag, str(e), source_path)
            raise CatalogLoadError(diagnostic, locale=locale, source_path=source_path) from e

        logger.debug("Loaded catalog for %s from %s", locale, source_path)
        return catalog

    def __call__(self, locale: Locale) -> Catalog | None:
        return self.load(locale)


@dataclass(frozen=True, slots=True)
class BytesCatalogLoader:
    """Loader for compiled catalogs held in memory.

    Suited to catalogs embedded in the application (package data, build
    artifacts read at startup). A locale absent from sources, or mapped to
    None, has no catalog.

    Example:
        >>> loader = BytesCatalogLoader(
        ...     {Locale.EN_GB: en_gb_mo_bytes},
        ...     source_locales=frozenset({Locale.DE_DE}),
        ... )

    Attributes:
        sources: Compiled .mo bytes per locale
        domain: gettext domain recorded on the parsed catalogs
        source_locales: Locales served by the empty catalog
    """

    sources: Mapping[Locale, bytes | None]
    domain: str = DEFAULT_DOMAIN
    source_locales: frozenset[Locale] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Freeze the sources mapping against later mutation by the caller."""
        _validate_domain(self.domain)
        object.__setattr__(self, "sources", MappingProxyType(dict(self.sources)))

    def describe_path(self, locale: Locale) -> str:
        """Human-readable catalog location for diagnostics."""
        return f"<bytes:{locale.tag}/{self.domain}{MO_SUFFIX}>"

    def load(self, locale: Locale) -> Catalog | None:
        """Parse the embedded catalog for locale.

        Raises:
            CatalogLoadError: If the bytes are not a valid compiled catalog
        """
        if locale in self.source_locales:
            logger.debug("Using empty catalog for source locale %s", locale)
            return empty_catalog()

        data = self.sources.get(locale)
        if data is None:
            logger.debug("No embedded catalog for %s", locale)
            return None

        catalog = _parse_mo(io.BytesIO(data), locale, self.domain, self.describe_path(locale))
        logger.debug("Loaded embedded catalog for %s (%d bytes)", locale, len(data))
        return catalog

    def __call__(self, locale: Locale) -> Catalog | None:
        return self.load(locale)


@dataclass(frozen=True, slots=True)
class CatalogLoadResult:
    """Result of loading the catalog for a single locale.

    Attributes:
        locale: Locale the loader was asked for
        status: Load status (loaded, empty, not_found)
    """

    locale: Locale
    status: LoadStatus

    @property
    def is_loaded(self) -> bool:
        """Check if a compiled catalog was loaded."""
        return self.status == LoadStatus.LOADED

    @property
    def is_empty(self) -> bool:
        """Check if the locale is served by the empty identity catalog."""
        return self.status == LoadStatus.EMPTY

    @property
    def is_not_found(self) -> bool:
        """Check if the locale has no catalog (served by the fallback)."""
        return self.status == LoadStatus.NOT_FOUND


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of catalog load results from a registry build.

    All statistics are computed properties derived from the ``results`` tuple.

    Attributes:
        results: One result per Locale, in Locale order

    Example:
        >>> summary = registry.load_summary
        >>> for result in summary.get_not_found():
        ...     print(f"{result.locale} falls back to {registry.fallback}")
    """

    results: tuple[CatalogLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"loaded={self.loaded}, "
            f"empty={self.empty}, "
            f"not_found={self.not_found})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def loaded(self) -> int:
        """Number of compiled catalogs loaded."""
        return sum(1 for r in self.results if r.is_loaded)

    @property
    def empty(self) -> int:
        """Number of locales served by the empty catalog."""
        return sum(1 for r in self.results if r.is_empty)

    @property
    def not_found(self) -> int:
        """Number of locales without a catalog."""
        return sum(1 for r in self.results if r.is_not_found)

    def get_not_found(self) -> tuple[CatalogLoadResult, ...]:
        """Get all results for locales without a catalog."""
        return tuple(r for r in self.results if r.is_not_found)

    def get_by_locale(self, locale: Locale) -> CatalogLoadResult | None:
        """Get the result for a specific locale."""
        for result in self.results:
            if result.locale == locale:
                return result
        return None

    @property
    def all_found(self) -> bool:
        """Check if every attempted locale has its own catalog."""
        return self.not_found == 0
