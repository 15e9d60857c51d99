"""Locale to catalog registry with a guaranteed fallback.

CatalogRegistry is built once, synchronously, before concurrent use, and is
immutable afterwards: any number of threads may read from it without
locking. Read access is total: a locale without a catalog resolves to the
fallback locale's catalog, which construction guarantees to exist.

Key architectural decisions:
- Explicit value instead of process-wide state: call sites receive the
  registry, so "not yet initialized" cannot happen at lookup time
- Fail fast: a missing fallback or a corrupt catalog aborts construction
- Catalogs are opaque (see localization.types.Catalog)

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from getprose.diagnostics import CatalogLoadError, ErrorTemplate, MissingFallbackError
from getprose.enums import LoadStatus
from getprose.locale import Locale
from getprose.localization.loading import CatalogLoadResult, LoadSummary
from getprose.localization.types import Catalog, CatalogLoader, is_empty_catalog

if TYPE_CHECKING:
    from getprose.localization.localizer import Localizer

__all__ = ["CatalogRegistry"]

logger = logging.getLogger(__name__)


class CatalogRegistry:
    """Immutable mapping from Locale to Catalog with fallback resolution.

    Use CatalogRegistry.build() to load catalogs through a loader. Direct
    construction from an existing mapping is supported for callers that
    already hold parsed catalogs.

    Example:
        >>> loader = PathCatalogLoader(source_locales=frozenset({Locale.DE_DE}))
        >>> registry = CatalogRegistry.build(loader, fallback=Locale.DE_DE)
        >>> registry.localizer(Locale.FR_FR).gettext("Save")
        'Enregistrer'

    Thread Safety:
        Immutable after construction; safe for concurrent reads.
    """

    __slots__ = ("_catalogs", "_fallback", "_load_summary")

    def __init__(
        self,
        catalogs: Mapping[Locale, Catalog],
        fallback: Locale,
        *,
        load_summary: LoadSummary | None = None,
    ) -> None:
        """Initialize registry from already-loaded catalogs.

        Args:
            catalogs: Catalog per locale; locales may be absent
            fallback: Locale used whenever a requested locale has no catalog
            load_summary: Load results (derived from catalogs if omitted)

        Raises:
            MissingFallbackError: If catalogs has no entry for fallback
            TypeError: If a value does not implement the Catalog protocol
        """
        for locale, catalog in catalogs.items():
            if not isinstance(catalog, Catalog):
                msg = (
                    f"Catalog for {locale} must implement gettext lookups, "
                    f"got {type(catalog).__name__}"
                )
                raise TypeError(msg)

        if fallback not in catalogs:
            raise MissingFallbackError(
                ErrorTemplate.missing_fallback(fallback.tag), locale=fallback
            )

        self._catalogs: Mapping[Locale, Catalog] = MappingProxyType(dict(catalogs))
        self._fallback = fallback
        self._load_summary = load_summary or LoadSummary(
            results=tuple(
                CatalogLoadResult(locale, _status_of(catalogs.get(locale)))
                for locale in Locale
            )
        )

    @classmethod
    def build(cls, loader: CatalogLoader, fallback: Locale) -> CatalogRegistry:
        """Load one catalog per Locale and build the registry.

        The loader is called exactly once per Locale member, in Locale
        order. A None result means the locale has no catalog and will be
        served by the fallback.

        Args:
            loader: Callable returning a Catalog or None for a Locale
            fallback: Locale that must have a catalog

        Returns:
            Constructed registry

        Raises:
            MissingFallbackError: If the loader returns None for fallback
            CatalogLoadError: Propagated from the loader for corrupt catalogs
        """
        catalogs: dict[Locale, Catalog] = {}
        results: list[CatalogLoadResult] = []

        for locale in Locale:
            try:
                catalog = loader(locale)
            except CatalogLoadError as e:
                logger.error("Failed to load catalog for %s: %s", locale, e)
                raise

            results.append(CatalogLoadResult(locale, _status_of(catalog)))
            if catalog is not None:
                catalogs[locale] = catalog

        registry = cls(catalogs, fallback, load_summary=LoadSummary(results=tuple(results)))
        logger.info(
            "Catalog registry built: %d of %d locales have catalogs, fallback %s",
            len(catalogs),
            len(Locale),
            fallback,
        )
        return registry

    @property
    def fallback(self) -> Locale:
        """Locale whose catalog serves locales without one."""
        return self._fallback

    @property
    def locales(self) -> tuple[Locale, ...]:
        """Locales that have their own catalog, in Locale order."""
        return tuple(locale for locale in Locale if locale in self._catalogs)

    @property
    def load_summary(self) -> LoadSummary:
        """Per-locale load results from construction."""
        return self._load_summary

    def has_catalog(self, locale: Locale) -> bool:
        """Check whether locale has its own catalog (no fallback needed)."""
        return locale in self._catalogs

    def resolve(self, locale: Locale) -> Locale:
        """Locale whose catalog serves locale: itself or the fallback."""
        return locale if locale in self._catalogs else self._fallback

    def get(self, locale: Locale) -> Catalog:
        """Catalog for locale, or the fallback's catalog. Never fails."""
        catalog = self._catalogs.get(locale)
        if catalog is None:
            return self._catalogs[self._fallback]
        return catalog

    def localizer(self, locale: Locale) -> Localizer:
        """Create a Localizer bound to locale's resolved catalog."""
        from getprose.localization.localizer import Localizer  # noqa: PLC0415 - circular

        return Localizer(self, locale)

    def __contains__(self, locale: object) -> bool:
        return locale in self._catalogs

    def __len__(self) -> int:
        return len(self._catalogs)

    def __iter__(self) -> Iterator[Locale]:
        return iter(self.locales)

    def __repr__(self) -> str:
        tags = ", ".join(locale.tag for locale in self.locales)
        return f"CatalogRegistry(locales=[{tags}], fallback={self._fallback.tag})"


def _status_of(catalog: Catalog | None) -> LoadStatus:
    if catalog is None:
        return LoadStatus.NOT_FOUND
    if is_empty_catalog(catalog):
        return LoadStatus.EMPTY
    return LoadStatus.LOADED
