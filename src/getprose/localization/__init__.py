"""Catalog registry and message lookup package.

Provides the full lookup stack: catalog protocol and type aliases, catalog
loaders, the locale to catalog registry and per-locale Localizer views.

Submodules:
    types     - Catalog protocol, CatalogLoader alias, empty catalog helpers
    loading   - PathCatalogLoader, BytesCatalogLoader, CatalogLoadResult,
                LoadSummary
    registry  - CatalogRegistry (immutable, fallback-resolving)
    localizer - Localizer (gettext, pgettext, ngettext, npgettext)

Python 3.13+. Uses Babel for catalog parsing.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from getprose.enums import LoadStatus
from getprose.localization.loading import (
    BytesCatalogLoader,
    CatalogLoadResult,
    LoadSummary,
    PathCatalogLoader,
)
from getprose.localization.localizer import Localizer
from getprose.localization.registry import CatalogRegistry
from getprose.localization.types import (
    Catalog,
    CatalogLoader,
    MessageContext,
    MessageId,
    Template,
    empty_catalog,
    is_empty_catalog,
)

__all__ = [
    # Registry and lookups
    "CatalogRegistry",
    "Localizer",
    # Loaders
    "CatalogLoader",
    "PathCatalogLoader",
    "BytesCatalogLoader",
    # Load tracking
    "LoadStatus",
    "LoadSummary",
    "CatalogLoadResult",
    # Catalog protocol and helpers
    "Catalog",
    "empty_catalog",
    "is_empty_catalog",
    # Type aliases for user code type annotations
    "MessageContext",
    "MessageId",
    "Template",
]
