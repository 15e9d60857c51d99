"""Type aliases and protocols for the localization domain.

A Catalog is opaque to getprose: anything providing the four gettext lookup
methods qualifies. Compiled GNU catalogs (babel.support.Translations) and the
empty identity catalog (babel.support.NullTranslations) are the two concrete
kinds produced by the bundled loaders.

Python 3.13+.
"""

from __future__ import annotations

import gettext
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from babel.support import NullTranslations

if TYPE_CHECKING:
    from getprose.locale import Locale

__all__ = [
    "Catalog",
    "CatalogLoader",
    "MessageContext",
    "MessageId",
    "Template",
    "empty_catalog",
    "is_empty_catalog",
]

type MessageId = str
"""Source-language message key (msgid), e.g. 'Save file'."""

type MessageContext = str
"""Translator-facing disambiguation context (msgctxt), e.g. 'menu'."""

type Template = str
"""Translated string that may still contain {name} placeholders."""


@runtime_checkable
class Catalog(Protocol):
    """Read-only translation catalog for one locale.

    Plural-form selection is the catalog's own business: ngettext and
    npgettext apply the catalog's plural rule to n and return the matching
    form. Untranslated keys return the key itself (for plural lookups the
    singular key when n == 1, else the plural key).

    gettext.NullTranslations, gettext.GNUTranslations and the Babel
    subclasses of both satisfy this protocol.
    """

    def gettext(self, message: MessageId, /) -> Template: ...

    def pgettext(self, context: MessageContext, message: MessageId, /) -> Template: ...

    def ngettext(self, msgid1: MessageId, msgid2: MessageId, n: int, /) -> Template: ...

    def npgettext(
        self, context: MessageContext, msgid1: MessageId, msgid2: MessageId, n: int, /
    ) -> Template: ...


type CatalogLoader = Callable[[Locale], Catalog | None]
"""Returns the catalog for a locale, or None when the locale has none.

Raises CatalogLoadError when catalog data exists but cannot be parsed.
"""


def empty_catalog() -> Catalog:
    """Catalog without translations: every lookup returns its source key."""
    return NullTranslations()


def is_empty_catalog(catalog: Catalog) -> bool:
    """Check whether catalog is an identity catalog without translations."""
    return isinstance(catalog, gettext.NullTranslations) and not isinstance(
        catalog, gettext.GNUTranslations
    )
