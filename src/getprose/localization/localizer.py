"""Per-locale message lookup.

A Localizer is a cheap view over a CatalogRegistry: it resolves the
requested locale once (to its own catalog or the fallback's) and forwards the
four gettext lookups to that catalog. Lookups never fail; untranslated keys
come back as the key itself.

Python 3.13+.
"""

from __future__ import annotations

import logging
import operator
from typing import TYPE_CHECKING

from getprose.localization.types import Catalog, MessageContext, MessageId, Template

if TYPE_CHECKING:
    from getprose.locale import Locale
    from getprose.localization.registry import CatalogRegistry

__all__ = ["Localizer"]

logger = logging.getLogger(__name__)


class Localizer:
    """Message lookups bound to one resolved catalog.

    Example:
        >>> localizer = Localizer(registry, Locale.RU_RU)
        >>> template = localizer.ngettext("{count} file", "{count} files", 5)
        >>> FormatBuilder.of(template).arg("count", format_int(5, Locale.RU_RU)).format()
        '5 файлов'

    Attributes:
        locale: Locale the caller asked for
        resolved_locale: Locale whose catalog answers lookups
    """

    __slots__ = ("_catalog", "_locale", "_resolved_locale")

    def __init__(self, registry: CatalogRegistry, locale: Locale) -> None:
        """Bind the catalog for locale, falling back as the registry dictates.

        Args:
            registry: Constructed catalog registry
            locale: Requested locale
        """
        self._locale = locale
        self._resolved_locale = registry.resolve(locale)
        self._catalog: Catalog = registry.get(locale)
        if self._resolved_locale != locale:
            logger.debug("No catalog for %s, using fallback %s", locale, self._resolved_locale)

    @property
    def locale(self) -> Locale:
        """Locale the caller asked for."""
        return self._locale

    @property
    def resolved_locale(self) -> Locale:
        """Locale whose catalog answers lookups."""
        return self._resolved_locale

    @property
    def is_fallback(self) -> bool:
        """True when lookups are served by the fallback locale's catalog."""
        return self._resolved_locale != self._locale

    def gettext(self, message: MessageId) -> Template:
        """Get the translation of message, or message itself if untranslated."""
        return self._catalog.gettext(message)

    def pgettext(self, context: MessageContext, message: MessageId) -> Template:
        """Get the translation of message within a translator-facing context.

        The context disambiguates identical source strings ("Open" the verb in
        a menu, "Open" the state of a ticket). Untranslated messages return
        message itself.
        """
        return self._catalog.pgettext(context, message)

    def ngettext(self, singular: MessageId, plural: MessageId, count: int) -> Template:
        """Get the plural form matching count.

        The form is chosen by the bound catalog's plural rule, so locales
        with more than two forms (Russian: one, few, many) get the right one.
        Untranslated messages return singular when count == 1, else plural.

        Raises:
            TypeError: If count is not an integer
        """
        return self._catalog.ngettext(singular, plural, operator.index(count))

    def npgettext(
        self, context: MessageContext, singular: MessageId, plural: MessageId, count: int
    ) -> Template:
        """Get the plural form matching count within a translator-facing context.

        Raises:
            TypeError: If count is not an integer
        """
        return self._catalog.npgettext(context, singular, plural, operator.index(count))

    def __repr__(self) -> str:
        return f"Localizer(locale={self._locale.tag}, resolved_locale={self._resolved_locale.tag})"
