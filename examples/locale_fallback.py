"""CatalogRegistry Example - Fallback and Catalog Loading.

Demonstrates how the registry handles incomplete translation coverage and
how loaders report missing versus corrupt catalogs.

Scenarios covered:
1. Embedded catalogs with a translated fallback locale
2. Picking the user's locale from the operating system
3. Custom loader functions
4. Corrupt catalogs abort registry construction

Python 3.13+.
"""

from __future__ import annotations

import io
import logging

from babel.messages.catalog import Catalog as MessageCatalog
from babel.messages.mofile import write_mo

from getprose import (
    BytesCatalogLoader,
    Catalog,
    CatalogLoadError,
    CatalogRegistry,
    Locale,
    MissingFallbackError,
)
from getprose.localization import empty_catalog


def compile_catalog(language: str, messages: dict[str, str]) -> bytes:
    """Compile simple gettext messages into .mo bytes."""
    catalog = MessageCatalog(locale=language, fuzzy=False)
    for msgid, msgstr in messages.items():
        catalog.add(msgid, msgstr)
    buffer = io.BytesIO()
    write_mo(buffer, catalog)
    return buffer.getvalue()


def example_1_translated_fallback() -> None:
    """Locales without a catalog are served by the fallback's translations."""
    print("=" * 60)
    print("Example 1: Translated Fallback")
    print("=" * 60)

    loader = BytesCatalogLoader({
        Locale.DE_DE: compile_catalog("de", {"Cart": "Warenkorb", "Checkout": "Zur Kasse"}),
        Locale.FR_FR: compile_catalog("fr", {"Cart": "Panier"}),
    })
    registry = CatalogRegistry.build(loader, fallback=Locale.DE_DE)

    for locale in (Locale.DE_DE, Locale.FR_FR, Locale.IT_IT):
        localizer = registry.localizer(locale)
        print(
            f"{locale} (served by {localizer.resolved_locale}): "
            f"{localizer.gettext('Cart')} / {localizer.gettext('Checkout')}"
        )
    # FR_FR has its own catalog: "Checkout" stays untranslated, no per-key fallback
    print(registry.load_summary)


def example_2_system_locale() -> None:
    """Map the OS locale onto a supported Locale."""
    print("\n" + "=" * 60)
    print("Example 2: System Locale")
    print("=" * 60)

    locale = Locale.from_system(default=Locale.EN_GB)
    print(f"Using {locale} ({locale.bcp47})")


def example_3_custom_loader() -> None:
    """Any callable returning a Catalog or None works as a loader."""
    print("\n" + "=" * 60)
    print("Example 3: Custom Loader")
    print("=" * 60)

    def loader(locale: Locale) -> Catalog | None:
        # Source strings are English; every other locale is not shipped yet
        return empty_catalog() if locale is Locale.EN_GB else None

    registry = CatalogRegistry.build(loader, fallback=Locale.EN_GB)
    print(registry)

    try:
        CatalogRegistry.build(loader, fallback=Locale.RU_RU)
    except MissingFallbackError as e:
        print(e)


def example_4_corrupt_catalog() -> None:
    """Corrupt data is an error, never an empty catalog."""
    print("\n" + "=" * 60)
    print("Example 4: Corrupt Catalog")
    print("=" * 60)

    loader = BytesCatalogLoader(
        {Locale.RU_RU: b"definitely not a catalog"},
        source_locales=frozenset({Locale.EN_GB}),
    )
    try:
        CatalogRegistry.build(loader, fallback=Locale.EN_GB)
    except CatalogLoadError as e:
        print(e)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    example_1_translated_fallback()
    example_2_system_locale()
    example_3_custom_loader()
    example_4_corrupt_catalog()
