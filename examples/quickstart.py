"""Quickstart example for getprose.

This example demonstrates the full lookup flow: compile catalogs into a
gettext directory tree, build a registry, look up messages and format them
with localized numbers.

Note: Catalogs are compiled on the fly with Babel for a self-contained demo.
Real applications ship .mo files produced by `pybabel compile`.
"""

import tempfile
from datetime import date
from pathlib import Path

from babel.messages.catalog import Catalog as MessageCatalog
from babel.messages.mofile import write_mo

from getprose import (
    CatalogRegistry,
    FormatBuilder,
    FormatError,
    Locale,
    PathCatalogLoader,
    format_date,
    format_f64,
    format_int,
)


def write_catalog(root: Path, locale: Locale, language: str, entries: list) -> None:
    """Compile entries into <root>/<tag>/LC_MESSAGES/messages.mo."""
    catalog = MessageCatalog(locale=language, fuzzy=False)
    for msgid, msgstr, context in entries:
        catalog.add(msgid, msgstr, context=context)
    directory = root / locale.tag / "LC_MESSAGES"
    directory.mkdir(parents=True)
    with (directory / "messages.mo").open("wb") as fp:
        write_mo(fp, catalog)


with tempfile.TemporaryDirectory() as tmpdir:
    root = Path(tmpdir)
    write_catalog(root, Locale.RU_RU, "ru", [
        ("Save", "Сохранить", None),
        ("Open", "Открыть", "menu"),
        (("{count} file", "{count} files"),
         ("{count} файл", "{count} файла", "{count} файлов"), None),
    ])
    write_catalog(root, Locale.FR_FR, "fr", [
        ("Save", "Enregistrer", None),
        (("{count} file", "{count} files"), ("{count} fichier", "{count} fichiers"), None),
    ])

    # English source strings: EN_GB needs no catalog file
    loader = PathCatalogLoader(
        f"{root}/{{locale}}/LC_MESSAGES",
        source_locales=frozenset({Locale.EN_GB}),
    )
    registry = CatalogRegistry.build(loader, fallback=Locale.EN_GB)

    # Example 1: Simple lookups
    print("=" * 50)
    print("Example 1: gettext and pgettext")
    print("=" * 50)

    ru = registry.localizer(Locale.parse("ru"))
    print(ru.gettext("Save"))
    # Output: Сохранить
    print(ru.pgettext("menu", "Open"))
    # Output: Открыть
    print(ru.gettext("Quit"))
    # Output: Quit (untranslated keys come back unchanged)

    # Example 2: Plurals with localized counts
    print("\n" + "=" * 50)
    print("Example 2: ngettext with three Russian forms")
    print("=" * 50)

    for n in (1, 3, 5, 21, 1500):
        template = ru.ngettext("{count} file", "{count} files", n)
        print(FormatBuilder.of(template).arg("count", format_int(n, ru.locale)).format())
    # Output: 1 файл, 3 файла, 5 файлов, 21 файл, 1 500 файлов

    # Example 3: Fallback
    print("\n" + "=" * 50)
    print("Example 3: Locales without a catalog")
    print("=" * 50)

    es = registry.localizer(Locale.ES_ES)
    print(f"{es.locale} resolves to {es.resolved_locale}: {es.gettext('Save')}")
    # Output: es_ES resolves to en_GB: Save
    print(registry.load_summary)

    # Example 4: Numbers and dates
    print("\n" + "=" * 50)
    print("Example 4: Numbers and dates")
    print("=" * 50)

    for locale in (Locale.DE_DE, Locale.EN_GB, Locale.FR_FR):
        print(
            f"{locale}: {format_f64(1234567.891, 2, locale)}"
            f"  {format_date(date(2024, 3, 5), locale, style='long')}"
        )

    # Example 5: Strict formatting
    print("\n" + "=" * 50)
    print("Example 5: format() versus try_format()")
    print("=" * 50)

    builder = FormatBuilder.of("{count} of {total}").arg("count", "3")
    print(builder.format())
    # Output: 3 of {total}
    try:
        builder.try_format()
    except FormatError as e:
        print(f"Missing: {e.missing}")
        # Output: Missing: ('total',)
