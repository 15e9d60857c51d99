"""End-to-end tests: locale tag to display string.

Exercises the full data flow: parse a tag, build a registry from catalogs on
disk, look up a plural template, localize the count and format it.

Python 3.13+.
"""

from __future__ import annotations

import functools
from pathlib import Path

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from getprose import (
    BytesCatalogLoader,
    CatalogRegistry,
    FormatBuilder,
    Locale,
    PathCatalogLoader,
    format_f64,
    format_int,
)
from tests.helpers.catalogs import default_sources


@pytest.fixture
def disk_registry(tmp_path: Path) -> CatalogRegistry:
    """Registry loaded from a gettext directory tree, German as source locale."""
    for locale, data in default_sources().items():
        directory = tmp_path / locale.tag / "LC_MESSAGES"
        directory.mkdir(parents=True)
        (directory / "messages.mo").write_bytes(data)

    loader = PathCatalogLoader(
        f"{tmp_path}/{{locale}}/LC_MESSAGES", source_locales=frozenset({Locale.DE_DE})
    )
    return CatalogRegistry.build(loader, fallback=Locale.DE_DE)


@functools.cache
def _memory_registry() -> CatalogRegistry:
    """Registry over in-memory catalogs, built once for property tests."""
    loader = BytesCatalogLoader(default_sources(), source_locales=frozenset({Locale.DE_DE}))
    return CatalogRegistry.build(loader, fallback=Locale.DE_DE)


def _files_message(registry: CatalogRegistry, tag: str, count: int) -> str:
    locale = Locale.parse(tag)
    localizer = registry.localizer(locale)
    template = localizer.ngettext("{count} file", "{count} files", count)
    return FormatBuilder.of(template).arg("count", format_int(count, locale)).format()


class TestDisplayStrings:
    """Full pipeline over catalogs on disk."""

    @pytest.mark.parametrize(
        ("tag", "count", "expected"),
        [
            ("ru", 1, "1 файл"),
            ("ru_RU", 3, "3 файла"),
            ("ru", 25, "25 файлов"),
            ("fr", 0, "0 fichier"),
            ("en_GB", 1, "1 file"),
            ("de", 2, "2 files"),
            ("it", 1, "1 file"),
        ],
    )
    def test_plural_messages(
        self, disk_registry: CatalogRegistry, tag: str, count: int, expected: str
    ) -> None:
        """Plural form, number formatting and substitution combine."""
        assert _files_message(disk_registry, tag, count) == expected

    def test_grouped_count(self, disk_registry: CatalogRegistry) -> None:
        """Localized numbers are substituted as given."""
        assert _files_message(disk_registry, "de", 1234567) == "1.234.567 files"
        assert _files_message(disk_registry, "en", 1234567) == "1,234,567 files"

    def test_contextual_plural(self, disk_registry: CatalogRegistry) -> None:
        """npgettext flows through the same pipeline."""
        localizer = disk_registry.localizer(Locale.RU_RU)
        template = localizer.npgettext("download", "{count} file", "{count} files", 21)
        result = FormatBuilder.of(template).arg("count", format_int(21, Locale.RU_RU)).format()
        assert result == "Загружен 21 файл"

    def test_decimal_argument(self, disk_registry: CatalogRegistry) -> None:
        """format_f64 output is substituted verbatim."""
        localizer = disk_registry.localizer(Locale.DE_DE)
        template = localizer.gettext("{amount} EUR")
        result = (
            FormatBuilder.of(template)
            .arg("amount", format_f64(1234.5678, 2, Locale.DE_DE))
            .try_format()
        )
        assert result == "1.234,57 EUR"

    def test_missing_argument_degrades(self, disk_registry: CatalogRegistry) -> None:
        """A forgotten argument leaves the placeholder visible."""
        localizer = disk_registry.localizer(Locale.RU_RU)
        template = localizer.ngettext("{count} file", "{count} files", 5)
        assert FormatBuilder.of(template).format() == "{count} файлов"

    def test_summary_reflects_disk(self, disk_registry: CatalogRegistry) -> None:
        """Locales without files are reported as not found."""
        summary = disk_registry.load_summary
        assert summary.loaded == 3
        assert summary.empty == 1
        assert not summary.all_found

    @given(count=st.integers(min_value=0, max_value=10**9))
    def test_every_count_renders(self, count: int) -> None:
        """Russian output always carries the localized count and a noun form."""
        result = _files_message(_memory_registry(), "ru", count)
        noun = result.rpartition(" ")[2]
        event(f"noun={noun}")
        assert result.startswith(format_int(count, Locale.RU_RU))
        assert noun in {"файл", "файла", "файлов"}
