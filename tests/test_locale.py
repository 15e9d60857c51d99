"""Tests for the Locale enumeration.

Covers ordinals, tag properties, parse() over every accepted spelling,
rejection of unknown tags, from_system() mapping and the external identifier
table.

Python 3.13+.
"""

import os
from unittest.mock import patch

import pytest
from hypothesis import event, given

from getprose import ExternalIdentifiers, Locale, UnknownLocaleError
from getprose.diagnostics import DiagnosticCode
from tests.strategies import (
    locale_tag_spellings,
    locales,
    rejected_tag_spellings,
    unknown_locale_tags,
)


class TestLocaleMembers:
    """Member order and numeric values are persisted by callers."""

    def test_ordinals_are_stable(self) -> None:
        """Each member keeps its published value."""
        assert [(m.name, m.value) for m in Locale] == [
            ("DE_DE", 0),
            ("EN_GB", 1),
            ("ES_ES", 2),
            ("FR_FR", 3),
            ("IT_IT", 4),
            ("PT_PT", 5),
            ("RU_RU", 6),
        ]

    def test_members_are_ordered(self) -> None:
        """Locale compares by its ordinal."""
        assert sorted(Locale) == list(Locale)
        assert Locale.DE_DE < Locale.RU_RU

    def test_tag_properties(self) -> None:
        """tag, language, territory and bcp47 derive from the member name."""
        locale = Locale.PT_PT
        assert locale.tag == "pt_PT"
        assert locale.language == "pt"
        assert locale.territory == "PT"
        assert locale.bcp47 == "pt-PT"

    def test_str_and_format_use_tag(self) -> None:
        """str() and f-strings render the POSIX tag."""
        assert str(Locale.EN_GB) == "en_GB"
        assert f"{Locale.FR_FR}" == "fr_FR"
        assert f"[{Locale.IT_IT:>6}]" == "[ it_IT]"


class TestLocaleParse:
    """Test Locale.parse over full tags and short codes."""

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("de_DE", Locale.DE_DE),
            ("de", Locale.DE_DE),
            ("en_GB", Locale.EN_GB),
            ("en", Locale.EN_GB),
            ("es_ES", Locale.ES_ES),
            ("es", Locale.ES_ES),
            ("fr_FR", Locale.FR_FR),
            ("fr", Locale.FR_FR),
            ("it_IT", Locale.IT_IT),
            ("it", Locale.IT_IT),
            ("pt_PT", Locale.PT_PT),
            ("pt", Locale.PT_PT),
            ("ru_RU", Locale.RU_RU),
            ("ru", Locale.RU_RU),
        ],
    )
    def test_full_tags_and_short_codes(self, tag: str, expected: Locale) -> None:
        """Every full tag and short code maps to its member."""
        assert Locale.parse(tag) is expected

    @pytest.mark.parametrize(
        "tag",
        ["fr-FR", "DE", "RU_ru", " fr ", "it_IT.UTF-8", "pt-PT", "de@euro", "en_gb"],
    )
    def test_variant_spellings_rejected(self, tag: str) -> None:
        """Only the exact tag or short code parses; variant spellings do not."""
        with pytest.raises(UnknownLocaleError) as exc_info:
            Locale.parse(tag)
        assert exc_info.value.tag == tag

    @given(spelling=rejected_tag_spellings())
    def test_near_miss_spellings_rejected(self, spelling: str) -> None:
        """Reformatted spellings of supported tags raise UnknownLocaleError."""
        with pytest.raises(UnknownLocaleError):
            Locale.parse(spelling)

    @given(spelling=locale_tag_spellings())
    def test_every_spelling_parses(self, spelling: tuple[str, Locale]) -> None:
        """Full tags and short codes parse back to their member."""
        tag, expected = spelling
        assert Locale.parse(tag) is expected

    @given(locale=locales)
    def test_tag_roundtrip(self, locale: Locale) -> None:
        """parse(locale.tag) is the identity."""
        event(f"locale={locale.tag}")
        assert Locale.parse(locale.tag) is locale

    @given(tag=unknown_locale_tags)
    def test_unknown_tags_rejected(self, tag: str) -> None:
        """Tags of unsupported locales raise UnknownLocaleError."""
        with pytest.raises(UnknownLocaleError) as exc_info:
            Locale.parse(tag)
        assert exc_info.value.tag == tag

    def test_unknown_tag_error_details(self) -> None:
        """The error carries the tag as received and a diagnostic with a hint."""
        with pytest.raises(UnknownLocaleError) as exc_info:
            Locale.parse("en_US")

        error = exc_info.value
        assert error.tag == "en_US"
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.UNKNOWN_LOCALE
        assert "'en_US'" in str(error)
        assert error.diagnostic.hint is not None
        assert "ru_RU" in error.diagnostic.hint

    def test_unknown_locale_error_is_value_error(self) -> None:
        """Callers validating input can catch ValueError."""
        with pytest.raises(ValueError, match="Unknown locale"):
            Locale.parse("xx")

    def test_non_string_rejected(self) -> None:
        """Non-string input raises TypeError."""
        with pytest.raises(TypeError, match="must be str"):
            Locale.parse(3)  # type: ignore[arg-type]


class TestLocaleFromSystem:
    """Test Locale.from_system mapping of the OS locale."""

    def test_exact_tag(self) -> None:
        """A supported system locale maps to its member."""
        with patch("getprose.locale.get_system_locale", return_value="ru_RU"):
            assert Locale.from_system() is Locale.RU_RU

    def test_language_match(self) -> None:
        """Regional variants resolve through their language."""
        with patch("getprose.locale.get_system_locale", return_value="de_AT"):
            assert Locale.from_system() is Locale.DE_DE

    def test_unsupported_returns_default(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unsupported system locales return default and log a warning."""
        with (
            patch("getprose.locale.get_system_locale", return_value="ja_JP"),
            caplog.at_level("WARNING", logger="getprose.locale"),
        ):
            assert Locale.from_system(default=Locale.EN_GB) is Locale.EN_GB
        assert "ja_JP" in caplog.text
        assert "using en_GB" in caplog.text

    def test_unsupported_without_default_logs_neutral_text(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """The warning says 'no default' rather than printing None."""
        with (
            patch("getprose.locale.get_system_locale", return_value="ja_JP"),
            caplog.at_level("WARNING", logger="getprose.locale"),
        ):
            assert Locale.from_system() is None
        assert "no default" in caplog.text
        assert "None" not in caplog.text

    def test_environment_spellings_matched_leniently(self) -> None:
        """Case differences in environment values still resolve."""
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {"LANG": "RU_ru.UTF-8"}, clear=True),
        ):
            assert Locale.from_system() is Locale.RU_RU

    def test_undetected_returns_default(self) -> None:
        """No detectable system locale returns default."""
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {}, clear=True),
        ):
            assert Locale.from_system() is None
            assert Locale.from_system(Locale.FR_FR) is Locale.FR_FR


class TestExternalIdentifiers:
    """Test to_external_identifier table."""

    @given(locale=locales)
    def test_mapping_is_total(self, locale: Locale) -> None:
        """Every member has identifiers."""
        identifiers = locale.to_external_identifier()
        assert isinstance(identifiers, ExternalIdentifiers)
        assert identifiers.numbers
        assert identifiers.dates == locale.tag

    @pytest.mark.parametrize(
        ("locale", "numbers"),
        [
            (Locale.DE_DE, "de"),
            (Locale.EN_GB, "en_GB"),
            (Locale.ES_ES, "es"),
            (Locale.FR_FR, "fr"),
            (Locale.IT_IT, "it"),
            (Locale.PT_PT, "pt"),
            (Locale.RU_RU, "ru"),
        ],
    )
    def test_number_identifiers(self, locale: Locale, numbers: str) -> None:
        """Number identifiers select the CLDR number data."""
        assert locale.to_external_identifier().numbers == numbers

    def test_identifiers_are_immutable(self) -> None:
        """ExternalIdentifiers is frozen."""
        identifiers = Locale.DE_DE.to_external_identifier()
        with pytest.raises(AttributeError):
            identifiers.numbers = "en"  # type: ignore[misc]

    def test_exhaustiveness_check_rejects_partial_table(self) -> None:
        """The import-time check names locales without an entry."""
        from getprose.locale import _check_exhaustive  # noqa: PLC0415

        with pytest.raises(RuntimeError, match="ru_RU"):
            _check_exhaustive({m: None for m in Locale if m is not Locale.RU_RU}, "table")
