"""Tests for DiagnosticFormatter output styles.

Python 3.13+.
"""

import json

import pytest

from getprose.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
)


@pytest.fixture
def diagnostic() -> Diagnostic:
    """Catalog failure with every optional field populated."""
    return ErrorTemplate.catalog_load_failed(
        "ru_RU", "Bad magic number", "locales/ru_RU/LC_MESSAGES/messages.mo"
    )


class TestBlockFormat:
    """Default multi-line output."""

    def test_all_fields(self, diagnostic: Diagnostic) -> None:
        """Header, path, locale and hint lines in order."""
        lines = DiagnosticFormatter().format(diagnostic).splitlines()
        assert lines == [
            "error[CATALOG_LOAD_FAILED]: Catalog for 'ru_RU' could not be parsed: Bad magic number",
            "  --> locales/ru_RU/LC_MESSAGES/messages.mo",
            "  = locale: ru_RU",
            "  = help: Recompile the catalog from its .po source",
        ]

    def test_optional_fields_omitted(self) -> None:
        """A bare diagnostic renders as a single line."""
        diagnostic = Diagnostic(code=DiagnosticCode.TEMPLATE_MALFORMED, message="bad")
        assert DiagnosticFormatter().format(diagnostic) == "error[TEMPLATE_MALFORMED]: bad"

    def test_warning_severity(self) -> None:
        """Severity prefixes the header."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_UNBOUND, message="x", severity="warning"
        )
        assert DiagnosticFormatter().format(diagnostic).startswith("warning[")

    def test_unknown_locale_without_known_tags_has_no_help(self) -> None:
        """With no supported tags listed, no help line is rendered."""
        rendered = DiagnosticFormatter().format(ErrorTemplate.unknown_locale("xx"))
        assert rendered == "error[UNKNOWN_LOCALE]: Unknown locale 'xx'"

    def test_missing_fallback_has_no_path_line(self) -> None:
        """MISSING_FALLBACK names the locale but no catalog path."""
        lines = ErrorTemplate.missing_fallback("en_GB").format_error().splitlines()
        assert lines == [
            "error[MISSING_FALLBACK]: No catalog for fallback locale 'en_GB'",
            "  = locale: en_GB",
            "  = help: Ship a catalog for the fallback locale or mark it as a source locale",
        ]

    def test_format_error_delegates(self, diagnostic: Diagnostic) -> None:
        """Diagnostic.format_error() matches the default formatter."""
        assert diagnostic.format_error() == DiagnosticFormatter().format(diagnostic)


class TestOtherFormats:
    """Line and JSON output."""

    def test_line(self, diagnostic: Diagnostic) -> None:
        """Single line with code name and message."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.LINE)
        assert formatter.format(diagnostic) == (
            "CATALOG_LOAD_FAILED: Catalog for 'ru_RU' could not be parsed: Bad magic number"
        )

    def test_json(self, diagnostic: Diagnostic) -> None:
        """JSON carries code name, value and optional fields."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(diagnostic))
        assert data == {
            "code": "CATALOG_LOAD_FAILED",
            "code_value": 2002,
            "message": "Catalog for 'ru_RU' could not be parsed: Bad magic number",
            "severity": "error",
            "locale": "ru_RU",
            "source_path": "locales/ru_RU/LC_MESSAGES/messages.mo",
            "hint": "Recompile the catalog from its .po source",
        }

    def test_json_keeps_non_ascii(self) -> None:
        """Non-ASCII text is not escaped."""
        diagnostic = ErrorTemplate.unknown_locale("рус")
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        assert "рус" in formatter.format(diagnostic)

    def test_format_all(self) -> None:
        """Diagnostics are separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.LINE)
        first = ErrorTemplate.unknown_locale("a")
        second = ErrorTemplate.unknown_locale("b")
        assert formatter.format_all([first, second]) == (
            "UNKNOWN_LOCALE: Unknown locale 'a'\n\nUNKNOWN_LOCALE: Unknown locale 'b'"
        )


class TestTruncation:
    """Truncation of long content."""

    def test_long_message_truncated(self) -> None:
        """Messages beyond max_length are cut and marked."""
        diagnostic = Diagnostic(code=DiagnosticCode.TEMPLATE_MALFORMED, message="x" * 50)
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.LINE, max_length=10
        )
        assert formatter.format(diagnostic) == "TEMPLATE_MALFORMED: " + "x" * 10 + "..."

    def test_short_message_untouched(self) -> None:
        """Messages within the limit are unchanged."""
        diagnostic = Diagnostic(code=DiagnosticCode.TEMPLATE_MALFORMED, message="short")
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.LINE, max_length=10
        )
        assert formatter.format(diagnostic) == "TEMPLATE_MALFORMED: short"
