"""Factories for every Diagnostic getprose raises.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Builds the Diagnostic for each failure; exceptions never format text."""

    @staticmethod
    def unknown_locale(tag: str, known: Iterable[str] = ()) -> Diagnostic:
        """Locale tag matches no supported locale.

        Args:
            tag: The tag as received from the caller
            known: Supported tags, listed in the hint

        Returns:
            Diagnostic for UNKNOWN_LOCALE
        """
        known_tags = ", ".join(known)
        hint = f"Use one of: {known_tags}" if known_tags else None
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LOCALE,
            message=f"Unknown locale {tag!r}",
            hint=hint,
        )

    @staticmethod
    def missing_fallback(locale: str) -> Diagnostic:
        """Registry built without a catalog for its fallback locale."""
        return Diagnostic(
            code=DiagnosticCode.MISSING_FALLBACK,
            message=f"No catalog for fallback locale '{locale}'",
            hint="Ship a catalog for the fallback locale or mark it as a source locale",
            locale=locale,
        )

    @staticmethod
    def catalog_load_failed(
        locale: str, reason: str, source_path: str | None = None
    ) -> Diagnostic:
        """Catalog data exists but could not be parsed.

        Args:
            locale: Tag of the locale whose catalog failed
            reason: Underlying parser error text
            source_path: Human-readable catalog location, if known

        Returns:
            Diagnostic for CATALOG_LOAD_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.CATALOG_LOAD_FAILED,
            message=f"Catalog for '{locale}' could not be parsed: {reason}",
            hint="Recompile the catalog from its .po source",
            locale=locale,
            source_path=source_path,
        )

    @staticmethod
    def placeholder_unbound(names: Iterable[str]) -> Diagnostic:
        """Placeholders left without an argument, named in template order."""
        listed = ", ".join(f"{{{name}}}" for name in names)
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_UNBOUND,
            message=f"Unbound placeholder(s): {listed}",
            hint="Supply every placeholder with arg() or args() before formatting",
        )

    @staticmethod
    def template_malformed(template: str, position: int, reason: str) -> Diagnostic:
        """Template contains unbalanced or empty braces.

        Args:
            template: The offending template
            position: Character offset of the problem
            reason: Short description of the problem

        Returns:
            Diagnostic for TEMPLATE_MALFORMED
        """
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_MALFORMED,
            message=f"Malformed template {template!r} at offset {position}: {reason}",
            hint="Write literal braces as '{{' and '}}'",
        )
