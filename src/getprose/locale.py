"""Supported locales and their external identifiers.

Locale is a closed, ordered enumeration. Each member maps to the locale
identifiers expected by the formatting back-ends (Babel number symbols and
Babel date/time patterns). The mapping table is checked for exhaustiveness
when this module is imported, so adding a member without its identifiers
makes the package fail to import instead of failing at first use.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Final

from getprose.diagnostics import ErrorTemplate, UnknownLocaleError
from getprose.locale_utils import get_system_locale

__all__ = [
    "ExternalIdentifiers",
    "Locale",
]

logger = logging.getLogger(__name__)


class Locale(IntEnum):
    """The supported locales.

    Member values are persisted and exchanged between processes by callers.
    Do NOT change the member to number mapping; doing so is a breaking change.
    New members are appended with the next free value.

    Examples:
        >>> Locale.parse("fr_FR")
        <Locale.FR_FR: 3>
        >>> Locale.parse("ru")
        <Locale.RU_RU: 6>
        >>> Locale.DE_DE.tag
        'de_DE'
        >>> str(Locale.EN_GB)
        'en_GB'
    """

    DE_DE = 0
    EN_GB = 1
    ES_ES = 2
    FR_FR = 3
    IT_IT = 4
    PT_PT = 5
    RU_RU = 6

    def __str__(self) -> str:
        return self.tag

    def __format__(self, format_spec: str) -> str:
        return format(self.tag, format_spec)

    @property
    def tag(self) -> str:
        """POSIX tag, e.g. 'de_DE'."""
        language, territory = self.name.split("_")
        return f"{language.lower()}_{territory}"

    @property
    def language(self) -> str:
        """Short code (ISO 639-1 language), e.g. 'de'."""
        return self.tag.split("_")[0]

    @property
    def territory(self) -> str:
        """ISO 3166-1 territory, e.g. 'DE'."""
        return self.tag.split("_")[1]

    @property
    def bcp47(self) -> str:
        """BCP-47 tag, e.g. 'de-DE'."""
        return self.tag.replace("_", "-")

    @classmethod
    def parse(cls, tag: str) -> Locale:
        """Parse a locale tag or short code.

        Accepts exactly the full tags ("fr_FR") and short language codes
        ("fr"). Any other spelling, including "fr-FR", "FR" or
        "fr_FR.UTF-8", is rejected; use from_system() for environment values.

        Args:
            tag: Locale tag or short code

        Returns:
            The matching Locale

        Raises:
            UnknownLocaleError: If the tag matches no supported Locale
            TypeError: If tag is not a string
        """
        if not isinstance(tag, str):
            msg = f"Locale tag must be str, got {type(tag).__name__}"
            raise TypeError(msg)

        locale = _PARSE_TABLE.get(tag)
        if locale is None:
            diagnostic = ErrorTemplate.unknown_locale(tag, (m.tag for m in cls))
            raise UnknownLocaleError(diagnostic, tag=tag)
        return locale

    @classmethod
    def from_system(cls, default: Locale | None = None) -> Locale | None:
        """Map the operating system locale onto a supported Locale.

        Tries the exact tag first ("de_DE"), then its language ("de_AT"
        resolves to DE_DE).

        Args:
            default: Returned when the system locale is unset or unsupported

        Returns:
            The matching Locale, or default
        """
        detected = get_system_locale()
        if detected is None:
            return default

        for candidate in (detected, detected.split("_")[0]):
            locale = _SYSTEM_TABLE.get(candidate.casefold())
            if locale is not None:
                return locale

        logger.warning(
            "System locale '%s' is not supported, using %s",
            detected,
            default.tag if default is not None else "no default",
        )
        return default

    def to_external_identifier(self) -> ExternalIdentifiers:
        """Identifiers of this locale for the formatting back-ends."""
        return _EXTERNAL_IDENTIFIERS[self]


@dataclass(frozen=True, slots=True)
class ExternalIdentifiers:
    """Back-end identifiers for one Locale.

    Attributes:
        numbers: Babel locale identifier for number symbols and grouping
        dates: Babel locale identifier for date and time patterns
    """

    numbers: str
    dates: str


_EXTERNAL_IDENTIFIERS: Final[Mapping[Locale, ExternalIdentifiers]] = MappingProxyType({
    Locale.DE_DE: ExternalIdentifiers(numbers="de", dates="de_DE"),
    Locale.EN_GB: ExternalIdentifiers(numbers="en_GB", dates="en_GB"),
    Locale.ES_ES: ExternalIdentifiers(numbers="es", dates="es_ES"),
    Locale.FR_FR: ExternalIdentifiers(numbers="fr", dates="fr_FR"),
    Locale.IT_IT: ExternalIdentifiers(numbers="it", dates="it_IT"),
    Locale.PT_PT: ExternalIdentifiers(numbers="pt", dates="pt_PT"),
    Locale.RU_RU: ExternalIdentifiers(numbers="ru", dates="ru_RU"),
})


def _check_exhaustive(table: Mapping[Locale, object], name: str) -> None:
    """Fail the import if table lacks an entry for any Locale member."""
    missing = [member.tag for member in Locale if member not in table]
    if missing:
        msg = f"{name} has no entry for: {', '.join(missing)}"
        raise RuntimeError(msg)


_check_exhaustive(_EXTERNAL_IDENTIFIERS, "_EXTERNAL_IDENTIFIERS")

# exact tag or short code -> Locale
_PARSE_TABLE: Final[Mapping[str, Locale]] = MappingProxyType(
    {member.tag: member for member in Locale}
    | {member.language: member for member in Locale}
)

# casefolded keys of _PARSE_TABLE, for environment values like "DE_de"
_SYSTEM_TABLE: Final[Mapping[str, Locale]] = MappingProxyType(
    {key.casefold(): member for key, member in _PARSE_TABLE.items()}
)
