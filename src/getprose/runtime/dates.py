"""Locale-aware date and time formatting.

Thin layer over Babel that resolves each Locale to its date/time identifier,
so call sites format dates with the same Locale value they use for message
lookups and numbers.

Python 3.13+. Uses Babel for CLDR date patterns.
"""

from __future__ import annotations

from datetime import date, datetime, time, tzinfo
from typing import TYPE_CHECKING, Literal

from babel import dates as babel_dates

from getprose.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from babel import Locale as BabelLocale

    from getprose.locale import Locale

__all__ = [
    "DateStyle",
    "format_date",
    "format_datetime",
    "format_time",
]

type DateStyle = Literal["short", "medium", "long", "full"]


def _babel_locale(locale: Locale) -> BabelLocale:
    return get_babel_locale(locale.to_external_identifier().dates)


def format_date(
    value: date | datetime,
    locale: Locale,
    *,
    style: DateStyle = "medium",
    pattern: str | None = None,
) -> str:
    """Format a date with the CLDR patterns of locale.

    Args:
        value: Date (the date part of a datetime)
        locale: Target locale
        style: CLDR date style
        pattern: Custom CLDR pattern (overrides style)

    Examples:
        >>> format_date(date(2024, 3, 5), Locale.DE_DE)
        '05.03.2024'
        >>> format_date(date(2024, 3, 5), Locale.FR_FR, pattern="d MMMM")
        '5 mars'
    """
    return str(babel_dates.format_date(value, format=pattern or style, locale=_babel_locale(locale)))


def format_time(
    value: time | datetime,
    locale: Locale,
    *,
    style: DateStyle = "medium",
    pattern: str | None = None,
    tz: tzinfo | None = None,
) -> str:
    """Format a time of day with the CLDR patterns of locale.

    Args:
        value: Time (the time part of a datetime)
        locale: Target locale
        style: CLDR time style
        pattern: Custom CLDR pattern (overrides style)
        tz: Time zone to convert aware datetimes to before formatting
    """
    return str(
        babel_dates.format_time(
            value, format=pattern or style, tzinfo=tz, locale=_babel_locale(locale)
        )
    )


def format_datetime(
    value: datetime,
    locale: Locale,
    *,
    style: DateStyle = "medium",
    pattern: str | None = None,
    tz: tzinfo | None = None,
) -> str:
    """Format a date and time with the CLDR patterns of locale.

    Uses the locale's own date-time combination pattern (date before time
    in most European locales).

    Args:
        value: Datetime to format
        locale: Target locale
        style: CLDR style for both parts
        pattern: Custom CLDR pattern (overrides style)
        tz: Time zone to convert aware datetimes to before formatting
    """
    return str(
        babel_dates.format_datetime(
            value, format=pattern or style, tzinfo=tz, locale=_babel_locale(locale)
        )
    )
