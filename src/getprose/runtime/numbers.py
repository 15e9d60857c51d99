"""Locale-aware integer and fixed-precision number formatting.

Numbers are rendered from a NumberProfile: the decimal symbol, group symbol
and grouping widths of a locale, taken from Babel's CLDR data. The core only
consumes these values; it does not define them.

Rounding Semantics:
    format_f64 rounds the exact value of its input (for floats: the exact
    binary value) half away from zero at the requested precision, so 0.005
    becomes 0.01 and -0.005 becomes -0.01. A negative value that rounds to
    zero loses its sign: -0.001 at precision 2 is "0.00", never "-0.00".

Non-finite Input:
    NaN renders as "NaN", infinities as "∞" / "-∞", for every locale.

Python 3.13+. Uses Babel for CLDR number symbols.
"""

from __future__ import annotations

import functools
import logging
import operator
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import TYPE_CHECKING, SupportsIndex

from babel import numbers as babel_numbers

from getprose.constants import (
    INFINITY_SYMBOL,
    MAX_PRECISION,
    MAX_PROFILE_CACHE_SIZE,
    MINUS_SIGN,
    NAN_SYMBOL,
)
from getprose.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from getprose.locale import Locale

__all__ = [
    "NumberProfile",
    "format_f64",
    "format_int",
    "get_number_profile",
    "number_profile",
]

logger = logging.getLogger(__name__)

# Default CLDR grouping (thousands) when a locale pattern carries none.
_DEFAULT_GROUPING = 3


@dataclass(frozen=True, slots=True)
class NumberProfile:
    """Numeric symbols and digit grouping of a locale.

    Attributes:
        decimal_symbol: Separator between integer and fractional digits
        group_symbol: Separator between digit groups of the integer part
        primary_grouping: Size of the rightmost digit group
        secondary_grouping: Size of every further group (differs from the
            primary size in e.g. Indian numbering: 12,34,567)
    """

    decimal_symbol: str
    group_symbol: str
    primary_grouping: int = _DEFAULT_GROUPING
    secondary_grouping: int = _DEFAULT_GROUPING

    def group(self, digits: str) -> str:
        """Insert group symbols into a run of integer digits.

        Example:
            >>> NumberProfile(",", ".").group("1234567")
            '1.234.567'
        """
        if self.primary_grouping <= 0 or len(digits) <= self.primary_grouping:
            return digits

        groups = [digits[-self.primary_grouping :]]
        head = digits[: -self.primary_grouping]
        secondary = self.secondary_grouping if self.secondary_grouping > 0 else len(head)
        while len(head) > secondary:
            groups.append(head[-secondary:])
            head = head[:-secondary]
        groups.append(head)
        return self.group_symbol.join(reversed(groups))


@functools.lru_cache(maxsize=MAX_PROFILE_CACHE_SIZE)
def get_number_profile(identifier: str) -> NumberProfile:
    """Build the NumberProfile for a Babel locale identifier.

    Cached: CLDR data does not change while the process runs.

    Args:
        identifier: Babel locale identifier, e.g. 'de' or 'en_GB'

    Returns:
        NumberProfile from CLDR data

    Raises:
        babel.core.UnknownLocaleError: If identifier is not a CLDR locale
    """
    babel_locale = get_babel_locale(identifier)
    pattern = babel_locale.decimal_formats.get(None)
    primary, secondary = (
        pattern.grouping if pattern is not None else (_DEFAULT_GROUPING, _DEFAULT_GROUPING)
    )
    profile = NumberProfile(
        decimal_symbol=babel_numbers.get_decimal_symbol(babel_locale),
        group_symbol=babel_numbers.get_group_symbol(babel_locale),
        primary_grouping=primary,
        secondary_grouping=secondary,
    )
    logger.debug("Number profile for %s: %r", identifier, profile)
    return profile


def number_profile(locale: Locale) -> NumberProfile:
    """NumberProfile of a supported Locale."""
    return get_number_profile(locale.to_external_identifier().numbers)


def format_int(n: SupportsIndex, locale: Locale) -> str:
    """Format an integer with the digit grouping of locale.

    Args:
        n: Integer (any object supporting __index__, except bool)
        locale: Target locale

    Returns:
        Grouped integer, e.g. '1.234.567' for German

    Raises:
        TypeError: If n is not an integer

    Examples:
        >>> format_int(1234567, Locale.DE_DE)
        '1.234.567'
        >>> format_int(-1234, Locale.EN_GB)
        '-1,234'
    """
    if isinstance(n, bool):
        msg = "format_int() does not accept bool"
        raise TypeError(msg)
    value = operator.index(n)

    digits = number_profile(locale).group(str(abs(value)))
    return f"{MINUS_SIGN}{digits}" if value < 0 else digits


def format_f64(value: int | float | Decimal, precision: int, locale: Locale) -> str:
    """Format a number with exactly precision fractional digits.

    Rounds half away from zero, then renders the integer part grouped and
    the fractional part with the decimal symbol of locale. Precision 0 gives
    no decimal symbol.

    Args:
        value: Number to format
        precision: Fractional digits, 0 to MAX_PRECISION
        locale: Target locale

    Returns:
        Formatted number

    Raises:
        TypeError: If value is not int, float or Decimal
        ValueError: If precision is out of range

    Examples:
        >>> format_f64(1234, 5, Locale.DE_DE)
        '1.234,00000'
        >>> format_f64(0.005, 2, Locale.DE_DE)
        '0,01'
        >>> format_f64(-0.001, 2, Locale.DE_DE)
        '0,00'
    """
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
        msg = f"format_f64() expects int, float or Decimal, got {type(value).__name__}"
        raise TypeError(msg)
    precision = operator.index(precision)
    if not 0 <= precision <= MAX_PRECISION:
        msg = f"precision must be between 0 and {MAX_PRECISION}, got {precision}"
        raise ValueError(msg)

    number = value if isinstance(value, Decimal) else Decimal(value)
    if not number.is_finite():
        return _format_non_finite(number)

    rounded = _round_half_away_from_zero(number, precision)
    # Zero after rounding never carries a sign
    sign = MINUS_SIGN if rounded.is_signed() and not rounded.is_zero() else ""
    integer_digits, _, fraction_digits = f"{rounded.copy_abs():f}".partition(".")

    profile = number_profile(locale)
    text = profile.group(integer_digits)
    if precision:
        text = f"{text}{profile.decimal_symbol}{fraction_digits}"
    return f"{sign}{text}"


def _round_half_away_from_zero(number: Decimal, precision: int) -> Decimal:
    """Quantize to precision fractional digits (Decimal ROUND_HALF_UP)."""
    # Enough significant digits for every integer digit plus the fraction
    integer_digits = max(number.adjusted() + 1, 1)
    context = Context(prec=integer_digits + precision + 1, rounding=ROUND_HALF_UP)
    return number.quantize(Decimal(1).scaleb(-precision), context=context)


def _format_non_finite(number: Decimal) -> str:
    if number.is_nan():
        return NAN_SYMBOL
    return f"{MINUS_SIGN}{INFINITY_SYMBOL}" if number.is_signed() else INFINITY_SYMBOL
