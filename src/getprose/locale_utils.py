"""Locale tag helpers shared by Locale parsing and the Babel back-ends.

Tags arrive in several spellings: BCP-47 from HTTP headers and config files
("pt-PT"), POSIX from the environment ("pt_PT.UTF-8@euro"). Everything is
reduced to the bare POSIX form before it is matched or handed to Babel.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale as BabelLocale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)

# Environment variables consulted after the OS locale, highest priority first.
_LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")

# Pseudo-locales that carry no language information.
_PSEUDO_LOCALES = frozenset({"C", "POSIX", ""})


def normalize_locale(locale_code: str) -> str:
    """Reduce a locale tag to bare POSIX form.

    Hyphens become underscores; an encoding (".UTF-8") or modifier ("@euro")
    suffix and surrounding whitespace are dropped. Case is preserved.

    Example:
        >>> normalize_locale("pt-PT")
        'pt_PT'
        >>> normalize_locale("de_DE.UTF-8@euro")
        'de_DE'
    """
    bare = locale_code.strip().partition(".")[0].partition("@")[0]
    return bare.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> BabelLocale:
    """Parse a locale identifier into a Babel Locale, once per identifier.

    Args:
        locale_code: Identifier in BCP-47 or POSIX spelling, e.g. "en-GB"

    Returns:
        Babel Locale carrying the CLDR data for the identifier

    Raises:
        babel.core.UnknownLocaleError: If CLDR has no data for the identifier
        ValueError: If the identifier is not a well-formed locale tag
    """
    # Deferred: importing babel.Locale pulls in the CLDR data loader
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Drop cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def _system_locale_candidates() -> Iterator[str]:
    """Yield raw locale settings in priority order: OS locale, then environment."""
    import locale as locale_module  # noqa: PLC0415

    try:
        language_code, _ = locale_module.getlocale()
    except ValueError:
        logger.debug("OS locale is not parseable, checking environment")
    else:
        if language_code:
            yield language_code

    for name in _LOCALE_ENV_VARS:
        if value := os.environ.get(name):
            yield value


def get_system_locale(*, raise_on_failure: bool = False) -> str | None:
    """Detect the user's locale from the OS and the environment.

    Consults locale.getlocale() first, then LC_ALL, LC_MESSAGES and LANG.
    The first setting that names a real language wins; "C" and "POSIX" are
    skipped.

    Args:
        raise_on_failure: Raise instead of returning None when nothing is set

    Returns:
        Normalized POSIX tag such as "de_DE", or None

    Raises:
        RuntimeError: If raise_on_failure is set and no locale is configured
    """
    for candidate in _system_locale_candidates():
        tag = normalize_locale(candidate)
        if tag not in _PSEUDO_LOCALES:
            return tag

    if raise_on_failure:
        msg = "No system locale configured; set LC_ALL, LC_MESSAGES or LANG"
        raise RuntimeError(msg)
    return None
