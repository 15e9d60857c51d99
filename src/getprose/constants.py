"""Shared constants for getprose.

This module provides centralized configuration constants used across the
localization and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Catalog loading: default gettext domain and on-disk layout
- Number formatting: precision bounds and non-finite renderings
- Cache limits: memory bounds for cached locale data
- Template syntax: placeholder delimiters

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Catalog loading
    "DEFAULT_DOMAIN",
    "DEFAULT_CATALOG_PATH",
    "MO_SUFFIX",
    # Number formatting
    "MAX_PRECISION",
    "MINUS_SIGN",
    "NAN_SYMBOL",
    "INFINITY_SYMBOL",
    # Cache limits
    "MAX_PROFILE_CACHE_SIZE",
    "MAX_TEMPLATE_CACHE_SIZE",
    # Template syntax
    "PLACEHOLDER_OPEN",
    "PLACEHOLDER_CLOSE",
]

# ============================================================================
# CATALOG LOADING
# ============================================================================

# gettext domain, i.e. the .mo file stem ("messages.mo").
DEFAULT_DOMAIN: str = "messages"

# Standard GNU gettext directory layout. {locale} is replaced with the
# locale tag (e.g. "de_DE").
DEFAULT_CATALOG_PATH: str = "locales/{locale}/LC_MESSAGES"

MO_SUFFIX: str = ".mo"

# ============================================================================
# NUMBER FORMATTING
# ============================================================================

# Upper bound for format_f64 precision (fits an unsigned byte).
MAX_PRECISION: int = 255

# Negative numbers always use ASCII hyphen-minus, independent of the CLDR
# minus sign of the locale.
MINUS_SIGN: str = "-"

# CLDR root symbols, used for every locale.
NAN_SYMBOL: str = "NaN"
INFINITY_SYMBOL: str = "∞"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached NumberProfile instances. The Locale set is closed, so this
# only bounds lookups made with raw Babel identifiers.
MAX_PROFILE_CACHE_SIZE: int = 64

# Maximum cached parsed templates. A typical UI has fewer distinct
# translated strings than this.
MAX_TEMPLATE_CACHE_SIZE: int = 1024

# ============================================================================
# TEMPLATE SYNTAX
# ============================================================================

# {name} placeholders; doubled delimiters ({{ and }}) are literal braces.
PLACEHOLDER_OPEN: str = "{"
PLACEHOLDER_CLOSE: str = "}"
