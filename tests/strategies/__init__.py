"""Hypothesis strategies for getprose property-based testing.

Strategies are organized by domain:

- localization: Locale members, tag spellings, placeholder templates
- numbers: format_int / format_f64 inputs and precisions

Usage:
    from tests.strategies import locales, templates
    from tests.strategies.numbers import finite_values, precisions
"""

from .localization import (
    locale_tag_spellings,
    locales,
    placeholder_names,
    rejected_tag_spellings,
    templates,
    unknown_locale_tags,
)
from .numbers import finite_values, integers, precisions

__all__ = [
    "finite_values",
    "integers",
    "locale_tag_spellings",
    "locales",
    "placeholder_names",
    "precisions",
    "rejected_tag_spellings",
    "templates",
    "unknown_locale_tags",
]
