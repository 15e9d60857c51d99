"""Enumerations for getprose type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of loading the catalog for one locale.

    StrEnum provides automatic string conversion: str(LoadStatus.LOADED) == "loaded"
    """

    LOADED = "loaded"
    """A compiled catalog was found and parsed."""

    EMPTY = "empty"
    """The locale is served by the empty identity catalog (source language)."""

    NOT_FOUND = "not_found"
    """The loader reported no catalog; lookups use the fallback locale."""


__all__ = [
    "LoadStatus",
]
