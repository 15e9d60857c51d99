"""Runtime formatting: templates, numbers, dates.

Submodules:
    format_builder - FormatBuilder for {name} placeholder substitution
    numbers        - format_int, format_f64 and CLDR number profiles
    dates          - format_date, format_time, format_datetime

Python 3.13+. Uses Babel for CLDR data.
"""

from .dates import format_date, format_datetime, format_time
from .format_builder import FormatBuilder, Placeholder, parse_template, to_format
from .numbers import NumberProfile, format_f64, format_int, get_number_profile, number_profile

__all__ = [
    "FormatBuilder",
    "NumberProfile",
    "Placeholder",
    "format_date",
    "format_datetime",
    "format_f64",
    "format_int",
    "format_time",
    "get_number_profile",
    "number_profile",
    "parse_template",
    "to_format",
]
