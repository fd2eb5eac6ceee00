"""Text forms of Jalali values.

Exports:
    format_*/parse_*: Canonical ``[sign]YYYY-MM-DD`` text
    DateTimePattern, compile_pattern: CLDR-style numeric patterns
    PatternFormatter: Pattern plus locale digits (via Babel)

Python 3.11+.
"""

from .canonical import (
    format_date,
    format_year,
    format_year_month,
    parse_date,
    parse_year,
    parse_year_month,
)
from .localized import PatternFormatter
from .pattern import DateTimePattern, compile_pattern

__all__ = [
    "DateTimePattern",
    "PatternFormatter",
    "compile_pattern",
    "format_date",
    "format_year",
    "format_year_month",
    "parse_date",
    "parse_year",
    "parse_year_month",
]
