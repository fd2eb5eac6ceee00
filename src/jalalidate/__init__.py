"""jalalidate - Jalali (Persian) calendar value types.

Immutable year, year-month and date types over the Solar Hijri calendar,
sharing a field/unit temporal protocol and converting to and from the
proleptic Gregorian calendar through the epoch day.

Public API:
    JalaliDate - Year, month and day (1403-01-01)
    JalaliYearMonth - Year and month (1403-07)
    JalaliYear - Proleptic year
    JalaliMonth, JalaliEra, DayOfWeek - Enumerations
    JALALI, ISO - Chronology singletons
    IsoDate - Proleptic Gregorian interchange date
    ChronoField, ChronoUnit - Field and unit tags
    PatternFormatter - Pattern formatting with locale digits
    SystemClock, FixedClock - Clocks for ``now(clock)``

Exceptions:
    JalaliError - Base exception class
    DateTimeRangeError - Value outside a field's bounds
    UnsupportedTemporalTypeError - Field or unit not supported
    DateTimeParseError - Malformed or invalid text
    ChronologyMismatchError - Adjustment across calendar systems
    ArithmeticOverflowError - Amount overflowed 64-bit arithmetic

Submodules:
    jalalidate.chrono - Chronologies and value types
    jalalidate.temporal - Field/unit tags and protocols
    jalalidate.text - Canonical text, patterns and localized digits
    jalalidate.diagnostics - Error codes, templates and formatters
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .chrono import (
    ISO,
    JALALI,
    FixedClock,
    IsoDate,
    JalaliDate,
    JalaliEra,
    JalaliMonth,
    JalaliYear,
    JalaliYearMonth,
    SystemClock,
)
from .diagnostics import (
    ArithmeticOverflowError,
    ChronologyMismatchError,
    DateTimeError,
    DateTimeParseError,
    DateTimeRangeError,
    JalaliError,
    TemporalConversionError,
    UnsupportedTemporalTypeError,
)
from .enums import DayOfWeek
from .temporal import ChronoField, ChronoUnit
from .text import PatternFormatter

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("jalalidate")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ISO",
    "JALALI",
    "ArithmeticOverflowError",
    "ChronoField",
    "ChronoUnit",
    "ChronologyMismatchError",
    "DateTimeError",
    "DateTimeParseError",
    "DateTimeRangeError",
    "DayOfWeek",
    "FixedClock",
    "IsoDate",
    "JalaliDate",
    "JalaliEra",
    "JalaliError",
    "JalaliMonth",
    "JalaliYear",
    "JalaliYearMonth",
    "PatternFormatter",
    "SystemClock",
    "TemporalConversionError",
    "UnsupportedTemporalTypeError",
    "__version__",
]
