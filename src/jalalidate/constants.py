"""Shared constants for jalalidate.

This module provides the calendar constants used across the chrono, text,
and core packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Year bounds: Supported proleptic year range for every value type
- Jalali calendar: Intercalation cycle and month layout
- Epoch: Anchors tying the Jalali day count to the ISO epoch day
- Text: Canonical pattern widths

Python 3.11+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Year bounds
    "MIN_YEAR",
    "MAX_YEAR",
    # Jalali calendar
    "MONTHS_PER_YEAR",
    "DAYS_PER_WEEK",
    "CYCLE_YEARS",
    "LEAP_YEARS_PER_CYCLE",
    "DAYS_PER_CYCLE",
    "LEAP_RESIDUES",
    "DAYS_IN_FIRST_HALF",
    # Epoch
    "JALALI_EPOCH_DAY",
    "ISO_EPOCH_DAY_MIN",
    "ISO_EPOCH_DAY_MAX",
    # Text
    "YEAR_PAD_WIDTH",
    "YEAR_MAX_WIDTH",
]

# ============================================================================
# YEAR BOUNDS
# ============================================================================

# Proleptic year bounds shared by JalaliYear, JalaliYearMonth and JalaliDate.
# The bound keeps proleptic-month (year * 12 + month - 1) and epoch-day well
# inside signed 64-bit range, so month and day arithmetic never needs a
# wider type than the amounts it is given.
MIN_YEAR: int = -999_999_999
MAX_YEAR: int = 999_999_999

# ============================================================================
# JALALI CALENDAR
# ============================================================================
#
# INTERCALATION RULE: 33-year arithmetic cycle.
#
# Each 33-year cycle holds 8 leap years. A year is leap when its floor
# remainder modulo 33 is one of LEAP_RESIDUES. The rule agrees with the
# observed civil calendar over the modern era and is total over the
# proleptic range, so epoch-day conversion is exact everywhere.
#
# Reference leap years: 1370, 1375, 1387, 1391, 1395, 1399, 1403, 1408.
#
# ============================================================================

MONTHS_PER_YEAR: int = 12
DAYS_PER_WEEK: int = 7

CYCLE_YEARS: int = 33
LEAP_YEARS_PER_CYCLE: int = 8
DAYS_PER_CYCLE: int = CYCLE_YEARS * 365 + LEAP_YEARS_PER_CYCLE  # 12053

LEAP_RESIDUES: frozenset[int] = frozenset((1, 5, 9, 13, 17, 22, 26, 30))

# Months 1-6 have 31 days, so the second half of the year starts on day 187.
DAYS_IN_FIRST_HALF: int = 6 * 31

# ============================================================================
# EPOCH
# ============================================================================

# Epoch day (days since 1970-01-01 ISO) of 0001-01-01 AP.
# Anchors: 1348-10-11 AP == 1970-01-01, 1403-01-01 AP == 2024-03-20.
JALALI_EPOCH_DAY: int = -492_268

# ISO epoch-day bounds for years -999,999,999 .. 999,999,999 (proleptic
# Gregorian). Used as the base range of the epoch-day field.
ISO_EPOCH_DAY_MIN: int = -365_243_219_162
ISO_EPOCH_DAY_MAX: int = 365_241_780_471

# ============================================================================
# TEXT
# ============================================================================

# Canonical year rendering: zero-padded to 4 digits; an explicit sign is
# required once the 4-digit pad is exceeded.
YEAR_PAD_WIDTH: int = 4
YEAR_MAX_WIDTH: int = 10
