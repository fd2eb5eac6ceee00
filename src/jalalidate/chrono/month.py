"""Jalali month identifiers.

Months 1-6 have 31 days, months 7-11 have 30, and ESFAND has 29 days, or 30
in a leap year.

Python 3.11+.
"""

from __future__ import annotations

from enum import IntEnum

from jalalidate.constants import DAYS_IN_FIRST_HALF, MONTHS_PER_YEAR
from jalalidate.temporal import ChronoField

__all__ = ["JalaliMonth"]


class JalaliMonth(IntEnum):
    """Month-of-year, FARVARDIN (1) to ESFAND (12)."""

    FARVARDIN = 1
    ORDIBEHESHT = 2
    KHORDAD = 3
    TIR = 4
    MORDAD = 5
    SHAHRIVAR = 6
    MEHR = 7
    ABAN = 8
    AZAR = 9
    DEY = 10
    BAHMAN = 11
    ESFAND = 12

    @classmethod
    def of(cls, month: int) -> JalaliMonth:
        """Month for its ordinal value.

        Raises:
            DateTimeRangeError: If month is outside 1-12
        """
        return cls(ChronoField.MONTH_OF_YEAR.check_valid_value(month))

    def length(self, leap_year: bool) -> int:
        """Number of days in this month."""
        if self <= 6:
            return 31
        if self <= 11:
            return 30
        return 30 if leap_year else 29

    @property
    def min_length(self) -> int:
        """Shortest length of this month (29 for ESFAND)."""
        return self.length(False)

    @property
    def max_length(self) -> int:
        """Longest length of this month (30 for ESFAND)."""
        return self.length(True)

    def first_day_of_year(self, leap_year: bool) -> int:
        """Day-of-year of the first day of this month.

        Month lengths before ESFAND do not depend on the leap flag, so the
        result does not either; the parameter mirrors ``length``.
        """
        if self <= 7:
            return 1 + (self - 1) * 31
        return 1 + DAYS_IN_FIRST_HALF + (self - 7) * 30

    def plus(self, months: int) -> JalaliMonth:
        """Month the given number of months later, wrapping around ESFAND."""
        return JalaliMonth((self - 1 + months) % MONTHS_PER_YEAR + 1)

    def minus(self, months: int) -> JalaliMonth:
        """Month the given number of months earlier, wrapping around FARVARDIN."""
        return self.plus(-(months % MONTHS_PER_YEAR))
