"""Enumerations for jalalidate type-safe constants.

Python 3.11+.
"""

from __future__ import annotations

from enum import IntEnum

from jalalidate.constants import DAYS_PER_WEEK


class DayOfWeek(IntEnum):
    """ISO day-of-week numbering, MONDAY (1) to SUNDAY (7).

    The Iranian week starts on SATURDAY; the numbering is still ISO so that
    day-of-week values agree across calendar systems.
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    def plus(self, days: int) -> DayOfWeek:
        """Day-of-week the given number of days later, wrapping around."""
        return DayOfWeek((self - 1 + days) % DAYS_PER_WEEK + 1)

    def minus(self, days: int) -> DayOfWeek:
        """Day-of-week the given number of days earlier, wrapping around."""
        return self.plus(-(days % DAYS_PER_WEEK))


__all__ = ["DayOfWeek"]
