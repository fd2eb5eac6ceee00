"""Clocks: the only source of "today".

Value types never read the wall clock themselves; ``now(clock)`` takes one
of these (or anything with a ``today() -> datetime.date`` method).

Python 3.11+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, tzinfo

__all__ = ["FixedClock", "SystemClock"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SystemClock:
    """Wall clock in a time zone.

    Attributes:
        tz: Time zone whose calendar day is "today"; None for local time
    """

    tz: tzinfo | None = None

    def today(self) -> date:
        """Current calendar day in tz."""
        today = datetime.now(self.tz).date()
        logger.debug("SystemClock read %s (tz=%s)", today, self.tz)
        return today


@dataclass(frozen=True, slots=True)
class FixedClock:
    """Clock stopped on one day, for tests and reproducible runs.

    Example:
        >>> from jalalidate import JalaliDate
        >>> JalaliDate.now(FixedClock(date(2024, 3, 20)))
        JalaliDate(year=1403, month=1, day=1)
    """

    day: date

    def __post_init__(self) -> None:
        """Validate the day.

        Raises:
            TypeError: If day is not a datetime.date
        """
        if not isinstance(self.day, date):
            msg = f"day must be datetime.date, got {type(self.day).__name__}"
            raise TypeError(msg)
        if isinstance(self.day, datetime):
            object.__setattr__(self, "day", self.day.date())

    def today(self) -> date:
        """The fixed day."""
        logger.debug("FixedClock read %s", self.day)
        return self.day
