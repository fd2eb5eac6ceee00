"""Jalali eras.

Years from 1 on belong to the current era (AP, Anno Persico). Year 0 and
earlier belong to the era before it, counted backwards: year 0 is year 1
of the before-era, year -1 is year 2.

Python 3.11+.
"""

from __future__ import annotations

from enum import IntEnum

from jalalidate.temporal import ChronoField

__all__ = ["JalaliEra"]


class JalaliEra(IntEnum):
    """Two-valued era partition of the proleptic year axis."""

    BEFORE = 0
    CURRENT = 1

    @classmethod
    def of(cls, value: int) -> JalaliEra:
        """Era for its numeric value.

        Raises:
            DateTimeRangeError: If value is not 0 or 1
        """
        return cls(ChronoField.ERA.check_valid_value(value))

    @classmethod
    def of_year(cls, proleptic_year: int) -> JalaliEra:
        """Era a proleptic year belongs to."""
        return cls.CURRENT if proleptic_year >= 1 else cls.BEFORE

    def year_of_era(self, proleptic_year: int) -> int:
        """Year-of-era for a proleptic year in this era."""
        return proleptic_year if self is JalaliEra.CURRENT else 1 - proleptic_year

    def proleptic_year(self, year_of_era: int) -> int:
        """Proleptic year for a year-of-era in this era."""
        return year_of_era if self is JalaliEra.CURRENT else 1 - year_of_era
