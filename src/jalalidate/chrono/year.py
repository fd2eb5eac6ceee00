"""Jalali year value type.

A thin validated wrapper over a proleptic year, with leap-year queries and
the bridges down to year-month and date.

Python 3.11+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from jalalidate.chrono.chronology import JALALI
from jalalidate.chrono.date import JalaliDate
from jalalidate.chrono.era import JalaliEra
from jalalidate.chrono.iso import coerce_temporal
from jalalidate.chrono.year_month import JalaliYearMonth
from jalalidate.constants import MAX_YEAR, MIN_YEAR
from jalalidate.core.arithmetic import LONG_MAX, LONG_MIN, check_long, require_int
from jalalidate.diagnostics import (
    DateTimeError,
    DateTimeParseError,
    ErrorTemplate,
    TemporalConversionError,
)
from jalalidate.temporal import ChronoField
from jalalidate.text.canonical import build_parsed, format_year, parse_year
from jalalidate.text.pattern import resolve_year

if TYPE_CHECKING:
    from collections.abc import Mapping

    from jalalidate.chrono.chronology import JalaliChronology
    from jalalidate.chrono.month import JalaliMonth
    from jalalidate.temporal import Clock, TemporalFormatter

__all__ = ["JalaliYear"]


@dataclass(frozen=True, slots=True, order=True)
class JalaliYear:
    """A proleptic Jalali year, MIN_YEAR to MAX_YEAR.

    Example:
        >>> JalaliYear.of(1403).is_leap_year()
        True
        >>> JalaliYear.of(1403).at_day(366)
        JalaliDate(year=1403, month=12, day=30)
    """

    MIN_VALUE: ClassVar[int] = MIN_YEAR
    MAX_VALUE: ClassVar[int] = MAX_YEAR

    value: int

    def __post_init__(self) -> None:
        """Validate the year.

        Raises:
            TypeError: If value is not an int
            DateTimeRangeError: If value is out of range
        """
        ChronoField.YEAR.check_valid_value(require_int(self.value, "year"))

    @classmethod
    def of(cls, year: int) -> JalaliYear:
        """Validated year."""
        return cls(year)

    @staticmethod
    def is_leap(year: int) -> bool:
        """True if the proleptic year is a leap year."""
        return JALALI.is_leap_year(year)

    @classmethod
    def from_temporal(cls, temporal: object) -> JalaliYear:
        """Year of any temporal (non-Jalali temporals go through JalaliDate).

        Raises:
            TemporalConversionError: If the year cannot be obtained
        """
        if isinstance(temporal, JalaliYear):
            return temporal
        accessor = coerce_temporal(temporal, cls.__name__)
        try:
            if accessor.chronology != JALALI:
                accessor = JalaliDate.from_temporal(accessor)
            return cls(accessor.get(ChronoField.YEAR))
        except DateTimeError as e:
            raise TemporalConversionError(
                ErrorTemplate.conversion_failed(cls.__name__, temporal)
            ) from e

    @classmethod
    def parse(cls, text: str, formatter: TemporalFormatter | None = None) -> JalaliYear:
        """Parse canonical ``[sign]YYYY`` text, or text in formatter's layout.

        Raises:
            DateTimeParseError: If text is malformed or out of range
        """
        if formatter is None:
            return build_parsed(text, cls, parse_year(text))
        return build_parsed(text, cls._from_fields, text, formatter.parse(text))

    @classmethod
    def _from_fields(cls, text: str, fields: Mapping[ChronoField, int]) -> JalaliYear:
        year = resolve_year(fields)
        if year is None:
            raise DateTimeParseError(
                ErrorTemplate.parse_fields_unresolved(text, cls.__name__), input_value=text
            )
        return cls(year)

    @classmethod
    def now(cls, clock: Clock) -> JalaliYear:
        """Current year according to clock."""
        return cls.from_temporal(clock.today())

    @property
    def chronology(self) -> JalaliChronology:
        """The Jalali chronology."""
        return JALALI

    @property
    def era(self) -> JalaliEra:
        """Era of the year."""
        return JalaliEra.of_year(self.value)

    def is_leap_year(self) -> bool:
        """True if this is a leap year (ESFAND has 30 days)."""
        return JALALI.is_leap_year(self.value)

    def length(self) -> int:
        """Days in the year: 365 or 366."""
        return JALALI.year_length(self.value)

    def is_valid_day(self, day_of_year: int) -> bool:
        """True if day_of_year exists in this year."""
        return 1 <= day_of_year <= self.length()

    def at_month(self, month: int | JalaliMonth) -> JalaliYearMonth:
        """Year-month in this year."""
        return JalaliYearMonth.of(self.value, month)

    def at_day(self, day_of_year: int) -> JalaliDate:
        """Date on day_of_year of this year.

        Raises:
            DateTimeRangeError: If day_of_year does not exist in this year
        """
        return JalaliDate.of_year_day(self.value, day_of_year)

    def plus_years(self, years: int) -> JalaliYear:
        """Copy with years added.

        Raises:
            DateTimeRangeError: If the result leaves the year range
        """
        check_long(require_int(years, "years"))
        if years == 0:
            return self
        return JalaliYear(ChronoField.YEAR.check_valid_int_value(self.value + years))

    def minus_years(self, years: int) -> JalaliYear:
        """Copy with years subtracted."""
        check_long(require_int(years, "years"))
        if years == LONG_MIN:
            return self.plus_years(LONG_MAX).plus_years(1)
        return self.plus_years(-years)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return format_year(self.value)
