"""Calendar systems: the Jalali chronology and the ISO interchange chronology.

A chronology owns the rules of a calendar: which years are leap years, how
long each month is, and how a (year, month, day) triple maps to the epoch
day. The epoch day (days since 1970-01-01 ISO) is the only bridge between
calendars: converting a Jalali date to ISO is ``ISO.epoch_day_to_date(
JALALI.date_to_epoch_day(y, m, d))``.

Jalali intercalation:
    33-year arithmetic cycle with 8 leap years per cycle. Year y is leap iff
    ``y % 33`` (floor modulo) is in LEAP_RESIDUES. Every function here is
    pure integer arithmetic, total over the proleptic year range, and safe
    to call from any thread.

Python 3.11+.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from jalalidate.chrono.month import JalaliMonth
from jalalidate.constants import (
    CYCLE_YEARS,
    DAYS_IN_FIRST_HALF,
    DAYS_PER_CYCLE,
    JALALI_EPOCH_DAY,
    LEAP_RESIDUES,
    LEAP_YEARS_PER_CYCLE,
    MAX_YEAR,
    MIN_YEAR,
)
from jalalidate.core.value_range import ValueRange
from jalalidate.diagnostics import DateTimeRangeError, ErrorTemplate, UnsupportedTemporalTypeError
from jalalidate.temporal import ChronoField

if TYPE_CHECKING:
    from jalalidate.chrono.date import JalaliDate
    from jalalidate.chrono.iso import IsoDate
    from jalalidate.temporal import TemporalAccessor

__all__ = [
    "ISO",
    "JALALI",
    "Chronology",
    "IsoChronology",
    "JalaliChronology",
]


class Chronology(ABC):
    """Rules of one calendar system."""

    __slots__ = ()

    id: ClassVar[str]
    calendar_type: ClassVar[str]

    @abstractmethod
    def is_leap_year(self, year: int) -> bool:
        """True if the proleptic year is a leap year."""

    @abstractmethod
    def month_length(self, year: int, month: int) -> int:
        """Number of days in the month of the proleptic year."""

    @abstractmethod
    def date_to_epoch_day(self, year: int, month: int, day: int) -> int:
        """Epoch day of a valid date."""

    @abstractmethod
    def epoch_day_to_date(self, epoch_day: int) -> tuple[int, int, int]:
        """(year, month, day) of an epoch day."""

    @abstractmethod
    def range(self, field: ChronoField) -> ValueRange:
        """Range of the field in this calendar."""

    def year_length(self, year: int) -> int:
        """365 or 366."""
        return 366 if self.is_leap_year(year) else 365

    def proleptic_year(self, era: int, year_of_era: int) -> int:
        """Proleptic year of a year-of-era (era 1 counts forward, era 0 backward)."""
        ChronoField.ERA.check_valid_value(era)
        return year_of_era if era == 1 else 1 - year_of_era

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True, slots=True)
class JalaliChronology(Chronology):
    """Solar Hijri (Persian) calendar with the 33-year arithmetic cycle.

    Example:
        >>> JALALI.is_leap_year(1403)
        True
        >>> JALALI.date_to_epoch_day(1348, 10, 11)
        0
        >>> JALALI.epoch_day_to_date(19802)
        (1403, 1, 1)
    """

    id: ClassVar[str] = "Jalali"
    calendar_type: ClassVar[str] = "persian"

    def is_leap_year(self, year: int) -> bool:
        return year % CYCLE_YEARS in LEAP_RESIDUES

    def month_length(self, year: int, month: int) -> int:
        """Number of days in the month.

        Raises:
            DateTimeRangeError: If month is outside 1-12
        """
        ChronoField.MONTH_OF_YEAR.check_valid_value(month)
        if month <= 6:
            return 31
        if month <= 11:
            return 30
        return 30 if self.is_leap_year(year) else 29

    def check_date(self, year: int, month: int, day: int) -> None:
        """Validate a (year, month, day) triple.

        Raises:
            DateTimeRangeError: If any component is out of range, or the day
                exceeds the month length
        """
        ChronoField.YEAR.check_valid_value(year)
        ChronoField.MONTH_OF_YEAR.check_valid_value(month)
        ChronoField.DAY_OF_MONTH.check_valid_value(day)
        length = self.month_length(year, month)
        if day > length:
            raise DateTimeRangeError(
                ErrorTemplate.invalid_date(JalaliMonth(month).name, day, year, length)
            )

    def date_to_epoch_day(self, year: int, month: int, day: int) -> int:
        """Epoch day of a Jalali date.

        Raises:
            DateTimeRangeError: If the date is not valid
        """
        self.check_date(year, month, day)
        return _jalali_to_epoch_day(year, month, day)

    def epoch_day_to_date(self, epoch_day: int) -> tuple[int, int, int]:
        """Jalali (year, month, day) of an epoch day.

        Raises:
            DateTimeRangeError: If epoch_day is outside the supported year range
        """
        _JALALI_EPOCH_DAY_RANGE.check_valid_value(epoch_day, ChronoField.EPOCH_DAY)
        return _epoch_day_to_jalali(epoch_day)

    def range(self, field: ChronoField) -> ValueRange:
        _require_field(field)
        match field:
            case ChronoField.DAY_OF_MONTH:
                return ValueRange.of(1, 29, 31)
            case ChronoField.ALIGNED_WEEK_OF_MONTH:
                return ValueRange.of(1, 5)
            case ChronoField.EPOCH_DAY:
                return _JALALI_EPOCH_DAY_RANGE
            case _:
                return field.range()

    def date(self, year: int, month: int, day: int) -> JalaliDate:
        """Validated Jalali date."""
        from jalalidate.chrono.date import JalaliDate  # noqa: PLC0415 - circular

        return JalaliDate.of(year, month, day)

    def date_epoch_day(self, epoch_day: int) -> JalaliDate:
        """Jalali date of an epoch day."""
        from jalalidate.chrono.date import JalaliDate  # noqa: PLC0415 - circular

        return JalaliDate.of_epoch_day(epoch_day)

    def date_from(self, temporal: TemporalAccessor) -> JalaliDate:
        """Jalali date of any temporal exposing epoch-day."""
        from jalalidate.chrono.date import JalaliDate  # noqa: PLC0415 - circular

        return JalaliDate.from_temporal(temporal)


@dataclass(frozen=True, slots=True)
class IsoChronology(Chronology):
    """Proleptic Gregorian calendar used as the interchange format.

    Example:
        >>> ISO.epoch_day_to_date(0)
        (1970, 1, 1)
    """

    id: ClassVar[str] = "ISO"
    calendar_type: ClassVar[str] = "iso8601"

    def is_leap_year(self, year: int) -> bool:
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

    def month_length(self, year: int, month: int) -> int:
        """Number of days in the month.

        Raises:
            DateTimeRangeError: If month is outside 1-12
        """
        ChronoField.MONTH_OF_YEAR.check_valid_value(month)
        if month == 2:
            return 29 if self.is_leap_year(year) else 28
        return 30 if month in (4, 6, 9, 11) else 31

    def date_to_epoch_day(self, year: int, month: int, day: int) -> int:
        """Epoch day of an ISO date.

        Raises:
            DateTimeRangeError: If the date is not valid
        """
        ChronoField.YEAR.check_valid_value(year)
        length = self.month_length(year, month)
        if not 1 <= day <= length:
            raise DateTimeRangeError(
                ErrorTemplate.value_out_of_range(
                    str(ChronoField.DAY_OF_MONTH), day, str(ValueRange.of(1, length))
                )
            )
        return _iso_to_epoch_day(year, month, day)

    def epoch_day_to_date(self, epoch_day: int) -> tuple[int, int, int]:
        """ISO (year, month, day) of an epoch day.

        Raises:
            DateTimeRangeError: If epoch_day is outside the supported year range
        """
        ChronoField.EPOCH_DAY.check_valid_value(epoch_day)
        return _epoch_day_to_iso(epoch_day)

    def range(self, field: ChronoField) -> ValueRange:
        _require_field(field)
        return field.range()

    def date(self, year: int, month: int, day: int) -> IsoDate:
        """Validated ISO date."""
        from jalalidate.chrono.iso import IsoDate  # noqa: PLC0415 - circular

        return IsoDate.of(year, month, day)

    def date_epoch_day(self, epoch_day: int) -> IsoDate:
        """ISO date of an epoch day."""
        from jalalidate.chrono.iso import IsoDate  # noqa: PLC0415 - circular

        return IsoDate.of_epoch_day(epoch_day)

    def date_from(self, temporal: TemporalAccessor) -> IsoDate:
        """ISO date of any temporal exposing epoch-day."""
        from jalalidate.chrono.iso import IsoDate  # noqa: PLC0415 - circular

        return IsoDate.from_temporal(temporal)


def _require_field(field: object) -> None:
    if not isinstance(field, ChronoField):
        raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_field(str(field)))


# ==============================================================================
# JALALI DAY COUNT
# ==============================================================================

# _CUMULATIVE_LEAPS[r]: leap years among residues 1..r of one 33-year cycle.
_CUMULATIVE_LEAPS: tuple[int, ...] = tuple(
    sum(1 for residue in LEAP_RESIDUES if residue <= rem) for rem in range(CYCLE_YEARS)
)


def _leap_years_before(year: int) -> int:
    """Leap years in [1, year); negative for year < 1."""
    cycles, rem = divmod(year - 1, CYCLE_YEARS)
    return cycles * LEAP_YEARS_PER_CYCLE + _CUMULATIVE_LEAPS[rem]


def _days_before_year(year: int) -> int:
    """Days from 0001-01-01 to the first day of year (negative before year 1)."""
    return 365 * (year - 1) + _leap_years_before(year)


def _days_before_month(month: int) -> int:
    if month <= 7:
        return (month - 1) * 31
    return DAYS_IN_FIRST_HALF + (month - 7) * 30


def _jalali_to_epoch_day(year: int, month: int, day: int) -> int:
    return JALALI_EPOCH_DAY + _days_before_year(year) + _days_before_month(month) + day - 1


def _epoch_day_to_jalali(epoch_day: int) -> tuple[int, int, int]:
    days = epoch_day - JALALI_EPOCH_DAY
    # Mean-year estimate is off by at most one year in either direction.
    year = (days * CYCLE_YEARS) // DAYS_PER_CYCLE + 1
    while _days_before_year(year) > days:
        year -= 1
    while _days_before_year(year + 1) <= days:
        year += 1

    day_of_year = days - _days_before_year(year)  # 0-based
    if day_of_year < DAYS_IN_FIRST_HALF:
        return year, day_of_year // 31 + 1, day_of_year % 31 + 1
    day_of_year -= DAYS_IN_FIRST_HALF
    return year, day_of_year // 30 + 7, day_of_year % 30 + 1


_JALALI_EPOCH_DAY_RANGE: ValueRange = ValueRange.of(
    _jalali_to_epoch_day(MIN_YEAR, 1, 1),
    _jalali_to_epoch_day(MAX_YEAR, 12, 30 if MAX_YEAR % CYCLE_YEARS in LEAP_RESIDUES else 29),
)

# ==============================================================================
# ISO DAY COUNT (days-from-civil over 400-year eras)
# ==============================================================================

# Days from 0000-03-01 to 1970-01-01.
_DAYS_0000_TO_1970: int = 719_468
_DAYS_PER_400_YEARS: int = 146_097


def _iso_to_epoch_day(year: int, month: int, day: int) -> int:
    # Count from March so the leap day falls at the end of the shifted year.
    if month <= 2:
        year -= 1
    era = year // 400
    year_of_era = year - era * 400
    shifted_month = month - 3 if month > 2 else month + 9
    day_of_year = (153 * shifted_month + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * _DAYS_PER_400_YEARS + day_of_era - _DAYS_0000_TO_1970


def _epoch_day_to_iso(epoch_day: int) -> tuple[int, int, int]:
    days = epoch_day + _DAYS_0000_TO_1970
    era = days // _DAYS_PER_400_YEARS
    day_of_era = days - era * _DAYS_PER_400_YEARS
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


JALALI: JalaliChronology = JalaliChronology()
ISO: IsoChronology = IsoChronology()
