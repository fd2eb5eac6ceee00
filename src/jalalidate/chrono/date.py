"""Jalali date value type.

``JalaliDate`` is an immutable (year, month, day) triple implementing the
field/unit protocol over all eleven fields and eight units. Day-based
arithmetic runs on the epoch day, month-based arithmetic on the proleptic
month with the day clamped to the target month's length (1403-06-31 plus one
month is 1403-07-30).

The epoch day is the bridge to other calendars: ``adjust_into`` writes it
into any temporal, and ``from_temporal`` reads it from any temporal, so
``JalaliDate.from_temporal(datetime.date(2024, 3, 20))`` is 1403-01-01.

Thread-safe: instances are immutable and share no state.

Python 3.11+.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING, TypeVar, cast

from jalalidate.chrono.chronology import JALALI
from jalalidate.chrono.era import JalaliEra
from jalalidate.chrono.iso import IsoDate, coerce_temporal, date_of_epoch_day, epoch_day_of
from jalalidate.chrono.month import JalaliMonth
from jalalidate.chrono.year_month import JalaliYearMonth
from jalalidate.constants import DAYS_PER_WEEK, MAX_YEAR, MONTHS_PER_YEAR
from jalalidate.core.arithmetic import (
    LONG_MAX,
    LONG_MIN,
    add_exact,
    check_long,
    multiply_exact,
    require_int,
    truncating_div,
)
from jalalidate.core.value_range import ValueRange
from jalalidate.diagnostics import (
    DateTimeError,
    DateTimeParseError,
    DateTimeRangeError,
    ErrorTemplate,
    TemporalConversionError,
    UnsupportedTemporalTypeError,
)
from jalalidate.enums import DayOfWeek
from jalalidate.temporal import ChronoField, ChronoUnit
from jalalidate.text.canonical import build_parsed, format_date, parse_date
from jalalidate.text.pattern import resolve_year

if TYPE_CHECKING:
    from collections.abc import Mapping

    from jalalidate.chrono.chronology import JalaliChronology
    from jalalidate.temporal import Clock, Temporal, TemporalAdjuster, TemporalFormatter

__all__ = ["JalaliDate"]

T = TypeVar("T", bound="Temporal")

# Packs (proleptic month, day) into one ordered integer for month counting.
_DAY_SLOTS_PER_MONTH: int = 32


@dataclass(frozen=True, slots=True, order=True)
class JalaliDate:
    """A date in the Jalali calendar, such as ``1403-01-01``.

    Equality, hashing and ordering are structural over (year, month, day),
    which is also chronological order.

    Attributes:
        year: Proleptic year, MIN_YEAR to MAX_YEAR
        month: Month-of-year, 1 to 12
        day: Day-of-month, 1 to the month length

    Example:
        >>> JalaliDate.of(1348, 10, 11).to_epoch_day()
        0
        >>> JalaliDate.from_gregorian(date(2024, 3, 20))
        JalaliDate(year=1403, month=1, day=1)
        >>> JalaliDate.of(1403, 6, 31).plus_months(1)
        JalaliDate(year=1403, month=7, day=30)
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        """Validate and normalize the components.

        Raises:
            TypeError: If a component is not an int
            DateTimeRangeError: If the date does not exist
        """
        require_int(self.year, "year")
        require_int(self.month, "month")
        require_int(self.day, "day")
        JALALI.check_date(self.year, self.month, self.day)
        if type(self.month) is not int:
            object.__setattr__(self, "month", int(self.month))

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, year: int, month: int | JalaliMonth, day: int) -> JalaliDate:
        """Validated date.

        Raises:
            DateTimeRangeError: If the date does not exist, e.g. ESFAND 30 of
                a common year
        """
        return cls(year, month, day)

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> JalaliDate:
        """Date from year and day-of-year.

        Raises:
            DateTimeRangeError: If day_of_year is out of range, or 366 in a
                common year
        """
        ChronoField.YEAR.check_valid_value(require_int(year, "year"))
        ChronoField.DAY_OF_YEAR.check_valid_value(require_int(day_of_year, "day_of_year"))
        if day_of_year > JALALI.year_length(year):
            raise DateTimeRangeError(ErrorTemplate.invalid_day_of_year(year, day_of_year))
        return cls.of_epoch_day(JALALI.date_to_epoch_day(year, 1, 1) + day_of_year - 1)

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> JalaliDate:
        """Date of an epoch day (days since 1970-01-01 ISO).

        Raises:
            DateTimeRangeError: If epoch_day is outside the supported range
        """
        return cls(*JALALI.epoch_day_to_date(require_int(epoch_day, "epoch_day")))

    @classmethod
    def from_gregorian(cls, value: date) -> JalaliDate:
        """Date of a ``datetime.date`` (or the date part of a ``datetime``)."""
        return cls.of_epoch_day(epoch_day_of(value))

    @classmethod
    def from_temporal(cls, temporal: object) -> JalaliDate:
        """Date of any temporal exposing epoch-day.

        Raises:
            TemporalConversionError: If no date can be obtained
        """
        if isinstance(temporal, JalaliDate):
            return temporal
        accessor = coerce_temporal(temporal, cls.__name__)
        try:
            return cls.of_epoch_day(accessor.get_long(ChronoField.EPOCH_DAY))
        except DateTimeError as e:
            raise TemporalConversionError(
                ErrorTemplate.conversion_failed(cls.__name__, temporal)
            ) from e

    @classmethod
    def parse(cls, text: str, formatter: TemporalFormatter | None = None) -> JalaliDate:
        """Parse canonical ``[sign]YYYY-MM-DD`` text, or text in formatter's layout.

        With a formatter the date resolves from year plus month and day,
        year plus day-of-year, or epoch-day.

        Raises:
            DateTimeParseError: If text is malformed or decodes to an invalid
                date
        """
        if formatter is None:
            return build_parsed(text, cls.of, *parse_date(text))
        return build_parsed(text, cls._from_fields, text, formatter.parse(text))

    @classmethod
    def _from_fields(cls, text: str, fields: Mapping[ChronoField, int]) -> JalaliDate:
        if ChronoField.EPOCH_DAY in fields:
            return cls.of_epoch_day(fields[ChronoField.EPOCH_DAY])
        year = resolve_year(fields)
        if year is not None:
            month = fields.get(ChronoField.MONTH_OF_YEAR)
            day = fields.get(ChronoField.DAY_OF_MONTH)
            if month is not None and day is not None:
                return cls.of(year, month, day)
            if ChronoField.DAY_OF_YEAR in fields:
                return cls.of_year_day(year, fields[ChronoField.DAY_OF_YEAR])
        raise DateTimeParseError(
            ErrorTemplate.parse_fields_unresolved(text, cls.__name__),
            input_value=text,
        )

    @classmethod
    def now(cls, clock: Clock) -> JalaliDate:
        """Current date according to clock."""
        return cls.from_gregorian(clock.today())

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def chronology(self) -> JalaliChronology:
        """The Jalali chronology."""
        return JALALI

    @property
    def month_of_year(self) -> JalaliMonth:
        """Month as an enum member."""
        return JalaliMonth(self.month)

    @property
    def era(self) -> JalaliEra:
        """Era of the year."""
        return JalaliEra.of_year(self.year)

    @property
    def day_of_year(self) -> int:
        """Day within the year, 1-366."""
        return self.month_of_year.first_day_of_year(self.is_leap_year()) + self.day - 1

    @property
    def day_of_week(self) -> DayOfWeek:
        """ISO day-of-week (1403-01-01 is a WEDNESDAY)."""
        return DayOfWeek((self.to_epoch_day() + 3) % DAYS_PER_WEEK + 1)

    @property
    def proleptic_month(self) -> int:
        """``year * 12 + month - 1``."""
        return self.year * MONTHS_PER_YEAR + self.month - 1

    def is_leap_year(self) -> bool:
        """True if the year is a leap year."""
        return JALALI.is_leap_year(self.year)

    def length_of_month(self) -> int:
        """Days in the month."""
        return JALALI.month_length(self.year, self.month)

    def length_of_year(self) -> int:
        """Days in the year: 365 or 366."""
        return JALALI.year_length(self.year)

    def to_epoch_day(self) -> int:
        """Days since 1970-01-01 ISO."""
        return JALALI.date_to_epoch_day(self.year, self.month, self.day)

    def to_iso(self) -> IsoDate:
        """Same day in the proleptic Gregorian calendar.

        Raises:
            DateTimeRangeError: If the day is past the ISO year range
        """
        return IsoDate.of_epoch_day(self.to_epoch_day())

    def to_gregorian(self) -> date:
        """Same day as ``datetime.date``.

        Raises:
            DateTimeRangeError: If the day falls outside Gregorian years 1-9999
        """
        return date_of_epoch_day(self.to_epoch_day())

    def year_month(self) -> JalaliYearMonth:
        """Year-month of this date."""
        return JalaliYearMonth(self.year, self.month)

    # ------------------------------------------------------------------
    # Field access
    # ------------------------------------------------------------------

    def is_supported(self, field: object) -> bool:
        """True for every ChronoField."""
        return isinstance(field, ChronoField)

    def is_supported_unit(self, unit: object) -> bool:
        """True for every ChronoUnit."""
        return isinstance(unit, ChronoUnit)

    def range(self, field: ChronoField) -> ValueRange:
        """Valid range of a field, narrowed to this date's month and year.

        Raises:
            UnsupportedTemporalTypeError: If the field is not supported
        """
        if not self.is_supported(field):
            raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_field(str(field)))
        match field:
            case ChronoField.DAY_OF_MONTH:
                return ValueRange.of(1, self.length_of_month())
            case ChronoField.DAY_OF_YEAR:
                return ValueRange.of(1, self.length_of_year())
            case ChronoField.YEAR_OF_ERA:
                return ValueRange.of(1, MAX_YEAR + 1 if self.year <= 0 else MAX_YEAR)
            case _:
                return JALALI.range(field)

    def get(self, field: ChronoField) -> int:
        """Field value, guaranteed to fit in 32 bits.

        Raises:
            UnsupportedTemporalTypeError: If the field is not supported, or
                its range does not fit 32 bits (epoch-day, proleptic-month)
        """
        value_range = self.range(field)
        if not value_range.is_int_value:
            raise UnsupportedTemporalTypeError(ErrorTemplate.field_too_large_for_int(str(field)))
        return value_range.check_valid_value(self.get_long(field), field)

    def get_long(self, field: ChronoField) -> int:
        """Field value.

        Raises:
            UnsupportedTemporalTypeError: If the field is not supported
        """
        if not self.is_supported(field):
            raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_field(str(field)))
        match field:
            case ChronoField.DAY_OF_WEEK:
                return int(self.day_of_week)
            case ChronoField.ALIGNED_WEEK_OF_MONTH:
                return (self.day - 1) // DAYS_PER_WEEK + 1
            case ChronoField.ALIGNED_WEEK_OF_YEAR:
                return (self.day_of_year - 1) // DAYS_PER_WEEK + 1
            case ChronoField.DAY_OF_MONTH:
                return self.day
            case ChronoField.DAY_OF_YEAR:
                return self.day_of_year
            case ChronoField.EPOCH_DAY:
                return self.to_epoch_day()
            case ChronoField.MONTH_OF_YEAR:
                return self.month
            case ChronoField.PROLEPTIC_MONTH:
                return self.proleptic_month
            case ChronoField.YEAR_OF_ERA:
                return self.era.year_of_era(self.year)
            case ChronoField.YEAR:
                return self.year
            case ChronoField.ERA:
                return int(self.era)
            case _:
                raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_field(str(field)))

    # ------------------------------------------------------------------
    # Field mutation
    # ------------------------------------------------------------------

    def with_field(self, field: ChronoField, new_value: int) -> JalaliDate:
        """Copy with one field set.

        Week-based fields move by whole weeks; year and month changes clamp
        the day to the new month length; era flips the year keeping
        year-of-era.

        Raises:
            UnsupportedTemporalTypeError: If the field is not supported
            DateTimeRangeError: If new_value is invalid for the field
        """
        require_int(new_value, "new_value")
        if not self.is_supported(field):
            raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_field(str(field)))
        JALALI.range(field).check_valid_value(new_value, field)
        match field:
            case ChronoField.DAY_OF_WEEK:
                return self.plus_days(new_value - self.get_long(ChronoField.DAY_OF_WEEK))
            case ChronoField.ALIGNED_WEEK_OF_MONTH | ChronoField.ALIGNED_WEEK_OF_YEAR:
                return self.plus_weeks(new_value - self.get_long(field))
            case ChronoField.DAY_OF_MONTH:
                return self.with_day_of_month(new_value)
            case ChronoField.DAY_OF_YEAR:
                return self.with_day_of_year(new_value)
            case ChronoField.EPOCH_DAY:
                return JalaliDate.of_epoch_day(new_value)
            case ChronoField.MONTH_OF_YEAR:
                return self.with_month(new_value)
            case ChronoField.PROLEPTIC_MONTH:
                return self.plus_months(new_value - self.proleptic_month)
            case ChronoField.YEAR_OF_ERA:
                return self.with_year(new_value if self.year >= 1 else 1 - new_value)
            case ChronoField.YEAR:
                return self.with_year(new_value)
            case ChronoField.ERA:
                if self.get_long(ChronoField.ERA) == new_value:
                    return self
                return self.with_year(1 - self.year)
            case _:
                raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_field(str(field)))

    def with_adjuster(self, adjuster: TemporalAdjuster) -> JalaliDate:
        """Copy adjusted by adjuster (``adjuster.adjust_into(self)``)."""
        return adjuster.adjust_into(self)

    def with_year(self, year: int) -> JalaliDate:
        """Copy with the year replaced, clamping ESFAND 30 to 29 in common years.

        Raises:
            DateTimeRangeError: If year is out of range
        """
        ChronoField.YEAR.check_valid_value(require_int(year, "year"))
        return self._clamped(year, self.month)

    def with_month(self, month: int) -> JalaliDate:
        """Copy with the month replaced, clamping the day to the month length.

        Raises:
            DateTimeRangeError: If month is out of range
        """
        ChronoField.MONTH_OF_YEAR.check_valid_value(require_int(month, "month"))
        return self._clamped(self.year, month)

    def with_day_of_month(self, day_of_month: int) -> JalaliDate:
        """Copy with the day-of-month replaced.

        Raises:
            DateTimeRangeError: If the day does not exist in this month
        """
        if self.day == day_of_month:
            return self
        return JalaliDate(self.year, self.month, day_of_month)

    def with_day_of_year(self, day_of_year: int) -> JalaliDate:
        """Copy with the day-of-year replaced.

        Raises:
            DateTimeRangeError: If the day does not exist in this year
        """
        if self.day_of_year == day_of_year:
            return self
        return JalaliDate.of_year_day(self.year, day_of_year)

    def _clamped(self, year: int, month: int) -> JalaliDate:
        day = min(self.day, JALALI.month_length(year, month))
        if (year, month, day) == (self.year, self.month, self.day):
            return self
        return JalaliDate(year, int(month), day)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def plus(self, amount: int, unit: ChronoUnit) -> JalaliDate:
        """Copy with amount of unit added.

        Raises:
            UnsupportedTemporalTypeError: If the unit is not supported
            ArithmeticOverflowError: If amount times the unit size overflows
            DateTimeRangeError: If the result leaves the supported range
        """
        check_long(require_int(amount, "amount"))
        if not self.is_supported_unit(unit):
            raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_unit(str(unit)))
        match unit:
            case ChronoUnit.DAYS:
                return self.plus_days(amount)
            case ChronoUnit.WEEKS:
                return self.plus_weeks(amount)
            case ChronoUnit.MONTHS:
                return self.plus_months(amount)
            case ChronoUnit.YEARS:
                return self.plus_years(amount)
            case ChronoUnit.DECADES:
                return self.plus_years(multiply_exact(amount, 10))
            case ChronoUnit.CENTURIES:
                return self.plus_years(multiply_exact(amount, 100))
            case ChronoUnit.MILLENNIA:
                return self.plus_years(multiply_exact(amount, 1000))
            case ChronoUnit.ERAS:
                return self.with_field(
                    ChronoField.ERA, add_exact(self.get_long(ChronoField.ERA), amount)
                )
            case _:
                raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_unit(str(unit)))

    def minus(self, amount: int, unit: ChronoUnit) -> JalaliDate:
        """Copy with amount of unit subtracted (LONG_MIN as LONG_MAX then 1)."""
        check_long(require_int(amount, "amount"))
        if amount == LONG_MIN:
            return self.plus(LONG_MAX, unit).plus(1, unit)
        return self.plus(-amount, unit)

    def plus_days(self, days: int) -> JalaliDate:
        """Copy with days added.

        Raises:
            ArithmeticOverflowError: If the epoch day overflows 64 bits
            DateTimeRangeError: If the result leaves the supported range
        """
        check_long(require_int(days, "days"))
        if days == 0:
            return self
        return JalaliDate.of_epoch_day(add_exact(self.to_epoch_day(), days))

    def plus_weeks(self, weeks: int) -> JalaliDate:
        """Copy with weeks added."""
        check_long(require_int(weeks, "weeks"))
        return self.plus_days(multiply_exact(weeks, DAYS_PER_WEEK))

    def plus_months(self, months: int) -> JalaliDate:
        """Copy with months added, clamping the day to the target month length.

        Raises:
            DateTimeRangeError: If the result leaves the year range
        """
        check_long(require_int(months, "months"))
        if months == 0:
            return self
        calc_months = self.proleptic_month + months
        new_year = ChronoField.YEAR.check_valid_int_value(calc_months // MONTHS_PER_YEAR)
        return self._clamped(new_year, calc_months % MONTHS_PER_YEAR + 1)

    def plus_years(self, years: int) -> JalaliDate:
        """Copy with years added, clamping ESFAND 30 in common years.

        Raises:
            DateTimeRangeError: If the result leaves the year range
        """
        check_long(require_int(years, "years"))
        if years == 0:
            return self
        new_year = ChronoField.YEAR.check_valid_int_value(self.year + years)
        return self._clamped(new_year, self.month)

    def minus_days(self, days: int) -> JalaliDate:
        """Copy with days subtracted."""
        check_long(require_int(days, "days"))
        if days == LONG_MIN:
            return self.plus_days(LONG_MAX).plus_days(1)
        return self.plus_days(-days)

    def minus_weeks(self, weeks: int) -> JalaliDate:
        """Copy with weeks subtracted."""
        check_long(require_int(weeks, "weeks"))
        if weeks == LONG_MIN:
            return self.plus_weeks(LONG_MAX).plus_weeks(1)
        return self.plus_weeks(-weeks)

    def minus_months(self, months: int) -> JalaliDate:
        """Copy with months subtracted."""
        check_long(require_int(months, "months"))
        if months == LONG_MIN:
            return self.plus_months(LONG_MAX).plus_months(1)
        return self.plus_months(-months)

    def minus_years(self, years: int) -> JalaliDate:
        """Copy with years subtracted."""
        check_long(require_int(years, "years"))
        if years == LONG_MIN:
            return self.plus_years(LONG_MAX).plus_years(1)
        return self.plus_years(-years)

    def until(self, end_exclusive: object, unit: ChronoUnit) -> int:
        """Whole units from this date to end_exclusive, truncated toward zero.

        Days and weeks count epoch days. Month-based units count months
        completed: 1403-01-31 to 1403-02-30 is 0 months.

        Raises:
            TemporalConversionError: If end_exclusive is not convertible
            UnsupportedTemporalTypeError: If the unit is not supported
        """
        end = JalaliDate.from_temporal(end_exclusive)
        if not self.is_supported_unit(unit):
            raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_unit(str(unit)))
        match unit:
            case ChronoUnit.DAYS:
                return end.to_epoch_day() - self.to_epoch_day()
            case ChronoUnit.WEEKS:
                return truncating_div(end.to_epoch_day() - self.to_epoch_day(), DAYS_PER_WEEK)
            case (
                ChronoUnit.MONTHS
                | ChronoUnit.YEARS
                | ChronoUnit.DECADES
                | ChronoUnit.CENTURIES
                | ChronoUnit.MILLENNIA
            ):
                return truncating_div(self._months_until(end), unit.month_count)
            case ChronoUnit.ERAS:
                return end.get_long(ChronoField.ERA) - self.get_long(ChronoField.ERA)
            case _:
                raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_unit(str(unit)))

    def _months_until(self, end: JalaliDate) -> int:
        start_packed = self.proleptic_month * _DAY_SLOTS_PER_MONTH + self.day
        end_packed = end.proleptic_month * _DAY_SLOTS_PER_MONTH + end.day
        return truncating_div(end_packed - start_packed, _DAY_SLOTS_PER_MONTH)

    # ------------------------------------------------------------------
    # Adjustment, comparison and text
    # ------------------------------------------------------------------

    def adjust_into(self, temporal: T) -> T:
        """Move temporal to this day, in temporal's own calendar.

        ``datetime.date`` targets get the Gregorian date back; ``datetime``
        targets keep their time of day.
        """
        if isinstance(temporal, datetime):
            gregorian = self.to_gregorian()
            return cast(
                T,
                temporal.replace(year=gregorian.year, month=gregorian.month, day=gregorian.day),
            )
        if isinstance(temporal, date):
            return cast(T, self.to_gregorian())
        return cast(T, temporal.with_field(ChronoField.EPOCH_DAY, self.to_epoch_day()))

    def compare_to(self, other: JalaliDate) -> int:
        """Negative, zero or positive as this is before, equal to or after other."""
        return (self.year - other.year) or (self.month - other.month) or (self.day - other.day)

    def is_before(self, other: JalaliDate) -> bool:
        return self.compare_to(other) < 0

    def is_after(self, other: JalaliDate) -> bool:
        return self.compare_to(other) > 0

    def is_equal(self, other: JalaliDate) -> bool:
        return self.compare_to(other) == 0

    def format(self, formatter: TemporalFormatter) -> str:
        """Render with formatter."""
        return formatter.format(self)

    def __str__(self) -> str:
        return format_date(self.year, self.month, self.day)
