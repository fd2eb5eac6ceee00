"""Jalali year-month value type.

``JalaliYearMonth`` is an immutable (year, month) pair implementing the
field/unit protocol:

    fields: month-of-year, proleptic-month, year-of-era, year, era
    units:  months, years, decades, centuries, millennia, eras

Month arithmetic runs on the proleptic month (``year * 12 + month - 1``),
a total order over year-months. Amounts are checked against the signed
64-bit range and unit multiplications go through ``multiply_exact``, so an
overflowing amount fails with ArithmeticOverflowError before any range
check, and an in-range amount that leaves the year bounds fails with
DateTimeRangeError.

Thread-safe: instances are immutable and share no state.

Python 3.11+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar, cast

from jalalidate.chrono.chronology import JALALI
from jalalidate.chrono.era import JalaliEra
from jalalidate.chrono.iso import coerce_temporal
from jalalidate.chrono.month import JalaliMonth
from jalalidate.constants import MAX_YEAR, MONTHS_PER_YEAR
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
    ChronologyMismatchError,
    DateTimeError,
    DateTimeParseError,
    ErrorTemplate,
    TemporalConversionError,
    UnsupportedTemporalTypeError,
)
from jalalidate.temporal import ChronoField, ChronoUnit
from jalalidate.text.canonical import build_parsed, format_year_month, parse_year_month
from jalalidate.text.pattern import resolve_year

if TYPE_CHECKING:
    from collections.abc import Mapping

    from jalalidate.chrono.chronology import JalaliChronology
    from jalalidate.chrono.date import JalaliDate
    from jalalidate.temporal import Clock, Temporal, TemporalAdjuster, TemporalFormatter

__all__ = ["JalaliYearMonth"]

T = TypeVar("T", bound="Temporal")

_SUPPORTED_FIELDS: frozenset[ChronoField] = frozenset(
    {
        ChronoField.MONTH_OF_YEAR,
        ChronoField.PROLEPTIC_MONTH,
        ChronoField.YEAR_OF_ERA,
        ChronoField.YEAR,
        ChronoField.ERA,
    }
)

_SUPPORTED_UNITS: frozenset[ChronoUnit] = frozenset(
    {
        ChronoUnit.MONTHS,
        ChronoUnit.YEARS,
        ChronoUnit.DECADES,
        ChronoUnit.CENTURIES,
        ChronoUnit.MILLENNIA,
        ChronoUnit.ERAS,
    }
)


@dataclass(frozen=True, slots=True, order=True)
class JalaliYearMonth:
    """A year and month in the Jalali calendar, such as ``1403-07``.

    Equality, hashing and ordering are structural over (year, month).

    Attributes:
        year: Proleptic year, MIN_YEAR to MAX_YEAR
        month: Month-of-year, 1 (FARVARDIN) to 12 (ESFAND)

    Example:
        >>> ym = JalaliYearMonth.of(1400, 1)
        >>> ym.minus_months(1)
        JalaliYearMonth(year=1399, month=12)
        >>> ym.with_field(ChronoField.ERA, 0).year
        -1399
        >>> str(JalaliYearMonth.of(10000, 1))
        '+10000-01'
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        """Validate and normalize the components.

        Raises:
            TypeError: If a component is not an int
            DateTimeRangeError: If year or month is out of range
        """
        require_int(self.year, "year")
        require_int(self.month, "month")
        ChronoField.YEAR.check_valid_value(self.year)
        ChronoField.MONTH_OF_YEAR.check_valid_value(self.month)
        if type(self.month) is not int:
            object.__setattr__(self, "month", int(self.month))

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, year: int, month: int | JalaliMonth) -> JalaliYearMonth:
        """Validated year-month.

        Raises:
            DateTimeRangeError: If year or month is out of range
        """
        return cls(year, month)

    @classmethod
    def from_temporal(cls, temporal: object) -> JalaliYearMonth:
        """Year-month of any temporal.

        Jalali temporals are read through year and month-of-year; anything
        else (including ``datetime.date``) is converted through JalaliDate.

        Raises:
            TemporalConversionError: If the year-month cannot be obtained
        """
        if isinstance(temporal, JalaliYearMonth):
            return temporal
        from jalalidate.chrono.date import JalaliDate  # noqa: PLC0415 - circular

        accessor = coerce_temporal(temporal, cls.__name__)
        try:
            if accessor.chronology != JALALI:
                accessor = JalaliDate.from_temporal(accessor)
            return cls.of(
                accessor.get(ChronoField.YEAR), accessor.get(ChronoField.MONTH_OF_YEAR)
            )
        except DateTimeError as e:
            raise TemporalConversionError(
                ErrorTemplate.conversion_failed(cls.__name__, temporal)
            ) from e

    @classmethod
    def parse(cls, text: str, formatter: TemporalFormatter | None = None) -> JalaliYearMonth:
        """Parse canonical ``[sign]YYYY-MM`` text, or text in formatter's layout.

        Raises:
            DateTimeParseError: If text is malformed or decodes to an invalid
                year-month
        """
        if formatter is None:
            return build_parsed(text, cls.of, *parse_year_month(text))
        return build_parsed(text, cls._from_fields, text, formatter.parse(text))

    @classmethod
    def _from_fields(cls, text: str, fields: Mapping[ChronoField, int]) -> JalaliYearMonth:
        year = resolve_year(fields)
        month = fields.get(ChronoField.MONTH_OF_YEAR)
        if ChronoField.PROLEPTIC_MONTH in fields and (year is None or month is None):
            year, remainder = divmod(fields[ChronoField.PROLEPTIC_MONTH], MONTHS_PER_YEAR)
            month = remainder + 1
        if year is None or month is None:
            raise DateTimeParseError(
                ErrorTemplate.parse_fields_unresolved(text, cls.__name__),
                input_value=text,
            )
        return cls.of(year, month)

    @classmethod
    def now(cls, clock: Clock) -> JalaliYearMonth:
        """Current year-month according to clock."""
        return cls.from_temporal(clock.today())

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
    def year_of_era(self) -> int:
        """Year counted within its era (year 0 is year 1 BEFORE)."""
        return self.era.year_of_era(self.year)

    @property
    def proleptic_month(self) -> int:
        """``year * 12 + month - 1``."""
        return self.year * MONTHS_PER_YEAR + self.month - 1

    def is_leap_year(self) -> bool:
        """True if the year is a leap year."""
        return JALALI.is_leap_year(self.year)

    def length_of_month(self) -> int:
        """Days in the month: 31, 30, or 29/30 for ESFAND."""
        return JALALI.month_length(self.year, self.month)

    def length_of_year(self) -> int:
        """Days in the year: 365 or 366."""
        return JALALI.year_length(self.year)

    def is_valid_day(self, day_of_month: int) -> bool:
        """True if day_of_month exists in this year-month."""
        return 1 <= day_of_month <= self.length_of_month()

    # ------------------------------------------------------------------
    # Field access
    # ------------------------------------------------------------------

    def is_supported(self, field: object) -> bool:
        """True for month-of-year, proleptic-month, year-of-era, year and era."""
        return isinstance(field, ChronoField) and field in _SUPPORTED_FIELDS

    def is_supported_unit(self, unit: object) -> bool:
        """True for months, years, decades, centuries, millennia and eras."""
        return isinstance(unit, ChronoUnit) and unit in _SUPPORTED_UNITS

    def range(self, field: ChronoField) -> ValueRange:
        """Valid range of a field; year-of-era depends on the era.

        Raises:
            UnsupportedTemporalTypeError: If the field is not supported
        """
        if field is ChronoField.YEAR_OF_ERA:
            return ValueRange.of(1, MAX_YEAR + 1 if self.year <= 0 else MAX_YEAR)
        if not self.is_supported(field):
            raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_field(str(field)))
        return JALALI.range(field)

    def get(self, field: ChronoField) -> int:
        """Field value, guaranteed to fit in 32 bits.

        Raises:
            UnsupportedTemporalTypeError: If the field is not supported, or
                its range does not fit 32 bits (proleptic-month)
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
            case ChronoField.MONTH_OF_YEAR:
                return self.month
            case ChronoField.PROLEPTIC_MONTH:
                return self.proleptic_month
            case ChronoField.YEAR_OF_ERA:
                return self.year_of_era
            case ChronoField.YEAR:
                return self.year
            case ChronoField.ERA:
                return int(self.era)
            case _:
                raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_field(str(field)))

    # ------------------------------------------------------------------
    # Field mutation
    # ------------------------------------------------------------------

    def with_field(self, field: ChronoField, new_value: int) -> JalaliYearMonth:
        """Copy with one field set.

        - month-of-year keeps the year
        - proleptic-month replaces both year and month
        - year-of-era keeps the era
        - era flips the year to the other side of year 1, keeping year-of-era

        Raises:
            UnsupportedTemporalTypeError: If the field is not supported
            DateTimeRangeError: If new_value is invalid for the field
        """
        require_int(new_value, "new_value")
        if not self.is_supported(field):
            raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_field(str(field)))
        match field:
            case ChronoField.MONTH_OF_YEAR:
                ChronoField.MONTH_OF_YEAR.check_valid_value(new_value)
                return self.with_month(new_value)
            case ChronoField.PROLEPTIC_MONTH:
                ChronoField.PROLEPTIC_MONTH.check_valid_value(new_value)
                return self.plus_months(new_value - self.proleptic_month)
            case ChronoField.YEAR_OF_ERA:
                ChronoField.YEAR_OF_ERA.check_valid_value(new_value)
                return self.with_year(new_value if self.year >= 1 else 1 - new_value)
            case ChronoField.YEAR:
                return self.with_year(new_value)
            case ChronoField.ERA:
                ChronoField.ERA.check_valid_value(new_value)
                if self.get_long(ChronoField.ERA) == new_value:
                    return self
                return self.with_year(1 - self.year)
            case _:
                raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_field(str(field)))

    def with_adjuster(self, adjuster: TemporalAdjuster) -> JalaliYearMonth:
        """Copy adjusted by adjuster (``adjuster.adjust_into(self)``)."""
        return adjuster.adjust_into(self)

    def with_year(self, year: int) -> JalaliYearMonth:
        """Copy with the year replaced.

        Raises:
            DateTimeRangeError: If year is out of range
        """
        ChronoField.YEAR.check_valid_value(require_int(year, "year"))
        return self._with(year, self.month)

    def with_month(self, month: int) -> JalaliYearMonth:
        """Copy with the month replaced.

        Raises:
            DateTimeRangeError: If month is out of range
        """
        ChronoField.MONTH_OF_YEAR.check_valid_value(require_int(month, "month"))
        return self._with(self.year, month)

    def _with(self, year: int, month: int) -> JalaliYearMonth:
        if self.year == year and self.month == month:
            return self
        return JalaliYearMonth(year, int(month))

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def plus(self, amount: int, unit: ChronoUnit) -> JalaliYearMonth:
        """Copy with amount of unit added.

        Raises:
            UnsupportedTemporalTypeError: If the unit is not supported
            ArithmeticOverflowError: If amount times the unit size overflows
            DateTimeRangeError: If the result leaves the year range
        """
        check_long(require_int(amount, "amount"))
        if not self.is_supported_unit(unit):
            raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_unit(str(unit)))
        match unit:
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

    def minus(self, amount: int, unit: ChronoUnit) -> JalaliYearMonth:
        """Copy with amount of unit subtracted.

        LONG_MIN cannot be negated in 64 bits, so it is applied as
        ``plus(LONG_MAX).plus(1)``.
        """
        check_long(require_int(amount, "amount"))
        if amount == LONG_MIN:
            return self.plus(LONG_MAX, unit).plus(1, unit)
        return self.plus(-amount, unit)

    def plus_months(self, months: int) -> JalaliYearMonth:
        """Copy with months added.

        Raises:
            DateTimeRangeError: If the result leaves the year range
        """
        check_long(require_int(months, "months"))
        if months == 0:
            return self
        calc_months = self.proleptic_month + months
        new_year = ChronoField.YEAR.check_valid_int_value(calc_months // MONTHS_PER_YEAR)
        return self._with(new_year, calc_months % MONTHS_PER_YEAR + 1)

    def plus_years(self, years: int) -> JalaliYearMonth:
        """Copy with years added.

        Raises:
            DateTimeRangeError: If the result leaves the year range
        """
        check_long(require_int(years, "years"))
        if years == 0:
            return self
        new_year = ChronoField.YEAR.check_valid_int_value(self.year + years)
        return self._with(new_year, self.month)

    def minus_months(self, months: int) -> JalaliYearMonth:
        """Copy with months subtracted."""
        check_long(require_int(months, "months"))
        if months == LONG_MIN:
            return self.plus_months(LONG_MAX).plus_months(1)
        return self.plus_months(-months)

    def minus_years(self, years: int) -> JalaliYearMonth:
        """Copy with years subtracted."""
        check_long(require_int(years, "years"))
        if years == LONG_MIN:
            return self.plus_years(LONG_MAX).plus_years(1)
        return self.plus_years(-years)

    def until(self, end_exclusive: object, unit: ChronoUnit) -> int:
        """Whole units from this year-month to end_exclusive.

        Negative if end_exclusive is earlier. Month-based units truncate
        toward zero; eras compare era values.

        Raises:
            TemporalConversionError: If end_exclusive is not convertible
            UnsupportedTemporalTypeError: If the unit is not supported
        """
        end = JalaliYearMonth.from_temporal(end_exclusive)
        months_until = end.proleptic_month - self.proleptic_month
        if not self.is_supported_unit(unit):
            raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_unit(str(unit)))
        match unit:
            case (
                ChronoUnit.MONTHS
                | ChronoUnit.YEARS
                | ChronoUnit.DECADES
                | ChronoUnit.CENTURIES
                | ChronoUnit.MILLENNIA
            ):
                return truncating_div(months_until, unit.month_count)
            case ChronoUnit.ERAS:
                return end.get_long(ChronoField.ERA) - self.get_long(ChronoField.ERA)
            case _:
                raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_unit(str(unit)))

    # ------------------------------------------------------------------
    # Combination and adjustment
    # ------------------------------------------------------------------

    def at_day(self, day_of_month: int) -> JalaliDate:
        """Date on day_of_month of this year-month.

        Raises:
            DateTimeRangeError: If the day does not exist in this year-month
        """
        from jalalidate.chrono.date import JalaliDate  # noqa: PLC0415 - circular

        return JalaliDate.of(self.year, self.month, day_of_month)

    def at_end_of_month(self) -> JalaliDate:
        """Last date of this year-month."""
        return self.at_day(self.length_of_month())

    def adjust_into(self, temporal: T) -> T:
        """Set temporal's proleptic-month to this year-month's.

        Raises:
            ChronologyMismatchError: If temporal is not a Jalali temporal
        """
        chronology = getattr(temporal, "chronology", None)
        if chronology != JALALI:
            raise ChronologyMismatchError(
                ErrorTemplate.chronology_mismatch(JALALI.id, str(chronology))
            )
        return cast(T, temporal.with_field(ChronoField.PROLEPTIC_MONTH, self.proleptic_month))

    # ------------------------------------------------------------------
    # Comparison and text
    # ------------------------------------------------------------------

    def compare_to(self, other: JalaliYearMonth) -> int:
        """Negative, zero or positive as this is before, equal to or after other."""
        return (self.year - other.year) or (self.month - other.month)

    def is_before(self, other: JalaliYearMonth) -> bool:
        return self.compare_to(other) < 0

    def is_after(self, other: JalaliYearMonth) -> bool:
        return self.compare_to(other) > 0

    def format(self, formatter: TemporalFormatter) -> str:
        """Render with formatter."""
        return formatter.format(self)

    def __str__(self) -> str:
        return format_year_month(self.year, self.month)
