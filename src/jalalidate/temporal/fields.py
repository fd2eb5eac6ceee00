"""Closed sets of temporal fields and units.

Fields and units are tags: a value type dispatches on them with ``match``
and raises UnsupportedTemporalTypeError for tags it does not handle.
StrEnum members are strings themselves: ``str(ChronoField.MONTH_OF_YEAR)``
is ``"month-of-year"``.

Python 3.11+.
"""

from __future__ import annotations

from enum import StrEnum

from jalalidate.constants import ISO_EPOCH_DAY_MAX, ISO_EPOCH_DAY_MIN, MAX_YEAR, MIN_YEAR
from jalalidate.core.value_range import ValueRange
from jalalidate.diagnostics import ErrorTemplate, UnsupportedTemporalTypeError

__all__ = ["ChronoField", "ChronoUnit"]


class ChronoField(StrEnum):
    """Field tag addressing one component of a temporal value."""

    DAY_OF_WEEK = "day-of-week"
    """ISO day-of-week, Monday (1) to Sunday (7)"""

    ALIGNED_WEEK_OF_MONTH = "aligned-week-of-month"
    """Week within the month, weeks starting on day 1, 8, 15, ..."""

    ALIGNED_WEEK_OF_YEAR = "aligned-week-of-year"
    """Week within the year, weeks starting on day 1, 8, 15, ..."""

    DAY_OF_MONTH = "day-of-month"
    DAY_OF_YEAR = "day-of-year"

    EPOCH_DAY = "epoch-day"
    """Days since 1970-01-01 ISO, shared by every calendar system"""

    MONTH_OF_YEAR = "month-of-year"

    PROLEPTIC_MONTH = "proleptic-month"
    """year * 12 + (month - 1), a total order over year-months"""

    YEAR_OF_ERA = "year-of-era"
    YEAR = "year"

    ERA = "era"
    """0 before the epoch year 1, 1 from year 1 on"""

    @property
    def base_unit(self) -> ChronoUnit:
        """Unit the field is measured in (day-of-month counts days)."""
        return _FIELD_UNITS[self]

    @property
    def is_date_based(self) -> bool:
        """True for every field here; time-of-day fields are not modelled."""
        return True

    def range(self) -> ValueRange:
        """Outer range of the field across all supported calendars.

        Calendar-specific narrowing is available from ``Chronology.range``.
        """
        return _FIELD_RANGES[self]

    def check_valid_value(self, value: int) -> int:
        """Validate value against the outer range.

        Raises:
            DateTimeRangeError: If value is outside the outer range
        """
        return _FIELD_RANGES[self].check_valid_value(value, self)

    def check_valid_int_value(self, value: int) -> int:
        """Validate value against the outer range and the 32-bit range.

        Raises:
            DateTimeRangeError: If value is invalid or the field is not int-valued
        """
        return _FIELD_RANGES[self].check_valid_int_value(value, self)


_FIELD_RANGES: dict[ChronoField, ValueRange] = {
    ChronoField.DAY_OF_WEEK: ValueRange.of(1, 7),
    ChronoField.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, 4, 5),
    ChronoField.ALIGNED_WEEK_OF_YEAR: ValueRange.of(1, 53),
    ChronoField.DAY_OF_MONTH: ValueRange.of(1, 28, 31),
    ChronoField.DAY_OF_YEAR: ValueRange.of(1, 365, 366),
    ChronoField.EPOCH_DAY: ValueRange.of(ISO_EPOCH_DAY_MIN, ISO_EPOCH_DAY_MAX),
    ChronoField.MONTH_OF_YEAR: ValueRange.of(1, 12),
    ChronoField.PROLEPTIC_MONTH: ValueRange.of(MIN_YEAR * 12, MAX_YEAR * 12 + 11),
    ChronoField.YEAR_OF_ERA: ValueRange.of(1, MAX_YEAR, MAX_YEAR + 1),
    ChronoField.YEAR: ValueRange.of(MIN_YEAR, MAX_YEAR),
    ChronoField.ERA: ValueRange.of(0, 1),
}


class ChronoUnit(StrEnum):
    """Unit tag for plus/minus/until arithmetic."""

    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"
    DECADES = "decades"
    CENTURIES = "centuries"
    MILLENNIA = "millennia"
    ERAS = "eras"

    @property
    def is_month_based(self) -> bool:
        """True for units measured in whole months (months through millennia)."""
        return self in _UNIT_MONTHS

    @property
    def month_count(self) -> int:
        """Number of months in one unit.

        Raises:
            UnsupportedTemporalTypeError: For day-based units and eras
        """
        try:
            return _UNIT_MONTHS[self]
        except KeyError:
            raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_unit(self)) from None

    @property
    def is_date_based(self) -> bool:
        """True for every unit here; time-based units are not modelled."""
        return True

    @property
    def day_count(self) -> int | None:
        """Number of days in one unit, or None if the unit is not day-based."""
        return _UNIT_DAYS.get(self)


_UNIT_MONTHS: dict[ChronoUnit, int] = {
    ChronoUnit.MONTHS: 1,
    ChronoUnit.YEARS: 12,
    ChronoUnit.DECADES: 120,
    ChronoUnit.CENTURIES: 1200,
    ChronoUnit.MILLENNIA: 12000,
}

_UNIT_DAYS: dict[ChronoUnit, int] = {
    ChronoUnit.DAYS: 1,
    ChronoUnit.WEEKS: 7,
}

_FIELD_UNITS: dict[ChronoField, ChronoUnit] = {
    ChronoField.DAY_OF_WEEK: ChronoUnit.DAYS,
    ChronoField.ALIGNED_WEEK_OF_MONTH: ChronoUnit.WEEKS,
    ChronoField.ALIGNED_WEEK_OF_YEAR: ChronoUnit.WEEKS,
    ChronoField.DAY_OF_MONTH: ChronoUnit.DAYS,
    ChronoField.DAY_OF_YEAR: ChronoUnit.DAYS,
    ChronoField.EPOCH_DAY: ChronoUnit.DAYS,
    ChronoField.MONTH_OF_YEAR: ChronoUnit.MONTHS,
    ChronoField.PROLEPTIC_MONTH: ChronoUnit.MONTHS,
    ChronoField.YEAR_OF_ERA: ChronoUnit.YEARS,
    ChronoField.YEAR: ChronoUnit.YEARS,
    ChronoField.ERA: ChronoUnit.ERAS,
}
