"""ISO (proleptic Gregorian) interchange date.

``IsoDate`` implements the same field protocol as the Jalali types, so
cross-calendar conversion goes through epoch-day without type inspection.
``coerce_temporal`` adapts ``datetime.date`` and ``datetime.datetime``
inputs to ``IsoDate`` wherever a temporal is accepted.

Python 3.11+.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from jalalidate.chrono.chronology import ISO
from jalalidate.core.arithmetic import require_int
from jalalidate.diagnostics import (
    DateTimeError,
    DateTimeRangeError,
    ErrorTemplate,
    TemporalConversionError,
    UnsupportedTemporalTypeError,
)
from jalalidate.temporal import ChronoField, TemporalAccessor
from jalalidate.text.canonical import format_date

if TYPE_CHECKING:
    from jalalidate.chrono.chronology import IsoChronology
    from jalalidate.core.value_range import ValueRange

__all__ = ["IsoDate", "coerce_temporal", "date_of_epoch_day", "epoch_day_of"]

# Proleptic ordinal (datetime.date.toordinal) of 1970-01-01.
_EPOCH_ORDINAL: int = 719_163

_SUPPORTED_FIELDS: frozenset[ChronoField] = frozenset(
    {
        ChronoField.DAY_OF_WEEK,
        ChronoField.DAY_OF_MONTH,
        ChronoField.DAY_OF_YEAR,
        ChronoField.EPOCH_DAY,
        ChronoField.MONTH_OF_YEAR,
        ChronoField.PROLEPTIC_MONTH,
        ChronoField.YEAR_OF_ERA,
        ChronoField.YEAR,
        ChronoField.ERA,
    }
)


@dataclass(frozen=True, slots=True, order=True)
class IsoDate:
    """Proleptic Gregorian date over the full supported year range.

    Unlike ``datetime.date`` it covers years -999,999,999 to 999,999,999,
    the image of every Jalali date.

    Example:
        >>> IsoDate.of_epoch_day(19802)
        IsoDate(year=2024, month=3, day=20)
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        """Validate the date.

        Raises:
            TypeError: If a component is not an int
            DateTimeRangeError: If the date is not valid
        """
        require_int(self.year, "year")
        require_int(self.month, "month")
        require_int(self.day, "day")
        ISO.date_to_epoch_day(self.year, self.month, self.day)

    @classmethod
    def of(cls, year: int, month: int, day: int) -> IsoDate:
        """Validated ISO date."""
        return cls(year, month, day)

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> IsoDate:
        """ISO date of an epoch day.

        Raises:
            DateTimeRangeError: If epoch_day is outside the supported range
        """
        return cls(*ISO.epoch_day_to_date(require_int(epoch_day, "epoch_day")))

    @classmethod
    def from_date(cls, value: date) -> IsoDate:
        """Adapt a ``datetime.date`` (or the date part of a ``datetime``)."""
        return cls(value.year, value.month, value.day)

    @classmethod
    def from_temporal(cls, temporal: object) -> IsoDate:
        """ISO date of any temporal exposing epoch-day.

        Raises:
            TemporalConversionError: If no epoch day can be obtained
        """
        accessor = coerce_temporal(temporal, cls.__name__)
        if isinstance(accessor, IsoDate):
            return accessor
        try:
            return cls.of_epoch_day(accessor.get_long(ChronoField.EPOCH_DAY))
        except DateTimeError as e:
            raise TemporalConversionError(
                ErrorTemplate.conversion_failed(cls.__name__, temporal)
            ) from e

    @property
    def chronology(self) -> IsoChronology:
        """The ISO chronology."""
        return ISO

    def to_epoch_day(self) -> int:
        """Days since 1970-01-01."""
        return ISO.date_to_epoch_day(self.year, self.month, self.day)

    def to_date(self) -> date:
        """Convert to ``datetime.date``.

        Raises:
            DateTimeRangeError: If the year is outside 1-9999
        """
        return date_of_epoch_day(self.to_epoch_day())

    @property
    def day_of_year(self) -> int:
        """Day within the year, 1-366."""
        return self.to_epoch_day() - ISO.date_to_epoch_day(self.year, 1, 1) + 1

    def is_supported(self, field: object) -> bool:
        """True for the nine date fields this type exposes."""
        return isinstance(field, ChronoField) and field in _SUPPORTED_FIELDS

    def range(self, field: ChronoField) -> ValueRange:
        """Valid range of a field for this date."""
        if not self.is_supported(field):
            raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_field(str(field)))
        return ISO.range(field)

    def get(self, field: ChronoField) -> int:
        """Field value as a 32-bit int.

        Raises:
            UnsupportedTemporalTypeError: For unsupported fields, and for
                fields whose range does not fit 32 bits
        """
        value_range = self.range(field)
        if not value_range.is_int_value:
            raise UnsupportedTemporalTypeError(ErrorTemplate.field_too_large_for_int(str(field)))
        return self.get_long(field)

    def get_long(self, field: ChronoField) -> int:
        """Field value."""
        if not self.is_supported(field):
            raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_field(str(field)))
        match field:
            case ChronoField.DAY_OF_WEEK:
                return (self.to_epoch_day() + 3) % 7 + 1
            case ChronoField.DAY_OF_MONTH:
                return self.day
            case ChronoField.DAY_OF_YEAR:
                return self.day_of_year
            case ChronoField.EPOCH_DAY:
                return self.to_epoch_day()
            case ChronoField.MONTH_OF_YEAR:
                return self.month
            case ChronoField.PROLEPTIC_MONTH:
                return self.year * 12 + self.month - 1
            case ChronoField.YEAR_OF_ERA:
                return self.year if self.year >= 1 else 1 - self.year
            case ChronoField.YEAR:
                return self.year
            case ChronoField.ERA:
                return 1 if self.year >= 1 else 0
            case _:
                raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_field(str(field)))

    def with_field(self, field: ChronoField, new_value: int) -> IsoDate:
        """Copy with one field replaced; day-of-month is clamped for year/month.

        Raises:
            UnsupportedTemporalTypeError: For fields other than epoch-day,
                year, month-of-year and day-of-month
            DateTimeRangeError: If new_value is invalid for the field
        """
        require_int(new_value, "new_value")
        if not self.is_supported(field):
            raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_field(str(field)))
        match field:
            case ChronoField.EPOCH_DAY:
                return IsoDate.of_epoch_day(new_value)
            case ChronoField.YEAR:
                ChronoField.YEAR.check_valid_value(new_value)
                return self._clamped(new_value, self.month)
            case ChronoField.MONTH_OF_YEAR:
                ChronoField.MONTH_OF_YEAR.check_valid_value(new_value)
                return self._clamped(self.year, new_value)
            case ChronoField.DAY_OF_MONTH:
                return IsoDate(self.year, self.month, new_value)
            case _:
                raise UnsupportedTemporalTypeError(ErrorTemplate.unsupported_field(str(field)))

    def _clamped(self, year: int, month: int) -> IsoDate:
        return IsoDate(year, month, min(self.day, ISO.month_length(year, month)))

    def __str__(self) -> str:
        return format_date(self.year, self.month, self.day)


def coerce_temporal(value: object, target: str) -> TemporalAccessor:
    """Return value as a temporal, adapting ``datetime.date``/``datetime``.

    Args:
        value: Candidate temporal
        target: Name of the type being built, for the error message

    Raises:
        TemporalConversionError: If value is neither a temporal nor a date
    """
    if isinstance(value, date):
        return IsoDate.from_date(value)
    if isinstance(value, TemporalAccessor):
        return value
    raise TemporalConversionError(ErrorTemplate.conversion_failed(target, value))


def epoch_day_of(value: date) -> int:
    """Epoch day of a ``datetime.date``."""
    return value.toordinal() - _EPOCH_ORDINAL


def date_of_epoch_day(epoch_day: int) -> date:
    """``datetime.date`` of an epoch day.

    Raises:
        DateTimeRangeError: If the day is outside years 1-9999
    """
    ordinal = epoch_day + _EPOCH_ORDINAL
    if not date.min.toordinal() <= ordinal <= date.max.toordinal():
        raise DateTimeRangeError(ErrorTemplate.gregorian_out_of_range(epoch_day))
    return date.fromordinal(ordinal)
