"""Capability protocols shared by every temporal value type.

A temporal exposes its chronology, the fields it supports, and field
access/mutation. Nothing else is required for cross-type conversion:
``JalaliYearMonth.from_temporal`` reads year and month-of-year,
``JalaliDate.from_temporal`` reads epoch-day, and ``adjust_into`` writes
a field back with ``with_field``.

Python 3.11+.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

from .fields import ChronoField

if TYPE_CHECKING:
    from jalalidate.chrono.chronology import Chronology

__all__ = [
    "Clock",
    "Temporal",
    "TemporalAccessor",
    "TemporalAdjuster",
    "TemporalFormatter",
]

T = TypeVar("T", bound="Temporal")


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
@runtime_checkable
class TemporalAccessor(Protocol):
    """Read-only access to the fields of a temporal value."""

    @property
    def chronology(self) -> Chronology:
        """Calendar system the value belongs to."""
        ...

    def is_supported(self, field: ChronoField) -> bool:
        """True if the field can be read from this value."""
        ...

    def get(self, field: ChronoField) -> int:
        """Field value as a 32-bit int."""
        ...

    def get_long(self, field: ChronoField) -> int:
        """Field value as a 64-bit int."""
        ...


@runtime_checkable
class Temporal(TemporalAccessor, Protocol):
    """Temporal value that can produce an adjusted copy of itself."""

    def with_field(self, field: ChronoField, new_value: int) -> Temporal:
        """Copy of this value with one field replaced."""
        ...


class TemporalAdjuster(Protocol):
    """Strategy that adjusts a temporal, e.g. a year-month setting its month."""

    def adjust_into(self, temporal: T) -> T:
        """Return an adjusted copy of temporal of the same type."""
        ...


class Clock(Protocol):
    """Source of the current date.

    Value types never read the wall clock themselves; ``now(clock)`` asks
    the clock. See ``jalalidate.chrono.clock`` for implementations.
    """

    def today(self) -> date:
        """Current ISO date."""
        ...


class TemporalFormatter(Protocol):
    """Formats temporals to text and parses text to field values."""

    def format(self, temporal: TemporalAccessor) -> str:
        """Render the fields of temporal."""
        ...

    def parse(self, text: str) -> Mapping[ChronoField, int]:
        """Decode text into field values for a value type to resolve."""
        ...
