"""Valid bounds of a temporal field.

A range has a fixed minimum and a maximum that may vary with context:
day-of-month runs 1 - 29/31 because the smallest month has 29 days and the
largest 31. Value types narrow the range (``JalaliYearMonth.range``) when
the context is known.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from jalalidate.core.arithmetic import INT_MAX, INT_MIN
from jalalidate.diagnostics import DateTimeRangeError, ErrorTemplate

__all__ = ["ValueRange"]


@dataclass(frozen=True, slots=True)
class ValueRange:
    """Immutable (min, largest_minimum, smallest_maximum, max) bounds.

    Attributes:
        minimum: Smallest possible minimum
        largest_minimum: Largest possible minimum
        smallest_maximum: Smallest possible maximum
        maximum: Largest possible maximum

    Example:
        >>> ValueRange.of(1, 29, 31).is_valid_value(30)
        True
        >>> str(ValueRange.of(1, 29, 31))
        '1 - 29/31'
    """

    minimum: int
    largest_minimum: int
    smallest_maximum: int
    maximum: int

    def __post_init__(self) -> None:
        """Validate bound ordering.

        Raises:
            ValueError: If the bounds are not ordered
        """
        if self.minimum > self.largest_minimum:
            msg = "Smallest minimum value must be less than largest minimum value"
            raise ValueError(msg)
        if self.smallest_maximum > self.maximum:
            msg = "Smallest maximum value must be less than largest maximum value"
            raise ValueError(msg)
        if self.largest_minimum > self.maximum:
            msg = "Minimum value must be less than maximum value"
            raise ValueError(msg)

    @classmethod
    def of(cls, minimum: int, maximum: int, largest_maximum: int | None = None) -> ValueRange:
        """Create a range with a fixed minimum.

        ``of(1, 12)`` is fixed; ``of(1, 29, 31)`` has a variable maximum.
        """
        if largest_maximum is None:
            return cls(minimum, minimum, maximum, maximum)
        return cls(minimum, minimum, maximum, largest_maximum)

    @property
    def is_fixed(self) -> bool:
        """True if both minimum and maximum are fixed."""
        return self.minimum == self.largest_minimum and self.smallest_maximum == self.maximum

    @property
    def is_int_value(self) -> bool:
        """True if every value in the range fits a signed 32-bit int."""
        return self.minimum >= INT_MIN and self.maximum <= INT_MAX

    def is_valid_value(self, value: int) -> bool:
        """Check value against the outer bounds."""
        return self.minimum <= value <= self.maximum

    def is_valid_int_value(self, value: int) -> bool:
        """Check value against the outer bounds and the 32-bit range."""
        return self.is_int_value and self.is_valid_value(value)

    def check_valid_value(self, value: int, field: object) -> int:
        """Return value if valid for field.

        Raises:
            DateTimeRangeError: If value is outside the range
        """
        if not self.is_valid_value(value):
            raise DateTimeRangeError(ErrorTemplate.value_out_of_range(str(field), value, str(self)))
        return value

    def check_valid_int_value(self, value: int, field: object) -> int:
        """Return value if valid for field and within 32 bits.

        Raises:
            DateTimeRangeError: If value is outside the range or the range
                is not an int range
        """
        if not self.is_int_value:
            raise DateTimeRangeError(ErrorTemplate.invalid_int_value(str(field), value))
        return self.check_valid_value(value, field)

    def __str__(self) -> str:
        parts = [str(self.minimum)]
        if self.minimum != self.largest_minimum:
            parts.append(f"/{self.largest_minimum}")
        parts.append(f" - {self.smallest_maximum}")
        if self.smallest_maximum != self.maximum:
            parts.append(f"/{self.maximum}")
        return "".join(parts)
