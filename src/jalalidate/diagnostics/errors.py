"""jalalidate exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Hierarchy:
    JalaliError (base)
    ├─ DateTimeError
    │  ├─ DateTimeRangeError (value outside a field's valid bounds)
    │  ├─ UnsupportedTemporalTypeError (field/unit not supported)
    │  ├─ DateTimeParseError (text does not decode to a valid value)
    │  ├─ ChronologyMismatchError (adjustment across calendars)
    │  └─ TemporalConversionError (value cannot be obtained from a temporal)
    └─ ArithmeticOverflowError (checked arithmetic overflow)

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ArithmeticOverflowError",
    "ChronologyMismatchError",
    "DateTimeError",
    "DateTimeParseError",
    "DateTimeRangeError",
    "JalaliError",
    "TemporalConversionError",
    "UnsupportedTemporalTypeError",
]


class JalaliError(Exception):
    """Base exception for all jalalidate errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize JalaliError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class DateTimeError(JalaliError):
    """Calendar validation or calculation failure.

    These are deterministic failures: retrying the same call fails again.
    """


class DateTimeRangeError(DateTimeError):
    """Value outside the valid bounds of a field.

    Examples:
    - Month 13
    - Day 30 of ESFAND in a common year
    - Year arithmetic past MAX_YEAR
    """


class UnsupportedTemporalTypeError(DateTimeError):
    """Field or unit not supported by the value type.

    Also raised when a field value cannot be returned by ``get()`` because
    its range does not fit in 32 bits (use ``get_long()`` instead).
    """


class DateTimeParseError(DateTimeError):
    """Text could not be parsed.

    Attributes:
        input_value: The text that failed to parse
        error_index: Character offset where parsing failed
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        error_index: int = 0,
    ) -> None:
        """Initialize DateTimeParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The text that failed to parse
            error_index: Character offset where parsing failed
        """
        super().__init__(message)
        self.input_value = input_value
        self.error_index = error_index


class ChronologyMismatchError(DateTimeError):
    """Adjustment attempted against a value from a different calendar system."""


class TemporalConversionError(DateTimeError):
    """A value type could not be obtained from the given temporal."""


class ArithmeticOverflowError(JalaliError, ArithmeticError):
    """Checked arithmetic left the signed 64-bit range.

    Raised before any range validation applies, e.g. when multiplying a
    decade count by ten overflows.
    """
