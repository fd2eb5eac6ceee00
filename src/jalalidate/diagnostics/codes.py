"""Diagnostic codes and data structures.

Defines error codes and the diagnostic record carried by every jalalidate
exception.

Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization derived from the diagnostic code block.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        RANGE: Value outside a field's valid bounds
        UNSUPPORTED: Field or unit not supported by the value type
        PARSE: Text does not match the pattern or decodes to an invalid value
        ARITHMETIC: Checked arithmetic left the 64-bit range
        CHRONOLOGY: Cross-calendar adjustment or conversion failure
    """

    RANGE = "range"
    UNSUPPORTED = "unsupported"
    PARSE = "parse"
    ARITHMETIC = "arithmetic"
    CHRONOLOGY = "chronology"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Range errors (field value out of bounds, invalid dates)
        2000-2999: Unsupported field/unit errors
        3000-3999: Parse errors (canonical and pattern text)
        4000-4999: Arithmetic overflow errors
        5000-5999: Chronology mismatch and conversion errors
    """

    # Range errors (1000-1999)
    VALUE_OUT_OF_RANGE = 1001
    INVALID_INT_VALUE = 1002
    INVALID_DATE = 1003
    INVALID_DAY_OF_YEAR = 1004
    GREGORIAN_OUT_OF_RANGE = 1005

    # Unsupported errors (2000-2999)
    UNSUPPORTED_FIELD = 2001
    UNSUPPORTED_UNIT = 2002
    FIELD_TOO_LARGE_FOR_INT = 2003
    UNSUPPORTED_PATTERN_LETTER = 2004

    # Parse errors (3000-3999)
    PARSE_TEXT_MISMATCH = 3001
    PARSE_SIGN_INVALID = 3002
    PARSE_VALUE_INVALID = 3003
    PARSE_FIELDS_UNRESOLVED = 3004

    # Arithmetic errors (4000-4999)
    ARITHMETIC_OVERFLOW = 4001

    # Chronology errors (5000-5999)
    CHRONOLOGY_MISMATCH = 5001
    CONVERSION_FAILED = 5002

    @property
    def category(self) -> ErrorCategory:
        """Category implied by the code's thousands block."""
        return _CATEGORY_BY_BLOCK[self.value // 1000]


_CATEGORY_BY_BLOCK: dict[int, ErrorCategory] = {
    1: ErrorCategory.RANGE,
    2: ErrorCategory.UNSUPPORTED,
    3: ErrorCategory.PARSE,
    4: ErrorCategory.ARITHMETIC,
    5: ErrorCategory.CHRONOLOGY,
}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        field_name: Temporal field or unit involved (if any)
        input_value: Offending value or text, already rendered as a string
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    field_name: str | None = None
    input_value: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Example output:
            error[VALUE_OUT_OF_RANGE]: Invalid value for month-of-year (valid values 1 - 12): 13
              = field: month-of-year
              = value: 13

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
