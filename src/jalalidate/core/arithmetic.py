"""Checked fixed-width integer arithmetic.

Python integers never overflow, so amounts handed to the calendar types
could silently grow past any meaningful bound. Every multiply/add on a
caller-supplied amount goes through these helpers, which fail with
ArithmeticOverflowError instead of producing an out-of-range result.

Python 3.11+. Zero external dependencies.
"""

from jalalidate.diagnostics import ArithmeticOverflowError, ErrorTemplate

__all__ = [
    "INT_MAX",
    "INT_MIN",
    "LONG_MAX",
    "LONG_MIN",
    "add_exact",
    "check_long",
    "multiply_exact",
    "require_int",
    "subtract_exact",
    "to_int_exact",
    "truncating_div",
]

LONG_MIN: int = -(2**63)
LONG_MAX: int = 2**63 - 1
INT_MIN: int = -(2**31)
INT_MAX: int = 2**31 - 1


def require_int(value: object, name: str) -> int:
    """Return value if it is a plain int.

    bool is rejected even though it subclasses int: ``plus(True, MONTHS)``
    is always a caller bug.

    Raises:
        TypeError: If value is not an int, or is a bool
    """
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be int, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def check_long(value: int) -> int:
    """Return value if it fits in a signed 64-bit integer.

    Raises:
        ArithmeticOverflowError: If value is outside [LONG_MIN, LONG_MAX]
    """
    if value < LONG_MIN or value > LONG_MAX:
        raise ArithmeticOverflowError(ErrorTemplate.arithmetic_overflow("long", value, 0))
    return value


def add_exact(left: int, right: int) -> int:
    """Add two 64-bit values, failing on overflow."""
    result = left + right
    if result < LONG_MIN or result > LONG_MAX:
        raise ArithmeticOverflowError(ErrorTemplate.arithmetic_overflow("add", left, right))
    return result


def subtract_exact(left: int, right: int) -> int:
    """Subtract two 64-bit values, failing on overflow."""
    result = left - right
    if result < LONG_MIN or result > LONG_MAX:
        raise ArithmeticOverflowError(ErrorTemplate.arithmetic_overflow("subtract", left, right))
    return result


def multiply_exact(left: int, right: int) -> int:
    """Multiply two 64-bit values, failing on overflow."""
    result = left * right
    if result < LONG_MIN or result > LONG_MAX:
        raise ArithmeticOverflowError(ErrorTemplate.arithmetic_overflow("multiply", left, right))
    return result


def to_int_exact(value: int) -> int:
    """Narrow a value to the signed 32-bit range, failing on overflow."""
    if value < INT_MIN or value > INT_MAX:
        raise ArithmeticOverflowError(ErrorTemplate.arithmetic_overflow("int", value, 0))
    return value


def truncating_div(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero.

    Python's ``//`` floors; ``until()`` counts whole units completed, so
    -13 months is -1 year, not -2.
    """
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend >= 0) == (divisor > 0) else -quotient
