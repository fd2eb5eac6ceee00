"""Core utilities shared by every other jalalidate package.

This package provides foundational utilities with no calendar knowledge.
By isolating them here, we maintain a clean dependency graph:

    core <- temporal <- text <- chrono

Exports:
    ValueRange: Valid bounds of a temporal field
    add_exact, subtract_exact, multiply_exact, to_int_exact: Checked arithmetic

Python 3.11+.
"""

from .arithmetic import (
    INT_MAX,
    INT_MIN,
    LONG_MAX,
    LONG_MIN,
    add_exact,
    multiply_exact,
    subtract_exact,
    to_int_exact,
)
from .value_range import ValueRange

__all__ = [
    "INT_MAX",
    "INT_MIN",
    "LONG_MAX",
    "LONG_MIN",
    "ValueRange",
    "add_exact",
    "multiply_exact",
    "subtract_exact",
    "to_int_exact",
]
