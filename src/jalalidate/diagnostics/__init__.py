"""Diagnostic system for jalalidate errors.

Provides structured error diagnostics with codes, hints, and formatters.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    ArithmeticOverflowError,
    ChronologyMismatchError,
    DateTimeError,
    DateTimeParseError,
    DateTimeRangeError,
    JalaliError,
    TemporalConversionError,
    UnsupportedTemporalTypeError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ArithmeticOverflowError",
    "ChronologyMismatchError",
    "DateTimeError",
    "DateTimeParseError",
    "DateTimeRangeError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "JalaliError",
    "OutputFormat",
    "TemporalConversionError",
    "UnsupportedTemporalTypeError",
]
