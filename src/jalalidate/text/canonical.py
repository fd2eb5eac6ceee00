"""Canonical ``[sign]YYYY[-MM[-DD]]`` text form.

Year rendering:
    - |year| < 1000: zero-padded to 4 digits, '-' for negative years
    - 1000..9999: plain digits
    - above 9999: explicit '+'
    - -9999 and below: '-' followed by the digits

Parsing accepts exactly what formatting produces: ASCII digits, '+' only with
more than 4 year digits, and never ``-0000``. Functions here check the layout
only; ``build_parsed`` turns range failures of the decoded values into
DateTimeParseError.

Python 3.11+.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TypeVar

from jalalidate.constants import YEAR_MAX_WIDTH, YEAR_PAD_WIDTH
from jalalidate.diagnostics import DateTimeParseError, DateTimeRangeError, ErrorTemplate

__all__ = [
    "build_parsed",
    "format_date",
    "format_year",
    "format_year_month",
    "parse_date",
    "parse_year",
    "parse_year_month",
]

T = TypeVar("T")

_YEAR = rf"([+-]?)([0-9]{{{YEAR_PAD_WIDTH},{YEAR_MAX_WIDTH}}})"
_YEAR_PATTERN = re.compile(_YEAR)
_YEAR_MONTH_PATTERN = re.compile(_YEAR + r"-([0-9]{2})")
_DATE_PATTERN = re.compile(_YEAR + r"-([0-9]{2})-([0-9]{2})")


def format_year(year: int) -> str:
    """Render a proleptic year.

    Example:
        >>> format_year(5), format_year(-5), format_year(1403), format_year(10000)
        ('0005', '-0005', '1403', '+10000')
    """
    if abs(year) < 1000:
        sign = "-" if year < 0 else ""
        return f"{sign}{abs(year):0{YEAR_PAD_WIDTH}d}"
    if year > 9999:
        return f"+{year}"
    return str(year)


def format_year_month(year: int, month: int) -> str:
    """Render ``[sign]YYYY-MM``."""
    return f"{format_year(year)}-{month:02d}"


def format_date(year: int, month: int, day: int) -> str:
    """Render ``[sign]YYYY-MM-DD``."""
    return f"{format_year(year)}-{month:02d}-{day:02d}"


def parse_year(text: str) -> int:
    """Decode ``[sign]YYYY``.

    Raises:
        DateTimeParseError: If text is not in canonical layout
    """
    match = _match(_YEAR_PATTERN, text, "[sign]YYYY")
    return _decode_year(text, match.group(1), match.group(2))


def parse_year_month(text: str) -> tuple[int, int]:
    """Decode ``[sign]YYYY-MM`` into (year, month).

    Raises:
        DateTimeParseError: If text is not in canonical layout
    """
    match = _match(_YEAR_MONTH_PATTERN, text, "[sign]YYYY-MM")
    return _decode_year(text, match.group(1), match.group(2)), int(match.group(3))


def parse_date(text: str) -> tuple[int, int, int]:
    """Decode ``[sign]YYYY-MM-DD`` into (year, month, day).

    Raises:
        DateTimeParseError: If text is not in canonical layout
    """
    match = _match(_DATE_PATTERN, text, "[sign]YYYY-MM-DD")
    year = _decode_year(text, match.group(1), match.group(2))
    return year, int(match.group(3)), int(match.group(4))


def build_parsed(text: str, factory: Callable[..., T], *values: int) -> T:
    """Build a value from decoded fields, reporting range errors as parse errors.

    Raises:
        DateTimeParseError: If factory rejects the values; the range error
            is chained as ``__cause__``
    """
    try:
        return factory(*values)
    except DateTimeRangeError as exc:
        reason = exc.diagnostic.message if exc.diagnostic is not None else str(exc)
        raise DateTimeParseError(
            ErrorTemplate.parse_value_invalid(text, reason),
            input_value=text,
            error_index=0,
        ) from exc


def _match(pattern: re.Pattern[str], text: str, expected: str) -> re.Match[str]:
    match = pattern.match(text)
    if match is not None and match.end() == len(text):
        return match
    index = match.end() if match is not None else 0
    raise DateTimeParseError(
        ErrorTemplate.parse_text_mismatch(text, index, expected),
        input_value=text,
        error_index=index,
    )


def _decode_year(text: str, sign: str, digits: str) -> int:
    diagnostic = None
    if sign == "+" and len(digits) <= YEAR_PAD_WIDTH:
        diagnostic = ErrorTemplate.parse_plus_sign_too_short(text, YEAR_PAD_WIDTH)
    elif sign == "" and len(digits) > YEAR_PAD_WIDTH:
        diagnostic = ErrorTemplate.parse_sign_missing(text, YEAR_PAD_WIDTH)
    elif len(digits) > YEAR_PAD_WIDTH and digits[0] == "0":
        diagnostic = ErrorTemplate.parse_leading_zeros(text, YEAR_PAD_WIDTH)
    elif sign == "-" and int(digits) == 0:
        diagnostic = ErrorTemplate.parse_negative_zero_year(text)
    if diagnostic is not None:
        raise DateTimeParseError(diagnostic, input_value=text, error_index=0)
    value = int(digits)
    return -value if sign == "-" else value
