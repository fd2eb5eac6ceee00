"""CLDR-style numeric date patterns for Jalali values.

Supported letters (numeric forms only; month and weekday names are not
modelled):
    Pattern | Field          | Example (1403-01-09)
    --------|----------------|---------------------
    G       | era number     | 1
    u+      | proleptic year | 1403, uuuu -> 1403, u -> 1403
    y+      | year-of-era    | 1403
    M/MM    | month-of-year  | 1, 01
    d/dd    | day-of-month   | 9, 09
    D..DDD  | day-of-year    | 9, 09, 009

Two-letter years (``uu``, ``yy``) are rejected: reduced two-digit years are
ambiguous across centuries. Quote literal text with single quotes; ``''``
produces a literal quote inside or outside a quoted section.

A numeric field directly followed by another numeric field is parsed with a
fixed width equal to its letter count, so ``uuuuMMdd`` reads ``14030109``.

Patterns are compiled once and cached. Compiled patterns are immutable and
safe to share between threads.

Python 3.11+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from functools import cache, lru_cache

from jalalidate.constants import YEAR_MAX_WIDTH
from jalalidate.diagnostics import (
    DateTimeParseError,
    DateTimeRangeError,
    ErrorTemplate,
    UnsupportedTemporalTypeError,
)
from jalalidate.temporal import ChronoField, TemporalAccessor

__all__ = [
    "DateTimePattern",
    "PatternToken",
    "compile_pattern",
    "resolve_year",
]

logger = logging.getLogger(__name__)

# letter -> (field, allowed letter counts, widest value, signed)
_LETTERS: dict[str, tuple[ChronoField, frozenset[int], int, bool]] = {
    "G": (ChronoField.ERA, frozenset({1}), 1, False),
    "u": (
        ChronoField.YEAR,
        frozenset({1, *range(3, YEAR_MAX_WIDTH + 1)}),
        YEAR_MAX_WIDTH,
        True,
    ),
    "y": (
        ChronoField.YEAR_OF_ERA,
        frozenset({1, *range(3, YEAR_MAX_WIDTH + 1)}),
        YEAR_MAX_WIDTH,
        False,
    ),
    "M": (ChronoField.MONTH_OF_YEAR, frozenset({1, 2}), 2, False),
    "d": (ChronoField.DAY_OF_MONTH, frozenset({1, 2}), 2, False),
    "D": (ChronoField.DAY_OF_YEAR, frozenset({1, 2, 3}), 3, False),
}


@dataclass(frozen=True, slots=True)
class PatternToken:
    """One compiled pattern element: a literal or a numeric field.

    Attributes:
        literal: Literal text (empty for field tokens)
        field: Field rendered by this token (None for literals)
        min_width: Zero-padding width
        max_width: Widest accepted digit run when parsing
        signed: True if negative values are rendered with '-'
    """

    literal: str = ""
    field: ChronoField | None = None
    min_width: int = 0
    max_width: int = 0
    signed: bool = False

    @property
    def is_fixed_width(self) -> bool:
        """True if parsing reads exactly min_width digits."""
        return self.field is not None and self.min_width == self.max_width

    def regex(self) -> re.Pattern[str]:
        """Regex matching this token's digits (any Unicode decimal digit)."""
        sign = "-?" if self.signed else ""
        return re.compile(rf"{sign}\d{{{self.min_width},{self.max_width}}}")


@dataclass(frozen=True, slots=True)
class DateTimePattern:
    """Compiled pattern: format field values, or parse text back to fields.

    Use ``compile_pattern`` rather than constructing directly; it caches.

    Example:
        >>> pattern = compile_pattern("uuuu/MM/dd")
        >>> [str(field) for field in pattern.fields]
        ['year', 'month-of-year', 'day-of-month']
    """

    pattern: str
    tokens: tuple[PatternToken, ...]

    @property
    def fields(self) -> tuple[ChronoField, ...]:
        """Fields referenced by the pattern, in order."""
        return tuple(token.field for token in self.tokens if token.field is not None)

    def format(self, temporal: TemporalAccessor, zero: str = "0") -> str:
        """Render temporal, digits counted up from zero (ASCII by default).

        Raises:
            UnsupportedTemporalTypeError: If temporal lacks a pattern field
            DateTimeRangeError: If a value does not fit a fixed-width field
        """
        parts: list[str] = []
        for token in self.tokens:
            if token.field is None:
                parts.append(token.literal)
                continue
            value = temporal.get_long(token.field)
            digits = str(abs(value)).rjust(token.min_width, "0")
            if token.is_fixed_width and len(digits) > token.max_width:
                raise DateTimeRangeError(
                    ErrorTemplate.value_too_wide(str(token.field), value, token.max_width)
                )
            if zero != "0":
                digits = digits.translate(_digit_table(zero))
            parts.append(f"-{digits}" if value < 0 else digits)
        return "".join(parts)

    def parse(self, text: str) -> dict[ChronoField, int]:
        """Read field values from text.

        Digits may come from any Unicode decimal digit block; ``int()``
        decodes them.

        Raises:
            DateTimeParseError: If text does not match the pattern, or a
                field occurs twice with different values
        """
        fields: dict[ChronoField, int] = {}
        position = 0
        for token in self.tokens:
            if token.field is None:
                if not text.startswith(token.literal, position):
                    raise self._mismatch(text, position)
                position += len(token.literal)
                continue
            match = token.regex().match(text, position)
            if match is None:
                raise self._mismatch(text, position)
            value = int(match.group())
            previous = fields.setdefault(token.field, value)
            if previous != value:
                raise DateTimeParseError(
                    ErrorTemplate.parse_conflicting_values(text, str(token.field), previous, value),
                    input_value=text,
                    error_index=position,
                )
            position = match.end()
        if position != len(text):
            raise self._mismatch(text, position)
        return fields

    def _mismatch(self, text: str, index: int) -> DateTimeParseError:
        return DateTimeParseError(
            ErrorTemplate.parse_pattern_mismatch(text, index, self.pattern),
            input_value=text,
            error_index=index,
        )


@lru_cache(maxsize=128)
def compile_pattern(pattern: str) -> DateTimePattern:
    """Compile and cache a pattern.

    Thread-safe via functools.lru_cache internal locking.

    Raises:
        UnsupportedTemporalTypeError: If the pattern uses an unsupported letter
            or letter count
    """
    letters = _tokenize(pattern)
    tokens: list[PatternToken] = []
    for index, (run, is_literal) in enumerate(letters):
        if is_literal:
            if tokens and tokens[-1].field is None:
                tokens[-1] = PatternToken(literal=tokens[-1].literal + run)
            else:
                tokens.append(PatternToken(literal=run))
            continue
        letter, count = run[0], len(run)
        entry = _LETTERS.get(letter)
        if entry is None or count not in entry[1]:
            raise UnsupportedTemporalTypeError(
                ErrorTemplate.unsupported_pattern_letter(letter, count, pattern)
            )
        field, _, widest, signed = entry
        next_is_field = index + 1 < len(letters) and not letters[index + 1][1]
        max_width = count if next_is_field else max(widest, count)
        tokens.append(
            PatternToken(field=field, min_width=count, max_width=max_width, signed=signed)
        )

    compiled = DateTimePattern(pattern=pattern, tokens=tuple(tokens))
    logger.debug("Compiled date pattern %r into %d tokens", pattern, len(compiled.tokens))
    return compiled


def resolve_year(fields: Mapping[ChronoField, int]) -> int | None:
    """Proleptic year from parsed fields.

    ``u`` wins over ``y``; a year-of-era without an era is in the current era.
    Returns None if neither year field was parsed.

    Raises:
        DateTimeRangeError: If the era or year-of-era is out of range
    """
    if ChronoField.YEAR in fields:
        return fields[ChronoField.YEAR]
    if ChronoField.YEAR_OF_ERA not in fields:
        return None
    year_of_era = fields[ChronoField.YEAR_OF_ERA]
    ChronoField.YEAR_OF_ERA.check_valid_value(year_of_era)
    era = ChronoField.ERA.check_valid_value(fields.get(ChronoField.ERA, 1))
    return year_of_era if era == 1 else 1 - year_of_era


def _tokenize(pattern: str) -> list[tuple[str, bool]]:
    """Split a pattern into (text, is_literal) runs.

    Examples:
        "uuuu/MM/dd" -> [("uuuu", False), ("/", True), ("MM", False), ...]
        "d 'of' M" -> [("d", False), (" of ", True), ("M", False)]
    """
    runs: list[tuple[str, bool]] = []
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]

        if char == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                runs.append(("'", True))
                i += 2
                continue

            # Unterminated quoted text runs to the end of the pattern
            i += 1
            literal_chars: list[str] = []
            while i < n:
                if pattern[i] == "'":
                    if i + 1 < n and pattern[i + 1] == "'":
                        literal_chars.append("'")
                        i += 2
                    else:
                        i += 1
                        break
                else:
                    literal_chars.append(pattern[i])
                    i += 1
            if literal_chars:
                runs.append(("".join(literal_chars), True))
            continue

        if char.isascii() and char.isalpha():
            j = i + 1
            while j < n and pattern[j] == char:
                j += 1
            runs.append((pattern[i:j], False))
            i = j
            continue

        runs.append((char, True))
        i += 1

    return runs


@cache
def _digit_table(zero: str) -> dict[int, str]:
    base = ord(zero)
    return {ord(str(i)): chr(base + i) for i in range(10)}
