"""Pattern formatter with locale digits.

``PatternFormatter`` plugs into the ``format``/``parse`` entry points of the
value types:

    >>> from jalalidate import JalaliDate
    >>> formatter = PatternFormatter("uuuu/MM/dd", locale_code="fa_IR")
    >>> JalaliDate.of(1403, 1, 1).format(formatter)
    '۱۴۰۳/۰۱/۰۱'
    >>> JalaliDate.parse("۱۴۰۳/۰۱/۰۱", formatter)
    JalaliDate(year=1403, month=1, day=1)

Digits are rendered in the locale's default CLDR numbering system (looked up
through Babel). Parsing accepts any Unicode decimal digits regardless of the
locale. The minus sign is always ASCII '-'.

Python 3.11+.
"""

from __future__ import annotations

from dataclasses import dataclass

from jalalidate.locale_utils import digit_zero, normalize_locale
from jalalidate.temporal import ChronoField, TemporalAccessor
from jalalidate.text.pattern import DateTimePattern, compile_pattern

__all__ = ["PatternFormatter"]


@dataclass(frozen=True, slots=True)
class PatternFormatter:
    """Formatter configuration: pattern plus optional locale.

    Attributes:
        pattern: CLDR-style numeric pattern (see ``jalalidate.text.pattern``)
        locale_code: BCP-47 or POSIX locale code; None for ASCII digits

    Raises:
        TypeError: If pattern or locale_code has the wrong type
        UnsupportedTemporalTypeError: If the pattern uses unsupported letters
    """

    pattern: str
    locale_code: str | None = None

    def __post_init__(self) -> None:
        """Validate configuration and compile the pattern eagerly."""
        if not isinstance(self.pattern, str):
            msg = f"pattern must be str, got {type(self.pattern).__name__}"
            raise TypeError(msg)
        if self.locale_code is not None:
            if not isinstance(self.locale_code, str):
                msg = f"locale_code must be str or None, got {type(self.locale_code).__name__}"
                raise TypeError(msg)
            object.__setattr__(self, "locale_code", normalize_locale(self.locale_code))
        compile_pattern(self.pattern)

    @property
    def compiled(self) -> DateTimePattern:
        """Cached compiled pattern."""
        return compile_pattern(self.pattern)

    @property
    def zero_digit(self) -> str:
        """Digit zero used for output."""
        return digit_zero(self.locale_code)

    def format(self, temporal: TemporalAccessor) -> str:
        """Render temporal in the pattern with locale digits."""
        return self.compiled.format(temporal, self.zero_digit)

    def parse(self, text: str) -> dict[ChronoField, int]:
        """Read field values from text.

        Raises:
            DateTimeParseError: If text does not match the pattern
        """
        return self.compiled.parse(text)
