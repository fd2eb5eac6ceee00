"""Tests for pattern compilation, PatternFormatter and locale digits.

Tests cover:
- Tokenizing letters, quoted literals and escaped quotes
- Unsupported letters and letter counts
- Formatting with padding, signs and locale digits (Babel numbering systems)
- Parsing with exact error indexes, adjacent fixed-width fields and
  Unicode digits
- Year resolution from u, y and G
"""

import logging

import pytest

from jalalidate import (
    ChronoField,
    DateTimeParseError,
    DateTimeRangeError,
    JalaliDate,
    JalaliYearMonth,
    PatternFormatter,
    UnsupportedTemporalTypeError,
)
from jalalidate.locale_utils import digit_zero, get_babel_locale, normalize_locale
from jalalidate.text import compile_pattern
from jalalidate.text.pattern import resolve_year


class TestCompilePattern:
    """Tests for compile_pattern."""

    def test_fields(self) -> None:
        pattern = compile_pattern("uuuu/MM/dd")
        assert pattern.fields == (
            ChronoField.YEAR,
            ChronoField.MONTH_OF_YEAR,
            ChronoField.DAY_OF_MONTH,
        )

    def test_cached(self) -> None:
        assert compile_pattern("uuuu-MM") is compile_pattern("uuuu-MM")

    def test_cache_is_bounded(self) -> None:
        assert compile_pattern.cache_info().maxsize == 128

    def test_quoted_literal(self) -> None:
        pattern = compile_pattern("d 'of' M")
        assert [token.literal for token in pattern.tokens] == ["", " of ", ""]

    def test_escaped_quote(self) -> None:
        pattern = compile_pattern("uuuu''MM")
        assert pattern.tokens[1].literal == "'"
        assert pattern.format(JalaliYearMonth.of(1403, 7)) == "1403'07"

    def test_quote_inside_quoted_text(self) -> None:
        pattern = compile_pattern("'it''s' uuuu")
        assert pattern.tokens[0].literal == "it's "

    def test_unterminated_quote_runs_to_end(self) -> None:
        pattern = compile_pattern("uuuu 'AP")
        assert pattern.tokens[-1].literal == " AP"

    @pytest.mark.parametrize("pattern", ["yy", "uu", "MMM", "dddd", "EEEE", "HH:mm", "GG"])
    def test_unsupported(self, pattern: str) -> None:
        with pytest.raises(UnsupportedTemporalTypeError, match="Unsupported pattern letter"):
            compile_pattern(pattern)

    def test_adjacent_fields_are_fixed_width(self) -> None:
        pattern = compile_pattern("uuuuMMdd")
        assert all(token.is_fixed_width for token in pattern.tokens)
        assert pattern.parse("14030109") == {
            ChronoField.YEAR: 1403,
            ChronoField.MONTH_OF_YEAR: 1,
            ChronoField.DAY_OF_MONTH: 9,
        }

    def test_compile_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="jalalidate.text.pattern"):
            compile_pattern("D/uuuuu")
        assert "Compiled date pattern" in caplog.text


class TestPatternFormat:
    """Tests for DateTimePattern.format."""

    def test_padding(self) -> None:
        d = JalaliDate.of(1403, 1, 9)
        assert compile_pattern("uuuu/M/d").format(d) == "1403/1/9"
        assert compile_pattern("uuuu/MM/dd").format(d) == "1403/01/09"
        assert compile_pattern("DDD").format(d) == "009"

    def test_negative_year(self) -> None:
        d = JalaliDate.of(-5, 1, 1)
        assert compile_pattern("uuuu-MM-dd").format(d) == "-0005-01-01"
        assert compile_pattern("yyyy G").format(d) == "0006 0"

    def test_unsupported_field_of_temporal(self) -> None:
        with pytest.raises(UnsupportedTemporalTypeError, match="day-of-month"):
            compile_pattern("uuuu-MM-dd").format(JalaliYearMonth.of(1403, 1))

    def test_fixed_width_overflow(self) -> None:
        with pytest.raises(DateTimeRangeError, match="4 digits"):
            compile_pattern("uuuuMM").format(JalaliYearMonth.of(10000, 1))

    def test_zero_digit_translation(self) -> None:
        d = JalaliDate.of(1403, 1, 1)
        assert compile_pattern("uuuu/MM/dd").format(d, "۰") == (
            "۱۴۰۳/۰۱/۰۱"
        )

    def test_literals_are_not_translated(self) -> None:
        d = JalaliDate.of(1403, 1, 1)
        assert compile_pattern("'Q1' uuuu").format(d, "٠") == (
            "Q1 ١٤٠٣"
        )


class TestPatternParse:
    """Tests for DateTimePattern.parse."""

    def test_parse_basic(self) -> None:
        assert compile_pattern("dd.MM.uuuu").parse("09.01.1403") == {
            ChronoField.DAY_OF_MONTH: 9,
            ChronoField.MONTH_OF_YEAR: 1,
            ChronoField.YEAR: 1403,
        }

    def test_parse_unicode_digits(self) -> None:
        fields = compile_pattern("uuuu/MM/dd").parse("۱۴۰۳/۰۱/۰۹")
        assert fields[ChronoField.YEAR] == 1403
        assert fields[ChronoField.DAY_OF_MONTH] == 9

    def test_parse_negative_year(self) -> None:
        assert compile_pattern("uuuu").parse("-0005") == {ChronoField.YEAR: -5}

    @pytest.mark.parametrize(
        ("text", "index"),
        [
            ("1403-01-09", 4),
            ("1403/1x/09", 5),
            ("1403/01/09/", 10),
            ("abc", 0),
        ],
    )
    def test_error_index(self, text: str, index: int) -> None:
        with pytest.raises(DateTimeParseError) as exc_info:
            compile_pattern("uuuu/MM/dd").parse(text)
        assert exc_info.value.error_index == index
        assert exc_info.value.input_value == text

    def test_conflicting_duplicate_field(self) -> None:
        with pytest.raises(DateTimeParseError, match="conflicting values"):
            compile_pattern("MM/MM").parse("01/02")

    def test_consistent_duplicate_field(self) -> None:
        assert compile_pattern("MM/MM").parse("01/01") == {ChronoField.MONTH_OF_YEAR: 1}


class TestResolveYear:
    """Tests for resolve_year."""

    def test_proleptic_year_wins(self) -> None:
        fields = {ChronoField.YEAR: 1403, ChronoField.YEAR_OF_ERA: 5}
        assert resolve_year(fields) == 1403

    def test_year_of_era_defaults_to_current_era(self) -> None:
        assert resolve_year({ChronoField.YEAR_OF_ERA: 1403}) == 1403

    def test_year_of_era_before_era(self) -> None:
        assert resolve_year({ChronoField.YEAR_OF_ERA: 6, ChronoField.ERA: 0}) == -5

    def test_no_year(self) -> None:
        assert resolve_year({ChronoField.MONTH_OF_YEAR: 1}) is None

    def test_invalid_era(self) -> None:
        with pytest.raises(DateTimeRangeError, match="era"):
            resolve_year({ChronoField.YEAR_OF_ERA: 6, ChronoField.ERA: 3})


class TestPatternFormatter:
    """Tests for PatternFormatter with locale digits."""

    def test_ascii_default(self) -> None:
        formatter = PatternFormatter("uuuu/MM/dd")
        assert JalaliDate.of(1403, 1, 1).format(formatter) == "1403/01/01"
        assert formatter.zero_digit == "0"

    def test_persian_digits(self) -> None:
        formatter = PatternFormatter("uuuu/MM/dd", locale_code="fa-IR")
        assert formatter.locale_code == "fa_IR"
        assert JalaliDate.of(1403, 1, 1).format(formatter) == "۱۴۰۳/۰۱/۰۱"

    def test_parse_localized_text(self) -> None:
        formatter = PatternFormatter("uuuu/MM/dd", locale_code="fa_IR")
        assert JalaliDate.parse("۱۴۰۳/۰۱/۰۱", formatter) == JalaliDate.of(1403, 1, 1)

    def test_latin_locale(self) -> None:
        formatter = PatternFormatter("uuuu-MM", locale_code="en_US")
        assert JalaliYearMonth.of(1403, 7).format(formatter) == "1403-07"

    def test_year_month_parse_with_formatter(self) -> None:
        formatter = PatternFormatter("MM/uuuu")
        assert JalaliYearMonth.parse("07/1403", formatter) == JalaliYearMonth.of(1403, 7)

    def test_year_month_parse_missing_month(self) -> None:
        with pytest.raises(DateTimeParseError, match="unable to obtain JalaliYearMonth"):
            JalaliYearMonth.parse("1403", PatternFormatter("uuuu"))

    def test_date_parse_day_of_year(self) -> None:
        formatter = PatternFormatter("uuuu-DDD")
        assert JalaliDate.parse("1403-366", formatter) == JalaliDate.of(1403, 12, 30)

    def test_date_parse_era_year(self) -> None:
        formatter = PatternFormatter("G yyyy-MM-dd")
        assert JalaliDate.parse("0 0006-01-01", formatter) == JalaliDate.of(-5, 1, 1)

    def test_date_parse_invalid_value(self) -> None:
        formatter = PatternFormatter("uuuu/MM/dd")
        with pytest.raises(DateTimeParseError, match="not a leap year") as exc_info:
            JalaliDate.parse("1402/12/30", formatter)
        assert isinstance(exc_info.value.__cause__, DateTimeRangeError)

    def test_invalid_configuration(self) -> None:
        with pytest.raises(TypeError, match="pattern must be str"):
            PatternFormatter(None)  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="locale_code must be str"):
            PatternFormatter("uuuu", locale_code=1)  # type: ignore[arg-type]
        with pytest.raises(UnsupportedTemporalTypeError):
            PatternFormatter("yy")

    def test_unknown_locale_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="jalalidate.locale_utils"):
            formatter = PatternFormatter("uuuu", locale_code="xx_QQ")
            assert JalaliYearMonth.of(1403, 1).format(formatter) == "1403"
        assert "Unknown locale 'xx_QQ'" in caplog.text


class TestLocaleUtils:
    """Tests for locale normalization and digit lookup."""

    def test_normalize_locale(self) -> None:
        assert normalize_locale("fa-IR") == "fa_IR"
        assert normalize_locale("en_US") == "en_US"

    def test_get_babel_locale_cached(self) -> None:
        assert get_babel_locale("fa_IR") is get_babel_locale("fa_IR")

    def test_digit_zero(self) -> None:
        assert digit_zero(None) == "0"
        assert digit_zero("fa_IR") == "۰"
        assert digit_zero("en") == "0"

    def test_invalid_locale_format(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="jalalidate.locale_utils"):
            assert digit_zero("123") == "0"
        assert "Invalid locale format '123'" in caplog.text
