"""Tests for JalaliYearMonth.

Tests cover:
- Validated construction and type rejection
- Field access (get/get_long/range) over the five year-month fields
- with_field semantics, including the era flip
- plus/minus over the six month-based units, overflow and LONG_MIN handling
- until with truncation toward zero
- Comparison, canonical text and parse errors
- at_day/at_end_of_month and adjust_into
"""

from datetime import date

import pytest

from jalalidate import (
    ArithmeticOverflowError,
    ChronoField,
    ChronologyMismatchError,
    ChronoUnit,
    DateTimeParseError,
    DateTimeRangeError,
    FixedClock,
    IsoDate,
    JalaliDate,
    JalaliEra,
    JalaliMonth,
    JalaliYearMonth,
    TemporalConversionError,
    UnsupportedTemporalTypeError,
)
from jalalidate.constants import MAX_YEAR, MIN_YEAR
from jalalidate.core import LONG_MAX, LONG_MIN, ValueRange


class TestConstruction:
    """Tests for of() and validation."""

    def test_of(self) -> None:
        ym = JalaliYearMonth.of(1400, 7)
        assert ym.year == 1400
        assert ym.month == 7

    def test_of_accepts_month_enum(self) -> None:
        ym = JalaliYearMonth.of(1400, JalaliMonth.MEHR)
        assert ym == JalaliYearMonth.of(1400, 7)
        assert type(ym.month) is int

    @pytest.mark.parametrize("month", [0, 13])
    def test_invalid_month(self, month: int) -> None:
        with pytest.raises(DateTimeRangeError, match="month-of-year"):
            JalaliYearMonth.of(1400, month)

    @pytest.mark.parametrize("year", [MIN_YEAR - 1, MAX_YEAR + 1])
    def test_invalid_year(self, year: int) -> None:
        with pytest.raises(DateTimeRangeError, match="year"):
            JalaliYearMonth.of(year, 1)

    def test_year_bounds_accepted(self) -> None:
        assert JalaliYearMonth.of(MIN_YEAR, 1).year == MIN_YEAR
        assert JalaliYearMonth.of(MAX_YEAR, 12).year == MAX_YEAR

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError, match="month must be int"):
            JalaliYearMonth.of(1400, True)

    def test_float_rejected(self) -> None:
        with pytest.raises(TypeError, match="year must be int"):
            JalaliYearMonth.of(1400.0, 1)  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        ym = JalaliYearMonth.of(1400, 1)
        with pytest.raises(AttributeError):
            ym.year = 1401  # type: ignore[misc]

    def test_hashable_and_equal(self) -> None:
        assert {JalaliYearMonth.of(1400, 1), JalaliYearMonth.of(1400, 1)} == {
            JalaliYearMonth.of(1400, 1)
        }


class TestFromTemporal:
    """Tests for from_temporal and now."""

    def test_from_jalali_date(self) -> None:
        assert JalaliYearMonth.from_temporal(JalaliDate.of(1403, 5, 17)) == JalaliYearMonth.of(
            1403, 5
        )

    def test_from_gregorian_date(self) -> None:
        assert JalaliYearMonth.from_temporal(date(2024, 3, 20)) == JalaliYearMonth.of(1403, 1)

    def test_from_iso_date(self) -> None:
        assert JalaliYearMonth.from_temporal(IsoDate.of(1970, 1, 1)) == JalaliYearMonth.of(
            1348, 10
        )

    def test_same_instance_returned(self) -> None:
        ym = JalaliYearMonth.of(1400, 1)
        assert JalaliYearMonth.from_temporal(ym) is ym

    def test_non_temporal_rejected(self) -> None:
        with pytest.raises(TemporalConversionError, match="Unable to obtain JalaliYearMonth"):
            JalaliYearMonth.from_temporal("1400-01")

    def test_now_uses_clock(self) -> None:
        clock = FixedClock(date(2024, 3, 19))
        assert JalaliYearMonth.now(clock) == JalaliYearMonth.of(1402, 12)


class TestFieldAccess:
    """Tests for is_supported, range, get and get_long."""

    def test_supported_fields(self) -> None:
        ym = JalaliYearMonth.of(1400, 1)
        assert ym.is_supported(ChronoField.YEAR)
        assert ym.is_supported(ChronoField.PROLEPTIC_MONTH)
        assert not ym.is_supported(ChronoField.DAY_OF_MONTH)

    def test_supported_units(self) -> None:
        ym = JalaliYearMonth.of(1400, 1)
        assert ym.is_supported_unit(ChronoUnit.MILLENNIA)
        assert not ym.is_supported_unit(ChronoUnit.DAYS)

    def test_get_long_values(self) -> None:
        ym = JalaliYearMonth.of(1400, 7)
        assert ym.get_long(ChronoField.MONTH_OF_YEAR) == 7
        assert ym.get_long(ChronoField.PROLEPTIC_MONTH) == 1400 * 12 + 6
        assert ym.get_long(ChronoField.YEAR_OF_ERA) == 1400
        assert ym.get_long(ChronoField.YEAR) == 1400
        assert ym.get_long(ChronoField.ERA) == 1

    def test_before_era_values(self) -> None:
        ym = JalaliYearMonth.of(-5, 3)
        assert ym.get(ChronoField.YEAR_OF_ERA) == 6
        assert ym.get(ChronoField.ERA) == 0
        assert ym.era is JalaliEra.BEFORE
        assert ym.get_long(ChronoField.PROLEPTIC_MONTH) == -5 * 12 + 2

    def test_get_proleptic_month_rejected(self) -> None:
        """Proleptic-month does not fit 32 bits, so get() refuses it."""
        with pytest.raises(UnsupportedTemporalTypeError, match="get_long"):
            JalaliYearMonth.of(1400, 1).get(ChronoField.PROLEPTIC_MONTH)

    def test_get_unsupported_field(self) -> None:
        with pytest.raises(UnsupportedTemporalTypeError, match="Unsupported field: day-of-month"):
            JalaliYearMonth.of(1400, 1).get_long(ChronoField.DAY_OF_MONTH)

    @pytest.mark.parametrize("tag", ["month-of-year", "year", []])
    def test_non_field_tags_not_supported(self, tag: object) -> None:
        """Plain strings equal to a field name are not fields."""
        assert not JalaliYearMonth.of(1400, 7).is_supported(tag)

    def test_string_tag_rejected_by_accessors(self) -> None:
        ym = JalaliYearMonth.of(1400, 7)
        with pytest.raises(UnsupportedTemporalTypeError, match="Unsupported field: month-of-year"):
            ym.get("month-of-year")  # type: ignore[arg-type]
        with pytest.raises(UnsupportedTemporalTypeError):
            ym.get_long("year")  # type: ignore[arg-type]
        with pytest.raises(UnsupportedTemporalTypeError):
            ym.range("year")  # type: ignore[arg-type]
        with pytest.raises(UnsupportedTemporalTypeError):
            ym.with_field("month-of-year", 3)  # type: ignore[arg-type]

    def test_string_unit_rejected(self) -> None:
        ym = JalaliYearMonth.of(1400, 7)
        assert not ym.is_supported_unit("months")
        assert not ym.is_supported_unit([])
        with pytest.raises(UnsupportedTemporalTypeError, match="months"):
            ym.plus(1, "months")  # type: ignore[arg-type]
        with pytest.raises(UnsupportedTemporalTypeError):
            ym.until(JalaliYearMonth.of(1401, 7), "years")  # type: ignore[arg-type]

    def test_range_year_of_era_depends_on_era(self) -> None:
        assert JalaliYearMonth.of(1400, 1).range(ChronoField.YEAR_OF_ERA) == ValueRange.of(
            1, MAX_YEAR
        )
        assert JalaliYearMonth.of(0, 1).range(ChronoField.YEAR_OF_ERA) == ValueRange.of(
            1, MAX_YEAR + 1
        )

    def test_range_of_other_fields(self) -> None:
        ym = JalaliYearMonth.of(1400, 1)
        assert ym.range(ChronoField.MONTH_OF_YEAR) == ValueRange.of(1, 12)
        with pytest.raises(UnsupportedTemporalTypeError):
            ym.range(ChronoField.EPOCH_DAY)

    def test_derived_values(self) -> None:
        assert JalaliYearMonth.of(1399, 12).length_of_month() == 30
        assert JalaliYearMonth.of(1400, 12).length_of_month() == 29
        assert JalaliYearMonth.of(1399, 1).length_of_year() == 366
        assert JalaliYearMonth.of(1399, 1).is_leap_year()
        assert JalaliYearMonth.of(1400, 12).is_valid_day(29)
        assert not JalaliYearMonth.of(1400, 12).is_valid_day(30)
        assert JalaliYearMonth.of(1400, 7).month_of_year is JalaliMonth.MEHR


class TestWithField:
    """Tests for with_field and the direct setters."""

    def test_with_month_keeps_year(self) -> None:
        assert JalaliYearMonth.of(1400, 1).with_field(
            ChronoField.MONTH_OF_YEAR, 9
        ) == JalaliYearMonth.of(1400, 9)

    def test_with_proleptic_month_replaces_both(self) -> None:
        ym = JalaliYearMonth.of(1400, 1).with_field(ChronoField.PROLEPTIC_MONTH, 1403 * 12 + 4)
        assert ym == JalaliYearMonth.of(1403, 5)

    def test_with_year_of_era_keeps_era(self) -> None:
        assert JalaliYearMonth.of(1400, 1).with_field(
            ChronoField.YEAR_OF_ERA, 5
        ) == JalaliYearMonth.of(5, 1)
        assert JalaliYearMonth.of(-10, 1).with_field(
            ChronoField.YEAR_OF_ERA, 5
        ) == JalaliYearMonth.of(-4, 1)

    def test_with_era_flips_year(self) -> None:
        """Setting era 0 on 1400 gives 1 - 1400, keeping year-of-era."""
        ym = JalaliYearMonth.of(1400, 1).with_field(ChronoField.ERA, 0)
        assert ym == JalaliYearMonth.of(-1399, 1)
        assert ym.get(ChronoField.YEAR_OF_ERA) == 1400

    def test_with_same_era_returns_self(self) -> None:
        ym = JalaliYearMonth.of(1400, 1)
        assert ym.with_field(ChronoField.ERA, 1) is ym

    def test_with_same_value_returns_self(self) -> None:
        ym = JalaliYearMonth.of(1400, 1)
        assert ym.with_year(1400) is ym
        assert ym.with_month(1) is ym

    def test_invalid_values(self) -> None:
        ym = JalaliYearMonth.of(1400, 1)
        with pytest.raises(DateTimeRangeError, match="month-of-year"):
            ym.with_field(ChronoField.MONTH_OF_YEAR, 13)
        with pytest.raises(DateTimeRangeError, match="era"):
            ym.with_field(ChronoField.ERA, 2)
        with pytest.raises(DateTimeRangeError, match="year"):
            ym.with_year(MAX_YEAR + 1)

    def test_unsupported_field(self) -> None:
        with pytest.raises(UnsupportedTemporalTypeError, match="day-of-month"):
            JalaliYearMonth.of(1400, 1).with_field(ChronoField.DAY_OF_MONTH, 1)

    def test_with_adjuster(self) -> None:
        target = JalaliYearMonth.of(1403, 8)
        assert JalaliYearMonth.of(1400, 1).with_adjuster(target) == target


class TestArithmetic:
    """Tests for plus/minus and their unit-specific forms."""

    def test_plus_one_month(self) -> None:
        assert JalaliYearMonth.of(1400, 1).plus_months(1) == JalaliYearMonth.of(1400, 2)

    def test_minus_one_month_crosses_year(self) -> None:
        assert JalaliYearMonth.of(1400, 1).minus_months(1) == JalaliYearMonth.of(1399, 12)

    def test_plus_months_crosses_year_zero(self) -> None:
        assert JalaliYearMonth.of(1, 1).minus_months(1) == JalaliYearMonth.of(0, 12)
        assert JalaliYearMonth.of(0, 1).minus_months(13) == JalaliYearMonth.of(-2, 12)

    @pytest.mark.parametrize(
        ("unit", "expected"),
        [
            (ChronoUnit.MONTHS, JalaliYearMonth.of(1400, 4)),
            (ChronoUnit.YEARS, JalaliYearMonth.of(1403, 1)),
            (ChronoUnit.DECADES, JalaliYearMonth.of(1430, 1)),
            (ChronoUnit.CENTURIES, JalaliYearMonth.of(1700, 1)),
            (ChronoUnit.MILLENNIA, JalaliYearMonth.of(4400, 1)),
        ],
    )
    def test_plus_units(self, unit: ChronoUnit, expected: JalaliYearMonth) -> None:
        assert JalaliYearMonth.of(1400, 1).plus(3, unit) == expected

    def test_plus_eras(self) -> None:
        ym = JalaliYearMonth.of(1400, 1)
        assert ym.plus(-1, ChronoUnit.ERAS) == JalaliYearMonth.of(-1399, 1)
        assert ym.minus(1, ChronoUnit.ERAS) == JalaliYearMonth.of(-1399, 1)
        with pytest.raises(DateTimeRangeError, match="era"):
            ym.plus(1, ChronoUnit.ERAS)

    def test_plus_zero_returns_self(self) -> None:
        ym = JalaliYearMonth.of(1400, 1)
        assert ym.plus_months(0) is ym
        assert ym.plus_years(0) is ym
        assert ym.plus(0, ChronoUnit.DECADES) is ym

    def test_plus_unsupported_unit(self) -> None:
        with pytest.raises(UnsupportedTemporalTypeError, match="Unsupported unit: days"):
            JalaliYearMonth.of(1400, 1).plus(1, ChronoUnit.DAYS)

    def test_range_overflow(self) -> None:
        with pytest.raises(DateTimeRangeError, match="year"):
            JalaliYearMonth.of(MAX_YEAR, 12).plus_months(1)
        with pytest.raises(DateTimeRangeError, match="year"):
            JalaliYearMonth.of(MIN_YEAR, 1).minus_years(1)

    def test_whole_range_in_months(self) -> None:
        """The first month of MAX_YEAR reaches the first month of MIN_YEAR exactly."""
        span = 2 * MAX_YEAR * 12
        assert JalaliYearMonth.of(MAX_YEAR, 1).minus_months(span) == JalaliYearMonth.of(MIN_YEAR, 1)
        assert JalaliYearMonth.of(MIN_YEAR, 1).plus_months(span) == JalaliYearMonth.of(MAX_YEAR, 1)
        with pytest.raises(DateTimeRangeError):
            JalaliYearMonth.of(MAX_YEAR, 1).minus_months(span + 1)

    def test_multiplication_overflow(self) -> None:
        """Decades of LONG_MAX overflow before any range check."""
        with pytest.raises(ArithmeticOverflowError):
            JalaliYearMonth.of(1400, 1).plus(LONG_MAX, ChronoUnit.DECADES)

    def test_amount_outside_64_bits(self) -> None:
        with pytest.raises(ArithmeticOverflowError):
            JalaliYearMonth.of(1400, 1).plus_months(LONG_MAX + 1)

    def test_minus_long_min(self) -> None:
        """minus(LONG_MIN) cannot negate and fails on range, not overflow."""
        with pytest.raises(DateTimeRangeError):
            JalaliYearMonth.of(1400, 1).minus(LONG_MIN, ChronoUnit.MONTHS)
        with pytest.raises(DateTimeRangeError):
            JalaliYearMonth.of(1400, 1).minus_months(LONG_MIN)

    def test_bool_amount_rejected(self) -> None:
        with pytest.raises(TypeError, match="amount must be int"):
            JalaliYearMonth.of(1400, 1).plus(True, ChronoUnit.MONTHS)


class TestUntil:
    """Tests for until()."""

    def test_one_year(self) -> None:
        assert JalaliYearMonth.of(1400, 6).until(JalaliYearMonth.of(1401, 6), ChronoUnit.YEARS) == 1

    def test_truncates_toward_zero(self) -> None:
        start = JalaliYearMonth.of(1400, 6)
        assert start.until(JalaliYearMonth.of(1401, 5), ChronoUnit.YEARS) == 0
        assert start.until(JalaliYearMonth.of(1399, 5), ChronoUnit.YEARS) == -1
        assert start.until(JalaliYearMonth.of(1399, 7), ChronoUnit.YEARS) == 0

    def test_months(self) -> None:
        start = JalaliYearMonth.of(1400, 1)
        assert start.until(JalaliYearMonth.of(1402, 3), ChronoUnit.MONTHS) == 26
        assert JalaliYearMonth.of(1402, 3).until(start, ChronoUnit.MONTHS) == -26

    def test_larger_units(self) -> None:
        start = JalaliYearMonth.of(1400, 1)
        end = JalaliYearMonth.of(2650, 1)
        assert start.until(end, ChronoUnit.DECADES) == 125
        assert start.until(end, ChronoUnit.CENTURIES) == 12
        assert start.until(end, ChronoUnit.MILLENNIA) == 1

    def test_eras(self) -> None:
        assert JalaliYearMonth.of(-5, 1).until(JalaliYearMonth.of(5, 1), ChronoUnit.ERAS) == 1
        assert JalaliYearMonth.of(5, 1).until(JalaliYearMonth.of(6, 1), ChronoUnit.ERAS) == 0

    def test_until_converts_end(self) -> None:
        start = JalaliYearMonth.of(1402, 1)
        assert start.until(date(2024, 3, 20), ChronoUnit.MONTHS) == 12

    def test_unsupported_unit(self) -> None:
        with pytest.raises(UnsupportedTemporalTypeError, match="weeks"):
            JalaliYearMonth.of(1400, 1).until(JalaliYearMonth.of(1400, 2), ChronoUnit.WEEKS)


class TestComparison:
    """Tests for ordering."""

    def test_month_order(self) -> None:
        for month in range(1, 12):
            a = JalaliYearMonth.of(1400, month)
            b = JalaliYearMonth.of(1400, month + 1)
            assert a.compare_to(b) < 0
            assert a < b
            assert a.is_before(b)
            assert b.is_after(a)

    def test_year_boundary_order(self) -> None:
        assert JalaliYearMonth.of(1400, 12).compare_to(JalaliYearMonth.of(1401, 1)) < 0

    def test_equal(self) -> None:
        assert JalaliYearMonth.of(1400, 1).compare_to(JalaliYearMonth.of(1400, 1)) == 0


class TestText:
    """Tests for canonical str() and parse()."""

    @pytest.mark.parametrize(
        ("year", "month", "text"),
        [
            (1400, 7, "1400-07"),
            (5, 1, "0005-01"),
            (0, 1, "0000-01"),
            (-5, 1, "-0005-01"),
            (-1234, 2, "-1234-02"),
            (10000, 1, "+10000-01"),
            (MAX_YEAR, 12, "+999999999-12"),
        ],
    )
    def test_str_and_parse(self, year: int, month: int, text: str) -> None:
        ym = JalaliYearMonth.of(year, month)
        assert str(ym) == text
        assert JalaliYearMonth.parse(text) == ym

    @pytest.mark.parametrize(
        "text",
        ["1400-7", "140-07", "1400/07", "1400-07x", "", "10000-01", "+1400-07", "-0000-01"],
    )
    def test_malformed_rejected(self, text: str) -> None:
        with pytest.raises(DateTimeParseError) as exc_info:
            JalaliYearMonth.parse(text)
        assert exc_info.value.input_value == text

    def test_error_index(self) -> None:
        with pytest.raises(DateTimeParseError) as exc_info:
            JalaliYearMonth.parse("1400-07x")
        assert exc_info.value.error_index == 7

    def test_invalid_month_chains_range_error(self) -> None:
        with pytest.raises(DateTimeParseError, match="month-of-year") as exc_info:
            JalaliYearMonth.parse("1400-13")
        assert isinstance(exc_info.value.__cause__, DateTimeRangeError)

    def test_non_ascii_digits_rejected(self) -> None:
        with pytest.raises(DateTimeParseError):
            JalaliYearMonth.parse("۱۴۰۰-۰۷")


class TestCombination:
    """Tests for at_day, at_end_of_month and adjust_into."""

    def test_at_day(self) -> None:
        assert JalaliYearMonth.of(1403, 1).at_day(1) == JalaliDate.of(1403, 1, 1)

    def test_at_day_invalid(self) -> None:
        with pytest.raises(DateTimeRangeError, match="not a leap year"):
            JalaliYearMonth.of(1402, 12).at_day(30)

    def test_at_end_of_month(self) -> None:
        assert JalaliYearMonth.of(1403, 12).at_end_of_month() == JalaliDate.of(1403, 12, 30)
        assert JalaliYearMonth.of(1402, 12).at_end_of_month() == JalaliDate.of(1402, 12, 29)

    def test_adjust_into_date_keeps_day(self) -> None:
        result = JalaliYearMonth.of(1402, 5).adjust_into(JalaliDate.of(1400, 1, 17))
        assert result == JalaliDate.of(1402, 5, 17)

    def test_adjust_into_date_clamps_day(self) -> None:
        result = JalaliYearMonth.of(1402, 12).adjust_into(JalaliDate.of(1400, 1, 31))
        assert result == JalaliDate.of(1402, 12, 29)

    def test_adjust_into_iso_rejected(self) -> None:
        with pytest.raises(ChronologyMismatchError, match="ISO"):
            JalaliYearMonth.of(1402, 5).adjust_into(IsoDate.of(2024, 1, 1))

    def test_adjust_into_gregorian_rejected(self) -> None:
        with pytest.raises(ChronologyMismatchError):
            JalaliYearMonth.of(1402, 5).adjust_into(date(2024, 1, 1))  # type: ignore[type-var]
