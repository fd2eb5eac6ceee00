"""Hypothesis property-based tests for JalaliYearMonth.

Tests invariants that must hold across the whole supported year range.
Uses strategies from tests.strategies.jalali for generating test data.
"""

from __future__ import annotations

import pytest
from hypothesis import assume, event, given
from hypothesis import strategies as st

from jalalidate import ChronoField, ChronoUnit, DateTimeRangeError, JalaliYearMonth
from jalalidate.constants import MAX_YEAR, MIN_YEAR
from tests.strategies.jalali import (
    modern_year_months,
    month_amounts,
    months,
    year_months,
    years,
)

# ============================================================================
# TEXT PROPERTIES
# ============================================================================


class TestYearMonthTextProperties:
    """Canonical text round-trips for every year-month."""

    @given(ym=year_months)
    def test_parse_inverts_str(self, ym: JalaliYearMonth) -> None:
        """parse(str(ym)) == ym."""
        text = str(ym)
        event(f"sign={text[0] if text[0] in '+-' else 'none'}")
        assert JalaliYearMonth.parse(text) == ym

    @given(ym=year_months)
    def test_month_is_two_digits(self, ym: JalaliYearMonth) -> None:
        """Month component is always two digits."""
        assert str(ym).endswith(f"-{ym.month:02d}")


# ============================================================================
# ARITHMETIC PROPERTIES
# ============================================================================


class TestYearMonthArithmeticProperties:
    """plus/minus/until consistency."""

    @given(ym=modern_year_months, amount=month_amounts)
    def test_until_inverts_plus_months(self, ym: JalaliYearMonth, amount: int) -> None:
        """ym.until(ym.plus_months(n), MONTHS) == n."""
        moved = ym.plus_months(amount)
        event(f"direction={'forward' if amount >= 0 else 'backward'}")
        assert ym.until(moved, ChronoUnit.MONTHS) == amount

    @given(ym=modern_year_months, amount=month_amounts)
    def test_minus_inverts_plus(self, ym: JalaliYearMonth, amount: int) -> None:
        """plus then minus the same amount is the identity."""
        assert ym.plus_months(amount).minus_months(amount) == ym

    @given(ym=modern_year_months, amount=st.integers(min_value=-(10**8), max_value=10**8))
    def test_plus_years_keeps_month(self, ym: JalaliYearMonth, amount: int) -> None:
        """Year arithmetic never changes the month."""
        moved = ym.plus_years(amount)
        assert moved.month == ym.month
        assert moved.year == ym.year + amount
        assert ym.until(moved, ChronoUnit.YEARS) == amount

    @given(ym=modern_year_months, amount=st.integers(min_value=-(10**5), max_value=10**5))
    def test_units_are_month_multiples(self, ym: JalaliYearMonth, amount: int) -> None:
        """One decade is 120 months, one century 1200."""
        assert ym.plus(amount, ChronoUnit.DECADES) == ym.plus_months(amount * 120)
        assert ym.plus(amount, ChronoUnit.CENTURIES) == ym.plus_months(amount * 1200)

    @given(a=year_months, b=year_months)
    def test_until_is_antisymmetric(self, a: JalaliYearMonth, b: JalaliYearMonth) -> None:
        """a.until(b) == -b.until(a) for every truncating unit."""
        for unit in (ChronoUnit.MONTHS, ChronoUnit.YEARS, ChronoUnit.DECADES):
            assert a.until(b, unit) == -b.until(a, unit)

    @given(
        ym=year_months,
        amount=st.integers(min_value=(MAX_YEAR - MIN_YEAR) * 12 + 12, max_value=2**62),
    )
    def test_large_amounts_leave_range(self, ym: JalaliYearMonth, amount: int) -> None:
        """Amounts beyond the whole proleptic-month span always fail on range."""
        with pytest.raises(DateTimeRangeError):
            ym.plus_months(amount)
        with pytest.raises(DateTimeRangeError):
            ym.minus_months(amount)


# ============================================================================
# ORDERING AND FIELD PROPERTIES
# ============================================================================


class TestYearMonthOrderingProperties:
    """Ordering agrees with the proleptic month."""

    @given(a=year_months, b=year_months)
    def test_compare_matches_proleptic_month(
        self, a: JalaliYearMonth, b: JalaliYearMonth
    ) -> None:
        """compare_to sign equals the sign of the proleptic-month difference."""
        diff = a.proleptic_month - b.proleptic_month
        result = a.compare_to(b)
        assert (result > 0) == (diff > 0)
        assert (result < 0) == (diff < 0)
        assert (a < b) == (diff < 0)

    @given(ym=year_months)
    def test_proleptic_month_round_trip(self, ym: JalaliYearMonth) -> None:
        """with_field(PROLEPTIC_MONTH, get_long(PROLEPTIC_MONTH)) is the identity."""
        pm = ym.get_long(ChronoField.PROLEPTIC_MONTH)
        assert JalaliYearMonth.of(MIN_YEAR, 1).with_field(ChronoField.PROLEPTIC_MONTH, pm) == ym

    @given(ym=year_months)
    def test_era_flip_is_involution(self, ym: JalaliYearMonth) -> None:
        """Flipping the era twice returns the original year-month."""
        assume(ym.year != MIN_YEAR)
        other_era = 1 - ym.get(ChronoField.ERA)
        flipped = ym.with_field(ChronoField.ERA, other_era)
        event(f"era={other_era}")
        assert flipped.get(ChronoField.YEAR_OF_ERA) == ym.get(ChronoField.YEAR_OF_ERA)
        assert flipped.with_field(ChronoField.ERA, 1 - other_era) == ym


# ============================================================================
# CALENDAR PROPERTIES
# ============================================================================


class TestYearMonthCalendarProperties:
    """Month lengths agree with year lengths."""

    @given(year=years)
    def test_month_lengths_sum_to_year_length(self, year: int) -> None:
        """Twelve month lengths add up to 365 or 366."""
        total = sum(JalaliYearMonth.of(year, m).length_of_month() for m in range(1, 13))
        event(f"leap={JalaliYearMonth.of(year, 1).is_leap_year()}")
        assert total == JalaliYearMonth.of(year, 1).length_of_year()

    @given(year=years, month=months)
    def test_month_length_by_position(self, year: int, month: int) -> None:
        """Months 1-6 have 31 days, 7-11 have 30, ESFAND 29 or 30."""
        length = JalaliYearMonth.of(year, month).length_of_month()
        if month <= 6:
            assert length == 31
        elif month <= 11:
            assert length == 30
        else:
            assert length in (29, 30)
