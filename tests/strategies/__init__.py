"""Hypothesis strategies for jalalidate property-based testing.

Usage:
    from tests.strategies import jalali_dates, year_months
    from tests.strategies.jalali import date_by_boundary

Event-Emitting Strategies (HypoFuzz-Optimized):
    - date_by_boundary
"""

from .jalali import (
    date_by_boundary,
    day_amounts,
    gregorian_dates,
    gregorian_safe_years,
    jalali_dates,
    modern_year_months,
    modern_years,
    month_amounts,
    months,
    year_months,
    years,
)

__all__ = [
    "date_by_boundary",
    "day_amounts",
    "gregorian_dates",
    "gregorian_safe_years",
    "jalali_dates",
    "modern_year_months",
    "modern_years",
    "month_amounts",
    "months",
    "year_months",
    "years",
]
