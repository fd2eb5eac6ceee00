"""Jalali calendar value types and chronologies.

Exports:
    JALALI, ISO: Chronology singletons
    JalaliYear, JalaliYearMonth, JalaliDate: Immutable value types
    JalaliEra, JalaliMonth: Enumerations
    IsoDate: Proleptic Gregorian interchange date
    SystemClock, FixedClock: Clocks for ``now(clock)``

Python 3.11+.
"""

from .chronology import ISO, JALALI, Chronology, IsoChronology, JalaliChronology
from .clock import FixedClock, SystemClock
from .date import JalaliDate
from .era import JalaliEra
from .iso import IsoDate, coerce_temporal
from .month import JalaliMonth
from .year import JalaliYear
from .year_month import JalaliYearMonth

__all__ = [
    "ISO",
    "JALALI",
    "Chronology",
    "FixedClock",
    "IsoChronology",
    "IsoDate",
    "JalaliChronology",
    "JalaliDate",
    "JalaliEra",
    "JalaliMonth",
    "JalaliYear",
    "JalaliYearMonth",
    "SystemClock",
    "coerce_temporal",
]
