"""Temporal field/unit tags and capability protocols.

Exports:
    ChronoField: Closed set of field tags
    ChronoUnit: Closed set of unit tags
    Temporal, TemporalAccessor, TemporalAdjuster: Capability protocols
    Clock: Current-date collaborator
    TemporalFormatter: Text collaborator

Python 3.11+.
"""

from .fields import ChronoField, ChronoUnit
from .protocols import Clock, Temporal, TemporalAccessor, TemporalAdjuster, TemporalFormatter

__all__ = [
    "ChronoField",
    "ChronoUnit",
    "Clock",
    "Temporal",
    "TemporalAccessor",
    "TemporalAdjuster",
    "TemporalFormatter",
]
