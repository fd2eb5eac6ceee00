"""Locale utilities for BCP-47 to POSIX conversion and digit lookup.

Centralizes locale normalization so "fa-IR" and "fa_IR" share cache entries.

Python 3.11+.
"""

from __future__ import annotations

import functools
import logging

from babel import Locale, UnknownLocaleError

__all__ = [
    "ASCII_ZERO",
    "digit_zero",
    "get_babel_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)

ASCII_ZERO: str = "0"

# CLDR numeric numbering systems -> code point of their digit zero.
# Each system's digits are the ten consecutive code points from zero.
_NUMBERING_SYSTEM_ZERO: dict[str, str] = {
    "latn": ASCII_ZERO,
    "arab": "\u0660",
    "arabext": "\u06f0",
    "beng": "\u09e6",
    "deva": "\u0966",
    "mymr": "\u1040",
    "thai": "\u0e50",
}


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("fa-IR")
        'fa_IR'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    return Locale.parse(normalize_locale(locale_code))


@functools.lru_cache(maxsize=128)
def digit_zero(locale_code: str | None) -> str:
    """Digit zero of the locale's default CLDR numbering system.

    None, unknown locales, and non-decimal numbering systems give ASCII '0';
    unknown and invalid locales are logged at WARNING.

    Example:
        >>> digit_zero("fa_IR")
        '۰'
        >>> digit_zero("en_US")
        '0'
    """
    if locale_code is None:
        return ASCII_ZERO
    try:
        locale = get_babel_locale(locale_code)
    except UnknownLocaleError as e:
        logger.warning("Unknown locale '%s': %s. Falling back to ASCII digits", locale_code, e)
        return ASCII_ZERO
    except ValueError as e:
        logger.warning(
            "Invalid locale format '%s': %s. Falling back to ASCII digits", locale_code, e
        )
        return ASCII_ZERO

    system = locale.default_numbering_system
    zero = _NUMBERING_SYSTEM_ZERO.get(system)
    if zero is None:
        logger.warning(
            "Numbering system '%s' of locale '%s' has no digit table. Using ASCII digits",
            system,
            locale_code,
        )
        return ASCII_ZERO
    return zero
