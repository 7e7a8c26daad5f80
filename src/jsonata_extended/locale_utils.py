"""Locale utilities for RFC 5646 tags and Babel lookups.

Centralizes tag normalization and cached Babel Locale construction used by
the languageInfo() lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools

from babel import Locale, UnknownLocaleError

from jsonata_extended.constants import MAX_LOCALE_CACHE_SIZE

__all__ = [
    "clear_locale_cache",
    "find_babel_locale",
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert an RFC 5646 / BCP-47 tag to POSIX format for Babel.

    Args:
        locale_code: Tag with hyphen separators (e.g., "en-US", "es-419")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "es_419")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.UnknownLocaleError: If CLDR has no data for the locale
        ValueError: If locale format is invalid

    Example:
        >>> get_babel_locale("pt-BR").territory
        'BR'
    """
    return Locale.parse(normalize_locale(locale_code))


def find_babel_locale(*candidates: str) -> Locale | None:
    """Return the first candidate Babel has CLDR data for, or None.

    Example:
        >>> find_babel_locale("xx_YY", "de").language
        'de'
    """
    for candidate in candidates:
        try:
            return get_babel_locale(candidate)
        except (UnknownLocaleError, ValueError):
            continue
    return None


def clear_locale_cache() -> None:
    """Drop cached Locale instances."""
    get_babel_locale.cache_clear()
