"""Locale introspection: language and region metadata for RFC 5646 tags.

Python 3.13+. Uses Babel CLDR data.
"""

from .language import (
    LanguageInfo,
    LanguageName,
    RegionInfo,
    clear_language_cache,
    flag_emoji,
    get_language_info,
    language_info,
)

__all__ = [
    "LanguageInfo",
    "LanguageName",
    "RegionInfo",
    "clear_language_cache",
    "flag_emoji",
    "get_language_info",
    "language_info",
]
