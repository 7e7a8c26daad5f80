"""RFC 5646 language tag introspection via Babel CLDR data.

Provides the languageInfo() host function: the English and native names of
a tag's language and, when the tag carries a region, region metadata
(names, continent, capital, calling code, currencies, official languages,
flag glyphs).

Lookups are cached per tag. All result types are immutable and
hashable; ``language_info`` converts them to plain dicts for the host.

Python 3.13+. Uses Babel, phonenumbers and geonamescache.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

import geonamescache
import phonenumbers
from babel.core import parse_locale
from babel.languages import get_official_languages
from babel.numbers import get_territory_currencies

from jsonata_extended.constants import DISPLAY_LOCALE, MAX_LOCALE_CACHE_SIZE
from jsonata_extended.core import undefined_passthrough
from jsonata_extended.diagnostics import DelegateFailureError, ErrorTemplate
from jsonata_extended.locale_utils import find_babel_locale, get_babel_locale, normalize_locale

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "LanguageCode",
    "RegionCode",
    # Data classes
    "LanguageName",
    "RegionInfo",
    "LanguageInfo",
    # Lookup functions
    "get_language_info",
    "language_info",
    "flag_emoji",
    # Cache management
    "clear_language_cache",
]

logger = logging.getLogger(__name__)


# ============================================================================
# TYPE ALIASES (PEP 695)
# ============================================================================

type LanguageCode = str
"""ISO 639 language subtag (e.g., 'en', 'es', 'zh')."""

type RegionCode = str
"""ISO 3166-1 alpha-2 or UN M.49 region subtag (e.g., 'US', '419')."""


# ============================================================================
# DATA CLASSES
# ============================================================================


@dataclass(frozen=True, slots=True)
class LanguageName:
    """Display names of a language.

    Attributes:
        name: English display name (e.g., 'Spanish').
        native: Name in the language itself, first letter capitalized
            (e.g., 'Español').
    """

    name: str
    native: str


@dataclass(frozen=True, slots=True)
class RegionInfo:
    """Region metadata for the region subtag of a language tag.

    Attributes:
        name: English display name (e.g., 'United States').
        native: Name in the tag's language (e.g., 'France' for fr-FR).
        continent: GeoNames continent code (e.g., 'NA'), or None.
        capital: English name of the capital city, or None.
        phone: International calling code without '+', or None.
        currency: Comma-separated ISO 4217 codes in current use.
        languages: Official language codes of the region.
        emoji: Flag glyph (two regional indicator symbols), or None.
        emoji_u: Flag codepoints as 'U+XXXX U+XXXX', or None.
    """

    name: str
    native: str
    continent: str | None
    capital: str | None
    phone: str | None
    currency: str
    languages: tuple[LanguageCode, ...]
    emoji: str | None
    emoji_u: str | None

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form with the host's camelCase keys."""
        return {
            "name": self.name,
            "native": self.native,
            "continent": self.continent,
            "capital": self.capital,
            "phone": self.phone,
            "currency": self.currency,
            "languages": list(self.languages),
            "emoji": self.emoji,
            "emojiU": self.emoji_u,
        }


@dataclass(frozen=True, slots=True)
class LanguageInfo:
    """Everything known about one language tag."""

    rfc5646: str
    region: RegionInfo | None
    language: LanguageName

    def to_dict(self) -> dict[str, Any]:
        return {
            "rfc5646": self.rfc5646,
            "region": self.region.to_dict() if self.region is not None else None,
            "language": {"name": self.language.name, "native": self.language.native},
        }


# ============================================================================
# HELPERS
# ============================================================================

# Offset from 'A' to REGIONAL INDICATOR SYMBOL LETTER A.
_REGIONAL_INDICATOR_OFFSET = 0x1F1E6 - ord("A")


def flag_emoji(region: RegionCode) -> str | None:
    """Flag glyph for an ISO 3166-1 alpha-2 code, or None for other codes.

    Example:
        >>> flag_emoji("US") == "\\U0001F1FA\\U0001F1F8"
        True
        >>> flag_emoji("419") is None
        True
    """
    if len(region) != 2 or not region.isascii() or not region.isalpha():
        return None
    return "".join(chr(ord(letter) + _REGIONAL_INDICATOR_OFFSET) for letter in region.upper())


@lru_cache(maxsize=1)
def _geonames_countries() -> dict[str, dict[str, Any]]:
    """GeoNames country records keyed by ISO 3166-1 alpha-2 code."""
    return geonamescache.GeonamesCache().get_countries()


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def _calling_code(region: RegionCode) -> str | None:
    code = phonenumbers.country_code_for_region(region)
    # phonenumbers reports 0 for regions without a calling code
    return str(code) if code else None


def _language_name(language: LanguageCode, tag: str) -> LanguageName:
    english = get_babel_locale(DISPLAY_LOCALE).languages.get(language)
    if english is None:
        raise DelegateFailureError(ErrorTemplate.invalid_language_tag(tag))

    native_locale = find_babel_locale(language)
    native = native_locale.languages.get(language) if native_locale is not None else None
    if native is None:
        logger.warning("No native name for language '%s'; using English name", language)
        native = english
    return LanguageName(name=english, native=_capitalize_first(native))


def _region_info(language: LanguageCode, region: RegionCode) -> RegionInfo | None:
    name = get_babel_locale(DISPLAY_LOCALE).territories.get(region)
    if name is None:
        logger.warning("Unknown region '%s'; region info omitted", region)
        return None

    native_locale = find_babel_locale(f"{language}_{region}", language)
    native = native_locale.territories.get(region) if native_locale is not None else None

    # UN M.49 areas such as 419 have no GeoNames record
    country = _geonames_countries().get(region, {})

    emoji = flag_emoji(region)
    emoji_u = (
        " ".join(f"U+{ord(char):X}" for char in emoji) if emoji is not None else None
    )
    return RegionInfo(
        name=name,
        native=native or name,
        continent=country.get("continentcode") or None,
        capital=country.get("capital") or None,
        phone=_calling_code(region),
        currency=",".join(get_territory_currencies(region)),
        languages=tuple(get_official_languages(region, de_facto=True)),
        emoji=emoji,
        emoji_u=emoji_u,
    )


# ============================================================================
# CACHED LOOKUP FUNCTIONS
# ============================================================================


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_language_info(tag: str) -> LanguageInfo:
    """Look up language and region metadata for an RFC 5646 tag.

    Args:
        tag: Language tag, e.g. 'es', 'en-US', 'zh-Hant-TW'. Underscore
            separators are accepted as well.

    Returns:
        LanguageInfo; ``region`` is None when the tag has no region subtag.

    Raises:
        DelegateFailureError: If the tag is malformed or its language is
            unknown to CLDR

    Thread-safe. Results cached per tag.
    """
    try:
        parts = parse_locale(normalize_locale(tag))
    except ValueError as e:
        raise DelegateFailureError(ErrorTemplate.invalid_language_tag(tag)) from e

    language, region = parts[0].lower(), parts[1]
    language_name = _language_name(language, tag)
    region_info = _region_info(language, region.upper()) if region else None
    return LanguageInfo(rfc5646=tag, region=region_info, language=language_name)


def clear_language_cache() -> None:
    """Clear language info caches."""
    get_language_info.cache_clear()


@undefined_passthrough
def language_info(value: str) -> dict[str, Any]:
    """Describe an RFC 5646 language tag.

    Args:
        value: Language tag (None returns None)

    Returns:
        Dict with keys rfc5646, region (None or a dict) and language

    Raises:
        DelegateFailureError: "Invalid RFC5646 Tag. Value: ..." for
            malformed or unknown tags

    Example:
        >>> language_info("es")
        {'rfc5646': 'es', 'region': None, 'language': {'name': 'Spanish', 'native': 'Español'}}
    """
    if not isinstance(value, str) or not value:
        raise DelegateFailureError(ErrorTemplate.invalid_language_tag(value))
    return get_language_info(value).to_dict()
