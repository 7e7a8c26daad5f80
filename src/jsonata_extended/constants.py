"""Shared constants for jsonata-extended.

This module provides centralized configuration constants used across the
text, parsing and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Truncation defaults: Fallback values for truncate() options
- UUID encoding: Supported bases and their alphabets
- HTML conversion: Defaults for htmltotext()
- Cache limits: Memory bounds for Babel locale lookups

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Truncation defaults
    "DEFAULT_TRUNCATE_LENGTH",
    "DEFAULT_OMISSION",
    "ASTRAL_PLACEHOLDER",
    # UUID encoding
    "DEFAULT_UUID_BASE",
    "UUID_ALPHABETS",
    "UUID_BITS",
    # HTML conversion
    "DEFAULT_WHITESPACE_CHARACTERS",
    # Locale data
    "DISPLAY_LOCALE",
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# TRUNCATION DEFAULTS
# ============================================================================

# Maximum codepoint count of a truncated string when the caller gives none.
DEFAULT_TRUNCATE_LENGTH: int = 30

# Marker appended to truncated strings.
DEFAULT_OMISSION: str = "..."

# Stand-in for astral codepoints while matching word-break patterns.
# ZERO WIDTH JOINER: one codepoint, never a word character.
ASTRAL_PLACEHOLDER: str = "\u200d"

# ============================================================================
# UUID ENCODING
# ============================================================================

DEFAULT_UUID_BASE: str = "base36"

# A UUID is a 128-bit integer; decoded values must fit in it.
UUID_BITS: int = 128

# Alphabets are ordered by digit value. Insertion order is the order
# reported in "Invalid basex" errors.
UUID_ALPHABETS: dict[str, str] = {
    "base2": "01",
    "base10": "0123456789",
    "base16": "0123456789abcdef",
    # Crockford: no I, L, O, U
    "base32": "0123456789ABCDEFGHJKMNPQRSTVWXYZ",
    "base36": "0123456789abcdefghijklmnopqrstuvwxyz",
    # Bitcoin-style, lowercase first: no 0, O, I, l
    "base58": "123456789abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ",
    "base62": "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "base64": "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/",
    "base64url": "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_",
}

# ============================================================================
# HTML CONVERSION
# ============================================================================

# Characters treated as word separators in HTML input.
# Includes ZERO WIDTH SPACE and NO-BREAK SPACE on top of ASCII whitespace.
DEFAULT_WHITESPACE_CHARACTERS: str = " \t\r\n\f\u200b\u00a0"

# ============================================================================
# LOCALE DATA
# ============================================================================

# Locale used for English display names in languageInfo().
DISPLAY_LOCALE: str = "en"

# Maximum cached Babel Locale instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128
