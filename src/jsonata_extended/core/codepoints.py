"""Codepoint primitives shared by all string-bounding logic.

Python ``str`` objects are sequences of Unicode codepoints, so indexing never
splits a character the way UTF-16 storage-unit indexing does. The helpers here
make that the explicit contract and add the UTF-16 view for the few places
that need it (word-break matching, per-storage-unit replacement).

Python 3.13+. Zero external dependencies.
"""

from jsonata_extended.constants import ASTRAL_PLACEHOLDER

__all__ = [
    "codepoint_count",
    "codepoint_slice",
    "is_astral",
    "mask_astral",
    "utf16_length",
]

# First codepoint outside the Basic Multilingual Plane.
_FIRST_ASTRAL = 0x10000


def codepoint_count(text: str) -> int:
    """Number of Unicode codepoints in text.

    Example:
        >>> codepoint_count("abc")
        3
        >>> codepoint_count("a\\U0001F600")
        2
    """
    return len(text)


def codepoint_slice(text: str, end: int) -> str:
    """First ``end`` codepoints of text.

    A negative ``end`` clamps to an empty prefix rather than counting back
    from the end of the string.

    Example:
        >>> codepoint_slice("abcdef", 3)
        'abc'
        >>> codepoint_slice("abcdef", -1)
        ''
    """
    if end <= 0:
        return ""
    return text[:end]


def is_astral(char: str) -> bool:
    """Whether a single character needs a UTF-16 surrogate pair."""
    return ord(char) >= _FIRST_ASTRAL


def utf16_length(text: str) -> int:
    """Number of UTF-16 storage units needed for text."""
    return sum(2 if is_astral(char) else 1 for char in text)


def mask_astral(text: str, placeholder: str = ASTRAL_PLACEHOLDER) -> str:
    """Replace every astral codepoint with a single placeholder character.

    The result has the same codepoint count as the input, so match offsets
    found in it are valid codepoint offsets into the original.
    """
    return "".join(placeholder if is_astral(char) else char for char in text)
