"""Unicode to ASCII folding.

Implements the unicodeToASCII() host function on top of Unidecode.
Characters outside Basic Latin are transliterated to their closest ASCII
equivalent. Characters Unidecode has no mapping for are either kept as-is or
replaced, once per UTF-16 storage unit, with a caller-supplied string.

Python 3.13+. Uses Unidecode.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from unidecode import UnidecodeError, unidecode

from jsonata_extended.core import undefined_passthrough, utf16_length
from jsonata_extended.diagnostics import ErrorTemplate, OptionTypeError

__all__ = ["FoldingOptions", "unicode_to_ascii"]


@dataclass(frozen=True, slots=True)
class FoldingOptions:
    """Resolved options for a single unicodeToASCII() call.

    Attributes:
        replacement: String substituted for each storage unit of an
            unmappable character; None keeps such characters unchanged.
    """

    replacement: str | None = None

    def __post_init__(self) -> None:
        if self.replacement is not None and not isinstance(self.replacement, str):
            raise OptionTypeError(
                ErrorTemplate.option_type_mismatch(
                    "replacement", self.replacement, "string", function_name="unicodeToASCII"
                )
            )

    @classmethod
    def resolve(cls, overrides: Mapping[str, object] | None = None) -> FoldingOptions:
        """Merge caller-supplied options over the defaults; unknown keys are ignored."""
        if overrides is None:
            return cls()
        if not isinstance(overrides, Mapping):
            raise OptionTypeError(
                ErrorTemplate.option_type_mismatch(
                    "options", overrides, "object", function_name="unicodeToASCII"
                )
            )
        return cls(replacement=overrides.get("replacement"))  # type: ignore[arg-type]


def _fold_char(char: str, replacement: str | None) -> str:
    if char.isascii():
        return char
    try:
        return unidecode(char, errors="strict")
    except UnidecodeError:
        if replacement is None:
            return char
        return replacement * utf16_length(char)


@undefined_passthrough
def unicode_to_ascii(value: str, options: Mapping[str, object] | None = None) -> str:
    """Transliterate non-ASCII characters to ASCII.

    Args:
        value: Unicode string (None returns None)
        options: Partial options mapping with key ``replacement``

    Returns:
        Folded string

    Example:
        >>> unicode_to_ascii("Lörem ëripuît")
        'Lorem eripuit'
        >>> unicode_to_ascii("a\\U000F0000b", {"replacement": "X"})
        'aXXb'
    """
    resolved = FoldingOptions.resolve(options)
    return "".join(_fold_char(char, resolved.replacement) for char in value)
