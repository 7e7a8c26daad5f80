"""Word-boundary aware string truncation.

Implements the truncate() host function. All positions are codepoint
positions; astral characters (emoji, historic scripts) count as one and are
never split.

Algorithm:
    1. Strings of at most ``length`` codepoints are returned unchanged.
    2. The candidate prefix keeps ``length - len(omission)`` codepoints.
    3. A word-break regex, or failing that a literal word-break string, moves
       the cut back to the start of its last occurrence in the prefix.
    4. The omission marker is appended.

Example:
    >>> truncate("1234567890123456789012345678901234567890", {"length": 13})
    '1234567890...'
    >>> truncate("1234567890123456 789012345678901234567890", {"length": 20, "wordbreak": " "})
    '1234567890123456...'

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, fields

from jsonata_extended.constants import DEFAULT_OMISSION, DEFAULT_TRUNCATE_LENGTH
from jsonata_extended.core import (
    codepoint_count,
    codepoint_slice,
    mask_astral,
    undefined_passthrough,
)
from jsonata_extended.diagnostics import DelegateFailureError, ErrorTemplate, OptionTypeError

__all__ = ["TruncateOptions", "find_wordbreak", "truncate"]

# Index reported when no word-break occurs in the prefix.
NOT_FOUND = -1


@dataclass(frozen=True, slots=True)
class TruncateOptions:
    """Resolved options for a single truncate() call.

    Attributes:
        length: Maximum codepoint count of the result (default: 30)
        omission: Marker appended when the input is cut (default: "...")
        wordbreak: Literal separator to cut at, if any
        wordbreakregex: Regular expression source to cut at, if any.
            Takes precedence over wordbreak when it matches.
    """

    length: int | float = DEFAULT_TRUNCATE_LENGTH
    omission: str = DEFAULT_OMISSION
    wordbreak: str | None = None
    wordbreakregex: str | None = None

    def __post_init__(self) -> None:
        """Validate option types before any truncation work.

        Raises:
            OptionTypeError: If length is not a finite number, omission is not a
                string, or a supplied word-break option is not a string.
        """
        # bool is an int subclass but never a meaningful length
        if (
            isinstance(self.length, bool)
            or not isinstance(self.length, int | float)
            or not math.isfinite(self.length)
        ):
            raise OptionTypeError(
                ErrorTemplate.option_type_mismatch(
                    "length", self.length, "number", function_name="truncate"
                )
            )
        if not isinstance(self.omission, str):
            raise OptionTypeError(
                ErrorTemplate.option_type_mismatch(
                    "omission", self.omission, "string", function_name="truncate"
                )
            )
        for name in ("wordbreak", "wordbreakregex"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise OptionTypeError(
                    ErrorTemplate.option_type_mismatch(
                        name, value, "string", function_name="truncate"
                    )
                )

    @classmethod
    def resolve(cls, overrides: Mapping[str, object] | None = None) -> TruncateOptions:
        """Merge caller-supplied options over the defaults.

        Caller fields win; absent fields keep the default; keys that are not
        option names are ignored. An explicit ``None`` is validated like any
        other value, so it is rejected for length and omission and means
        "no word-break" for wordbreak and wordbreakregex.

        Args:
            overrides: Partial options mapping from the expression

        Returns:
            Validated TruncateOptions

        Raises:
            OptionTypeError: If overrides is not a mapping or a value has
                the wrong type.

        Example:
            >>> TruncateOptions.resolve({"length": 10, "color": "red"})
            TruncateOptions(length=10, omission='...', wordbreak=None, wordbreakregex=None)
        """
        if overrides is None:
            return cls()
        if not isinstance(overrides, Mapping):
            raise OptionTypeError(
                ErrorTemplate.option_type_mismatch(
                    "options", overrides, "object", function_name="truncate"
                )
            )
        known = {field.name for field in fields(cls)}
        supplied = {
            key: value
            for key, value in overrides.items()
            if key in known
        }
        return cls(**supplied)  # type: ignore[arg-type]


def find_wordbreak(prefix: str, options: TruncateOptions) -> int:
    """Codepoint index of the last word-break in prefix.

    The regex is searched first; the literal separator is only consulted
    when the regex is absent or never matches. Empty patterns count as
    absent.

    Args:
        prefix: Candidate prefix, already cut to its maximum length
        options: Resolved truncate options

    Returns:
        Start index of the last match, or -1 if none

    Raises:
        DelegateFailureError: If the regex cannot be compiled or matched
    """
    last_match = NOT_FOUND

    if options.wordbreakregex:
        # Astral characters are masked so patterns written against one
        # character per codepoint line up with the original prefix.
        normalized = mask_astral(prefix)
        try:
            separator = re.compile(options.wordbreakregex)
            for match in separator.finditer(normalized):
                last_match = match.start()
        except re.error as e:
            raise DelegateFailureError(ErrorTemplate.wordbreak_regex_failed()) from e

    if options.wordbreak and last_match == NOT_FOUND:
        last_match = prefix.rfind(options.wordbreak)

    return last_match


@undefined_passthrough
def truncate(value: str, options: Mapping[str, object] | None = None) -> str:
    """Truncate value to at most ``length`` codepoints, ending in the omission.

    Args:
        value: String to truncate (None returns None without validation)
        options: Partial options mapping with keys length, omission,
            wordbreak and wordbreakregex

    Returns:
        value unchanged if it already fits, otherwise the cut prefix
        followed by the omission marker

    Raises:
        OptionTypeError: If an option has the wrong type
        DelegateFailureError: If wordbreakregex cannot be processed

    Example:
        >>> truncate("1234567890123456 , 789012345678901234567890",
        ...          {"length": 20, "wordbreakregex": "[ ,;:]"})
        '1234567890123456...'

    Edge Cases:
        When the omission is at least as long as ``length`` the prefix is
        empty and the result is the omission marker alone.
    """
    resolved = TruncateOptions.resolve(options)

    if codepoint_count(value) <= resolved.length:
        return value

    end_slice = int(resolved.length) - codepoint_count(resolved.omission)
    prefix = codepoint_slice(value, end_slice)

    wordbreak_index = find_wordbreak(prefix, resolved)
    if wordbreak_index != NOT_FOUND:
        prefix = codepoint_slice(prefix, wordbreak_index)

    return f"{prefix}{resolved.omission}"
