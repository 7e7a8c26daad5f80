"""Tests for Unicode to ASCII folding."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from jsonata_extended.diagnostics import OptionTypeError
from jsonata_extended.text.folding import FoldingOptions, unicode_to_ascii

# Supplementary Private Use Area-A: no transliteration exists.
UNMAPPABLE = "\U000F0000"


class TestUnicodeToAscii:
    """Transliteration behavior."""

    def test_accented_latin_is_folded(self) -> None:
        assert unicode_to_ascii("Lörem ëripuît") == "Lorem eripuit"

    def test_ascii_is_unchanged(self) -> None:
        value = "plain ASCII text, 123!"

        assert unicode_to_ascii(value) == value

    def test_none_returns_none(self) -> None:
        assert unicode_to_ascii(None) is None

    def test_unmappable_is_kept_by_default(self) -> None:
        assert unicode_to_ascii(f"a{UNMAPPABLE}b") == f"a{UNMAPPABLE}b"

    def test_replacement_is_repeated_per_storage_unit(self) -> None:
        """Astral characters occupy two UTF-16 units and get two replacements."""
        assert unicode_to_ascii(f"a{UNMAPPABLE}b", {"replacement": "?"}) == "a??b"

    def test_empty_replacement_drops_unmappable(self) -> None:
        assert unicode_to_ascii(f"a{UNMAPPABLE}b", {"replacement": ""}) == "ab"

    def test_replacement_must_be_a_string(self) -> None:
        with pytest.raises(OptionTypeError, match=r"options\.replacement=1"):
            unicode_to_ascii("x", {"replacement": 1})

    def test_options_must_be_a_mapping(self) -> None:
        with pytest.raises(OptionTypeError):
            unicode_to_ascii("x", "?")  # type: ignore[arg-type]

    def test_unknown_option_keys_are_ignored(self) -> None:
        assert FoldingOptions.resolve({"mode": "strict"}) == FoldingOptions()

    @given(st.text(alphabet=st.characters(max_codepoint=0x2FFF), max_size=40))
    def test_bmp_letters_fold_to_ascii_with_replacement(self, value: str) -> None:
        """With a replacement, nothing outside ASCII survives."""
        assert unicode_to_ascii(value, {"replacement": "?"}).isascii()
