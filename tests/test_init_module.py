"""Tests for the package top level."""

from __future__ import annotations

import jsonata_extended


class TestPackageExports:
    """Public names and version."""

    def test_version_is_a_string(self) -> None:
        assert isinstance(jsonata_extended.__version__, str)
        assert jsonata_extended.__version__

    def test_all_names_resolve(self) -> None:
        for name in jsonata_extended.__all__:
            assert hasattr(jsonata_extended, name), name

    def test_all_has_no_duplicates(self) -> None:
        assert len(jsonata_extended.__all__) == len(set(jsonata_extended.__all__))

    def test_exports_functions_and_registration(self) -> None:
        expected = {
            "register",
            "truncate",
            "html_to_text",
            "shorten_uuid",
            "unshorten_uuid",
            "encode_uuid",
            "decode_uuid",
            "language_info",
            "parse_url",
            "parse_path",
            "moment",
            "moment_duration",
            "mustache",
            "unicode_to_ascii",
            "ExtensionRegistry",
        }

        assert expected <= set(jsonata_extended.__all__)
