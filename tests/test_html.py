"""Tests for HTML to plain text conversion."""

from __future__ import annotations

import pytest

from jsonata_extended.diagnostics import OptionTypeError
from jsonata_extended.text.html import HtmlToTextOptions, html_to_text, markdown_to_plain_text


class TestHtmlToText:
    """html_to_text conversion behavior."""

    def test_paragraph_with_entities(self) -> None:
        """Entities are decoded and tags removed."""
        html = "<p>Leadership has a dark side; a &#34;leadership shadow&#34;.</p>"

        assert html_to_text(html) == 'Leadership has a dark side; a "leadership shadow".'

    def test_emphasis_markers_are_dropped(self) -> None:
        """Bold and italic do not leave Markdown markers."""
        result = html_to_text("<p><b>bold</b> and <i>italic</i></p>")

        assert result == "bold and italic"

    def test_surrounding_whitespace_is_stripped(self) -> None:
        assert html_to_text("   <p>text</p>\n\n  ") == "text"

    def test_none_returns_none(self) -> None:
        assert html_to_text(None) is None

    def test_ignore_href_keeps_link_text(self) -> None:
        """ignoreHref drops targets but keeps the anchor text."""
        result = html_to_text('<a href="https://example.com/">Example</a>', {"ignoreHref": True})

        assert result == "Example"
        assert "example.com" not in result

    def test_links_keep_targets_by_default(self) -> None:
        result = html_to_text('<a href="https://example.com/">Example</a>')

        assert "https://example.com/" in result

    def test_link_base_url_resolves_relative_links(self) -> None:
        result = html_to_text(
            '<a href="/docs">Docs</a>', {"linkHrefBaseUrl": "https://example.com"}
        )

        assert "https://example.com/docs" in result

    def test_ignore_image_drops_images(self) -> None:
        html = '<p>before<img src="pic.png" alt="picture">after</p>'

        assert "pic.png" not in html_to_text(html, {"ignoreImage": True})

    def test_zero_width_space_separates_words(self) -> None:
        """Non-ASCII whitespace characters act as word separators."""
        assert html_to_text("<p>one\u200btwo</p>") == "one two"

    def test_custom_whitespace_characters(self) -> None:
        """Only the configured characters are mapped to spaces."""
        result = html_to_text("<p>one\u200btwo</p>", {"whitespaceCharacters": " \t\n"})

        assert result == "one\u200btwo"

    def test_wordwrap_wraps_long_paragraphs(self) -> None:
        words = " ".join(["word"] * 30)

        result = html_to_text(f"<p>{words}</p>", {"wordwrap": 20})

        assert all(len(line) <= 20 for line in result.splitlines())
        assert len(result.splitlines()) > 1

    def test_wordwrap_disabled_by_default(self) -> None:
        words = " ".join(["word"] * 30)

        assert "\n" not in html_to_text(f"<p>{words}</p>")

    def test_wordwrap_counts_rewritten_links(self) -> None:
        """Wrapping measures the plain-text form of links."""
        html = "<p>" + " ".join(['<a href="https://x.test/">go</a>'] * 6) + "</p>"

        result = html_to_text(html, {"wordwrap": 30})

        assert all(len(line) <= 30 for line in result.splitlines())
        assert "go [https://x.test/]" in result.splitlines()[0]


class TestHtmlToTextLayout:
    """Markdown constructs are rendered as plain text."""

    def test_headings_are_uppercased_without_markers(self) -> None:
        result = html_to_text("<h1>Title</h1><p>Body</p>")

        assert result == "TITLE\n\nBody"

    def test_list_items_keep_bullets(self) -> None:
        result = html_to_text("<ul><li>one</li><li>two</li></ul>")

        lines = [line.strip() for line in result.splitlines()]
        assert "* one" in lines
        assert "* two" in lines

    def test_links_read_text_then_target(self) -> None:
        result = html_to_text('<p>a <a href="http://x.com">link</a> here</p>')

        assert result == "a link [http://x.com] here"
        assert "](" not in result

    def test_link_titles_are_dropped(self) -> None:
        result = html_to_text('<a href="http://x.com" title="X site">link</a>')

        assert result == "link [http://x.com]"

    def test_link_without_text_shows_target(self) -> None:
        assert html_to_text('<a href="http://x.com"></a>') == "[http://x.com]"

    def test_parentheses_in_targets_are_unescaped(self) -> None:
        result = html_to_text('<a href="http://x.com/a_(b)">wiki</a>')

        assert result == "wiki [http://x.com/a_(b)]"

    def test_images_read_alt_then_source(self) -> None:
        result = html_to_text('<p><img src="http://x.com/pic.png" alt="picture"></p>')

        assert result == "picture [http://x.com/pic.png]"

    def test_tables_become_aligned_columns(self) -> None:
        html = (
            "<table>"
            "<tr><th>name</th><th>qty</th></tr>"
            "<tr><td>apple</td><td>3</td></tr>"
            "<tr><td>fig</td><td>12</td></tr>"
            "</table>"
        )

        result = html_to_text(html)

        assert result.splitlines() == ["name   qty", "apple  3", "fig    12"]

    def test_escaped_list_markers_are_restored(self) -> None:
        """Text that looks like Markdown keeps its literal characters."""
        assert html_to_text("<p>1. first</p><p>- dash</p>") == "1. first\n\n- dash"

    def test_markdown_to_plain_text_collapses_blank_runs(self) -> None:
        assert markdown_to_plain_text("one\n\n\n\ntwo\n") == "one\n\ntwo"


class TestHtmlToTextOptions:
    """Option resolution and validation."""

    def test_camel_case_keys_map_to_fields(self) -> None:
        options = HtmlToTextOptions.resolve(
            {"ignoreHref": True, "linkHrefBaseUrl": "https://x.test", "tables": False}
        )

        assert options.ignore_href is True
        assert options.link_href_base_url == "https://x.test"
        assert options.tables is False

    def test_unknown_keys_are_ignored(self) -> None:
        assert HtmlToTextOptions.resolve({"uppercaseHeadings": True}) == HtmlToTextOptions()

    def test_wordwrap_false_disables_wrapping(self) -> None:
        assert HtmlToTextOptions.resolve({"wordwrap": False}).body_width == 0

    def test_wordwrap_must_be_a_number(self) -> None:
        with pytest.raises(OptionTypeError, match=r"options\.wordwrap=wide"):
            html_to_text("<p>x</p>", {"wordwrap": "wide"})

    def test_wordwrap_true_is_rejected(self) -> None:
        with pytest.raises(OptionTypeError):
            HtmlToTextOptions(wordwrap=True)

    def test_non_mapping_options_are_rejected(self) -> None:
        with pytest.raises(OptionTypeError):
            html_to_text("<p>x</p>", ["wordwrap"])  # type: ignore[arg-type]

    def test_converter_reflects_options(self) -> None:
        converter = HtmlToTextOptions(tables=False, ignore_image=True).build_converter()

        assert converter.ignore_tables is True
        assert converter.ignore_images is True
        assert converter.ignore_emphasis is True

    @pytest.mark.parametrize("key", ["tables", "ignoreHref", "ignoreImage"])
    def test_flags_must_be_booleans(self, key: str) -> None:
        with pytest.raises(OptionTypeError, match=rf"options\.{key}=.* Type: list"):
            html_to_text("<p>x</p>", {key: ["#invoice"]})

    def test_truthy_non_boolean_flag_is_rejected(self) -> None:
        with pytest.raises(OptionTypeError, match="Expected a boolean"):
            HtmlToTextOptions.resolve({"tables": 1})
