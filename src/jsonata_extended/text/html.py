"""HTML to plain text conversion.

Implements the htmltotext() host function on top of html2text. html2text
renders Markdown; the result is then rewritten line by line into plain text:

    - Headings lose their ``#`` markers and are uppercased
    - Links and images read ``text [href]``
    - Tables are laid out as space-aligned columns
    - Markdown escape backslashes are removed
    - Paragraphs are wrapped to ``wordwrap`` columns when requested

Python 3.13+. Uses html2text.
"""

from __future__ import annotations

import re
import textwrap
from collections.abc import Mapping
from dataclasses import dataclass, fields

import html2text
from html2text import config as html2text_config

from jsonata_extended.constants import DEFAULT_WHITESPACE_CHARACTERS
from jsonata_extended.core import undefined_passthrough
from jsonata_extended.diagnostics import ErrorTemplate, OptionTypeError

__all__ = ["HtmlToTextOptions", "html_to_text", "markdown_to_plain_text"]

# html2text already treats these as whitespace.
_ASCII_WHITESPACE = frozenset(" \t\r\n\f\v")

# Option names as written in expressions -> dataclass field names.
_OPTION_NAMES: dict[str, str] = {
    "wordwrap": "wordwrap",
    "linkHrefBaseUrl": "link_href_base_url",
    "ignoreHref": "ignore_href",
    "ignoreImage": "ignore_image",
    "tables": "tables",
    "whitespaceCharacters": "whitespace_characters",
}

_HEADING = re.compile(r"^#{1,9} (.*)$")

# [text](href "title") and ![alt](src); escaped brackets are not links.
_LINK = re.compile(
    r'!?(?<!\\)\[((?:\\.|[^\]\\])*)\]\(((?:\\.|[^\s)\\])*)(?: "(?:\\.|[^"\\])*")?\)'
)
_LINK_TARGET = re.compile(r"(\]\((?:\\.|[^)\\])*\))")

_ESCAPED = re.compile(r"\\([%s])" % re.escape(html2text_config.RE_SLASH_CHARS))

# Header underline html2text emits below the first table row.
_TABLE_RULE = re.compile(r"-{3}(?:\|-{3})*")

_BLANK_RUNS = re.compile(r"\n{3,}")

_COLUMN_GAP = "  "


@dataclass(frozen=True, slots=True)
class HtmlToTextOptions:
    """Resolved options for a single htmltotext() call.

    Attributes:
        wordwrap: Line width for wrapping paragraphs; None or False disables
            wrapping (default: None)
        link_href_base_url: Prefix for root-relative link targets
        ignore_href: Drop link targets, keeping link text (default: False)
        ignore_image: Drop images entirely (default: False)
        tables: Keep table layout; False flattens tables (default: True).
            Only a boolean is accepted; per-table CSS selector lists are
            not supported.
        whitespace_characters: Characters treated as word separators
    """

    wordwrap: int | bool | None = None
    link_href_base_url: str = ""
    ignore_href: bool = False
    ignore_image: bool = False
    tables: bool = True
    whitespace_characters: str = DEFAULT_WHITESPACE_CHARACTERS

    def __post_init__(self) -> None:
        """Validate option types.

        Raises:
            OptionTypeError: If wordwrap is not an integer or disabled flag,
                a flag is not a boolean, or a string option is not a string.
        """
        if self.wordwrap is True or (
            self.wordwrap is not None and not isinstance(self.wordwrap, int)
        ):
            raise OptionTypeError(
                ErrorTemplate.option_type_mismatch(
                    "wordwrap", self.wordwrap, "number", function_name="htmltotext"
                )
            )
        for name, label in (
            ("ignore_href", "ignoreHref"),
            ("ignore_image", "ignoreImage"),
            ("tables", "tables"),
        ):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise OptionTypeError(
                    ErrorTemplate.option_type_mismatch(
                        label, value, "boolean", function_name="htmltotext"
                    )
                )
        for name, label in (
            ("link_href_base_url", "linkHrefBaseUrl"),
            ("whitespace_characters", "whitespaceCharacters"),
        ):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise OptionTypeError(
                    ErrorTemplate.option_type_mismatch(
                        label, value, "string", function_name="htmltotext"
                    )
                )

    @property
    def body_width(self) -> int:
        """Line width for wrapping; 0 disables wrapping."""
        if self.wordwrap is None or self.wordwrap is False:
            return 0
        return int(self.wordwrap)

    @classmethod
    def resolve(cls, overrides: Mapping[str, object] | None = None) -> HtmlToTextOptions:
        """Merge caller-supplied camelCase options over the defaults.

        Unknown keys are ignored. ``wordwrap`` may be explicitly ``None`` to
        disable wrapping; other keys set to ``None`` keep their default.

        Raises:
            OptionTypeError: If overrides is not a mapping or a value has
                the wrong type.
        """
        if overrides is None:
            return cls()
        if not isinstance(overrides, Mapping):
            raise OptionTypeError(
                ErrorTemplate.option_type_mismatch(
                    "options", overrides, "object", function_name="htmltotext"
                )
            )
        known = {field.name for field in fields(cls)}
        supplied: dict[str, object] = {}
        for key, value in overrides.items():
            name = _OPTION_NAMES.get(key, key)
            if name not in known:
                continue
            if value is None and name != "wordwrap":
                continue
            supplied[name] = value
        return cls(**supplied)  # type: ignore[arg-type]

    def build_converter(self) -> html2text.HTML2Text:
        """Create an html2text converter configured from these options.

        Wrapping is left to markdown_to_plain_text so that rewritten links
        and tables are measured as plain text.
        """
        converter = html2text.HTML2Text(baseurl=self.link_href_base_url)
        converter.body_width = 0
        converter.ignore_links = self.ignore_href
        converter.ignore_images = self.ignore_image
        converter.ignore_tables = not self.tables
        converter.ignore_emphasis = True
        converter.unicode_snob = True
        converter.use_automatic_links = False
        converter.pad_tables = False
        return converter

    def normalize_whitespace(self, markup: str) -> str:
        """Map non-ASCII whitespace characters to plain spaces."""
        extra = {ord(char): " " for char in self.whitespace_characters if char not in _ASCII_WHITESPACE}
        return markup.translate(extra) if extra else markup


def _uppercase_heading(match: re.Match[str]) -> str:
    # Link targets inside a heading keep their case.
    parts = _LINK_TARGET.split(match.group(1))
    return "".join(part if _LINK_TARGET.fullmatch(part) else part.upper() for part in parts)


def _link_as_text(match: re.Match[str]) -> str:
    text = match.group(1).strip()
    href = match.group(2)
    if not href:
        return text
    return f"{text} [{href}]" if text else f"[{href}]"


def _plain_line(line: str) -> str:
    line = _HEADING.sub(_uppercase_heading, line)
    line = _LINK.sub(_link_as_text, line)
    return _ESCAPED.sub(r"\1", line)


def _layout_table(rows: list[str]) -> list[str]:
    cells = [[_plain_line(cell.strip()) for cell in row.split("|")] for row in rows]
    column_count = max(len(row) for row in cells)
    widths = [0] * column_count
    for row in cells:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], len(cell))
    return [
        _COLUMN_GAP.join(cell.ljust(widths[index]) for index, cell in enumerate(row)).rstrip()
        for row in cells
    ]


def _wrap(line: str, width: int) -> list[str]:
    if not width or len(line) <= width:
        return [line]
    indent = line[: len(line) - len(line.lstrip())]
    return textwrap.wrap(
        line,
        width,
        subsequent_indent=indent,
        break_long_words=False,
        break_on_hyphens=False,
    )


def markdown_to_plain_text(markdown: str, width: int = 0) -> str:
    """Rewrite html2text Markdown output as plain text.

    Args:
        markdown: Output of HTML2Text.handle()
        width: Wrap paragraphs at this many characters; 0 disables wrapping.
            Table rows are never wrapped.

    Returns:
        Plain text with runs of blank lines collapsed and surrounding
        whitespace removed

    Example:
        >>> markdown_to_plain_text("# Title\\n\\nSee [docs](https://x.test/)")
        'TITLE\\n\\nSee docs [https://x.test/]'
    """
    lines = [line.rstrip() for line in markdown.splitlines()]
    output: list[str] = []
    index = 0
    while index < len(lines):
        line = lines[index]
        if line and index + 1 < len(lines) and _TABLE_RULE.fullmatch(lines[index + 1]):
            end = index + 2
            while end < len(lines) and lines[end]:
                end += 1
            output.extend(_layout_table([line, *lines[index + 2 : end]]))
            index = end
            continue
        output.extend(_wrap(_plain_line(line), width))
        index += 1
    return _BLANK_RUNS.sub("\n\n", "\n".join(output)).strip()


@undefined_passthrough
def html_to_text(value: str, options: Mapping[str, object] | None = None) -> str:
    """Convert HTML markup to plain text.

    Args:
        value: HTML markup (None returns None)
        options: Partial options mapping; see HtmlToTextOptions for keys

    Returns:
        Plain text with surrounding whitespace removed

    Raises:
        OptionTypeError: If an option has the wrong type

    Example:
        >>> html_to_text("<p>Leadership has a dark side; a &#34;leadership shadow&#34;.</p>")
        'Leadership has a dark side; a "leadership shadow".'
        >>> html_to_text('<h2>Intro</h2><p>See <a href="https://x.test/">docs</a></p>')
        'INTRO\\n\\nSee docs [https://x.test/]'
    """
    resolved = HtmlToTextOptions.resolve(options)
    converter = resolved.build_converter()
    markup = resolved.normalize_whitespace(value.strip())
    return markdown_to_plain_text(converter.handle(markup), resolved.body_width)
