"""Text functions: truncation, HTML conversion, folding and templates.

Python 3.13+.
"""

from .folding import FoldingOptions, unicode_to_ascii
from .html import HtmlToTextOptions, html_to_text
from .template import mustache
from .truncate import TruncateOptions, find_wordbreak, truncate

__all__ = [
    "FoldingOptions",
    "HtmlToTextOptions",
    "TruncateOptions",
    "find_wordbreak",
    "html_to_text",
    "mustache",
    "truncate",
    "unicode_to_ascii",
]
