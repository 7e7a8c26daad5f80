"""Core utilities shared across text, parsing and runtime layers.

This package provides foundational utilities that every function module
depends on. By isolating these utilities here, we maintain a clean
dependency graph:

    core <- text, parsing, introspection <- runtime

Exports:
    codepoint_count: Codepoint length of a string
    codepoint_slice: Codepoint prefix with negative ends clamped to empty
    mask_astral: Replace astral codepoints with a single placeholder
    undefined_passthrough: Decorator returning None for a missing primary argument

Python 3.13+.
"""

from .codepoints import codepoint_count, codepoint_slice, is_astral, mask_astral, utf16_length
from .passthrough import is_passthrough, undefined_passthrough

__all__ = [
    "codepoint_count",
    "codepoint_slice",
    "is_astral",
    "is_passthrough",
    "mask_astral",
    "undefined_passthrough",
    "utf16_length",
]
