"""Parsing functions: UUIDs, URLs, paths, dates and durations.

Python 3.13+.
"""

from .dates import moment, moment_duration, normalize_duration_unit
from .urls import parse_path, parse_url
from .uuids import decode_uuid, encode_uuid, is_valid_uuid, shorten_uuid, unshorten_uuid

__all__ = [
    "decode_uuid",
    "encode_uuid",
    "is_valid_uuid",
    "moment",
    "moment_duration",
    "normalize_duration_unit",
    "parse_path",
    "parse_url",
    "shorten_uuid",
    "unshorten_uuid",
]
