"""UUID shortening in arbitrary bases.

Implements the shortenUuid/encodeUuid and unshortenUuid/decodeUuid host
functions. A UUID is read as a 128-bit unsigned integer and written in the
digits of the chosen alphabet, most significant digit first, without
padding. Decoding reverses this and always yields the lowercase canonical
8-4-4-4-12 form.

Supported bases: base2, base10, base16, base32 (Crockford), base36, base58,
base62, base64, base64url. See ``UUID_ALPHABETS`` for the digit orderings.

Example:
    >>> shorten_uuid("1b49aa30-e719-11e6-9835-f723b46a2688", "base36")
    '1m5otdkthiyq143crwujacdqg'
    >>> unshorten_uuid("1m5otdkthiyq143crwujacdqg", "base36")
    '1b49aa30-e719-11e6-9835-f723b46a2688'

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
import uuid

from jsonata_extended.constants import DEFAULT_UUID_BASE, UUID_ALPHABETS, UUID_BITS
from jsonata_extended.core import undefined_passthrough
from jsonata_extended.diagnostics import DelegateFailureError, ErrorTemplate, OptionTypeError

__all__ = [
    "decode_uuid",
    "encode_uuid",
    "is_valid_uuid",
    "shorten_uuid",
    "unshorten_uuid",
]

# Canonical textual form only: no braces, no urn: prefix, no missing dashes.
_CANONICAL_UUID = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)

_MAX_UUID_INT = (1 << UUID_BITS) - 1


def is_valid_uuid(value: object) -> bool:
    """Check if value is a UUID in canonical 8-4-4-4-12 form (any case)."""
    return isinstance(value, str) and _CANONICAL_UUID.fullmatch(value) is not None


def _alphabet(base: object) -> str:
    """Digit alphabet for base, or raise for unsupported names."""
    if not isinstance(base, str) or base not in UUID_ALPHABETS:
        raise OptionTypeError(ErrorTemplate.invalid_base(base, UUID_ALPHABETS))
    return UUID_ALPHABETS[base]


def _to_digits(number: int, alphabet: str) -> str:
    radix = len(alphabet)
    if number == 0:
        return alphabet[0]
    digits: list[str] = []
    while number:
        number, remainder = divmod(number, radix)
        digits.append(alphabet[remainder])
    return "".join(reversed(digits))


def _from_digits(encoded: str, alphabet: str) -> int | None:
    radix = len(alphabet)
    number = 0
    for char in encoded:
        digit = alphabet.find(char)
        if digit < 0:
            return None
        number = number * radix + digit
    return number


@undefined_passthrough
def shorten_uuid(value: str, base: str | None = DEFAULT_UUID_BASE) -> str:
    """Encode a canonical UUID in a compact base.

    Args:
        value: Canonical UUID string (None returns None)
        base: Base name (default: "base36"; None also selects the default)

    Returns:
        Encoded UUID

    Raises:
        DelegateFailureError: If value is not a canonical UUID
        OptionTypeError: If base is not supported
    """
    if not is_valid_uuid(value):
        raise DelegateFailureError(ErrorTemplate.invalid_uuid())
    alphabet = _alphabet(DEFAULT_UUID_BASE if base is None else base)
    return _to_digits(uuid.UUID(value).int, alphabet)


@undefined_passthrough
def unshorten_uuid(value: str, base: str | None = DEFAULT_UUID_BASE) -> str:
    """Decode a shortened UUID back to canonical form.

    Args:
        value: Encoded UUID (None returns None)
        base: Base name used for encoding (default: "base36")

    Returns:
        Lowercase canonical UUID string

    Raises:
        OptionTypeError: If base is not supported
        DelegateFailureError: If value holds characters outside the alphabet
            or encodes a number wider than 128 bits
    """
    resolved_base = DEFAULT_UUID_BASE if base is None else base
    alphabet = _alphabet(resolved_base)
    number = _from_digits(value, alphabet) if isinstance(value, str) and value else None
    if number is None or number > _MAX_UUID_INT:
        raise DelegateFailureError(ErrorTemplate.invalid_encoded_uuid(value, resolved_base))
    return str(uuid.UUID(int=number))


@undefined_passthrough
def encode_uuid(value: str, base: str | None = DEFAULT_UUID_BASE) -> str:
    """Alias of shorten_uuid."""
    return shorten_uuid(value, base)


@undefined_passthrough
def decode_uuid(value: str, base: str | None = DEFAULT_UUID_BASE) -> str:
    """Alias of unshorten_uuid."""
    return unshorten_uuid(value, base)
