"""Metadata and calling signatures for the extension functions.

This module declares each host function's calling convention as data
instead of ad hoc signature strings. The host engine consumes the rendered
form (``<s?o?:s>``) for argument coercion and validation; the registry
checks the declared arity against the Python implementation.

Architecture:
    - ParamType / Modifier: the letters of the signature mini-language
    - ParamSpec / Signature: one parameter, one full calling convention
    - FunctionMetadata: name mapping, signature and passthrough flag
    - EXTENSION_FUNCTIONS: centralized table of every exposed function

Signature mini-language:
    ``<`` params ``:`` return ``>``. Each parameter is a type letter or a
    parenthesized union of letters, optionally followed by ``?`` (optional),
    ``+`` (one or more) or ``-`` (taken from context when omitted).

    ========  ===========
    Letter    Type
    ========  ===========
    s         string
    n         number
    b         boolean
    l         null
    a         array
    o         object
    f         function
    j         any JSON value
    x         any value
    ========  ===========

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from jsonata_extended.diagnostics import ErrorTemplate, SignatureMismatchError

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Mini-language
    "ParamType",
    "Modifier",
    "ParamSpec",
    "Signature",
    "optional",
    "required",
    # Function table
    "FunctionCategory",
    "FunctionMetadata",
    "EXTENSION_FUNCTIONS",
    "get_metadata",
]


class ParamType(StrEnum):
    """Type letters of the signature mini-language."""

    STRING = "s"
    NUMBER = "n"
    BOOLEAN = "b"
    NULL = "l"
    ARRAY = "a"
    OBJECT = "o"
    FUNCTION = "f"
    JSON = "j"
    ANY = "x"


class Modifier(StrEnum):
    """Parameter modifiers; NONE marks a required parameter."""

    NONE = ""
    OPTIONAL = "?"
    VARIADIC = "+"
    CONTEXT = "-"


@dataclass(frozen=True, slots=True)
class ParamSpec:
    """One positional parameter: accepted types plus modifier.

    Attributes:
        types: Accepted types; more than one renders as a union ``(sn)``
        modifier: Optional, variadic, context or none
    """

    types: tuple[ParamType, ...]
    modifier: Modifier = Modifier.NONE

    def __post_init__(self) -> None:
        if not self.types:
            msg = "ParamSpec requires at least one type"
            raise ValueError(msg)

    @property
    def is_required(self) -> bool:
        """Whether the caller must supply this argument."""
        return self.modifier in (Modifier.NONE, Modifier.VARIADIC)

    def render(self) -> str:
        letters = "".join(self.types)
        body = letters if len(self.types) == 1 else f"({letters})"
        return f"{body}{self.modifier}"


def optional(*types: ParamType) -> ParamSpec:
    """Optional parameter accepting any of types."""
    return ParamSpec(types=types, modifier=Modifier.OPTIONAL)


def required(*types: ParamType) -> ParamSpec:
    """Required parameter accepting any of types."""
    return ParamSpec(types=types)


_TYPE_LETTERS = frozenset(ParamType)
_MODIFIERS = {modifier.value: modifier for modifier in Modifier if modifier.value}


@dataclass(frozen=True, slots=True)
class Signature:
    """Calling convention of one host function.

    Attributes:
        params: Positional parameters in order
        returns: Return type

    Example:
        >>> sig = Signature((optional(ParamType.STRING), optional(ParamType.OBJECT)), ParamType.STRING)
        >>> sig.render()
        '<s?o?:s>'
        >>> Signature.parse("<s?o?:s>") == sig
        True
        >>> sig.min_args, sig.max_args
        (0, 2)
    """

    params: tuple[ParamSpec, ...]
    returns: ParamType

    @property
    def min_args(self) -> int:
        """Fewest positional arguments a call may pass."""
        return sum(1 for param in self.params if param.is_required)

    @property
    def max_args(self) -> int | None:
        """Most positional arguments a call may pass (None: unbounded)."""
        if any(param.modifier is Modifier.VARIADIC for param in self.params):
            return None
        return len(self.params)

    def render(self) -> str:
        """Render to the host mini-language."""
        return f"<{''.join(param.render() for param in self.params)}:{self.returns}>"

    def __str__(self) -> str:
        return self.render()

    @classmethod
    def parse(cls, text: str) -> Signature:
        """Parse mini-language text into a Signature.

        Raises:
            SignatureMismatchError: If text is malformed
        """
        return _SignatureParser(text).parse()


class _SignatureParser:
    """Single-pass cursor over signature text."""

    __slots__ = ("_pos", "_text")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _fail(self, reason: str) -> SignatureMismatchError:
        return SignatureMismatchError(ErrorTemplate.signature_syntax(self._text, self._pos, reason))

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _expect(self, char: str) -> None:
        if self._peek() != char:
            raise self._fail(f"expected '{char}'")
        self._pos += 1

    def _type_letter(self) -> ParamType:
        letter = self._peek()
        if letter not in _TYPE_LETTERS:
            raise self._fail("expected a type letter")
        self._pos += 1
        return ParamType(letter)

    def _param(self) -> ParamSpec:
        if self._peek() == "(":
            self._pos += 1
            types: list[ParamType] = []
            while self._peek() != ")":
                types.append(self._type_letter())
            if not types:
                raise self._fail("empty type union")
            self._pos += 1
        else:
            types = [self._type_letter()]
        modifier = _MODIFIERS.get(self._peek(), Modifier.NONE)
        if modifier is not Modifier.NONE:
            self._pos += 1
        return ParamSpec(types=tuple(types), modifier=modifier)

    def parse(self) -> Signature:
        self._expect("<")
        params: list[ParamSpec] = []
        while self._peek() not in (":", ""):
            params.append(self._param())
        self._expect(":")
        returns = self._type_letter()
        self._expect(">")
        if self._pos != len(self._text):
            raise self._fail("unexpected trailing text")
        return Signature(params=tuple(params), returns=returns)


class FunctionCategory(StrEnum):
    """Category classification for extension functions.

    StrEnum provides automatic string conversion: str(FunctionCategory.TEXT) == "text"
    """

    TEXT = "text"
    PARSING = "parsing"
    INTROSPECTION = "introspection"


@dataclass(frozen=True, slots=True)
class FunctionMetadata:
    """Metadata for one extension function.

    Attributes:
        python_name: Python function name (snake_case)
        name: Host function name (what expressions call, without ``$``)
        signature: Declared calling convention
        passthrough: Whether a missing first argument returns None
        category: Function category for documentation
    """

    python_name: str
    name: str
    signature: Signature
    passthrough: bool = True
    category: FunctionCategory = FunctionCategory.TEXT


_S, _N, _B, _A, _O = (
    ParamType.STRING,
    ParamType.NUMBER,
    ParamType.BOOLEAN,
    ParamType.ARRAY,
    ParamType.OBJECT,
)

# (text?, options?) -> text
_TEXT_WITH_OPTIONS = Signature((optional(_S), optional(_O)), _S)
# (value?, base?) -> text
_UUID_WITH_BASE = Signature((optional(_S), optional(_S)), _S)
# (text?) -> object
_TEXT_TO_OBJECT = Signature((optional(_S),), _O)


def _meta(
    python_name: str,
    name: str,
    signature: Signature,
    category: FunctionCategory,
    *,
    passthrough: bool = True,
) -> FunctionMetadata:
    return FunctionMetadata(
        python_name=python_name,
        name=name,
        signature=signature,
        passthrough=passthrough,
        category=category,
    )


# Single source of truth for what gets bound into a host, keyed by host name.
# Insertion order is binding order.
EXTENSION_FUNCTIONS: dict[str, FunctionMetadata] = {
    meta.name: meta
    for meta in (
        _meta("html_to_text", "htmltotext", _TEXT_WITH_OPTIONS, FunctionCategory.TEXT),
        _meta("shorten_uuid", "shortenUuid", _UUID_WITH_BASE, FunctionCategory.PARSING),
        _meta("unshorten_uuid", "unshortenUuid", _UUID_WITH_BASE, FunctionCategory.PARSING),
        _meta("encode_uuid", "encodeUuid", _UUID_WITH_BASE, FunctionCategory.PARSING),
        _meta("decode_uuid", "decodeUuid", _UUID_WITH_BASE, FunctionCategory.PARSING),
        _meta("truncate", "truncate", _TEXT_WITH_OPTIONS, FunctionCategory.TEXT),
        _meta(
            "language_info", "languageInfo", _TEXT_TO_OBJECT, FunctionCategory.INTROSPECTION
        ),
        _meta("parse_url", "parseUrl", _TEXT_TO_OBJECT, FunctionCategory.PARSING),
        _meta("parse_path", "parsePath", _TEXT_TO_OBJECT, FunctionCategory.PARSING),
        _meta(
            "moment",
            "moment",
            Signature(
                (
                    optional(_S, _N, _A),
                    optional(_S, _A),
                    optional(_S, _B),
                    optional(_B),
                ),
                _O,
            ),
            FunctionCategory.PARSING,
            passthrough=False,
        ),
        _meta(
            "moment_duration",
            "momentDuration",
            Signature((optional(_S, _N, _O), optional(_S)), _O),
            FunctionCategory.PARSING,
            passthrough=False,
        ),
        _meta(
            "mustache",
            "mustache",
            Signature((optional(_O), optional(_S)), _S),
            FunctionCategory.TEXT,
        ),
        _meta("unicode_to_ascii", "unicodeToASCII", _TEXT_WITH_OPTIONS, FunctionCategory.TEXT),
    )
}


def get_metadata(name: str) -> FunctionMetadata | None:
    """Get metadata by host function name.

    Example:
        >>> get_metadata("truncate").signature.render()
        '<s?o?:s>'
        >>> get_metadata("CUSTOM") is None
        True
    """
    return EXTENSION_FUNCTIONS.get(name)
