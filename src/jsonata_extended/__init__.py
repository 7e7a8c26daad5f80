"""jsonata-extended - extra functions for JSONata-style expression engines.

Binds text, parsing and locale functions into any host engine exposing
``register_function(name, implementation, signature)``.

Public API:
    register - Bind every extension function into a host
    ExtensionRegistry - Registry of host functions and their signatures
    create_default_registry - Fresh registry with every extension function
    get_shared_registry - Shared frozen registry

Functions (host name in parentheses):
    html_to_text (htmltotext), truncate, mustache,
    unicode_to_ascii (unicodeToASCII), shorten_uuid / encode_uuid,
    unshorten_uuid / decode_uuid, parse_url, parse_path, moment,
    moment_duration, language_info

Exceptions:
    ExtensionError - Base exception class
    InvalidHostError - Host cannot accept functions
    OptionTypeError - Option or argument has the wrong type
    DelegateFailureError - Wrapped library rejected the input
    SignatureMismatchError - Declared signature does not fit the function

Submodules:
    jsonata_extended.text - Truncation, HTML conversion, folding, templates
    jsonata_extended.parsing - UUIDs, URLs, paths, dates, durations
    jsonata_extended.introspection - Language tag metadata
    jsonata_extended.runtime - Signatures, registries, host binding
    jsonata_extended.diagnostics - Error types and diagnostic codes
"""

from .diagnostics import (
    DelegateFailureError,
    ExtensionError,
    InvalidHostError,
    OptionTypeError,
    SignatureMismatchError,
)
from .introspection import language_info
from .parsing import (
    decode_uuid,
    encode_uuid,
    moment,
    moment_duration,
    parse_path,
    parse_url,
    shorten_uuid,
    unshorten_uuid,
)
from .runtime import ExtensionRegistry, create_default_registry, get_shared_registry, register
from .text import html_to_text, mustache, truncate, unicode_to_ascii

# Version information - Auto-populated from package metadata
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("jsonata-extended")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DelegateFailureError",
    "ExtensionError",
    "ExtensionRegistry",
    "InvalidHostError",
    "OptionTypeError",
    "SignatureMismatchError",
    "__version__",
    "create_default_registry",
    "decode_uuid",
    "encode_uuid",
    "get_shared_registry",
    "html_to_text",
    "language_info",
    "moment",
    "moment_duration",
    "mustache",
    "parse_path",
    "parse_url",
    "register",
    "shorten_uuid",
    "truncate",
    "unicode_to_ascii",
    "unshorten_uuid",
]
