"""Diagnostic system for extension errors.

Provides structured error diagnostics with codes, hints and argument context.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    DelegateFailureError,
    ExtensionError,
    InvalidHostError,
    OptionTypeError,
    SignatureMismatchError,
)
from .templates import ErrorTemplate

__all__ = [
    "DelegateFailureError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "ErrorTemplate",
    "ExtensionError",
    "InvalidHostError",
    "OptionTypeError",
    "SignatureMismatchError",
]
