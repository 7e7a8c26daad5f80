"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for extension errors.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        HOST: Registration target is missing or unusable
        OPTION: Caller-supplied option failed its type or shape check
        DELEGATE: Wrapped library operation failed
        SIGNATURE: Declared calling signature does not fit the implementation
    """

    HOST = "host"
    OPTION = "option"
    DELEGATE = "delegate"
    SIGNATURE = "signature"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Host errors (registration target)
        2000-2999: Option errors (argument validation)
        3000-3999: Delegate errors (wrapped library failures)
        4000-4999: Signature errors (calling convention declarations)
    """

    # Host errors (1000-1999)
    INVALID_HOST = 1001

    # Option errors (2000-2999)
    OPTION_TYPE_MISMATCH = 2001
    INVALID_BASE = 2002
    INVALID_DURATION_UNIT = 2003

    # Delegate errors (3000-3999)
    INVALID_UUID = 3001
    INVALID_ENCODED_UUID = 3002
    INVALID_LANGUAGE_TAG = 3003
    INVALID_URL = 3004
    INVALID_DATE = 3005
    INVALID_DURATION = 3006
    WORDBREAK_REGEX_FAILED = 3007

    # Signature errors (4000-4999)
    SIGNATURE_SYNTAX = 4001
    SIGNATURE_ARITY_MISMATCH = 4002

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric range."""
        match self.value // 1000:
            case 1:
                return ErrorCategory.HOST
            case 2:
                return ErrorCategory.OPTION
            case 3:
                return ErrorCategory.DELEGATE
            case _:
                return ErrorCategory.SIGNATURE


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        function_name: Host function name where error occurred
        argument_name: Argument or option name that caused the error
        expected_type: Expected type for the argument
        received_type: Actual type received
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    function_name: str | None = None
    argument_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[OPTION_TYPE_MISMATCH]: Expected a number. Received options.length=abc Type: str
              = function: truncate
              = argument: length
              = expected: number
              = received: str

        Newlines and tabs inside values are escaped, so the report has
        exactly one line per populated field.

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {_escape_control(self.message)}"]
        context = (
            ("function", self.function_name),
            ("argument", self.argument_name),
            ("expected", self.expected_type),
            ("received", self.received_type),
            ("help", self.hint),
        )
        lines.extend(
            f"  = {label}: {_escape_control(value)}" for label, value in context if value
        )
        return "\n".join(lines)


def _escape_control(text: str) -> str:
    """Escape newline, carriage return and tab for single-line output."""
    return text.replace("\r", "\\r").replace("\n", "\\n").replace("\t", "\\t")
