"""Extension exception hierarchy with structured diagnostics.

All exceptions may carry a Diagnostic object for rich error information.
Each concrete error also derives from the builtin exception a Python
caller would expect (TypeError for bad arguments, ValueError for
unparseable input), so generic handlers keep working.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class ExtensionError(Exception):
    """Base exception for all jsonata-extended errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ExtensionError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidHostError(ExtensionError, TypeError):
    """Registration target is missing or lacks a register_function capability.

    Fatal to the registration call. No partial registration is attempted.
    """


class OptionTypeError(ExtensionError, TypeError):
    """Caller-supplied option failed its type or shape check.

    Examples:
    - truncate() with a non-numeric length
    - shortenUuid() with an unsupported base name

    Raised before any delegate is invoked.
    """


class DelegateFailureError(ExtensionError, ValueError):
    """Wrapped library operation failed.

    The library's own exception is chained as __cause__; the message is
    stable regardless of which library raised.
    """


class SignatureMismatchError(ExtensionError, TypeError):
    """Declared calling signature does not fit the implementation.

    Raised at registration time, never during a host call.
    """
