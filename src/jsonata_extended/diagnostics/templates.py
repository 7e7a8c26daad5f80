"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting regardless of which library failed
        - Documentation of all error cases
    """

    @staticmethod
    def invalid_host() -> Diagnostic:
        """Registration target is unusable.

        Returns:
            Diagnostic for INVALID_HOST
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_HOST,
            message="Invalid JSONata Expression",
            hint="Pass an expression object exposing register_function(name, implementation, signature)",
        )

    @staticmethod
    def option_type_mismatch(
        option_name: str,
        value: object,
        expected: str,
        *,
        function_name: str | None = None,
    ) -> Diagnostic:
        """Option value has the wrong type.

        Args:
            option_name: Name of the offending option (e.g., "length")
            value: The value received
            expected: Expected type name ("number" or "string")
            function_name: Host function that validated the option

        Returns:
            Diagnostic for OPTION_TYPE_MISMATCH
        """
        received = type(value).__name__
        article = "an" if expected[:1] in "aeiou" else "a"
        msg = f"Expected {article} {expected}. Received options.{option_name}={value} Type: {received}"
        return Diagnostic(
            code=DiagnosticCode.OPTION_TYPE_MISMATCH,
            message=msg,
            function_name=function_name,
            argument_name=option_name,
            expected_type=expected,
            received_type=received,
        )

    @staticmethod
    def invalid_base(base: object, valid_bases: Iterable[str]) -> Diagnostic:
        """Unsupported UUID encoding base.

        Args:
            base: The base name received
            valid_bases: Supported base names in display order

        Returns:
            Diagnostic for INVALID_BASE
        """
        valid = ",".join(valid_bases)
        return Diagnostic(
            code=DiagnosticCode.INVALID_BASE,
            message=f"Invalid basex. Valid values: {valid}",
            argument_name="basex",
            expected_type=valid,
            received_type=repr(base),
        )

    @staticmethod
    def invalid_duration_unit(unit: str) -> Diagnostic:
        """Unknown duration unit.

        Args:
            unit: The unit name received

        Returns:
            Diagnostic for INVALID_DURATION_UNIT
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_DURATION_UNIT,
            message=f"Invalid duration unit. Value: {unit}",
            function_name="momentDuration",
            hint="Use years, months, weeks, days, hours, minutes, seconds or milliseconds",
        )

    @staticmethod
    def invalid_uuid() -> Diagnostic:
        """Value is not a canonical UUID.

        Returns:
            Diagnostic for INVALID_UUID
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_UUID,
            message="Invalid UUID",
            hint="Expected 8-4-4-4-12 hexadecimal digits, e.g. 1b49aa30-e719-11e6-9835-f723b46a2688",
        )

    @staticmethod
    def invalid_encoded_uuid(value: str, base: str) -> Diagnostic:
        """Encoded UUID cannot be decoded in the given base.

        Args:
            value: The encoded value received
            base: The base used for decoding

        Returns:
            Diagnostic for INVALID_ENCODED_UUID
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_ENCODED_UUID,
            message="Invalid encoded UUID",
            hint=f"'{value}' is not a {base} encoding of a 128-bit UUID",
        )

    @staticmethod
    def invalid_language_tag(value: object) -> Diagnostic:
        """Language tag is malformed or unknown.

        Args:
            value: The tag received

        Returns:
            Diagnostic for INVALID_LANGUAGE_TAG
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_LANGUAGE_TAG,
            message=f"Invalid RFC5646 Tag. Value: {value}",
            function_name="languageInfo",
            hint="Use a language subtag with an optional region, e.g. 'es' or 'en-US'",
        )

    @staticmethod
    def invalid_url() -> Diagnostic:
        """URL cannot be parsed as an absolute URL.

        Returns:
            Diagnostic for INVALID_URL
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_URL,
            message="Invalid URL",
            function_name="parseUrl",
            hint="Only absolute URLs with a scheme are accepted",
        )

    @staticmethod
    def invalid_date(value: object) -> Diagnostic:
        """Date/time input cannot be parsed.

        Args:
            value: The input received

        Returns:
            Diagnostic for INVALID_DATE
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_DATE,
            message=f"Invalid date. Value: {value}",
            function_name="moment",
        )

    @staticmethod
    def invalid_duration(value: object) -> Diagnostic:
        """Duration input cannot be parsed.

        Args:
            value: The input received

        Returns:
            Diagnostic for INVALID_DURATION
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_DURATION,
            message=f"Invalid duration. Value: {value}",
            function_name="momentDuration",
            hint="Use an ISO-8601 duration such as PT1H2M10S",
        )

    @staticmethod
    def wordbreak_regex_failed() -> Diagnostic:
        """Word-break regular expression could not be compiled or matched.

        Returns:
            Diagnostic for WORDBREAK_REGEX_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.WORDBREAK_REGEX_FAILED,
            message="Error Processing wordbreakregex.",
            function_name="truncate",
            argument_name="wordbreakregex",
        )

    @staticmethod
    def signature_syntax(text: str, position: int, reason: str) -> Diagnostic:
        """Signature text is malformed.

        Args:
            text: The signature text
            position: Character offset of the problem
            reason: What was expected at that offset

        Returns:
            Diagnostic for SIGNATURE_SYNTAX
        """
        return Diagnostic(
            code=DiagnosticCode.SIGNATURE_SYNTAX,
            message=f"Invalid signature '{text}' at position {position}: {reason}",
        )

    @staticmethod
    def signature_arity_mismatch(
        function_name: str,
        declared: int,
        accepted: str,
    ) -> Diagnostic:
        """Declared parameter count does not fit the implementation.

        Args:
            function_name: Host function name
            declared: Number of parameters in the signature
            accepted: Description of what the implementation accepts

        Returns:
            Diagnostic for SIGNATURE_ARITY_MISMATCH
        """
        return Diagnostic(
            code=DiagnosticCode.SIGNATURE_ARITY_MISMATCH,
            message=(
                f"Signature of '{function_name}' declares {declared} parameter(s) "
                f"but the implementation accepts {accepted}"
            ),
            function_name=function_name,
            hint="Keep the declared signature in sync with the Python function",
        )
