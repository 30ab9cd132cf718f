"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from posixlocale.enums import LocaleField

from .codes import Diagnostic, DiagnosticCode, ParseFailure


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    _LOCALE_NAMES_URL = "https://www.gnu.org/software/libc/manual/html_node/Locale-Names.html"
    _ISO_639_URL = "https://www.loc.gov/standards/iso639-2/php/code_list.php"
    _ISO_3166_URL = "https://www.iso.org/iso-3166-country-codes.html"
    _CHARSETS_URL = "https://www.iana.org/assignments/character-sets/character-sets.xhtml"

    # ------------------------------------------------------------------
    # Syntax errors
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_language_code(value: str, reason: str) -> Diagnostic:
        """Language code is malformed.

        Args:
            value: The rejected language code
            reason: Which syntax rule the value broke

        Returns:
            Diagnostic for INVALID_LANGUAGE_CODE
        """
        msg = f"Invalid language code '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LANGUAGE_CODE,
            message=msg,
            field=LocaleField.LANGUAGE,
            value=value,
            hint="Language codes are 2-3 ASCII letters, e.g. 'en' or 'fil'",
            help_url=ErrorTemplate._LOCALE_NAMES_URL,
        )

    @staticmethod
    def invalid_territory(value: str, reason: str) -> Diagnostic:
        """Territory code is malformed.

        Args:
            value: The rejected territory
            reason: Which syntax rule the value broke

        Returns:
            Diagnostic for INVALID_TERRITORY
        """
        msg = f"Invalid territory '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_TERRITORY,
            message=msg,
            field=LocaleField.TERRITORY,
            value=value,
            hint="Remove '_', '.', '@' and whitespace from the territory",
            help_url=ErrorTemplate._LOCALE_NAMES_URL,
        )

    @staticmethod
    def invalid_code_set(value: str, reason: str) -> Diagnostic:
        """Code set name is malformed.

        Args:
            value: The rejected code set
            reason: Which syntax rule the value broke

        Returns:
            Diagnostic for INVALID_CODE_SET
        """
        msg = f"Invalid code set '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CODE_SET,
            message=msg,
            field=LocaleField.CODE_SET,
            value=value,
            hint="Remove '_', '.', '@' and whitespace from the code set, e.g. 'UTF-8'",
            help_url=ErrorTemplate._LOCALE_NAMES_URL,
        )

    @staticmethod
    def invalid_modifier(value: str, reason: str) -> Diagnostic:
        """Modifier string is malformed.

        Args:
            value: The rejected modifier
            reason: Which syntax rule the value broke

        Returns:
            Diagnostic for INVALID_MODIFIER
        """
        msg = f"Invalid modifier '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_MODIFIER,
            message=msg,
            field=LocaleField.MODIFIER,
            value=value,
            hint="Modifiers are ';'-separated 'key=value' pairs without '@'",
            help_url=ErrorTemplate._LOCALE_NAMES_URL,
        )

    # ------------------------------------------------------------------
    # Unknown code errors
    # ------------------------------------------------------------------

    @staticmethod
    def unknown_language_code(value: str) -> Diagnostic:
        """Language code is well-formed but not in the reference table.

        Args:
            value: The unrecognized language code

        Returns:
            Diagnostic for UNKNOWN_LANGUAGE_CODE
        """
        msg = f"Language code '{value}' is not a known language"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LANGUAGE_CODE,
            message=msg,
            field=LocaleField.LANGUAGE,
            value=value,
            hint="Use an ISO 639 language code known to the reference table",
            help_url=ErrorTemplate._ISO_639_URL,
        )

    @staticmethod
    def unknown_territory(value: str) -> Diagnostic:
        """Territory is well-formed but not in the reference table.

        Args:
            value: The unrecognized territory code

        Returns:
            Diagnostic for UNKNOWN_TERRITORY
        """
        msg = f"Territory '{value}' is not a known territory code"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_TERRITORY,
            message=msg,
            field=LocaleField.TERRITORY,
            value=value,
            hint="Use an ISO 3166-1 alpha-2 code such as 'US' or 'DE'",
            help_url=ErrorTemplate._ISO_3166_URL,
        )

    @staticmethod
    def unknown_code_set(value: str) -> Diagnostic:
        """Code set is well-formed but not in the reference table.

        Args:
            value: The unrecognized code set name

        Returns:
            Diagnostic for UNKNOWN_CODE_SET
        """
        msg = f"Code set '{value}' is not a known character set"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_CODE_SET,
            message=msg,
            field=LocaleField.CODE_SET,
            value=value,
            hint="Use an IANA character set name such as 'UTF-8' or 'ISO-8859-1'",
            help_url=ErrorTemplate._CHARSETS_URL,
        )

    # ------------------------------------------------------------------
    # Parse errors
    # ------------------------------------------------------------------

    @staticmethod
    def parse_failed(
        text: str,
        reason: ParseFailure,
        field: LocaleField | None = None,
        value: str | None = None,
    ) -> Diagnostic:
        """Canonical locale string could not be segmented.

        Args:
            text: The full string that failed to parse
            reason: Why segmentation failed
            field: Offending field, when one segment is to blame
            value: Offending segment value

        Returns:
            Diagnostic for PARSE_FAILED
        """
        match reason:
            case ParseFailure.EMPTY_STRING:
                msg = "Cannot parse an empty string as a locale identifier"
                hint = "Supply a locale such as 'en_US.UTF-8'"
            case ParseFailure.POSIX_UNSUPPORTED:
                msg = f"'{text}' is the POSIX pseudo-locale, not a locale identifier"
                hint = "Supply a language-based locale such as 'en_US'"
            case ParseFailure.EMPTY_SEGMENT:
                msg = f"Locale '{text}' has an empty {field} segment"
                hint = "Omit the separator when a field is absent"
            case ParseFailure.INVALID_SEGMENT:
                msg = f"Locale '{text}' has an invalid {field} segment '{value}'"
                hint = "Expected language[_territory][.code_set][@modifier]"
        return Diagnostic(
            code=DiagnosticCode.PARSE_FAILED,
            message=msg,
            field=field,
            value=value if value is not None else text,
            hint=hint,
            help_url=ErrorTemplate._LOCALE_NAMES_URL,
        )
