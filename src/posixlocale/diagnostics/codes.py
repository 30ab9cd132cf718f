"""Diagnostic codes and data structures.

Defines error codes, error categories, parse failure reasons, and the
structured diagnostic carried by every locale error.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

from posixlocale.enums import LocaleField

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "ParseFailure",
]


class ErrorCategory(StrEnum):
    """Error categorization for LocaleError.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        SYNTAX: A field value is malformed (empty, bad characters, too long)
        UNKNOWN: A field value is well-formed but absent from the reference table
        PARSE: A canonical string could not be segmented into valid fields
    """

    SYNTAX = "syntax"
    UNKNOWN = "unknown"
    PARSE = "parse"


class ParseFailure(StrEnum):
    """Reason a canonical locale string failed to parse."""

    EMPTY_STRING = "empty_string"
    POSIX_UNSUPPORTED = "posix_unsupported"
    EMPTY_SEGMENT = "empty_segment"
    INVALID_SEGMENT = "invalid_segment"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Syntax errors (malformed field values)
        2000-2999: Unknown code errors (strict layer reference lookups)
        3000-3999: Parse errors (canonical string segmentation)
    """

    # Syntax errors (1000-1999)
    INVALID_LANGUAGE_CODE = 1001
    INVALID_TERRITORY = 1002
    INVALID_CODE_SET = 1003
    INVALID_MODIFIER = 1004

    # Unknown code errors (2000-2999)
    UNKNOWN_LANGUAGE_CODE = 2001
    UNKNOWN_TERRITORY = 2002
    UNKNOWN_CODE_SET = 2003

    # Parse errors (3000-3999)
    PARSE_FAILED = 3001

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric range."""
        if self.value < 2000:
            return ErrorCategory.SYNTAX
        if self.value < 3000:
            return ErrorCategory.UNKNOWN
        return ErrorCategory.PARSE


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        field: Locale field the error concerns (None for whole-string errors)
        value: Offending value as supplied by the caller
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    field: LocaleField | None = None
    value: str | None = None
    hint: str | None = None
    help_url: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[UNKNOWN_TERRITORY]: Territory 'XY' is not a known territory code
              = field: territory
              = value: XY
              = help: Use an ISO 3166-1 alpha-2 code such as 'US' or 'DE'
              = note: see https://www.iso.org/iso-3166-country-codes.html

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
