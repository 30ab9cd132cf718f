"""Locale exception hierarchy with structured diagnostics.

The hierarchy is closed: every kind of failure the package can report has
exactly one class here, and subclassing from outside this module is refused.

    LocaleError
    ├── LocaleSyntaxError
    │   ├── InvalidLanguageCodeError
    │   ├── InvalidTerritoryError
    │   ├── InvalidCodeSetError
    │   └── InvalidModifierError
    ├── UnknownCodeError
    │   ├── UnknownLanguageCodeError
    │   ├── UnknownTerritoryError
    │   └── UnknownCodeSetError
    └── LocaleParseError

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, final

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, ParseFailure
from .templates import ErrorTemplate

if TYPE_CHECKING:
    from posixlocale.enums import LocaleField

__all__ = [
    "InvalidCodeSetError",
    "InvalidLanguageCodeError",
    "InvalidModifierError",
    "InvalidTerritoryError",
    "LocaleError",
    "LocaleParseError",
    "LocaleSyntaxError",
    "UnknownCodeError",
    "UnknownCodeSetError",
    "UnknownLanguageCodeError",
    "UnknownTerritoryError",
]


class LocaleError(Exception):
    """Base exception for all locale identifier errors.

    Attributes:
        diagnostic: Structured diagnostic information
    """

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            msg = f"{cls.__qualname__}: the LocaleError hierarchy is closed to extension"
            raise TypeError(msg)

    def __init__(self, diagnostic: Diagnostic) -> None:
        """Initialize LocaleError.

        Args:
            diagnostic: Diagnostic describing the failure
        """
        self.diagnostic = diagnostic
        super().__init__(diagnostic.format_error())

    @property
    def kind(self) -> DiagnosticCode:
        """Error kind, one of the closed set of diagnostic codes."""
        return self.diagnostic.code

    @property
    def category(self) -> ErrorCategory:
        """Error category (syntax, unknown, parse)."""
        return self.diagnostic.code.category

    @property
    def field(self) -> LocaleField | None:
        """Field the error concerns, or None for whole-string errors."""
        return self.diagnostic.field

    @property
    def value(self) -> str | None:
        """Offending value as supplied by the caller."""
        return self.diagnostic.value

    @property
    def message(self) -> str:
        """Single-line description without formatting decorations."""
        return self.diagnostic.message


# ============================================================================
# SYNTAX ERRORS
# ============================================================================


class LocaleSyntaxError(LocaleError):
    """A field value is malformed.

    Recoverable by the caller supplying corrected input.
    """


@final
class InvalidLanguageCodeError(LocaleSyntaxError):
    """Language code is empty, non-alphabetic, or too long."""

    def __init__(self, value: str, reason: str = "malformed language code") -> None:
        super().__init__(ErrorTemplate.invalid_language_code(value, reason))


@final
class InvalidTerritoryError(LocaleSyntaxError):
    """Territory is empty or contains a reserved delimiter."""

    def __init__(self, value: str, reason: str = "malformed territory") -> None:
        super().__init__(ErrorTemplate.invalid_territory(value, reason))


@final
class InvalidCodeSetError(LocaleSyntaxError):
    """Code set is empty or contains a reserved delimiter."""

    def __init__(self, value: str, reason: str = "malformed code set") -> None:
        super().__init__(ErrorTemplate.invalid_code_set(value, reason))


@final
class InvalidModifierError(LocaleSyntaxError):
    """Modifier is empty or contains '@'."""

    def __init__(self, value: str, reason: str = "malformed modifier") -> None:
        super().__init__(ErrorTemplate.invalid_modifier(value, reason))


# ============================================================================
# UNKNOWN CODE ERRORS
# ============================================================================


class UnknownCodeError(LocaleError):
    """A well-formed value is absent from the reference lookup.

    Raised only by the strict layer.
    """


@final
class UnknownLanguageCodeError(UnknownCodeError):
    """Language code not recognized by the reference lookup."""

    def __init__(self, value: str) -> None:
        super().__init__(ErrorTemplate.unknown_language_code(value))


@final
class UnknownTerritoryError(UnknownCodeError):
    """Territory code not recognized by the reference lookup."""

    def __init__(self, value: str) -> None:
        super().__init__(ErrorTemplate.unknown_territory(value))


@final
class UnknownCodeSetError(UnknownCodeError):
    """Code set not recognized by the reference lookup."""

    def __init__(self, value: str) -> None:
        super().__init__(ErrorTemplate.unknown_code_set(value))


# ============================================================================
# PARSE ERRORS
# ============================================================================


@final
class LocaleParseError(LocaleError):
    """Canonical locale string could not be segmented into valid fields.

    When a single segment is to blame, ``field`` and ``value`` name it and
    the field's syntax error is chained as ``__cause__``.

    Attributes:
        text: The full string that failed to parse
        reason: Why parsing failed

    Example:
        >>> try:
        ...     LocaleString.parse("en_")
        ... except LocaleParseError as e:
        ...     print(e.reason, e.field)
        empty_segment territory
    """

    def __init__(
        self,
        text: str,
        reason: ParseFailure,
        *,
        field: LocaleField | None = None,
        value: str | None = None,
    ) -> None:
        """Initialize LocaleParseError.

        Args:
            text: The full string that failed to parse
            reason: Why parsing failed
            field: Offending field, when one segment is to blame
            value: Offending segment value
        """
        super().__init__(ErrorTemplate.parse_failed(text, reason, field, value))
        self.text = text
        self.reason = reason
