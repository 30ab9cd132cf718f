"""Diagnostic system for locale identifier errors.

Provides structured error diagnostics with codes, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, ParseFailure
from .errors import (
    InvalidCodeSetError,
    InvalidLanguageCodeError,
    InvalidModifierError,
    InvalidTerritoryError,
    LocaleError,
    LocaleParseError,
    LocaleSyntaxError,
    UnknownCodeError,
    UnknownCodeSetError,
    UnknownLanguageCodeError,
    UnknownTerritoryError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "InvalidCodeSetError",
    "InvalidLanguageCodeError",
    "InvalidModifierError",
    "InvalidTerritoryError",
    "LocaleError",
    "LocaleParseError",
    "LocaleSyntaxError",
    "OutputFormat",
    "ParseFailure",
    "UnknownCodeError",
    "UnknownCodeSetError",
    "UnknownLanguageCodeError",
    "UnknownTerritoryError",
]
