"""Tests for diagnostics/errors.py: the closed LocaleError hierarchy.

Covers:
- Class placement in the hierarchy and category-level catching
- kind, category, field, value and message per error class
- LocaleParseError text, reason and chaining
- Refusal of subclasses defined outside the package
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from posixlocale import (
    InvalidCodeSetError,
    InvalidLanguageCodeError,
    InvalidModifierError,
    InvalidTerritoryError,
    LocaleError,
    LocaleField,
    LocaleParseError,
    LocaleString,
    LocaleSyntaxError,
    UnknownCodeError,
    UnknownCodeSetError,
    UnknownLanguageCodeError,
    UnknownTerritoryError,
)
from posixlocale.diagnostics import DiagnosticCode, ErrorCategory, ParseFailure

_SYNTAX_ERRORS: list[tuple[type[LocaleSyntaxError], DiagnosticCode, LocaleField]] = [
    (InvalidLanguageCodeError, DiagnosticCode.INVALID_LANGUAGE_CODE, LocaleField.LANGUAGE),
    (InvalidTerritoryError, DiagnosticCode.INVALID_TERRITORY, LocaleField.TERRITORY),
    (InvalidCodeSetError, DiagnosticCode.INVALID_CODE_SET, LocaleField.CODE_SET),
    (InvalidModifierError, DiagnosticCode.INVALID_MODIFIER, LocaleField.MODIFIER),
]

_UNKNOWN_ERRORS: list[tuple[type[UnknownCodeError], DiagnosticCode, LocaleField]] = [
    (UnknownLanguageCodeError, DiagnosticCode.UNKNOWN_LANGUAGE_CODE, LocaleField.LANGUAGE),
    (UnknownTerritoryError, DiagnosticCode.UNKNOWN_TERRITORY, LocaleField.TERRITORY),
    (UnknownCodeSetError, DiagnosticCode.UNKNOWN_CODE_SET, LocaleField.CODE_SET),
]


class TestSyntaxErrors:
    """Invalid*Error: malformed field values."""

    @pytest.mark.parametrize(("cls", "code", "field"), _SYNTAX_ERRORS)
    def test_attributes(
        self, cls: type[LocaleSyntaxError], code: DiagnosticCode, field: LocaleField
    ) -> None:
        error = cls("bad value", "contains whitespace")
        assert isinstance(error, LocaleSyntaxError)
        assert isinstance(error, LocaleError)
        assert error.kind is code
        assert error.category is ErrorCategory.SYNTAX
        assert error.field is field
        assert error.value == "bad value"
        assert error.message.endswith("contains whitespace")

    @pytest.mark.parametrize(("cls", "code", "field"), _SYNTAX_ERRORS)
    def test_default_reason(
        self, cls: type[LocaleSyntaxError], code: DiagnosticCode, field: LocaleField
    ) -> None:
        assert "malformed" in cls("x").message

    def test_str_is_rust_style(self) -> None:
        error = InvalidTerritoryError("US_X", "contains reserved character '_'")
        lines = str(error).splitlines()
        assert lines[0] == (
            "error[INVALID_TERRITORY]: Invalid territory 'US_X': contains reserved character '_'"
        )
        assert "  = field: territory" in lines
        assert "  = value: US_X" in lines


class TestUnknownCodeErrors:
    """Unknown*Error: well-formed values missing from the lookup."""

    @pytest.mark.parametrize(("cls", "code", "field"), _UNKNOWN_ERRORS)
    def test_attributes(
        self, cls: type[UnknownCodeError], code: DiagnosticCode, field: LocaleField
    ) -> None:
        error = cls("xx")
        assert isinstance(error, UnknownCodeError)
        assert not isinstance(error, LocaleSyntaxError)
        assert error.kind is code
        assert error.category is ErrorCategory.UNKNOWN
        assert error.field is field
        assert error.value == "xx"

    def test_message(self) -> None:
        assert UnknownLanguageCodeError("xx").message == "Language code 'xx' is not a known language"


class TestLocaleParseError:
    """Segmentation failures and wrapped segment errors."""

    def test_whole_string_failure(self) -> None:
        error = LocaleParseError("", ParseFailure.EMPTY_STRING)
        assert error.kind is DiagnosticCode.PARSE_FAILED
        assert error.category is ErrorCategory.PARSE
        assert error.field is None
        assert error.text == ""
        assert error.value == ""

    def test_posix_message(self) -> None:
        error = LocaleParseError("POSIX", ParseFailure.POSIX_UNSUPPORTED)
        assert "POSIX pseudo-locale" in error.message
        assert error.value == "POSIX"

    def test_segment_failure(self) -> None:
        error = LocaleParseError(
            "en_U S", ParseFailure.INVALID_SEGMENT, field=LocaleField.TERRITORY, value="U S"
        )
        assert error.reason is ParseFailure.INVALID_SEGMENT
        assert error.field is LocaleField.TERRITORY
        assert error.value == "U S"
        assert error.message == "Locale 'en_U S' has an invalid territory segment 'U S'"

    def test_empty_segment_message(self) -> None:
        with pytest.raises(LocaleParseError) as exc_info:
            LocaleString.parse("en_US.")
        assert exc_info.value.message == "Locale 'en_US.' has an empty code_set segment"
        assert "  = value: ''" in str(exc_info.value)

    def test_chained_cause(self) -> None:
        with pytest.raises(LocaleParseError) as exc_info:
            LocaleString.parse("en_US@a@b")
        cause = exc_info.value.__cause__
        assert isinstance(cause, InvalidModifierError)
        assert cause.value == exc_info.value.value == "a@b"


class TestCategoryCatching:
    """Callers can catch a whole category through the intermediate bases."""

    @given(text=st.sampled_from(["", "C", "en_", "e1", "en_U S", "en@a@b"]))
    def test_parse_failures_are_locale_errors(self, text: str) -> None:
        with pytest.raises(LocaleError) as exc_info:
            LocaleString.parse(text)
        event(f"reason={exc_info.value.reason}")
        assert isinstance(exc_info.value, LocaleParseError)

    def test_syntax_errors_catchable_as_base(self) -> None:
        with pytest.raises(LocaleSyntaxError):
            LocaleString.new("en").with_code_set("")


class TestClosedHierarchy:
    """Subclassing any LocaleError outside the package is refused."""

    @pytest.mark.parametrize(
        "base",
        [LocaleError, LocaleSyntaxError, UnknownCodeError, InvalidTerritoryError, LocaleParseError],
    )
    def test_external_subclass_refused(self, base: type[LocaleError]) -> None:
        with pytest.raises(TypeError, match="closed to extension"):
            type("CustomError", (base,), {})
