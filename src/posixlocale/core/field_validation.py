"""Unified field syntax validation for locale identifiers.

This module provides the single source of truth for per-field syntax rules,
shared by the loose builder, the strict layer, and the parser.

Field Grammar:
    language   [a-zA-Z]{1,8}, except the pseudo-locales "C" and "POSIX"
    territory  any printable text without '_', '.', '@' or whitespace
    code_set   any printable text without '_', '.', '@' or whitespace
    modifier   any printable text without '@' (';' and '=' structure it)

    - Every field is non-empty; absence is expressed as None, never "".
    - Territory, code set and modifier are bounded by MAX_FIELD_LENGTH.

Syntax only: whether 'zz' is a real language is the strict layer's question.

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.

Python 3.13+.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from posixlocale.constants import (
    MAX_FIELD_LENGTH,
    MAX_LANGUAGE_LENGTH,
    POSIX_PSEUDO_LOCALES,
    SEP_CODE_SET,
    SEP_MODIFIER,
    SEP_TERRITORY,
)
from posixlocale.diagnostics import (
    InvalidCodeSetError,
    InvalidLanguageCodeError,
    InvalidModifierError,
    InvalidTerritoryError,
    LocaleSyntaxError,
)
from posixlocale.enums import LocaleField

__all__ = [
    "is_valid_field",
    "validate_code_set",
    "validate_field",
    "validate_language",
    "validate_modifier",
    "validate_territory",
]

# ASCII letters only. str.isalpha() accepts 'é' and 'ß', which no
# ISO 639 code contains.
_LANGUAGE_PATTERN: re.Pattern[str] = re.compile(r"[a-zA-Z]+")

# Separators that would corrupt segmentation when embedded in a field.
_TERRITORY_RESERVED: frozenset[str] = frozenset(SEP_TERRITORY + SEP_CODE_SET + SEP_MODIFIER)
_CODE_SET_RESERVED: frozenset[str] = _TERRITORY_RESERVED
_MODIFIER_RESERVED: frozenset[str] = frozenset(SEP_MODIFIER)


def _describe(value: object) -> str:
    """Render a rejected value for the diagnostic."""
    return value if isinstance(value, str) else repr(value)


def _find_reserved(value: str, reserved: frozenset[str], *, allow_space: bool) -> str | None:
    """Return a description of the first disallowed character, or None."""
    for ch in value:
        if ch in reserved:
            return f"contains reserved character '{ch}'"
        if ch.isspace() and not allow_space:
            return "contains whitespace"
        if not ch.isprintable():
            return f"contains control character {ch!r}"
    return None


def _check_free_text(
    value: object,
    reserved: frozenset[str],
    *,
    allow_space: bool,
) -> str | None:
    """Shared checks for territory, code set and modifier.

    Returns:
        Reason the value is invalid, or None when it is well-formed.
    """
    if not isinstance(value, str):
        return f"expected str, got {type(value).__name__}"
    if not value:
        return "must not be empty"
    if len(value) > MAX_FIELD_LENGTH:
        return f"exceeds {MAX_FIELD_LENGTH} characters"
    return _find_reserved(value, reserved, allow_space=allow_space)


def validate_language(value: str) -> str:
    """Validate a language code.

    Args:
        value: Candidate language code (e.g., 'en', 'fil')

    Returns:
        The value unchanged

    Raises:
        InvalidLanguageCodeError: Empty, non-ASCII-letter, over 8 characters,
            or a POSIX pseudo-locale name

    Example:
        >>> validate_language("en")
        'en'
        >>> validate_language("en_US")
        Traceback (most recent call last):
        ...
        posixlocale.diagnostics.errors.InvalidLanguageCodeError: ...
    """
    if not isinstance(value, str):
        reason = f"expected str, got {type(value).__name__}"
        raise InvalidLanguageCodeError(_describe(value), reason)
    if not value:
        raise InvalidLanguageCodeError(value, "must not be empty")
    if len(value) > MAX_LANGUAGE_LENGTH:
        raise InvalidLanguageCodeError(value, f"exceeds {MAX_LANGUAGE_LENGTH} characters")
    if _LANGUAGE_PATTERN.fullmatch(value) is None:
        raise InvalidLanguageCodeError(value, "must contain only ASCII letters")
    if value in POSIX_PSEUDO_LOCALES:
        raise InvalidLanguageCodeError(value, "is the POSIX pseudo-locale, not a language")
    return value


def validate_territory(value: str) -> str:
    """Validate a territory code.

    Alphabetic ('US') and numeric UN M.49 ('419') codes are both accepted.

    Raises:
        InvalidTerritoryError: Empty, too long, or containing '_', '.', '@',
            whitespace, or control characters
    """
    reason = _check_free_text(value, _TERRITORY_RESERVED, allow_space=False)
    if reason is not None:
        raise InvalidTerritoryError(_describe(value), reason)
    return value


def validate_code_set(value: str) -> str:
    """Validate a code set name such as 'UTF-8' or 'ISO8859-15'.

    Raises:
        InvalidCodeSetError: Empty, too long, or containing '_', '.', '@',
            whitespace, or control characters
    """
    reason = _check_free_text(value, _CODE_SET_RESERVED, allow_space=False)
    if reason is not None:
        raise InvalidCodeSetError(_describe(value), reason)
    return value


def validate_modifier(value: str) -> str:
    """Validate a modifier such as 'euro' or 'collation=pinyin;currency=CNY'.

    The modifier is split off first when parsing, so only '@' is reserved.
    Its ';'/'=' structure is not inspected.

    Raises:
        InvalidModifierError: Empty, too long, or containing '@' or control characters
    """
    reason = _check_free_text(value, _MODIFIER_RESERVED, allow_space=True)
    if reason is not None:
        raise InvalidModifierError(_describe(value), reason)
    return value


_VALIDATORS: dict[LocaleField, Callable[[str], str]] = {
    LocaleField.LANGUAGE: validate_language,
    LocaleField.TERRITORY: validate_territory,
    LocaleField.CODE_SET: validate_code_set,
    LocaleField.MODIFIER: validate_modifier,
}


def validate_field(field: LocaleField, value: str) -> str:
    """Validate a value against the syntax rules of the given field.

    Args:
        field: Which field the value is destined for
        value: Candidate value

    Returns:
        The value unchanged

    Raises:
        LocaleSyntaxError: The field's Invalid* error
    """
    return _VALIDATORS[field](value)


def is_valid_field(field: LocaleField, value: str) -> bool:
    """Check a value against the field's syntax rules without raising.

    Example:
        >>> is_valid_field(LocaleField.TERRITORY, "US")
        True
        >>> is_valid_field(LocaleField.TERRITORY, "US_X")
        False
    """
    try:
        validate_field(field, value)
    except LocaleSyntaxError:
        return False
    return True
