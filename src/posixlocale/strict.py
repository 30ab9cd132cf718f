"""Strict locale identifier: every code checked against a reference lookup.

StrictLocaleString has the same structure and canonical form as
LocaleString, and adds one invariant: each present language, territory and
code set is known to the reference lookup supplied by the caller. The
modifier has no standard registry and is checked for syntax only.

Validation order follows the canonical segment order. For each field the
syntax check runs first, then the lookup, so parsing 'xx_US' against a table
without 'xx' reports the language, never the territory.

The lookup is queried on every construction, including every ``with_*``
call. Answers are never cached here; a lookup that wants caching does it
itself (CldrLookup caches its CLDR tables).

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Self

from posixlocale.core.canonical import (
    LocaleParts,
    join_modifiers,
    render_canonical,
    split_canonical,
)
from posixlocale.core.field_validation import validate_field
from posixlocale.diagnostics import (
    LocaleParseError,
    LocaleSyntaxError,
    ParseFailure,
    UnknownCodeError,
    UnknownCodeSetError,
    UnknownLanguageCodeError,
    UnknownTerritoryError,
)
from posixlocale.enums import CodeCategory, LocaleField
from posixlocale.locale_string import LocaleString
from posixlocale.lookup import ReferenceLookup

__all__ = [
    "StrictLocaleFactory",
    "StrictLocaleString",
]

_CATEGORY_BY_FIELD: dict[LocaleField, CodeCategory] = {
    category.field: category for category in CodeCategory
}

_UNKNOWN_ERROR_BY_CATEGORY: dict[CodeCategory, type[UnknownCodeError]] = {
    CodeCategory.LANGUAGE: UnknownLanguageCodeError,
    CodeCategory.TERRITORY: UnknownTerritoryError,
    CodeCategory.CODE_SET: UnknownCodeSetError,
}


@dataclass(frozen=True, slots=True)
class StrictLocaleString:
    """Immutable locale identifier whose codes exist in a reference table.

    Equality and hashing use the four fields only; the lookup is carried
    along so derived instances are checked against the same table.

    Attributes:
        language: Known language code
        territory: Known territory code, or None when absent
        code_set: Known code set name, or None when absent
        modifier: Modifier string (syntax-checked only), or None when absent
        lookup: Reference lookup every field is checked against

    Example:
        >>> table = CodeTable.of(languages=["en", "fr"], territories=["US"])
        >>> StrictLocaleString.new("en", lookup=table).with_territory("US")
        StrictLocaleString(language='en', territory='US', code_set=None, modifier=None)
        >>> StrictLocaleString.new("xx", lookup=table)
        Traceback (most recent call last):
        ...
        posixlocale.diagnostics.errors.UnknownLanguageCodeError: ...
    """

    language: str
    territory: str | None = None
    code_set: str | None = None
    modifier: str | None = None
    lookup: ReferenceLookup = field(kw_only=True, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate syntax, then membership, field by field in segment order.

        Raises:
            LocaleSyntaxError: A field breaks its syntax rules
            UnknownCodeError: A field is unknown to the lookup
        """
        for locale_field, value in self._parts().items():
            if value is None:
                continue
            validate_field(locale_field, value)
            category = _CATEGORY_BY_FIELD.get(locale_field)
            if category is not None and not self.lookup(category, value):
                raise _UNKNOWN_ERROR_BY_CATEGORY[category](value)

    def _parts(self) -> LocaleParts:
        return LocaleParts(self.language, self.territory, self.code_set, self.modifier)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def new(cls, language: str, *, lookup: ReferenceLookup) -> Self:
        """Create an identifier with a known language code only.

        Raises:
            InvalidLanguageCodeError: If the language code is malformed
            UnknownLanguageCodeError: If the lookup does not know it
        """
        return cls(language, lookup=lookup)

    @classmethod
    def from_parts(
        cls,
        language: str,
        territory: str | None = None,
        code_set: str | None = None,
        modifier: str | None = None,
        *,
        lookup: ReferenceLookup,
    ) -> Self:
        """Create an identifier from explicit parts.

        Raises:
            LocaleSyntaxError: The first malformed field
            UnknownCodeError: The first unknown field
        """
        return cls(language, territory, code_set, modifier, lookup=lookup)

    @classmethod
    def parse(cls, text: str, *, lookup: ReferenceLookup) -> Self:
        """Parse a canonical locale string and check every code.

        Args:
            text: Locale string such as 'en_US.UTF-8'
            lookup: Reference lookup to check codes against

        Returns:
            Parsed identifier

        Raises:
            TypeError: If text is not a str
            LocaleParseError: If text cannot be segmented, or a segment breaks
                its field's syntax rules
            UnknownCodeError: The first segment, in canonical order, that the
                lookup does not know
        """
        parts = split_canonical(text)
        try:
            return cls(*parts, lookup=lookup)
        except LocaleSyntaxError as e:
            raise LocaleParseError(
                text, ParseFailure.INVALID_SEGMENT, field=e.field, value=e.value
            ) from e

    @classmethod
    def from_locale_string(cls, locale: LocaleString, *, lookup: ReferenceLookup) -> Self:
        """Promote a loose identifier by checking its codes against a lookup.

        Raises:
            UnknownCodeError: The first field the lookup does not know
        """
        return cls(
            locale.language, locale.territory, locale.code_set, locale.modifier, lookup=lookup
        )

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def with_language(self, language: str) -> Self:
        """Return a copy with a new, known language code."""
        return replace(self, language=language)

    def with_territory(self, territory: str) -> Self:
        """Return a copy with a new, known territory.

        Raises:
            InvalidTerritoryError: If the territory is malformed
            UnknownTerritoryError: If the lookup does not know it
        """
        return replace(self, territory=territory)

    def with_code_set(self, code_set: str) -> Self:
        """Return a copy with a new, known code set."""
        return replace(self, code_set=code_set)

    def with_modifier(self, modifier: str) -> Self:
        """Return a copy with a new modifier string."""
        return replace(self, modifier=modifier)

    def with_modifiers(self, modifiers: Mapping[object, object]) -> Self:
        """Return a copy whose modifier is built from key/value pairs."""
        return self.with_modifier(join_modifiers(modifiers))

    # ------------------------------------------------------------------
    # Conversion and rendering
    # ------------------------------------------------------------------

    def to_locale_string(self) -> LocaleString:
        """Demote to a loose identifier with the same fields."""
        return LocaleString(self.language, self.territory, self.code_set, self.modifier)

    def to_canonical_string(self) -> str:
        """Render in canonical form: language[_territory][.code_set][@modifier]."""
        return render_canonical(self.language, self.territory, self.code_set, self.modifier)

    def __str__(self) -> str:
        return self.to_canonical_string()


@dataclass(frozen=True, slots=True)
class StrictLocaleFactory:
    """Binds a reference lookup so strict identifiers build like loose ones.

    Satisfies LocaleIdentifierFactory, letting code that accepts "any locale
    identifier factory" receive either ``LocaleString`` or a bound strict
    factory.

    Example:
        >>> strict = StrictLocaleFactory(CldrLookup())
        >>> strict.parse("de_DE.UTF-8")
        StrictLocaleString(language='de', territory='DE', code_set='UTF-8', modifier=None)
    """

    lookup: ReferenceLookup

    def new(self, language: str) -> StrictLocaleString:
        """Create a strict identifier with a language code only."""
        return StrictLocaleString.new(language, lookup=self.lookup)

    def from_parts(
        self,
        language: str,
        territory: str | None = None,
        code_set: str | None = None,
        modifier: str | None = None,
    ) -> StrictLocaleString:
        """Create a strict identifier from explicit parts."""
        return StrictLocaleString.from_parts(
            language, territory, code_set, modifier, lookup=self.lookup
        )

    def parse(self, text: str) -> StrictLocaleString:
        """Parse and check a canonical locale string."""
        return StrictLocaleString.parse(text, lookup=self.lookup)
