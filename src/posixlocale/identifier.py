"""LocaleIdentifier capability shared by loose and strict identifiers.

Downstream code that only needs to build, parse and render locale strings
depends on these protocols instead of a concrete type:

    def load_locale[T: LocaleIdentifier](
        factory: LocaleIdentifierFactory[T], raw: str
    ) -> T:
        return factory.parse(raw)

    load_locale(LocaleString, "en_US")                      # loose
    load_locale(StrictLocaleFactory(CldrLookup()), "en_US")  # strict

The protocols are structural: LocaleString and StrictLocaleString share no
base class.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, Self, runtime_checkable

__all__ = [
    "LocaleIdentifier",
    "LocaleIdentifierFactory",
    "convert",
]


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
@runtime_checkable
class LocaleIdentifier(Protocol):
    """Instance side: read fields, derive new values, render canonical text.

    Implementations guarantee ``factory.parse(x.to_canonical_string()) == x``.
    """

    @property
    def language(self) -> str:
        """Language code (never empty)."""
        ...

    @property
    def territory(self) -> str | None:
        """Territory code, or None when absent."""
        ...

    @property
    def code_set(self) -> str | None:
        """Code set name, or None when absent."""
        ...

    @property
    def modifier(self) -> str | None:
        """Modifier string, or None when absent."""
        ...

    def with_language(self, language: str) -> Self:
        """Return a copy with a new language code."""
        ...

    def with_territory(self, territory: str) -> Self:
        """Return a copy with a new territory."""
        ...

    def with_code_set(self, code_set: str) -> Self:
        """Return a copy with a new code set."""
        ...

    def with_modifier(self, modifier: str) -> Self:
        """Return a copy with a new modifier string."""
        ...

    def with_modifiers(self, modifiers: Mapping[object, object]) -> Self:
        """Return a copy whose modifier is built from key/value pairs."""
        ...

    def to_canonical_string(self) -> str:
        """Render as language[_territory][.code_set][@modifier]."""
        ...


@runtime_checkable
class LocaleIdentifierFactory[T: LocaleIdentifier](Protocol):
    """Construction side: build from parts or parse canonical text.

    The LocaleString class satisfies this protocol through its
    classmethods; StrictLocaleFactory satisfies it for strict identifiers.
    """

    def new(self, language: str) -> T:
        """Create an identifier with a language code only."""
        ...

    def from_parts(
        self,
        language: str,
        territory: str | None = None,
        code_set: str | None = None,
        modifier: str | None = None,
    ) -> T:
        """Create an identifier from explicit parts, failing on the first bad field."""
        ...

    def parse(self, text: str) -> T:
        """Parse a canonical locale string."""
        ...
# pylint: enable=unnecessary-ellipsis


def convert[T: LocaleIdentifier](
    identifier: LocaleIdentifier,
    factory: LocaleIdentifierFactory[T],
) -> T:
    """Rebuild an identifier with another factory via its canonical form.

    Promotes a loose identifier to strict (raising UnknownCodeError when a
    code is not known) or demotes a strict one to loose.

    Example:
        >>> convert(LocaleString.parse("fr_FR"), StrictLocaleFactory(CldrLookup()))
        StrictLocaleString(language='fr', territory='FR', code_set=None, modifier=None)
    """
    return factory.parse(identifier.to_canonical_string())
