"""Loose locale identifier: syntax-checked, not checked against any registry.

A LocaleString is the POSIX notion of a locale identifier, as used in
environment variables such as LANG and LC_ALL:

    language[_territory][.code_set][@modifier]

For example, Australian English using UTF-8 is 'en_AU.UTF-8' and Serbian in
Latin script is 'sr_RS@latin'.

* language: ISO 639 code, ASCII letters ('en', 'fil').
* territory: ISO 3166-1 alpha-2 code or UN M.49 number ('AU', '419').
* code_set: character set name, ideally from the IANA registry ('UTF-8',
  'ISO8859-1').
* modifier: ';'-separated identifiers or key=value pairs
  ('collation=pinyin;currency=CNY'). Often an ISO 15924 script name.

Every field is checked for syntax only; 'zz_QQ' is a valid LocaleString.
Use StrictLocaleString when values must exist in a reference table.

See also:
    https://www.gnu.org/software/libc/manual/html_node/Locale-Names.html

Thread Safety:
    Instances are immutable. Safe for concurrent use across multiple threads.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Self

from posixlocale.core.canonical import join_modifiers, render_canonical, split_canonical
from posixlocale.core.field_validation import (
    validate_code_set,
    validate_language,
    validate_modifier,
    validate_territory,
)
from posixlocale.diagnostics import LocaleParseError, LocaleSyntaxError, ParseFailure

__all__ = ["LocaleString"]


@dataclass(frozen=True, slots=True)
class LocaleString:
    """Immutable, syntax-validated POSIX locale identifier.

    Construction validates every field in canonical segment order, so an
    instance is always well-formed. ``with_*`` methods return new instances.

    Attributes:
        language: ISO 639 language code (never empty)
        territory: Territory code, or None when absent
        code_set: Character set name, or None when absent
        modifier: Modifier string, or None when absent

    Example:
        >>> locale = (
        ...     LocaleString.new("en")
        ...     .with_territory("US")
        ...     .with_code_set("UTF-8")
        ...     .with_modifier("collation=pinyin;currency=CNY")
        ... )
        >>> str(locale)
        'en_US.UTF-8@collation=pinyin;currency=CNY'
        >>> LocaleString.parse("en_US.UTF-8") == LocaleString("en", "US", "UTF-8")
        True
    """

    language: str
    territory: str | None = None
    code_set: str | None = None
    modifier: str | None = None

    def __post_init__(self) -> None:
        """Validate field syntax.

        Raises:
            LocaleSyntaxError: The first field that fails its syntax rules
        """
        validate_language(self.language)
        if self.territory is not None:
            validate_territory(self.territory)
        if self.code_set is not None:
            validate_code_set(self.code_set)
        if self.modifier is not None:
            validate_modifier(self.modifier)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def new(cls, language: str) -> Self:
        """Create an identifier with a language code only.

        Raises:
            InvalidLanguageCodeError: If the language code is malformed
        """
        return cls(language)

    @classmethod
    def from_parts(
        cls,
        language: str,
        territory: str | None = None,
        code_set: str | None = None,
        modifier: str | None = None,
    ) -> Self:
        """Create an identifier from explicit parts.

        Raises:
            LocaleSyntaxError: The first field, in canonical order, that is malformed
        """
        return cls(language, territory, code_set, modifier)

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse a canonical locale string.

        Args:
            text: Locale string such as 'de_DE.ISO8859-15@euro'

        Returns:
            Parsed identifier

        Raises:
            TypeError: If text is not a str
            LocaleParseError: If text cannot be segmented, or a segment breaks
                its field's syntax rules (the field error is chained as __cause__)
        """
        parts = split_canonical(text)
        try:
            return cls(*parts)
        except LocaleSyntaxError as e:
            raise LocaleParseError(
                text, ParseFailure.INVALID_SEGMENT, field=e.field, value=e.value
            ) from e

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def with_language(self, language: str) -> Self:
        """Return a copy with a new language code."""
        return replace(self, language=language)

    def with_territory(self, territory: str) -> Self:
        """Return a copy with a new territory.

        Raises:
            InvalidTerritoryError: If the territory is empty or contains a
                reserved delimiter
        """
        return replace(self, territory=territory)

    def with_code_set(self, code_set: str) -> Self:
        """Return a copy with a new code set."""
        return replace(self, code_set=code_set)

    def with_modifier(self, modifier: str) -> Self:
        """Return a copy with a new modifier string."""
        return replace(self, modifier=modifier)

    def with_modifiers(self, modifiers: Mapping[object, object]) -> Self:
        """Return a copy whose modifier is built from key/value pairs.

        Example:
            >>> str(LocaleString.new("zh").with_modifiers({"collation": "pinyin"}))
            'zh@collation=pinyin'
        """
        return self.with_modifier(join_modifiers(modifiers))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_canonical_string(self) -> str:
        """Render in canonical form: language[_territory][.code_set][@modifier]."""
        return render_canonical(self.language, self.territory, self.code_set, self.modifier)

    def __str__(self) -> str:
        return self.to_canonical_string()
