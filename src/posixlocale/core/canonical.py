"""Canonical locale string segmentation and rendering.

Canonical form:
    language[_territory][.code_set][@modifier]

Segmentation splits on the first '@' (the rest is the modifier), then on the
first '.' (the rest is the code set), then on the first '_' (the rest is the
territory); what remains is the language. This order means a modifier may
contain '.' and '_', and a code set may not contain '.'.

Segmentation is purely structural: per-field syntax is checked by
posixlocale.core.field_validation. Both the loose and strict layers share
these helpers so their text handling cannot drift apart.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import NamedTuple

from posixlocale.constants import (
    POSIX_PSEUDO_LOCALES,
    SEP_CODE_SET,
    SEP_MODIFIER,
    SEP_MODIFIER_KEY_VALUE,
    SEP_MODIFIER_PAIR,
    SEP_TERRITORY,
)
from posixlocale.diagnostics import InvalidModifierError, LocaleParseError, ParseFailure
from posixlocale.enums import LocaleField

__all__ = [
    "LocaleParts",
    "join_modifiers",
    "render_canonical",
    "split_canonical",
]


class LocaleParts(NamedTuple):
    """Raw segments of a canonical locale string.

    Absent fields are None. Values are not yet syntax-checked.
    """

    language: str
    territory: str | None = None
    code_set: str | None = None
    modifier: str | None = None

    def items(self) -> tuple[tuple[LocaleField, str | None], ...]:
        """Pair each segment with its field, in canonical order."""
        return (
            (LocaleField.LANGUAGE, self.language),
            (LocaleField.TERRITORY, self.territory),
            (LocaleField.CODE_SET, self.code_set),
            (LocaleField.MODIFIER, self.modifier),
        )


def render_canonical(
    language: str,
    territory: str | None = None,
    code_set: str | None = None,
    modifier: str | None = None,
) -> str:
    """Render fields in canonical form, omitting absent fields and their separators.

    Example:
        >>> render_canonical("en", "US", "UTF-8", "collation=pinyin;currency=CNY")
        'en_US.UTF-8@collation=pinyin;currency=CNY'
        >>> render_canonical("fr")
        'fr'
        >>> render_canonical("de", modifier="euro")
        'de@euro'
    """
    parts = [language]
    if territory is not None:
        parts.append(SEP_TERRITORY + territory)
    if code_set is not None:
        parts.append(SEP_CODE_SET + code_set)
    if modifier is not None:
        parts.append(SEP_MODIFIER + modifier)
    return "".join(parts)


def _split_tail(text: str, sep: str) -> tuple[str, str | None]:
    """Split at the first separator; the tail is None when it is absent."""
    head, found, tail = text.partition(sep)
    return head, (tail if found else None)


def split_canonical(text: str) -> LocaleParts:
    """Segment a canonical locale string into its four raw fields.

    Args:
        text: Locale string such as 'en_US.UTF-8@euro'

    Returns:
        LocaleParts with absent fields set to None

    Raises:
        TypeError: If text is not a str
        LocaleParseError: Empty input, the 'C'/'POSIX' pseudo-locale, or a
            separator followed by an empty segment (checked in segment order)

    Example:
        >>> split_canonical("sr_RS@latin")
        LocaleParts(language='sr', territory='RS', code_set=None, modifier='latin')
    """
    if not isinstance(text, str):
        msg = f"Locale identifier must be str, not {type(text).__name__}"
        raise TypeError(msg)
    if not text:
        raise LocaleParseError(text, ParseFailure.EMPTY_STRING)
    if text in POSIX_PSEUDO_LOCALES:
        raise LocaleParseError(text, ParseFailure.POSIX_UNSUPPORTED)

    rest, modifier = _split_tail(text, SEP_MODIFIER)
    rest, code_set = _split_tail(rest, SEP_CODE_SET)
    language, territory = _split_tail(rest, SEP_TERRITORY)

    parts = LocaleParts(language, territory, code_set, modifier)
    for field, value in parts.items():
        if value == "":
            raise LocaleParseError(text, ParseFailure.EMPTY_SEGMENT, field=field, value=value)
    return parts


_MODIFIER_PAIR_RESERVED: frozenset[str] = frozenset(
    SEP_MODIFIER + SEP_MODIFIER_PAIR + SEP_MODIFIER_KEY_VALUE
)


def join_modifiers(modifiers: Mapping[object, object]) -> str:
    """Render a mapping as a modifier string of 'key=value' pairs.

    Pairs keep the mapping's iteration order and are joined with ';'.
    Keys and values are converted with str().

    Args:
        modifiers: Mapping such as {"collation": "pinyin", "currency": "CNY"}

    Returns:
        Modifier string, e.g. 'collation=pinyin;currency=CNY'

    Raises:
        InvalidModifierError: Empty mapping, or a key or value that is empty
            or contains ';', '=' or '@'

    Example:
        >>> join_modifiers({"collation": "pinyin", "currency": "CNY"})
        'collation=pinyin;currency=CNY'
    """
    if not modifiers:
        raise InvalidModifierError("", "must contain at least one key=value pair")
    pairs = []
    for key, value in modifiers.items():
        key_str, value_str = str(key), str(value)
        pair = f"{key_str}{SEP_MODIFIER_KEY_VALUE}{value_str}"
        for part in (key_str, value_str):
            if not part:
                raise InvalidModifierError(pair, "keys and values must not be empty")
            if not _MODIFIER_PAIR_RESERVED.isdisjoint(part):
                raise InvalidModifierError(pair, "keys and values must not contain ';', '=' or '@'")
        pairs.append(pair)
    return SEP_MODIFIER_PAIR.join(pairs)
