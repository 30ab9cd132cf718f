"""Hypothesis strategies for locale identifier fields.

Each strategy generates values that pass the field's syntax rules, plus a few
that deliberately break them.

Usage:
    from hypothesis import given
    from tests.strategies.locale import locale_strings

    @given(locale=locale_strings())
    def test_round_trip(locale):
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from posixlocale import LocaleString
from posixlocale.constants import POSIX_PSEUDO_LOCALES
from posixlocale.core import LocaleParts

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

# ============================================================================
# FIELD VALUES
# ============================================================================

# Printable, non-whitespace characters: categories Z (separators) and
# C (control, format, surrogate, private use, unassigned) excluded.
_free_text_chars = st.characters(exclude_categories=("Z", "C"), exclude_characters="_.@")

languages: SearchStrategy[str] = st.from_regex(r"[a-zA-Z]{1,8}", fullmatch=True).filter(
    lambda s: s not in POSIX_PSEUDO_LOCALES
)

territories: SearchStrategy[str] = st.one_of(
    st.from_regex(r"[A-Z]{2}", fullmatch=True),
    st.from_regex(r"[0-9]{3}", fullmatch=True),
    st.text(_free_text_chars, min_size=1, max_size=12),
)

code_sets: SearchStrategy[str] = st.one_of(
    st.sampled_from(["UTF-8", "ISO8859-1", "ISO8859-15", "eucJP", "KOI8-R", "CP1252"]),
    st.text(_free_text_chars, min_size=1, max_size=16),
)

# Modifiers may also contain '.', '_', ';', '=' and the ASCII space.
_modifier_chars = st.one_of(
    st.characters(exclude_categories=("Z", "C"), exclude_characters="@"),
    st.just(" "),
)

modifiers: SearchStrategy[str] = st.one_of(
    st.sampled_from(["euro", "latin", "cyrillic", "collation=pinyin;currency=CNY"]),
    st.text(_modifier_chars, min_size=1, max_size=24),
)

# Territories guaranteed to carry a reserved delimiter.
reserved_territories: SearchStrategy[str] = st.tuples(
    st.text(_free_text_chars, max_size=4),
    st.sampled_from("_.@ \t"),
    st.text(_free_text_chars, max_size=4),
).map("".join)


# ============================================================================
# WHOLE IDENTIFIERS
# ============================================================================


@composite
def locale_parts(draw: st.DrawFn) -> LocaleParts:
    """Generate raw, syntax-valid locale parts with any subset of optional fields.

    Events emitted:
    - shape={fields}: Which optional fields are present
    """
    parts = LocaleParts(
        draw(languages),
        draw(st.none() | territories),
        draw(st.none() | code_sets),
        draw(st.none() | modifiers),
    )
    present = [name for name, value in parts._asdict().items() if value is not None]
    event(f"shape={'+'.join(present)}")
    return parts


@composite
def locale_strings(draw: st.DrawFn) -> LocaleString:
    """Generate a valid LocaleString."""
    return LocaleString(*draw(locale_parts()))
