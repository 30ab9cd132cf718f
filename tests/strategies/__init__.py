"""Hypothesis strategies for posixlocale property-based testing.

Usage:
    from tests.strategies import locale_strings, territories
    from tests.strategies.locale import reserved_territories
"""

from .locale import (
    code_sets,
    languages,
    locale_parts,
    locale_strings,
    modifiers,
    reserved_territories,
    territories,
)

__all__ = [
    "code_sets",
    "languages",
    "locale_parts",
    "locale_strings",
    "modifiers",
    "reserved_territories",
    "territories",
]
