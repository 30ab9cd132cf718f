"""Shared constants for posixlocale.

This module provides centralized configuration constants used across the
loose and strict layers. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Separators: Delimiters of the canonical locale string
- Field limits: Length bounds per field
- Pseudo-locales: Values that are not locale identifiers in this context
- CLDR lookup: Reference table configuration

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Separators
    "SEP_TERRITORY",
    "SEP_CODE_SET",
    "SEP_MODIFIER",
    "SEP_MODIFIER_PAIR",
    "SEP_MODIFIER_KEY_VALUE",
    # Field limits
    "MAX_LANGUAGE_LENGTH",
    "MAX_FIELD_LENGTH",
    # Pseudo-locales
    "POSIX_PSEUDO_LOCALES",
    # CLDR lookup
    "CLDR_DISPLAY_LOCALE",
    "MAX_LOOKUP_CACHE_SIZE",
]

# ============================================================================
# SEPARATORS
# ============================================================================
#
# Canonical form: language[_territory][.code_set][@modifier]
#
# Parsing splits on SEP_MODIFIER first, then SEP_CODE_SET, then SEP_TERRITORY.
# A field must never contain the separator of a field split before it.

SEP_TERRITORY: str = "_"
SEP_CODE_SET: str = "."
SEP_MODIFIER: str = "@"

# Inside the modifier: "collation=pinyin;currency=CNY"
SEP_MODIFIER_PAIR: str = ";"
SEP_MODIFIER_KEY_VALUE: str = "="

# ============================================================================
# FIELD LIMITS
# ============================================================================

# ISO 639 codes are 2-3 letters; BCP-47 reserves up to 8 for registered subtags.
MAX_LANGUAGE_LENGTH: int = 8

# Upper bound for territory, code set, and modifier (DoS prevention).
MAX_FIELD_LENGTH: int = 256

# ============================================================================
# PSEUDO-LOCALES
# ============================================================================

# "C" and "POSIX" name the portable default locale, not a language.
POSIX_PSEUDO_LOCALES: frozenset[str] = frozenset({"C", "POSIX"})

# ============================================================================
# CLDR LOOKUP
# ============================================================================

# Locale whose CLDR display-name tables enumerate the known codes.
# The English tables are the most complete.
CLDR_DISPLAY_LOCALE: str = "en"

# Reference tables are per display locale; a handful is plenty.
MAX_LOOKUP_CACHE_SIZE: int = 8
