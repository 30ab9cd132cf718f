"""Reference lookups answering "is this a known code?" for the strict layer.

A reference lookup is any callable ``(category, code) -> bool``. The strict
layer receives one as a parameter instead of consulting a global table, so
tests can inject a small fixed table and applications can plug in their own
registry.

Two implementations are provided:

1. CodeTable: fixed, case-sensitive membership sets. No dependencies.
2. CldrLookup: Unicode CLDR data via Babel for languages and territories,
   and Python's codec registry for code sets.
   Requires: pip install posixlocale[babel]

Lookups must be deterministic for a given code. StrictLocaleString does not
cache their answers; CldrLookup caches the CLDR tables it loads.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

from posixlocale.constants import CLDR_DISPLAY_LOCALE, MAX_LOOKUP_CACHE_SIZE
from posixlocale.core.babel_compat import get_locale_class, get_unknown_locale_error
from posixlocale.enums import CodeCategory

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "CldrLookup",
    "CodeTable",
    "ReferenceLookup",
    "clear_lookup_cache",
]

logger = logging.getLogger(__name__)


type ReferenceLookup = Callable[[CodeCategory, str], bool]
"""Membership query: True when ``code`` is a known identifier of ``category``."""


# ============================================================================
# FIXED TABLE
# ============================================================================


@dataclass(frozen=True, slots=True)
class CodeTable:
    """Fixed reference table with exact, case-sensitive membership.

    Immutable, thread-safe, hashable.

    Attributes:
        languages: Known language codes
        territories: Known territory codes
        code_sets: Known code set names

    Example:
        >>> table = CodeTable.of(languages=["en", "fr"], territories=["US"])
        >>> table(CodeCategory.LANGUAGE, "en")
        True
        >>> table(CodeCategory.LANGUAGE, "xx")
        False
    """

    languages: frozenset[str] = frozenset()
    territories: frozenset[str] = frozenset()
    code_sets: frozenset[str] = frozenset()

    @classmethod
    def of(
        cls,
        *,
        languages: Iterable[str] = (),
        territories: Iterable[str] = (),
        code_sets: Iterable[str] = (),
    ) -> CodeTable:
        """Build a table from any iterables of codes."""
        return cls(frozenset(languages), frozenset(territories), frozenset(code_sets))

    def __call__(self, category: CodeCategory, code: str) -> bool:
        match category:
            case CodeCategory.LANGUAGE:
                return code in self.languages
            case CodeCategory.TERRITORY:
                return code in self.territories
            case CodeCategory.CODE_SET:
                return code in self.code_sets


# ============================================================================
# CLDR (BABEL) TABLES
# ============================================================================


def _load_display_locale(display_locale: str) -> Locale:
    """Parse the display locale, translating Babel's error into ValueError."""
    locale_class = get_locale_class()
    unknown_locale_error = get_unknown_locale_error()
    try:
        return locale_class.parse(display_locale)
    except unknown_locale_error as e:
        msg = f"Unknown CLDR display locale: {display_locale!r}"
        raise ValueError(msg) from e


@lru_cache(maxsize=MAX_LOOKUP_CACHE_SIZE)
def _cldr_languages(display_locale: str) -> frozenset[str]:
    """Lowercase language codes named by the display locale's CLDR tables.

    Script and region variants ('zh_Hans', 'en_GB') are excluded.
    """
    locale = _load_display_locale(display_locale)
    codes = frozenset(
        code.lower()
        for code in locale.languages
        if code.isascii() and code.isalpha()
    )
    logger.debug(
        "Loaded %d CLDR language codes (display locale %s)", len(codes), display_locale
    )
    return codes


@lru_cache(maxsize=MAX_LOOKUP_CACHE_SIZE)
def _cldr_territories(display_locale: str) -> frozenset[str]:
    """Uppercase territory codes: ISO 3166-1 alpha-2 and UN M.49 numeric."""
    locale = _load_display_locale(display_locale)
    codes = frozenset(
        code.upper()
        for code in locale.territories
        if code.isascii() and code.isalnum()
    )
    logger.debug(
        "Loaded %d CLDR territory codes (display locale %s)", len(codes), display_locale
    )
    return codes


def _is_known_code_set(code: str) -> bool:
    """Check a code set against Python's codec registry.

    The registry resolves IANA names and common aliases ('UTF-8', 'utf8',
    'ISO8859-1', 'eucJP'). Encoding the empty string also rejects codecs
    that are not text encodings, such as 'rot13' (LookupError), and the
    'undefined' codec, which refuses every encode (UnicodeError).
    """
    try:
        "".encode(code)
    except (LookupError, UnicodeError):
        return False
    return True


@dataclass(frozen=True, slots=True)
class CldrLookup:
    """Reference lookup backed by Unicode CLDR data.

    Languages match case-insensitively against CLDR language codes,
    territories against CLDR territory codes (including numeric regions such
    as '419'), and code sets against Python's codec registry.

    CLDR tables load lazily on first use and are cached per display locale.

    Attributes:
        display_locale: Locale whose CLDR display-name tables enumerate codes

    Raises:
        BabelImportError: On first language or territory query, if Babel is
            not installed
        ValueError: On first language or territory query, if display_locale
            is unknown to CLDR

    Example:
        >>> lookup = CldrLookup()
        >>> lookup(CodeCategory.TERRITORY, "US")
        True
        >>> lookup(CodeCategory.CODE_SET, "UTF-8")
        True
    """

    display_locale: str = CLDR_DISPLAY_LOCALE

    def __call__(self, category: CodeCategory, code: str) -> bool:
        match category:
            case CodeCategory.LANGUAGE:
                return code.lower() in _cldr_languages(self.display_locale)
            case CodeCategory.TERRITORY:
                return code.upper() in _cldr_territories(self.display_locale)
            case CodeCategory.CODE_SET:
                return _is_known_code_set(code)


def clear_lookup_cache() -> None:
    """Clear the cached CLDR reference tables.

    Call this to free memory. Thread-safe.
    """
    _cldr_languages.cache_clear()
    _cldr_territories.cache_clear()
