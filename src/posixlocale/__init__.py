"""posixlocale - POSIX locale identifiers with optional strict validation.

Models locale identifiers such as ``en_US.UTF-8@collation=pinyin`` in two
layers: a loose, syntax-only builder and a strict layer that checks every
code against a caller-supplied reference lookup.

Public API:
    LocaleString - Syntax-validated identifier (build, parse, render)
    StrictLocaleString - Identifier whose codes exist in a reference lookup
    StrictLocaleFactory - Binds a lookup so strict identifiers build like loose ones
    LocaleIdentifier - Protocol shared by both identifier types
    LocaleIdentifierFactory - Protocol for constructing identifiers
    CodeTable - Fixed reference lookup
    CldrLookup - CLDR-backed reference lookup (requires Babel)
    CodeCategory - Lookup category (language, territory, code set)
    LocaleField - Structural field of an identifier

Exceptions:
    LocaleError - Base exception class
    LocaleSyntaxError - Malformed field (Invalid*Error subclasses)
    UnknownCodeError - Field unknown to the lookup (Unknown*Error subclasses)
    LocaleParseError - Canonical string could not be segmented

Submodules:
    posixlocale.diagnostics - Error codes, templates, and formatting
    posixlocale.core - Field validation and canonical-form helpers
    posixlocale.lookup - Reference lookups
"""

from .diagnostics import (
    InvalidCodeSetError,
    InvalidLanguageCodeError,
    InvalidModifierError,
    InvalidTerritoryError,
    LocaleError,
    LocaleParseError,
    LocaleSyntaxError,
    UnknownCodeError,
    UnknownCodeSetError,
    UnknownLanguageCodeError,
    UnknownTerritoryError,
)
from .enums import CodeCategory, LocaleField
from .identifier import LocaleIdentifier, LocaleIdentifierFactory, convert
from .locale_string import LocaleString
from .lookup import CldrLookup, CodeTable, ReferenceLookup
from .strict import StrictLocaleFactory, StrictLocaleString

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("posixlocale")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CldrLookup",
    "CodeCategory",
    "CodeTable",
    "InvalidCodeSetError",
    "InvalidLanguageCodeError",
    "InvalidModifierError",
    "InvalidTerritoryError",
    "LocaleError",
    "LocaleField",
    "LocaleIdentifier",
    "LocaleIdentifierFactory",
    "LocaleParseError",
    "LocaleString",
    "LocaleSyntaxError",
    "ReferenceLookup",
    "StrictLocaleFactory",
    "StrictLocaleString",
    "UnknownCodeError",
    "UnknownCodeSetError",
    "UnknownLanguageCodeError",
    "UnknownTerritoryError",
    "__version__",
    "convert",
]
