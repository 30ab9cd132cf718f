"""Core utilities shared across the loose and strict layers.

This package provides the foundations both LocaleString and
StrictLocaleString depend on, keeping a clean dependency graph:

    diagnostics <- core <- locale_string <- strict

Exports:
    LocaleParts: Raw segments of a canonical locale string
    render_canonical: Render fields in canonical form
    split_canonical: Segment a canonical string
    join_modifiers: Render a mapping as a modifier string
    validate_field: Per-field syntax validation
    is_valid_field: Non-raising syntax predicate

Python 3.13+.
"""

from .canonical import LocaleParts, join_modifiers, render_canonical, split_canonical
from .field_validation import is_valid_field, validate_field

__all__ = [
    "LocaleParts",
    "is_valid_field",
    "join_modifiers",
    "render_canonical",
    "split_canonical",
    "validate_field",
]
