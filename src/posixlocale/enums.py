"""Enumerations for posixlocale type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LocaleField(StrEnum):
    """Structural field of a locale identifier, in canonical segment order.

    StrEnum provides automatic string conversion: str(LocaleField.CODE_SET) == "code_set"
    """

    LANGUAGE = "language"
    """ISO 639 language code: the `en` in en_US.UTF-8"""

    TERRITORY = "territory"
    """ISO 3166 territory code: the `US` in en_US.UTF-8"""

    CODE_SET = "code_set"
    """Character set name: the `UTF-8` in en_US.UTF-8"""

    MODIFIER = "modifier"
    """Free-form modifier list: the `euro` in de_DE@euro"""


class CodeCategory(StrEnum):
    """Category of a reference lookup query.

    The modifier has no standard registry, so it has no category.

    StrEnum provides automatic string conversion: str(CodeCategory.TERRITORY) == "territory"
    """

    LANGUAGE = "language"
    """ISO 639 language codes"""

    TERRITORY = "territory"
    """ISO 3166 territory codes (alpha-2 or UN M.49 numeric)"""

    CODE_SET = "code_set"
    """IANA character set names"""

    @property
    def field(self) -> LocaleField:
        """The locale field validated by this category."""
        return LocaleField(self.value)


__all__ = [
    "CodeCategory",
    "LocaleField",
]
