"""Language identifiers.

A LanguageId is an ISO 639-1 shaped code: exactly two ASCII letters,
normalized to lower case. Only the shape is checked; CLDR knowledge (via
Babel) is used for display names in generated code, never for validation,
so generation does not depend on the installed CLDR release.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass

from rosettagen.constants import LANGUAGE_ID_LENGTH
from rosettagen.diagnostics import ErrorTemplate, InvalidLanguageError

__all__ = ["LanguageId", "get_display_name"]

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=128)
def get_display_name(code: str) -> str | None:
    """Return the English display name of a language code.

    Args:
        code: Lowercase two-letter language code

    Returns:
        English name from CLDR data (e.g. 'French'), or None when Babel does
        not know the language

    Example:
        >>> get_display_name("fr")
        'French'
        >>> get_display_name("qq") is None
        True
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale, UnknownLocaleError  # noqa: PLC0415

    try:
        return Locale.parse(code).get_language_name("en")
    except (UnknownLocaleError, ValueError) as e:
        logger.debug("No CLDR display name for language '%s': %s", code, e)
        return None


@dataclass(frozen=True, slots=True, order=True)
class LanguageId:
    """Two-letter language identifier.

    Ordering is alphabetical by code, which is the merge and validation order
    of the model builder. Use LanguageId.parse() for untrusted input.

    Attributes:
        code: Lowercase two-letter code

    Example:
        >>> LanguageId.parse("FR")
        LanguageId(code='fr')
        >>> LanguageId.parse("fr").member_name
        'FR'
    """

    code: str

    def __post_init__(self) -> None:
        """Validate the code shape.

        Raises:
            InvalidLanguageError: If code is not two lowercase ASCII letters
        """
        if not self.is_valid_code(self.code) or self.code != self.code.lower():
            raise InvalidLanguageError(ErrorTemplate.invalid_language(self.code))

    @staticmethod
    def is_valid_code(value: str) -> bool:
        """Check the two-letter ASCII shape, ignoring case."""
        return (
            len(value) == LANGUAGE_ID_LENGTH
            and value.isascii()
            and value.isalpha()
        )

    @classmethod
    def parse(cls, value: str) -> LanguageId:
        """Parse a language identifier, normalizing case.

        Raises:
            InvalidLanguageError: If value is not a two-letter ASCII code
        """
        if not isinstance(value, str) or not cls.is_valid_code(value):
            raise InvalidLanguageError(ErrorTemplate.invalid_language(str(value)))
        return cls(value.lower())

    @property
    def member_name(self) -> str:
        """Enum member name in generated code."""
        return self.code.upper()

    @property
    def display_name(self) -> str | None:
        """English display name from CLDR, if known."""
        return get_display_name(self.code)

    def __str__(self) -> str:
        return self.code
