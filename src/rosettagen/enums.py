"""Enumerations for rosettagen type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class FormatViolation(StrEnum):
    """Reason a decoded translation source is not a flat string mapping.

    StrEnum provides automatic string conversion: str(FormatViolation.NESTED_VALUE) == "nested-value"
    """

    INVALID_JSON = "invalid-json"
    """Source text could not be decoded at all."""

    NOT_AN_OBJECT = "not-an-object"
    """Document root is not a key/value mapping: ["a", "b"]"""

    NESTED_VALUE = "nested-value"
    """A value is an object or array: {"menu": {"open": "Open"}}"""

    NON_STRING_VALUE = "non-string-value"
    """A value is a number, boolean or null: {"count": 3}"""

    SOURCE_TOO_LARGE = "source-too-large"
    """Source exceeds MAX_SOURCE_SIZE."""


class IdentifierRole(StrEnum):
    """Where an identifier appears in generated code."""

    KEY = "key"
    """Translation key, becomes an accessor method name."""

    PARAMETER = "parameter"
    """Placeholder name, becomes an accessor parameter."""

    TYPE_NAME = "type-name"
    """Name of the generated selector type."""


__all__ = [
    "FormatViolation",
    "IdentifierRole",
]
