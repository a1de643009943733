"""Unified identifier validation for keys, placeholders and type names.

This module provides the single source of truth for identifier grammar rules,
ensuring consistent validation across the template parser, the model builder
and the builder configuration.

Identifier Grammar:
    [a-zA-Z_][a-zA-Z0-9_]*

    - Start: ASCII letter or underscore
    - Continue: ASCII letter, ASCII digit, or underscore
    - Length: Maximum 256 characters

Generated-code constraints:
    A grammatically valid identifier can still be unusable in the emitted
    Python module (``class``, ``self``, ``value``). python_name_conflict()
    reports those cases separately so the parser stays grammar-only.

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+.
"""

from __future__ import annotations

import keyword
import re

from rosettagen.constants import (
    MAX_IDENTIFIER_LENGTH,
    MODULE_LEVEL_NAMES,
    RESERVED_MEMBER_NAMES,
)
from rosettagen.enums import IdentifierRole

__all__ = [
    "is_identifier_char",
    "is_identifier_start",
    "is_valid_identifier",
    "python_name_conflict",
]

_IDENTIFIER_CONTINUATION_PATTERN: re.Pattern[str] = re.compile(r"^[a-zA-Z0-9_]*$")


def is_identifier_start(ch: str) -> bool:
    """Check if character can start an identifier.

    Only ASCII letters and the underscore are accepted. Python's
    str.isidentifier() admits Unicode letters, which would make generated
    accessor names depend on the reader's editor and font.

    Example:
        >>> is_identifier_start('a')
        True
        >>> is_identifier_start('_')
        True
        >>> is_identifier_start('1')
        False
    """
    return len(ch) == 1 and ch.isascii() and (ch.isalpha() or ch == "_")


def is_identifier_char(ch: str) -> bool:
    """Check if character can continue an identifier.

    Example:
        >>> is_identifier_char('5')
        True
        >>> is_identifier_char('-')
        False
    """
    return len(ch) == 1 and ch.isascii() and (ch.isalnum() or ch == "_")


def is_valid_identifier(name: str) -> bool:
    """Validate complete identifier per grammar rules.

    Args:
        name: Identifier string to validate

    Returns:
        True if identifier is valid, False otherwise

    Example:
        >>> is_valid_identifier("hello_name")
        True
        >>> is_valid_identifier("2fa_prompt")
        False
        >>> is_valid_identifier("")
        False
    """
    if not name:
        return False

    if len(name) > MAX_IDENTIFIER_LENGTH:
        return False

    if not is_identifier_start(name[0]):
        return False

    return _IDENTIFIER_CONTINUATION_PATTERN.match(name[1:]) is not None


def python_name_conflict(name: str, role: IdentifierRole) -> str | None:
    """Explain why a valid identifier cannot be used in generated code.

    Args:
        name: Identifier already accepted by is_valid_identifier()
        role: Where the identifier will appear in generated code

    Returns:
        Human-readable reason, or None if the name is usable

    Example:
        >>> python_name_conflict("hello", IdentifierRole.KEY)
        >>> python_name_conflict("class", IdentifierRole.PARAMETER)
        "'class' is a Python keyword"
        >>> python_name_conflict("value", IdentifierRole.KEY)
        "'value' is reserved by the generated selector type"
    """
    if keyword.iskeyword(name) or keyword.issoftkeyword(name):
        return f"'{name}' is a Python keyword"

    match role:
        case IdentifierRole.KEY:
            if name.startswith("_"):
                return f"'{name}' starts with an underscore, which Enum reserves"
            if name in RESERVED_MEMBER_NAMES:
                return f"'{name}' is reserved by the generated selector type"
            if name in MODULE_LEVEL_NAMES:
                return f"'{name}' is used by the generated module"
        case IdentifierRole.PARAMETER:
            if name == "self":
                return "'self' is the accessor receiver"
        case IdentifierRole.TYPE_NAME:
            if name in MODULE_LEVEL_NAMES:
                return f"'{name}' is used by the generated module"

    return None
