"""Core shared utilities with no dependencies on other rosettagen packages.

Python 3.13+.
"""

from .identifier_validation import (
    is_identifier_char,
    is_identifier_start,
    is_valid_identifier,
    python_name_conflict,
)

__all__ = [
    "is_identifier_char",
    "is_identifier_start",
    "is_valid_identifier",
    "python_name_conflict",
]
