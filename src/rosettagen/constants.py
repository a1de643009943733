"""Shared constants for rosettagen.

Centralized defaults and limits used across the loading, syntax, model and
code generation packages. Placing them here avoids circular imports.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Output defaults
    "DEFAULT_TYPE_NAME",
    "DEFAULT_OUTPUT_FILENAME",
    "OUTPUT_DIR_ENV_VAR",
    # Input limits
    "MAX_IDENTIFIER_LENGTH",
    "MAX_SOURCE_SIZE",
    "LANGUAGE_ID_LENGTH",
    # Generated code
    "RESERVED_MEMBER_NAMES",
    "MODULE_LEVEL_NAMES",
    "GENERATED_HEADER",
]

# ============================================================================
# OUTPUT DEFAULTS
# ============================================================================

DEFAULT_TYPE_NAME: str = "Lang"
"""Name of the generated selector type when none is configured."""

DEFAULT_OUTPUT_FILENAME: str = "rosetta_output.py"
"""File name used by FileOutputSink when no output path is configured."""

OUTPUT_DIR_ENV_VAR: str = "ROSETTAGEN_OUT_DIR"
"""Environment variable naming the default output directory."""

# ============================================================================
# INPUT LIMITS
# ============================================================================

MAX_IDENTIFIER_LENGTH: int = 256
"""Maximum length of keys and placeholder names."""

MAX_SOURCE_SIZE: int = 10 * 1024 * 1024
"""Maximum size of one translation source in characters (10 MiB)."""

LANGUAGE_ID_LENGTH: int = 2
"""Language identifiers are ISO 639-1 two-letter codes."""

# ============================================================================
# GENERATED CODE
# ============================================================================

# Attributes of the generated Enum subclass. A key with one of these names
# would shadow the selector API or Enum internals.
RESERVED_MEMBER_NAMES: frozenset[str] = frozenset({
    "fallback",
    "from_language_id",
    "language_id",
    "languages",
    "name",
    "value",
})

# Module-level names the generated class body refers to. Annotations are
# evaluated in the class namespace, so an accessor named `str` would replace
# the type in every later `-> str` annotation.
MODULE_LEVEL_NAMES: frozenset[str] = frozenset({"Enum", "str"})

GENERATED_HEADER: str = "# This file is generated by rosettagen. Do not edit it by hand."
