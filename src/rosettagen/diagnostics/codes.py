"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by pipeline stage:
        1000-1999: Configuration errors (registration, fallback, type name)
        2000-2999: Source errors (I/O and shape of decoded content)
        3000-3999: Template syntax errors
        4000-4999: Model validation errors and warnings
        5000-5999: Output errors
    """

    # Configuration errors (1000-1999)
    INVALID_LANGUAGE = 1001
    MISSING_SOURCE = 1002
    DUPLICATE_LANGUAGE = 1003
    FALLBACK_NOT_SET = 1004
    FALLBACK_NOT_REGISTERED = 1005
    INVALID_TYPE_NAME = 1006

    # Source errors (2000-2999)
    SOURCE_READ_FAILED = 2001
    SOURCE_INVALID_JSON = 2002
    SOURCE_NOT_AN_OBJECT = 2003
    SOURCE_NESTED_VALUE = 2004
    SOURCE_NON_STRING_VALUE = 2005
    SOURCE_TOO_LARGE = 2006

    # Template syntax errors (3000-3999)
    UNMATCHED_OPEN_BRACE = 3001
    UNMATCHED_CLOSE_BRACE = 3002
    EMPTY_PLACEHOLDER = 3003
    INVALID_PLACEHOLDER = 3004

    # Model validation (4000-4999)
    PARAMETER_MISMATCH = 4001
    INVALID_KEY = 4002
    INVALID_PARAMETER = 4003
    UNKNOWN_KEY = 4004
    UNKNOWN_KEY_DROPPED = 4101  # warning

    # Output errors (5000-5999)
    OUTPUT_WRITE_FAILED = 5001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location inside a single template string.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context to point
    at the offending source file, key and character without re-parsing.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location inside the template (syntax errors only)
        hint: Suggestion for fixing the error
        language: Language identifier of the offending source
        key: Translation key involved
        origin: Human-readable location of the source (file path)
        expected: Expected value description (e.g. canonical parameters)
        received: Actual value description
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    language: str | None = None
    key: str | None = None
    origin: str | None = None
    expected: str | None = None
    received: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[PARAMETER_MISMATCH]: Key 'hello_name' in language 'fr' has mismatched parameters
              --> locales/fr.json: hello_name
              = expected: {name}
              = received: {}
              = help: Use exactly the placeholders of the fallback template

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
