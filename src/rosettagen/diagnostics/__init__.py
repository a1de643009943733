"""Diagnostic system for rosettagen errors.

Provides structured error diagnostics with codes, spans and hints, and the
exception hierarchy raised by the generation pipeline.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    DuplicateLanguageError,
    InvalidIdentifierError,
    InvalidLanguageError,
    InvalidTypeNameError,
    MissingFallbackError,
    MissingSourceError,
    OutputWriteError,
    ParameterMismatchError,
    RosettaConfigError,
    RosettaError,
    SourceFormatError,
    SourceIOError,
    TemplateSyntaxError,
    UnknownKeyError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DuplicateLanguageError",
    "ErrorTemplate",
    "InvalidIdentifierError",
    "InvalidLanguageError",
    "InvalidTypeNameError",
    "MissingFallbackError",
    "MissingSourceError",
    "OutputFormat",
    "OutputWriteError",
    "ParameterMismatchError",
    "RosettaConfigError",
    "RosettaError",
    "SourceFormatError",
    "SourceIOError",
    "SourceSpan",
    "TemplateSyntaxError",
    "UnknownKeyError",
]
