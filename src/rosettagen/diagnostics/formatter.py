"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Renders Diagnostic objects for terminals (rust, simple) or for build
    tooling (json).

    Attributes:
        output_format: Output style (rust, simple, json)
        color: Enable ANSI color codes (for terminal output)

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.duplicate_language("fr")
        >>> print(formatter.format(diagnostic))
        error[DUPLICATE_LANGUAGE]: Language 'fr' is registered more than once
          = language: fr
          = help: Register each language with exactly one source

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        DUPLICATE_LANGUAGE: Language 'fr' is registered more than once
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines (one per line for JSON)."""
        separator = "\n" if self.output_format == OutputFormat.JSON else "\n\n"
        return separator.join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[UNMATCHED_OPEN_BRACE]: Unmatched '{' at offset 6 in key 'hello_name' (en)
              --> locales/en.json: hello_name, line 1, column 7
              = help: Close the placeholder with '}'; literal braces are not supported
        """
        severity = diagnostic.severity

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        parts = [f"{severity_str}[{diagnostic.code.name}]: {diagnostic.message}"]

        location = self._location(diagnostic)
        if location:
            parts.append(f"  --> {location}")
        elif diagnostic.language:
            parts.append(f"  = language: {diagnostic.language}")

        if diagnostic.expected is not None:
            parts.append(f"  = expected: {diagnostic.expected}")

        if diagnostic.received is not None:
            parts.append(f"  = received: {diagnostic.received}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        return "\n".join(parts)

    @staticmethod
    def _location(diagnostic: Diagnostic) -> str:
        """Combine origin, key and span into one location string."""
        pieces: list[str] = []
        if diagnostic.key:
            pieces.append(diagnostic.key)
        if diagnostic.span:
            pieces.append(f"line {diagnostic.span.line}, column {diagnostic.span.column}")
        detail = ", ".join(pieces)

        if diagnostic.origin and detail:
            return f"{diagnostic.origin}: {detail}"
        if diagnostic.origin:
            return diagnostic.origin
        return detail

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            PARAMETER_MISMATCH: Key 'hello_name' in language 'fr' has mismatched parameters
        """
        return f"{diagnostic.code.name}: {diagnostic.message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "PARAMETER_MISMATCH", "code_value": 4001, "message": "...", ...}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }

        if diagnostic.span:
            data["line"] = diagnostic.span.line
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.language:
            data["language"] = diagnostic.language

        if diagnostic.key:
            data["key"] = diagnostic.key

        if diagnostic.origin:
            data["origin"] = diagnostic.origin

        if diagnostic.expected is not None:
            data["expected"] = diagnostic.expected

        if diagnostic.received is not None:
            data["received"] = diagnostic.received

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        return json.dumps(data, ensure_ascii=False)
