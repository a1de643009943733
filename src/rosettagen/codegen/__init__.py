"""Python code generation package.

Submodules:
    literals  - String literal and f-string rendering of templates
    generator - CodeGenerator (module text for a TranslationModel)

Python 3.13+.
"""

from .generator import CodeGenerator, GeneratedArtifact, validate_type_name
from .literals import escape_text, render_template, string_literal

__all__ = [
    "CodeGenerator",
    "GeneratedArtifact",
    "escape_text",
    "render_template",
    "string_literal",
    "validate_type_name",
]
