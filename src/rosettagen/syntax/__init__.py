"""Template syntax package.

Provides the template AST, the immutable cursor and the template parser.
Separate from the model so tooling (linters, editors) can parse templates
without building a translation model.

Python 3.13+.
"""

from .ast import Placeholder, Span, Template, TemplateElement, TextElement
from .cursor import Cursor
from .parser import parse_template

__all__ = [
    "Cursor",
    "Placeholder",
    "Span",
    "Template",
    "TemplateElement",
    "TextElement",
    "parse_template",
]
