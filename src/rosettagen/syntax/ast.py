"""Template AST node definitions.

A template is an ordered sequence of literal runs and named placeholders:

    "Hello {name}!" -> TextElement("Hello "), Placeholder("name"), TextElement("!")

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

__all__ = [
    "Span",
    "TextElement",
    "Placeholder",
    "Template",
    "TemplateElement",
]


@dataclass(frozen=True, slots=True)
class Span:
    """Character offsets of a node inside its template string.

    Attributes:
        start: Starting character offset (inclusive)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class TextElement:
    """Literal text run. Never contains '{' or '}'."""

    value: str
    span: Span | None = None

    @staticmethod
    def guard(element: object) -> TypeIs["TextElement"]:
        """Type guard for TextElement."""
        return isinstance(element, TextElement)


@dataclass(frozen=True, slots=True)
class Placeholder:
    """Named interpolation slot: {name}

    The span covers the braces.
    """

    name: str
    span: Span | None = None

    @staticmethod
    def guard(element: object) -> TypeIs["Placeholder"]:
        """Type guard for Placeholder."""
        return isinstance(element, Placeholder)


type TemplateElement = TextElement | Placeholder


@dataclass(frozen=True, slots=True)
class Template:
    """Parsed template string.

    Every placeholder occurrence is kept, in source order, so the generator
    can substitute repeated names. Parameter sets are derived on demand.

    Attributes:
        elements: Literal runs and placeholders in source order
        source: The raw template text
    """

    elements: tuple[TemplateElement, ...]
    source: str = ""

    @property
    def parameter_names(self) -> tuple[str, ...]:
        """Distinct placeholder names in order of first appearance.

        Example:
            >>> parse_template("{b} and {a} and {b}").parameter_names
            ('b', 'a')
        """
        seen: dict[str, None] = {}
        for element in self.elements:
            if isinstance(element, Placeholder):
                seen.setdefault(element.name, None)
        return tuple(seen)

    @property
    def parameters(self) -> frozenset[str]:
        """Set of distinct placeholder names."""
        return frozenset(self.parameter_names)

    @property
    def is_plain(self) -> bool:
        """True when the template has no placeholders."""
        return not any(isinstance(e, Placeholder) for e in self.elements)
