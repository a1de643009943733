"""Template string parser.

Grammar:
    template    ::= (text | placeholder)*
    text        ::= [^{}]+
    placeholder ::= "{" identifier "}"
    identifier  ::= [a-zA-Z_][a-zA-Z0-9_]*

A placeholder starts at '{' and ends at the next '}'. There is no escape
sequence for literal braces: an unmatched '{' or '}', an empty placeholder,
or an interior that is not an identifier is a TemplateSyntaxError carrying
the language, key and character offset.

Thread Safety:
    parse_template() is a pure function. Parsing the same string twice
    yields equal Template values.

Python 3.13+.
"""

from rosettagen.constants import MAX_IDENTIFIER_LENGTH
from rosettagen.core.identifier_validation import (
    is_identifier_char,
    is_identifier_start,
    is_valid_identifier,
)
from rosettagen.diagnostics import ErrorTemplate, SourceSpan, TemplateSyntaxError

from .ast import Placeholder, Span, Template, TemplateElement, TextElement
from .cursor import Cursor

__all__ = ["parse_template"]


def _span_at(cursor: Cursor, length: int = 1) -> SourceSpan:
    """Build a diagnostic span starting at the cursor position."""
    line, column = cursor.compute_line_col()
    end = min(cursor.pos + length, len(cursor.source))
    return SourceSpan(start=cursor.pos, end=max(end, cursor.pos), line=line, column=column)


def _first_invalid_offset(name: str) -> int:
    """Index of the first character that breaks the identifier grammar.

    Returns len(name) when every character is valid but the name is too long.
    """
    if not is_identifier_start(name[0]):
        return 0
    for index, ch in enumerate(name[1:], start=1):
        if not is_identifier_char(ch):
            return index
    return min(len(name), MAX_IDENTIFIER_LENGTH)


def _parse_placeholder(
    cursor: Cursor, language: str, key: str
) -> tuple[Placeholder, Cursor]:
    """Parse one placeholder; cursor is on the opening brace."""
    open_cursor = cursor
    inner = cursor.advance()
    close = inner.seek("}")

    if close.is_eof:
        diagnostic = ErrorTemplate.unmatched_open_brace(language, key, _span_at(open_cursor))
        raise TemplateSyntaxError(
            diagnostic, language=language, key=key, offset=open_cursor.pos
        )

    name = inner.slice_to(close.pos)
    if not name:
        diagnostic = ErrorTemplate.empty_placeholder(language, key, _span_at(open_cursor, 2))
        raise TemplateSyntaxError(
            diagnostic, language=language, key=key, offset=open_cursor.pos
        )

    if not is_valid_identifier(name):
        bad = inner.advance(_first_invalid_offset(name))
        diagnostic = ErrorTemplate.invalid_placeholder(language, key, name, _span_at(bad))
        raise TemplateSyntaxError(diagnostic, language=language, key=key, offset=bad.pos)

    after = close.advance()
    return Placeholder(name, Span(open_cursor.pos, after.pos)), after


def parse_template(source: str, *, language: str = "", key: str = "") -> Template:
    """Parse a raw template string into a Template.

    Args:
        source: Raw template text
        language: Language identifier, used in error diagnostics
        key: Translation key, used in error diagnostics

    Returns:
        Template with literal and placeholder elements in source order.
        Adjacent literal characters form a single TextElement; an empty
        string yields a Template with no elements.

    Raises:
        TemplateSyntaxError: On unmatched braces or invalid placeholder names

    Example:
        >>> template = parse_template("Hello {name}!")
        >>> [type(e).__name__ for e in template.elements]
        ['TextElement', 'Placeholder', 'TextElement']
        >>> template.parameter_names
        ('name',)
    """
    elements: list[TemplateElement] = []
    cursor = Cursor(source, 0)

    while not cursor.is_eof:
        match cursor.current:
            case "{":
                placeholder, cursor = _parse_placeholder(cursor, language, key)
                elements.append(placeholder)
            case "}":
                diagnostic = ErrorTemplate.unmatched_close_brace(language, key, _span_at(cursor))
                raise TemplateSyntaxError(
                    diagnostic, language=language, key=key, offset=cursor.pos
                )
            case _:
                start = cursor
                cursor = min(cursor.seek("{"), cursor.seek("}"), key=lambda c: c.pos)
                elements.append(
                    TextElement(start.slice_to(cursor.pos), Span(start.pos, cursor.pos))
                )

    return Template(elements=tuple(elements), source=source)
