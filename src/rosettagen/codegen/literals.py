"""Python string literal rendering for generated code.

Template text is emitted inside double-quoted literals. Templates never
contain braces (the parser rejects them), so literal runs can be placed in
f-strings without brace doubling.

Python 3.13+. Zero external dependencies.
"""

from rosettagen.syntax import Placeholder, Template, TextElement

__all__ = ["escape_text", "render_template", "string_literal"]

_SIMPLE_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def escape_text(text: str) -> str:
    """Escape text for the inside of a double-quoted Python literal.

    Printable characters are kept as-is (the output file is UTF-8);
    everything else uses a \\x, \\u or \\U escape.
    """
    parts: list[str] = []
    for ch in text:
        if ch in _SIMPLE_ESCAPES:
            parts.append(_SIMPLE_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        else:
            point = ord(ch)
            if point <= 0xFF:
                parts.append(f"\\x{point:02x}")
            elif point <= 0xFFFF:
                parts.append(f"\\u{point:04x}")
            else:
                parts.append(f"\\U{point:08x}")
    return "".join(parts)


def string_literal(text: str) -> str:
    """Render text as a double-quoted Python string literal."""
    return f'"{escape_text(text)}"'


def render_template(template: Template) -> str:
    """Render a template as a Python expression producing the final text.

    Placeholder occurrences are emitted in source order and refer to the
    accessor parameter of the same name, so repeated and reordered
    placeholders need no positional mapping.

    Example:
        >>> render_template(parse_template("Hello {name}!"))
        'f"Hello {name}!"'
        >>> render_template(parse_template("Hello world!"))
        '"Hello world!"'
    """
    if template.is_plain:
        return string_literal(
            "".join(e.value for e in template.elements if isinstance(e, TextElement))
        )

    parts: list[str] = []
    for element in template.elements:
        if isinstance(element, Placeholder):
            parts.append("{" + element.name + "}")
        else:
            parts.append(escape_text(element.value))
    return 'f"' + "".join(parts) + '"'
