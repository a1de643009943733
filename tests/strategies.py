"""Hypothesis strategies for rosettagen property-based testing.

Provides reusable strategies for generating generator inputs:
- Keys and placeholder names usable in generated code
- Brace-free literal text
- Raw template strings with a known parameter set
- Language codes and complete multi-language source sets

Event-Emitting Strategies:
- templates: Emits template_shape=plain|single|repeated|multi
- source_sets: Emits source_set_languages=N

Python 3.13+.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

from rosettagen.core.identifier_validation import python_name_conflict
from rosettagen.enums import IdentifierRole

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn

_NAME_FIRST_CHARS = string.ascii_lowercase
_NAME_REST_CHARS = string.ascii_lowercase + string.digits + "_"

# Surrogates cannot be encoded as UTF-8, braces are template syntax.
literal_text = st.text(
    alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="{}"),
    max_size=40,
)


def _identifiers(role: IdentifierRole) -> st.SearchStrategy[str]:
    return st.builds(
        lambda first, rest: first + rest,
        st.sampled_from(_NAME_FIRST_CHARS),
        st.text(alphabet=_NAME_REST_CHARS, max_size=15),
    ).filter(lambda name: python_name_conflict(name, role) is None)


key_names = _identifiers(IdentifierRole.KEY)
parameter_names = _identifiers(IdentifierRole.PARAMETER)

language_codes = st.builds(
    lambda a, b: a + b,
    st.sampled_from(string.ascii_lowercase),
    st.sampled_from(string.ascii_lowercase),
)


@st.composite
def templates(draw: DrawFn, names: frozenset[str] | None = None) -> tuple[str, frozenset[str]]:
    """Generate a raw template and the set of its placeholder names.

    Every name in names appears at least once; names may repeat and appear
    in any order. When names is None a random set is drawn.
    """
    if names is None:
        names = frozenset(draw(st.lists(parameter_names, max_size=4, unique=True)))

    occurrences = list(names)
    if occurrences:
        occurrences += draw(st.lists(st.sampled_from(sorted(names)), max_size=3))
    occurrences = draw(st.permutations(occurrences))

    parts = [draw(literal_text)]
    for name in occurrences:
        parts.append("{" + name + "}")
        parts.append(draw(literal_text))

    if not names:
        shape = "plain"
    elif len(names) == 1:
        shape = "single" if len(occurrences) == 1 else "repeated"
    else:
        shape = "multi"
    event(f"template_shape={shape}")
    return "".join(parts), names


@st.composite
def source_sets(
    draw: DrawFn, max_languages: int = 4
) -> tuple[str, dict[str, dict[str, str]]]:
    """Generate a fallback code and consistent sources per language.

    Every override uses the fallback's parameter set for its key, so the
    set always builds into a model.

    Returns:
        (fallback code, {code: {key: template}}) with the fallback first
    """
    codes = draw(st.lists(language_codes, min_size=1, max_size=max_languages, unique=True))
    fallback = codes[0]
    keys = draw(st.lists(key_names, min_size=1, max_size=5, unique=True))

    fallback_entries: dict[str, str] = {}
    parameters: dict[str, frozenset[str]] = {}
    for key in keys:
        raw, names = draw(templates())
        fallback_entries[key] = raw
        parameters[key] = names

    sources = {fallback: fallback_entries}
    for code in codes[1:]:
        overridden = draw(st.lists(st.sampled_from(keys), unique=True))
        sources[code] = {key: draw(templates(parameters[key]))[0] for key in overridden}

    event(f"source_set_languages={len(codes)}")
    return fallback, sources
