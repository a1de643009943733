"""Tests for the codegen package.

Generated modules are executed with exec() and their selector type is
exercised directly.

Python 3.13+.
"""

from __future__ import annotations

import inspect

import pytest
from hypothesis import given, settings

from rosettagen.codegen import (
    CodeGenerator,
    escape_text,
    render_template,
    string_literal,
    validate_type_name,
)
from rosettagen.constants import GENERATED_HEADER
from rosettagen.diagnostics import InvalidTypeNameError
from rosettagen.model import LanguageId, TranslationModel, TranslationSource, build_model
from rosettagen.syntax import Placeholder, TextElement, parse_template
from tests.strategies import literal_text, source_sets
from tests.support import EN_SOURCE, FR_SOURCE, load_generated


def _model(sources: dict[str, dict[str, str]], fallback: str = "en") -> TranslationModel:
    return build_model(
        [TranslationSource(LanguageId(code), entries) for code, entries in sources.items()],
        fallback,
    )


GREETING_MODULE = '''\
# This file is generated by rosettagen. Do not edit it by hand.
"""Localized string accessors.

Languages: en (fallback), fr
"""

from enum import Enum

__all__ = ["Lang"]


class Lang(Enum):
    """Language selector.

    Call an accessor on a member to get the text in that language.
    """

    EN = "en"  # English
    FR = "fr"  # French

    @classmethod
    def fallback(cls) -> "Lang":
        """Return the fallback language."""
        return cls.EN

    @classmethod
    def languages(cls) -> "tuple[Lang, ...]":
        """Return all languages in declaration order."""
        return tuple(cls)

    @classmethod
    def from_language_id(cls, language_id: str) -> "Lang | None":
        """Return the member for a language identifier, or None."""
        for member in cls:
            if member.value == language_id.lower():
                return member
        return None

    @property
    def language_id(self) -> str:
        """Return the language identifier."""
        return self.value

    def hello(self) -> str:
        match self.value:
            case "fr":
                return "Bonjour le monde !"
            case _:
                return "Hello world!"

    def hello_name(self, name: str) -> str:
        match self.value:
            case "fr":
                return f"Bonjour {name} !"
            case _:
                return f"Hello {name}!"
'''

# ============================================================================
# LITERALS
# ============================================================================


class TestLiterals:
    """String literal rendering."""

    @pytest.mark.parametrize(
        ("text", "escaped"),
        [
            ("plain", "plain"),
            ('say "hi"', 'say \\"hi\\"'),
            ("back\\slash", "back\\\\slash"),
            ("line\nbreak\ttab\r", "line\\nbreak\\ttab\\r"),
            ("nul\x00", "nul\\x00"),
            ("sep\u2028", "sep\\u2028"),
            ("café ✓", "café ✓"),
        ],
    )
    def test_escape_text(self, text: str, escaped: str) -> None:
        """Control characters are escaped, printable Unicode is kept."""
        assert escape_text(text) == escaped

    @given(text=literal_text)
    def test_string_literal_evaluates_to_text(self, text: str) -> None:
        """The rendered literal evaluates back to the text."""
        assert eval(string_literal(text)) == text  # noqa: S307

    def test_render_plain_template(self) -> None:
        """Plain templates are ordinary string literals."""
        assert render_template(parse_template("Hello world!")) == '"Hello world!"'

    def test_render_placeholder_template(self) -> None:
        """Placeholders become f-string fields, repeated as written."""
        rendered = render_template(parse_template('{x} "and" {x}'))
        assert rendered == 'f"{x} \\"and\\" {x}"'

    def test_render_empty_template(self) -> None:
        """The empty template renders as an empty literal."""
        assert render_template(parse_template("")) == '""'

    def test_elements_kept_in_source_order(self) -> None:
        """Reordered placeholders are emitted where they appear."""
        template = parse_template("{b}-{a}")
        assert [type(e) for e in template.elements] == [Placeholder, TextElement, Placeholder]
        assert render_template(template) == 'f"{b}-{a}"'


# ============================================================================
# TYPE NAME
# ============================================================================


class TestTypeName:
    """Generated class name validation."""

    @pytest.mark.parametrize("name", ["Lang", "Language", "I18n", "_Private"])
    def test_valid(self, name: str) -> None:
        """Identifiers are accepted."""
        validate_type_name(name)

    @pytest.mark.parametrize("name", ["", "1Lang", "my-lang", "class", "Enum", "str"])
    def test_invalid(self, name: str) -> None:
        """Non-identifiers, keywords and names used by the module are rejected."""
        with pytest.raises(InvalidTypeNameError):
            validate_type_name(name)

    def test_generator_validates(self) -> None:
        """CodeGenerator rejects an invalid type name up front."""
        with pytest.raises(InvalidTypeNameError):
            CodeGenerator(_model({"en": {"a": "A"}}), "not valid")


# ============================================================================
# GENERATED MODULE
# ============================================================================


class TestGeneratedModule:
    """Generated module text and behaviour."""

    def test_greeting_module_text(self) -> None:
        """The en/fr example generates the expected module."""
        artifact = CodeGenerator(_model({"en": EN_SOURCE, "fr": FR_SOURCE})).generate()

        assert artifact.source == GREETING_MODULE
        assert artifact.type_name == "Lang"
        assert artifact.source.startswith(GENERATED_HEADER)

    def test_greeting_behaviour(self) -> None:
        """Each member returns its own language's text."""
        artifact = CodeGenerator(_model({"en": EN_SOURCE, "fr": FR_SOURCE})).generate()
        lang = load_generated(artifact)

        assert lang.EN.hello() == "Hello world!"
        assert lang.FR.hello() == "Bonjour le monde !"
        assert lang.EN.hello_name("Rosetta") == "Hello Rosetta!"
        assert lang.FR.hello_name("Rosetta") == "Bonjour Rosetta !"

    def test_selector_api(self) -> None:
        """fallback(), languages(), from_language_id() and language_id."""
        artifact = CodeGenerator(_model({"en": EN_SOURCE, "fr": FR_SOURCE})).generate()
        lang = load_generated(artifact)

        assert lang.fallback() is lang.EN
        assert lang.languages() == (lang.EN, lang.FR)
        assert lang.from_language_id("fr") is lang.FR
        assert lang.from_language_id("FR") is lang.FR
        assert lang.from_language_id("de") is None
        assert lang.FR.language_id == "fr"

    def test_partial_override_falls_back(self) -> None:
        """fr overriding only 'hello' still answers hello_name with the en template."""
        model = _model({"en": EN_SOURCE, "fr": {"hello": "Bonjour!"}})
        lang = load_generated(CodeGenerator(model).generate())

        assert len(lang) == 2
        assert lang.EN.hello() == "Hello world!"
        assert lang.FR.hello() == "Bonjour!"
        assert lang.EN.hello_name("Rosetta") == "Hello Rosetta!"
        assert lang.FR.hello_name("Rosetta") == "Hello Rosetta!"

    def test_fallback_completeness(self) -> None:
        """A key missing from a language returns the fallback text."""
        model = _model({"en": {"hello": "Hello", "bye": "Bye"}, "fr": {"hello": "Salut"}})
        lang = load_generated(CodeGenerator(model).generate())

        assert lang.FR.bye() == "Bye"
        assert lang.FR.hello() == "Salut"

    def test_accessor_without_overrides_has_no_match(self) -> None:
        """Keys only the fallback defines return directly."""
        artifact = CodeGenerator(_model({"en": {"bye": "Bye"}, "fr": {}})).generate()
        assert '    def bye(self) -> str:\n        return "Bye"\n' in artifact.source

    def test_signature_canonicalization(self) -> None:
        """Parameters are sorted; arguments bind by name and repeat as written."""
        model = _model(
            {
                "en": {"range": "From {start} to {end}, again {start}"},
                "fr": {"range": "Jusqu'à {end} depuis {start}"},
            }
        )
        lang = load_generated(CodeGenerator(model).generate())

        assert list(inspect.signature(lang.EN.range).parameters) == ["end", "start"]
        assert lang.EN.range("B", "A") == "From A to B, again A"
        assert lang.FR.range(start="A", end="B") == "Jusqu'à B depuis A"

    def test_custom_type_name(self) -> None:
        """The type name is configurable."""
        artifact = CodeGenerator(_model({"en": {"a": "A"}}), "Translations").generate()
        translations = load_generated(artifact)

        assert artifact.type_name == "Translations"
        assert "class Translations(Enum):" in artifact.source
        assert translations.EN.a() == "A"

    def test_escaping_round_trip(self) -> None:
        """Quotes, backslashes and control characters survive generation."""
        text = 'He said "{word}"\\n\nthen left\t\x07'
        model = _model({"en": {"quote": text}})
        lang = load_generated(CodeGenerator(model).generate())

        assert lang.EN.quote("hi") == text.replace("{word}", "hi")

    def test_unknown_display_name_has_no_comment(self) -> None:
        """Languages without CLDR name get no trailing comment."""
        artifact = CodeGenerator(_model({"en": {"a": "A"}, "qq": {}})).generate()
        assert '    QQ = "qq"\n' in artifact.source

    def test_display_names_only_affect_member_comments(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """CLDR language names reach the output only as member comments."""
        model = _model({"en": EN_SOURCE, "fr": FR_SOURCE})
        before = CodeGenerator(model).generate().source

        monkeypatch.setattr(LanguageId, "display_name", property(lambda self: "Renamed"))
        after = CodeGenerator(model).generate().source

        changed = [
            (old, new)
            for old, new in zip(before.splitlines(), after.splitlines(), strict=True)
            if old != new
        ]
        assert changed == [
            ('    EN = "en"  # English', '    EN = "en"  # Renamed'),
            ('    FR = "fr"  # French', '    FR = "fr"  # Renamed'),
        ]

    def test_parameter_named_like_type(self) -> None:
        """A parameter may share the type's name."""
        lang = load_generated(
            CodeGenerator(_model({"en": {"a": "A {Lang}"}, "fr": {"a": "B {Lang}"}})).generate()
        )
        assert lang.FR.a("x") == "B x"

    def test_annotations_are_builtin_str(self) -> None:
        """Accessor annotations evaluate to the builtin str at class creation."""
        model = _model({"en": {"a": "A", "text": "Hi {name}"}, "fr": {"text": "Salut {name}"}})
        lang = load_generated(CodeGenerator(model).generate())

        for accessor in (lang.a, lang.text):
            assert all(value is str for value in accessor.__annotations__.values())

    def test_parameter_named_str(self) -> None:
        """A placeholder named str is bound after the annotations are evaluated."""
        lang = load_generated(CodeGenerator(_model({"en": {"a": "<{str}>"}})).generate())

        assert lang.a.__annotations__ == {"str": str, "return": str}
        assert lang.EN.a("x") == "<x>"

    def test_warnings_carried_over(self) -> None:
        """Model warnings are attached to the artifact."""
        model = _model({"en": {"a": "A"}, "fr": {"b": "B"}})
        artifact = CodeGenerator(model).generate()

        assert artifact.warnings == model.warnings
        assert len(artifact.warnings) == 1

    @given(case=source_sets())
    def test_deterministic(self, case: tuple[str, dict[str, dict[str, str]]]) -> None:
        """Identical models produce byte-identical output."""
        fallback, sources = case
        first = CodeGenerator(_model(sources, fallback)).generate()
        second = CodeGenerator(_model(sources, fallback)).generate()

        assert first.source == second.source

    @given(case=source_sets())
    def test_accessors_match_templates(self, case: tuple[str, dict[str, dict[str, str]]]) -> None:
        """Every accessor of every member renders the right template."""
        fallback, sources = case
        model = _model(sources, fallback)
        lang = load_generated(CodeGenerator(model).generate())

        for language in model.languages:
            member = lang[language.member_name]
            for key in model.keys:
                arguments = {name: f"<{name}>" for name in key.parameters}
                expected = "".join(
                    element.value if isinstance(element, TextElement) else arguments[element.name]
                    for element in key.template_for(language).elements
                )
                assert getattr(member, key.name)(**arguments) == expected

    @pytest.mark.fuzz
    @settings(max_examples=2000)
    @given(case=source_sets(max_languages=8))
    def test_generated_module_compiles_fuzz(
        self, case: tuple[str, dict[str, dict[str, str]]]
    ) -> None:
        """Larger source sets always produce a module that compiles."""
        fallback, sources = case
        artifact = CodeGenerator(_model(sources, fallback)).generate()

        compile(artifact.source, "<generated>", "exec")
