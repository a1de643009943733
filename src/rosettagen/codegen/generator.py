"""Python code generation for a validated TranslationModel.

The generated module defines one Enum subclass (the language selector) with
one member per language and one accessor method per key:

    class Lang(Enum):
        EN = "en"  # English
        FR = "fr"  # French

        def hello(self) -> str:
            match self.value:
                case "fr":
                    return "Bonjour!"
                case _:
                    return "Hello world!"

        def hello_name(self, name: str) -> str:
            return f"Hello {name}!"

Determinism:
    Members follow registration order, accessors follow key name order,
    parameters follow name order, and match arms follow registration order.
    No set or dict iteration order reaches the output, so identical models
    produce byte-identical text under the same Babel release. Member comments
    carry English language names from the CLDR data bundled with Babel; a
    Babel upgrade that renames a language changes those comments and nothing
    else. Pin babel in the build environment when the output is committed.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rosettagen.constants import DEFAULT_TYPE_NAME, GENERATED_HEADER
from rosettagen.core.identifier_validation import is_valid_identifier, python_name_conflict
from rosettagen.diagnostics import Diagnostic, ErrorTemplate, InvalidTypeNameError
from rosettagen.enums import IdentifierRole
from rosettagen.model import TranslationKey, TranslationModel

from .literals import render_template

__all__ = ["CodeGenerator", "GeneratedArtifact", "validate_type_name"]

logger = logging.getLogger(__name__)

_INDENT = "    "


@dataclass(frozen=True, slots=True)
class GeneratedArtifact:
    """Generated module text, produced once per run.

    Attributes:
        source: Python source text of the generated module
        type_name: Name of the generated selector type
        warnings: Warning diagnostics carried over from model building
    """

    source: str
    type_name: str
    warnings: tuple[Diagnostic, ...] = field(default=())


def validate_type_name(name: str) -> None:
    """Check that name can be used as the generated class name.

    Raises:
        InvalidTypeNameError: If name is not an identifier or collides with
            Python keywords or names used by the generated module
    """
    if not is_valid_identifier(name):
        reason = "not a valid identifier"
    else:
        reason = python_name_conflict(name, IdentifierRole.TYPE_NAME)
    if reason is not None:
        raise InvalidTypeNameError(ErrorTemplate.invalid_type_name(name, reason))


class CodeGenerator:
    """Emits the Python module for a TranslationModel.

    Stateless apart from its inputs: generate() can be called repeatedly and
    always returns equal artifacts.

    Example:
        >>> artifact = CodeGenerator(model, "Lang").generate()
        >>> namespace: dict[str, object] = {}
        >>> exec(artifact.source, namespace)
        >>> namespace["Lang"].FR.hello()
        'Bonjour!'
    """

    def __init__(self, model: TranslationModel, type_name: str = DEFAULT_TYPE_NAME) -> None:
        validate_type_name(type_name)
        self._model = model
        self._type_name = type_name

    def generate(self) -> GeneratedArtifact:
        """Generate the module source."""
        lines: list[str] = []
        lines.extend(self._module_header())
        lines.extend(self._class_header())
        lines.extend(self._selector_methods())
        for key in self._model.keys:
            lines.append("")
            lines.extend(self._accessor(key))

        source = "\n".join(lines) + "\n"
        logger.info(
            "Generated %s with %d member(s) and %d accessor(s)",
            self._type_name,
            len(self._model.languages),
            len(self._model.keys),
        )
        return GeneratedArtifact(
            source=source, type_name=self._type_name, warnings=self._model.warnings
        )

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def _module_header(self) -> list[str]:
        model = self._model
        languages = ", ".join(
            f"{language} (fallback)" if language == model.fallback else language.code
            for language in model.languages
        )
        return [
            GENERATED_HEADER,
            '"""Localized string accessors.',
            "",
            f"Languages: {languages}",
            '"""',
            "",
            "from enum import Enum",
            "",
            f'__all__ = ["{self._type_name}"]',
            "",
            "",
        ]

    def _class_header(self) -> list[str]:
        lines = [
            f"class {self._type_name}(Enum):",
            f'{_INDENT}"""Language selector.',
            "",
            f"{_INDENT}Call an accessor on a member to get the text in that language.",
            f'{_INDENT}"""',
            "",
        ]
        for language in self._model.languages:
            member = f'{_INDENT}{language.member_name} = "{language.code}"'
            display_name = language.display_name
            if display_name:
                member += f"  # {display_name}"
            lines.append(member)
        return lines

    def _selector_methods(self) -> list[str]:
        name = self._type_name
        fallback = self._model.fallback.member_name
        i1, i2, i3, i4 = _INDENT, _INDENT * 2, _INDENT * 3, _INDENT * 4
        return [
            "",
            f"{i1}@classmethod",
            f'{i1}def fallback(cls) -> "{name}":',
            f'{i2}"""Return the fallback language."""',
            f"{i2}return cls.{fallback}",
            "",
            f"{i1}@classmethod",
            f'{i1}def languages(cls) -> "tuple[{name}, ...]":',
            f'{i2}"""Return all languages in declaration order."""',
            f"{i2}return tuple(cls)",
            "",
            f"{i1}@classmethod",
            f'{i1}def from_language_id(cls, language_id: str) -> "{name} | None":',
            f'{i2}"""Return the member for a language identifier, or None."""',
            f"{i2}for member in cls:",
            f"{i3}if member.value == language_id.lower():",
            f"{i4}return member",
            f"{i2}return None",
            "",
            f"{i1}@property",
            f"{i1}def language_id(self) -> str:",
            f'{i2}"""Return the language identifier."""',
            f"{i2}return self.value",
        ]

    def _accessor(self, key: TranslationKey) -> list[str]:
        parameters = "".join(f", {name}: str" for name in key.parameters)
        lines = [f"{_INDENT}def {key.name}(self{parameters}) -> str:"]

        if not key.overrides:
            lines.append(f"{_INDENT * 2}return {render_template(key.fallback)}")
            return lines

        lines.append(f"{_INDENT * 2}match self.value:")
        for language, template in key.overrides:
            lines.append(f'{_INDENT * 3}case "{language.code}":')
            lines.append(f"{_INDENT * 4}return {render_template(template)}")
        lines.append(f"{_INDENT * 3}case _:")
        lines.append(f"{_INDENT * 4}return {render_template(key.fallback)}")
        return lines
