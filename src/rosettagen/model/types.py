"""Translation model value types.

All types are frozen: a TranslationModel is built once per generation run
and never mutated afterwards.

Python 3.13+.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from rosettagen.diagnostics import Diagnostic
from rosettagen.syntax import Template

from .language import LanguageId

__all__ = [
    "TranslationKey",
    "TranslationModel",
    "TranslationSource",
]

type KeyName = str
"""Canonical translation key (e.g. 'hello_name')."""


@dataclass(frozen=True, slots=True)
class TranslationSource:
    """Raw key/template mapping of one language.

    Attributes:
        language: Language of the source
        entries: Flat mapping of key to raw template text
        origin: Human-readable location for diagnostics (file path)
    """

    language: LanguageId
    entries: Mapping[KeyName, str]
    origin: str = ""


@dataclass(frozen=True, slots=True)
class TranslationKey:
    """One canonical key with its fallback template and overrides.

    Attributes:
        name: Key name, also the generated accessor name
        fallback: Template of the fallback language
        overrides: (language, template) pairs in registration order, one per
            non-fallback language defining the key
    """

    name: KeyName
    fallback: Template
    overrides: tuple[tuple[LanguageId, Template], ...] = ()

    @property
    def parameters(self) -> tuple[str, ...]:
        """Canonical parameter names sorted lexicographically.

        This is the accessor signature; it does not depend on placeholder
        order inside any template.
        """
        return tuple(sorted(self.fallback.parameters))

    def template_for(self, language: LanguageId) -> Template:
        """Template used for language (override, else fallback)."""
        for override_language, template in self.overrides:
            if override_language == language:
                return template
        return self.fallback


@dataclass(frozen=True, slots=True)
class TranslationModel:
    """Validated, merged representation of all sources.

    Attributes:
        fallback: The fallback language
        languages: All languages in registration order (generation order)
        keys: Canonical keys sorted by name
        warnings: Warning diagnostics raised while building (dropped keys)
    """

    fallback: LanguageId
    languages: tuple[LanguageId, ...]
    keys: tuple[TranslationKey, ...]
    warnings: tuple[Diagnostic, ...] = field(default=())

    def get(self, name: KeyName) -> TranslationKey | None:
        """Look up a key by name."""
        for key in self.keys:
            if key.name == name:
                return key
        return None

    def __len__(self) -> int:
        return len(self.keys)
