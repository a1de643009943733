"""Translation model builder.

Merges per-language sources into a single validated TranslationModel
anchored on the fallback language.

Validation order (first failing check wins):
    1. Duplicate language registration   -> DuplicateLanguageError
    2. Fallback presence                 -> MissingFallbackError
    3. Template parsing, every language  -> TemplateSyntaxError (all collected)
    4. Canonical key set from fallback   -> InvalidIdentifierError, UnknownKeyError
    5. Parameter equality per key        -> ParameterMismatchError

Errors within one check are reported for the lexicographically first key,
then language, so error output is reproducible.

Keys defined only by a non-fallback language are dropped: the fallback
defines the universe of keys. Each drop is logged and recorded as a warning
diagnostic on the model. strict=True turns the drop into UnknownKeyError.

Concurrency:
    Parsing runs per language on a thread pool. Each task returns an owned
    ParsedSource; the model is assembled by a single sequential merge in
    language-id order, so results do not depend on scheduling.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rosettagen.core.identifier_validation import is_valid_identifier, python_name_conflict
from rosettagen.diagnostics import (
    Diagnostic,
    DuplicateLanguageError,
    ErrorTemplate,
    InvalidIdentifierError,
    MissingFallbackError,
    ParameterMismatchError,
    TemplateSyntaxError,
    UnknownKeyError,
)
from rosettagen.enums import IdentifierRole
from rosettagen.syntax import Template, parse_template

from .language import LanguageId
from .types import TranslationKey, TranslationModel, TranslationSource

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ["ParsedSource", "build_model", "parse_source"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParsedSource:
    """Parse result of one language, owned by the task that produced it.

    Attributes:
        language: Language of the source
        templates: Successfully parsed templates by key
        errors: Syntax errors, in key order
    """

    language: LanguageId
    templates: dict[str, Template]
    errors: tuple[TemplateSyntaxError, ...]


def parse_source(source: TranslationSource) -> ParsedSource:
    """Parse every template of one source, collecting syntax errors.

    Args:
        source: Raw source of one language

    Returns:
        ParsedSource with templates for valid entries and errors for the rest
    """
    language = source.language.code
    templates: dict[str, Template] = {}
    errors: list[TemplateSyntaxError] = []

    for key in sorted(source.entries):
        try:
            templates[key] = parse_template(source.entries[key], language=language, key=key)
        except TemplateSyntaxError as e:
            errors.append(e)

    logger.debug(
        "Parsed %d template(s) for '%s' (%d error(s))", len(templates), language, len(errors)
    )
    return ParsedSource(language=source.language, templates=templates, errors=tuple(errors))


def _check_duplicates(sources: Sequence[TranslationSource]) -> None:
    counts = Counter(source.language for source in sources)
    duplicates = sorted(language for language, count in counts.items() if count > 1)
    if duplicates:
        code = duplicates[0].code
        raise DuplicateLanguageError(ErrorTemplate.duplicate_language(code), language=code)


def _parse_all(
    sources: Sequence[TranslationSource], max_workers: int | None
) -> dict[LanguageId, ParsedSource]:
    """Parse all sources, in parallel when worthwhile, merged in language order."""
    if max_workers == 1 or len(sources) <= 1:
        results = [parse_source(source) for source in sources]
    else:
        with ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="rosettagen-parse"
        ) as executor:
            results = list(executor.map(parse_source, sources))

    return {result.language: result for result in sorted(results, key=lambda r: r.language)}


def _raise_syntax_errors(parsed: dict[LanguageId, ParsedSource]) -> None:
    errors = [error for result in parsed.values() for error in result.errors]
    if errors:
        errors.sort(key=lambda e: (e.language, e.key))
        first = errors[0]
        logger.debug("Collected %d template syntax error(s)", len(errors))
        raise first.with_errors(errors)


def _check_identifiers(
    language: str, key: str, template: Template, member_names: frozenset[str]
) -> None:
    """Reject keys and placeholders that cannot appear in generated code."""
    if not is_valid_identifier(key):
        reason: str | None = "not a valid identifier"
    else:
        reason = python_name_conflict(key, IdentifierRole.KEY)
    if reason is None and key in member_names:
        reason = "collides with a language member name"
    if reason is not None:
        diagnostic = ErrorTemplate.invalid_key(key, language, reason)
        raise InvalidIdentifierError(diagnostic, language=language, key=key)

    for name in sorted(template.parameters):
        reason = python_name_conflict(name, IdentifierRole.PARAMETER)
        if reason is not None:
            diagnostic = ErrorTemplate.invalid_parameter(key, language, name, reason)
            raise InvalidIdentifierError(diagnostic, language=language, key=key)


def build_model(
    sources: Sequence[TranslationSource],
    fallback: LanguageId | str,
    *,
    strict: bool = False,
    max_workers: int | None = None,
) -> TranslationModel:
    """Build a validated TranslationModel.

    Args:
        sources: One source per language, in registration order
        fallback: The fallback language
        strict: Raise UnknownKeyError instead of dropping keys that the
            fallback does not define
        max_workers: Thread pool size for parsing (None = executor default,
            1 = sequential)

    Returns:
        TranslationModel with keys sorted by name and languages in
        registration order

    Raises:
        DuplicateLanguageError: A language appears in more than one source
        MissingFallbackError: No source for the fallback language
        TemplateSyntaxError: A template is malformed (all errors attached)
        InvalidIdentifierError: A key or placeholder is unusable in Python
        UnknownKeyError: strict=True and a key is missing from the fallback
        ParameterMismatchError: An override's parameters differ from the fallback's

    Example:
        >>> en = TranslationSource(LanguageId("en"), {"hello_name": "Hello {name}!"})
        >>> fr = TranslationSource(LanguageId("fr"), {})
        >>> model = build_model([en, fr], "en")
        >>> model.keys[0].parameters
        ('name',)
    """
    if not isinstance(fallback, LanguageId):
        fallback = LanguageId.parse(fallback)

    # 1. Duplicates
    _check_duplicates(sources)

    # 2. Fallback presence
    if all(source.language != fallback for source in sources):
        raise MissingFallbackError(
            ErrorTemplate.fallback_not_registered(fallback.code), language=fallback.code
        )

    # 3. Parsing
    parsed = _parse_all(sources, max_workers)
    _raise_syntax_errors(parsed)

    # 4. Canonical key set
    fallback_templates = parsed[fallback].templates
    member_names = frozenset(language.member_name for language in parsed)
    for key in sorted(fallback_templates):
        _check_identifiers(fallback.code, key, fallback_templates[key], member_names)

    warnings: list[Diagnostic] = []
    others = [language for language in parsed if language != fallback]
    for language in others:
        for key in sorted(parsed[language].templates):
            if key in fallback_templates:
                continue
            if strict:
                raise UnknownKeyError(
                    ErrorTemplate.unknown_key(key, language.code, fallback.code),
                    language=language.code,
                    key=key,
                )
            logger.warning(
                "Key '%s' exists in '%s' but not in fallback language '%s'; dropped",
                key,
                language,
                fallback,
            )
            warnings.append(ErrorTemplate.unknown_key_dropped(key, language.code, fallback.code))

    # 5. Parameter equality
    for key in sorted(fallback_templates):
        expected = fallback_templates[key].parameters
        for language in others:
            override = parsed[language].templates.get(key)
            if override is not None and override.parameters != expected:
                raise ParameterMismatchError(
                    ErrorTemplate.parameter_mismatch(
                        key, language.code, expected, override.parameters
                    ),
                    key=key,
                    language=language.code,
                    expected=sorted(expected),
                    actual=sorted(override.parameters),
                )

    # Merge: overrides follow registration order
    registration_order = tuple(source.language for source in sources)
    keys = tuple(
        TranslationKey(
            name=key,
            fallback=fallback_templates[key],
            overrides=tuple(
                (language, parsed[language].templates[key])
                for language in registration_order
                if language != fallback and key in parsed[language].templates
            ),
        )
        for key in sorted(fallback_templates)
    )

    logger.info(
        "Built translation model: %d key(s), %d language(s), fallback '%s'",
        len(keys),
        len(registration_order),
        fallback,
    )
    return TranslationModel(
        fallback=fallback,
        languages=registration_order,
        keys=keys,
        warnings=tuple(warnings),
    )
