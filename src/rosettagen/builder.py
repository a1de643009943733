"""Generation configuration.

RosettaBuilder collects the registration calls made from a build script;
build() validates them into an immutable RosettaConfig, and
RosettaConfig.generate() runs the pipeline:

    load sources -> build model -> generate module -> write to sink

Example:
    >>> import rosettagen
    >>> artifact = (
    ...     rosettagen.config()
    ...     .source("en", "locales/en.json")
    ...     .source("fr", "locales/fr.json")
    ...     .fallback("en")
    ...     .generate()
    ... )

Configuration errors are raised by build(), before any file is read.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from rosettagen.codegen import CodeGenerator, GeneratedArtifact, validate_type_name
from rosettagen.constants import DEFAULT_TYPE_NAME
from rosettagen.diagnostics import (
    DuplicateLanguageError,
    ErrorTemplate,
    MissingFallbackError,
    MissingSourceError,
)
from rosettagen.loading import JsonFileLoader, load_sources
from rosettagen.model import LanguageId, build_model
from rosettagen.output import FileOutputSink

if TYPE_CHECKING:
    from rosettagen.loading import SourceLoader
    from rosettagen.output import OutputSink

__all__ = ["RosettaBuilder", "RosettaConfig", "config"]

logger = logging.getLogger(__name__)


def config() -> RosettaBuilder:
    """Return a new, empty RosettaBuilder."""
    return RosettaBuilder()


class RosettaBuilder:
    """Fluent builder for RosettaConfig.

    Every setter returns the builder. Values are stored as given and only
    validated by build().
    """

    def __init__(self) -> None:
        self._sources: list[tuple[str, str]] = []
        self._fallback: str | None = None
        self._name: str | None = None
        self._output: Path | None = None
        self._strict = False
        self._workers: int | None = None

    def source(self, lang: str, path: str | Path) -> RosettaBuilder:
        """Register the translation source of a language."""
        self._sources.append((lang, str(path)))
        return self

    def fallback(self, lang: str) -> RosettaBuilder:
        """Set the fallback language."""
        self._fallback = lang
        return self

    def name(self, type_name: str) -> RosettaBuilder:
        """Set the name of the generated type (default 'Lang')."""
        self._name = type_name
        return self

    def output(self, path: str | Path) -> RosettaBuilder:
        """Set the output file of the generated module."""
        self._output = Path(path)
        return self

    def strict(self, flag: bool = True) -> RosettaBuilder:
        """Fail on keys missing from the fallback instead of dropping them."""
        self._strict = flag
        return self

    def workers(self, count: int | None) -> RosettaBuilder:
        """Set the thread pool size for loading and parsing (1 = sequential)."""
        self._workers = count
        return self

    def build(self) -> RosettaConfig:
        """Validate the registrations.

        Checks, in order: language identifiers, at least one source,
        duplicate languages, fallback set and registered, type name.

        Raises:
            InvalidLanguageError: A language identifier is malformed
            MissingSourceError: No source was registered
            DuplicateLanguageError: A language was registered twice
            MissingFallbackError: Fallback not set or has no source
            InvalidTypeNameError: Type name unusable as a class name
        """
        registrations = tuple(
            (LanguageId.parse(lang), location) for lang, location in self._sources
        )
        if not registrations:
            raise MissingSourceError(ErrorTemplate.missing_source())

        seen: set[LanguageId] = set()
        for language, _ in registrations:
            if language in seen:
                raise DuplicateLanguageError(
                    ErrorTemplate.duplicate_language(language.code), language=language.code
                )
            seen.add(language)

        if self._fallback is None:
            raise MissingFallbackError(ErrorTemplate.fallback_not_set())
        fallback = LanguageId.parse(self._fallback)
        if fallback not in seen:
            raise MissingFallbackError(
                ErrorTemplate.fallback_not_registered(fallback.code), language=fallback.code
            )

        type_name = self._name if self._name is not None else DEFAULT_TYPE_NAME
        validate_type_name(type_name)

        return RosettaConfig(
            fallback=fallback,
            registrations=registrations,
            type_name=type_name,
            output=self._output,
            strict=self._strict,
            max_workers=self._workers,
        )

    def generate(
        self, loader: SourceLoader | None = None, sink: OutputSink | None = None
    ) -> GeneratedArtifact:
        """Shortcut for build().generate()."""
        return self.build().generate(loader=loader, sink=sink)


@dataclass(frozen=True, slots=True)
class RosettaConfig:
    """Validated generation configuration.

    Attributes:
        fallback: Fallback language
        registrations: (language, location) pairs in registration order
        type_name: Name of the generated type
        output: Output file (None = default output path)
        strict: Raise on keys missing from the fallback
        max_workers: Thread pool size (None = executor default)
    """

    fallback: LanguageId
    registrations: tuple[tuple[LanguageId, str], ...]
    type_name: str = DEFAULT_TYPE_NAME
    output: Path | None = None
    strict: bool = False
    max_workers: int | None = None

    @property
    def languages(self) -> tuple[LanguageId, ...]:
        """Registered languages in registration order."""
        return tuple(language for language, _ in self.registrations)

    def generate(
        self, loader: SourceLoader | None = None, sink: OutputSink | None = None
    ) -> GeneratedArtifact:
        """Run the generation pipeline.

        Nothing is written unless every stage succeeds.

        Args:
            loader: Source loader (default: JsonFileLoader)
            sink: Output sink (default: FileOutputSink at the configured output)

        Returns:
            The generated artifact, as passed to the sink
        """
        if loader is None:
            loader = JsonFileLoader()
        if sink is None:
            sink = FileOutputSink(self.output)

        logger.info(
            "Generating %s for %d language(s), fallback '%s'",
            self.type_name,
            len(self.registrations),
            self.fallback,
        )
        sources = load_sources(self.registrations, loader, max_workers=self.max_workers)
        model = build_model(
            sources, self.fallback, strict=self.strict, max_workers=self.max_workers
        )
        artifact = CodeGenerator(model, self.type_name).generate()
        sink.write(artifact)
        return artifact
