"""Translation source loading.

Provides the protocol for source loaders, a JSON file implementation, an
in-memory implementation, and the shape validation that turns a decoded
document into a TranslationSource.

Components:
    SourceLoader - Protocol for loading decoded documents (structural typing)
    JsonFileLoader - Disk-based JSON loader
    MappingSourceLoader - In-memory loader for embedding and tests
    validate_flat_mapping - Flat string-to-string shape check
    load_sources - Parallel loading of all registered sources

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from rosettagen.constants import MAX_SOURCE_SIZE
from rosettagen.diagnostics import (
    ErrorTemplate,
    RosettaError,
    SourceFormatError,
    SourceIOError,
)
from rosettagen.enums import FormatViolation
from rosettagen.model import LanguageId, TranslationSource

if TYPE_CHECKING:
    from collections.abc import Sequence

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "SourceLoader",
    # Concrete loaders
    "JsonFileLoader",
    "MappingSourceLoader",
    # Validation and orchestration
    "validate_flat_mapping",
    "load_sources",
]

logger = logging.getLogger(__name__)


class SourceLoader(Protocol):
    """Protocol for loading the decoded document of one language.

    Implementations resolve a location and decode its content into plain
    Python values (dict, list, str, ...). Shape validation is done by
    validate_flat_mapping(), not by the loader.

    Example:
        >>> class YamlLoader:
        ...     def load(self, language: LanguageId, location: str) -> object:
        ...         return yaml.safe_load(Path(location).read_text("utf-8"))
        ...     def describe(self, location: str) -> str:
        ...         return location
    """

    def load(self, language: LanguageId, location: str) -> object:
        """Load and decode the source for a language.

        Args:
            language: Language being loaded (for diagnostics)
            location: Loader-specific location (file path, resource name)

        Returns:
            Decoded document

        Raises:
            SourceIOError: If the location cannot be read
            SourceFormatError: If the content cannot be decoded
        """

    def describe(self, location: str) -> str:
        """Return human-readable location for diagnostics."""
        return location


@dataclass(frozen=True, slots=True)
class JsonFileLoader:
    """File system loader for JSON translation files.

    The file handle is held only while reading; decoding happens after it is
    released.

    Example:
        >>> loader = JsonFileLoader(root_dir="locales")
        >>> loader.load(LanguageId("en"), "en.json")
        {'hello': 'Hello world!'}

    Attributes:
        root_dir: Directory relative locations are resolved against
            (None = current working directory)
        encoding: Text encoding of the files
        max_size: Maximum accepted size in characters
    """

    root_dir: str | None = None
    encoding: str = "utf-8"
    max_size: int = MAX_SOURCE_SIZE

    def resolve(self, location: str) -> Path:
        """Resolve a location to a path."""
        path = Path(location)
        if self.root_dir is not None and not path.is_absolute():
            path = Path(self.root_dir) / path
        return path

    def describe(self, location: str) -> str:
        """Return the resolved path as a string."""
        return str(self.resolve(location))

    def load(self, language: LanguageId, location: str) -> object:
        """Read and decode a JSON file.

        Raises:
            SourceIOError: If the file cannot be opened or read
            SourceFormatError: If the file is too large or not valid JSON
        """
        path = self.resolve(location)
        origin = str(path)

        try:
            with path.open(encoding=self.encoding) as f:
                text = f.read(self.max_size + 1)
        except (OSError, UnicodeDecodeError) as e:
            diagnostic = ErrorTemplate.source_read_failed(language.code, origin, str(e))
            raise SourceIOError(diagnostic, language=language.code, origin=origin) from e

        if len(text) > self.max_size:
            diagnostic = ErrorTemplate.source_too_large(
                language.code, origin, len(text), self.max_size
            )
            raise SourceFormatError(
                diagnostic, language=language.code, violation=FormatViolation.SOURCE_TOO_LARGE
            )

        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            diagnostic = ErrorTemplate.source_invalid_json(
                language.code, origin, e.msg, e.lineno, e.colno
            )
            raise SourceFormatError(
                diagnostic, language=language.code, violation=FormatViolation.INVALID_JSON
            ) from e

        logger.debug("Loaded %s for '%s' (%d characters)", origin, language, len(text))
        return document


@dataclass(frozen=True, slots=True)
class MappingSourceLoader:
    """In-memory loader returning pre-decoded documents by location.

    Example:
        >>> loader = MappingSourceLoader({"en": {"hello": "Hello world!"}})
        >>> loader.load(LanguageId("en"), "en")
        {'hello': 'Hello world!'}
    """

    documents: Mapping[str, object] = field(default_factory=dict)

    def describe(self, location: str) -> str:
        """Return a memory: pseudo-location."""
        return f"memory:{location}"

    def load(self, language: LanguageId, location: str) -> object:
        """Return the stored document.

        Raises:
            SourceIOError: If no document is stored under location
        """
        try:
            return self.documents[location]
        except KeyError as e:
            origin = self.describe(location)
            diagnostic = ErrorTemplate.source_read_failed(
                language.code, origin, f"no document named '{location}'"
            )
            raise SourceIOError(diagnostic, language=language.code, origin=origin) from e


def _type_name(value: object) -> str:
    """JSON-flavoured type name for diagnostics."""
    match value:
        case None:
            return "null"
        case bool():
            return "boolean"
        case int() | float():
            return "number"
        case str():
            return "string"
        case list() | tuple():
            return "array"
        case Mapping():
            return "object"
        case _:
            return type(value).__name__


def validate_flat_mapping(
    language: LanguageId, document: object, origin: str = ""
) -> dict[str, str]:
    """Check that a decoded document is a flat string-to-string mapping.

    No partial recovery: the first violation (in key order) is raised.

    Args:
        language: Language of the document
        document: Decoded document
        origin: Location for diagnostics

    Returns:
        Plain dict copy of the mapping

    Raises:
        SourceFormatError: With violation NOT_AN_OBJECT, NESTED_VALUE or
            NON_STRING_VALUE
    """
    code = language.code

    if not isinstance(document, Mapping):
        diagnostic = ErrorTemplate.source_not_an_object(code, origin, _type_name(document))
        raise SourceFormatError(
            diagnostic, language=code, violation=FormatViolation.NOT_AN_OBJECT
        )

    for key in sorted(document, key=str):
        value = document[key]
        if not isinstance(key, str):
            diagnostic = ErrorTemplate.source_not_an_object(
                code, origin, f"mapping with {_type_name(key)} key"
            )
            raise SourceFormatError(
                diagnostic, language=code, violation=FormatViolation.NOT_AN_OBJECT
            )
        if isinstance(value, (Mapping, list, tuple)):
            diagnostic = ErrorTemplate.source_nested_value(code, origin, key, _type_name(value))
            raise SourceFormatError(
                diagnostic, language=code, violation=FormatViolation.NESTED_VALUE, key=key
            )
        if not isinstance(value, str):
            diagnostic = ErrorTemplate.source_non_string_value(
                code, origin, key, _type_name(value)
            )
            raise SourceFormatError(
                diagnostic, language=code, violation=FormatViolation.NON_STRING_VALUE, key=key
            )

    return dict(document)


def _load_one(loader: SourceLoader, language: LanguageId, location: str) -> TranslationSource:
    document = loader.load(language, location)
    origin = loader.describe(location)
    entries = validate_flat_mapping(language, document, origin)
    return TranslationSource(language=language, entries=entries, origin=origin)


def load_sources(
    registrations: Sequence[tuple[LanguageId, str]],
    loader: SourceLoader,
    *,
    max_workers: int | None = None,
) -> tuple[TranslationSource, ...]:
    """Load and shape-validate every registered source.

    Sources are loaded concurrently; results keep registration order. If
    several sources fail, the error of the alphabetically first language is
    raised, independent of completion order.

    Args:
        registrations: (language, location) pairs in registration order
        loader: Loader resolving locations
        max_workers: Thread pool size (None = executor default, 1 = sequential)

    Returns:
        One TranslationSource per registration, in registration order

    Raises:
        SourceIOError: A source could not be read
        SourceFormatError: A source is not a flat string mapping
    """
    if max_workers == 1 or len(registrations) <= 1:
        outcomes: list[TranslationSource | RosettaError] = []
        for language, location in registrations:
            try:
                outcomes.append(_load_one(loader, language, location))
            except RosettaError as e:
                outcomes.append(e)
    else:
        with ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="rosettagen-load"
        ) as executor:
            futures = [
                executor.submit(_load_one, loader, language, location)
                for language, location in registrations
            ]
            outcomes = []
            for future in futures:
                try:
                    outcomes.append(future.result())
                except RosettaError as e:
                    outcomes.append(e)

    failures = [
        (language, outcome)
        for (language, _), outcome in zip(registrations, outcomes, strict=True)
        if isinstance(outcome, RosettaError)
    ]
    if failures:
        _, error = min(failures, key=lambda failure: failure[0])
        raise error

    sources = tuple(o for o in outcomes if isinstance(o, TranslationSource))
    logger.info("Loaded %d translation source(s)", len(sources))
    return sources
