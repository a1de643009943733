"""Output sinks for generated modules.

The sink is the only stage of the pipeline that writes. It receives a
finished GeneratedArtifact, so a failed run never leaves a partial file
behind.

Components:
    OutputSink - Protocol for artifact destinations (structural typing)
    FileOutputSink - Writes the module to disk
    MemoryOutputSink - Keeps artifacts in memory
    default_output_path - Output location when none is configured

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from rosettagen.constants import DEFAULT_OUTPUT_FILENAME, OUTPUT_DIR_ENV_VAR
from rosettagen.diagnostics import ErrorTemplate, OutputWriteError

if TYPE_CHECKING:
    from rosettagen.codegen import GeneratedArtifact

__all__ = [
    "FileOutputSink",
    "MemoryOutputSink",
    "OutputSink",
    "default_output_path",
]

logger = logging.getLogger(__name__)

type SourceFormatter = Callable[[str], str]
"""Post-processing hook applied to module text before writing (e.g. black)."""


def default_output_path() -> Path:
    """Return the default location of the generated module.

    Uses $ROSETTAGEN_OUT_DIR when set, else the current working directory.
    """
    out_dir = os.environ.get(OUTPUT_DIR_ENV_VAR)
    if out_dir:
        return Path(out_dir) / DEFAULT_OUTPUT_FILENAME
    return Path.cwd() / DEFAULT_OUTPUT_FILENAME


class OutputSink(Protocol):
    """Protocol for generated module destinations."""

    def write(self, artifact: GeneratedArtifact) -> Path | None:
        """Persist an artifact.

        Returns:
            Path written, or None for sinks without a file

        Raises:
            OutputWriteError: If the artifact cannot be persisted
        """


@dataclass(frozen=True, slots=True)
class FileOutputSink:
    """Writes the generated module as a UTF-8 file with '\\n' line endings.

    Parent directories are created as needed. The optional formatter
    receives the module text and returns the text to write; its failures
    propagate unchanged.

    Attributes:
        path: Destination file (None = default_output_path())
        formatter: Optional source formatting hook
    """

    path: Path | str | None = None
    formatter: SourceFormatter | None = None

    @property
    def destination(self) -> Path:
        """Resolved destination path."""
        if self.path is None:
            return default_output_path()
        return Path(self.path)

    def write(self, artifact: GeneratedArtifact) -> Path:
        """Write the artifact to the destination.

        Raises:
            OutputWriteError: If the directory or file cannot be written
        """
        destination = self.destination
        text = artifact.source
        if self.formatter is not None:
            text = self.formatter(text)

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            with destination.open("w", encoding="utf-8", newline="\n") as f:
                f.write(text)
        except OSError as e:
            diagnostic = ErrorTemplate.output_write_failed(str(destination), str(e))
            raise OutputWriteError(diagnostic) from e

        logger.info("Wrote %s (%d characters)", destination, len(text))
        return destination


@dataclass(slots=True)
class MemoryOutputSink:
    """Collects artifacts in memory.

    Example:
        >>> sink = MemoryOutputSink()
        >>> _ = config().source("en", "en.json").fallback("en").generate(sink=sink)
        >>> "class Lang(Enum):" in sink.last.source
        True
    """

    artifacts: list[GeneratedArtifact] = field(default_factory=list)

    def write(self, artifact: GeneratedArtifact) -> None:
        """Store the artifact."""
        self.artifacts.append(artifact)

    @property
    def last(self) -> GeneratedArtifact | None:
        """Most recently written artifact."""
        return self.artifacts[-1] if self.artifacts else None
