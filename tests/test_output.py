"""Tests for output.py."""

from __future__ import annotations

from pathlib import Path

import pytest

from rosettagen.codegen import GeneratedArtifact
from rosettagen.constants import DEFAULT_OUTPUT_FILENAME, OUTPUT_DIR_ENV_VAR
from rosettagen.diagnostics import DiagnosticCode, OutputWriteError
from rosettagen.output import FileOutputSink, MemoryOutputSink, default_output_path

ARTIFACT = GeneratedArtifact(source='"""Generated."""\nvalue = "é"\n', type_name="Lang")


class TestDefaultOutputPath:
    """Default output location."""

    def test_env_var(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """$ROSETTAGEN_OUT_DIR wins when set."""
        monkeypatch.setenv(OUTPUT_DIR_ENV_VAR, str(tmp_path / "out"))
        assert default_output_path() == tmp_path / "out" / DEFAULT_OUTPUT_FILENAME

    def test_cwd(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Without the variable the working directory is used."""
        monkeypatch.delenv(OUTPUT_DIR_ENV_VAR, raising=False)
        monkeypatch.chdir(tmp_path)
        assert default_output_path() == Path.cwd() / "rosetta_output.py"


class TestFileOutputSink:
    """Writing generated modules to disk."""

    def test_write_creates_parents(self, tmp_path: Path) -> None:
        """Missing directories are created; content is UTF-8."""
        target = tmp_path / "pkg" / "generated" / "translations.py"

        written = FileOutputSink(target).write(ARTIFACT)

        assert written == target
        assert target.read_text(encoding="utf-8") == ARTIFACT.source

    def test_newlines_are_lf(self, tmp_path: Path) -> None:
        """Line endings are '\\n' on every platform."""
        target = tmp_path / "out.py"
        FileOutputSink(str(target)).write(ARTIFACT)

        assert b"\r\n" not in target.read_bytes()

    def test_formatter_hook(self, tmp_path: Path) -> None:
        """The formatter output is what gets written."""
        target = tmp_path / "out.py"
        sink = FileOutputSink(target, formatter=lambda text: "# formatted\n" + text)

        sink.write(ARTIFACT)

        assert target.read_text(encoding="utf-8").startswith("# formatted\n")

    def test_default_destination(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """path=None writes to the default output path."""
        monkeypatch.setenv(OUTPUT_DIR_ENV_VAR, str(tmp_path))

        written = FileOutputSink().write(ARTIFACT)

        assert written == tmp_path / DEFAULT_OUTPUT_FILENAME
        assert written.exists()

    def test_write_failure(self, tmp_path: Path) -> None:
        """OS errors become OutputWriteError with the cause chained."""
        blocker = tmp_path / "file"
        blocker.write_text("not a directory", encoding="utf-8")

        with pytest.raises(OutputWriteError) as exc_info:
            FileOutputSink(blocker / "out.py").write(ARTIFACT)

        assert isinstance(exc_info.value.__cause__, OSError)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.OUTPUT_WRITE_FAILED
        assert exc_info.value.diagnostic.origin == str(blocker / "out.py")


class TestMemoryOutputSink:
    """In-memory sink."""

    def test_collects_artifacts(self) -> None:
        """Artifacts are kept in write order."""
        sink = MemoryOutputSink()
        assert sink.last is None

        assert sink.write(ARTIFACT) is None

        assert sink.artifacts == [ARTIFACT]
        assert sink.last is ARTIFACT
