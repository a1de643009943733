"""Shared test data and helpers for generated modules."""

from __future__ import annotations

import importlib.util
from pathlib import Path
from typing import Any

from rosettagen.codegen import GeneratedArtifact

EN_SOURCE: dict[str, str] = {
    "hello": "Hello world!",
    "hello_name": "Hello {name}!",
}

FR_SOURCE: dict[str, str] = {
    "hello": "Bonjour le monde !",
    "hello_name": "Bonjour {name} !",
}


def load_generated(artifact: GeneratedArtifact) -> Any:
    """Execute a generated module and return its selector type.

    dont_inherit keeps this module's __future__ flags out of the generated
    code, so annotations are evaluated as they are on a real import.
    """
    namespace: dict[str, Any] = {}
    code = compile(artifact.source, "<generated>", "exec", dont_inherit=True)
    exec(code, namespace)  # noqa: S102
    return namespace[artifact.type_name]


def import_generated(path: Path, type_name: str) -> Any:
    """Import a generated module file and return its selector type."""
    spec = importlib.util.spec_from_file_location(f"generated_{path.stem}", path)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return getattr(module, type_name)
