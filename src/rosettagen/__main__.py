"""Command-line entry point.

Usage:
    python -m rosettagen --source en=locales/en.json --source fr=locales/fr.json \\
        --fallback en --output src/app/translations.py

Exit codes:
    0 - Module generated
    1 - Generation failed (diagnostics on stderr)
    2 - Invalid command line or configuration

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from rosettagen.builder import RosettaBuilder
from rosettagen.diagnostics import (
    DiagnosticFormatter,
    OutputFormat,
    RosettaConfigError,
    RosettaError,
    TemplateSyntaxError,
)
from rosettagen.output import MemoryOutputSink

if TYPE_CHECKING:
    from rosettagen.diagnostics import Diagnostic

__all__ = ["main"]


def _source_argument(value: str) -> tuple[str, str]:
    """Split a LANG=PATH argument."""
    lang, sep, path = value.partition("=")
    if not sep or not lang or not path:
        msg = f"expected LANG=PATH, got '{value}'"
        raise argparse.ArgumentTypeError(msg)
    return lang, path


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="rosettagen",
        description="Generate a Python translation module from JSON sources.",
    )
    parser.add_argument(
        "--source", "-s",
        action="append",
        type=_source_argument,
        required=True,
        metavar="LANG=PATH",
        help="Translation source of a language (repeatable).",
    )
    parser.add_argument(
        "--fallback", "-f",
        required=True,
        metavar="LANG",
        help="Fallback language; defines the set of keys.",
    )
    parser.add_argument(
        "--name", "-n",
        default=None,
        help="Name of the generated type (default: Lang).",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output file (default: $ROSETTAGEN_OUT_DIR/rosetta_output.py).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on keys missing from the fallback instead of dropping them.",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the generated module instead of writing it.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Thread pool size for loading and parsing (1 = sequential).",
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.RUST.value,
        help="Diagnostic output format (default: rust).",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Log progress (-v info, -vv debug).",
    )
    return parser.parse_args(argv)


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _diagnostics_of(error: RosettaError) -> list[Diagnostic]:
    errors: tuple[RosettaError, ...] = (
        error.errors if isinstance(error, TemplateSyntaxError) else (error,)
    )
    return [e.diagnostic for e in errors if e.diagnostic is not None]


def _report(formatter: DiagnosticFormatter, error: RosettaError) -> None:
    diagnostics = _diagnostics_of(error)
    if diagnostics:
        print(formatter.format_all(diagnostics), file=sys.stderr)
    else:
        print(f"error: {error}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Run the generator."""
    args = _parse_args(argv)
    _configure_logging(args.verbose)
    formatter = DiagnosticFormatter(
        output_format=OutputFormat(args.format), color=sys.stderr.isatty()
    )

    builder = RosettaBuilder().fallback(args.fallback).strict(args.strict)
    for lang, path in args.source:
        builder.source(lang, path)
    if args.name is not None:
        builder.name(args.name)
    if args.output is not None:
        builder.output(args.output)
    if args.workers is not None:
        builder.workers(args.workers)

    try:
        config = builder.build()
    except RosettaConfigError as e:
        _report(formatter, e)
        return 2

    sink = MemoryOutputSink() if args.stdout else None
    try:
        artifact = config.generate(sink=sink)
    except RosettaError as e:
        _report(formatter, e)
        return 1

    if artifact.warnings:
        print(formatter.format_all(artifact.warnings), file=sys.stderr)
    if args.stdout:
        sys.stdout.write(artifact.source)
    return 0


if __name__ == "__main__":
    sys.exit(main())
