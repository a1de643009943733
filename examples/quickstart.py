"""Quick Start Examples for rosettagen.

Generates a translation module from the JSON files in examples/locales and
calls the generated accessors.

Run with: python examples/quickstart.py
"""

from pathlib import Path

import rosettagen
from rosettagen import MappingSourceLoader, MemoryOutputSink, ParameterMismatchError
from rosettagen.diagnostics import DiagnosticFormatter

LOCALES = Path(__file__).parent / "locales"


def load_module(source: str, type_name: str) -> type:
    """Execute generated source and return its selector type."""
    namespace: dict[str, object] = {}
    exec(compile(source, "<generated>", "exec"), namespace)  # noqa: S102
    return namespace[type_name]  # type: ignore[return-value]


# Example 1: Generate from JSON files
print("=" * 50)
print("Example 1: Generate from JSON files")
print("=" * 50)

sink = MemoryOutputSink()
artifact = (
    rosettagen.config()
    .source("en", LOCALES / "en.json")
    .source("fr", LOCALES / "fr.json")
    .fallback("en")
    .name("Lang")
    .generate(sink=sink)
)
print(artifact.source.splitlines()[0])
# Output: # This file is generated by rosettagen. Do not edit it by hand.

Lang = load_module(artifact.source, artifact.type_name)
print(Lang.EN.hello())
# Output: Hello world!
print(Lang.FR.hello())
# Output: Bonjour le monde !

# Example 2: Parameters
print("\n" + "=" * 50)
print("Example 2: Parameters")
print("=" * 50)

print(Lang.FR.hello_name("Anna"))
# Output: Bonjour Anna !

# Parameters are sorted by name, so keywords read best
print(Lang.EN.unread(count="3", user="Anna"))
# Output: Anna, you have 3 unread messages
print(Lang.FR.unread(count="3", user="Anna"))
# Output: 3 messages non lus pour Anna

# Example 3: Fallback
print("\n" + "=" * 50)
print("Example 3: Fallback")
print("=" * 50)

# fr.json has no "goodbye"; the English text is used
print(Lang.FR.goodbye())
# Output: See you soon
print(Lang.fallback(), Lang.from_language_id("FR"), Lang.from_language_id("de"))
# Output: Lang.EN Lang.FR None

# Example 4: Validation errors
print("\n" + "=" * 50)
print("Example 4: Validation errors")
print("=" * 50)

loader = MappingSourceLoader(
    {
        "en": {"hello_name": "Hello {name}!"},
        "fr": {"hello_name": "Bonjour {nom} !"},
    }
)
try:
    rosettagen.config().source("en", "en").source("fr", "fr").fallback("en").generate(
        loader=loader, sink=MemoryOutputSink()
    )
except ParameterMismatchError as e:
    assert e.diagnostic is not None
    print(DiagnosticFormatter().format(e.diagnostic))
# Output:
# error[PARAMETER_MISMATCH]: Key 'hello_name' in language 'fr' has mismatched parameters
#   --> hello_name
#   = expected: {name}
#   = received: {nom}
#   = help: Use exactly the placeholders of the fallback template

print("\n" + "=" * 50)
print("All examples completed successfully!")
print("=" * 50)
