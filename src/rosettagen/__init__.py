"""rosettagen - Build-time generator of typed translation accessors.

Reads one flat JSON translation file per language and generates a Python
module with a language selector type and one accessor method per key. The
fallback language defines the set of keys; other languages override them.

Public API:
    config - Start a RosettaBuilder
    RosettaBuilder / RosettaConfig - Registration and generation
    LanguageId - Two-letter language identifier
    TranslationSource / build_model - Programmatic model building
    parse_template - Parse one template string
    CodeGenerator / GeneratedArtifact - Module generation
    JsonFileLoader / MappingSourceLoader - Source loaders
    FileOutputSink / MemoryOutputSink - Output sinks

Exceptions:
    RosettaError - Base exception class
    RosettaConfigError - Invalid builder configuration
    SourceIOError / SourceFormatError - Source loading errors
    TemplateSyntaxError - Malformed templates
    ParameterMismatchError - Override parameters differ from the fallback

Submodules:
    rosettagen.syntax - Template AST and parser
    rosettagen.model - Translation model and builder
    rosettagen.loading - Source loaders
    rosettagen.codegen - Code generation
    rosettagen.diagnostics - Error types, codes and formatting
"""

from .builder import RosettaBuilder, RosettaConfig, config
from .codegen import CodeGenerator, GeneratedArtifact
from .diagnostics import (
    DuplicateLanguageError,
    InvalidIdentifierError,
    InvalidLanguageError,
    InvalidTypeNameError,
    MissingFallbackError,
    MissingSourceError,
    OutputWriteError,
    ParameterMismatchError,
    RosettaConfigError,
    RosettaError,
    SourceFormatError,
    SourceIOError,
    TemplateSyntaxError,
    UnknownKeyError,
)
from .loading import JsonFileLoader, MappingSourceLoader, SourceLoader
from .model import LanguageId, TranslationModel, TranslationSource, build_model
from .output import FileOutputSink, MemoryOutputSink, OutputSink
from .syntax import parse_template

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("rosettagen")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CodeGenerator",
    "DuplicateLanguageError",
    "FileOutputSink",
    "GeneratedArtifact",
    "InvalidIdentifierError",
    "InvalidLanguageError",
    "InvalidTypeNameError",
    "JsonFileLoader",
    "LanguageId",
    "MappingSourceLoader",
    "MemoryOutputSink",
    "MissingFallbackError",
    "MissingSourceError",
    "OutputSink",
    "OutputWriteError",
    "ParameterMismatchError",
    "RosettaBuilder",
    "RosettaConfig",
    "RosettaConfigError",
    "RosettaError",
    "SourceFormatError",
    "SourceIOError",
    "SourceLoader",
    "TemplateSyntaxError",
    "TranslationModel",
    "TranslationSource",
    "UnknownKeyError",
    "__version__",
    "build_model",
    "config",
    "parse_template",
]
