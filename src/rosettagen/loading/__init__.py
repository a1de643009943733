"""Source loading package.

Turns registered (language, location) pairs into TranslationSource values.
I/O is fully encapsulated here; every later pipeline stage is pure.

Python 3.13+.
"""

from .loader import (
    JsonFileLoader,
    MappingSourceLoader,
    SourceLoader,
    load_sources,
    validate_flat_mapping,
)

__all__ = [
    "JsonFileLoader",
    "MappingSourceLoader",
    "SourceLoader",
    "load_sources",
    "validate_flat_mapping",
]
