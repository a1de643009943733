"""Translation model package.

Submodules:
    language - LanguageId value type and CLDR display names
    types    - TranslationSource, TranslationKey, TranslationModel
    builder  - build_model (cross-language merge and validation)

Python 3.13+.
"""

from .builder import ParsedSource, build_model, parse_source
from .language import LanguageId, get_display_name
from .types import TranslationKey, TranslationModel, TranslationSource

__all__ = [
    "LanguageId",
    "ParsedSource",
    "TranslationKey",
    "TranslationModel",
    "TranslationSource",
    "build_model",
    "get_display_name",
    "parse_source",
]
