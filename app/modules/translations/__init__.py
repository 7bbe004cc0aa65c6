"""Weblate translation resolution, transfer and format conversion.

Public API:
    - TranslationResolver: cached has/get/add of component translations
    - TranslationTransfer: upload/download of translation files
    - TranslationService: facade returning OperationResult objects
    - convert_json_to_xliff(): JSON key/value file -> XLIFF 1.2
"""

from modules.translations.cache import CacheState, TranslationCache
from modules.translations.models import (
    Component,
    Translation,
    component_from_dict,
    translation_from_dict,
)
from modules.translations.resolver import TranslationResolver
from modules.translations.service import TranslationService
from modules.translations.transfer import TranslationTransfer
from modules.translations.xliff import convert_json_to_xliff

__all__ = [
    "CacheState",
    "Component",
    "Translation",
    "TranslationCache",
    "TranslationResolver",
    "TranslationService",
    "TranslationTransfer",
    "component_from_dict",
    "convert_json_to_xliff",
    "translation_from_dict",
]
