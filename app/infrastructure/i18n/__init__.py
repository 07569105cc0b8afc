"""i18n system - translation catalogs, key accessors and locale resolution.

Main components:
- models: TranslationKey, Locale, TranslationCatalog
- loader: TranslationLoader and YAMLTranslationLoader
- translator: Translator service and locale-bound KeyAccessor
- resolvers: LocaleResolver for Accept-Language negotiation
- factory: create_translator() with default app/locales discovery
"""

from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.loader import TranslationLoader, YAMLTranslationLoader
from infrastructure.i18n.models import (
    Locale,
    TranslationCatalog,
    TranslationKey,
)
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.translator import KeyAccessor, Translator

__all__ = [
    "Locale",
    "TranslationKey",
    "TranslationCatalog",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
    "KeyAccessor",
    "LocaleResolver",
    "create_translator",
]
