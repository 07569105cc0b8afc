"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n import LocaleResolver, Translator
from infrastructure.services.providers import (
    get_locale_resolver,
    get_settings,
    get_translator,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Translator dependency
TranslatorDep = Annotated[Translator, Depends(get_translator)]

# Locale resolver dependency
LocaleResolverDep = Annotated[LocaleResolver, Depends(get_locale_resolver)]

__all__ = [
    "LocaleResolverDep",
    "SettingsDep",
    "TranslatorDep",
]
