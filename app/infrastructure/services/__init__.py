"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    LocaleResolverDep,
    SettingsDep,
    TranslatorDep,
)
from infrastructure.services.providers import (
    get_locale_resolver,
    get_settings,
    get_translator,
)

__all__ = [
    "LocaleResolverDep",
    "SettingsDep",
    "TranslatorDep",
    "get_locale_resolver",
    "get_settings",
    "get_translator",
]
