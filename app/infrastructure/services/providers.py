"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache
from pathlib import Path

from infrastructure.configuration import Settings
from infrastructure.i18n import Locale, LocaleResolver, Translator, create_translator


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            ...

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translator() -> Translator:
    """
    Get application-scoped translator singleton.

    Loads every locale from SITE_CONFIG_TRANSLATIONS_DIR (default app/locales)
    and falls back to SITE_CONFIG_DEFAULT_LOCALE for missing keys.

    Returns:
        Translator: Cached translator with all catalogs preloaded.
    """
    site_config = get_settings().site_config
    translations_dir = (
        Path(site_config.translations_dir) if site_config.translations_dir else None
    )
    return create_translator(
        translations_dir=translations_dir,
        fallback_locale=Locale.from_string(site_config.default_locale),
    )


@lru_cache
def get_locale_resolver() -> LocaleResolver:
    """
    Get application-scoped locale resolver singleton.

    Resolves to SITE_CONFIG_SUPPORTED_LOCALES and defaults to
    SITE_CONFIG_DEFAULT_LOCALE.
    """
    site_config = get_settings().site_config
    return LocaleResolver(
        default_locale=Locale.from_string(site_config.default_locale),
        supported_locales=[
            Locale.from_string(locale) for locale in site_config.supported_locales
        ],
    )
