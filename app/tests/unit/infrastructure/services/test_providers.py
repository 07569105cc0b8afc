"""
Unit tests for dependency injection providers.

Tests cover:
- get_settings() / get_translator() / get_locale_resolver() caching
- SettingsDep type alias with FastAPI dependency injection
- Dependency override pattern for testing
"""

from unittest.mock import MagicMock

from fastapi import FastAPI
from fastapi.testclient import TestClient

from infrastructure.configuration import Settings
from infrastructure.i18n import Locale, LocaleResolver, Translator
from infrastructure.services.dependencies import SettingsDep
from infrastructure.services.providers import (
    get_locale_resolver,
    get_settings,
    get_translator,
)


class TestGetSettings:
    """Tests for get_settings() provider function."""

    def test_get_settings_returns_settings_instance(self):
        assert isinstance(get_settings(), Settings)

    def test_get_settings_returns_cached_instance(self):
        assert get_settings() is get_settings()

    def test_get_settings_cache_can_be_cleared(self):
        instance1 = get_settings()
        get_settings.cache_clear()
        instance2 = get_settings()
        assert instance1 is not instance2


class TestGetTranslator:
    def test_returns_preloaded_translator(self):
        translator = get_translator()
        assert isinstance(translator, Translator)
        assert Locale.EN_US in translator.get_available_locales()

    def test_is_cached(self):
        assert get_translator() is get_translator()


class TestGetLocaleResolver:
    def test_uses_site_config_locales(self):
        resolver = get_locale_resolver()
        assert isinstance(resolver, LocaleResolver)
        assert resolver.default_locale == Locale.from_string(
            get_settings().site_config.default_locale
        )


class TestDependencyOverridePattern:
    """Tests for FastAPI dependency override pattern."""

    def test_settings_dep_with_dependency_override(self):
        app = FastAPI()

        @app.get("/config")
        def get_config(settings: SettingsDep) -> dict:
            return {"git_sha": settings.GIT_SHA}

        mock_settings = MagicMock(spec=Settings)
        mock_settings.GIT_SHA = "abc123"
        app.dependency_overrides[get_settings] = lambda: mock_settings

        client = TestClient(app)
        response = client.get("/config")

        assert response.status_code == 200
        assert response.json() == {"git_sha": "abc123"}
