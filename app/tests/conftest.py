"""Shared fixtures for the site configuration service tests."""

import pytest
import yaml
from freezegun import freeze_time

from api.dependencies.rate_limits import get_limiter
from infrastructure.i18n import Locale, Translator, YAMLTranslationLoader
from modules.site_config import ConfigStore, ConfigTemplate, clear_config_cache
from modules.site_config.store import DEFAULT_SEED_FILE


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    """Rate limit counters are process-wide; start every test from zero."""
    get_limiter().reset()
    yield
    get_limiter().reset()


@pytest.fixture(autouse=True)
def reset_resolved_config_cache():
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def site_translations_dir(tmp_path):
    """Translation files covering part of the header/footer keys.

    fr-FR deliberately omits some keys so fallback to en-US is observable.
    """
    en_us = {
        "config": {
            "header": {
                "logo": {"text": "Acme"},
                "navigation": {"pricing": "Pricing", "about": "About us"},
                "actions": {"signIn": "Sign in"},
                "accessibility": {"logoAriaLabel": "Acme home"},
            },
            "footer": {
                "copyright": "© Acme",
                "legal": {"privacy": "Privacy"},
            },
        }
    }
    fr_fr = {
        "config": {
            "header": {
                "logo": {"text": "Acmé"},
                "navigation": {"pricing": "Tarifs"},
            },
            "footer": {"copyright": "© Acmé"},
        }
    }
    with open(tmp_path / "site.en-US.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_us, f, allow_unicode=True)
    with open(tmp_path / "site.fr-FR.yml", "w", encoding="utf-8") as f:
        yaml.dump(fr_fr, f, allow_unicode=True)
    return tmp_path


@pytest.fixture
def site_translator(site_translations_dir):
    translator = Translator(
        YAMLTranslationLoader(site_translations_dir, use_cache=False),
        fallback_locale=Locale.EN_US,
    )
    translator.load_all()
    return translator


@pytest.fixture
def seed_document():
    """The shipped seed with every marker replaced by its key."""
    return ConfigTemplate.from_yaml(DEFAULT_SEED_FILE).render(lambda key: key)


FROZEN_NOW = "2025-01-01 12:00:00"


@pytest.fixture
def config_store(seed_document):
    """Store seeded at FROZEN_NOW; later writes use the real clock."""
    with freeze_time(FROZEN_NOW):
        return ConfigStore(seed_document)
