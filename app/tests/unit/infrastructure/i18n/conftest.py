"""Feature-level fixtures for i18n tests."""

import pytest
import yaml

from infrastructure.i18n import YAMLTranslationLoader


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - header.en-US.yml
    - header.fr-FR.yml
    - footer.en-US.yml
    """
    en_us_header = {
        "config": {
            "header": {
                "logo": {"text": "My App"},
                "navigation": {"pricing": "Pricing", "about": "About"},
            }
        }
    }
    with open(tmp_path / "header.en-US.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_us_header, f, allow_unicode=True)

    en_us_footer = {
        "config": {
            "footer": {
                "copyright": "© My Company",
                "legal": {"privacy": "Privacy Policy"},
            }
        }
    }
    with open(tmp_path / "footer.en-US.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_us_footer, f, allow_unicode=True)

    fr_fr_header = {
        "config": {
            "header": {
                "logo": {"text": "Mon App"},
                "navigation": {"pricing": "Tarifs"},
            }
        }
    }
    with open(tmp_path / "header.fr-FR.yml", "w", encoding="utf-8") as f:
        yaml.dump(fr_fr_header, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_translations_dir):
    """Create YAMLTranslationLoader with caching enabled."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=True)


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "specific_en_us": "en-US",
        "with_quality": "en-US,en;q=0.9,fr;q=0.8",
        "multiple": "fr-FR,fr;q=0.9,en-US;q=0.8,en;q=0.7",
        "language_only_fr": "fr",
        "unsupported": "de-DE,es;q=0.5",
        "invalid_quality": "en;q=invalid,fr",
    }
