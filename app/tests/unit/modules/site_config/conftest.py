"""Fixtures for site_config module tests."""

import pytest


@pytest.fixture
def defaults_accessor():
    """Accessor that knows no translations: every field takes its default."""

    def get_key(key, default_value=None):
        return default_value if default_value is not None else key

    return get_key


@pytest.fixture
def dict_accessor():
    """Build an accessor backed by a flat dict of translations."""

    def make(translations):
        def get_key(key, default_value=None):
            if key in translations:
                return translations[key]
            return default_value if default_value is not None else key

        return get_key

    return make
