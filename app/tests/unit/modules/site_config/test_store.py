"""Tests for modules.site_config.store."""

import threading
from datetime import datetime, timedelta, timezone

import pytest
import yaml
from freezegun import freeze_time

from infrastructure.configuration import SiteConfigSettings
from modules.site_config.errors import (
    ConfigUpdateError,
    ConfigValidationError,
    VersionConflictError,
)
from modules.site_config.store import (
    ConfigStore,
    create_config_store,
    format_timestamp,
    next_version,
)


@pytest.mark.unit
class TestHelpers:
    @pytest.mark.parametrize(
        "version, expected",
        [("1.0.0", "1.1.0"), ("1.1.0", "1.2.0"), ("2.9.3", "2.10.0")],
    )
    def test_next_version(self, version, expected):
        assert next_version(version) == expected

    def test_next_version_malformed(self):
        with pytest.raises(ValueError):
            next_version("latest")

    def test_format_timestamp(self):
        value = datetime(2025, 1, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)
        assert format_timestamp(value) == "2025-01-01T12:00:00.123Z"


@pytest.mark.unit
class TestConfigStoreRead:
    def test_initial_snapshot(self, config_store, seed_document):
        snapshot = config_store.read()
        assert snapshot["version"] == "1.0.0"
        assert snapshot["lastUpdated"] == "2025-01-01T12:00:00.000Z"
        assert snapshot["header"] == seed_document["header"]
        assert snapshot["footer"] == seed_document["footer"]

    def test_read_one_component(self, config_store):
        snapshot = config_store.read("header")
        assert set(snapshot) == {"header", "lastUpdated", "version"}

    def test_read_unknown_component_raises(self, config_store):
        with pytest.raises(ValueError):
            config_store.read("sidebar")

    def test_read_returns_copies(self, config_store):
        config_store.read("header")["header"]["logo"]["text"] = "mutated"
        assert config_store.read("header")["header"]["logo"]["text"] == "Dynamic App"

    def test_invalid_seed_is_rejected(self, seed_document):
        seed_document["header"]["accessibility"]["logoAriaLabel"] = ""
        with pytest.raises(ConfigValidationError) as exc_info:
            ConfigStore(seed_document)
        assert "accessibility.logoAriaLabel" in str(exc_info.value)

    def test_seed_missing_component_is_rejected(self, seed_document):
        del seed_document["footer"]
        with pytest.raises(ValueError, match="footer"):
            ConfigStore(seed_document)


@pytest.mark.unit
class TestConfigStoreWrite:
    def test_shallow_merge_replaces_top_level_keys(self, config_store, seed_document):
        new_logo = {"text": "New Logo", "href": "/home"}

        config_store.write("header", {"logo": new_logo})

        header = config_store.read("header")["header"]
        assert header["logo"] == new_logo
        assert "className" not in header["logo"]
        assert header["navigation"] == seed_document["header"]["navigation"]

    def test_other_component_is_untouched(self, config_store, seed_document):
        config_store.write("header", {"logo": {"text": "New", "href": "/"}})
        assert config_store.read("footer")["footer"] == seed_document["footer"]

    def test_version_advances_by_minor(self, config_store):
        assert config_store.write("footer", {"copyright": "© A"})["version"] == "1.1.0"
        assert config_store.write("footer", {"copyright": "© B"})["version"] == "1.2.0"
        assert config_store.read()["version"] == "1.2.0"

    def test_last_updated_strictly_changes(self, config_store):
        before = config_store.read()["lastUpdated"]
        first = config_store.write("footer", {"copyright": "© A"})["lastUpdated"]
        second = config_store.write("footer", {"copyright": "© B"})["lastUpdated"]

        assert before < first < second

    def test_last_updated_follows_clock(self, seed_document):
        with freeze_time("2025-01-01 12:00:00") as frozen:
            store = ConfigStore(seed_document)
            frozen.tick(timedelta(minutes=5))
            result = store.write("footer", {"copyright": "© A"})
        assert result["lastUpdated"] == "2025-01-01T12:05:00.000Z"

    def test_last_updated_advances_when_clock_stands_still(self, seed_document):
        with freeze_time("2025-01-01 12:00:00"):
            store = ConfigStore(seed_document)
            first = store.write("footer", {"copyright": "© A"})
            second = store.write("footer", {"copyright": "© B"})
        assert first["lastUpdated"] == "2025-01-01T12:00:00.001Z"
        assert second["lastUpdated"] == "2025-01-01T12:00:00.002Z"

    def test_unknown_component_is_rejected(self, config_store):
        with pytest.raises(ConfigUpdateError, match="Invalid component"):
            config_store.write("sidebar", {"title": "x"})
        assert config_store.version == "1.0.0"

    def test_non_dict_partial_is_rejected(self, config_store):
        with pytest.raises(ConfigUpdateError):
            config_store.write("header", ["logo"])
        assert config_store.version == "1.0.0"

    def test_invalid_merge_leaves_state_unchanged(self, config_store):
        before = config_store.read()

        with pytest.raises(ConfigUpdateError) as exc_info:
            config_store.write(
                "header",
                {"accessibility": {"skipToContentHref": "#main", "logoAriaLabel": ""}},
            )

        assert "accessibility.logoAriaLabel" in [loc for loc, _ in exc_info.value.details]
        assert config_store.read() == before

    def test_expected_version_match(self, config_store):
        result = config_store.write(
            "footer", {"copyright": "© A"}, expected_version="1.0.0"
        )
        assert result["version"] == "1.1.0"

    def test_expected_version_conflict_leaves_state_unchanged(self, config_store):
        config_store.write("footer", {"copyright": "© A"})
        before = config_store.read()

        with pytest.raises(VersionConflictError) as exc_info:
            config_store.write("footer", {"copyright": "© B"}, expected_version="1.0.0")

        assert exc_info.value.current_version == "1.1.0"
        assert config_store.read() == before

    def test_partial_is_copied(self, config_store):
        partial = {"logo": {"text": "New", "href": "/"}}
        config_store.write("header", partial)
        partial["logo"]["text"] = "mutated"
        assert config_store.read("header")["header"]["logo"]["text"] == "New"

    def test_concurrent_writes_are_serialized(self, config_store):
        def write(n):
            config_store.write("footer", {"copyright": f"© {n}"})

        threads = [threading.Thread(target=write, args=(n,)) for n in range(20)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert config_store.version == "1.20.0"

    def test_reset_restores_seed(self, config_store, seed_document):
        config_store.write("header", {"logo": {"text": "New", "href": "/"}})
        config_store.reset()
        snapshot = config_store.read()
        assert snapshot["version"] == "1.0.0"
        assert snapshot["header"] == seed_document["header"]


@pytest.mark.unit
class TestCreateConfigStore:
    def test_seed_markers_are_resolved_for_default_locale(self, site_translator):
        store = create_config_store(SiteConfigSettings(), site_translator)
        header = store.read("header")["header"]
        assert header["logo"]["text"] == "Dynamic App"
        # No translation in the fixture catalog: the full key is served
        assert header["navigation"][0]["label"] == "config.header.navigation.products"

    def test_custom_seed_file(self, tmp_path, site_translator, seed_document):
        seed_document["footer"]["copyright"] = "t('config.footer.copyright')"
        seed_file = tmp_path / "seed.yml"
        seed_file.write_text(yaml.safe_dump(seed_document, allow_unicode=True), encoding="utf-8")

        store = create_config_store(
            SiteConfigSettings(SITE_CONFIG_SEED_FILE=str(seed_file)), site_translator
        )
        assert store.read("footer")["footer"]["copyright"] == "© Acme"
