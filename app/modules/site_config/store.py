"""In-memory header/footer snapshot served by the distribution endpoint.

The store is owned by the application (``app.state.config_store``) and is
the only writer of the snapshot. Writes shallow-merge a partial document
into one component, validate the merged result against the component's
schema and advance the version. A rejected write leaves the snapshot
untouched.

Usage:
    store = create_config_store(settings.site_config, translator)
    snapshot = store.read("header")
    store.write("header", {"logo": {"text": "New", "href": "/"}})
"""

import copy
import threading
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from infrastructure.configuration import SiteConfigSettings
from infrastructure.i18n import Locale, Translator
from infrastructure.logging import get_module_logger
from modules.site_config.errors import (
    ConfigUpdateError,
    ConfigValidationError,
    VersionConflictError,
)
from modules.site_config.factory import validate_config
from modules.site_config.placeholders import ConfigTemplate
from modules.site_config.schemas import COMPONENTS, CONFIG_MODELS

logger = get_module_logger()

INITIAL_VERSION = "1.0.0"
DEFAULT_SEED_FILE = Path(__file__).resolve().parent / "seed.yml"

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _to_millis(value: datetime) -> datetime:
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def format_timestamp(value: datetime) -> str:
    """ISO-8601 UTC with millisecond precision (``2025-01-01T00:00:00.000Z``)."""
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


def next_version(version: str) -> str:
    """Advance the minor component: ``1.0.0`` -> ``1.1.0``."""
    try:
        major, minor, _patch = (int(part) for part in version.split("."))
    except ValueError as e:
        raise ValueError(f"Malformed version: {version!r}") from e
    return f"{major}.{minor + 1}.0"


class ConfigStore:
    """Versioned header/footer snapshot with serialized writes.

    Attributes:
        version: Current snapshot version.
        last_updated: Time of the last successful write (or creation).
    """

    def __init__(self, seed: Dict[str, Dict[str, Any]], clock: Clock = _utc_now):
        missing = [component for component in COMPONENTS if component not in seed]
        if missing:
            raise ValueError(f"Seed is missing components: {', '.join(missing)}")
        for component in COMPONENTS:
            validate_config(CONFIG_MODELS[component], seed[component], component)

        self._seed = copy.deepcopy(seed)
        self._clock = clock
        self._lock = threading.Lock()
        self._components: Dict[str, Dict[str, Any]] = {}
        self.version = INITIAL_VERSION
        self.last_updated = _to_millis(clock())
        self.reset()

    @classmethod
    def from_template(
        cls, template: ConfigTemplate, lookup: Callable[[str], str], **kwargs
    ) -> "ConfigStore":
        """Render a seed template with ``lookup`` and build a store from it."""
        return cls(template.render(lookup), **kwargs)

    def reset(self) -> None:
        """Restore the seed snapshot and the initial version."""
        with self._lock:
            self._components = copy.deepcopy(self._seed)
            self.version = INITIAL_VERSION
            self.last_updated = _to_millis(self._clock())
        logger.info("config_store_reset", version=self.version)

    def read(self, component: Optional[str] = None) -> Dict[str, Any]:
        """Return ``{header?, footer?, lastUpdated, version}``.

        ``component`` selects one of header/footer; None returns both.

        Raises:
            ValueError: If ``component`` is not a known component.
        """
        if component is not None and component not in COMPONENTS:
            raise ValueError(f"Unknown component: {component}")

        with self._lock:
            selected = [component] if component else list(COMPONENTS)
            snapshot: Dict[str, Any] = {
                name: copy.deepcopy(self._components[name]) for name in selected
            }
            snapshot["lastUpdated"] = format_timestamp(self.last_updated)
            snapshot["version"] = self.version
        return snapshot

    def write(
        self,
        component: str,
        partial: Dict[str, Any],
        expected_version: Optional[str] = None,
    ) -> Dict[str, str]:
        """Shallow-merge ``partial`` into ``component`` and advance the version.

        Top-level keys of ``partial`` replace the stored ones wholesale; nested
        objects are not merged.

        Returns:
            ``{"version": ..., "lastUpdated": ...}`` after the write.

        Raises:
            ConfigUpdateError: Unknown component, non-dict partial, or a merged
                result that fails validation.
            VersionConflictError: ``expected_version`` does not match.
        """
        if component not in COMPONENTS:
            raise ConfigUpdateError(f"Invalid component: {component}")
        if not isinstance(partial, dict):
            raise ConfigUpdateError("Configuration must be an object")

        with self._lock:
            if expected_version is not None and expected_version != self.version:
                logger.warning(
                    "config_store_version_conflict",
                    component=component,
                    expected_version=expected_version,
                    current_version=self.version,
                )
                raise VersionConflictError(expected_version, self.version)

            merged = {**self._components[component], **copy.deepcopy(partial)}
            try:
                validate_config(CONFIG_MODELS[component], merged, component)
            except ConfigValidationError as e:
                logger.warning(
                    "config_store_write_rejected", component=component, errors=e.errors
                )
                raise ConfigUpdateError(str(e), details=e.errors) from e

            now = _to_millis(self._clock())
            if now <= self.last_updated:
                now = self.last_updated + timedelta(milliseconds=1)

            self._components[component] = merged
            self.version = next_version(self.version)
            self.last_updated = now
            result = {
                "version": self.version,
                "lastUpdated": format_timestamp(self.last_updated),
            }

        logger.info(
            "config_store_updated",
            component=component,
            keys=sorted(partial),
            version=result["version"],
        )
        return result


def create_config_store(
    site_config: SiteConfigSettings, translator: Translator
) -> ConfigStore:
    """Build the application store from the seed template.

    Translation markers in the seed are resolved for the default locale.
    """
    seed_file = Path(site_config.seed_file) if site_config.seed_file else DEFAULT_SEED_FILE
    template = ConfigTemplate.from_yaml(seed_file)
    accessor = translator.get_accessor(Locale.from_string(site_config.default_locale))
    store = ConfigStore.from_template(template, accessor)
    logger.info(
        "config_store_created",
        seed_file=str(seed_file),
        translation_keys=len(template.keys()),
        locale=site_config.default_locale,
    )
    return store
