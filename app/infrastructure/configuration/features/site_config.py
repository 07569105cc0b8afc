"""Site configuration feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class SiteConfigSettings(FeatureSettings):
    """Header/footer configuration resolution and distribution settings.

    Environment Variables:
        SITE_CONFIG_DEFAULT_LOCALE: Locale used when none is requested (default: en-US)
        SITE_CONFIG_SUPPORTED_LOCALES: JSON list of supported locales
        SITE_CONFIG_TRANSLATIONS_DIR: Directory with YAML translation files
            (default: auto-discover app/locales)
        SITE_CONFIG_SEED_FILE: YAML seed document for the distribution store
            (default: modules/site_config/seed.yml)
        SITE_CONFIG_READ_DELAY_SECONDS: Artificial latency on snapshot reads
        SITE_CONFIG_CACHE_MAX_AGE: Cache-Control max-age for snapshot reads
        SITE_CONFIG_WRITE_RATE_LIMIT: slowapi limit string for snapshot writes

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        locale = settings.site_config.default_locale
        ```
    """

    default_locale: str = Field(
        default="en-US",
        alias="SITE_CONFIG_DEFAULT_LOCALE",
    )
    supported_locales: list[str] = Field(
        default_factory=lambda: ["en-US", "fr-FR"],
        alias="SITE_CONFIG_SUPPORTED_LOCALES",
    )
    translations_dir: str | None = Field(
        default=None,
        alias="SITE_CONFIG_TRANSLATIONS_DIR",
    )
    seed_file: str | None = Field(
        default=None,
        alias="SITE_CONFIG_SEED_FILE",
    )
    read_delay_seconds: float = Field(
        default=0.1,
        alias="SITE_CONFIG_READ_DELAY_SECONDS",
        description="Simulated backend latency applied to snapshot reads",
    )
    cache_max_age: int = Field(
        default=60,
        alias="SITE_CONFIG_CACHE_MAX_AGE",
    )
    write_rate_limit: str = Field(
        default="30/minute",
        alias="SITE_CONFIG_WRITE_RATE_LIMIT",
    )
