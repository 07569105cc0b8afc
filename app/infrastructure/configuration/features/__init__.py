"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.site_config import SiteConfigSettings

__all__ = [
    "SiteConfigSettings",
]
