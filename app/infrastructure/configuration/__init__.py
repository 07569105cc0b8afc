"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the site
configuration service using Pydantic BaseSettings with domain-based
organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    SiteConfigSettings: Site configuration feature settings class
    ServerSettings: Server settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    default_locale = settings.site_config.default_locale
    backend_url = settings.server.BACKEND_URL
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.features import SiteConfigSettings
from infrastructure.configuration.infrastructure import ServerSettings

__all__ = ["Settings", "settings", "SiteConfigSettings", "ServerSettings"]
