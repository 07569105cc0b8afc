# modules/site_config/__init__.py
"""Site configuration module.

Builds, validates, caches and distributes the header/footer configuration
of the site:

- Placeholder templates: ``t('key')`` markers resolved per locale
- Fail-closed resolvers validating each configuration against its schema
- Per-locale cache of resolved configurations
- Versioned snapshot store behind ``/api/config``
- Runtime fetchers that poll the snapshot and fall back to defaults
"""

from modules.site_config.cache import (
    ResolvedConfigCache,
    clear_config_cache,
    footer_config_cache,
    get_config_cache_stats,
    get_resolved_footer_config,
    get_resolved_header_config,
    header_config_cache,
)
from modules.site_config.client import ConfigApiClient
from modules.site_config.errors import (
    ConfigUpdateError,
    ConfigValidationError,
    SiteConfigError,
    VersionConflictError,
)
from modules.site_config.factory import (
    create_config_resolver,
    footer_config_factory,
    header_config_factory,
    resolve_footer_config,
    resolve_header_config,
    validate_config,
)
from modules.site_config.fetcher import ConfigAdminClient, ConfigFetcher, FetchState
from modules.site_config.placeholders import (
    ConfigTemplate,
    LiteralNode,
    TranslationRef,
    parse_template,
    resolve_translations,
)
from modules.site_config.schemas import (
    COMPONENTS,
    ConfigUpdateRequest,
    ResolvedFooterConfig,
    ResolvedHeaderConfig,
)
from modules.site_config.store import ConfigStore, create_config_store

__all__ = [
    "COMPONENTS",
    "ConfigAdminClient",
    "ConfigApiClient",
    "ConfigFetcher",
    "ConfigStore",
    "ConfigTemplate",
    "ConfigUpdateError",
    "ConfigUpdateRequest",
    "ConfigValidationError",
    "FetchState",
    "LiteralNode",
    "ResolvedConfigCache",
    "ResolvedFooterConfig",
    "ResolvedHeaderConfig",
    "SiteConfigError",
    "TranslationRef",
    "VersionConflictError",
    "clear_config_cache",
    "create_config_resolver",
    "create_config_store",
    "footer_config_cache",
    "footer_config_factory",
    "get_config_cache_stats",
    "get_resolved_footer_config",
    "get_resolved_header_config",
    "header_config_cache",
    "header_config_factory",
    "parse_template",
    "resolve_footer_config",
    "resolve_header_config",
    "resolve_translations",
    "validate_config",
]
