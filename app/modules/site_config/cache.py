"""Per-locale cache of resolved header/footer configuration.

Entries are created on first resolution for a locale and live until they
are explicitly invalidated. The key space is a handful of locale codes, so
there is no size bound or expiry. The cache is not guarded for concurrent
invalidation during reads; a single writer at a time is assumed.
"""

from typing import Callable, Dict, Generic, Optional, TypeVar

from infrastructure.i18n import Locale, Translator
from infrastructure.logging import get_module_logger
from infrastructure.services.providers import get_translator
from modules.site_config.errors import ConfigValidationError
from modules.site_config.factory import (
    GetKey,
    resolve_footer_config,
    resolve_header_config,
)
from modules.site_config.schemas import (
    ConfigModel,
    ResolvedFooterConfig,
    ResolvedHeaderConfig,
)

logger = get_module_logger()

ModelT = TypeVar("ModelT", bound=ConfigModel)


class ResolvedConfigCache(Generic[ModelT]):
    """Memoizes one config resolver's output per locale.

    Attributes:
        resolver: Fail-closed resolver from ``create_config_resolver``.
        namespace: Translation namespace the accessor is bound to.
        translator_provider: Returns the Translator to build accessors from.
    """

    def __init__(
        self,
        resolver: Callable[[GetKey], ModelT],
        namespace: str,
        translator_provider: Callable[[], Translator] = get_translator,
    ):
        self.resolver = resolver
        self.namespace = namespace
        self.translator_provider = translator_provider
        self._entries: Dict[str, ModelT] = {}

    def get(self, locale: str) -> ModelT:
        """Return the cached config for ``locale``, resolving it on first use.

        Raises:
            ValueError: If the locale is not supported.
            ConfigValidationError: If the resolved config fails validation.
                Nothing is cached in that case.
        """
        cached = self._entries.get(locale)
        if cached is not None:
            return cached

        accessor = self.translator_provider().get_accessor(
            Locale.from_string(locale), self.namespace
        )
        try:
            config = self.resolver(accessor)
        except ConfigValidationError:
            logger.error(
                "resolved_config_failed",
                namespace=self.namespace,
                locale=locale,
            )
            raise

        self._entries[locale] = config
        logger.info("resolved_config_cached", namespace=self.namespace, locale=locale)
        return config

    def invalidate(self, locale: Optional[str] = None) -> None:
        """Drop one locale's entry, or every entry when ``locale`` is None."""
        if locale is None:
            self._entries.clear()
        else:
            self._entries.pop(locale, None)
        logger.info(
            "resolved_config_invalidated",
            namespace=self.namespace,
            locale=locale or "*",
        )

    def locales(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, locale: str) -> bool:
        return locale in self._entries

    def __len__(self) -> int:
        return len(self._entries)


header_config_cache: ResolvedConfigCache[ResolvedHeaderConfig] = ResolvedConfigCache(
    resolve_header_config, "config.header"
)
footer_config_cache: ResolvedConfigCache[ResolvedFooterConfig] = ResolvedConfigCache(
    resolve_footer_config, "config.footer"
)


def get_resolved_header_config(locale: str) -> ResolvedHeaderConfig:
    """Resolved header configuration for ``locale``, cached."""
    return header_config_cache.get(locale)


def get_resolved_footer_config(locale: str) -> ResolvedFooterConfig:
    """Resolved footer configuration for ``locale``, cached."""
    return footer_config_cache.get(locale)


def clear_config_cache(locale: Optional[str] = None) -> None:
    """Clear both caches for one locale, or entirely when ``locale`` is None."""
    header_config_cache.invalidate(locale)
    footer_config_cache.invalidate(locale)


def get_config_cache_stats() -> Dict[str, object]:
    """Cache sizes and the union of cached locales, for monitoring."""
    cached_locales = list(
        dict.fromkeys(header_config_cache.locales() + footer_config_cache.locales())
    )
    return {
        "headerCacheSize": len(header_config_cache),
        "footerCacheSize": len(footer_config_cache),
        "cachedLocales": cached_locales,
    }
