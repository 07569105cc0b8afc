"""Translation service and locale-scoped key accessors.

The Translator owns the loaded catalogs; callers that build configuration
objects receive a KeyAccessor bound to one locale and namespace, which is the
only translation surface the site configuration core depends on.
"""

from typing import Dict, Optional

from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import Locale, TranslationCatalog, TranslationKey
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class KeyAccessor:
    """Callable ``(key, default_value=None) -> str`` bound to a locale.

    Never raises. A missing key returns ``default_value`` when one is given,
    otherwise the full dotted key so the gap is visible instead of blank.

    Attributes:
        translator: Translator used for lookups.
        locale: Locale the accessor is bound to.
        namespace: Optional dotted prefix prepended to every key.
    """

    def __init__(
        self,
        translator: "Translator",
        locale: Locale,
        namespace: Optional[str] = None,
    ):
        self.translator = translator
        self.locale = locale
        self.namespace = namespace

    def full_key(self, key: str) -> str:
        return f"{self.namespace}.{key}" if self.namespace else key

    def __call__(self, key: str, default_value: Optional[str] = None) -> str:
        full_key = self.full_key(key)
        try:
            message = self.translator.lookup(TranslationKey.from_string(full_key), self.locale)
        except ValueError:
            message = None

        if message is not None:
            return message

        if default_value is not None:
            return default_value

        logger.warning(
            "translation_key_missing",
            key=full_key,
            locale=self.locale.value,
        )
        return full_key


class Translator:
    """Service for looking up translated messages across locales.

    Attributes:
        loader: TranslationLoader for loading translation files.
        catalogs: Cache of loaded TranslationCatalogs by locale.
        fallback_locale: Locale to use when key not found.
    """

    def __init__(
        self,
        loader: TranslationLoader,
        fallback_locale: Locale = Locale.EN_US,
    ):
        """Initialize Translator.

        Args:
            loader: TranslationLoader instance for loading translations.
            fallback_locale: Locale to use when key not found (default: en-US).
        """
        self.loader = loader
        self.fallback_locale = fallback_locale
        self.catalogs: Dict[Locale, TranslationCatalog] = {}
        logger.info("initialized_translator", fallback_locale=fallback_locale.value)

    def load_all(self) -> None:
        """Load all available locales from loader."""
        self.catalogs = self.loader.load_all()
        logger.info("loaded_all_translations", locale_count=len(self.catalogs))

    def load_locale(self, locale: Locale) -> None:
        """Load specific locale from loader.

        Raises:
            FileNotFoundError: If translation files not found.
        """
        self.catalogs[locale] = self.loader.load(locale)
        logger.info("loaded_locale_translations", locale=locale.value)

    def lookup(self, key: TranslationKey, locale: Locale) -> Optional[str]:
        """Find a message in the requested locale, then the fallback locale.

        Returns:
            The message, or None if neither catalog has it.
        """
        catalog = self.catalogs.get(locale)
        message = catalog.get_message(key) if catalog else None

        if message is None and locale != self.fallback_locale:
            fallback_catalog = self.catalogs.get(self.fallback_locale)
            message = fallback_catalog.get_message(key) if fallback_catalog else None

            if message is not None:
                logger.info(
                    "used_fallback_translation",
                    key=str(key),
                    requested_locale=locale.value,
                    fallback_locale=self.fallback_locale.value,
                )

        return message

    def get_accessor(self, locale: Locale, namespace: Optional[str] = None) -> KeyAccessor:
        """Return a key accessor bound to ``locale`` and ``namespace``.

        Example:
            t = translator.get_accessor(Locale.FR_FR, "config.header")
            t("logo.text", default_value="My App")
        """
        return KeyAccessor(self, locale, namespace)

    def has_message(self, key: TranslationKey, locale: Locale) -> bool:
        """Check if translation exists for key in the requested locale only."""
        catalog = self.catalogs.get(locale)
        return catalog.has_message(key) if catalog else False

    def get_available_locales(self) -> list:
        """Get list of loaded locales."""
        return list(self.catalogs.keys())

    def get_catalog(self, locale: Locale) -> Optional[TranslationCatalog]:
        """Get complete catalog for a locale."""
        return self.catalogs.get(locale)

    def reload(self) -> None:
        """Reload all translations from loader."""
        self.catalogs.clear()
        if hasattr(self.loader, "clear_cache"):
            self.loader.clear_cache()
        self.load_all()
        logger.info("reloaded_all_translations")
