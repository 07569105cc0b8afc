"""Translation catalog loaders.

Site configuration strings live in ``<domain>.<locale>.yml`` files, e.g.
``site.en-US.yml``. Every file of a locale is merged into one catalog in
file name order, so later domains override earlier ones key by key.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Set

import structlog
import yaml

from infrastructure.i18n.models import Locale, TranslationCatalog, merge_messages

logger = structlog.get_logger()


class TranslationLoader(ABC):
    """Source of translation catalogs."""

    @abstractmethod
    def load(self, locale: Locale) -> TranslationCatalog:
        """Load the catalog of ``locale``.

        Raises:
            FileNotFoundError: If the locale has no translation source.
            ValueError: If a source cannot be parsed.
        """

    @abstractmethod
    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load the catalog of every locale the source provides."""


class YAMLTranslationLoader(TranslationLoader):
    """Loads catalogs from a directory of YAML files.

    A file holds top-level namespaces of nested messages:

        config:
          header:
            logo:
              text: My App

    Attributes:
        translations_dir: Directory holding the YAML files
        use_cache: Keep loaded catalogs in ``cache``
        cache: Loaded catalogs by locale
    """

    def __init__(self, translations_dir: Path, use_cache: bool = True):
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[Locale, TranslationCatalog] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def files_for(self, locale: Locale) -> List[Path]:
        return sorted(self.translations_dir.glob(f"*.{locale.value}.yml"))

    def available_locales(self) -> Set[Locale]:
        """Locales named by the files in the directory; unknown suffixes are skipped."""
        locales: Set[Locale] = set()
        for path in self.translations_dir.glob("*.yml"):
            domain, _, suffix = path.stem.rpartition(".")
            if not domain:
                continue
            try:
                locales.add(Locale.from_string(suffix))
            except ValueError:
                logger.warning("unrecognized_locale_file", file=str(path))
        return locales

    def load(self, locale: Locale) -> TranslationCatalog:
        if self.use_cache and locale in self.cache:
            return self.cache[locale]

        files = self.files_for(locale)
        if not files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale.value} in {self.translations_dir}"
            )

        catalog = TranslationCatalog(locale=locale)
        for path in files:
            _merge_document(catalog, _read_yaml(path), path)
        catalog.loaded_at = datetime.now(timezone.utc).isoformat()

        logger.info(
            "loaded_translations",
            locale=locale.value,
            file_count=len(files),
            namespace_count=len(catalog.messages),
        )

        if self.use_cache:
            self.cache[locale] = catalog
        return catalog

    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load every available locale.

        Raises:
            ValueError: If the directory names no known locale.
        """
        locales = self.available_locales()
        if not locales:
            raise ValueError(f"No translation files found in {self.translations_dir}")
        return {locale: self.load(locale) for locale in locales}

    def clear_cache(self) -> None:
        self.cache.clear()
        logger.info("cleared_translation_cache")


def _read_yaml(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error("yaml_parse_error", file=str(path), error=str(e))
        raise ValueError(f"Failed to parse {path}: {e}") from e


def _merge_document(catalog: TranslationCatalog, data: Any, source: Path) -> None:
    """Merge the namespaces of one parsed file; non-mapping values are skipped."""
    if not data:
        return
    if not isinstance(data, dict):
        logger.warning("invalid_yaml_format", file=str(source), expected="dict")
        return

    for namespace, messages in data.items():
        if not isinstance(messages, dict):
            logger.warning(
                "invalid_namespace_format",
                file=str(source),
                namespace=namespace,
            )
            continue
        merge_messages(catalog.messages.setdefault(namespace, {}), messages)
