"""Factory functions for creating i18n components."""

from pathlib import Path

import structlog

from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.models import Locale
from infrastructure.i18n.translator import Translator

logger = structlog.get_logger()

DEFAULT_TRANSLATIONS_DIR = Path(__file__).resolve().parents[2] / "locales"


def create_translator(
    translations_dir: Path | str | None = None,
    fallback_locale: Locale = Locale.EN_US,
    use_cache: bool = True,
    preload: bool = True,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        translations_dir: Path to YAML translation files (default: app/locales)
        fallback_locale: Locale to use when translations not found (default: en-US)
        use_cache: Whether loader should cache parsed YAML (default: True)
        preload: Whether to load all locales immediately (default: True)

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If translations_dir does not exist

    Usage:
        translator = create_translator()
        translator = create_translator(translations_dir=Path("/custom/locales"))
    """
    if translations_dir is None:
        translations_dir = DEFAULT_TRANSLATIONS_DIR

    loader = YAMLTranslationLoader(
        translations_dir=Path(translations_dir),
        use_cache=use_cache,
    )
    translator = Translator(loader=loader, fallback_locale=fallback_locale)

    if preload:
        translator.load_all()
        logger.info(
            "translator_created_with_preload",
            translations_dir=str(translations_dir),
            locale_count=len(translator.get_available_locales()),
        )
    else:
        logger.info(
            "translator_created_lazy",
            translations_dir=str(translations_dir),
        )

    return translator
