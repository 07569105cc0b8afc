"""Locale resolution logic for determining the requested language.

Resolves the locale for a resolved-configuration request from an explicit
parameter, then the Accept-Language header, then the default.
"""

from typing import Optional

import structlog

from infrastructure.i18n.models import Locale

logger = structlog.get_logger().bind(component="i18n.resolver")


class LocaleResolver:
    """Resolves request locale from explicit values and HTTP headers.

    Fallback chain:
    1. Explicit request parameter (if supported)
    2. Accept-Language header
    3. Default locale
    """

    def __init__(
        self,
        default_locale: Locale = Locale.EN_US,
        supported_locales: Optional[list] = None,
    ):
        """Initialize locale resolver.

        Args:
            default_locale: Fallback locale when no preference found.
            supported_locales: Locales the caller can serve (default: all).
        """
        self.default_locale = default_locale
        self.supported_locales = supported_locales or list(Locale)
        self.log = logger.bind(default_locale=default_locale.value)

    def resolve(
        self,
        requested: Optional[str] = None,
        accept_language: Optional[str] = None,
    ) -> Locale:
        """Resolve using the full fallback chain.

        Raises:
            ValueError: If ``requested`` is given but not supported.
        """
        if requested:
            locale = self.resolve_from_string(requested)
            if locale not in self.supported_locales:
                raise ValueError(f"Unsupported locale: {requested}")
            return locale
        return self.resolve_from_header(accept_language)

    def resolve_from_header(self, accept_language: Optional[str]) -> Locale:
        """Resolve locale from HTTP Accept-Language header.

        Returns the first supported locale in quality order, matching exact
        tags first and then the language part alone ("fr" matches "fr-FR").
        """
        if not accept_language:
            return self.default_locale

        # "en-US,en;q=0.9,fr-FR;q=0.8" -> [(en-US, 1.0), (en, 0.9), (fr-FR, 0.8)]
        preferences = []
        for part in accept_language.split(","):
            lang_range = part.split(";")[0].strip()
            quality = 1.0

            if ";" in part and "q=" in part:
                try:
                    quality = float(part.split("q=")[1])
                except ValueError:
                    quality = 1.0

            preferences.append((lang_range, quality))

        for lang_range, _ in sorted(preferences, key=lambda x: x[1], reverse=True):
            for locale in self.supported_locales:
                if locale.value.lower() == lang_range.lower():
                    self.log.info("resolved_from_header", locale=locale.value)
                    return locale

            lang_code = lang_range.split("-")[0].lower()
            for locale in self.supported_locales:
                if locale.language.lower() == lang_code:
                    self.log.info("resolved_from_header", locale=locale.value)
                    return locale

        self.log.info("no_matching_locale_in_header", header=accept_language)
        return self.default_locale

    def resolve_from_string(self, locale_str: str) -> Locale:
        """Parse and validate locale string.

        Raises:
            ValueError: If locale_str is not a known locale.
        """
        try:
            return Locale.from_string(locale_str)
        except ValueError:
            self.log.warning("invalid_locale_string", locale_str=locale_str)
            raise
