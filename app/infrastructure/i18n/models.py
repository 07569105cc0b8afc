"""Translation models for i18n system.

Defines core data structures for managing translations and locales.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class Locale(str, Enum):
    """Supported locale identifiers.

    Uses IETF BCP 47 language tag format (e.g., en-US, fr-FR).
    """

    EN_US = "en-US"
    FR_FR = "fr-FR"

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale enum.

        Args:
            locale_str: Locale string (e.g., "en-US", "fr-FR").

        Returns:
            Matching Locale enum value.

        Raises:
            ValueError: If locale string is not supported.
        """
        try:
            return cls(locale_str)
        except ValueError as e:
            raise ValueError(f"Unsupported locale: {locale_str}") from e

    @property
    def language(self) -> str:
        """Get language part of locale (e.g., "en" from "en-US")."""
        return self.value.split("-")[0]

    @property
    def region(self) -> str:
        """Get region part of locale (e.g., "US" from "en-US")."""
        parts = self.value.split("-")
        return parts[1] if len(parts) > 1 else ""


@dataclass(frozen=True)
class TranslationKey:
    """Represents a translation key for accessing translated messages.

    Keys are hierarchical. The first segment is the namespace and the rest
    is a dotted path inside it (e.g., "config" + "header.logo.text").
    Frozen to ensure immutability and hashability for caching.

    Attributes:
        namespace: Top-level namespace (e.g., "config").
        message_key: Dotted path within the namespace (e.g., "header.logo.text").
    """

    namespace: str
    message_key: str

    def __str__(self) -> str:
        """Return full dot-separated key path."""
        return f"{self.namespace}.{self.message_key}"

    @property
    def path(self) -> list[str]:
        """Segments of the message key below the namespace."""
        return self.message_key.split(".")

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from dot-separated string.

        Args:
            key_string: Dot-separated key (e.g., "config.header.logo.text").

        Returns:
            TranslationKey instance.

        Raises:
            ValueError: If key_string has no dot or an empty segment.
        """
        parts = key_string.split(".", 1)
        if len(parts) != 2 or not all(parts) or "" in parts[1].split("."):
            raise ValueError(
                f"Translation key must be in format 'namespace.key': {key_string}"
            )
        return cls(namespace=parts[0], message_key=parts[1])


@dataclass
class TranslationCatalog:
    """Container for translations in a specific locale.

    Messages are stored as nested dicts ({namespace: {section: {key: message}}})
    so that dotted keys of any depth can be looked up.

    Attributes:
        locale: The Locale this catalog is for.
        messages: Nested dict structure of message strings.
        loaded_at: Timestamp (ISO 8601) when translations were loaded.
    """

    locale: Locale
    messages: Dict[str, Any] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def get_message(self, key: TranslationKey) -> Optional[str]:
        """Retrieve a translation message by key.

        Returns:
            Translated message string, or None if not found or if the key
            points at a section rather than a message.
        """
        node: Any = self.messages.get(key.namespace)
        for segment in key.path:
            if not isinstance(node, dict):
                return None
            node = node.get(segment)
        return node if isinstance(node, str) else None

    def set_message(self, key: TranslationKey, message: str) -> None:
        """Set a translation message, creating intermediate sections."""
        node = self.messages.setdefault(key.namespace, {})
        *parents, leaf = key.path
        for segment in parents:
            node = node.setdefault(segment, {})
        node[leaf] = message

    def has_message(self, key: TranslationKey) -> bool:
        """Check if translation exists for given key."""
        return self.get_message(key) is not None

    def get_namespace(self, namespace: str) -> Dict[str, Any]:
        """Get all messages for a specific namespace."""
        return self.messages.get(namespace, {})

    def merge(self, other: "TranslationCatalog") -> None:
        """Merge another catalog into this one.

        Sections merge recursively; later messages override earlier ones.
        """
        merge_messages(self.messages, other.messages)


def merge_messages(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for name, value in source.items():
        existing = target.get(name)
        if isinstance(existing, dict) and isinstance(value, dict):
            merge_messages(existing, value)
        else:
            target[name] = value
