"""Translation models for the i18n layer.

Defines core data structures for managing translations and locales.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class Locale(str, Enum):
    """Supported locale identifiers.

    Uses IETF BCP 47 language tag format (e.g., en-US, fr-FR).
    """

    EN_US = "en-US"
    FR_FR = "fr-FR"
    PL_PL = "pl-PL"

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale enum.

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


@dataclass(frozen=True)
class TranslationKey:
    """Represents a translation key for accessing translated messages.

    Keys are hierarchical (e.g., "greetings.welcome"). Frozen to ensure
    immutability and hashability.

    Attributes:
        namespace: Top-level namespace (e.g., "greetings").
        message_key: Message identifier inside the namespace; may itself be
            dotted to reach nested messages (e.g., "mail.subject").
    """

    namespace: str
    message_key: str

    def __str__(self) -> str:
        return f"{self.namespace}.{self.message_key}"

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from dot-separated string.

        Raises:
            ValueError: If key_string has no dot.
        """
        parts = key_string.split(".", 1)
        if len(parts) != 2 or not all(parts):
            raise ValueError(
                f"Translation key must be in format 'namespace.key': {key_string}"
            )
        return cls(namespace=parts[0], message_key=parts[1])


def deep_merge(target: Dict[str, Any], source: Mapping[str, Any]) -> None:
    """Merge ``source`` into ``target`` recursively; later values win."""
    for key, value in source.items():
        if isinstance(value, Mapping) and isinstance(target.get(key), dict):
            deep_merge(target[key], value)
        elif isinstance(value, Mapping):
            target[key] = {}
            deep_merge(target[key], value)
        else:
            target[key] = value


@dataclass
class TranslationCatalog:
    """Container for translations in a specific locale.

    Attributes:
        locale: The Locale this catalog is for.
        messages: Nested dict structure {namespace: {key: message_or_dict}}.
        loaded_at: Timestamp (ISO 8601) when translations were loaded.
    """

    locale: Locale
    messages: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def get_section(self, path: str) -> Optional[Any]:
        """Walk a dotted path through the nested messages.

        Returns:
            The value at the path (string or dict), or None if missing.
        """
        node: Any = self.messages
        for part in path.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        return node

    def get_message(self, key: TranslationKey) -> Optional[str]:
        """Retrieve a translation message by key.

        Returns:
            Translated message string, or None if not found or not a string.
        """
        message = self.get_section(str(key))
        return message if isinstance(message, str) else None

    def set_message(self, key: TranslationKey, message: str) -> None:
        node = self.messages.setdefault(key.namespace, {})
        *parents, leaf = key.message_key.split(".")
        for part in parents:
            node = node.setdefault(part, {})
        node[leaf] = message

    def has_message(self, key: TranslationKey) -> bool:
        return self.get_message(key) is not None

    def get_namespace(self, namespace: str) -> Dict[str, Any]:
        """Get all messages for a specific namespace."""
        return self.messages.get(namespace, {})

    def merge(self, other: "TranslationCatalog") -> None:
        """Merge another catalog into this one; later entries override."""
        deep_merge(self.messages, other.messages)
