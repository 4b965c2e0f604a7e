"""Feature settings."""

from inflector.configuration.features.inflection import InflectionSettings
from inflector.configuration.features.translations import TranslationSettings

__all__ = ["InflectionSettings", "TranslationSettings"]
