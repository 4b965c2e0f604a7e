"""Inflector configuration module - public API.

Centralized configuration built on Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    InflectionSettings: Inflection switch defaults
    TranslationSettings: Translation files configuration

Example:
    ```python
    from inflector.configuration import settings

    raises = settings.inflection.raises
    fallback = settings.translations.fallback_locale
    ```
"""

from inflector.configuration.features import InflectionSettings, TranslationSettings
from inflector.configuration.settings import Settings, settings

__all__ = ["settings", "Settings", "InflectionSettings", "TranslationSettings"]
