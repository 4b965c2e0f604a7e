"""Translations feature settings."""

from typing import Optional

from pydantic import Field

from inflector.configuration.base import FeatureSettings


class TranslationSettings(FeatureSettings):
    """Translation files configuration.

    Environment Variables:
        TRANSLATIONS_DIR: Directory with ``*.<locale>.yml`` files
            (default: the bundled ``app/locales`` directory)
        FALLBACK_LOCALE: Locale used when a key is missing (default: en-US)
        TRANSLATIONS_CACHE: Cache parsed YAML files in memory (default: True)
    """

    translations_dir: Optional[str] = Field(default=None, alias="TRANSLATIONS_DIR")
    fallback_locale: str = Field(default="en-US", alias="FALLBACK_LOCALE")
    use_cache: bool = Field(default=True, alias="TRANSLATIONS_CACHE")
