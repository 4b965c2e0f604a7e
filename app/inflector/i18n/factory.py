"""Factory functions for creating i18n components.

Provides convenience functions for initializing translators with defaults
taken from ``settings.translations`` and ``settings.inflection``.
"""

from pathlib import Path
from typing import Optional

import structlog

from inflector.configuration import settings
from inflector.i18n.loader import YAMLTranslationLoader
from inflector.i18n.models import Locale
from inflector.i18n.translator import Translator
from inflector.inflection import InflectionOptions, InflectionRegistry

logger = structlog.get_logger()


def default_translations_dir() -> Path:
    """Locate the bundled locales directory.

    This file is at .../app/inflector/i18n/factory.py; the locales live in
    .../app/locales.
    """
    return Path(__file__).resolve().parents[2] / "locales"


def create_translator(
    translations_dir: Optional[Path] = None,
    fallback_locale: Optional[Locale] = None,
    use_cache: Optional[bool] = None,
    preload: bool = True,
    inflection_options: Optional[InflectionOptions] = None,
    registry: Optional[InflectionRegistry] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Arguments left as None are taken from settings; a missing
    ``TRANSLATIONS_DIR`` means the bundled ``app/locales`` directory.

    Args:
        translations_dir: Path to YAML translation files
        fallback_locale: Locale to use when translations not found
        use_cache: Whether loader should cache parsed YAML
        preload: Whether to load all locales immediately (default: True)
        inflection_options: Default inflection switches
        registry: Registry to publish inflection databases into

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If translations_dir does not exist or the fallback
            locale is not supported
        InflectionConfigurationError: If preloaded inflection data is invalid

    Usage:
        translator = create_translator()
        translator.translate_message(
            TranslationKey("greetings", "welcome"),
            Locale.EN_US,
            {"gender": "f", "name": "Ada"},
        )

        # Lazy loading
        translator = create_translator(preload=False)
        translator.load_locale(Locale.PL_PL)
    """
    config = settings.translations

    if translations_dir is None:
        translations_dir = (
            Path(config.translations_dir)
            if config.translations_dir
            else default_translations_dir()
        )
    if fallback_locale is None:
        fallback_locale = Locale.from_string(config.fallback_locale)
    if use_cache is None:
        use_cache = config.use_cache

    loader = YAMLTranslationLoader(
        translations_dir=translations_dir,
        use_cache=use_cache,
    )
    translator = Translator(
        loader=loader,
        fallback_locale=fallback_locale,
        registry=registry,
        inflection_options=inflection_options,
    )

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
