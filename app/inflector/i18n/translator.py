"""Translation service for retrieving and interpolating translated messages.

A message goes through two passes:

1. inflection patterns (``@{f:Lady|m:Sir}``) are resolved against the
   locale's inflection databases and the kind options in ``variables``;
2. ``{{name}}``, ``%{name}`` and ``{name}`` placeholders are filled in.
"""

import re
from typing import Any, Dict, Optional

from inflector.i18n.loader import TranslationLoader
from inflector.i18n.models import Locale, TranslationCatalog, TranslationKey
from inflector.inflection import (
    InflectionConfigurationError,
    InflectionDataBuilder,
    InflectionOptions,
    InflectionRegistry,
    Inflector,
)
from inflector.logging import get_module_logger

logger = get_module_logger()

INFLECTIONS_SECTION = "i18n.inflections"

PLACEHOLDER = re.compile(r"(?<!@)(?:\{\{(\w+)\}\}|%\{(\w+)\}|\{(\w+)\})")


class Translator:
    """Service for translating messages with inflection and variables.

    Attributes:
        loader: TranslationLoader for loading translation files.
        catalogs: Loaded TranslationCatalogs by locale.
        fallback_locale: Locale to use when key not found.
        inflector: Inflector bound to the registry filled from the catalogs.
    """

    def __init__(
        self,
        loader: TranslationLoader,
        fallback_locale: Locale = Locale.EN_US,
        registry: Optional[InflectionRegistry] = None,
        inflection_options: Optional[InflectionOptions] = None,
    ):
        """Initialize Translator.

        Args:
            loader: TranslationLoader instance for loading translations.
            fallback_locale: Locale to use when key not found (default: en-US).
            registry: Registry to publish inflection databases into.
            inflection_options: Default inflection switches (default: settings).
        """
        self.loader = loader
        self.fallback_locale = fallback_locale
        self.catalogs: Dict[Locale, TranslationCatalog] = {}
        self.inflector = Inflector(
            registry=registry,
            options=inflection_options,
            default_locale=fallback_locale,
        )
        logger.info("initialized_translator", fallback_locale=fallback_locale.value)

    @property
    def registry(self) -> InflectionRegistry:
        return self.inflector.registry

    def _install(self, catalog: TranslationCatalog) -> None:
        """Build the catalog's inflection databases and publish both.

        Nothing is published if the inflection data is invalid.
        """
        inflections = catalog.get_section(INFLECTIONS_SECTION)
        try:
            databases = InflectionDataBuilder(catalog.locale).build(inflections)
        except InflectionConfigurationError as e:
            logger.error(
                "inflection_data_invalid",
                locale=catalog.locale.value,
                error=str(e),
            )
            raise
        self.registry.replace(databases)
        self.catalogs[catalog.locale] = catalog

    def load_all(self) -> None:
        """Load all available locales from loader."""
        for catalog in self.loader.load_all().values():
            self._install(catalog)
        logger.info("loaded_all_translations", locale_count=len(self.catalogs))

    def load_locale(self, locale: Locale) -> None:
        """Load specific locale from loader.

        Raises:
            FileNotFoundError: If translation files not found.
            InflectionConfigurationError: If the inflection data is invalid.
        """
        self._install(self.loader.load(locale))
        logger.info("loaded_locale_translations", locale=locale.value)

    def translate_message(
        self,
        key: TranslationKey,
        locale: Locale,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Retrieve, inflect and interpolate a translated message.

        ``variables`` carries both the placeholder values and the inflection
        options (kind names such as ``gender`` and ``inflector_*`` switches).
        Falls back to fallback_locale if key not found in requested locale;
        the inflections of the locale the message came from are used.

        Raises:
            KeyError: If key not found in requested locale or fallback locale.
            ValueError: If a placeholder has no value.
            InflectionPatternError: If inflection raising is switched on and
                a pattern cannot be resolved.
        """
        variables = variables or {}
        source_locale = locale

        catalog = self.catalogs.get(locale)
        message = catalog.get_message(key) if catalog else None

        if message is None and locale != self.fallback_locale:
            fallback_catalog = self.catalogs.get(self.fallback_locale)
            message = fallback_catalog.get_message(key) if fallback_catalog else None

            if message is not None:
                source_locale = self.fallback_locale
                logger.info(
                    "used_fallback_translation",
                    key=str(key),
                    requested_locale=locale.value,
                    fallback_locale=self.fallback_locale.value,
                )

        if message is None:
            logger.error(
                "translation_not_found",
                key=str(key),
                locale=locale.value,
                fallback_locale=self.fallback_locale.value,
            )
            raise KeyError(
                f"Translation not found for key {key} in {locale.value} or fallback {self.fallback_locale.value}"
            )

        message = self.inflector.interpolate(message, source_locale, variables)
        return self._interpolate(message, variables)

    def has_message(self, key: TranslationKey, locale: Locale) -> bool:
        """Check if translation exists for key in the requested locale."""
        catalog = self.catalogs.get(locale)
        return catalog.has_message(key) if catalog else False

    def get_available_locales(self) -> list:
        """Get list of loaded locales."""
        return list(self.catalogs.keys())

    def _interpolate(self, message: str, variables: Dict[str, Any]) -> str:
        """Replace ``{{var}}``, ``%{var}`` and ``{var}`` placeholders.

        Raises:
            ValueError: If variable not found in variables dict.
        """
        for match in PLACEHOLDER.finditer(message):
            name = next(group for group in match.groups() if group is not None)
            if name not in variables:
                logger.error(
                    "missing_interpolation_variable",
                    variable=name,
                    available_variables=list(variables.keys()),
                )
                raise ValueError(f"Missing interpolation variable: {name}")

        # Single pass, so substituted values are never scanned again.
        return PLACEHOLDER.sub(
            lambda m: str(
                variables[next(group for group in m.groups() if group is not None)]
            ),
            message,
        )

    def get_catalog(self, locale: Locale) -> Optional[TranslationCatalog]:
        return self.catalogs.get(locale)

    def reload(self) -> None:
        """Reload all translations and inflections from the loader.

        Loaded databases stay in place for locales that fail to rebuild.
        """
        clear_cache = getattr(self.loader, "clear_cache", None)
        if clear_cache is not None:
            clear_cache()
        self.load_all()
        logger.info("reloaded_all_translations")
