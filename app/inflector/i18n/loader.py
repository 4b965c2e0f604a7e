"""Translation loading interface and the YAML implementation.

Inflection data travels inside the catalogs (the ``i18n.inflections``
section) and is turned into databases by the Translator.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

import structlog
import yaml

from inflector.i18n.models import Locale, TranslationCatalog, deep_merge

logger = structlog.get_logger()

YAML_SUFFIX = ".yml"


class TranslationLoader(ABC):
    """Source of translation catalogs."""

    @abstractmethod
    def load(self, locale: Locale) -> TranslationCatalog:
        """Load the catalog of one locale.

        Raises:
            FileNotFoundError: If the locale has no translations.
            ValueError: If the translations cannot be parsed.
        """

    @abstractmethod
    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load the catalogs of every locale the source has."""


class YAMLTranslationLoader(TranslationLoader):
    """Loads catalogs from a directory of YAML files.

    A locale's translations may be split over ``<locale>.yml`` and any
    number of ``<domain>.<locale>.yml`` files. They are merged deeply in
    file name order, so a kind of ``i18n.inflections`` can be extended by a
    later file.

    Attributes:
        translations_dir: Directory holding the YAML files.
        use_cache: Keep loaded catalogs and serve them again.
        cache: Loaded catalogs by locale.
    """

    def __init__(self, translations_dir: Path, use_cache: bool = True):
        """Initialize the loader.

        Raises:
            ValueError: If the directory does not exist.
        """
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
        """List the files of a locale, sorted by name."""
        paths = set(self.translations_dir.glob(f"*.{locale.value}{YAML_SUFFIX}"))
        paths.update(self.translations_dir.glob(f"{locale.value}{YAML_SUFFIX}"))
        return sorted(paths)

    def available_locales(self) -> List[Locale]:
        """Detect the supported locales that have at least one file.

        ``greetings.en-US.yml`` and ``en-US.yml`` both count for en-US;
        files of unsupported locales are logged and skipped.
        """
        found = set()
        for path in self.translations_dir.glob(f"*{YAML_SUFFIX}"):
            tag = path.stem.rsplit(".", 1)[-1]
            try:
                found.add(Locale.from_string(tag))
            except ValueError:
                logger.warning("unrecognized_locale_file", file=str(path))
        return sorted(found, key=lambda locale: locale.value)

    def load(self, locale: Locale) -> TranslationCatalog:
        """Load and merge all files of a locale.

        Raises:
            FileNotFoundError: If the locale has no files.
            ValueError: If a file is not valid YAML.
        """
        if self.use_cache and locale in self.cache:
            logger.debug("loaded_from_cache", locale=locale.value)
            return self.cache[locale]

        paths = self.files_for(locale)
        if not paths:
            raise FileNotFoundError(
                f"No translation files found for locale {locale.value} in {self.translations_dir}"
            )

        catalog = TranslationCatalog(locale=locale)
        for path in paths:
            self._merge_document(catalog, self._read(path), path)
        catalog.loaded_at = datetime.now(timezone.utc).isoformat()

        logger.info(
            "loaded_translations",
            locale=locale.value,
            file_count=len(paths),
            namespace_count=len(catalog.messages),
            has_inflections=catalog.get_section("i18n.inflections") is not None,
        )

        if self.use_cache:
            self.cache[locale] = catalog
        return catalog

    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load every detected locale, ordered by locale tag.

        Raises:
            ValueError: If no supported locale has any file.
        """
        locales = self.available_locales()
        if not locales:
            raise ValueError(f"No translation files found in {self.translations_dir}")
        return {locale: self.load(locale) for locale in locales}

    def clear_cache(self) -> None:
        self.cache.clear()
        logger.info("cleared_translation_cache")

    def _read(self, path: Path) -> Any:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e

    def _merge_document(
        self, catalog: TranslationCatalog, document: Any, path: Path
    ) -> None:
        """Merge one parsed file into the catalog.

        The document must map namespaces to nested messages; anything else
        is logged and skipped.
        """
        if document is None:
            return
        if not isinstance(document, dict):
            logger.warning("invalid_yaml_format", file=str(path), expected="dict")
            return

        for namespace, messages in document.items():
            if not isinstance(messages, dict):
                logger.warning(
                    "invalid_namespace_format",
                    file=str(path),
                    namespace=str(namespace),
                    expected="dict",
                )
                continue
            deep_merge(catalog.messages.setdefault(str(namespace), {}), messages)
