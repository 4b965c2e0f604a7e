"""i18n layer - translation catalogs with inflection support.

Loads YAML translation files, builds the inflection databases from their
``i18n.inflections`` section and renders messages through the inflector.

Main components:
- models: TranslationKey, Locale, TranslationCatalog
- loader: TranslationLoader and YAMLTranslationLoader
- translator: Translator service with inflection and variable interpolation
- factory: create_translator with settings-driven defaults
"""

from inflector.i18n.factory import create_translator
from inflector.i18n.loader import TranslationLoader, YAMLTranslationLoader
from inflector.i18n.models import Locale, TranslationCatalog, TranslationKey
from inflector.i18n.translator import Translator

__all__ = [
    "Locale",
    "TranslationKey",
    "TranslationCatalog",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
    "create_translator",
]
