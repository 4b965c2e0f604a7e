"""Feature-level fixtures for i18n tests.

Provides translation directories with inflection data and loaders over them.
"""

import pytest
import yaml

from inflector.i18n import YAMLTranslationLoader
from tests.factories.inflection import make_inflections


def _dump(path, data):
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, allow_unicode=True)


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - en-US.yml              (inflections)
    - greetings.en-US.yml
    - fr-FR.yml              (inflections)
    - greetings.fr-FR.yml
    """
    _dump(tmp_path / "en-US.yml", {"i18n": {"inflections": make_inflections()}})
    _dump(
        tmp_path / "greetings.en-US.yml",
        {
            "greetings": {
                "welcome": "Dear @{f:Lady|m:Sir|n:You|All} {{name}}!",
                "named": "@gender{f:Madam|m:Sir|Friend}",
                "plain": "Hello %{name}, see you {when}",
                "placeholder_value": "Dear @{f:Lady|m:%{test}}!",
                "literal": "Write @@{gender} to inflect",
                "literal_backslash": "Write \\@{gender} to inflect",
                "mail": {"subject": "@{f:Her|m:His|n:Their} report"},
            }
        },
    )
    _dump(
        tmp_path / "fr-FR.yml",
        {
            "i18n": {
                "inflections": {
                    "gender": {
                        "m": "masculin",
                        "f": "féminin",
                        "masculin": "@m",
                        "default": "m",
                    }
                }
            }
        },
    )
    _dump(
        tmp_path / "greetings.fr-FR.yml",
        {
            "greetings": {
                "welcome": "@{f:Chère Madame|m:Cher Monsieur} {{name}} !",
            }
        },
    )
    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_translations_dir):
    """Create YAMLTranslationLoader with caching enabled."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=True)
