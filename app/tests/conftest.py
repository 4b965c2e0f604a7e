"""Top-level pytest fixtures shared by all test packages."""

import pytest

from inflector.inflection import InflectionOptions

INFLECTOR_ENV_VARS = (
    "INFLECTOR_RAISES",
    "INFLECTOR_UNKNOWN_DEFAULTS",
    "INFLECTOR_EXCLUDED_DEFAULTS",
    "INFLECTOR_ALIASED_PATTERNS",
    "TRANSLATIONS_DIR",
    "FALLBACK_LOCALE",
    "TRANSLATIONS_CACHE",
    "LOG_LEVEL",
    "ENVIRONMENT",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove inflector related environment variables for the test."""
    for name in INFLECTOR_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def default_options():
    """InflectionOptions with the documented defaults."""
    return InflectionOptions()
