"""Feature-level fixtures for inflection tests."""

import pytest

from tests.factories.inflection import (
    make_inflection_data,
    make_inflections,
    make_inflector,
    make_registry,
)


@pytest.fixture
def inflections():
    """Inflection mapping with loose and strict kinds."""
    return make_inflections()


@pytest.fixture
def registry(inflections):
    """Registry with en-US built from the sample inflections."""
    return make_registry("en-US", inflections)


@pytest.fixture
def inflector():
    """Inflector with default switches over en-US."""
    return make_inflector("en-US")


@pytest.fixture
def raising_inflector():
    """Inflector that raises on invalid patterns and options."""
    return make_inflector("en-US", raises=True)


@pytest.fixture
def loose_data():
    """Loose database with m, f, n of kind gender."""
    return make_inflection_data()


@pytest.fixture
def strict_data():
    """Strict database with m, f, n of kind gender."""
    return make_inflection_data(strict=True)
