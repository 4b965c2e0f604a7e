"""Inflection patterns for translation strings.

Main components:
- data: InflectionData, per-locale store of kinds, tokens, aliases, defaults
- builder: InflectionDataBuilder, turns ``i18n.inflections`` data into databases
- registry: InflectionRegistry, per-locale loose and strict databases
- interpolate: Interpolator, renders ``@{...}`` and ``@kind{...}`` patterns
- options: InflectionOptions, interpolation switches
- api: Inflector and StrictInflector, the query interface
- errors: exception taxonomy
"""

from inflector.inflection.api import Inflector, StrictInflector
from inflector.inflection.builder import InflectionDataBuilder
from inflector.inflection.data import InflectionData, TokenRecord, TokenRef
from inflector.inflection.errors import (
    BadInflectionAlias,
    BadInflectionKind,
    BadInflectionToken,
    DuplicatedInflectionToken,
    InflectionConfigurationError,
    InflectionError,
    InflectionOptionIncorrect,
    InflectionOptionNotFound,
    InflectionPatternError,
    InvalidInflectionOption,
    InvalidInflectionToken,
    MisplacedInflectionToken,
)
from inflector.inflection.interpolate import Interpolator
from inflector.inflection.options import InflectionOptions
from inflector.inflection.registry import InflectionRegistry, LocaleInflections

__all__ = [
    "Inflector",
    "StrictInflector",
    "Interpolator",
    "InflectionOptions",
    "InflectionData",
    "InflectionDataBuilder",
    "InflectionRegistry",
    "LocaleInflections",
    "TokenRecord",
    "TokenRef",
    "InflectionError",
    "InflectionPatternError",
    "InvalidInflectionToken",
    "MisplacedInflectionToken",
    "InvalidInflectionOption",
    "InflectionOptionNotFound",
    "InflectionOptionIncorrect",
    "InflectionConfigurationError",
    "DuplicatedInflectionToken",
    "BadInflectionAlias",
    "BadInflectionToken",
    "BadInflectionKind",
]
