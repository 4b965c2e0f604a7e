"""Inflection patterns for translation strings.

Subpackages:
- inflection: inflection databases, pattern interpolation and queries
- i18n: YAML translation catalogs rendered through the inflector
- configuration: settings loaded from the environment
- logging: structlog setup
"""
