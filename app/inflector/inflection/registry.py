"""Registry of inflection databases.

Holds the loose and the strict database of every inflected locale. A locale's
pair is always replaced as a whole, so readers never see a half-built pair.
"""

import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from inflector.inflection.data import InflectionData
from inflector.logging import get_module_logger

logger = get_module_logger()


def locale_key(locale: Any) -> Any:
    """Normalize Locale enum members and plain strings to the same key."""
    return getattr(locale, "value", locale)


@dataclass(frozen=True)
class LocaleInflections:
    """Loose and strict inflection databases of one locale."""

    locale: Any
    loose: InflectionData = field(default=None)
    strict: InflectionData = field(default=None)

    def __post_init__(self):
        if self.loose is None:
            object.__setattr__(self, "loose", InflectionData(self.locale))
        if self.strict is None:
            object.__setattr__(
                self, "strict", InflectionData(self.locale, strict=True)
            )

    def is_empty(self) -> bool:
        return self.loose.is_empty() and self.strict.is_empty()


class InflectionRegistry:
    """Thread-safe registry of per-locale inflection databases.

    Lifecycle per locale: ``new_database`` or ``replace`` creates the entry,
    ``replace`` swaps in a freshly built pair, ``delete_database`` drops it.
    Lookups for unknown locales return None.

    Attributes:
        _databases: Dict mapping locale to its LocaleInflections.
        _lock: Threading lock guarding mutations.
    """

    def __init__(self):
        """Initialize the registry with no locales."""
        self._databases: Dict[Any, LocaleInflections] = {}
        self._lock = threading.Lock()

    def __contains__(self, locale: Any) -> bool:
        return self.has_locale(locale)

    def has_locale(self, locale: Any) -> bool:
        if locale is None or locale == "":
            return False
        with self._lock:
            return locale_key(locale) in self._databases

    def locales(self) -> List[Any]:
        with self._lock:
            return list(self._databases)

    def get(self, locale: Any) -> Optional[LocaleInflections]:
        """Get the database pair of a locale, or None if not registered."""
        with self._lock:
            return self._databases.get(locale_key(locale))

    def get_database(
        self, locale: Any, strict: bool = False
    ) -> Optional[InflectionData]:
        """Get the loose (or strict) database of a locale."""
        pair = self.get(locale)
        if pair is None:
            return None
        return pair.strict if strict else pair.loose

    def new_database(self, locale: Any) -> LocaleInflections:
        """Register an empty database pair for a locale, replacing any existing one."""
        return self.replace(LocaleInflections(locale))

    def add_database(self, database: InflectionData) -> InflectionData:
        """Register an existing database under its own locale.

        The database goes into the loose or strict slot depending on its
        mode; the other slot of the locale is kept (or created empty).

        Raises:
            ValueError: If the database has no locale.
        """
        if database.locale is None or database.locale == "":
            raise ValueError("Inflection database must have a locale")
        with self._lock:
            current = self._databases.get(
                locale_key(database.locale)
            ) or LocaleInflections(database.locale)
            if database.strict:
                pair = LocaleInflections(database.locale, current.loose, database)
            else:
                pair = LocaleInflections(database.locale, database, current.strict)
            self._databases[locale_key(database.locale)] = pair
        logger.info(
            "inflection_database_added",
            locale=locale_key(database.locale),
            strict=database.strict,
        )
        return database

    def replace(self, inflections: LocaleInflections) -> LocaleInflections:
        """Swap in a complete database pair for its locale."""
        with self._lock:
            self._databases[locale_key(inflections.locale)] = inflections
        logger.info(
            "inflection_databases_replaced",
            locale=locale_key(inflections.locale),
            kinds=len(inflections.loose.get_kinds()),
            strict_kinds=len(inflections.strict.get_kinds()),
        )
        return inflections

    def delete_database(self, locale: Any) -> None:
        """Drop both databases of a locale (no-op if unknown)."""
        with self._lock:
            removed = self._databases.pop(locale_key(locale), None)
        if removed is not None:
            logger.info("inflection_databases_deleted", locale=locale_key(locale))

    def clear(self) -> None:
        with self._lock:
            self._databases.clear()
