"""Builds inflection databases from translation data.

Inflection data lives in the ``i18n.inflections`` section of a locale's
translations::

    i18n:
      inflections:
        gender:
          m: male
          f: female
          n: neuter
          masculine: "@m"
          default: n
        "@gender":
          m: male

Kinds prefixed with ``@`` go to the strict database. Values prefixed with
``@`` declare aliases, ``default`` names the default token of a kind.
"""

from typing import Any, Dict, Mapping, Optional

from inflector.inflection.data import InflectionData
from inflector.inflection.errors import (
    BadInflectionAlias,
    BadInflectionKind,
    BadInflectionToken,
    DuplicatedInflectionToken,
)
from inflector.inflection.registry import LocaleInflections, locale_key
from inflector.logging import get_module_logger

logger = get_module_logger()

NAMED_MARKER = "@"
ALIAS_MARKER = "@"
DEFAULT_TOKEN = "default"


def _name(value: Any) -> str:
    return "" if value is None else str(value)


class InflectionDataBuilder:
    """Builds the loose and strict databases of a single locale.

    Each call to build() starts from fresh databases, so a failing build
    never touches data that is already in use.

    Attributes:
        locale: Locale the data is built for.
    """

    def __init__(self, locale: Any):
        self.locale = locale

    def build(self, inflections: Optional[Mapping[str, Any]]) -> LocaleInflections:
        """Build databases from an ``inflections`` mapping.

        Args:
            inflections: Mapping of kind name to ``{token: description}``.

        Returns:
            LocaleInflections with populated loose and strict databases.

        Raises:
            BadInflectionKind: If a kind name is empty.
            BadInflectionToken: If a token name or description is empty.
            BadInflectionAlias: If an alias or default points to nothing.
            DuplicatedInflectionToken: If a loose token is declared twice.
        """
        loose = InflectionData(self.locale)
        strict = InflectionData(self.locale, strict=True)

        if not inflections:
            return LocaleInflections(self.locale, loose, strict)

        if not isinstance(inflections, Mapping):
            logger.warning(
                "invalid_inflections_format",
                locale=locale_key(self.locale),
                expected="dict",
            )
            return LocaleInflections(self.locale, loose, strict)

        for raw_kind, entries in inflections.items():
            kind = _name(raw_kind)
            database = loose
            if kind.startswith(NAMED_MARKER):
                kind = kind[len(NAMED_MARKER):]
                database = strict
            if not kind:
                raise BadInflectionKind(self.locale, _name(raw_kind))
            if not isinstance(entries, Mapping):
                logger.warning(
                    "invalid_kind_format",
                    locale=locale_key(self.locale),
                    kind=_name(raw_kind),
                    expected="dict",
                )
                continue
            self._load_kind(database, kind, entries)

        for database in (loose, strict):
            failure = database.validate_default_tokens()
            if failure is not None:
                kind, target = failure
                raise BadInflectionAlias(self.locale, DEFAULT_TOKEN, kind, target)

        logger.info(
            "inflection_data_built",
            locale=locale_key(self.locale),
            kinds=loose.get_kinds(),
            strict_kinds=strict.get_kinds(),
        )
        return LocaleInflections(self.locale, loose, strict)

    def _load_kind(
        self, database: InflectionData, kind: str, entries: Mapping[Any, Any]
    ) -> None:
        aliases: Dict[str, str] = {}

        for raw_token, raw_value in entries.items():
            token = _name(raw_token)
            value = _name(raw_value)
            if not token:
                raise BadInflectionToken(self.locale, token, kind, raw_value)

            if token == DEFAULT_TOKEN:
                target = value
                if target.startswith(ALIAS_MARKER):
                    target = target[len(ALIAS_MARKER):]
                if not target:
                    raise BadInflectionAlias(self.locale, token, kind, value)
                database.set_default_token(kind, target)
                continue

            if not value or value == ALIAS_MARKER:
                raise BadInflectionToken(self.locale, token, kind, raw_value)

            if value.startswith(ALIAS_MARKER):
                aliases[token] = value[len(ALIAS_MARKER):]
                continue

            self._check_duplicate(database, token, kind)
            database.add_token(token, kind, value)

        for name in aliases:
            target = self._follow_aliases(aliases, name, kind)
            self._check_duplicate(database, name, kind)
            if not database.add_alias(name, target, kind):
                raise BadInflectionAlias(self.locale, name, kind, aliases[name])

    def _follow_aliases(self, aliases: Dict[str, str], name: str, kind: str) -> str:
        """Resolve an alias declared in terms of other aliases of the same kind."""
        seen = {name}
        target = aliases[name]
        while target in aliases:
            if target in seen:
                raise BadInflectionAlias(self.locale, name, kind, target)
            seen.add(target)
            target = aliases[target]
        return target

    def _check_duplicate(
        self, database: InflectionData, token: str, kind: str
    ) -> None:
        if database.strict:
            return
        original_kind = database.get_kind(token)
        if original_kind is not None and original_kind != kind:
            raise DuplicatedInflectionToken(self.locale, token, kind, original_kind)
