"""Query interface over the inflection databases.

``Inflector`` works on the loose databases; a kind written as ``@gender``
routes a call to the strict database instead. ``Inflector.strict`` exposes
the strict databases directly, where a kind is always required.

Example:
    inflector = Inflector(registry, default_locale=Locale.EN_US)
    inflector.tokens("gender")            # {"m": "male", "masculine": "male", ...}
    inflector.true_token("masculine")     # "m"
    inflector.strict.has_token("m", "gender")
    inflector.interpolate("Dear @{f:Lady|m:Sir}", Locale.EN_US, {"gender": "m"})
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Tuple

from inflector.inflection.data import InflectionData
from inflector.inflection.interpolate import NAMED_MARKER, Interpolator
from inflector.inflection.options import InflectionOptions
from inflector.inflection.registry import InflectionRegistry


class InflectionQueries(ABC):
    """Read-only queries shared by the loose and the strict interfaces.

    Attributes:
        registry: Registry holding the inflection databases.
        default_locale: Locale used when a call does not name one.
    """

    def __init__(self, registry: InflectionRegistry, default_locale: Any = None):
        self.registry = registry
        self.default_locale = default_locale

    @abstractmethod
    def _lookup(
        self, kind: Optional[str], locale: Any
    ) -> Tuple[Optional[InflectionData], Optional[str]]:
        """Pick the database for a kind and strip its strict marker."""

    def _locale(self, locale: Any) -> Any:
        return self.default_locale if locale is None else locale

    def kinds(self, locale: Any = None) -> List[str]:
        database, _ = self._lookup(None, locale)
        return database.get_kinds() if database else []

    def has_kind(self, kind: Optional[str], locale: Any = None) -> bool:
        database, kind = self._lookup(kind, locale)
        return database.has_kind(kind) if database else False

    def tokens(self, kind: Optional[str] = None, locale: Any = None) -> Dict[str, str]:
        """List tokens and aliases with their descriptions."""
        database, kind = self._lookup(kind, locale)
        return database.get_tokens(kind) if database else {}

    def true_tokens(
        self, kind: Optional[str] = None, locale: Any = None
    ) -> Dict[str, str]:
        database, kind = self._lookup(kind, locale)
        return database.get_true_tokens(kind) if database else {}

    def raw_tokens(
        self, kind: Optional[str] = None, locale: Any = None
    ) -> Dict[str, str]:
        """List tokens with descriptions and aliases with TokenRef targets."""
        database, kind = self._lookup(kind, locale)
        return database.get_raw_tokens(kind) if database else {}

    def aliases(self, kind: Optional[str] = None, locale: Any = None) -> Dict[str, str]:
        database, kind = self._lookup(kind, locale)
        return database.get_aliases(kind) if database else {}

    def default_token(self, kind: Optional[str], locale: Any = None) -> Optional[str]:
        database, kind = self._lookup(kind, locale)
        return database.get_default_token(kind) if database else None

    def has_token(
        self, token: Optional[str], kind: Optional[str] = None, locale: Any = None
    ) -> bool:
        database, kind = self._lookup(kind, locale)
        return database.has_token(token, kind) if database else False

    def has_true_token(
        self, token: Optional[str], kind: Optional[str] = None, locale: Any = None
    ) -> bool:
        database, kind = self._lookup(kind, locale)
        return database.has_true_token(token, kind) if database else False

    def has_alias(
        self, token: Optional[str], kind: Optional[str] = None, locale: Any = None
    ) -> bool:
        database, kind = self._lookup(kind, locale)
        return database.has_alias(token, kind) if database else False

    def true_token(
        self, token: Optional[str], kind: Optional[str] = None, locale: Any = None
    ) -> Optional[str]:
        """Resolve a token or an alias to its true token."""
        database, kind = self._lookup(kind, locale)
        return database.get_true_token(token, kind) if database else None

    def kind(
        self, token: Optional[str], kind: Optional[str] = None, locale: Any = None
    ) -> Optional[str]:
        """Get the kind of a token; a given kind works as a filter."""
        database, kind = self._lookup(kind, locale)
        return database.get_kind(token, kind) if database else None

    def token_description(
        self, token: Optional[str], kind: Optional[str] = None, locale: Any = None
    ) -> Optional[str]:
        database, kind = self._lookup(kind, locale)
        return database.get_description(token, kind) if database else None


class StrictInflector(InflectionQueries):
    """Queries over the strict (kind-scoped) databases.

    Every token lookup needs a kind; calls without one miss.
    """

    def _lookup(self, kind, locale):
        if kind is not None and kind.startswith(NAMED_MARKER):
            kind = kind[len(NAMED_MARKER):]
        return self.registry.get_database(self._locale(locale), strict=True), kind


class Inflector(InflectionQueries):
    """Main entry point: loose queries, strict queries and interpolation.

    Attributes:
        interpolator: Interpolator bound to the same registry.
        strict: StrictInflector bound to the same registry.
    """

    def __init__(
        self,
        registry: Optional[InflectionRegistry] = None,
        options: Optional[InflectionOptions] = None,
        default_locale: Any = None,
    ):
        super().__init__(registry or InflectionRegistry(), default_locale)
        self.interpolator = Interpolator(self.registry, options)
        self.strict = StrictInflector(self.registry, default_locale)

    @property
    def options(self) -> InflectionOptions:
        """Process-wide switches used when a call does not override them."""
        return self.interpolator.defaults

    @options.setter
    def options(self, value: InflectionOptions) -> None:
        self.interpolator.defaults = value

    def set_default_locale(self, locale: Any) -> None:
        self.default_locale = locale
        self.strict.default_locale = locale

    def _lookup(self, kind, locale):
        strict = kind is not None and kind.startswith(NAMED_MARKER)
        if strict:
            kind = kind[len(NAMED_MARKER):]
        return self.registry.get_database(self._locale(locale), strict=strict), kind

    def interpolate(
        self,
        text: str,
        locale: Any = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Interpolate inflection patterns (see Interpolator.interpolate)."""
        return self.interpolator.interpolate(text, self._locale(locale), options)
