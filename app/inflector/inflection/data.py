"""Inflection data storage.

Keeps kinds, tokens, aliases and default tokens of a single locale and
answers the lookups needed by the interpolator and the query API.

The same class covers both configurations:

- loose (``strict=False``): one flat token namespace shared by all kinds;
  a kind passed to a lookup only works as an expectation filter.
- strict (``strict=True``): the kind is part of the token identity, so two
  kinds may declare tokens with the same name. Lookups without a kind miss.
"""

from dataclasses import dataclass
from typing import Any, Dict, Hashable, List, Optional, Tuple


class TokenRef(str):
    """Name of a true token, used as the value of aliases in raw listings."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"TokenRef({str.__repr__(self)})"


@dataclass(frozen=True)
class TokenRecord:
    """A single entry of the token table.

    Attributes:
        name: Token name.
        kind: Kind of the token (for aliases, the kind of the target).
        description: Description of a true token, None for aliases.
        target: Target true token of an alias, None for true tokens.
    """

    name: str
    kind: str
    description: Optional[str] = None
    target: Optional[str] = None

    @property
    def is_alias(self) -> bool:
        return self.target is not None


class InflectionData:
    """Inflection database for one locale.

    Attributes:
        locale: Locale the data belongs to (label only).
        strict: Whether kinds participate in token identity.
    """

    def __init__(self, locale: Any = None, strict: bool = False):
        self.locale = locale
        self.strict = strict
        self._tokens: Dict[Hashable, TokenRecord] = {}
        self._kinds: Dict[str, bool] = {}
        self._defaults: Dict[str, str] = {}

    def __repr__(self) -> str:
        mode = "strict" if self.strict else "loose"
        return (
            f"InflectionData(locale={getattr(self.locale, 'value', self.locale)}, {mode}, "
            f"kinds={len(self._kinds)}, tokens={len(self._tokens)})"
        )

    def _key(self, token: str, kind: str) -> Hashable:
        return (kind, token) if self.strict else token

    def _record(
        self, token: Optional[str], kind: Optional[str] = None
    ) -> Optional[TokenRecord]:
        if not token:
            return None
        if self.strict:
            if not kind:
                return None
            return self._tokens.get((kind, token))
        record = self._tokens.get(token)
        if record is None or (kind is not None and record.kind != kind):
            return None
        return record

    def _resolve(self, record: Optional[TokenRecord]) -> Optional[TokenRecord]:
        """Follow an alias to its true token (single hop)."""
        if record is None or not record.is_alias:
            return record
        target = self._tokens.get(self._key(record.target, record.kind))
        if target is None or target.is_alias or target.kind != record.kind:
            return None
        return target

    def _records(self, kind: Optional[str] = None) -> List[TokenRecord]:
        if kind is None:
            return [] if self.strict else list(self._tokens.values())
        return [r for r in self._tokens.values() if r.kind == kind]

    # Population

    def add_token(self, token: str, kind: str, description: Any) -> None:
        """Add a true token, overwriting any entry with the same identity.

        Args:
            token: Token name.
            kind: Kind of the token.
            description: Human readable description.
        """
        if not token or not kind:
            return
        self._tokens[self._key(token, kind)] = TokenRecord(
            name=token, kind=kind, description=str(description)
        )
        self._kinds[kind] = True

    def add_alias(
        self, name: Optional[str], target: Optional[str], kind: Optional[str] = None
    ) -> bool:
        """Add an alias pointing at a true token.

        Args:
            name: Alias name.
            target: True token the alias stands for.
            kind: Expected kind of the target (required in strict mode).

        Returns:
            True if the alias was added, False if the name or target is
            empty, the target is not a true token, or the kind disagrees.
        """
        if not name or not target:
            return False
        kind = kind or None
        record = self._record(target, kind)
        if record is None or record.is_alias:
            return False
        self._tokens[self._key(name, record.kind)] = TokenRecord(
            name=name, kind=record.kind, target=record.name
        )
        return True

    def set_default_token(self, kind: str, target: str) -> None:
        """Set the default token of a kind.

        The target may be an alias until validate_default_tokens() runs.
        """
        self._defaults[kind] = target

    def validate_default_tokens(self) -> Optional[Tuple[str, str]]:
        """Resolve all default tokens to true tokens.

        Returns:
            None if every default resolved, otherwise the first
            (kind, target) pair whose target is unknown.
        """
        for kind, target in list(self._defaults.items()):
            true_token = self.get_true_token(target, kind)
            if true_token is None:
                return kind, target
            self._defaults[kind] = true_token
        return None

    # Tests

    def has_token(self, token: Optional[str], kind: Optional[str] = None) -> bool:
        """Check if a token or an alias exists (optionally of the given kind)."""
        return self._record(token, kind) is not None

    def has_true_token(
        self, token: Optional[str], kind: Optional[str] = None
    ) -> bool:
        """Check if a token exists and is not an alias."""
        record = self._record(token, kind)
        return record is not None and not record.is_alias

    def has_alias(self, name: Optional[str], kind: Optional[str] = None) -> bool:
        """Check if a token exists and is an alias."""
        record = self._record(name, kind)
        return record is not None and record.is_alias

    def has_kind(self, kind: Optional[str]) -> bool:
        return kind is not None and kind in self._kinds

    def has_default_token(self, kind: Optional[str]) -> bool:
        return kind is not None and kind in self._defaults

    def is_empty(self) -> bool:
        """Check if no tokens are registered."""
        return not self._tokens

    # Readers

    def get_kind(
        self, token: Optional[str], kind: Optional[str] = None
    ) -> Optional[str]:
        """Get the kind of a token or an alias, or None if unknown."""
        record = self._record(token, kind)
        return record.kind if record else None

    def get_true_token(
        self, token: Optional[str], kind: Optional[str] = None
    ) -> Optional[str]:
        """Get the true token for a token name, resolving aliases.

        Returns:
            The token itself if it is a true token, the target if it is an
            alias, or None if it is unknown or not of the given kind.
        """
        record = self._resolve(self._record(token, kind))
        return record.name if record else None

    def get_target_for_alias(
        self, name: Optional[str], kind: Optional[str] = None
    ) -> Optional[str]:
        """Get the target of an alias, or None if it is not an alias."""
        record = self._record(name, kind)
        return record.target if record else None

    def get_description(
        self, token: Optional[str], kind: Optional[str] = None
    ) -> Optional[str]:
        """Get the description of a token; aliases use their target's."""
        record = self._resolve(self._record(token, kind))
        return record.description if record else None

    def get_default_token(self, kind: Optional[str]) -> Optional[str]:
        if kind is None:
            return None
        return self._defaults.get(kind)

    def get_kinds(self) -> List[str]:
        return list(self._kinds)

    def get_tokens(self, kind: Optional[str] = None) -> Dict[str, str]:
        """Read all tokens including aliases as ``{token: description}``."""
        result = {}
        for record in self._records(kind):
            description = self.get_description(record.name, record.kind)
            if description is not None:
                result[record.name] = description
        return result

    def get_true_tokens(self, kind: Optional[str] = None) -> Dict[str, str]:
        """Read true tokens as ``{token: description}``."""
        return {
            r.name: r.description for r in self._records(kind) if not r.is_alias
        }

    def get_aliases(self, kind: Optional[str] = None) -> Dict[str, str]:
        """Read aliases as ``{alias: target}``."""
        return {r.name: r.target for r in self._records(kind) if r.is_alias}

    def get_raw_tokens(self, kind: Optional[str] = None) -> Dict[str, str]:
        """Read tokens so that true tokens and aliases can be told apart.

        True tokens map to their description, aliases to a TokenRef naming
        the target.
        """
        return {
            r.name: TokenRef(r.target) if r.is_alias else r.description
            for r in self._records(kind)
        }
