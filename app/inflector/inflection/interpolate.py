"""Interpolation of inflection patterns.

A pattern is embedded in a translation string and picks one of its values
depending on an inflection option passed at render time::

    "Dear @{f:Lady|m:Sir|n:You|All}!"       unnamed pattern (loose kinds)
    "Dear @gender{f:Lady|m:Sir|n:You|All}!" named pattern (strict kind)
    "Dear @@{f:Lady|m:Sir}!"                escaped, rendered as "@{f:Lady|m:Sir}"

Inside a pattern, groups are separated with ``|``. A group is a
comma-separated list of tokens (``!`` negates a token) followed by ``:`` and
a value. The last group may be bare free text used when nothing matches.
A value of ``~`` renders the description of the matched token. Values may
hold ``%{name}`` or ``{{name}}`` placeholders; they are left as they are.
"""

import re
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Set

from inflector.inflection.data import InflectionData
from inflector.inflection.errors import (
    InflectionOptionIncorrect,
    InflectionOptionNotFound,
    InvalidInflectionToken,
    MisplacedInflectionToken,
)
from inflector.inflection.options import InflectionOptions
from inflector.inflection.registry import (
    InflectionRegistry,
    LocaleInflections,
    locale_key,
)
from inflector.logging import get_module_logger

logger = get_module_logger()

PATTERN = re.compile(r"(.?)@([^{@]*)\{((?:[^{}]|\{\{[^{}]*\}\}|\{[^{}]*\})+)\}")
GROUP = re.compile(r"(?:([^:|]+):+([^|]+))|([^:|]+)")
ESCAPES = ("@", "\\")
ESCAPE = "\\"
ESCAPE_VALUE = re.compile(r"\\([^\\])")
LOUD_MARKER = "~"
NAMED_MARKER = "@"
OPERATOR_MULTI = ","
OPERATOR_NOT = "!"

_UNSET = object()


@dataclass
class TokenGroup:
    """A ``tokens:value`` group of a pattern.

    Attributes:
        source: The raw token list (used in error reports).
        value: Replacement text of the group.
        tokens: Positive tokens.
        negatives: Negated tokens.
    """

    source: str
    value: str
    tokens: Set[str] = field(default_factory=set)
    negatives: Set[str] = field(default_factory=set)

    def matches(self, option: Optional[str]) -> bool:
        """Check whether the option selects this group.

        With no negated tokens the option must be one of the tokens. With
        exactly one negated token the option must differ from it and the
        positive tokens are not consulted. Groups with more negated tokens
        always match.
        """
        if not self.negatives:
            return option is not None and option in self.tokens
        if len(self.negatives) == 1:
            return option not in self.negatives
        return True


class PatternResolver:
    """Resolves a single pattern occurrence.

    Instances are short-lived: one per pattern found in a string.
    """

    def __init__(
        self,
        match: "re.Match[str]",
        inflections: LocaleInflections,
        switches: InflectionOptions,
        kinds: Mapping[str, Any],
    ):
        self.prefix = match.group(1)
        self.pattern = match.group(0)
        self.body = match.group(3)
        self.switches = switches
        self.kinds = kinds

        name = match.group(2)
        self.named = bool(name)
        self.database: InflectionData = (
            inflections.strict if self.named else inflections.loose
        )
        self.kind: Optional[str] = name or None
        self.default_token: Optional[str] = (
            self.database.get_default_token(self.kind) if self.named else None
        )
        self._option: Any = _UNSET
        self._requested: Any = None
        self._supplied = False

    @property
    def scope(self) -> Optional[str]:
        """Kind used to scope database lookups (only for named patterns)."""
        return self.kind if self.named else None

    def render(self) -> str:
        if self.prefix in ESCAPES:
            return self.pattern[1:]

        groups: List[TokenGroup] = []
        free_text = ""
        found: Optional[TokenGroup] = None
        option: Optional[str] = None

        for segment in GROUP.finditer(self.body):
            token_list, value, text = segment.groups()
            if token_list is None:
                free_text = text
                continue
            free_text = ""

            group = self._parse_group(token_list, value)
            groups.append(group)
            if self.kind is None:
                continue

            option = self._effective_option(token_list)
            if group.matches(option):
                found = group
                break

        if found is not None:
            return self.prefix + self._render_value(found.value, option)

        if self._excluded_default_applies():
            for group in groups:
                if group.matches(self.default_token):
                    return self.prefix + self._render_value(
                        group.value, self.default_token
                    )

        return self.prefix + free_text

    def _parse_group(self, token_list: str, value: str) -> TokenGroup:
        group = TokenGroup(source=token_list, value=value)

        for name in token_list.split(OPERATOR_MULTI):
            negative = name.startswith(OPERATOR_NOT)
            if negative:
                name = name[len(OPERATOR_NOT):]
            if not name:
                self._invalid_token(name)
                continue

            token = name
            if self.switches.aliased_patterns:
                token = self.database.get_true_token(name, self.scope)
                if token is None:
                    self._invalid_token(name)
                    continue

            kind = self.database.get_kind(token, self.scope)
            if kind is None:
                self._invalid_token(name)
                continue

            if self.kind is None:
                self.kind = kind
                self.default_token = self.database.get_default_token(kind)
            elif kind != self.kind:
                if self.switches.raises:
                    raise MisplacedInflectionToken(self.pattern, name, self.kind)
                logger.debug(
                    "inflection_token_misplaced",
                    pattern=self.pattern,
                    token=name,
                    kind=self.kind,
                )
                continue

            if negative:
                group.negatives.add(token)
            else:
                group.tokens.add(token)

        if not group.tokens and not group.negatives:
            self._invalid_token(token_list)

        return group

    def _invalid_token(self, token: str) -> None:
        if self.switches.raises:
            raise InvalidInflectionToken(self.pattern, token)
        logger.debug("inflection_token_invalid", pattern=self.pattern, token=token)

    def _option_name(self) -> Optional[str]:
        strict_name = NAMED_MARKER + self.kind
        if self.named and strict_name in self.kinds:
            return strict_name
        if self.kind in self.kinds:
            return self.kind
        return None

    def _effective_option(self, token_list: str) -> Optional[str]:
        """Work out the token selected by the caller for the bound kind.

        Computed once per pattern. A missing option falls back to the
        default token; an empty or unknown one does so only with
        ``unknown_defaults``.
        """
        if self._option is not _UNSET:
            return self._option

        option_name = self._option_name()
        self._supplied = option_name is not None
        if not self._supplied:
            option = self.default_token
        else:
            self._requested = self.kinds[option_name]
            requested = "" if self._requested is None else str(self._requested)
            option = self.database.get_true_token(requested, self.kind)
            if option is None and self.switches.unknown_defaults:
                option = self.default_token

        if option is None:
            if self.switches.raises:
                if self._supplied:
                    raise InflectionOptionIncorrect(
                        self.pattern, option_name, token_list, self._requested
                    )
                raise InflectionOptionNotFound(
                    self.pattern,
                    NAMED_MARKER + self.kind if self.named else self.kind,
                    token_list,
                )
            logger.debug(
                "inflection_option_missing",
                pattern=self.pattern,
                kind=self.kind,
                option=self._requested,
            )

        self._option = option
        return option

    def _excluded_default_applies(self) -> bool:
        if not self.switches.excluded_defaults:
            return False
        if self.kind is None or self.default_token is None or not self._supplied:
            return False
        requested = "" if self._requested is None else str(self._requested)
        return self.database.has_token(requested, self.kind)

    def _render_value(self, value: str, token: Optional[str]) -> str:
        if value == LOUD_MARKER:
            return self.database.get_description(token, self.kind) or ""
        if value.startswith(ESCAPE):
            return ESCAPE_VALUE.sub(r"\1", value, count=1)
        return value


class Interpolator:
    """Interpolates inflection patterns in translation strings.

    Attributes:
        registry: Registry holding the inflection databases.
        defaults: Process-wide switches; per-call ``inflector_*`` keys
            override them.
    """

    def __init__(
        self,
        registry: InflectionRegistry,
        defaults: Optional[InflectionOptions] = None,
    ):
        self.registry = registry
        self.defaults = defaults or InflectionOptions.from_settings()

    def interpolate(
        self,
        text: str,
        locale: Any,
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Interpolate all inflection patterns in a string.

        Args:
            text: String containing patterns.
            locale: Locale whose inflection databases are used.
            options: Kind options (``{"gender": "f"}`` or ``{"@gender": "f"}``)
                and optional ``inflector_*`` switch overrides.

        Returns:
            The string with every pattern replaced.

        Raises:
            InflectionPatternError: Only when the ``raises`` switch is on.
        """
        if not text or NAMED_MARKER not in text:
            return text

        switches, kinds = self.defaults.resolve(options)
        inflections = self.registry.get(locale)
        if inflections is None:
            logger.debug("inflection_locale_unknown", locale=locale_key(locale))
            inflections = LocaleInflections(locale)

        return PATTERN.sub(
            lambda m: PatternResolver(m, inflections, switches, kinds).render(),
            text,
        )

