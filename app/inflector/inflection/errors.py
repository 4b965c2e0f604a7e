"""Custom exceptions for the inflection system.

Two families are defined:

- Pattern errors are raised while interpolating a translation string and
  only when the ``raises`` switch is on.
- Configuration errors are raised while building inflection databases from
  translation data and always abort the load for that locale.
"""

from typing import Any, Optional


def _label(locale: Any) -> str:
    return str(getattr(locale, "value", locale))


class InflectionError(Exception):
    """Base exception for all inflection errors.

    Example:
        try:
            inflector.interpolate(text, locale, {"inflector_raises": True})
        except InflectionError as e:
            logger.error("inflection_error", error=str(e))
    """

    pass


class InflectionPatternError(InflectionError):
    """Base exception for errors found in a pattern.

    Attributes:
        pattern: The whole pattern text (e.g. ``@{f:Lady|m:Sir}``).
        token: The token that caused the error, if any.
    """

    def __init__(self, pattern: str, token: Optional[str] = None):
        self.pattern = pattern
        self.token = token
        super().__init__(self._message())

    def _message(self) -> str:
        return f"token {self.token!r} in pattern {self.pattern!r}"


class InvalidInflectionToken(InflectionPatternError):
    """Raised when a pattern references an empty or unknown token.

    Example:
        >>> interpolator.interpolate("@{o:BAD|All}", locale, {"inflector_raises": True})
        Traceback (most recent call last):
        ...
        InvalidInflectionToken: invalid token 'o' in pattern '@{o:BAD|All}'
    """

    def _message(self) -> str:
        return f"invalid token {self.token!r} in pattern {self.pattern!r}"


class MisplacedInflectionToken(InflectionPatternError):
    """Raised when an unnamed pattern mixes tokens of different kinds.

    Attributes:
        kind: The kind the pattern was bound to before the misplaced token.
    """

    def __init__(self, pattern: str, token: Optional[str], kind: Optional[str]):
        self.kind = kind
        super().__init__(pattern, token)

    def _message(self) -> str:
        return (
            f"token {self.token!r} in pattern {self.pattern!r} "
            f"is not a kind of {self.kind!r}"
        )


class InvalidInflectionOption(InflectionPatternError):
    """Base exception for option values that cannot be used.

    Attributes:
        kind: The option name (kind) that was looked up.
        option: The option value given by the caller (None when absent).
    """

    def __init__(
        self,
        pattern: str,
        kind: Optional[str],
        token: Optional[str],
        option: Any = None,
    ):
        self.kind = kind
        self.option = option
        super().__init__(pattern, token)


class InflectionOptionNotFound(InvalidInflectionOption):
    """Raised when no option was given for a kind and no default exists."""

    def _message(self) -> str:
        return (
            f"option {self.kind!r} required by pattern {self.pattern!r} "
            f"was not found"
        )


class InflectionOptionIncorrect(InvalidInflectionOption):
    """Raised when an option was given but names no known token of the kind."""

    def _message(self) -> str:
        return (
            f"value {self.option!r} of option {self.kind!r} "
            f"required by pattern {self.pattern!r} is not a valid token"
        )


class InflectionConfigurationError(InflectionError):
    """Base exception for errors in inflection configuration data.

    Attributes:
        locale: Locale whose data is being loaded.
        token: Token being processed, if any.
        kind: Kind being processed, if any.
    """

    def __init__(
        self,
        locale: Any,
        token: Optional[str] = None,
        kind: Optional[str] = None,
    ):
        self.locale = locale
        self.token = token
        self.kind = kind
        super().__init__(self._message())

    def _message(self) -> str:
        return f"bad inflection data for locale {_label(self.locale)}"


class DuplicatedInflectionToken(InflectionConfigurationError):
    """Raised when the same token is declared in two kinds of a loose database.

    Attributes:
        original_kind: Kind the token was first declared in.
    """

    def __init__(
        self,
        locale: Any,
        token: Optional[str],
        kind: Optional[str],
        original_kind: Optional[str],
    ):
        self.original_kind = original_kind
        super().__init__(locale, token, kind)

    def _message(self) -> str:
        return (
            f"token {self.token!r} of kind {self.kind!r} in locale {_label(self.locale)} "
            f"was already declared in kind {self.original_kind!r}"
        )


class BadInflectionAlias(InflectionConfigurationError):
    """Raised when an alias or a default token points at an unknown token.

    Attributes:
        target: The target token that could not be found.
    """

    def __init__(
        self,
        locale: Any,
        token: Optional[str],
        kind: Optional[str],
        target: Optional[str],
    ):
        self.target = target
        super().__init__(locale, token, kind)

    def _message(self) -> str:
        return (
            f"alias {self.token!r} of kind {self.kind!r} in locale {_label(self.locale)} "
            f"points to an unknown token {self.target!r}"
        )


class BadInflectionToken(InflectionConfigurationError):
    """Raised when a token has an empty name or an empty description.

    Attributes:
        description: The offending description value.
    """

    def __init__(
        self,
        locale: Any,
        token: Optional[str],
        kind: Optional[str],
        description: Any = None,
    ):
        self.description = description
        super().__init__(locale, token, kind)

    def _message(self) -> str:
        return (
            f"token {self.token!r} of kind {self.kind!r} in locale {_label(self.locale)} "
            f"has a bad description {self.description!r}"
        )


class BadInflectionKind(InflectionConfigurationError):
    """Raised when a kind name is empty or malformed."""

    def __init__(self, locale: Any, kind: Optional[str]):
        super().__init__(locale, None, kind)

    def _message(self) -> str:
        return f"bad kind name {self.kind!r} in locale {_label(self.locale)}"
