"""Inflection switches.

The switches have process-wide defaults (taken from settings) that can be
overridden per call by passing ``inflector_<switch>`` keys together with the
inflection options, e.g. ``{"gender": "f", "inflector_raises": True}``.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel

from inflector.configuration import InflectionSettings, settings

OVERRIDE_PREFIX = "inflector_"


class SwitchOverrides(BaseModel):
    """Per-call switch values; None leaves the default in place."""

    raises: Optional[bool] = None
    unknown_defaults: Optional[bool] = None
    excluded_defaults: Optional[bool] = None
    aliased_patterns: Optional[bool] = None


@dataclass(frozen=True)
class InflectionOptions:
    """Switches controlling pattern interpolation.

    Attributes:
        raises: Raise on invalid or misplaced tokens and on unusable options
            instead of silently skipping them.
        unknown_defaults: Use the default token of a kind when the given
            option is empty or unknown.
        excluded_defaults: When a valid option has no group in a pattern,
            use the value of the group matching the default token instead of
            the free text.
        aliased_patterns: Resolve aliases used as tokens inside patterns.
    """

    raises: bool = False
    unknown_defaults: bool = True
    excluded_defaults: bool = False
    aliased_patterns: bool = False

    @classmethod
    def from_settings(
        cls, source: Optional[InflectionSettings] = None
    ) -> "InflectionOptions":
        """Build options from InflectionSettings (defaults to global settings)."""
        source = source or settings.inflection
        return cls(
            raises=source.raises,
            unknown_defaults=source.unknown_defaults,
            excluded_defaults=source.excluded_defaults,
            aliased_patterns=source.aliased_patterns,
        )

    @classmethod
    def reserved_keys(cls) -> Tuple[str, ...]:
        """Per-call override keys, e.g. ``inflector_raises``."""
        return tuple(f"{OVERRIDE_PREFIX}{f.name}" for f in fields(cls))

    def resolve(
        self, options: Optional[Mapping[str, Any]] = None
    ) -> Tuple["InflectionOptions", Dict[str, Any]]:
        """Split per-call options into effective switches and kind values.

        Override keys set to None leave the default untouched. Other values
        are read like the boolean settings fields, so ``"false"`` is False.
        The caller's mapping is not modified.

        Args:
            options: Mapping of kind names (and override keys) to values.

        Returns:
            Tuple of (effective switches, remaining kind options).

        Raises:
            pydantic.ValidationError: If an override has no boolean reading.
        """
        options = options or {}
        raw = {}
        kinds = {}
        switch_names = {f.name for f in fields(self)}
        for key, value in options.items():
            if isinstance(key, str) and key.startswith(OVERRIDE_PREFIX):
                name = key[len(OVERRIDE_PREFIX):]
                if name in switch_names:
                    raw[name] = value
                    continue
            kinds[key] = value
        overrides = SwitchOverrides.model_validate(raw).model_dump(exclude_none=True)
        effective = replace(self, **overrides) if overrides else self
        return effective, kinds
