"""Inflection feature settings."""

from pydantic import Field

from inflector.configuration.base import FeatureSettings


class InflectionSettings(FeatureSettings):
    """Process-wide defaults of the inflection switches.

    Each switch can still be overridden per call by passing the matching
    ``inflector_*`` key together with the interpolation options.

    Environment Variables:
        INFLECTOR_RAISES: Raise on invalid tokens and options (default: False)
        INFLECTOR_UNKNOWN_DEFAULTS: Use the default token of a kind when the
            given option is empty or unknown (default: True)
        INFLECTOR_EXCLUDED_DEFAULTS: Use the value of the default token's group
            when a valid option has no group in a pattern (default: False)
        INFLECTOR_ALIASED_PATTERNS: Resolve aliases used inside patterns
            (default: False)

    Example:
        ```python
        from inflector.configuration import settings

        if settings.inflection.raises:
            # Strict rendering...
        ```
    """

    raises: bool = Field(default=False, alias="INFLECTOR_RAISES")
    unknown_defaults: bool = Field(default=True, alias="INFLECTOR_UNKNOWN_DEFAULTS")
    excluded_defaults: bool = Field(
        default=False, alias="INFLECTOR_EXCLUDED_DEFAULTS"
    )
    aliased_patterns: bool = Field(
        default=False, alias="INFLECTOR_ALIASED_PATTERNS"
    )
