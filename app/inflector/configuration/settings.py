"""Inflector configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from inflector.configuration.features import (
    InflectionSettings,
    TranslationSettings,
)


class Settings(BaseSettings):
    """Inflector configuration settings - main aggregator.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: Deployment environment; "production" enables JSON logs

    Example:
        ```python
        from inflector.configuration import settings

        if settings.inflection.unknown_defaults:
            ...
        translations_dir = settings.translations.translations_dir
        ```
    """

    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    inflection: InflectionSettings
    translations: TranslationSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "inflection": InflectionSettings,
            "translations": TranslationSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
