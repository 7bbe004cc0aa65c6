"""Weblate translation client configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.integrations import WeblateSettings


class Settings(BaseSettings):
    """Application configuration settings - main aggregator.

    Aggregates the domain-specific settings into a single configuration
    object. Integration sections are instantiated automatically unless an
    override is passed in.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: Deployment environment name (development, staging, production)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        api_url = settings.weblate.WEBLATE_API_URL

        if settings.is_production:
            # Production-specific logic...
        ```
    """

    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    weblate: WeblateSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "weblate": WeblateSettings,
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
