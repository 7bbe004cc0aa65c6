"""Weblate integration settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import IntegrationSettings


class WeblateSettings(IntegrationSettings):
    """Weblate REST API configuration.

    Environment Variables:
        WEBLATE_API_URL: Base URL of the Weblate API (e.g. https://hosted.weblate.org/api/)
        WEBLATE_API_TOKEN: API token sent as ``Authorization: Token <value>``
        WEBLATE_TIMEOUT: Request timeout in seconds (default: 30)
        WEBLATE_USER_AGENT: User-Agent header sent with every request

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        api_url = settings.weblate.WEBLATE_API_URL
        timeout = settings.weblate.WEBLATE_TIMEOUT
        ```
    """

    WEBLATE_API_URL: str = Field(default="", alias="WEBLATE_API_URL")
    WEBLATE_API_TOKEN: str | None = Field(default=None, alias="WEBLATE_API_TOKEN")
    WEBLATE_TIMEOUT: int = Field(
        default=30,
        alias="WEBLATE_TIMEOUT",
        description="Request timeout in seconds",
    )
    WEBLATE_USER_AGENT: str = Field(
        default="weblate-translation-client/1.0", alias="WEBLATE_USER_AGENT"
    )

    @field_validator("WEBLATE_API_URL")
    @classmethod
    def ensure_trailing_slash(cls, value: str) -> str:
        """Relative endpoints are joined onto the base URL, so it must end in '/'."""
        if value and not value.endswith("/"):
            return value + "/"
        return value

    @field_validator("WEBLATE_TIMEOUT")
    @classmethod
    def positive_timeout(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("WEBLATE_TIMEOUT must be a positive number of seconds")
        return value
