"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    WeblateSettings: Weblate integration settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    token = settings.weblate.WEBLATE_API_TOKEN
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.integrations import WeblateSettings

__all__ = ["Settings", "WeblateSettings", "settings"]
