"""
Factory functions for process-wide services.

Settings are cached per process. Clients and services are built fresh on
each call so that every owner (a worker, a test) gets its own cache.
"""

from functools import lru_cache
from typing import Optional

from infrastructure.configuration import Settings
from integrations.weblate import WeblateClient
from modules.translations import TranslationService


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


def get_weblate_client(settings: Optional[Settings] = None) -> WeblateClient:
    """Build a Weblate client from the ``weblate`` settings section.

    Raises:
        ValueError: if WEBLATE_API_URL is not configured
    """
    settings = settings or get_settings()
    weblate = settings.weblate
    if not weblate.WEBLATE_API_URL:
        raise ValueError("WEBLATE_API_URL is not configured in settings.weblate")

    return WeblateClient(
        base_url=weblate.WEBLATE_API_URL,
        token=weblate.WEBLATE_API_TOKEN,
        timeout=weblate.WEBLATE_TIMEOUT,
        user_agent=weblate.WEBLATE_USER_AGENT,
    )


def get_translation_service(settings: Optional[Settings] = None) -> TranslationService:
    """Build a TranslationService with its own client and empty cache."""
    return TranslationService(get_weblate_client(settings))
