"""
Service providers.

Factory functions wiring settings into clients and services.
"""

from infrastructure.services.providers import (
    get_settings,
    get_translation_service,
    get_weblate_client,
)

__all__ = [
    "get_settings",
    "get_translation_service",
    "get_weblate_client",
]
