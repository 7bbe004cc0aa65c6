"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.weblate import WeblateSettings

__all__ = [
    "WeblateSettings",
]
