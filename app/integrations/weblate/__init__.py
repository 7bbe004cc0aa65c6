"""Weblate REST API integration."""

from integrations.weblate.client import WeblateClient, WeblateResponse
from integrations.weblate.errors import (
    DecodeError,
    TransportError,
    UnexpectedStatusError,
    WeblateError,
)

__all__ = [
    "WeblateClient",
    "WeblateResponse",
    "WeblateError",
    "TransportError",
    "UnexpectedStatusError",
    "DecodeError",
]
