import json

import pytest
from unittest.mock import MagicMock

from integrations.weblate import WeblateClient, WeblateResponse
from modules.translations import Component, Translation

TRANSLATIONS_URL = (
    "https://weblate.example.com/api/components/app/messages/translations/"
)
DE_FILE_URL = "https://weblate.example.com/api/translations/app/messages/de/file/"


@pytest.fixture
def component():
    return Component(slug="app-messages", translations_url=TRANSLATIONS_URL)


@pytest.fixture
def translation():
    return Translation(
        source_language="en",
        language_code="de",
        filename="app.xliff",
        file_url=DE_FILE_URL,
    )


@pytest.fixture
def make_response():
    """Build WeblateResponse objects from a payload or a raw body."""

    def _make(status_code=200, payload=None, content=None, url=None, headers=None):
        if content is None:
            content = json.dumps(payload) if payload is not None else ""
        return WeblateResponse(
            status_code=status_code,
            content=content,
            url=url or TRANSLATIONS_URL,
            headers=headers or {},
        )

    return _make


@pytest.fixture
def mock_client():
    return MagicMock(spec=WeblateClient)
