"""Fixtures for infrastructure.logging tests."""

import pytest


@pytest.fixture
def event_dict():
    return {
        "event": "translation_download_response",
        "url": "https://weblate.example.com/api/translations/app/messages/de/file/",
        "status_code": 200,
    }
