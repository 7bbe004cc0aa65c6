"""Unit tests for infrastructure.services.providers."""

import pytest

from infrastructure.configuration import Settings, WeblateSettings
from infrastructure.services.providers import (
    get_settings,
    get_translation_service,
    get_weblate_client,
)
from integrations.weblate import WeblateClient
from modules.translations import TranslationService


def _settings(**weblate):
    return Settings(weblate=WeblateSettings(**weblate))


@pytest.mark.unit
class TestGetSettings:
    def test_returns_cached_instance(self):
        assert isinstance(get_settings(), Settings)
        assert get_settings() is get_settings()

    def test_cache_can_be_cleared(self):
        first = get_settings()
        get_settings.cache_clear()

        assert get_settings() is not first


@pytest.mark.unit
class TestGetWeblateClient:
    def test_builds_client_from_settings(self):
        client = get_weblate_client(
            _settings(
                WEBLATE_API_URL="https://weblate.example.com/api",
                WEBLATE_API_TOKEN="wlu_abc",
                WEBLATE_TIMEOUT=12,
            )
        )

        assert isinstance(client, WeblateClient)
        assert client.base_url == "https://weblate.example.com/api/"
        assert client.timeout == 12
        assert client._session.headers["Authorization"] == "Token wlu_abc"

    def test_requires_api_url(self):
        with pytest.raises(ValueError, match="WEBLATE_API_URL"):
            get_weblate_client(_settings(WEBLATE_API_URL=""))


@pytest.mark.unit
class TestGetTranslationService:
    def test_each_service_has_its_own_cache(self):
        settings = _settings(WEBLATE_API_URL="https://weblate.example.com/api/")

        first = get_translation_service(settings)
        second = get_translation_service(settings)

        assert isinstance(first, TranslationService)
        assert first.resolver.cache is not second.resolver.cache
