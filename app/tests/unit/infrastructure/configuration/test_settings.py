"""Unit tests for infrastructure.configuration settings."""

import pytest
from pydantic import ValidationError

from infrastructure.configuration import Settings, WeblateSettings


@pytest.mark.unit
class TestWeblateSettings:
    def test_defaults(self, monkeypatch):
        for name in ("WEBLATE_API_URL", "WEBLATE_API_TOKEN", "WEBLATE_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)

        weblate = WeblateSettings(_env_file=None)

        assert weblate.WEBLATE_API_URL == ""
        assert weblate.WEBLATE_API_TOKEN is None
        assert weblate.WEBLATE_TIMEOUT == 30
        assert weblate.WEBLATE_USER_AGENT == "weblate-translation-client/1.0"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("WEBLATE_API_URL", "https://weblate.example.com/api/")
        monkeypatch.setenv("WEBLATE_API_TOKEN", "wlu_abc")
        monkeypatch.setenv("WEBLATE_TIMEOUT", "10")

        weblate = WeblateSettings(_env_file=None)

        assert weblate.WEBLATE_API_URL == "https://weblate.example.com/api/"
        assert weblate.WEBLATE_API_TOKEN == "wlu_abc"
        assert weblate.WEBLATE_TIMEOUT == 10

    def test_api_url_gets_trailing_slash(self):
        weblate = WeblateSettings(WEBLATE_API_URL="https://weblate.example.com/api")

        assert weblate.WEBLATE_API_URL == "https://weblate.example.com/api/"

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            WeblateSettings(WEBLATE_TIMEOUT=0)


@pytest.mark.unit
class TestSettings:
    def test_instantiates_weblate_section(self):
        settings = Settings()

        assert isinstance(settings.weblate, WeblateSettings)

    def test_accepts_section_override(self):
        weblate = WeblateSettings(WEBLATE_API_URL="https://x/api/")

        settings = Settings(weblate=weblate)

        assert settings.weblate is weblate

    @pytest.mark.parametrize(
        "environment,expected",
        [("production", True), ("Production", True), ("development", False)],
    )
    def test_is_production(self, monkeypatch, environment, expected):
        monkeypatch.setenv("ENVIRONMENT", environment)

        assert Settings().is_production is expected
