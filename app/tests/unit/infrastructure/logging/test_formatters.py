"""Unit tests for infrastructure.logging.formatters module."""

import pytest

from infrastructure.logging.formatters import (
    SENSITIVE_PATTERNS,
    mask_sensitive_data,
    truncate_large_values,
)


@pytest.mark.unit
class TestMaskSensitiveData:
    def test_masks_token_and_authorization(self, event_dict):
        event_dict["api_token"] = "abc"
        event_dict["Authorization"] = "Token abc"

        result = mask_sensitive_data()(None, "debug", event_dict)

        assert result["api_token"] == "***REDACTED***"
        assert result["Authorization"] == "***REDACTED***"
        assert result["url"] == event_dict["url"]
        assert result["status_code"] == 200

    def test_none_values_are_left_alone(self, event_dict):
        event_dict["token"] = None

        result = mask_sensitive_data()(None, "debug", event_dict)

        assert result["token"] is None

    def test_custom_mask_and_patterns(self, event_dict):
        event_dict["filename"] = "secret.xliff"

        processor = mask_sensitive_data(
            mask_value="[hidden]", additional_patterns=frozenset({"filename"})
        )
        result = processor(None, "info", event_dict)

        assert result["filename"] == "[hidden]"

    def test_patterns_cover_weblate_credentials(self):
        assert "token" in SENSITIVE_PATTERNS
        assert "authorization" in SENSITIVE_PATTERNS


@pytest.mark.unit
class TestTruncateLargeValues:
    def test_truncates_long_content(self, event_dict):
        event_dict["content"] = "x" * 50

        result = truncate_large_values(max_length=10)(None, "debug", event_dict)

        assert result["content"] == "x" * 10 + "...[truncated, 50 chars total]"

    def test_short_and_non_string_values_unchanged(self, event_dict):
        event_dict["content"] = "short"

        result = truncate_large_values(max_length=10)(None, "debug", event_dict)

        assert result["content"] == "short"
        assert result["status_code"] == 200
