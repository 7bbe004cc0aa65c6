"""Unit tests for modules.translations.models."""

import pytest

from modules.translations.models import (
    Component,
    Translation,
    component_from_dict,
    translation_from_dict,
)


@pytest.mark.unit
class TestTranslationFromDict:
    def test_full_payload(self):
        data = {
            "source_language": "en",
            "language_code": "de",
            "filename": "app/de.xliff",
            "file_url": "https://x/de/file/",
            "units_list_url": "https://x/de/units/",
            "translated_percent": 80.0,
        }

        translation = translation_from_dict(data)

        assert translation == Translation(
            source_language="en",
            language_code="de",
            filename="app/de.xliff",
            file_url="https://x/de/file/",
            units_list_url="https://x/de/units/",
            created=False,
        )
        assert translation.raw is data

    def test_defaults_for_missing_fields(self):
        translation = translation_from_dict({})

        assert translation.source_language == "en"
        assert translation.language_code == "en"
        assert translation.filename == "translation.xliff"
        assert translation.file_url == ""
        assert translation.units_list_url == ""
        assert translation.created is False

    def test_created_flag_in_payload_is_ignored(self):
        translation = translation_from_dict({"language_code": "de", "created": True})

        assert translation.created is False

    def test_language_objects_are_reduced_to_codes(self):
        translation = translation_from_dict(
            {"language_code": "de", "source_language": {"code": "en_GB", "name": "English (UK)"}}
        )

        assert translation.source_language == "en_GB"

    def test_null_values_fall_back_to_defaults(self):
        translation = translation_from_dict(
            {"language_code": None, "filename": None, "file_url": None}
        )

        assert translation.language_code == "en"
        assert translation.filename == "translation.xliff"
        assert translation.file_url == ""


@pytest.mark.unit
class TestComponent:
    def test_component_from_dict_prefixes_project_slug(self):
        data = {
            "slug": "messages",
            "name": "Messages",
            "project": {"slug": "app", "name": "App"},
            "translations_url": "https://x/api/components/app/messages/translations/",
        }

        component = component_from_dict(data)

        assert component.slug == "app-messages"
        assert component.project_slug == "app"
        assert component.name == "Messages"
        assert component.translations_url == data["translations_url"]

    def test_component_from_dict_without_project(self):
        component = component_from_dict(
            {"slug": "messages", "translations_url": "https://x/t/"}
        )

        assert component.slug == "messages"
        assert component.project_slug is None

    def test_component_from_dict_requires_translations_url(self):
        with pytest.raises(KeyError):
            component_from_dict({"slug": "messages"})

    def test_component_is_immutable_and_hashable(self):
        component = Component(slug="app-messages", translations_url="https://x/t/")

        with pytest.raises(AttributeError):
            component.slug = "other"
        assert {component: 1}[Component("app-messages", "https://x/t/")] == 1
