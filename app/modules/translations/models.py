"""Data models for the translations module.

Lightweight dataclasses (not Pydantic) describing the Weblate resources the
resolver works with. Helper functions normalize raw API payloads into these
structures, filling in the defaults the API may leave out.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_SOURCE_LANGUAGE = "en"
DEFAULT_LANGUAGE_CODE = "en"
DEFAULT_FILENAME = "translation.xliff"


@dataclass(frozen=True)
class Component:
    """A project/component pair owning per-locale translations.

    Attributes:
        slug: Stable identifier combining project and component; cache key.
        translations_url: Endpoint for listing and creating translations.
        name: Display name, when known.
        project_slug: Slug of the owning project, when known.
        raw: The original API payload, if built from one.
    """

    slug: str
    translations_url: str
    name: Optional[str] = None
    project_slug: Optional[str] = None
    raw: Optional[Dict[str, Any]] = field(default=None, compare=False, hash=False)


@dataclass
class Translation:
    """One locale's translation resource within a component.

    Attributes:
        source_language: Language the strings are written in.
        language_code: Target locale of this translation.
        filename: Name used for the file part on upload and as XLIFF ``original``.
        file_url: Endpoint for uploading/downloading the translation file.
        units_list_url: Endpoint listing the translation units.
        created: True only when produced by a create call in this process.
        raw: The original API payload.
    """

    source_language: str = DEFAULT_SOURCE_LANGUAGE
    language_code: str = DEFAULT_LANGUAGE_CODE
    filename: str = DEFAULT_FILENAME
    file_url: str = ""
    units_list_url: str = ""
    created: bool = False
    raw: Optional[Dict[str, Any]] = field(default=None, repr=False, compare=False)


def _language_code(value: Any) -> Optional[str]:
    # Some endpoints embed languages as objects ({"code": "de", ...}).
    if isinstance(value, dict):
        value = value.get("code")
    return value or None


def translation_from_dict(data: Dict[str, Any]) -> Translation:
    """Build a Translation from a listing entry or creation payload.

    Missing fields fall back to the module defaults. A payload without a
    language code is labelled ``DEFAULT_LANGUAGE_CODE`` and a debug entry
    is logged.

    Args:
        data: Raw translation payload returned by the API

    Returns:
        Translation with ``created`` set to False
    """
    language_code = _language_code(data.get("language_code"))
    if language_code is None:
        logger.debug(
            "translation_language_code_missing",
            fallback=DEFAULT_LANGUAGE_CODE,
            file_url=data.get("file_url"),
        )
        language_code = DEFAULT_LANGUAGE_CODE

    source_language = _language_code(data.get("source_language"))

    return Translation(
        source_language=source_language or DEFAULT_SOURCE_LANGUAGE,
        language_code=language_code,
        filename=data.get("filename") or DEFAULT_FILENAME,
        file_url=data.get("file_url") or "",
        units_list_url=data.get("units_list_url") or "",
        created=False,
        raw=data,
    )


def component_from_dict(data: Dict[str, Any]) -> Component:
    """Build a Component from a Weblate component payload.

    The cache key combines project and component slugs, since component
    slugs are only unique within a project.

    Raises:
        KeyError: if ``slug`` or ``translations_url`` is missing
    """
    project = data.get("project") or {}
    project_slug = project.get("slug") if isinstance(project, dict) else None
    slug = data["slug"]
    if project_slug:
        slug = f"{project_slug}-{slug}"

    return Component(
        slug=slug,
        translations_url=data["translations_url"],
        name=data.get("name"),
        project_slug=project_slug,
        raw=data,
    )
