"""JSON to XLIFF 1.2 conversion.

Weblate's ``json`` download format is a key/value mapping, optionally
grouped one level deep:

    {"hello": "Hello", "errors": {"not_found": "Not found"}}

Each string value becomes a ``trans-unit`` whose id and source are the key
and whose target is the value. Group names are dropped; values nested
deeper than one level, and anything that is not a string, are skipped.
"""

from collections.abc import Mapping
from html import escape
from typing import Any, Iterator, Tuple

from modules.translations.models import Translation

XLIFF_VERSION = "1.2"
XLIFF_NAMESPACE = "urn:oasis:names:tc:xliff:document:1.2"
FALLBACK_ORIGINAL = "unknown_file"


def _escape(value: str) -> str:
    # & < > " ' are all escaped, in attributes and in text alike.
    return escape(value, quote=True)


def iter_units(data: Mapping[str, Any]) -> Iterator[Tuple[str, str]]:
    """Yield (key, value) pairs for every convertible entry, in input order."""
    for key, value in data.items():
        if not isinstance(key, str):
            continue
        if isinstance(value, str):
            yield key, value
        elif isinstance(value, Mapping):
            for sub_key, sub_value in value.items():
                if isinstance(sub_key, str) and isinstance(sub_value, str):
                    yield sub_key, sub_value


def convert_json_to_xliff(data: Mapping[str, Any], translation: Translation) -> str:
    """Render a key/value mapping as an XLIFF 1.2 document.

    Args:
        data: Decoded JSON translation file
        translation: Owning translation; supplies the languages and filename

    Returns:
        The XLIFF document as a single string
    """
    original = _escape(translation.filename or FALLBACK_ORIGINAL)

    parts = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<xliff version="{XLIFF_VERSION}" xmlns="{XLIFF_NAMESPACE}">',
        f'<file source-language="{_escape(translation.source_language)}"'
        f' target-language="{_escape(translation.language_code)}"'
        f' datatype="plaintext" original="{original}">',
        "<body>",
    ]

    for key, value in iter_units(data):
        escaped_key = _escape(key)
        parts.append(
            f'<trans-unit id="{escaped_key}">'
            f"<source>{escaped_key}</source>"
            f"<target>{_escape(value)}</target>"
            "</trans-unit>"
        )

    parts.extend(["</body>", "</file>", "</xliff>"])
    return "".join(parts)
