"""Upload and download of translation files.

Weblate endpoints used:
    POST /api/translations/(project)/(component)/(language)/file/
    GET  /api/translations/(project)/(component)/(language)/file/[?format=...]
"""

import re
from typing import Optional

from structlog.stdlib import BoundLogger

from infrastructure.logging import get_module_logger
from integrations.weblate import DecodeError, WeblateClient, WeblateError
from modules.translations.models import Translation
from modules.translations.xliff import convert_json_to_xliff

logger = get_module_logger()

DEFAULT_FORMAT = "json"
XLIFF_FORMAT = "xliff"
XML_DECLARATION = "<?xml"
TRANS_UNIT_PATTERN = re.compile(r"<trans-unit(?![^>]*xml:space)")


def preserve_whitespace(content: str) -> str:
    """Mark every trans-unit as whitespace-preserving.

    Units that already declare ``xml:space`` are left as they are.
    """
    return TRANS_UNIT_PATTERN.sub('<trans-unit xml:space="preserve"', content)


def is_xml_document(content: str) -> bool:
    """True when ``content`` starts with an XML declaration.

    Leading whitespace and a UTF-8 byte order mark are ignored.
    """
    head = content.lstrip("\ufeff \t\r\n")[: len(XML_DECLARATION)]
    return head.lower() == XML_DECLARATION


class TranslationTransfer:
    """Moves translation file content to and from Weblate."""

    def __init__(
        self, client: WeblateClient, log: Optional[BoundLogger] = None
    ) -> None:
        self.client = client
        self._logger = log or logger

    def upload_translation(self, translation: Translation, content: str) -> None:
        """Replace the server-side file of ``translation`` with ``content``.

        Raises:
            UnexpectedStatusError: upload did not return 200
            TransportError: the request failed
        """
        log = self._logger.bind(
            url=translation.file_url, filename=translation.filename
        )

        response = self.client.post(
            translation.file_url,
            data={"method": "replace"},
            files={"file": (translation.filename, preserve_whitespace(content))},
        )

        if response.status_code != 200:
            log.debug(
                "translation_upload_failed",
                status_code=response.status_code,
                content=response.content,
            )
        response.raise_for_status(
            200, f"Unable to upload weblate translation {content}."
        )

        log.debug("translation_uploaded", status_code=response.status_code)

    def download_translation(
        self, translation: Translation, format: str = DEFAULT_FORMAT
    ) -> str:
        """Download the file of ``translation``.

        XML bodies are returned unchanged whatever ``format`` was asked for.
        A ``json`` body is converted to XLIFF; other formats are returned raw.

        Raises:
            UnexpectedStatusError: download did not return 200
            DecodeError: ``json`` was requested and the body is not a JSON object
            TransportError: the request failed
        """
        url = translation.file_url
        params = None if format == DEFAULT_FORMAT else {"format": format}
        log = self._logger.bind(url=url, format=format)

        try:
            response = self.client.get(url, params=params)
            content = response.content

            log.debug(
                "translation_download_response",
                status_code=response.status_code,
                content=content,
            )

            response.raise_for_status(200, "Unable to download weblate translation.")

            if format == XLIFF_FORMAT or is_xml_document(content):
                return content

            if format != DEFAULT_FORMAT:
                return content

            try:
                data = response.json()
            except DecodeError as exc:
                log.error(
                    "translation_download_decode_failed",
                    error=str(exc),
                    content=content,
                )
                raise

            if not isinstance(data, dict):
                log.error(
                    "translation_download_decode_failed",
                    error=f"expected a JSON object, got {type(data).__name__}",
                    content=content,
                )
                raise DecodeError(
                    "Translation file is not a JSON object.",
                    content=content,
                    url=url,
                )

            return convert_json_to_xliff(data, translation)
        except WeblateError as exc:
            log.error("translation_download_failed", error=str(exc))
            raise
