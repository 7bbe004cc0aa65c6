"""HTTP client for the Weblate REST API.

Thin wrapper over a ``requests.Session`` carrying the API token, the
default timeout and structured logging. Responses are returned as
WeblateResponse objects exposing the status code and the raw body
regardless of whether the body parses, so callers can log diagnostics
before deciding how to treat the payload.

Usage:
    from integrations.weblate import WeblateClient

    with WeblateClient(base_url="https://weblate.example.com/api/", token="...") as client:
        response = client.get("components/project/app/translations/")
        response.raise_for_status(200, "Unable to list translations.")
        results = response.json()["results"]
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urljoin

import requests
from requests.structures import CaseInsensitiveDict

from infrastructure.logging import get_module_logger
from integrations.weblate.errors import (
    DecodeError,
    TransportError,
    UnexpectedStatusError,
)

logger = get_module_logger()


@dataclass
class WeblateResponse:
    """Status, raw body and headers of a Weblate API response."""

    status_code: int
    content: str
    url: str
    headers: Mapping[str, str] = field(default_factory=CaseInsensitiveDict)

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            DecodeError: if the body is not valid JSON
        """
        try:
            return json.loads(self.content)
        except ValueError as exc:
            raise DecodeError(
                f"Failed to parse JSON response: {exc}",
                content=self.content,
                url=self.url,
            ) from exc

    def raise_for_status(self, expected: int, message: str) -> None:
        """Raise UnexpectedStatusError unless the status equals ``expected``."""
        if self.status_code == expected:
            return

        retry_after = None
        header_value = self.headers.get("Retry-After")
        if header_value:
            try:
                retry_after = int(header_value)
            except ValueError:
                retry_after = None

        raise UnexpectedStatusError(
            message,
            status_code=self.status_code,
            content=self.content,
            url=self.url,
            retry_after=retry_after,
        )


class WeblateClient:
    """Blocking HTTP client for the Weblate API.

    Relative URLs are resolved against ``base_url``; the absolute URLs
    the API hands out (``translations_url``, ``file_url``) are used as-is.
    No retries are attempted: transport failures are raised as
    TransportError after logging the URL.

    Attributes:
        base_url: Base URL of the API, ending in '/'
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        base_url: str = "",
        token: Optional[str] = None,
        timeout: int = 30,
        user_agent: str = "weblate-translation-client/1.0",
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "User-Agent": user_agent,
                "Accept": "application/json",
            }
        )
        if token:
            self._session.headers["Authorization"] = f"Token {token}"
        self._logger = logger.bind(base_url=base_url)

    def get(
        self, url: str, params: Optional[Dict[str, Any]] = None
    ) -> WeblateResponse:
        return self._request("GET", url, params=params)

    def post(
        self,
        url: str,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> WeblateResponse:
        """Send a form-encoded (or multipart, when ``files`` is given) POST."""
        return self._request("POST", url, data=data, files=files)

    def _request(self, method: str, url: str, **kwargs: Any) -> WeblateResponse:
        full_url = urljoin(self.base_url, url) if self.base_url else url

        log = self._logger.bind(method=method, url=full_url)
        log.debug("weblate_request", params=kwargs.get("params"))

        try:
            response = self._session.request(
                method=method,
                url=full_url,
                timeout=self.timeout,
                **kwargs,
            )
        except requests.RequestException as exc:
            log.error("weblate_transport_error", error=str(exc))
            raise TransportError(
                f"Request to {full_url} failed: {exc}", url=full_url
            ) from exc

        log.debug("weblate_response", status_code=response.status_code)
        return WeblateResponse(
            status_code=response.status_code,
            content=response.text,
            url=full_url,
            headers=CaseInsensitiveDict(response.headers),
        )

    def close(self) -> None:
        """Close HTTP session and release connections."""
        self._session.close()
        self._logger.debug("weblate_client_closed")

    def __enter__(self) -> "WeblateClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
