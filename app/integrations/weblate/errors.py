"""Errors raised by the Weblate integration."""

from typing import Optional


class WeblateError(Exception):
    """Provider-level failure talking to the Weblate API.

    Attributes:
        url: the request URL, when the failure is tied to a request
    """

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class TransportError(WeblateError):
    """The HTTP request itself failed (connection, timeout, protocol).

    The underlying ``requests`` exception is chained as ``__cause__``.
    """


class UnexpectedStatusError(WeblateError):
    """The API answered with a status other than the one the operation expects.

    Attributes:
        status_code: the HTTP status returned by the server
        content: the raw response body
        retry_after: seconds from the Retry-After header, if sent
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        content: str = "",
        url: Optional[str] = None,
        retry_after: Optional[int] = None,
    ):
        super().__init__(
            f"{message} HTTP Status: {status_code}, Content: {content}", url=url
        )
        self.status_code = status_code
        self.content = content
        self.retry_after = retry_after


class DecodeError(WeblateError):
    """A JSON body was expected but could not be parsed.

    Attributes:
        content: the raw response body
    """

    def __init__(self, message: str, content: str = "", url: Optional[str] = None):
        super().__init__(message, url=url)
        self.content = content
