# wikiquery/errors.py
from __future__ import annotations


class WikiQueryError(Exception):
    """
    Base exception for all client errors.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TransportError(WikiQueryError):
    """
    Connection, DNS or I/O failure before a response was received.
    """

    pass


class ProtocolError(WikiQueryError):
    """
    Unexpected HTTP status; status_code is the status received.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(WikiQueryError):
    """
    Response body is not valid JSON or not the expected shape.
    """

    pass


class NotFoundError(WikiQueryError):
    """
    Well-formed response that holds no matching content.
    api_code is set when the API answered with an error object
    (e.g. "nosrsearch") instead of a query section.
    """

    def __init__(self, message: str, *, api_code: str | None = None) -> None:
        super().__init__(message)
        self.api_code = api_code
