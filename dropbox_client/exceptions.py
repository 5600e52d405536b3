"""
Dropbox client exception hierarchy and error classification.

Only HTTP 400 and 409 responses are turned into ``BadRequestError``. Every
other failure from the transport is raised as the original ``httpx`` error.
"""

import json
from enum import StrEnum
from typing import Any

import httpx

BAD_REQUEST_STATUS_CODES = frozenset({httpx.codes.BAD_REQUEST, httpx.codes.CONFLICT})


class DropboxClientError(Exception):
    """Base exception for all dropbox_client errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class BadRequestError(DropboxClientError):
    """
    The API rejected the request as semantically invalid (HTTP 400 or 409).

    Examples are a destination that already exists or a source path that
    does not exist. The full response stays available for inspection.
    """

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.error_summary = _error_summary(response)
        message = self.error_summary or f"Bad request (HTTP {response.status_code})"
        super().__init__(message, status_code=response.status_code)

    @property
    def status_code(self) -> int:
        return self.response.status_code


class ErrorKind(StrEnum):
    """Failure classes a client call can end in."""

    BAD_REQUEST = "bad_request"
    TRANSPORT = "transport"
    DECODE = "decode"


def determine_exception(exc: httpx.HTTPStatusError) -> Exception:
    """
    Classify an HTTP status failure.

    Args:
        exc: Error raised by ``httpx.Response.raise_for_status``.

    Returns:
        A ``BadRequestError`` for status 400/409, otherwise ``exc`` itself.
    """
    if exc.response.status_code in BAD_REQUEST_STATUS_CODES:
        return BadRequestError(exc.response)
    return exc


def error_kind(exc: BaseException) -> ErrorKind:
    """
    Map an exception raised by a client call to its ErrorKind.

    Raises:
        TypeError: If the exception did not come from a client call.
    """
    if isinstance(exc, BadRequestError):
        return ErrorKind.BAD_REQUEST
    if isinstance(exc, httpx.HTTPError):
        return ErrorKind.TRANSPORT
    if isinstance(exc, ValueError):
        return ErrorKind.DECODE
    msg = f"Not a client error: {type(exc).__name__}"
    raise TypeError(msg)


def _error_summary(response: httpx.Response) -> str | None:
    try:
        data = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError, httpx.ResponseNotRead):
        return None
    if isinstance(data, dict):
        return data.get("error_summary")
    return None
