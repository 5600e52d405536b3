"""
Request variants passed to the request-execution primitive.

A call is either a JSON call (arguments in the body, metadata endpoint)
or a content call (arguments in the ``Dropbox-API-Arg`` header, raw bytes
in the body, content endpoint).
"""

from collections.abc import AsyncIterable, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

UploadContent: TypeAlias = bytes | AsyncIterable[bytes]


@dataclass(frozen=True, kw_only=True, slots=True)
class JsonCall:
    """Call whose arguments and result travel as JSON bodies."""

    endpoint: str
    payload: Mapping[str, Any]


@dataclass(frozen=True, kw_only=True, slots=True)
class ContentCall:
    """
    Call against the content endpoint.

    ``body`` is None for download-style calls that send no content.
    """

    endpoint: str
    payload: Mapping[str, Any]
    body: UploadContent | None = None


ApiCall: TypeAlias = JsonCall | ContentCall
