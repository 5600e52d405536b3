"""
Caller-owned byte stream over a content download.
"""

import json
from collections.abc import AsyncIterator
from typing import Any, Self

import httpx

API_RESULT_HEADER = "Dropbox-API-Result"


class DownloadStream:
    """
    Readable stream over the body of a download response.

    The stream is handed over open; the caller must drain it or close it,
    preferably with ``async with``.

    Example:
        ```python
        async with await client.download("/docs/report.pdf") as stream:
            async for chunk in stream.aiter_bytes():
                f.write(chunk)
        ```
    """

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    @property
    def metadata(self) -> dict[str, Any] | None:
        """File metadata sent by Dropbox in the ``Dropbox-API-Result`` header."""
        raw = self._response.headers.get(API_RESULT_HEADER)
        if raw is None:
            return None
        return json.loads(raw)

    @property
    def closed(self) -> bool:
        return self._response.is_closed

    async def aiter_bytes(self, chunk_size: int | None = None) -> AsyncIterator[bytes]:
        """
        Yield the body in chunks.

        Args:
            chunk_size: Size of chunks to yield. None yields chunks as received.
        """
        async for chunk in self._response.aiter_bytes(chunk_size):
            yield chunk

    async def read(self) -> bytes:
        """Read the remaining body and close the stream."""
        return await self._response.aread()

    async def aclose(self) -> None:
        await self._response.aclose()
