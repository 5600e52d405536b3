"""
Async HTTP client for the Dropbox API.

Every API call funnels through ``AsyncHttpClient.execute``, which builds the
request for the given call variant, attaches the bearer token and classifies
HTTP failures.
"""

import asyncio
import json
from typing import Any, overload

import httpx
import structlog

from dropbox_client.config import DropboxClientConfig
from dropbox_client.exceptions import determine_exception
from dropbox_client.models.calls import ApiCall, ContentCall, JsonCall

logger = structlog.get_logger(__name__)

API_ARG_HEADER = "Dropbox-API-Arg"
OCTET_STREAM = "application/octet-stream"


def _join_url(base_url: str, endpoint: str) -> str:
    return f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"


class AsyncHttpClient:
    """Async HTTP client for the Dropbox API."""

    def __init__(
        self,
        token: str,
        config: DropboxClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            token: Pre-issued OAuth bearer token.
            config: Client configuration.
            transport: Optional transport for testing (mock transport).
        """
        if not token:
            msg = "token must not be empty"
            raise ValueError(msg)

        self._token = token
        self._config = config
        self._transport = transport

        self._client: httpx.AsyncClient | None = None
        self._client_lock = asyncio.Lock()

    def __repr__(self) -> str:
        return f"AsyncHttpClient(api_url={self._config.api_url!r}, token='***')"

    async def __aenter__(self) -> "AsyncHttpClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _ensure_client(self) -> httpx.AsyncClient:
        async with self._client_lock:
            if self._client is None:
                self._client = httpx.AsyncClient(
                    timeout=self._config.timeout,
                    transport=self._transport,
                    headers={"User-Agent": self._config.user_agent},
                )
        return self._client

    async def close(self) -> None:
        """Close the underlying connection pool. Safe to call more than once."""
        async with self._client_lock:
            if self._client is None:
                logger.debug("Client not open.")
                return
            await self._client.aclose()
            self._client = None

    @property
    def is_open(self) -> bool:
        return self._client is not None

    @overload
    async def execute(self, call: JsonCall) -> dict[str, Any]: ...

    @overload
    async def execute(self, call: ContentCall) -> httpx.Response: ...

    async def execute(self, call: ApiCall) -> dict[str, Any] | httpx.Response:
        """
        Send a call to the API.

        Args:
            call: JSON call or content call to perform.

        Returns:
            Decoded JSON for a JsonCall. For a ContentCall, the open streamed
            response; the caller must read or close it.

        Raises:
            BadRequestError: If the API answers 400 or 409.
            httpx.HTTPStatusError: For any other error status, unchanged.
            httpx.HTTPError: If the request fails due to network issues.
            json.JSONDecodeError: If a JSON call returns a malformed body.
        """
        if self._client is None:
            msg = "HTTP client not initialized. Use 'async with' first."
            raise RuntimeError(msg)

        is_content = isinstance(call, ContentCall)
        request = self._build_request(call)
        logger.debug("Sending API request", endpoint=call.endpoint, content=is_content)

        response = await self._client.send(request, stream=is_content)

        if response.is_error:
            await response.aread()
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            error = determine_exception(exc)
            logger.debug(
                "API request failed",
                endpoint=call.endpoint,
                status_code=response.status_code,
                error=type(error).__name__,
            )
            if error is exc:
                raise
            raise error from exc

        if is_content:
            return response
        return response.json()

    def _build_request(self, call: ApiCall) -> httpx.Request:
        headers = {"Authorization": f"Bearer {self._token}"}

        if isinstance(call, ContentCall):
            headers[API_ARG_HEADER] = json.dumps(dict(call.payload))
            headers["Content-Type"] = OCTET_STREAM
            return self._client.build_request(
                "POST",
                _join_url(self._config.content_url, call.endpoint),
                content=call.body if call.body is not None else b"",
                headers=headers,
            )

        return self._client.build_request(
            "POST",
            _join_url(self._config.api_url, call.endpoint),
            json=dict(call.payload),
            headers=headers,
        )
