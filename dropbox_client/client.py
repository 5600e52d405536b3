"""
Dropbox client facade.

This is the main entry point for users of the library.
"""

import asyncio
from typing import Any, Self

import httpx
import structlog

from dropbox_client.api import files
from dropbox_client.api.http_client import AsyncHttpClient
from dropbox_client.api.stream import DownloadStream
from dropbox_client.config import DropboxClientConfig
from dropbox_client.models.calls import UploadContent
from dropbox_client.models.files import ThumbnailFormat, ThumbnailSize, WriteMode

logger = structlog.get_logger(__name__)


class DropboxClient:
    """
    Async client for Dropbox.

    Example:
        ```python
        async with DropboxClient("my-access-token") as client:
            await client.create_folder("/backups")
            await client.copy("/docs/report.pdf", "/backups/report.pdf")

            async with await client.download("/backups/report.pdf") as stream:
                data = await stream.read()
        ```

    Args:
        token: Pre-issued OAuth bearer token.
        config: Client configuration. Uses defaults if not provided.
        transport: Optional httpx transport for testing (mock transport).
    """

    def __init__(
        self,
        token: str,
        config: DropboxClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or DropboxClientConfig()
        self._http = AsyncHttpClient(token, self._config, transport=transport)
        self._init_lock = asyncio.Lock()

    async def __aenter__(self) -> Self:
        """Enter async context."""
        await self._ensure_initialized()
        return self

    async def __aexit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        """Exit async context."""
        await self.close()

    @property
    def config(self) -> DropboxClientConfig:
        return self._config

    async def _ensure_initialized(self) -> AsyncHttpClient:
        async with self._init_lock:
            if not self._http.is_open:
                await self._http.__aenter__()
                logger.debug("Client initialized")
        return self._http

    async def close(self) -> None:
        """Close the client and release resources."""
        async with self._init_lock:
            await self._http.close()
            logger.debug("Client closed")

    async def copy(self, from_path: str, to_path: str) -> dict[str, Any]:
        """
        Copy a file or folder to a different location in the user's Dropbox.

        If the source path is a folder all its contents will be copied.

        Args:
            from_path: Path of the file or folder to copy.
            to_path: Destination path.

        Returns:
            Metadata of the copy, as returned by Dropbox.

        Raises:
            BadRequestError: If the source is missing or the destination exists.
        """
        http = await self._ensure_initialized()
        return await files.copy(http, from_path, to_path)

    async def create_folder(self, path: str) -> dict[str, Any]:
        """
        Create a folder at a given path.

        Returns:
            Folder metadata, always tagged with ``".tag": "folder"``.

        Raises:
            BadRequestError: If something already exists at the path.
        """
        http = await self._ensure_initialized()
        return await files.create_folder(http, path)

    async def delete(self, path: str) -> dict[str, Any]:
        """
        Delete the file or folder at a given path.

        If the path is a folder, all its contents will be deleted too.

        Raises:
            BadRequestError: If the path does not exist.
        """
        http = await self._ensure_initialized()
        return await files.delete(http, path)

    async def download(self, path: str) -> DownloadStream:
        """
        Download a file from the user's Dropbox.

        The returned stream is open; close it or read it to the end.

        Example:
            ```python
            async with await client.download("/docs/report.pdf") as stream:
                async for chunk in stream.aiter_bytes():
                    f.write(chunk)
            ```
        """
        http = await self._ensure_initialized()
        return await files.download(http, path)

    async def upload(
        self,
        path: str,
        contents: UploadContent,
        *,
        mode: WriteMode = WriteMode.ADD,
        autorename: bool = False,
    ) -> dict[str, Any]:
        """
        Upload a file to the user's Dropbox.

        Args:
            path: Destination path.
            contents: File bytes, or an async iterable of byte chunks.
            mode: Conflict behaviour when a file already exists.
            autorename: Let Dropbox pick a free name on conflict.

        Returns:
            File metadata, always tagged with ``".tag": "file"``.
        """
        http = await self._ensure_initialized()
        return await files.upload(http, path, contents, mode=mode, autorename=autorename)

    async def get_thumbnail(
        self,
        path: str,
        *,
        format: ThumbnailFormat = ThumbnailFormat.JPEG,
        size: ThumbnailSize = ThumbnailSize.S,
    ) -> bytes:
        """Get a thumbnail for an image file."""
        http = await self._ensure_initialized()
        return await files.get_thumbnail(http, path, format=format, size=size)
