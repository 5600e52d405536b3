"""File endpoints (copy, create_folder, delete, download, upload, thumbnails)."""

from typing import Any

from dropbox_client.api.http_client import AsyncHttpClient
from dropbox_client.api.stream import DownloadStream
from dropbox_client.core.paths import normalize_path
from dropbox_client.models.calls import ContentCall, JsonCall, UploadContent
from dropbox_client.models.files import (
    FILE_TAG,
    FOLDER_TAG,
    ThumbnailFormat,
    ThumbnailSize,
    WriteMode,
)


async def copy(http: AsyncHttpClient, from_path: str, to_path: str) -> dict[str, Any]:
    """
    Copy a file or folder to a different location.

    If the source path is a folder all its contents will be copied.
    """
    return await http.execute(
        JsonCall(
            endpoint="files/copy",
            payload={
                "from_path": normalize_path(from_path),
                "to_path": normalize_path(to_path),
            },
        )
    )


async def create_folder(http: AsyncHttpClient, path: str) -> dict[str, Any]:
    """Create a folder at the given path."""
    response = await http.execute(
        JsonCall(endpoint="files/create_folder", payload={"path": normalize_path(path)})
    )
    response[".tag"] = FOLDER_TAG
    return response


async def delete(http: AsyncHttpClient, path: str) -> dict[str, Any]:
    """
    Delete the file or folder at the given path.

    If the path is a folder, all its contents will be deleted too.
    """
    return await http.execute(
        JsonCall(endpoint="files/delete", payload={"path": normalize_path(path)})
    )


async def download(http: AsyncHttpClient, path: str) -> DownloadStream:
    """Download a file. The returned stream is owned by the caller."""
    response = await http.execute(
        ContentCall(endpoint="files/download", payload={"path": normalize_path(path)})
    )
    return DownloadStream(response)


async def upload(
    http: AsyncHttpClient,
    path: str,
    contents: UploadContent,
    *,
    mode: WriteMode = WriteMode.ADD,
    autorename: bool = False,
) -> dict[str, Any]:
    """
    Upload a file.

    Args:
        http: HTTP client.
        path: Destination path in the drive.
        contents: File bytes, or an async iterable of chunks.
        mode: What to do if a file already exists at ``path``.
        autorename: Let Dropbox rename the file on conflict.

    Returns:
        Metadata of the uploaded file.
    """
    response = await http.execute(
        ContentCall(
            endpoint="files/upload",
            payload={
                "path": normalize_path(path),
                "mode": mode,
                "autorename": autorename,
            },
            body=contents,
        )
    )
    await response.aread()
    metadata = response.json()
    metadata[".tag"] = FILE_TAG
    return metadata


async def get_thumbnail(
    http: AsyncHttpClient,
    path: str,
    *,
    format: ThumbnailFormat = ThumbnailFormat.JPEG,
    size: ThumbnailSize = ThumbnailSize.S,
) -> bytes:
    """Get a thumbnail image of an image file."""
    response = await http.execute(
        ContentCall(
            endpoint="files/get_thumbnail",
            payload={"path": normalize_path(path), "format": format, "size": size},
        )
    )
    return await response.aread()
