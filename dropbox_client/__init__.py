"""
Dropbox Python Client.

A small async client for the Dropbox API v2 using a pre-issued bearer token.

Example:
    ```python
    from dropbox_client import BadRequestError, DropboxClient

    async with DropboxClient("my-access-token") as client:
        try:
            await client.create_folder("/backups")
        except BadRequestError as e:
            print(e.error_summary)

        async with await client.download("/docs/report.pdf") as stream:
            data = await stream.read()
    ```
"""

from dropbox_client.api.stream import DownloadStream
from dropbox_client.client import DropboxClient
from dropbox_client.config import DropboxClientConfig
from dropbox_client.core.paths import normalize_path
from dropbox_client.exceptions import (
    BadRequestError,
    DropboxClientError,
    ErrorKind,
    error_kind,
)
from dropbox_client.models.files import ThumbnailFormat, ThumbnailSize, WriteMode

__version__ = "0.1.0"

__all__ = [
    # Main client
    "DropboxClient",
    "DropboxClientConfig",
    "DownloadStream",
    # Helpers
    "normalize_path",
    # Models
    "ThumbnailFormat",
    "ThumbnailSize",
    "WriteMode",
    # Exceptions
    "DropboxClientError",
    "BadRequestError",
    "ErrorKind",
    "error_kind",
]
