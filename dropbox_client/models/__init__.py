"""
Request and file models for the Dropbox client.
"""

from dropbox_client.models.calls import ApiCall, ContentCall, JsonCall, UploadContent
from dropbox_client.models.files import (
    FILE_TAG,
    FOLDER_TAG,
    ThumbnailFormat,
    ThumbnailSize,
    WriteMode,
)

__all__ = [
    # Calls
    "ApiCall",
    "ContentCall",
    "JsonCall",
    "UploadContent",
    # Files
    "FILE_TAG",
    "FOLDER_TAG",
    "ThumbnailFormat",
    "ThumbnailSize",
    "WriteMode",
]
