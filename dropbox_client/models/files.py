"""
File-related constants and enums.
"""

from enum import StrEnum

# Dropbox does not echo these tags back for create_folder/upload results.
FOLDER_TAG = "folder"
FILE_TAG = "file"


class WriteMode(StrEnum):
    """Conflict behaviour for uploads."""

    ADD = "add"
    OVERWRITE = "overwrite"


class ThumbnailFormat(StrEnum):
    """Image format of a generated thumbnail."""

    JPEG = "jpeg"
    PNG = "png"


class ThumbnailSize(StrEnum):
    """Bounding box of a generated thumbnail."""

    XS = "w32h32"
    S = "w64h64"
    M = "w128h128"
    L = "w640h480"
    XL = "w1024h768"
