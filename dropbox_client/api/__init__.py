"""
Dropbox API client layer.

Provides async HTTP communication with the Dropbox API.
"""

from dropbox_client.api.http_client import AsyncHttpClient
from dropbox_client.api.stream import DownloadStream

__all__ = ["AsyncHttpClient", "DownloadStream"]
