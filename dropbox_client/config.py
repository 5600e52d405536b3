"""
Dropbox client configuration.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class DropboxClientConfig:
    """
    Attributes:
        api_url: Base URL for metadata and control endpoints (JSON calls).
        content_url: Base URL for content endpoints (upload/download).
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value.
    """

    api_url: str = "https://api.dropboxapi.com/2"
    content_url: str = "https://content.dropboxapi.com/2"
    timeout: float = 30.0
    user_agent: str = "Dropbox-Python-Client/0.1"

    def __post_init__(self) -> None:
        if not self.api_url:
            msg = "api_url must not be empty"
            raise ValueError(msg)
        if not self.content_url:
            msg = "content_url must not be empty"
            raise ValueError(msg)
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
