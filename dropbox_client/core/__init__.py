"""Shared helpers."""

from dropbox_client.core.paths import normalize_path

__all__ = ["normalize_path"]
