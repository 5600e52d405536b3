"""Dropbox path helpers."""


def normalize_path(path: str) -> str:
    """
    Normalize a caller-supplied path for the Dropbox API.

    Leading and trailing slashes are stripped. The drive root is the empty
    string; any other path gets a single leading slash.

    Args:
        path: Path such as "docs/report.pdf", "/docs/" or "/".

    Returns:
        "" for the root, otherwise "/<path>" without a trailing slash.
    """
    trimmed = path.strip("/")
    if not trimmed:
        return ""
    return f"/{trimmed}"
