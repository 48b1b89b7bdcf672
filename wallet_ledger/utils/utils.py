"""General purpose helpers shared across layers."""

import os
from pathlib import Path
from urllib.parse import unquote, urlparse


def get_project_root() -> Path:
    """Return the repository root directory.

    Returns:
        Path: Directory containing the ``wallet_ledger`` package.
    """
    return Path(__file__).resolve().parents[2]


def normalize_location(location) -> Path | str:
    """Normalize a location path or URI.

    Args:
        location: Filesystem path, ``file://`` URI or database URL.

    Returns:
        Path | str: Resolved filesystem path, or the URI unchanged.
    """
    if isinstance(location, os.PathLike):
        return Path(location).expanduser().resolve()
    raw_location = str(location)
    parsed = urlparse(raw_location)
    # Single-letter schemes are Windows drive letters, not URIs.
    if len(parsed.scheme) > 1 and parsed.scheme != "file":
        return raw_location
    if parsed.scheme == "file":
        raw_location = unquote(parsed.path)
    return Path(raw_location).expanduser().resolve()


__all__ = ["get_project_root", "normalize_location"]
