"""Expose the SDK version used in the User-Agent header."""

from __future__ import annotations

from importlib import metadata


def _resolve_version() -> str:
    """Return the installed distribution version or fall back to the project default."""

    try:
        return metadata.version("aps-sdk")
    except metadata.PackageNotFoundError:
        # Development checkouts where the distribution is not installed.
        return "1.0.0"


__version__ = _resolve_version()
