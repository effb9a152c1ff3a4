# ==============================================================================
# HELPER UTILITIES
# ==============================================================================
# Common utility functions used across the application
# ==============================================================================

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Current UTC time as a naive datetime.

    Stored timestamps are naive UTC so SQLite and PostgreSQL
    ``TIMESTAMP WITHOUT TIME ZONE`` columns compare consistently.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def file_extension(filename: Optional[str]) -> str:
    """
    Text after the last dot of a file name.

    A name without a dot is returned whole, and an empty name gives "".

    Example:
        >>> file_extension("intro.video.png")
        'png'
        >>> file_extension("README")
        'README'
    """
    if not filename:
        return ""
    return filename.rsplit(".", 1)[-1]


def blob_safe_name(value: str) -> str:
    """
    Trim and replace spaces and path separators with underscores.

    Example:
        >>> blob_safe_name(" CI/CD Basics ")
        'CI_CD_Basics'
    """
    return value.strip().replace(" ", "_").replace("/", "_").replace("\\", "_")
