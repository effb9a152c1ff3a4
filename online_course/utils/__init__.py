# ==============================================================================
# UTILITIES PACKAGE INITIALIZATION
# ==============================================================================

from online_course.utils.helpers import (
    utc_now,
    file_extension,
    blob_safe_name,
)

__all__ = [
    "utc_now",
    "file_extension",
    "blob_safe_name",
]
