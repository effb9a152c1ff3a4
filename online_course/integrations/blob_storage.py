# ==============================================================================
# BLOB STORAGE - File Upload Collaborator
# ==============================================================================
# Stores uploaded files (course thumbnails, profile pictures) and returns
# their public URL
# ==============================================================================

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from online_course.core.exceptions import ServiceUnavailableError

logger = logging.getLogger(__name__)


class BlobStorageService(ABC):
    """Contract of the blob storage collaborator."""

    @abstractmethod
    async def upload(
        self,
        content: bytes,
        file_name: str,
        container: str,
    ) -> str:
        """
        Store ``content`` as ``container/file_name``.

        Existing blobs with the same name are overwritten.

        Returns:
            Public URL of the stored blob

        Raises:
            ServiceUnavailableError: If the blob cannot be written
        """
        pass


class LocalBlobStorage(BlobStorageService):
    """
    Blob storage on the local filesystem.

    Files land under ``root/container/file_name`` and are served from
    ``base_url/container/file_name``.
    """

    def __init__(self, root: str, base_url: str) -> None:
        self._root = Path(root)
        self._base_url = base_url.rstrip("/")

    def _write(self, path: Path, content: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.write(content)

    async def upload(
        self,
        content: bytes,
        file_name: str,
        container: str,
    ) -> str:
        # Blob names never carry directories
        safe_name = Path(file_name).name
        path = self._root / container / safe_name

        try:
            await asyncio.to_thread(self._write, path, content)
        except OSError as e:
            logger.error(f"Blob upload failed for {container}/{safe_name}: {e}")
            raise ServiceUnavailableError(
                message="Blob storage is unavailable",
                service_name="blob_storage",
            ) from e

        url = f"{self._base_url}/{container}/{safe_name}"
        logger.info(f"Stored blob {container}/{safe_name} ({len(content)} bytes)")
        return url
