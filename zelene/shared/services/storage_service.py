"""
Storage Service

Object storage gateway for query attachments.

Path Layout:
============
Every upload gets a fresh key, so two uploads never overwrite each other:

    {folder}/{uuid4}.{ext}

    image/png,  "screen.png"   → images/1b4e28ba-2fa1-11d2-883f-0016d3cca427.png
    text/csv,   "export.csv"   → texts/....csv
    video/mp4,  "clip"         → others/....unknown

The folder comes from the MIME type (STORAGE_FOLDERS), the extension from
the original filename.

Usage:
======
    storage = StorageService()
    path = await storage.upload(data, "screen.png", "image/png")
    url = await storage.get_url(path)
"""

import uuid
from typing import Optional

from zelene.shared.adapters.s3_adapter import S3Adapter
from zelene.shared.utils.constants import (
    DEFAULT_STORAGE_FOLDER,
    STORAGE_FOLDERS,
    UNKNOWN_EXTENSION,
)


def folder_for(content_type: str) -> str:
    """Storage folder for a MIME type. Unlisted types go to "others"."""
    return STORAGE_FOLDERS.get(content_type.lower(), DEFAULT_STORAGE_FOLDER)


def extension_of(filename: str) -> str:
    """Extension after the last dot of filename, or "unknown" when absent."""
    _, dot, ext = filename.rpartition(".")
    return ext if dot and ext else UNKNOWN_EXTENSION


def build_path(filename: str, content_type: str) -> str:
    """Fresh storage path for an upload."""
    return f"{folder_for(content_type)}/{uuid.uuid4()}.{extension_of(filename)}"


class StorageService:
    """
    Service for storing and resolving attachments.

    Attributes:
        adapter: S3Adapter performing the transfers
    """

    def __init__(self, adapter: Optional[S3Adapter] = None) -> None:
        self.adapter = adapter or S3Adapter()

    async def upload(self, data: bytes, filename: str, content_type: str) -> str:
        """
        Store bytes and return the storage path.

        Args:
            data: File contents
            filename: Original filename (source of the extension)
            content_type: MIME type (source of the folder)

        Returns:
            Storage path of the new object

        Raises:
            ExternalServiceError: If the transfer fails (no retry)
        """
        path = build_path(filename, content_type)
        await self.adapter.put_object_async(path, data, content_type)
        return path

    async def get_url(self, path: str) -> str:
        """Time-limited download URL for a stored path."""
        return await self.adapter.presigned_url_async(path)
