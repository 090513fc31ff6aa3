"""
Image storage on Supabase Storage.

Images are stored under `<folder>/<owner>/<epoch millis>.jpg` and always
uploaded with upsert, so retrying an upload to the same path is safe.
"""

import asyncio
import logging
import time
from pathlib import Path
from typing import Optional

import httpx
from supabase import Client

from shared.config import get_settings
from shared.database import get_supabase_client

from .interfaces import IStorageService
from .models import ImageFolder
from .exceptions import ImageUploadError

logger = logging.getLogger(__name__)

FETCH_TIMEOUT_SECONDS = 30.0


def image_path(folder: ImageFolder, owner_id: str, timestamp_ms: Optional[int] = None) -> str:
    """Storage path for a new image of `owner_id`."""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"{folder.value}/{owner_id}/{timestamp_ms}.jpg"


class StorageService(IStorageService):
    """Uploads images to one Supabase Storage bucket."""

    def __init__(self, client: Client, bucket: str, content_type: str = "image/jpeg"):
        self._client = client
        self._bucket = bucket
        self._content_type = content_type

    async def upload_bytes(self, path: str, data: bytes) -> str:
        try:
            await asyncio.to_thread(self._upload, path, data)
        except Exception as e:
            logger.error(f"Upload of {path} failed: {e}")
            raise ImageUploadError(path, str(e))
        return self.public_url(path)

    async def upload_image(self, source: str, path: str) -> str:
        data = await self._read_source(source, path)
        return await self.upload_bytes(path, data)

    async def upload_for(self, folder: ImageFolder, owner_id: str, source: str) -> str:
        return await self.upload_image(source, image_path(folder, owner_id))

    def public_url(self, path: str) -> str:
        return self._client.storage.from_(self._bucket).get_public_url(path)

    def _upload(self, path: str, data: bytes) -> None:
        self._client.storage.from_(self._bucket).upload(
            path,
            data,
            {"content-type": self._content_type, "upsert": "true"},
        )

    async def _read_source(self, source: str, path: str) -> bytes:
        if source.startswith(("http://", "https://")):
            try:
                async with httpx.AsyncClient() as client:
                    response = await client.get(source, timeout=FETCH_TIMEOUT_SECONDS)
                    response.raise_for_status()
                    return response.content
            except Exception as e:
                raise ImageUploadError(path, f"could not fetch {source}: {e}", service="http")

        try:
            return await asyncio.to_thread(Path(source).read_bytes)
        except OSError as e:
            raise ImageUploadError(path, f"could not read {source}: {e}")


# Module-level instance getter
_service_instance: Optional[StorageService] = None


def get_storage_service() -> StorageService:
    """Get the storage service singleton."""
    global _service_instance
    if _service_instance is None:
        settings = get_settings()
        _service_instance = StorageService(
            get_supabase_client(),
            settings.storage_bucket,
            settings.storage_content_type,
        )
    return _service_instance


def reset_storage_service() -> None:
    """Reset the storage service singleton (for testing)."""
    global _service_instance
    _service_instance = None
