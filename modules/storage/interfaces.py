"""
Storage module interfaces.
"""

from typing import Protocol, runtime_checkable

from .models import ImageFolder


@runtime_checkable
class IStorageService(Protocol):
    """Interface for image uploads."""

    async def upload_bytes(self, path: str, data: bytes) -> str:
        """
        Upload image bytes to `path`, replacing any existing object.

        Returns:
            Public URL of the uploaded image
        """
        ...

    async def upload_image(self, source: str, path: str) -> str:
        """Upload a local file or an http(s) URL to `path`."""
        ...

    async def upload_for(self, folder: ImageFolder, owner_id: str, source: str) -> str:
        """Upload under a fresh timestamp-based path in `folder`."""
        ...
