"""
Storage module.

Image uploads (listing covers, avatars, chat photos) to object storage.
"""

from .models import ImageFolder
from .interfaces import IStorageService
from .service import StorageService, image_path, get_storage_service, reset_storage_service
from .exceptions import ImageUploadError

__all__ = [
    "ImageFolder",
    "IStorageService",
    "StorageService",
    "image_path",
    "get_storage_service",
    "reset_storage_service",
    "ImageUploadError",
]
