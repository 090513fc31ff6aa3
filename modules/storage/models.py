"""
Storage data models.
"""

from enum import Enum


class ImageFolder(str, Enum):
    """Top-level folder of an uploaded image."""

    LISTINGS = "listings"
    AVATARS = "avatars"
    CHAT = "chat"
