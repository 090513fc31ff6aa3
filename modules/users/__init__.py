"""
Users module.

Owns the profile document kept for every identity (the `users` table).

Public API:
- IUserService: Interface for profile operations
- Profile: Full profile document
- CreateProfileRequest / UpdateProfileRequest
- ProfileNotFoundError
"""

from .interfaces import IUserService
from .models import Profile, CreateProfileRequest, UpdateProfileRequest
from .exceptions import ProfileNotFoundError

__all__ = [
    # Interface
    "IUserService",
    # Models
    "Profile",
    "CreateProfileRequest",
    "UpdateProfileRequest",
    # Exceptions
    "ProfileNotFoundError",
]
