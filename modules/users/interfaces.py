"""
Users module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Profile, CreateProfileRequest, UpdateProfileRequest


@runtime_checkable
class IUserService(Protocol):
    """Interface for profile operations."""

    async def create_profile(self, user_id: str, request: CreateProfileRequest) -> Profile:
        """
        Create the profile document for a newly registered identity.

        Args:
            user_id: Identity ID (becomes the profile ID)
            request: Registration fields

        Returns:
            The stored profile
        """
        ...

    async def get_profile(self, user_id: str) -> Optional[Profile]:
        """
        Single read of a profile document.

        Returns:
            Profile if found, None otherwise
        """
        ...

    async def update_profile(self, user_id: str, request: UpdateProfileRequest) -> Profile:
        """
        Apply a partial update to a profile.

        Raises:
            ProfileNotFoundError: If the profile does not exist
        """
        ...
