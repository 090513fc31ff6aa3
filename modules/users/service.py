"""
Users service implementation.
"""

import asyncio
from typing import Optional

from shared.database import get_supabase_client

from .interfaces import IUserService
from .models import Profile, CreateProfileRequest, UpdateProfileRequest
from .repository import UserRepository
from .exceptions import ProfileNotFoundError


class UserService(IUserService):
    """Profile operations backed by the `users` table."""

    def __init__(self, repository: UserRepository):
        self._repo = repository

    async def create_profile(self, user_id: str, request: CreateProfileRequest) -> Profile:
        data = request.model_dump(mode="json")
        return await asyncio.to_thread(self._repo.insert, user_id, data)

    async def get_profile(self, user_id: str) -> Optional[Profile]:
        return await asyncio.to_thread(self._repo.get_by_id, user_id)

    async def update_profile(self, user_id: str, request: UpdateProfileRequest) -> Profile:
        data = request.model_dump(exclude_none=True)
        if not data:
            profile = await asyncio.to_thread(self._repo.get_by_id, user_id)
        else:
            profile = await asyncio.to_thread(self._repo.update, user_id, data)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        return profile


# Module-level instance getter
_service_instance: Optional[UserService] = None


def get_user_service() -> UserService:
    """Get the user service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = UserService(UserRepository(get_supabase_client()))
    return _service_instance


def reset_user_service() -> None:
    """Reset the user service singleton (for testing)."""
    global _service_instance
    _service_instance = None
