"""
User repository for the `users` table.
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from shared.models import AccountType
from .models import Profile


class UserRepository(BaseRepository[Profile]):
    """Repository for profile documents."""

    TABLE = "users"

    def insert(self, user_id: str, data: dict[str, Any]) -> Profile:
        row = {"id": user_id, **data, "created_at": self._now()}
        result = self._db.table(self.TABLE).insert(row).execute()
        return self._map_to_profile(result.data[0])

    def get_by_id(self, user_id: str) -> Optional[Profile]:
        result = self._db.table(self.TABLE).select("*").eq("id", user_id).execute()
        row = self._first(result.data)
        if row is None:
            return None
        return self._map_to_profile(row)

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[Profile]:
        result = self._db.table(self.TABLE).update(data).eq("id", user_id).execute()
        row = self._first(result.data)
        if row is None:
            return None
        return self._map_to_profile(row)

    def _map_to_profile(self, data: dict[str, Any]) -> Profile:
        return Profile(
            id=str(data["id"]),
            email=data.get("email", ""),
            display_name=data.get("display_name") or "",
            account_type=AccountType(data["account_type"]),
            avatar=data.get("avatar"),
            expertise=data.get("expertise"),
            title=data.get("title"),
            bio=data.get("bio"),
            phone=data.get("phone"),
            rating=data.get("rating"),
            verified=bool(data.get("verified", False)),
            created_at=self._parse_timestamp(data.get("created_at")),
        )
