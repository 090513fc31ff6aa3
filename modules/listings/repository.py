"""
Listing repository for database access.

Encapsulates all Supabase queries and data mapping for:
- listings
- favorites

Note: This repository does NOT perform ownership checks.
The service layer is responsible for verifying the freelancer owns a listing.
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import Listing, Favorite, DEFAULT_DELIVERY_DAYS


class ListingRepository(BaseRepository[Listing]):
    """Repository for service listings."""

    TABLE = "listings"

    def create(self, data: dict[str, Any]) -> Listing:
        row = {
            **data,
            "is_active": True,
            "rating": 0,
            "review_count": 0,
            "created_at": self._now(),
        }
        result = self._db.table(self.TABLE).insert(row).execute()
        return self._map_to_listing(result.data[0])

    def get_by_id(self, listing_id: str) -> Optional[Listing]:
        result = self._db.table(self.TABLE).select("*").eq("id", listing_id).execute()
        row = self._first(result.data)
        if row is None:
            return None
        return self._map_to_listing(row)

    def list_by_freelancer(self, freelancer_id: str, active_only: bool = False) -> list[Listing]:
        query = self._db.table(self.TABLE).select("*").eq("freelancer_id", freelancer_id)
        if active_only:
            query = query.eq("is_active", True)
        result = query.order("created_at", desc=True).execute()
        return [self._map_to_listing(row) for row in result.data]

    def list_active(self, category: Optional[str] = None, limit: Optional[int] = None) -> list[Listing]:
        query = self._db.table(self.TABLE).select("*").eq("is_active", True)
        if category:
            query = query.eq("category", category)
        query = query.order("created_at", desc=True)
        if limit:
            query = query.limit(limit)
        result = query.execute()
        return [self._map_to_listing(row) for row in result.data]

    def update(self, listing_id: str, data: dict[str, Any]) -> Optional[Listing]:
        data = {**data, "updated_at": self._now()}
        result = self._db.table(self.TABLE).update(data).eq("id", listing_id).execute()
        row = self._first(result.data)
        if row is None:
            return None
        return self._map_to_listing(row)

    def delete(self, listing_id: str) -> None:
        self._db.table(self.TABLE).delete().eq("id", listing_id).execute()

    def _map_to_listing(self, data: dict[str, Any]) -> Listing:
        return Listing(
            id=str(data["id"]),
            freelancer_id=str(data["freelancer_id"]),
            title=data["title"],
            description=data.get("description") or "",
            price=float(data.get("price") or 0),
            category=data["category"],
            sub_category=data.get("sub_category") or "",
            delivery_time=data.get("delivery_time") or DEFAULT_DELIVERY_DAYS,
            features=data.get("features") or [],
            image_url=data.get("image_url") or "",
            is_active=data.get("is_active", True) is not False,
            rating=float(data.get("rating") or 0),
            review_count=int(data.get("review_count") or 0),
            created_at=self._parse_timestamp(data.get("created_at")),
            updated_at=self._parse_timestamp(data["updated_at"]) if data.get("updated_at") else None,
        )


class FavoriteRepository(BaseRepository[Favorite]):
    """Repository for saved listings."""

    TABLE = "favorites"

    def find(self, user_id: str, listing_id: str) -> list[Favorite]:
        result = (
            self._db.table(self.TABLE)
            .select("*")
            .eq("user_id", user_id)
            .eq("listing_id", listing_id)
            .execute()
        )
        return [self._map_to_favorite(row) for row in result.data]

    def create(self, user_id: str, listing_id: str) -> Favorite:
        row = {"user_id": user_id, "listing_id": listing_id, "created_at": self._now()}
        result = self._db.table(self.TABLE).insert(row).execute()
        return self._map_to_favorite(result.data[0])

    def delete(self, user_id: str, listing_id: str) -> None:
        (
            self._db.table(self.TABLE)
            .delete()
            .eq("user_id", user_id)
            .eq("listing_id", listing_id)
            .execute()
        )

    def list_by_user(self, user_id: str) -> list[Favorite]:
        result = self._db.table(self.TABLE).select("*").eq("user_id", user_id).execute()
        return [self._map_to_favorite(row) for row in result.data]

    def _map_to_favorite(self, data: dict[str, Any]) -> Favorite:
        return Favorite(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            listing_id=str(data["listing_id"]),
            created_at=self._parse_timestamp(data.get("created_at")),
        )
