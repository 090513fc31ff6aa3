"""
Listings service implementation.

Listing CRUD for freelancers, search for clients, and favorites.
"""

import asyncio
from typing import Optional

from shared.database import get_supabase_client

from .interfaces import IListingService, IFavoriteService
from .models import (
    Listing,
    CreateListingRequest,
    UpdateListingRequest,
    SearchFilters,
    Favorite,
)
from .repository import ListingRepository, FavoriteRepository
from .exceptions import ListingNotFoundError, ListingAccessDeniedError


def apply_search_filters(listings: list[Listing], filters: SearchFilters) -> list[Listing]:
    """
    Filter fetched listings by text, price range and minimum rating.

    Text matches title or description, case-insensitively.
    """
    results = listings

    if filters.query:
        needle = filters.query.lower()
        results = [
            listing for listing in results
            if needle in listing.title.lower() or needle in listing.description.lower()
        ]

    if filters.min_price is not None:
        results = [listing for listing in results if listing.price >= filters.min_price]
    if filters.max_price is not None:
        results = [listing for listing in results if listing.price <= filters.max_price]
    if filters.min_rating is not None:
        results = [listing for listing in results if listing.rating >= filters.min_rating]

    return results


class ListingService(IListingService):
    """
    Listing operations backed by the `listings` table.

    Repository calls block on the network; they run in a worker thread so
    a stalled read can be abandoned by a timeout.
    """

    def __init__(self, repository: ListingRepository):
        self._repo = repository

    async def create_listing(self, freelancer_id: str, request: CreateListingRequest) -> Listing:
        data = {"freelancer_id": freelancer_id, **request.model_dump()}
        return await asyncio.to_thread(self._repo.create, data)

    async def get_listing(self, listing_id: str) -> Optional[Listing]:
        return await asyncio.to_thread(self._repo.get_by_id, listing_id)

    async def list_for_freelancer(self, freelancer_id: str, active_only: bool = False) -> list[Listing]:
        return await asyncio.to_thread(
            self._repo.list_by_freelancer, freelancer_id, active_only=active_only
        )

    async def list_active(self, limit: Optional[int] = None) -> list[Listing]:
        return await asyncio.to_thread(self._repo.list_active, limit=limit)

    async def update_listing(
        self, listing_id: str, freelancer_id: str, request: UpdateListingRequest
    ) -> Listing:
        await self._get_owned(listing_id, freelancer_id)
        data = request.model_dump(exclude_none=True)
        updated = await asyncio.to_thread(self._repo.update, listing_id, data)
        if updated is None:
            raise ListingNotFoundError(listing_id)
        return updated

    async def set_active(self, listing_id: str, freelancer_id: str, is_active: bool) -> Listing:
        return await self.update_listing(
            listing_id, freelancer_id, UpdateListingRequest(is_active=is_active)
        )

    async def delete_listing(self, listing_id: str, freelancer_id: str) -> None:
        await self._get_owned(listing_id, freelancer_id)
        await asyncio.to_thread(self._repo.delete, listing_id)

    async def search(self, filters: SearchFilters) -> list[Listing]:
        listings = await asyncio.to_thread(self._repo.list_active, category=filters.category)
        return apply_search_filters(listings, filters)

    async def _get_owned(self, listing_id: str, freelancer_id: str) -> Listing:
        listing = await asyncio.to_thread(self._repo.get_by_id, listing_id)
        if listing is None:
            raise ListingNotFoundError(listing_id)
        if listing.freelancer_id != freelancer_id:
            raise ListingAccessDeniedError(listing_id, freelancer_id)
        return listing


class FavoriteService(IFavoriteService):
    """Favorites backed by the `favorites` table."""

    def __init__(self, repository: FavoriteRepository):
        self._repo = repository

    async def add_favorite(self, user_id: str, listing_id: str) -> Favorite:
        existing = await asyncio.to_thread(self._repo.find, user_id, listing_id)
        if existing:
            return existing[0]
        return await asyncio.to_thread(self._repo.create, user_id, listing_id)

    async def remove_favorite(self, user_id: str, listing_id: str) -> None:
        await asyncio.to_thread(self._repo.delete, user_id, listing_id)

    async def is_favorite(self, user_id: str, listing_id: str) -> bool:
        return bool(await asyncio.to_thread(self._repo.find, user_id, listing_id))

    async def list_favorites(self, user_id: str) -> list[Favorite]:
        return await asyncio.to_thread(self._repo.list_by_user, user_id)


# Module-level instance getters
_listing_service: Optional[ListingService] = None
_favorite_service: Optional[FavoriteService] = None


def get_listing_service() -> ListingService:
    """Get the listing service singleton."""
    global _listing_service
    if _listing_service is None:
        _listing_service = ListingService(ListingRepository(get_supabase_client()))
    return _listing_service


def get_favorite_service() -> FavoriteService:
    """Get the favorite service singleton."""
    global _favorite_service
    if _favorite_service is None:
        _favorite_service = FavoriteService(FavoriteRepository(get_supabase_client()))
    return _favorite_service


def reset_listing_services() -> None:
    """Reset the listing service singletons (for testing)."""
    global _listing_service, _favorite_service
    _listing_service = None
    _favorite_service = None