"""
Listings module interfaces.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import (
    Listing,
    CreateListingRequest,
    UpdateListingRequest,
    SearchFilters,
    Favorite,
)


@runtime_checkable
class IListingService(Protocol):
    """Interface for service listing operations."""

    async def create_listing(self, freelancer_id: str, request: CreateListingRequest) -> Listing:
        """Create a listing. New listings are active with no rating."""
        ...

    async def get_listing(self, listing_id: str) -> Optional[Listing]:
        """Get a listing by ID."""
        ...

    async def list_for_freelancer(self, freelancer_id: str, active_only: bool = False) -> list[Listing]:
        """A freelancer's listings, newest first."""
        ...

    async def list_active(self, limit: Optional[int] = None) -> list[Listing]:
        """Active listings for the home feed, newest first."""
        ...

    async def update_listing(
        self, listing_id: str, freelancer_id: str, request: UpdateListingRequest
    ) -> Listing:
        """
        Update a listing owned by `freelancer_id`.

        Raises:
            ListingNotFoundError: If the listing does not exist
            ListingAccessDeniedError: If the listing belongs to someone else
        """
        ...

    async def set_active(self, listing_id: str, freelancer_id: str, is_active: bool) -> Listing:
        """Toggle search visibility."""
        ...

    async def delete_listing(self, listing_id: str, freelancer_id: str) -> None:
        """Delete a listing owned by `freelancer_id`."""
        ...

    async def search(self, filters: SearchFilters) -> list[Listing]:
        """Search active listings."""
        ...


@runtime_checkable
class IFavoriteService(Protocol):
    """Interface for a client's saved listings."""

    async def add_favorite(self, user_id: str, listing_id: str) -> Favorite:
        """Save a listing. Saving twice returns the existing favorite."""
        ...

    async def remove_favorite(self, user_id: str, listing_id: str) -> None:
        ...

    async def is_favorite(self, user_id: str, listing_id: str) -> bool:
        ...

    async def list_favorites(self, user_id: str) -> list[Favorite]:
        ...
