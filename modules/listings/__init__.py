"""
Listings module.

Handles freelancer service listings, client-side search and favorites.

Public API:
- IListingService / IFavoriteService
- Listing, CreateListingRequest, UpdateListingRequest, SearchFilters, Favorite
- CATEGORIES: static category catalogue
"""

from .interfaces import IListingService, IFavoriteService
from .models import (
    Listing,
    CreateListingRequest,
    UpdateListingRequest,
    SearchFilters,
    Favorite,
)
from .categories import CATEGORIES, Category, get_category
from .exceptions import ListingNotFoundError, ListingAccessDeniedError

__all__ = [
    # Interfaces
    "IListingService",
    "IFavoriteService",
    # Models
    "Listing",
    "CreateListingRequest",
    "UpdateListingRequest",
    "SearchFilters",
    "Favorite",
    "CATEGORIES",
    "Category",
    "get_category",
    # Exceptions
    "ListingNotFoundError",
    "ListingAccessDeniedError",
]
