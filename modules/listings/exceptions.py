"""
Listings module exceptions.
"""

from shared.exceptions import NotFoundError, AuthorizationError


class ListingNotFoundError(NotFoundError):
    """Raised when a listing is not found."""

    def __init__(self, listing_id: str):
        super().__init__(
            f"Listing not found: {listing_id}",
            code="LISTING_NOT_FOUND",
            details={"listing_id": listing_id},
        )


class ListingAccessDeniedError(AuthorizationError):
    """Raised when a freelancer edits a listing they do not own."""

    def __init__(self, listing_id: str, user_id: str):
        super().__init__(
            f"Access denied to listing: {listing_id}",
            code="LISTING_ACCESS_DENIED",
            details={"listing_id": listing_id, "user_id": user_id},
        )
