"""
Row and model builders shared across test modules.
"""

from datetime import datetime, timezone

from modules.listings.models import Listing

CREATED_AT = datetime(2025, 1, 1, tzinfo=timezone.utc)


def make_user_row(
    user_id: str = "freelancer-1",
    account_type: str = "freelancer",
    display_name: str = "Ada Freelancer",
    **overrides,
) -> dict:
    """Helper to create a `users` table row."""
    row = {
        "id": user_id,
        "email": f"{user_id}@example.com",
        "display_name": display_name,
        "account_type": account_type,
        "avatar": "",
        "expertise": None,
        "rating": 4.5,
        "verified": False,
        "created_at": CREATED_AT.isoformat(),
    }
    row.update(overrides)
    return row


def make_listing_row(listing_id: str = "listing-1", **overrides) -> dict:
    """Helper to create a `listings` table row."""
    row = {
        "id": listing_id,
        "freelancer_id": "freelancer-1",
        "title": "Logo design",
        "description": "A clean vector logo",
        "price": 50,
        "category": "design",
        "sub_category": "Logo Design",
        "delivery_time": 3,
        "features": [],
        "image_url": "",
        "is_active": True,
        "rating": 0,
        "review_count": 0,
        "created_at": CREATED_AT.isoformat(),
    }
    row.update(overrides)
    return row


def make_listing(listing_id: str = "listing-1", **overrides) -> Listing:
    data = make_listing_row(listing_id, **overrides)
    data["created_at"] = CREATED_AT
    return Listing(**data)
