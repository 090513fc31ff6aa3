"""
Listings module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


DEFAULT_DELIVERY_DAYS = 3


class Listing(BaseModel):
    """A freelancer's service listing."""

    id: str = Field(..., description="Listing ID")
    freelancer_id: str = Field(..., description="Owning freelancer's identity ID")
    title: str = Field(..., description="Listing title")
    description: str = Field(default="", description="Listing description")
    price: float = Field(..., ge=0, description="Price")
    category: str = Field(..., description="Category ID")
    sub_category: str = Field(default="", description="Sub-category name")
    delivery_time: int = Field(default=DEFAULT_DELIVERY_DAYS, description="Delivery time in days")
    features: list[str] = Field(default_factory=list, description="Included features")
    image_url: str = Field(default="", description="Cover image URL")
    is_active: bool = Field(default=True, description="Visible in search")
    rating: float = Field(default=0, description="Average rating")
    review_count: int = Field(default=0, description="Number of reviews")
    created_at: datetime = Field(..., description="Creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")


class CreateListingRequest(BaseModel):
    """Fields submitted from the create-listing screen."""

    title: str = Field(..., min_length=1)
    description: str = ""
    price: float = Field(..., ge=0)
    category: str = Field(..., min_length=1)
    sub_category: str = ""
    delivery_time: int = Field(default=DEFAULT_DELIVERY_DAYS, ge=1)
    features: list[str] = Field(default_factory=list)
    image_url: str = ""


class UpdateListingRequest(BaseModel):
    """Partial listing update."""

    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    category: Optional[str] = None
    sub_category: Optional[str] = None
    delivery_time: Optional[int] = Field(None, ge=1)
    features: Optional[list[str]] = None
    image_url: Optional[str] = None
    is_active: Optional[bool] = None


class SearchFilters(BaseModel):
    """
    Search bag passed from the client home screen to the search screen.

    Only `category` is applied by the database; the rest are applied to
    the fetched rows, which avoids composite indexes on range filters.
    """

    query: str = ""
    category: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    min_rating: Optional[float] = None

    model_config = {"frozen": True}


class Favorite(BaseModel):
    """A client's saved listing."""

    id: str
    user_id: str
    listing_id: str
    created_at: datetime
