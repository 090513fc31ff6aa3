"""
Users module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import AccountType


class Profile(BaseModel):
    """
    Profile document for an identity, keyed by the identity's ID.
    """

    id: str = Field(..., description="Identity ID this profile belongs to")
    email: str = Field(..., description="Email address")
    display_name: str = Field(default="", description="Display name")
    account_type: AccountType = Field(..., description="client or freelancer")
    avatar: Optional[str] = Field(None, description="Avatar URL")
    expertise: Optional[str] = Field(None, description="Freelancer expertise")
    title: Optional[str] = Field(None, description="Professional title")
    bio: Optional[str] = Field(None, description="Short biography")
    phone: Optional[str] = Field(None, description="Phone number")
    rating: Optional[float] = Field(None, description="Average rating")
    verified: bool = Field(default=False, description="Marketplace verification badge")
    created_at: datetime = Field(..., description="Profile creation time")

    @property
    def is_freelancer(self) -> bool:
        return self.account_type == AccountType.FREELANCER


class CreateProfileRequest(BaseModel):
    """Fields written when a profile is created at registration."""

    email: str
    display_name: str
    account_type: AccountType
    expertise: Optional[str] = None
    avatar: str = ""
    rating: float = 0
    verified: bool = False


class UpdateProfileRequest(BaseModel):
    """Partial profile update from the edit-profile flows."""

    display_name: Optional[str] = None
    avatar: Optional[str] = None
    expertise: Optional[str] = None
    title: Optional[str] = None
    bio: Optional[str] = None
    phone: Optional[str] = None
