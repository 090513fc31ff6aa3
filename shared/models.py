"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class AccountType(str, Enum):
    """The two kinds of marketplace account."""

    CLIENT = "client"
    FREELANCER = "freelancer"


class Identity(BaseModel):
    """
    Represents a signed-in identity as reported by the auth provider.

    Read-only to the marketplace: it is created on sign-up, destroyed on
    account deletion and persisted across restarts by the provider.
    """

    id: str = Field(..., description="User ID (UUID from Supabase Auth)")
    email: str = Field(default="", description="User's email address")
    email_verified: bool = Field(default=False, description="Whether email is verified")
    display_name: Optional[str] = Field(None, description="Display name from auth metadata")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }
