"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import AccountType, Identity
from modules.users.models import Profile


class AuthErrorCode(str, Enum):
    """Provider-independent auth failure codes."""

    EMAIL_IN_USE = "email_in_use"
    INVALID_EMAIL = "invalid_email"
    WEAK_PASSWORD = "weak_password"
    EMAIL_NOT_VERIFIED = "email_not_verified"
    INVALID_CREDENTIALS = "invalid_credentials"
    UNKNOWN = "unknown"


class RegisterRequest(BaseModel):
    """
    Registration form contents.

    Fields are not constrained here: the form is validated locally by
    `validation.validate_registration` so the user sees one specific
    message before any network call is made.
    """

    email: str = Field(default="", description="Email address")
    password: str = Field(default="", description="Plain-text password")
    display_name: str = Field(default="", description="Display name")
    account_type: AccountType = Field(..., description="client or freelancer")
    expertise: Optional[str] = Field(None, description="Freelancer expertise")
    terms_accepted: bool = Field(default=False, description="Terms of use accepted")


class LoginRequest(BaseModel):
    """Login form contents."""

    email: str = ""
    password: str = ""


class SessionSnapshot(BaseModel):
    """
    Immutable view of the session store.

    `profile is None` with an identity present means the profile read
    failed or the document is missing; it is distinct from `is_loading`.
    """

    identity: Optional[Identity] = None
    profile: Optional[Profile] = None
    is_loading: bool = True

    model_config = {"frozen": True}

    @property
    def signed_in(self) -> bool:
        return self.identity is not None
