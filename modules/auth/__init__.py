"""
Authentication module.

Handles sign-up/sign-in against the hosted identity provider, local form
validation, the registration rollback saga and the session store.

Public API:
- IAuthService: Interface for auth flows
- IAuthProvider: Interface the identity provider adapter satisfies
- SessionStore / SessionSnapshot: identity + profile state
- RegisterRequest / LoginRequest: form models
- Auth exceptions
"""

from .interfaces import IAuthService, IAuthProvider
from .models import AuthErrorCode, RegisterRequest, LoginRequest, SessionSnapshot
from .session import SessionStore
from .exceptions import (
    RegistrationValidationError,
    LoginValidationError,
    ProviderAuthError,
    EmailNotVerifiedError,
    NotSignedInError,
    user_message,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "IAuthProvider",
    # Models
    "AuthErrorCode",
    "RegisterRequest",
    "LoginRequest",
    "SessionSnapshot",
    "SessionStore",
    # Exceptions
    "RegistrationValidationError",
    "LoginValidationError",
    "ProviderAuthError",
    "EmailNotVerifiedError",
    "NotSignedInError",
    "user_message",
]
