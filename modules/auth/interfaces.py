"""
Authentication module interfaces.

IAuthProvider is the seam to the hosted identity service; IAuthService is
what screens call. Other modules should depend on these, not on the
concrete implementations.
"""

from typing import Callable, Protocol, Optional, runtime_checkable

from shared.models import Identity

from .models import RegisterRequest, LoginRequest


IdentityCallback = Callable[[Optional[Identity]], None]


@runtime_checkable
class IAuthProvider(Protocol):
    """
    Contract the hosted authentication provider must satisfy.

    `subscribe` must deliver at least one callback for the initial
    resolution, even when there is no session. `reload` must return the
    server's current view of the identity (e.g. a fresh email_verified).
    """

    def sign_up(self, email: str, password: str, display_name: str) -> Identity:
        """Create an identity. Sends the verification email."""
        ...

    def sign_in(self, email: str, password: str) -> Identity:
        """Sign in with email and password."""
        ...

    def sign_out(self) -> None:
        """End the current session."""
        ...

    def subscribe(self, callback: IdentityCallback) -> Callable[[], None]:
        """Register for identity changes. Returns the unsubscribe handle."""
        ...

    def current_identity(self) -> Optional[Identity]:
        """Identity of the cached session, without a network round-trip."""
        ...

    def reload(self) -> Optional[Identity]:
        """Refresh the identity from the server."""
        ...

    def resend_verification_email(self, email: str) -> None:
        """Send the sign-up verification email again."""
        ...

    def send_password_reset(self, email: str) -> None:
        """Send a password reset email."""
        ...

    def delete_identity(self, user_id: str) -> None:
        """Permanently delete an identity."""
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication flows invoked by screens.
    """

    async def register(self, request: RegisterRequest) -> Identity:
        """
        Register an identity and its profile.

        Validates the form locally first. If the profile cannot be written,
        the just-created identity is deleted and the original error is
        re-raised.

        Raises:
            RegistrationValidationError: If the form is invalid (no I/O done)
            ProviderAuthError: If the provider rejects the sign-up
        """
        ...

    async def login(self, request: LoginRequest) -> Identity:
        """
        Sign in. Unverified identities are signed out again.

        Raises:
            LoginValidationError: If the form is incomplete
            EmailNotVerifiedError: If the email is not verified
            ProviderAuthError: If the provider rejects the credentials
        """
        ...

    async def logout(self) -> None:
        """Sign out."""
        ...

    async def resend_verification_email(self) -> None:
        """Resend the verification email to the signed-in identity."""
        ...

    async def check_email_verified(self) -> bool:
        """Reload the identity and report whether its email is verified."""
        ...

    async def reset_password(self, email: str) -> None:
        """Send a password reset email."""
        ...

    async def delete_account(self) -> None:
        """Delete the signed-in identity."""
        ...
