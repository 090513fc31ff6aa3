"""
Supabase Auth adapter.

Translates the Supabase auth client into IAuthProvider: Supabase users
become Identity models and Supabase auth errors become ProviderAuthError
with a provider-independent code.
"""

import logging
from typing import Any, Callable, Optional

from supabase import AuthError, Client

from shared.exceptions import ExternalServiceError
from shared.models import Identity

from .interfaces import IAuthProvider, IdentityCallback
from .models import AuthErrorCode
from .exceptions import ProviderAuthError

logger = logging.getLogger(__name__)


# Supabase error codes -> provider-independent codes
SUPABASE_ERROR_CODES: dict[str, AuthErrorCode] = {
    "user_already_exists": AuthErrorCode.EMAIL_IN_USE,
    "email_exists": AuthErrorCode.EMAIL_IN_USE,
    "email_address_invalid": AuthErrorCode.INVALID_EMAIL,
    "validation_failed": AuthErrorCode.INVALID_EMAIL,
    "weak_password": AuthErrorCode.WEAK_PASSWORD,
    "email_not_confirmed": AuthErrorCode.EMAIL_NOT_VERIFIED,
    "invalid_credentials": AuthErrorCode.INVALID_CREDENTIALS,
}

# Auth events that can change which identity is signed in
IDENTITY_EVENTS = {
    "INITIAL_SESSION",
    "SIGNED_IN",
    "SIGNED_OUT",
    "USER_UPDATED",
    "USER_DELETED",
}


def map_auth_error(error: Exception) -> ProviderAuthError:
    """Convert a Supabase auth error into a ProviderAuthError."""
    code = getattr(error, "code", None)
    mapped = SUPABASE_ERROR_CODES.get(code or "", AuthErrorCode.UNKNOWN)
    return ProviderAuthError(mapped, provider_message=getattr(error, "message", str(error)))


def to_identity(user: Any) -> Identity:
    """Build an Identity from a Supabase User object."""
    metadata = getattr(user, "user_metadata", None) or {}
    return Identity(
        id=str(user.id),
        email=user.email or "",
        email_verified=getattr(user, "email_confirmed_at", None) is not None,
        display_name=metadata.get("display_name"),
    )


class SupabaseAuthProvider(IAuthProvider):
    """
    IAuthProvider backed by Supabase Auth.

    Args:
        client: Session client (anon key); owns the persisted session
        admin_client: Optional service-role client for admin deletes
    """

    def __init__(self, client: Client, admin_client: Optional[Client] = None):
        self._client = client
        self._admin = admin_client

    def sign_up(self, email: str, password: str, display_name: str) -> Identity:
        try:
            response = self._client.auth.sign_up({
                "email": email,
                "password": password,
                "options": {"data": {"display_name": display_name}},
            })
        except AuthError as e:
            raise map_auth_error(e) from e

        if response.user is None:
            raise ProviderAuthError(AuthErrorCode.UNKNOWN, "sign_up returned no user")
        return to_identity(response.user)

    def sign_in(self, email: str, password: str) -> Identity:
        try:
            response = self._client.auth.sign_in_with_password({
                "email": email,
                "password": password,
            })
        except AuthError as e:
            raise map_auth_error(e) from e

        if response.user is None:
            raise ProviderAuthError(AuthErrorCode.INVALID_CREDENTIALS)
        return to_identity(response.user)

    def sign_out(self) -> None:
        try:
            self._client.auth.sign_out()
        except AuthError as e:
            raise map_auth_error(e) from e

    def subscribe(self, callback: IdentityCallback) -> Callable[[], None]:
        def on_change(event: str, session: Any) -> None:
            if event not in IDENTITY_EVENTS:
                return
            user = getattr(session, "user", None) if session else None
            callback(to_identity(user) if user else None)

        subscription = self._client.auth.on_auth_state_change(on_change)

        # The initial resolution is always delivered, session or not.
        callback(self.current_identity())

        return subscription.unsubscribe

    def current_identity(self) -> Optional[Identity]:
        try:
            session = self._client.auth.get_session()
        except AuthError as e:
            logger.warning(f"Could not read cached session: {e}")
            return None
        if session is None or session.user is None:
            return None
        return to_identity(session.user)

    def reload(self) -> Optional[Identity]:
        try:
            response = self._client.auth.get_user()
        except AuthError as e:
            raise map_auth_error(e) from e
        if response is None or response.user is None:
            return None
        return to_identity(response.user)

    def resend_verification_email(self, email: str) -> None:
        try:
            self._client.auth.resend({"type": "signup", "email": email})
        except AuthError as e:
            raise map_auth_error(e) from e

    def send_password_reset(self, email: str) -> None:
        try:
            self._client.auth.reset_password_for_email(email)
        except AuthError as e:
            raise map_auth_error(e) from e

    def delete_identity(self, user_id: str) -> None:
        """
        Delete an auth identity.

        With a service-role client this is an admin delete. Otherwise the
        session client calls `delete_own_identity`, which removes the
        signed-in user's own identity, or a fresh identity that never got
        a profile (a registration being rolled back).
        """
        if self._admin is not None:
            try:
                self._admin.auth.admin.delete_user(user_id)
            except AuthError as e:
                raise map_auth_error(e) from e
            return

        try:
            response = self._client.rpc("delete_own_identity", {"p_user_id": user_id}).execute()
        except Exception as e:
            raise ExternalServiceError(
                f"Could not delete identity {user_id}: {e}",
                service="supabase-auth",
            ) from e

        if not response.data:
            raise ExternalServiceError(
                f"Identity {user_id} was not deleted",
                service="supabase-auth",
                details={"user_id": user_id},
            )
