"""
Authentication service implementation.

Runs the auth flows screens invoke: registration (with compensating
rollback of the identity), login, logout, email verification and
account deletion.
"""

import asyncio
import logging
from typing import Optional

from shared.models import Identity

from modules.users.interfaces import IUserService
from modules.users.models import CreateProfileRequest

from .interfaces import IAuthService, IAuthProvider
from .models import RegisterRequest, LoginRequest
from .exceptions import (
    EmailNotVerifiedError,
    NotSignedInError,
    ProviderAuthError,
    REGISTRATION_TITLE,
)
from .validation import validate_registration, validate_login

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Provider calls are blocking SDK calls; they run in a worker thread so
    the event loop keeps serving other screens meanwhile.
    """

    def __init__(self, provider: IAuthProvider, users: IUserService):
        self._provider = provider
        self._users = users

    async def register(self, request: RegisterRequest) -> Identity:
        validate_registration(request)

        email = request.email.strip()
        display_name = request.display_name.strip()

        try:
            identity = await asyncio.to_thread(
                self._provider.sign_up, email, request.password, display_name
            )
        except ProviderAuthError as e:
            e.title = REGISTRATION_TITLE
            raise

        try:
            await self._users.create_profile(
                identity.id,
                CreateProfileRequest(
                    email=email,
                    display_name=display_name,
                    account_type=request.account_type,
                    expertise=request.expertise or None,
                ),
            )
        except Exception:
            logger.error(
                f"Profile creation failed for {identity.id}, rolling back identity",
                exc_info=True,
            )
            try:
                await asyncio.to_thread(self._provider.delete_identity, identity.id)
            except Exception as rollback_error:
                logger.error(f"Rollback of identity {identity.id} failed: {rollback_error}")
            raise

        logger.info(f"Registered {request.account_type.value} account {identity.id}")
        return identity

    async def login(self, request: LoginRequest) -> Identity:
        validate_login(request)

        identity = await asyncio.to_thread(
            self._provider.sign_in, request.email.strip(), request.password
        )

        if not identity.email_verified:
            await asyncio.to_thread(self._provider.sign_out)
            raise EmailNotVerifiedError()

        return identity

    async def logout(self) -> None:
        await asyncio.to_thread(self._provider.sign_out)

    async def resend_verification_email(self) -> None:
        identity = self._require_identity()
        await asyncio.to_thread(self._provider.resend_verification_email, identity.email)

    async def check_email_verified(self) -> bool:
        identity = await asyncio.to_thread(self._provider.reload)
        if identity is None:
            return False
        return identity.email_verified

    async def reset_password(self, email: str) -> None:
        await asyncio.to_thread(self._provider.send_password_reset, email.strip())

    async def delete_account(self) -> None:
        identity = self._require_identity()
        await asyncio.to_thread(self._provider.delete_identity, identity.id)
        # Profile, listings and conversations are left in place.
        logger.info(f"Deleted identity {identity.id}; profile document retained")
        try:
            await asyncio.to_thread(self._provider.sign_out)
        except ProviderAuthError as e:
            logger.warning(f"Sign-out after account deletion failed: {e.message}")

    def current_identity(self) -> Optional[Identity]:
        return self._provider.current_identity()

    def _require_identity(self) -> Identity:
        identity = self._provider.current_identity()
        if identity is None:
            raise NotSignedInError()
        return identity


# Module-level instance getter
_service_instance: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    """Get the auth service singleton."""
    global _service_instance
    if _service_instance is None:
        from shared.database import get_supabase_client, get_supabase_admin_client
        from modules.users.service import get_user_service
        from .provider import SupabaseAuthProvider

        admin_client = None
        try:
            admin_client = get_supabase_admin_client()
        except RuntimeError:
            logger.debug("No service-role key; identities are deleted through delete_own_identity")

        provider = SupabaseAuthProvider(get_supabase_client(), admin_client)
        _service_instance = AuthService(provider, get_user_service())
    return _service_instance


def reset_auth_service() -> None:
    """Reset the auth service singleton (for testing)."""
    global _service_instance
    _service_instance = None
