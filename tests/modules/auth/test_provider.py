"""Tests for the Supabase Auth adapter."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from shared.exceptions import ExternalServiceError
from modules.auth.models import AuthErrorCode
from modules.auth.provider import SupabaseAuthProvider, map_auth_error, to_identity


def supabase_user(user_id="user-1", email="ada@example.com", confirmed=True, name="Ada"):
    return SimpleNamespace(
        id=user_id,
        email=email,
        email_confirmed_at="2025-01-01T00:00:00Z" if confirmed else None,
        user_metadata={"display_name": name},
    )


class ProviderError(Exception):
    def __init__(self, message, code=None):
        super().__init__(message)
        self.message = message
        self.code = code


class TestMapAuthError:
    @pytest.mark.parametrize("code,expected", [
        ("user_already_exists", AuthErrorCode.EMAIL_IN_USE),
        ("email_address_invalid", AuthErrorCode.INVALID_EMAIL),
        ("weak_password", AuthErrorCode.WEAK_PASSWORD),
        ("email_not_confirmed", AuthErrorCode.EMAIL_NOT_VERIFIED),
        ("invalid_credentials", AuthErrorCode.INVALID_CREDENTIALS),
        ("over_request_rate_limit", AuthErrorCode.UNKNOWN),
        (None, AuthErrorCode.UNKNOWN),
    ])
    def test_maps_provider_codes(self, code, expected):
        """Provider codes should map to provider-independent codes."""
        error = map_auth_error(ProviderError("boom", code))
        assert error.error_code == expected
        assert error.details["provider_message"] == "boom"


class TestToIdentity:
    def test_confirmed_user(self):
        identity = to_identity(supabase_user())
        assert identity.id == "user-1"
        assert identity.email_verified is True
        assert identity.display_name == "Ada"

    def test_unconfirmed_user(self):
        assert to_identity(supabase_user(confirmed=False)).email_verified is False


class TestSupabaseAuthProvider:
    def test_sign_up_passes_display_name(self):
        client = MagicMock()
        client.auth.sign_up.return_value = SimpleNamespace(user=supabase_user(confirmed=False))
        provider = SupabaseAuthProvider(client)

        identity = provider.sign_up("ada@example.com", "secret123", "Ada")

        assert identity.email_verified is False
        payload = client.auth.sign_up.call_args.args[0]
        assert payload["options"]["data"]["display_name"] == "Ada"

    def test_subscribe_delivers_initial_resolution(self):
        """Subscribing should always deliver the current identity first."""
        client = MagicMock()
        client.auth.get_session.return_value = None
        provider = SupabaseAuthProvider(client)
        received = []

        unsubscribe = provider.subscribe(received.append)

        assert received == [None]
        assert unsubscribe is client.auth.on_auth_state_change.return_value.unsubscribe

    def test_subscribe_filters_events(self):
        """Only identity-changing events should reach the callback."""
        client = MagicMock()
        client.auth.get_session.return_value = None
        provider = SupabaseAuthProvider(client)
        received = []
        provider.subscribe(received.append)
        on_change = client.auth.on_auth_state_change.call_args.args[0]

        on_change("TOKEN_REFRESHED", SimpleNamespace(user=supabase_user()))
        on_change("SIGNED_IN", SimpleNamespace(user=supabase_user()))
        on_change("SIGNED_OUT", None)

        assert received[0] is None
        assert received[1].id == "user-1"
        assert received[2] is None
        assert len(received) == 3

    def test_delete_identity_without_admin_uses_self_delete(self):
        """Without a service-role client the session client deletes through the database function."""
        client = MagicMock()
        client.rpc.return_value.execute.return_value = SimpleNamespace(data=True)
        provider = SupabaseAuthProvider(client)

        provider.delete_identity("user-1")

        client.rpc.assert_called_once_with("delete_own_identity", {"p_user_id": "user-1"})

    def test_delete_identity_refused_raises(self):
        client = MagicMock()
        client.rpc.return_value.execute.return_value = SimpleNamespace(data=False)
        provider = SupabaseAuthProvider(client)

        with pytest.raises(ExternalServiceError) as exc_info:
            provider.delete_identity("user-1")

        assert exc_info.value.details["user_id"] == "user-1"

    def test_delete_identity_rpc_error_raises(self):
        client = MagicMock()
        client.rpc.return_value.execute.side_effect = RuntimeError("function missing")
        provider = SupabaseAuthProvider(client)

        with pytest.raises(ExternalServiceError, match="function missing"):
            provider.delete_identity("user-1")

    def test_delete_identity_uses_admin_client(self):
        client = MagicMock()
        admin = MagicMock()
        provider = SupabaseAuthProvider(client, admin)

        provider.delete_identity("user-1")

        admin.auth.admin.delete_user.assert_called_once_with("user-1")
        client.rpc.assert_not_called()

    def test_reload_returns_none_without_user(self):
        client = MagicMock()
        client.auth.get_user.return_value = None
        assert SupabaseAuthProvider(client).reload() is None
