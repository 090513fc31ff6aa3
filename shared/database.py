"""
Database client factory for Supabase.

Provides the session client (anon key; carries the signed-in user's
session so Row Level Security applies) and an admin client (service role;
used only for privileged auth operations such as deleting an identity).
"""

from typing import Optional
from supabase import create_client, Client

from .config import get_settings

# Module-level client cache
_session_client: Optional[Client] = None
_admin_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get the Supabase client used for auth and data access.

    The same instance holds the auth session, so every table query made
    through it runs as the signed-in user.

    Returns:
        Supabase client configured with the anon key
    """
    global _session_client

    if _session_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_anon_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_ANON_KEY environment variables."
            )
        _session_client = create_client(
            settings.supabase_url,
            settings.supabase_anon_key,
        )

    return _session_client


def get_supabase_admin_client() -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    Returns:
        Supabase client configured with service role key
    """
    global _admin_client

    if _admin_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _admin_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _admin_client


def reset_client_cache() -> None:
    """
    Reset the cached database clients.

    Useful for testing or when configuration changes.
    """
    global _session_client, _admin_client
    _session_client = None
    _admin_client = None
