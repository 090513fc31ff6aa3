"""
Shared infrastructure for the marketplace core.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- live_query: Polling-backed live query subscriptions
- timeouts: Timeout guard for feed loads
- log_config: Root logger setup

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, get_supabase_admin_client, reset_client_cache
from .exceptions import (
    MarketplaceError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)
from .models import AccountType, Identity
from .live_query import LiveQuery, Unsubscribe
from .timeouts import with_timeout
from .log_config import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "get_supabase_admin_client",
    "reset_client_cache",
    "MarketplaceError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "AccountType",
    "Identity",
    "LiveQuery",
    "Unsubscribe",
    "with_timeout",
    "configure_logging",
]
