"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest

from shared.database import reset_client_cache
from modules.auth.service import reset_auth_service
from modules.users.service import reset_user_service
from modules.listings.service import reset_listing_services
from modules.messaging.service import reset_messaging_service
from modules.jobs.service import reset_job_services
from modules.engagements.service import reset_engagement_services
from modules.storage.service import reset_storage_service
from modules.feeds.service import reset_feed_service
from app.dependencies import reset_container

from tests.fakes import FakeSupabase, FakeAuthProvider


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset every module singleton before and after each test."""
    resets = (
        reset_client_cache,
        reset_auth_service,
        reset_user_service,
        reset_listing_services,
        reset_messaging_service,
        reset_job_services,
        reset_engagement_services,
        reset_storage_service,
        reset_feed_service,
        reset_container,
    )
    for reset in resets:
        reset()
    yield
    for reset in resets:
        reset()


@pytest.fixture
def fake_db() -> FakeSupabase:
    """Empty in-memory Supabase."""
    return FakeSupabase()


@pytest.fixture
def auth_provider() -> FakeAuthProvider:
    return FakeAuthProvider()


@pytest.fixture
def freelancer_id() -> str:
    return "freelancer-1"


@pytest.fixture
def client_id() -> str:
    return "client-1"
