"""Tests for SessionStore."""

import asyncio
from datetime import datetime, timezone
from typing import Optional

import pytest

from shared.models import AccountType, Identity
from modules.auth.session import SessionStore
from modules.users.models import Profile
from modules.users.repository import UserRepository
from modules.users.service import UserService

from tests.factories import make_user_row


class GatedUsers:
    """IUserService whose profile reads finish only when released."""

    def __init__(self):
        self.gates: dict[str, asyncio.Event] = {}
        self.reads: list[str] = []

    def gate(self, user_id: str) -> asyncio.Event:
        return self.gates.setdefault(user_id, asyncio.Event())

    async def get_profile(self, user_id: str) -> Optional[Profile]:
        self.reads.append(user_id)
        await self.gate(user_id).wait()
        return Profile(
            id=user_id,
            email=f"{user_id}@example.com",
            account_type=AccountType.CLIENT,
            created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
        )


@pytest.fixture
def users(fake_db):
    fake_db.tables["users"] = [make_user_row("user-1", display_name="Ada")]
    return UserService(UserRepository(fake_db))


class TestSessionStoreLifecycle:
    @pytest.mark.asyncio
    async def test_loading_until_first_resolution(self, auth_provider, users):
        """is_loading should be true until the first change resolves."""
        store = SessionStore(auth_provider, users)
        assert store.snapshot.is_loading is True

        store.start()
        snapshot = await store.wait_settled()

        assert snapshot.is_loading is False
        assert snapshot.identity is None
        assert snapshot.profile is None

    @pytest.mark.asyncio
    async def test_start_subscribes_once(self, auth_provider, users):
        """Starting twice should register one provider subscription."""
        store = SessionStore(auth_provider, users)
        store.start()
        store.start()

        assert auth_provider.calls.count("subscribe") == 1
        assert store.started

    @pytest.mark.asyncio
    async def test_stop_unsubscribes(self, auth_provider, users):
        store = SessionStore(auth_provider, users)
        store.start()
        await store.wait_settled()

        store.stop()

        assert auth_provider.callbacks == []
        assert not store.started


class TestSessionStoreResolution:
    @pytest.mark.asyncio
    async def test_signed_in_resolves_profile(self, auth_provider, users):
        """A non-null identity should be published with its profile."""
        auth_provider.current = auth_provider.add_identity("user-1", "ada@example.com")
        store = SessionStore(auth_provider, users)
        seen = []
        store.add_listener(seen.append)

        store.start()
        snapshot = await store.wait_settled()

        assert snapshot.identity.id == "user-1"
        assert snapshot.profile.display_name == "Ada"
        assert seen == [snapshot]

    @pytest.mark.asyncio
    async def test_profile_failure_leaves_profile_none(self, auth_provider, users, fake_db):
        """A failed profile read is logged and not retried."""
        fake_db.failing_tables.add("users")
        auth_provider.current = auth_provider.add_identity("user-1", "ada@example.com")
        store = SessionStore(auth_provider, users)

        store.start()
        snapshot = await store.wait_settled()

        assert snapshot.identity.id == "user-1"
        assert snapshot.profile is None
        assert snapshot.is_loading is False
        assert fake_db.calls.count(("users", "select")) == 1

    @pytest.mark.asyncio
    async def test_sign_out_clears_profile_without_fetch(self, auth_provider, users, fake_db):
        auth_provider.current = auth_provider.add_identity("user-1", "ada@example.com")
        store = SessionStore(auth_provider, users)
        store.start()
        await store.wait_settled()
        reads = fake_db.calls.count(("users", "select"))

        auth_provider.emit(None)
        snapshot = await store.wait_settled()

        assert snapshot.identity is None
        assert snapshot.profile is None
        assert fake_db.calls.count(("users", "select")) == reads

    @pytest.mark.asyncio
    async def test_stale_profile_read_discarded(self, auth_provider):
        """A read for an older identity must never be published."""
        users = GatedUsers()
        store = SessionStore(auth_provider, users)
        seen = []
        store.add_listener(seen.append)
        store.start()
        await store.wait_settled()

        first = Identity(id="user-a", email="a@example.com", email_verified=True)
        second = Identity(id="user-b", email="b@example.com", email_verified=True)
        auth_provider.emit(first)
        await asyncio.sleep(0)
        auth_provider.emit(second)
        await asyncio.sleep(0)

        users.gate("user-a").set()
        users.gate("user-b").set()
        snapshot = await store.wait_settled()

        assert snapshot.identity.id == "user-b"
        assert snapshot.profile.id == "user-b"
        assert all(s.identity is None or s.identity.id == "user-b" for s in seen)
        for s in seen:
            if s.profile is not None:
                assert s.profile.id == s.identity.id

    @pytest.mark.asyncio
    async def test_stop_cancels_in_flight_read(self, auth_provider):
        users = GatedUsers()
        store = SessionStore(auth_provider, users)
        seen = []
        store.add_listener(seen.append)
        auth_provider.current = Identity(id="user-a", email="a@example.com")
        store.start()
        await asyncio.sleep(0)
        await asyncio.sleep(0)

        store.stop()
        users.gate("user-a").set()
        await asyncio.sleep(0)

        assert seen == []
        assert store.snapshot.is_loading is True


class TestSessionStoreRefresh:
    @pytest.mark.asyncio
    async def test_refresh_picks_up_verification(self, auth_provider, users):
        """refresh() should publish the reloaded identity."""
        auth_provider.current = auth_provider.add_identity("user-1", "ada@example.com", verified=False)
        store = SessionStore(auth_provider, users)
        store.start()
        assert (await store.wait_settled()).identity.email_verified is False

        auth_provider.verify("user-1")
        snapshot = await store.refresh()

        assert snapshot.identity.email_verified is True
        assert snapshot.profile is not None

    @pytest.mark.asyncio
    async def test_replace_profile(self, auth_provider, users):
        auth_provider.current = auth_provider.add_identity("user-1", "ada@example.com")
        store = SessionStore(auth_provider, users)
        store.start()
        snapshot = await store.wait_settled()

        edited = snapshot.profile.model_copy(update={"display_name": "Ada L."})
        store.replace_profile(edited)
        assert store.snapshot.profile.display_name == "Ada L."

        other = edited.model_copy(update={"id": "user-2"})
        store.replace_profile(other)
        assert store.snapshot.profile.id == "user-1"

    @pytest.mark.asyncio
    async def test_failing_listener_does_not_break_store(self, auth_provider, users):
        store = SessionStore(auth_provider, users)

        def broken(snapshot):
            raise RuntimeError("listener broke")

        store.add_listener(broken)
        store.start()
        snapshot = await store.wait_settled()

        assert snapshot.is_loading is False
