"""
Session store.

Bridges the auth provider's push-based identity notifications into the
app: on every identity change it resolves the profile document and
publishes a SessionSnapshot to listeners.

The provider may invoke its callback from a worker thread (sign-in runs
off the loop), so changes are marshalled onto the event loop captured at
start(). A profile read that finishes after a newer identity change is
discarded, and identity and profile are always published together.
"""

import asyncio
import logging
from typing import Callable, Optional

from shared.models import Identity

from modules.users.interfaces import IUserService
from modules.users.models import Profile

from .interfaces import IAuthProvider
from .models import SessionSnapshot

logger = logging.getLogger(__name__)

SessionListener = Callable[[SessionSnapshot], None]


class SessionStore:
    """
    Sole producer of identity/profile state.

    Lifecycle: start() registers exactly one provider subscription;
    stop() removes it and cancels any profile read still in flight.
    """

    def __init__(self, provider: IAuthProvider, users: IUserService):
        self._provider = provider
        self._users = users
        self._snapshot = SessionSnapshot()
        self._generation = 0
        self._pending: Optional[asyncio.Task] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._unsubscribe: Optional[Callable[[], None]] = None
        self._listeners: list[SessionListener] = []

    @property
    def snapshot(self) -> SessionSnapshot:
        return self._snapshot

    @property
    def started(self) -> bool:
        return self._unsubscribe is not None

    def add_listener(self, listener: SessionListener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def start(self) -> None:
        """Subscribe to the provider. Must be called on the event loop."""
        if self._unsubscribe is not None:
            return
        self._loop = asyncio.get_running_loop()
        self._unsubscribe = self._provider.subscribe(self._on_identity_changed)

    def stop(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        self._generation += 1

    async def refresh(self) -> SessionSnapshot:
        """
        Reload the identity from the provider and re-resolve the session.

        Used by the email verification flow: after the user confirms their
        address the reloaded identity carries email_verified=True.
        """
        identity = await asyncio.to_thread(self._provider.reload)
        self._apply_identity(identity)
        return await self.wait_settled()

    def replace_profile(self, profile: Profile) -> None:
        """Publish an edited profile for the signed-in identity."""
        identity = self._snapshot.identity
        if identity is None or identity.id != profile.id:
            logger.warning(f"Ignoring profile {profile.id} for a different identity")
            return
        self._publish(SessionSnapshot(identity=identity, profile=profile, is_loading=False))

    async def wait_settled(self) -> SessionSnapshot:
        """Wait until queued identity changes and profile reads are done."""
        while True:
            await asyncio.sleep(0)
            task = self._pending
            if task is None or task.done():
                return self._snapshot
            await asyncio.wait({task})

    def _on_identity_changed(self, identity: Optional[Identity]) -> None:
        if self._loop is None:
            return
        self._loop.call_soon_threadsafe(self._apply_identity, identity)

    def _apply_identity(self, identity: Optional[Identity]) -> None:
        self._generation += 1
        generation = self._generation

        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

        if identity is None:
            self._publish(SessionSnapshot(identity=None, profile=None, is_loading=False))
            return

        self._pending = asyncio.get_running_loop().create_task(
            self._resolve_profile(identity, generation)
        )

    async def _resolve_profile(self, identity: Identity, generation: int) -> None:
        profile: Optional[Profile] = None
        try:
            profile = await self._users.get_profile(identity.id)
        except Exception as e:
            logger.error(f"Error fetching profile for {identity.id}: {e}")

        if generation != self._generation:
            logger.debug(f"Discarding stale profile read for {identity.id}")
            return

        self._pending = None
        if profile is None:
            logger.warning(f"Signed in as {identity.id} without a profile")
        self._publish(SessionSnapshot(identity=identity, profile=profile, is_loading=False))

    def _publish(self, snapshot: SessionSnapshot) -> None:
        self._snapshot = snapshot
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Session listener failed")
