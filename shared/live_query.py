"""
Live query subscriptions over Supabase tables.

A LiveQuery re-runs a query and pushes the full result set to its
callback whenever it changes. The first callback always carries the full
current snapshot, even when it is empty.

Polling backs off while the result set stays the same and snaps back to
the base interval on a change or a `wake()`. Writers that know a query is
stale (the service that just sent a message) wake it instead of waiting
for the next poll. LiveQueryHub shares one query between every subscriber
to the same key.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Unsubscribe = Callable[[], None]


class LiveQuery(Generic[T]):
    """
    Polling-backed live query.

    The fetch function is awaited on the running event loop; snapshots are
    compared with `==` so an unchanged result set is not re-delivered.
    Fetch failures are logged and the previous snapshot stays current.

    Args:
        fetch: Coroutine function returning the current result set
        callback: Receives each changed snapshot
        interval: Base seconds between polls
        max_interval: Upper bound for the backed-off interval; defaults to
            `interval` (no backoff)
        name: Task name used in logs
    """

    def __init__(
        self,
        fetch: Callable[[], Awaitable[list[T]]],
        callback: Callable[[list[T]], None],
        interval: float,
        name: str = "live-query",
        max_interval: Optional[float] = None,
    ) -> None:
        self._fetch = fetch
        self._callback = callback
        self._interval = interval
        self._max_interval = max(interval, max_interval or interval)
        self._delay = interval
        self._name = name
        self._task: Optional[asyncio.Task] = None
        self._woken = asyncio.Event()
        self._last: Optional[list[T]] = None

    @property
    def active(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def snapshot(self) -> Optional[list[T]]:
        """Last delivered result set, or None before the first poll."""
        return self._last

    @property
    def delay(self) -> float:
        """Seconds until the next poll unless woken."""
        return self._delay

    def start(self) -> Unsubscribe:
        """Start polling on the running loop and return the cancel handle."""
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self._run(), name=self._name)
        return self.cancel

    def cancel(self) -> None:
        """Stop delivering snapshots. Safe to call more than once."""
        if self._task is not None:
            self._task.cancel()
            self._task = None

    def wake(self) -> None:
        """Poll again now and reset the backoff."""
        self._delay = self._interval
        self._woken.set()

    async def poll_once(self) -> bool:
        """
        Run the query once and deliver the snapshot if it changed.

        Returns:
            True if the callback was invoked
        """
        try:
            snapshot = await self._fetch()
        except Exception as e:
            logger.warning(f"{self._name}: fetch failed: {e}")
            return False

        if self._last is not None and snapshot == self._last:
            return False

        self._last = snapshot
        self._callback(snapshot)
        return True

    async def _run(self) -> None:
        while True:
            changed = await self.poll_once()
            if changed:
                self._delay = self._interval
            else:
                self._delay = min(self._delay * 2, self._max_interval)

            try:
                await asyncio.wait_for(self._woken.wait(), timeout=self._delay)
            except asyncio.TimeoutError:
                pass
            self._woken.clear()


class LiveQueryHub:
    """
    One LiveQuery per key, shared by every subscriber to that key.

    A subscriber joining a running query gets its current snapshot right
    away. The query is cancelled when its last subscriber leaves.
    """

    def __init__(self, interval: float, max_interval: Optional[float] = None):
        self._interval = interval
        self._max_interval = max_interval
        self._queries: dict[str, LiveQuery] = {}
        self._listeners: dict[str, list[Callable[[list], None]]] = {}

    @property
    def keys(self) -> set[str]:
        """Keys with a running query."""
        return set(self._queries)

    def subscribe(
        self,
        key: str,
        fetch: Callable[[], Awaitable[list[T]]],
        callback: Callable[[list[T]], None],
    ) -> Unsubscribe:
        """
        Subscribe `callback` to the query under `key`.

        `fetch` is used only when this call starts the query; later
        subscribers to the same key share the first one's fetch.
        """
        listeners = self._listeners.setdefault(key, [])
        listeners.append(callback)

        query = self._queries.get(key)
        if query is None:
            query = LiveQuery(
                fetch,
                lambda snapshot: self._fan_out(key, snapshot),
                self._interval,
                name=key,
                max_interval=self._max_interval,
            )
            self._queries[key] = query
            query.start()
        elif query.snapshot is not None:
            callback(query.snapshot)

        def unsubscribe() -> None:
            current = self._listeners.get(key)
            if not current or callback not in current:
                return
            current.remove(callback)
            if not current:
                del self._listeners[key]
                self._queries.pop(key).cancel()

        return unsubscribe

    def wake(self, *keys: str) -> None:
        """Re-poll the queries under `keys` now; unknown keys are ignored."""
        for key in keys:
            query = self._queries.get(key)
            if query is not None:
                query.wake()

    def close(self) -> None:
        """Cancel every query."""
        for query in self._queries.values():
            query.cancel()
        self._queries.clear()
        self._listeners.clear()

    def _fan_out(self, key: str, snapshot: list) -> None:
        for listener in list(self._listeners.get(key, ())):
            try:
                listener(snapshot)
            except Exception as e:
                logger.error(f"{key}: subscriber failed: {e}", exc_info=True)
