"""
Unread-count aggregation.

The aggregator keeps one live subscription to the bound user's
conversations and re-sums that user's counters on every snapshot. The
result feeds the Messages badge of both bottom-navigation bars.
"""

import logging
from typing import Callable, Iterable, Optional

from shared.live_query import Unsubscribe

from .interfaces import IMessagingService, CountCallback
from .models import Conversation

logger = logging.getLogger(__name__)


def total_unread(conversations: Iterable[Conversation], user_id: str) -> int:
    """Sum of `user_id`'s unread counters across conversations."""
    return sum(conversation.unread_for(user_id) for conversation in conversations)


class UnreadCountAggregator:
    """
    Total unread count for whichever user is currently bound.

    Rebinding tears the previous subscription down first; a snapshot that
    still arrives for a previously bound user is ignored.
    """

    def __init__(self, messaging: IMessagingService):
        self._messaging = messaging
        self._user_id: Optional[str] = None
        self._unsubscribe: Optional[Unsubscribe] = None
        self._generation = 0
        self._count = 0
        self._listeners: list[CountCallback] = []

    @property
    def count(self) -> int:
        return self._count

    @property
    def user_id(self) -> Optional[str]:
        return self._user_id

    def bind(self, user_id: Optional[str]) -> None:
        """Follow `user_id`'s conversations; None clears the badge."""
        if user_id == self._user_id and (user_id is None or self._unsubscribe is not None):
            return

        self._teardown()
        self._user_id = user_id
        self._generation += 1
        self._set_count(0)

        if user_id is None:
            return

        generation = self._generation
        self._unsubscribe = self._messaging.subscribe_to_total_unread(
            user_id, lambda total: self._on_total(generation, total)
        )
        logger.debug(f"Unread count bound to {user_id}")

    def close(self) -> None:
        self.bind(None)

    def add_listener(self, listener: CountCallback) -> Callable[[], None]:
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def _on_total(self, generation: int, total: int) -> None:
        if generation != self._generation:
            logger.debug("Dropping unread snapshot for a previously bound user")
            return
        self._count = total
        self._notify()

    def _set_count(self, count: int) -> None:
        if count != self._count:
            self._count = count
            self._notify()

    def _teardown(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._count)
            except Exception as e:
                logger.error(f"Unread listener failed: {e}", exc_info=True)
