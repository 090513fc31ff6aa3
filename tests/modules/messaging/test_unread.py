"""Tests for unread-count aggregation."""

import asyncio
from datetime import datetime, timezone

import pytest

from modules.messaging.models import Conversation, SendMessageRequest
from modules.messaging.unread import UnreadCountAggregator, total_unread


class RecordingMessaging:
    """Captures total-unread subscriptions so tests can push totals by hand."""

    def __init__(self):
        self.subscriptions: list[tuple[str, object]] = []
        self.cancelled: list[str] = []

    def subscribe_to_total_unread(self, user_id, callback):
        self.subscriptions.append((user_id, callback))

        def unsubscribe():
            self.cancelled.append(user_id)

        return unsubscribe

    def push(self, index: int, total: int) -> None:
        self.subscriptions[index][1](total)


def conversation(conversation_id: str, counts: dict[str, int]) -> Conversation:
    return Conversation(
        id=conversation_id,
        participants=list(counts),
        unread_counts=counts,
        last_message_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )


class TestTotalUnread:
    def test_sums_only_own_counters(self):
        conversations = [
            conversation("c-1", {"me": 2, "a": 5}),
            conversation("c-2", {"me": 3, "b": 1}),
            conversation("c-3", {"me": 0, "c": 9}),
        ]
        assert total_unread(conversations, "me") == 5
        assert total_unread([], "me") == 0


class TestUnreadCountAggregator:
    def test_bind_subscribes_once(self):
        messaging = RecordingMessaging()
        aggregator = UnreadCountAggregator(messaging)

        aggregator.bind("user-1")
        aggregator.bind("user-1")

        assert [user for user, _ in messaging.subscriptions] == ["user-1"]

    def test_snapshots_update_count(self):
        """Each snapshot should be pushed to listeners."""
        messaging = RecordingMessaging()
        aggregator = UnreadCountAggregator(messaging)
        seen = []
        aggregator.add_listener(seen.append)

        aggregator.bind("user-1")
        messaging.push(0, 3)
        messaging.push(0, 1)

        assert aggregator.count == 1
        assert seen == [3, 1]

    def test_rebind_tears_down_previous(self):
        """Rebinding cancels the old subscription and ignores its late snapshots."""
        messaging = RecordingMessaging()
        aggregator = UnreadCountAggregator(messaging)

        aggregator.bind("user-a")
        messaging.push(0, 7)
        aggregator.bind("user-b")
        messaging.push(0, 42)

        assert messaging.cancelled == ["user-a"]
        assert aggregator.count == 0
        assert aggregator.user_id == "user-b"

        messaging.push(1, 2)
        assert aggregator.count == 2

    def test_bind_none_clears_badge(self):
        messaging = RecordingMessaging()
        aggregator = UnreadCountAggregator(messaging)
        seen = []
        aggregator.add_listener(seen.append)

        aggregator.bind("user-1")
        messaging.push(0, 4)
        aggregator.bind(None)

        assert aggregator.count == 0
        assert seen == [4, 0]
        assert messaging.cancelled == ["user-1"]

    def test_unbound_stays_at_zero(self):
        messaging = RecordingMessaging()
        aggregator = UnreadCountAggregator(messaging)

        aggregator.bind(None)
        aggregator.close()

        assert aggregator.count == 0
        assert messaging.subscriptions == []


class TestUnreadWithLiveFeed:
    @pytest.mark.asyncio
    async def test_follows_messages(self, service):
        """The badge should track messages and reads end to end."""
        conversation = await service.get_or_create_conversation(
            "client-1", "freelancer-1", "Bo", "Ada"
        )
        aggregator = UnreadCountAggregator(service)

        aggregator.bind("freelancer-1")
        await service.send_message(conversation.id, "client-1", SendMessageRequest(text="Hi"))
        await service.send_message(conversation.id, "client-1", SendMessageRequest(text="Hi"))
        await asyncio.sleep(0.05)
        assert aggregator.count == 2

        await service.mark_read(conversation.id, "freelancer-1")
        await asyncio.sleep(0.05)
        assert aggregator.count == 0

        aggregator.close()
