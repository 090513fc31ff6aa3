"""Tests for MessagingService."""

import asyncio
from unittest.mock import patch

import pytest

from modules.messaging.exceptions import (
    InvalidConversationError,
    NotAParticipantError,
    EmptyMessageError,
    ConversationNotFoundError,
)
from modules.messaging.models import SendMessageRequest, PHOTO_PREVIEW
from modules.messaging.repository import ConversationRepository, MessageRepository, pair_key
from modules.messaging.service import MessagingService, messages_key
from modules.users.repository import UserRepository
from modules.users.service import UserService

from tests.factories import make_user_row


class TestGetOrCreateConversation:
    @pytest.mark.asyncio
    async def test_at_most_one_per_pair(self, service, fake_db):
        """Repeated and reversed calls should return the same conversation."""
        first = await service.get_or_create_conversation("client-1", "freelancer-1", "Bo", "Ada")
        again = await service.get_or_create_conversation("client-1", "freelancer-1", "Bo", "Ada")
        reversed_pair = await service.get_or_create_conversation(
            "freelancer-1", "client-1", "Ada", "Bo"
        )

        assert first.id == again.id == reversed_pair.id
        assert len(fake_db.rows("conversations")) == 1

    @pytest.mark.asyncio
    async def test_new_conversation_fields(self, service):
        conversation = await service.get_or_create_conversation(
            "client-1", "freelancer-1", "Bo", "Ada"
        )

        assert conversation.participants == ["client-1", "freelancer-1"]
        assert conversation.name_of("freelancer-1") == "Ada"
        assert conversation.unread_for("client-1") == 0
        assert conversation.last_message == ""

    @pytest.mark.asyncio
    async def test_conversation_with_self_rejected(self, service):
        with pytest.raises(InvalidConversationError):
            await service.get_or_create_conversation("client-1", "client-1", "Bo", "Bo")

    @pytest.mark.asyncio
    async def test_lost_race_returns_winner(self, service, conversations, fake_db):
        """If another insert wins, the existing conversation is returned."""
        fake_db.tables["conversations"] = [{
            "id": "conv-winner",
            "participants": ["freelancer-1", "client-1"],
            "pair_key": pair_key("client-1", "freelancer-1"),
            "participant_names": {},
            "unread_counts": {},
        }]
        real_find = conversations.find_between
        lookups = []

        def find_between(a, b):
            lookups.append((a, b))
            if len(lookups) == 1:
                return None
            return real_find(a, b)

        with patch.object(conversations, "find_between", side_effect=find_between):
            conversation = await service.get_or_create_conversation(
                "client-1", "freelancer-1", "Bo", "Ada"
            )

        assert conversation.id == "conv-winner"
        assert len(fake_db.rows("conversations")) == 1

    @pytest.mark.asyncio
    async def test_lost_race_without_winner_raises(self, service, conversations):
        with patch.object(conversations, "find_between", return_value=None), \
                patch.object(conversations, "create", return_value=None):
            with pytest.raises(ConversationNotFoundError):
                await service.get_or_create_conversation("client-1", "freelancer-1", "Bo", "Ada")


class TestSendMessage:
    @pytest.mark.asyncio
    async def test_send_increments_recipient_only(self, service, fake_db):
        """Sending updates the preview and the recipient's counter."""
        conversation = await service.get_or_create_conversation(
            "client-1", "freelancer-1", "Bo", "Ada"
        )

        await service.send_message(conversation.id, "client-1", SendMessageRequest(text="Hi"))
        await service.send_message(conversation.id, "client-1", SendMessageRequest(text="There?"))

        stored = await service.get_conversation(conversation.id)
        assert stored.last_message == "There?"
        assert stored.unread_for("freelancer-1") == 2
        assert stored.unread_for("client-1") == 0
        assert fake_db.rpc_calls[0][0] == "record_conversation_message"

    @pytest.mark.asyncio
    async def test_image_message_previews_as_photo(self, service):
        conversation = await service.get_or_create_conversation(
            "client-1", "freelancer-1", "Bo", "Ada"
        )

        message = await service.send_message(
            conversation.id,
            "freelancer-1",
            SendMessageRequest(image_url="https://cdn.example.com/chat/a.jpg"),
        )

        assert message.text == ""
        assert message.image_url == "https://cdn.example.com/chat/a.jpg"
        stored = await service.get_conversation(conversation.id)
        assert stored.last_message == PHOTO_PREVIEW
        assert stored.unread_for("client-1") == 1

    @pytest.mark.asyncio
    async def test_empty_message_rejected(self, service, fake_db):
        with pytest.raises(EmptyMessageError):
            await service.send_message("conv-1", "client-1", SendMessageRequest(text="   "))
        assert fake_db.calls == []

    @pytest.mark.asyncio
    async def test_non_participant_rejected(self, service, fake_db):
        conversation = await service.get_or_create_conversation(
            "client-1", "freelancer-1", "Bo", "Ada"
        )

        with pytest.raises(NotAParticipantError):
            await service.send_message(conversation.id, "stranger", SendMessageRequest(text="Hi"))
        assert fake_db.rows("messages") == []

    @pytest.mark.asyncio
    async def test_unknown_conversation(self, service):
        with pytest.raises(ConversationNotFoundError):
            await service.send_message("missing", "client-1", SendMessageRequest(text="Hi"))

    @pytest.mark.asyncio
    async def test_messages_listed_oldest_first(self, service):
        conversation = await service.get_or_create_conversation(
            "client-1", "freelancer-1", "Bo", "Ada"
        )
        for text in ("one", "two", "three"):
            await service.send_message(conversation.id, "client-1", SendMessageRequest(text=text))

        messages = await service.list_messages(conversation.id)

        assert [m.text for m in messages] == ["one", "two", "three"]


class TestMarkRead:
    @pytest.mark.asyncio
    async def test_mark_read_only_affects_reader(self, service):
        """Opening a conversation zeroes only the opener's counter."""
        conversation = await service.get_or_create_conversation(
            "client-1", "freelancer-1", "Bo", "Ada"
        )
        await service.send_message(conversation.id, "client-1", SendMessageRequest(text="Hi"))
        await service.send_message(conversation.id, "freelancer-1", SendMessageRequest(text="Hey"))

        await service.mark_read(conversation.id, "freelancer-1")

        stored = await service.get_conversation(conversation.id)
        assert stored.unread_for("freelancer-1") == 0
        assert stored.unread_for("client-1") == 1


class TestListConversations:
    @pytest.mark.asyncio
    async def test_ordered_by_last_message(self, service, fake_db):
        fake_db.tables["conversations"] = [
            {"id": "old", "participants": ["u-1", "u-2"], "last_message_at": "2025-01-01T00:00:00+00:00",
             "participant_names": {"u-1": "A", "u-2": "B"}},
            {"id": "new", "participants": ["u-1", "u-3"], "last_message_at": "2025-02-01T00:00:00+00:00",
             "participant_names": {"u-1": "A", "u-3": "C"}},
            {"id": "other", "participants": ["u-2", "u-3"], "last_message_at": "2025-03-01T00:00:00+00:00",
             "participant_names": {"u-2": "B", "u-3": "C"}},
        ]

        conversations = await service.list_conversations("u-1")

        assert [c.id for c in conversations] == ["new", "old"]

    @pytest.mark.asyncio
    async def test_backfills_placeholder_names(self, service, fake_db):
        """Placeholder names are replaced with profile names and written back."""
        fake_db.tables["users"] = [
            make_user_row("freelancer-1", display_name="Ada"),
            make_user_row("client-1", account_type="client", display_name=""),
        ]
        fake_db.tables["conversations"] = [{
            "id": "conv-1",
            "participants": ["client-1", "freelancer-1"],
            "participant_names": {"client-1": "Employer", "freelancer-1": "Freelancer"},
            "last_message_at": "2025-01-01T00:00:00+00:00",
        }]

        [conversation] = await service.list_conversations("client-1")

        assert conversation.name_of("freelancer-1") == "Ada"
        assert conversation.name_of("client-1") == "Unnamed User"
        assert fake_db.row("conversations", "conv-1")["participant_names"]["freelancer-1"] == "Ada"

    @pytest.mark.asyncio
    async def test_backfill_failure_is_best_effort(self, service, fake_db):
        """A failing profile lookup should not fail the listing."""
        fake_db.failing_tables.add("users")
        fake_db.tables["conversations"] = [{
            "id": "conv-1",
            "participants": ["client-1", "freelancer-1"],
            "participant_names": {"client-1": "Bo", "freelancer-1": "User"},
            "last_message_at": "2025-01-01T00:00:00+00:00",
        }]

        [conversation] = await service.list_conversations("client-1")

        assert conversation.participant_names["freelancer-1"] == "User"
        assert conversation.name_of("client-1") == "Bo"

    @pytest.mark.asyncio
    async def test_real_names_not_looked_up(self, service, fake_db):
        fake_db.tables["conversations"] = [{
            "id": "conv-1",
            "participants": ["client-1", "freelancer-1"],
            "participant_names": {"client-1": "Bo", "freelancer-1": "Ada"},
            "last_message_at": "2025-01-01T00:00:00+00:00",
        }]

        await service.list_conversations("client-1")

        assert ("users", "select") not in fake_db.calls


class TestSubscriptions:
    @pytest.mark.asyncio
    async def test_message_feed_delivers_snapshot_then_changes(self, service):
        """The live feed delivers the current messages first, then on change."""
        conversation = await service.get_or_create_conversation(
            "client-1", "freelancer-1", "Bo", "Ada"
        )
        snapshots = []

        unsubscribe = service.subscribe_to_messages(conversation.id, snapshots.append)
        await asyncio.sleep(0.05)
        await service.send_message(conversation.id, "client-1", SendMessageRequest(text="Hi"))
        await asyncio.sleep(0.05)
        unsubscribe()

        assert snapshots[0] == []
        assert [m.text for m in snapshots[-1]] == ["Hi"]

    @pytest.mark.asyncio
    async def test_total_unread_feed(self, service):
        conversation = await service.get_or_create_conversation(
            "client-1", "freelancer-1", "Bo", "Ada"
        )
        totals = []

        unsubscribe = service.subscribe_to_total_unread("freelancer-1", totals.append)
        await asyncio.sleep(0.05)
        await service.send_message(conversation.id, "client-1", SendMessageRequest(text="Hi"))
        await asyncio.sleep(0.05)
        unsubscribe()

        assert totals[0] == 0
        assert totals[-1] == 1

    @pytest.mark.asyncio
    async def test_conversation_feed(self, service):
        snapshots = []

        unsubscribe = service.subscribe_to_conversations("client-1", snapshots.append)
        await asyncio.sleep(0.05)
        await service.get_or_create_conversation("client-1", "freelancer-1", "Bo", "Ada")
        await asyncio.sleep(0.05)
        unsubscribe()

        assert snapshots[0] == []
        assert len(snapshots[-1]) == 1


class TestLiveFeedSharing:
    @pytest.fixture
    def slow_service(self, fake_db, conversations):
        """Polls too rarely for a test to see; only wakes deliver changes."""
        service = MessagingService(
            conversations,
            MessageRepository(fake_db),
            UserService(UserRepository(fake_db)),
            poll_interval=30,
        )
        yield service
        service.close()

    @pytest.mark.asyncio
    async def test_send_wakes_both_participants(self, slow_service):
        """Sender and recipient feeds should update without waiting a poll."""
        conversation = await slow_service.get_or_create_conversation(
            "client-1", "freelancer-1", "Bo", "Ada"
        )
        messages, totals = [], []

        slow_service.subscribe_to_messages(conversation.id, messages.append)
        slow_service.subscribe_to_total_unread("freelancer-1", totals.append)
        await asyncio.sleep(0.05)
        await slow_service.send_message(
            conversation.id, "client-1", SendMessageRequest(text="Hi")
        )
        await asyncio.sleep(0.05)

        assert [m.text for m in messages[-1]] == ["Hi"]
        assert totals == [0, 1]

    @pytest.mark.asyncio
    async def test_mark_read_wakes_reader(self, slow_service):
        conversation = await slow_service.get_or_create_conversation(
            "client-1", "freelancer-1", "Bo", "Ada"
        )
        await slow_service.send_message(conversation.id, "client-1", SendMessageRequest(text="Hi"))
        totals = []

        slow_service.subscribe_to_total_unread("freelancer-1", totals.append)
        await asyncio.sleep(0.05)
        await slow_service.mark_read(conversation.id, "freelancer-1")
        await asyncio.sleep(0.05)

        assert totals == [1, 0]

    @pytest.mark.asyncio
    async def test_subscribers_share_one_query(self, service, fake_db):
        """Two screens on the same conversation should not poll twice."""
        conversation = await service.get_or_create_conversation(
            "client-1", "freelancer-1", "Bo", "Ada"
        )
        first, second = [], []

        stop_first = service.subscribe_to_messages(conversation.id, first.append)
        stop_second = service.subscribe_to_messages(conversation.id, second.append)
        await asyncio.sleep(0.05)

        assert service._live.keys == {messages_key(conversation.id)}
        assert first[0] == second[0] == []

        stop_first()
        assert service._live.keys == {messages_key(conversation.id)}
        stop_second()
        assert service._live.keys == set()

    @pytest.mark.asyncio
    async def test_close_cancels_every_feed(self, service):
        service.subscribe_to_conversations("client-1", lambda _: None)
        service.subscribe_to_total_unread("client-1", lambda _: None)

        service.close()

        assert service._live.keys == set()
