"""
Messaging service implementation.

Conversations between exactly two users, their messages, unread
counters and the live feeds chat screens subscribe to.
"""

import asyncio
import logging
from typing import Optional

from shared.config import get_settings
from shared.database import get_supabase_client
from shared.live_query import LiveQueryHub, Unsubscribe

from modules.users.interfaces import IUserService

from .interfaces import (
    IMessagingService,
    ConversationsCallback,
    MessagesCallback,
    CountCallback,
)
from .models import (
    Conversation,
    Message,
    SendMessageRequest,
    PHOTO_PREVIEW,
    PLACEHOLDER_NAMES,
    UNNAMED_USER,
)
from .repository import ConversationRepository, MessageRepository, pair_key
from .exceptions import (
    ConversationNotFoundError,
    NotAParticipantError,
    InvalidConversationError,
    EmptyMessageError,
)
from .unread import total_unread

logger = logging.getLogger(__name__)


def conversations_key(user_id: str) -> str:
    return f"conversations:{user_id}"


def unread_key(user_id: str) -> str:
    return f"unread:{user_id}"


def messages_key(conversation_id: str) -> str:
    return f"messages:{conversation_id}"


class MessagingService(IMessagingService):
    """
    Messaging backed by the `conversations` and `messages` tables.

    Live feeds are shared per key through one LiveQueryHub. Writes made
    through this service wake the feeds they change, so a sender and a
    recipient on the same client see the update without waiting a poll.
    """

    def __init__(
        self,
        conversations: ConversationRepository,
        messages: MessageRepository,
        users: IUserService,
        poll_interval: Optional[float] = None,
        max_poll_interval: Optional[float] = None,
    ):
        settings = get_settings()
        self._conversations = conversations
        self._messages = messages
        self._users = users
        self._live = LiveQueryHub(
            poll_interval or settings.live_query_interval_seconds,
            max_poll_interval or settings.live_query_max_interval_seconds,
        )

    async def get_or_create_conversation(
        self,
        user_id: str,
        other_user_id: str,
        user_name: str,
        other_user_name: str,
    ) -> Conversation:
        if user_id == other_user_id:
            raise InvalidConversationError(user_id)

        existing = await asyncio.to_thread(self._conversations.find_between, user_id, other_user_id)
        if existing is not None:
            return existing

        created = await asyncio.to_thread(
            self._conversations.create, user_id, other_user_id, user_name, other_user_name
        )
        if created is not None:
            logger.info(f"Created conversation {created.id}")
            self._wake_user_feeds(user_id, other_user_id)
            return created

        # Lost a race with the other participant; theirs is the conversation
        existing = await asyncio.to_thread(self._conversations.find_between, user_id, other_user_id)
        if existing is None:
            raise ConversationNotFoundError(pair_key(user_id, other_user_id))
        return existing

    async def get_conversation(self, conversation_id: str) -> Optional[Conversation]:
        return await asyncio.to_thread(self._conversations.get_by_id, conversation_id)

    async def list_conversations(self, user_id: str) -> list[Conversation]:
        conversations = await asyncio.to_thread(self._conversations.list_for_user, user_id)
        return [await self._backfill_names(conversation) for conversation in conversations]

    async def list_messages(self, conversation_id: str) -> list[Message]:
        return await asyncio.to_thread(self._messages.list_by_conversation, conversation_id)

    async def send_message(
        self, conversation_id: str, sender_id: str, request: SendMessageRequest
    ) -> Message:
        if not request.text.strip() and not request.image_url:
            raise EmptyMessageError()

        conversation = await asyncio.to_thread(self._conversations.get_by_id, conversation_id)
        if conversation is None:
            raise ConversationNotFoundError(conversation_id)
        if sender_id not in conversation.participants:
            raise NotAParticipantError(conversation_id, sender_id)

        message = await asyncio.to_thread(
            self._messages.create, conversation_id, sender_id, request.text, request.image_url
        )

        preview = PHOTO_PREVIEW if request.image_url else request.text
        recipient_id = conversation.other_participant(sender_id)
        await asyncio.to_thread(
            self._conversations.record_message, conversation_id, recipient_id, preview
        )
        self._live.wake(messages_key(conversation_id))
        self._wake_user_feeds(sender_id, recipient_id)
        return message

    async def mark_read(self, conversation_id: str, user_id: str) -> None:
        await asyncio.to_thread(self._conversations.reset_unread, conversation_id, user_id)
        self._wake_user_feeds(user_id)

    def subscribe_to_conversations(
        self, user_id: str, callback: ConversationsCallback
    ) -> Unsubscribe:
        return self._live.subscribe(
            conversations_key(user_id),
            lambda: self.list_conversations(user_id),
            callback,
        )

    def subscribe_to_messages(
        self, conversation_id: str, callback: MessagesCallback
    ) -> Unsubscribe:
        return self._live.subscribe(
            messages_key(conversation_id),
            lambda: asyncio.to_thread(self._messages.list_by_conversation, conversation_id),
            callback,
        )

    def subscribe_to_total_unread(self, user_id: str, callback: CountCallback) -> Unsubscribe:
        return self._live.subscribe(
            unread_key(user_id),
            lambda: asyncio.to_thread(self._conversations.list_for_user, user_id),
            lambda conversations: callback(total_unread(conversations, user_id)),
        )

    def close(self) -> None:
        """Cancel every live feed."""
        self._live.close()

    def _wake_user_feeds(self, *user_ids: str) -> None:
        for user_id in user_ids:
            self._live.wake(conversations_key(user_id), unread_key(user_id))

    async def _backfill_names(self, conversation: Conversation) -> Conversation:
        """
        Replace missing or placeholder participant names with profile names.

        Best-effort: lookup and write-back failures are logged and the
        conversation is returned with whatever names are known.
        """
        names = dict(conversation.participant_names)
        changed = False

        for participant_id in conversation.participants:
            if names.get(participant_id, "") not in PLACEHOLDER_NAMES:
                continue
            try:
                profile = await self._users.get_profile(participant_id)
            except Exception as e:
                logger.warning(f"Could not load profile {participant_id} for name backfill: {e}")
                continue
            if profile is None:
                continue
            names[participant_id] = profile.display_name or UNNAMED_USER
            changed = True

        if not changed:
            return conversation

        try:
            await asyncio.to_thread(
                self._conversations.update_participant_names, conversation.id, names
            )
        except Exception as e:
            logger.warning(f"Could not store participant names for {conversation.id}: {e}")

        return conversation.model_copy(update={"participant_names": names})


# Module-level instance getter
_service_instance: Optional[MessagingService] = None


def get_messaging_service() -> MessagingService:
    """Get the messaging service singleton."""
    global _service_instance
    if _service_instance is None:
        from modules.users.service import get_user_service

        db = get_supabase_client()
        _service_instance = MessagingService(
            ConversationRepository(db),
            MessageRepository(db),
            get_user_service(),
        )
    return _service_instance


def reset_messaging_service() -> None:
    """Reset the messaging service singleton (for testing)."""
    global _service_instance
    _service_instance = None
