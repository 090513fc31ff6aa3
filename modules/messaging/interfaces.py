"""
Messaging module interfaces.
"""

from typing import Callable, Protocol, Optional, runtime_checkable

from shared.live_query import Unsubscribe

from .models import Conversation, Message, SendMessageRequest


ConversationsCallback = Callable[[list[Conversation]], None]
MessagesCallback = Callable[[list[Message]], None]
CountCallback = Callable[[int], None]


@runtime_checkable
class IMessagingService(Protocol):
    """Interface for conversations and messages."""

    async def get_or_create_conversation(
        self,
        user_id: str,
        other_user_id: str,
        user_name: str,
        other_user_name: str,
    ) -> Conversation:
        """
        The conversation between two users, created if it does not exist.

        Participant order does not matter: (a, b) and (b, a) resolve to
        the same conversation.
        """
        ...

    async def get_conversation(self, conversation_id: str) -> Optional[Conversation]:
        ...

    async def list_conversations(self, user_id: str) -> list[Conversation]:
        """A user's conversations, most recent message first."""
        ...

    async def list_messages(self, conversation_id: str) -> list[Message]:
        """Messages of a conversation, oldest first."""
        ...

    async def send_message(
        self, conversation_id: str, sender_id: str, request: SendMessageRequest
    ) -> Message:
        """Store a message and bump the recipient's unread counter."""
        ...

    async def mark_read(self, conversation_id: str, user_id: str) -> None:
        """Zero `user_id`'s unread counter. Other counters are untouched."""
        ...

    def subscribe_to_conversations(
        self, user_id: str, callback: ConversationsCallback
    ) -> Unsubscribe:
        """Live list of a user's conversations."""
        ...

    def subscribe_to_messages(
        self, conversation_id: str, callback: MessagesCallback
    ) -> Unsubscribe:
        """Live list of a conversation's messages."""
        ...

    def subscribe_to_total_unread(self, user_id: str, callback: CountCallback) -> Unsubscribe:
        """Live total of a user's unread counters."""
        ...

    def close(self) -> None:
        """Cancel every live feed."""
        ...
