"""
Messaging module.

Two-party conversations, messages, per-participant unread counters and
the unread-count aggregator behind the Messages badge.
"""

from .models import Conversation, Message, SendMessageRequest, PHOTO_PREVIEW
from .interfaces import IMessagingService
from .service import MessagingService, get_messaging_service, reset_messaging_service
from .unread import UnreadCountAggregator, total_unread
from .exceptions import (
    ConversationNotFoundError,
    NotAParticipantError,
    InvalidConversationError,
    EmptyMessageError,
)

__all__ = [
    "Conversation",
    "Message",
    "SendMessageRequest",
    "PHOTO_PREVIEW",
    "IMessagingService",
    "MessagingService",
    "get_messaging_service",
    "reset_messaging_service",
    "UnreadCountAggregator",
    "total_unread",
    "ConversationNotFoundError",
    "NotAParticipantError",
    "InvalidConversationError",
    "EmptyMessageError",
]
