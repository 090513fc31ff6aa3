"""
Messaging module exceptions.
"""

from shared.exceptions import NotFoundError, AuthorizationError, ValidationError


class ConversationNotFoundError(NotFoundError):
    """Raised when a conversation is not found."""

    def __init__(self, conversation_id: str):
        super().__init__(
            f"Conversation not found: {conversation_id}",
            code="CONVERSATION_NOT_FOUND",
            details={"conversation_id": conversation_id},
        )


class NotAParticipantError(AuthorizationError):
    """Raised when a user acts on a conversation they are not part of."""

    def __init__(self, conversation_id: str, user_id: str):
        super().__init__(
            "User is not a participant of this conversation",
            code="NOT_A_PARTICIPANT",
            details={"conversation_id": conversation_id, "user_id": user_id},
        )


class InvalidConversationError(ValidationError):
    """Raised for a conversation a user would have with themselves."""

    def __init__(self, user_id: str):
        super().__init__(
            "A conversation needs two different participants",
            code="INVALID_CONVERSATION",
            details={"user_id": user_id},
        )


class EmptyMessageError(ValidationError):
    """Raised when a message has neither text nor an image."""

    def __init__(self):
        super().__init__("Message is empty", code="EMPTY_MESSAGE")
