"""
Messaging data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


PHOTO_PREVIEW = "📷 Photo"

# Names that are replaced with the participant's profile display name
PLACEHOLDER_NAMES = frozenset({"", "User", "Employer", "Freelancer"})
UNNAMED_USER = "Unnamed User"


class Conversation(BaseModel):
    """A two-party conversation."""

    id: str
    participants: list[str] = Field(..., min_length=2, max_length=2)
    participant_names: dict[str, str] = Field(default_factory=dict)
    last_message: str = ""
    last_message_at: datetime
    unread_counts: dict[str, int] = Field(default_factory=dict)

    def unread_for(self, user_id: str) -> int:
        return self.unread_counts.get(user_id, 0)

    def other_participant(self, user_id: str) -> Optional[str]:
        for participant in self.participants:
            if participant != user_id:
                return participant
        return None

    def name_of(self, user_id: str) -> str:
        return self.participant_names.get(user_id) or UNNAMED_USER


class Message(BaseModel):
    """A chat message. Image messages may carry an empty text."""

    id: str
    conversation_id: str
    sender_id: str
    text: str = ""
    image_url: Optional[str] = None
    created_at: datetime


class SendMessageRequest(BaseModel):
    """Message composed in the chat screen."""

    text: str = Field(default="", description="Message text")
    image_url: Optional[str] = Field(None, description="Public URL of an uploaded image")
