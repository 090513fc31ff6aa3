"""
Messaging repository for database access.

Encapsulates all Supabase queries and data mapping for:
- conversations
- messages

Counter updates go through database functions so concurrent senders and
readers never overwrite each other's counters.
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import Conversation, Message


def pair_key(user_a: str, user_b: str) -> str:
    """Order-independent key of a participant pair."""
    first, second = sorted((user_a, user_b))
    return f"{first}:{second}"


class ConversationRepository(BaseRepository[Conversation]):
    """Repository for two-party conversations."""

    TABLE = "conversations"

    def find_between(self, user_a: str, user_b: str) -> Optional[Conversation]:
        result = (
            self._db.table(self.TABLE)
            .select("*")
            .contains("participants", [user_a, user_b])
            .limit(1)
            .execute()
        )
        row = self._first(result.data)
        if row is None:
            return None
        return self._map_to_conversation(row)

    def create(
        self, user_a: str, user_b: str, name_a: str, name_b: str
    ) -> Optional[Conversation]:
        """
        Insert a conversation for the pair.

        Returns None when a concurrent insert for the same pair won; the
        caller should look it up again.
        """
        row = {
            "participants": [user_a, user_b],
            "pair_key": pair_key(user_a, user_b),
            "participant_names": {user_a: name_a, user_b: name_b},
            "last_message": "",
            "last_message_at": self._now(),
            "unread_counts": {user_a: 0, user_b: 0},
        }
        result = (
            self._db.table(self.TABLE)
            .upsert(row, on_conflict="pair_key", ignore_duplicates=True)
            .execute()
        )
        created = self._first(result.data)
        if created is None:
            return None
        return self._map_to_conversation(created)

    def get_by_id(self, conversation_id: str) -> Optional[Conversation]:
        result = self._db.table(self.TABLE).select("*").eq("id", conversation_id).execute()
        row = self._first(result.data)
        if row is None:
            return None
        return self._map_to_conversation(row)

    def list_for_user(self, user_id: str) -> list[Conversation]:
        result = (
            self._db.table(self.TABLE)
            .select("*")
            .contains("participants", [user_id])
            .order("last_message_at", desc=True)
            .execute()
        )
        return [self._map_to_conversation(row) for row in result.data]

    def update_participant_names(self, conversation_id: str, names: dict[str, str]) -> None:
        self._db.table(self.TABLE).update({"participant_names": names}).eq(
            "id", conversation_id
        ).execute()

    def record_message(self, conversation_id: str, recipient_id: str, preview: str) -> None:
        """Set the last-message preview and increment the recipient's counter."""
        self._db.rpc("record_conversation_message", {
            "p_conversation_id": conversation_id,
            "p_recipient_id": recipient_id,
            "p_preview": preview,
        }).execute()

    def reset_unread(self, conversation_id: str, user_id: str) -> None:
        self._db.rpc("reset_unread_count", {
            "p_conversation_id": conversation_id,
            "p_user_id": user_id,
        }).execute()

    def _map_to_conversation(self, data: dict[str, Any]) -> Conversation:
        return Conversation(
            id=str(data["id"]),
            participants=[str(p) for p in data["participants"]],
            participant_names=data.get("participant_names") or {},
            last_message=data.get("last_message") or "",
            last_message_at=self._parse_timestamp(data.get("last_message_at")),
            unread_counts={
                user_id: int(count or 0)
                for user_id, count in (data.get("unread_counts") or {}).items()
            },
        )


class MessageRepository(BaseRepository[Message]):
    """Repository for chat messages."""

    TABLE = "messages"

    def create(
        self,
        conversation_id: str,
        sender_id: str,
        text: str,
        image_url: Optional[str] = None,
    ) -> Message:
        row: dict[str, Any] = {
            "conversation_id": conversation_id,
            "sender_id": sender_id,
            "text": text,
            "created_at": self._now(),
        }
        if image_url:
            row["image_url"] = image_url
        result = self._db.table(self.TABLE).insert(row).execute()
        return self._map_to_message(result.data[0])

    def list_by_conversation(self, conversation_id: str) -> list[Message]:
        result = (
            self._db.table(self.TABLE)
            .select("*")
            .eq("conversation_id", conversation_id)
            .order("created_at")
            .execute()
        )
        return [self._map_to_message(row) for row in result.data]

    def _map_to_message(self, data: dict[str, Any]) -> Message:
        return Message(
            id=str(data["id"]),
            conversation_id=str(data["conversation_id"]),
            sender_id=str(data["sender_id"]),
            text=data.get("text") or "",
            image_url=data.get("image_url"),
            created_at=self._parse_timestamp(data.get("created_at")),
        )
