"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for row mapping.
"""

from datetime import datetime, timezone
from typing import TypeVar, Generic, Any, Optional
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - Timestamp helpers shared by every table mapping

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class ListingRepository(BaseRepository[Listing]):
            def get_by_id(self, listing_id: str) -> Optional[Listing]:
                result = self._db.table("listings").select("*").eq("id", listing_id).execute()
                if not result.data:
                    return None
                return self._map_to_listing(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    @staticmethod
    def _now() -> str:
        """Current UTC time as an ISO string for timestamp columns."""
        return datetime.now(timezone.utc).isoformat()

    @staticmethod
    def _parse_timestamp(value: Any) -> datetime:
        """
        Parse a timestamp column.

        Missing or unparseable values fall back to the current time, the
        same way a pending server timestamp reads as "now".
        """
        if isinstance(value, datetime):
            return value
        if isinstance(value, str) and value:
            try:
                return datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError:
                pass
        return datetime.now(timezone.utc)

    @staticmethod
    def _first(data: Optional[list[dict[str, Any]]]) -> Optional[dict[str, Any]]:
        """Return the first row of a result set, or None when empty."""
        if not data:
            return None
        return data[0]
