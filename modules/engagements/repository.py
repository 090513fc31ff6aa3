"""
Engagement repository for database access.

Encapsulates all Supabase queries and data mapping for:
- job_requests
- jobs (work items)
- orders
"""

from datetime import datetime
from typing import Optional, Any

from shared.repository import BaseRepository
from .models import (
    JobRequest,
    JobRequestStatus,
    WorkItem,
    WorkStatus,
    Order,
    OrderStatus,
    OrderRole,
    DEFAULT_WORK_ICON,
)


class JobRequestRepository(BaseRepository[JobRequest]):
    """Repository for client-to-freelancer job requests."""

    TABLE = "job_requests"

    def create(self, data: dict[str, Any]) -> JobRequest:
        row = {
            **data,
            "status": JobRequestStatus.PENDING.value,
            "created_at": self._now(),
        }
        result = self._db.table(self.TABLE).insert(row).execute()
        return self._map_to_request(result.data[0])

    def get_by_id(self, request_id: str) -> Optional[JobRequest]:
        result = self._db.table(self.TABLE).select("*").eq("id", request_id).execute()
        row = self._first(result.data)
        if row is None:
            return None
        return self._map_to_request(row)

    def list_pending_for_freelancer(self, freelancer_id: str) -> list[JobRequest]:
        result = (
            self._db.table(self.TABLE)
            .select("*")
            .eq("freelancer_id", freelancer_id)
            .eq("status", JobRequestStatus.PENDING.value)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_request(row) for row in result.data]

    def update_status(
        self,
        request_id: str,
        status: JobRequestStatus,
        expected: Optional[JobRequestStatus] = None,
    ) -> bool:
        """
        Set the request status, optionally only if it is still `expected`.

        Returns:
            True if a row was updated
        """
        query = self._db.table(self.TABLE).update({"status": status.value}).eq("id", request_id)
        if expected is not None:
            query = query.eq("status", expected.value)
        result = query.execute()
        return bool(result.data)

    def _map_to_request(self, data: dict[str, Any]) -> JobRequest:
        return JobRequest(
            id=str(data["id"]),
            client_id=str(data["client_id"]),
            client_name=data.get("client_name") or "",
            freelancer_id=str(data["freelancer_id"]),
            listing_id=data.get("listing_id"),
            title=data["title"],
            description=data.get("description") or "",
            offered_price=float(data.get("offered_price") or 0),
            delivery_time=data.get("delivery_time") or 0,
            status=JobRequestStatus(data.get("status") or JobRequestStatus.PENDING.value),
            created_at=self._parse_timestamp(data.get("created_at")),
        )


class WorkItemRepository(BaseRepository[WorkItem]):
    """Repository for work items (the `jobs` table)."""

    TABLE = "jobs"

    def create(self, data: dict[str, Any]) -> WorkItem:
        row = {
            "status": WorkStatus.ACTIVE.value,
            "progress": 0,
            "icon": DEFAULT_WORK_ICON,
            **data,
            "created_at": self._now(),
        }
        result = self._db.table(self.TABLE).insert(row).execute()
        return self._map_to_work_item(result.data[0])

    def get_by_id(self, work_id: str) -> Optional[WorkItem]:
        result = self._db.table(self.TABLE).select("*").eq("id", work_id).execute()
        row = self._first(result.data)
        if row is None:
            return None
        return self._map_to_work_item(row)

    def list_by_freelancer(
        self, freelancer_id: str, status: Optional[WorkStatus] = None
    ) -> list[WorkItem]:
        query = self._db.table(self.TABLE).select("*").eq("freelancer_id", freelancer_id)
        if status:
            query = query.eq("status", status.value)
        result = query.order("created_at", desc=True).execute()
        return [self._map_to_work_item(row) for row in result.data]

    def list_by_client(self, client_id: str) -> list[WorkItem]:
        result = (
            self._db.table(self.TABLE)
            .select("*")
            .eq("client_id", client_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_work_item(row) for row in result.data]

    def update(self, work_id: str, data: dict[str, Any]) -> Optional[WorkItem]:
        data = {**data, "updated_at": self._now()}
        result = self._db.table(self.TABLE).update(data).eq("id", work_id).execute()
        row = self._first(result.data)
        if row is None:
            return None
        return self._map_to_work_item(row)

    def _map_to_work_item(self, data: dict[str, Any]) -> WorkItem:
        completed_at: Optional[datetime] = None
        if data.get("completed_at"):
            completed_at = self._parse_timestamp(data["completed_at"])

        return WorkItem(
            id=str(data["id"]),
            title=data["title"],
            description=data.get("description") or "",
            client_id=str(data["client_id"]),
            client_name=data.get("client_name") or "",
            freelancer_id=str(data["freelancer_id"]),
            status=WorkStatus(data.get("status") or WorkStatus.ACTIVE.value),
            price=float(data.get("price") or 0),
            progress=data.get("progress") or 0,
            deadline=self._parse_timestamp(data.get("deadline")),
            icon=data.get("icon") or DEFAULT_WORK_ICON,
            created_at=self._parse_timestamp(data.get("created_at")),
            completed_at=completed_at,
        )


class OrderRepository(BaseRepository[Order]):
    """Repository for listing orders."""

    TABLE = "orders"

    def create(self, client_id: str, data: dict[str, Any], deadline: datetime) -> Order:
        row = {
            **data,
            "client_id": client_id,
            "status": OrderStatus.PENDING.value,
            "deadline": deadline.isoformat(),
            "created_at": self._now(),
        }
        result = self._db.table(self.TABLE).insert(row).execute()
        return self._map_to_order(result.data[0])

    def get_by_id(self, order_id: str) -> Optional[Order]:
        result = self._db.table(self.TABLE).select("*").eq("id", order_id).execute()
        row = self._first(result.data)
        if row is None:
            return None
        return self._map_to_order(row)

    def list_by_user(self, user_id: str, role: OrderRole) -> list[Order]:
        column = "client_id" if role == OrderRole.CLIENT else "freelancer_id"
        result = (
            self._db.table(self.TABLE)
            .select("*")
            .eq(column, user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_order(row) for row in result.data]

    def update_status(self, order_id: str, status: OrderStatus) -> Optional[Order]:
        result = self._db.table(self.TABLE).update({"status": status.value}).eq("id", order_id).execute()
        row = self._first(result.data)
        if row is None:
            return None
        return self._map_to_order(row)

    def _map_to_order(self, data: dict[str, Any]) -> Order:
        return Order(
            id=str(data["id"]),
            listing_id=str(data["listing_id"]),
            listing_title=data.get("listing_title") or "",
            client_id=str(data["client_id"]),
            client_name=data.get("client_name") or "",
            freelancer_id=str(data["freelancer_id"]),
            freelancer_name=data.get("freelancer_name") or "",
            status=OrderStatus(data.get("status") or OrderStatus.PENDING.value),
            price=float(data.get("price") or 0),
            deadline=self._parse_timestamp(data.get("deadline")),
            created_at=self._parse_timestamp(data.get("created_at")),
        )
