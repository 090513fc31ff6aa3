"""
Engagement interfaces.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import (
    JobRequest,
    NewJobRequest,
    WorkItem,
    WorkStatus,
    Order,
    OrderStatus,
    OrderRole,
    CreateOrderRequest,
    FreelancerStats,
)


@runtime_checkable
class IJobRequestService(Protocol):
    """Interface for direct job requests."""

    async def create_request(
        self,
        client_id: str,
        client_name: str,
        freelancer_id: str,
        request: NewJobRequest,
    ) -> JobRequest:
        """Send a job request. It starts out pending."""
        ...

    async def list_pending(self, freelancer_id: str) -> list[JobRequest]:
        """A freelancer's pending requests, newest first."""
        ...

    async def respond(
        self, request_id: str, freelancer_id: str, accept: bool
    ) -> Optional[WorkItem]:
        """
        Accept or reject a pending request.

        Returns:
            The work item an acceptance creates, None for a rejection
        """
        ...


@runtime_checkable
class IWorkService(Protocol):
    """Interface for work items and freelancer stats."""

    async def list_for_freelancer(
        self, freelancer_id: str, status: Optional[WorkStatus] = None
    ) -> list[WorkItem]:
        ...

    async def list_for_client(self, client_id: str) -> list[WorkItem]:
        ...

    async def update_progress(self, work_id: str, freelancer_id: str, progress: int) -> WorkItem:
        ...

    async def complete(self, work_id: str, client_id: str) -> WorkItem:
        """Client approval of delivered work."""
        ...

    async def get_stats(self, freelancer_id: str) -> FreelancerStats:
        """Dashboard numbers. Never raises; degrades to zeros."""
        ...


@runtime_checkable
class IOrderService(Protocol):
    """Interface for listing orders."""

    async def create_order(self, client_id: str, request: CreateOrderRequest) -> Order:
        ...

    async def list_orders(self, user_id: str, role: OrderRole) -> list[Order]:
        ...

    async def get_order(self, order_id: str) -> Optional[Order]:
        ...

    async def update_status(self, order_id: str, status: OrderStatus) -> Order:
        ...
