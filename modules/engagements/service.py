"""
Engagement service implementations.

Job requests, work items, orders and freelancer statistics.
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from shared.database import get_supabase_client

from modules.users.interfaces import IUserService

from .interfaces import IJobRequestService, IWorkService, IOrderService
from .models import (
    JobRequest,
    JobRequestStatus,
    NewJobRequest,
    WorkItem,
    WorkStatus,
    Order,
    OrderStatus,
    OrderRole,
    CreateOrderRequest,
    FreelancerStats,
    WORK_DEADLINE_DAYS,
)
from .repository import JobRequestRepository, WorkItemRepository, OrderRepository
from .exceptions import (
    JobRequestNotFoundError,
    JobRequestAccessDeniedError,
    JobRequestAlreadyAnsweredError,
    WorkItemNotFoundError,
    WorkItemAccessDeniedError,
    InvalidProgressError,
    OrderNotFoundError,
)
from .stats import compute_stats

logger = logging.getLogger(__name__)


class JobRequestService(IJobRequestService):
    """
    Job requests backed by the `job_requests` table.

    Answering a request is a compare-and-set on its status: only the
    caller whose update matched a pending row goes on to create the work
    item, so concurrent accepts yield one work item.
    """

    def __init__(self, repository: JobRequestRepository, work: WorkItemRepository):
        self._repo = repository
        self._work = work

    async def create_request(
        self,
        client_id: str,
        client_name: str,
        freelancer_id: str,
        request: NewJobRequest,
    ) -> JobRequest:
        job_request = await asyncio.to_thread(self._repo.create, {
            "client_id": client_id,
            "client_name": client_name,
            "freelancer_id": freelancer_id,
            "listing_id": request.listing_id,
            "title": request.title,
            "description": request.description,
            "offered_price": request.price,
            "delivery_time": request.delivery_time,
        })
        logger.info(f"Client {client_id} sent job request {job_request.id} to {freelancer_id}")
        return job_request

    async def list_pending(self, freelancer_id: str) -> list[JobRequest]:
        return await asyncio.to_thread(self._repo.list_pending_for_freelancer, freelancer_id)

    async def respond(
        self, request_id: str, freelancer_id: str, accept: bool
    ) -> Optional[WorkItem]:
        job_request = await asyncio.to_thread(self._repo.get_by_id, request_id)
        if job_request is None:
            raise JobRequestNotFoundError(request_id)
        if job_request.freelancer_id != freelancer_id:
            raise JobRequestAccessDeniedError(request_id, freelancer_id)
        if job_request.status != JobRequestStatus.PENDING:
            raise JobRequestAlreadyAnsweredError(request_id, job_request.status.value)

        answer = JobRequestStatus.ACCEPTED if accept else JobRequestStatus.REJECTED
        claimed = await asyncio.to_thread(
            self._repo.update_status, request_id, answer, JobRequestStatus.PENDING
        )
        if not claimed:
            current = await asyncio.to_thread(self._repo.get_by_id, request_id)
            if current is None:
                raise JobRequestNotFoundError(request_id)
            raise JobRequestAlreadyAnsweredError(request_id, current.status.value)

        if not accept:
            return None

        deadline = datetime.now(timezone.utc) + timedelta(days=WORK_DEADLINE_DAYS)
        try:
            work_item = await asyncio.to_thread(self._work.create, {
                "title": job_request.title,
                "description": job_request.description,
                "client_id": job_request.client_id,
                "client_name": job_request.client_name,
                "freelancer_id": freelancer_id,
                "status": WorkStatus.ACTIVE.value,
                "price": job_request.offered_price,
                "deadline": deadline.isoformat(),
            })
        except Exception:
            logger.error(
                f"Work item creation failed for job request {request_id}, reopening it",
                exc_info=True,
            )
            await asyncio.to_thread(
                self._repo.update_status,
                request_id,
                JobRequestStatus.PENDING,
                JobRequestStatus.ACCEPTED,
            )
            raise

        logger.info(f"Job request {request_id} accepted as work item {work_item.id}")
        return work_item


class WorkService(IWorkService):
    """Work items backed by the `jobs` table."""

    def __init__(self, repository: WorkItemRepository, users: IUserService):
        self._repo = repository
        self._users = users

    async def list_for_freelancer(
        self, freelancer_id: str, status: Optional[WorkStatus] = None
    ) -> list[WorkItem]:
        return await asyncio.to_thread(self._repo.list_by_freelancer, freelancer_id, status)

    async def list_for_client(self, client_id: str) -> list[WorkItem]:
        return await asyncio.to_thread(self._repo.list_by_client, client_id)

    async def update_progress(self, work_id: str, freelancer_id: str, progress: int) -> WorkItem:
        if not 0 <= progress <= 100:
            raise InvalidProgressError(progress)

        work_item = await self._get(work_id)
        if work_item.freelancer_id != freelancer_id:
            raise WorkItemAccessDeniedError(work_id, freelancer_id)

        updated = await asyncio.to_thread(self._repo.update, work_id, {"progress": progress})
        if updated is None:
            raise WorkItemNotFoundError(work_id)
        return updated

    async def complete(self, work_id: str, client_id: str) -> WorkItem:
        work_item = await self._get(work_id)
        if work_item.client_id != client_id:
            raise WorkItemAccessDeniedError(work_id, client_id)

        updated = await asyncio.to_thread(self._repo.update, work_id, {
            "status": WorkStatus.COMPLETED.value,
            "completed_at": datetime.now(timezone.utc).isoformat(),
        })
        if updated is None:
            raise WorkItemNotFoundError(work_id)
        return updated

    async def get_stats(self, freelancer_id: str) -> FreelancerStats:
        try:
            profile, active, completed = await asyncio.gather(
                self._users.get_profile(freelancer_id),
                asyncio.to_thread(self._repo.list_by_freelancer, freelancer_id, WorkStatus.ACTIVE),
                asyncio.to_thread(self._repo.list_by_freelancer, freelancer_id, WorkStatus.COMPLETED),
            )
        except Exception as e:
            logger.error(f"Failed to load stats for {freelancer_id}: {e}")
            return FreelancerStats()

        rating = profile.rating if profile and profile.rating is not None else 0
        return compute_stats(completed, len(active), rating)

    async def _get(self, work_id: str) -> WorkItem:
        work_item = await asyncio.to_thread(self._repo.get_by_id, work_id)
        if work_item is None:
            raise WorkItemNotFoundError(work_id)
        return work_item


class OrderService(IOrderService):
    """Orders backed by the `orders` table."""

    def __init__(self, repository: OrderRepository):
        self._repo = repository

    async def create_order(self, client_id: str, request: CreateOrderRequest) -> Order:
        deadline = datetime.now(timezone.utc) + timedelta(days=request.deadline_days)
        data = request.model_dump(exclude={"deadline_days"})
        return await asyncio.to_thread(self._repo.create, client_id, data, deadline)

    async def list_orders(self, user_id: str, role: OrderRole) -> list[Order]:
        return await asyncio.to_thread(self._repo.list_by_user, user_id, role)

    async def get_order(self, order_id: str) -> Optional[Order]:
        return await asyncio.to_thread(self._repo.get_by_id, order_id)

    async def update_status(self, order_id: str, status: OrderStatus) -> Order:
        order = await asyncio.to_thread(self._repo.update_status, order_id, status)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order


# Module-level instance getters
_job_request_service: Optional[JobRequestService] = None
_work_service: Optional[WorkService] = None
_order_service: Optional[OrderService] = None


def get_job_request_service() -> JobRequestService:
    """Get the job request service singleton."""
    global _job_request_service
    if _job_request_service is None:
        db = get_supabase_client()
        _job_request_service = JobRequestService(
            JobRequestRepository(db), WorkItemRepository(db)
        )
    return _job_request_service


def get_work_service() -> WorkService:
    """Get the work service singleton."""
    global _work_service
    if _work_service is None:
        from modules.users.service import get_user_service

        _work_service = WorkService(WorkItemRepository(get_supabase_client()), get_user_service())
    return _work_service


def get_order_service() -> OrderService:
    """Get the order service singleton."""
    global _order_service
    if _order_service is None:
        _order_service = OrderService(OrderRepository(get_supabase_client()))
    return _order_service


def reset_engagement_services() -> None:
    """Reset the engagement service singletons (for testing)."""
    global _job_request_service, _work_service, _order_service
    _job_request_service = None
    _work_service = None
    _order_service = None
