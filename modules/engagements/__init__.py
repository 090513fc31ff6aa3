"""
Engagements module.

Direct job requests from clients, the work items accepted requests
become, listing orders and freelancer dashboard statistics.
"""

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
    ChartPoint,
    FreelancerStats,
    WORK_DEADLINE_DAYS,
)
from .interfaces import IJobRequestService, IWorkService, IOrderService
from .service import (
    JobRequestService,
    WorkService,
    OrderService,
    get_job_request_service,
    get_work_service,
    get_order_service,
    reset_engagement_services,
)
from .stats import compute_stats, earnings_chart
from .exceptions import (
    JobRequestNotFoundError,
    JobRequestAccessDeniedError,
    JobRequestAlreadyAnsweredError,
    WorkItemNotFoundError,
    WorkItemAccessDeniedError,
    InvalidProgressError,
    OrderNotFoundError,
)

__all__ = [
    "JobRequest",
    "JobRequestStatus",
    "NewJobRequest",
    "WorkItem",
    "WorkStatus",
    "Order",
    "OrderStatus",
    "OrderRole",
    "CreateOrderRequest",
    "ChartPoint",
    "FreelancerStats",
    "WORK_DEADLINE_DAYS",
    "IJobRequestService",
    "IWorkService",
    "IOrderService",
    "JobRequestService",
    "WorkService",
    "OrderService",
    "get_job_request_service",
    "get_work_service",
    "get_order_service",
    "reset_engagement_services",
    "compute_stats",
    "earnings_chart",
    "JobRequestNotFoundError",
    "JobRequestAccessDeniedError",
    "JobRequestAlreadyAnsweredError",
    "WorkItemNotFoundError",
    "WorkItemAccessDeniedError",
    "InvalidProgressError",
    "OrderNotFoundError",
]
