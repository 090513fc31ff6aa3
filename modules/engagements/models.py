"""
Engagement data models.

Everything that happens after a client picks a freelancer: direct job
requests, the work items accepted requests turn into, listing orders and
the freelancer dashboard statistics derived from completed work.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


WORK_DEADLINE_DAYS = 7
DEFAULT_WORK_ICON = "📋"
STATS_WINDOW_DAYS = 7


class JobRequestStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class WorkStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    DELIVERED = "delivered"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class OrderStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    REVISION = "revision"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class OrderRole(str, Enum):
    CLIENT = "client"
    FREELANCER = "freelancer"


# =============================================================================
# Job requests
# =============================================================================


class JobRequest(BaseModel):
    """A client's direct offer to one freelancer."""

    id: str
    client_id: str
    client_name: str = ""
    freelancer_id: str
    listing_id: Optional[str] = Field(None, description="None for a direct offer")
    title: str
    description: str = ""
    offered_price: float
    delivery_time: int = Field(..., description="Delivery time in days")
    status: JobRequestStatus = JobRequestStatus.PENDING
    created_at: datetime


class NewJobRequest(BaseModel):
    """Job request form contents."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(default="", max_length=5000)
    price: float = Field(..., gt=0)
    delivery_time: int = Field(..., gt=0)
    listing_id: Optional[str] = None


# =============================================================================
# Work items
# =============================================================================


class WorkItem(BaseModel):
    """Work a freelancer has taken on for a client."""

    id: str
    title: str
    description: str = ""
    client_id: str
    client_name: str = ""
    freelancer_id: str
    status: WorkStatus = WorkStatus.ACTIVE
    price: float = 0
    progress: int = Field(default=0, ge=0, le=100)
    deadline: datetime
    icon: str = DEFAULT_WORK_ICON
    created_at: datetime
    completed_at: Optional[datetime] = None


# =============================================================================
# Orders
# =============================================================================


class Order(BaseModel):
    """A client's order of a freelancer's listing."""

    id: str
    listing_id: str
    listing_title: str = ""
    client_id: str
    client_name: str = ""
    freelancer_id: str
    freelancer_name: str = ""
    status: OrderStatus = OrderStatus.PENDING
    price: float
    deadline: datetime
    created_at: datetime


class CreateOrderRequest(BaseModel):
    """Request to order a listing."""

    listing_id: str
    listing_title: str = ""
    client_name: str = ""
    freelancer_id: str
    freelancer_name: str = ""
    price: float = Field(..., gt=0)
    deadline_days: int = Field(..., gt=0)


# =============================================================================
# Stats
# =============================================================================


class ChartPoint(BaseModel):
    """Earnings of one day."""

    name: str
    value: float = 0


class FreelancerStats(BaseModel):
    """Dashboard numbers for a freelancer."""

    total_earnings: float = 0
    active_jobs: int = 0
    rating: float = 0
    completed_jobs: int = 0
    chart_data: list[ChartPoint] = Field(default_factory=list)
