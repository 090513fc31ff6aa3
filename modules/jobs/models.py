"""
Job board data models.

Clients post jobs; freelancers answer them with proposals.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class JobStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ProposalStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"


class JobPosting(BaseModel):
    """A job posted on the job board."""

    id: str
    client_id: str
    title: str
    description: str = ""
    category: str
    budget: float
    deadline: datetime
    status: JobStatus = JobStatus.OPEN
    proposal_count: int = 0
    created_at: datetime


class CreateJobRequest(BaseModel):
    """Request to post a job."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(default="", max_length=5000)
    category: str = Field(..., min_length=1)
    budget: float = Field(..., gt=0)
    deadline: datetime


class JobFilters(BaseModel):
    """
    Job board query.

    Without a client or status filter only open jobs are returned.
    """

    client_id: Optional[str] = None
    category: Optional[str] = None
    status: Optional[JobStatus] = None
    limit: Optional[int] = Field(None, gt=0)


class Proposal(BaseModel):
    """A freelancer's answer to a job posting."""

    id: str
    job_id: str
    freelancer_id: str
    price: float
    cover_letter: str = ""
    duration: str = ""
    status: ProposalStatus = ProposalStatus.PENDING
    created_at: datetime


class CreateProposalRequest(BaseModel):
    """Proposal form contents."""

    price: float = Field(..., gt=0)
    cover_letter: str = Field(..., min_length=1, max_length=5000)
    duration: str = Field(..., min_length=1, description="e.g. '5 days'")
