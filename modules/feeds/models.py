"""
Feed data models.
"""

from pydantic import BaseModel, Field

from modules.listings.models import Listing
from modules.jobs.models import JobPosting
from modules.engagements.models import JobRequest, FreelancerStats


class ClientHomeFeed(BaseModel):
    """What the client home screen shows."""

    listings: list[Listing] = Field(default_factory=list)
    my_jobs: list[JobPosting] = Field(default_factory=list)
    degraded: bool = Field(default=False, description="True if defaults were served")


class DashboardFeed(BaseModel):
    """What the freelancer dashboard shows."""

    stats: FreelancerStats = Field(default_factory=FreelancerStats)
    pending_requests: list[JobRequest] = Field(default_factory=list)
    degraded: bool = Field(default=False, description="True if defaults were served")
