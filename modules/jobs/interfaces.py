"""
Job board interfaces.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import (
    JobPosting,
    JobStatus,
    CreateJobRequest,
    JobFilters,
    Proposal,
    ProposalStatus,
    CreateProposalRequest,
)


@runtime_checkable
class IJobService(Protocol):
    """Interface for job postings."""

    async def create_job(self, client_id: str, request: CreateJobRequest) -> JobPosting:
        """Post a job. New jobs are open with no proposals."""
        ...

    async def list_jobs(self, filters: Optional[JobFilters] = None) -> list[JobPosting]:
        """Jobs matching `filters`, newest first."""
        ...

    async def get_job(self, job_id: str) -> Optional[JobPosting]:
        ...

    async def update_status(self, job_id: str, client_id: str, status: JobStatus) -> JobPosting:
        ...

    async def delete_job(self, job_id: str, client_id: str) -> None:
        ...


@runtime_checkable
class IProposalService(Protocol):
    """Interface for proposals."""

    async def create_proposal(
        self, job_id: str, freelancer_id: str, request: CreateProposalRequest
    ) -> Proposal:
        """Submit a proposal and count it on the job."""
        ...

    async def list_for_job(self, job_id: str) -> list[Proposal]:
        ...

    async def list_by_freelancer(self, freelancer_id: str) -> list[Proposal]:
        ...

    async def update_status(self, proposal_id: str, status: ProposalStatus) -> Proposal:
        ...
