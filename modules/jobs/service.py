"""
Job board service implementation.
"""

import asyncio
import logging
from typing import Optional

from shared.database import get_supabase_client

from .interfaces import IJobService, IProposalService
from .models import (
    JobPosting,
    JobStatus,
    CreateJobRequest,
    JobFilters,
    Proposal,
    ProposalStatus,
    CreateProposalRequest,
)
from .repository import JobRepository, ProposalRepository
from .exceptions import (
    JobNotFoundError,
    JobAccessDeniedError,
    JobClosedError,
    ProposalNotFoundError,
)

logger = logging.getLogger(__name__)


class JobService(IJobService):
    """Job postings backed by the `job_postings` table."""

    def __init__(self, repository: JobRepository):
        self._repo = repository

    async def create_job(self, client_id: str, request: CreateJobRequest) -> JobPosting:
        job = await asyncio.to_thread(self._repo.create, client_id, request.model_dump(mode="json"))
        logger.info(f"Client {client_id} posted job {job.id}")
        return job

    async def list_jobs(self, filters: Optional[JobFilters] = None) -> list[JobPosting]:
        return await asyncio.to_thread(self._repo.find, filters or JobFilters())

    async def get_job(self, job_id: str) -> Optional[JobPosting]:
        return await asyncio.to_thread(self._repo.get_by_id, job_id)

    async def update_status(self, job_id: str, client_id: str, status: JobStatus) -> JobPosting:
        await self._get_owned(job_id, client_id)
        job = await asyncio.to_thread(self._repo.update_status, job_id, status)
        if job is None:
            raise JobNotFoundError(job_id)
        return job

    async def delete_job(self, job_id: str, client_id: str) -> None:
        await self._get_owned(job_id, client_id)
        await asyncio.to_thread(self._repo.delete, job_id)

    async def _get_owned(self, job_id: str, client_id: str) -> JobPosting:
        job = await asyncio.to_thread(self._repo.get_by_id, job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        if job.client_id != client_id:
            raise JobAccessDeniedError(job_id, client_id)
        return job


class ProposalService(IProposalService):
    """Proposals backed by the `proposals` table."""

    def __init__(self, repository: ProposalRepository, jobs: JobRepository):
        self._repo = repository
        self._jobs = jobs

    async def create_proposal(
        self, job_id: str, freelancer_id: str, request: CreateProposalRequest
    ) -> Proposal:
        job = await asyncio.to_thread(self._jobs.get_by_id, job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        if job.status != JobStatus.OPEN:
            raise JobClosedError(job_id, job.status.value)

        proposal = await asyncio.to_thread(
            self._repo.create, job_id, freelancer_id, request.model_dump()
        )
        await asyncio.to_thread(self._jobs.increment_proposal_count, job_id)
        return proposal

    async def list_for_job(self, job_id: str) -> list[Proposal]:
        return await asyncio.to_thread(self._repo.list_by_job, job_id)

    async def list_by_freelancer(self, freelancer_id: str) -> list[Proposal]:
        return await asyncio.to_thread(self._repo.list_by_freelancer, freelancer_id)

    async def update_status(self, proposal_id: str, status: ProposalStatus) -> Proposal:
        proposal = await asyncio.to_thread(self._repo.update_status, proposal_id, status)
        if proposal is None:
            raise ProposalNotFoundError(proposal_id)
        return proposal


# Module-level instance getters
_job_service: Optional[JobService] = None
_proposal_service: Optional[ProposalService] = None


def get_job_service() -> JobService:
    """Get the job service singleton."""
    global _job_service
    if _job_service is None:
        _job_service = JobService(JobRepository(get_supabase_client()))
    return _job_service


def get_proposal_service() -> ProposalService:
    """Get the proposal service singleton."""
    global _proposal_service
    if _proposal_service is None:
        db = get_supabase_client()
        _proposal_service = ProposalService(ProposalRepository(db), JobRepository(db))
    return _proposal_service


def reset_job_services() -> None:
    """Reset the job service singletons (for testing)."""
    global _job_service, _proposal_service
    _job_service = None
    _proposal_service = None
