"""
Jobs module.

Job postings clients publish on the job board and the proposals
freelancers submit for them.
"""

from .models import (
    JobPosting,
    JobStatus,
    CreateJobRequest,
    JobFilters,
    Proposal,
    ProposalStatus,
    CreateProposalRequest,
)
from .interfaces import IJobService, IProposalService
from .service import (
    JobService,
    ProposalService,
    get_job_service,
    get_proposal_service,
    reset_job_services,
)
from .exceptions import (
    JobNotFoundError,
    JobAccessDeniedError,
    JobClosedError,
    ProposalNotFoundError,
)

__all__ = [
    "JobPosting",
    "JobStatus",
    "CreateJobRequest",
    "JobFilters",
    "Proposal",
    "ProposalStatus",
    "CreateProposalRequest",
    "IJobService",
    "IProposalService",
    "JobService",
    "ProposalService",
    "get_job_service",
    "get_proposal_service",
    "reset_job_services",
    "JobNotFoundError",
    "JobAccessDeniedError",
    "JobClosedError",
    "ProposalNotFoundError",
]
