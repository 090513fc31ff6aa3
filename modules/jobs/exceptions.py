"""
Job board exceptions.
"""

from shared.exceptions import NotFoundError, AuthorizationError, ValidationError


class JobNotFoundError(NotFoundError):
    """Raised when a job posting is not found."""

    def __init__(self, job_id: str):
        super().__init__(
            f"Job not found: {job_id}",
            code="JOB_NOT_FOUND",
            details={"job_id": job_id},
        )


class JobAccessDeniedError(AuthorizationError):
    """Raised when a client changes a job they did not post."""

    def __init__(self, job_id: str, user_id: str):
        super().__init__(
            f"Access denied to job: {job_id}",
            code="JOB_ACCESS_DENIED",
            details={"job_id": job_id, "user_id": user_id},
        )


class JobClosedError(ValidationError):
    """Raised when proposing on a job that no longer takes proposals."""

    def __init__(self, job_id: str, status: str):
        super().__init__(
            f"Job {job_id} is not open for proposals",
            code="JOB_CLOSED",
            details={"job_id": job_id, "status": status},
        )


class ProposalNotFoundError(NotFoundError):
    """Raised when a proposal is not found."""

    def __init__(self, proposal_id: str):
        super().__init__(
            f"Proposal not found: {proposal_id}",
            code="PROPOSAL_NOT_FOUND",
            details={"proposal_id": proposal_id},
        )
