"""
Engagement exceptions.
"""

from shared.exceptions import NotFoundError, AuthorizationError, ValidationError


class JobRequestNotFoundError(NotFoundError):
    """Raised when a job request is not found."""

    def __init__(self, request_id: str):
        super().__init__(
            f"Job request not found: {request_id}",
            code="JOB_REQUEST_NOT_FOUND",
            details={"request_id": request_id},
        )


class JobRequestAccessDeniedError(AuthorizationError):
    """Raised when a freelancer answers a request addressed to someone else."""

    def __init__(self, request_id: str, user_id: str):
        super().__init__(
            f"Access denied to job request: {request_id}",
            code="JOB_REQUEST_ACCESS_DENIED",
            details={"request_id": request_id, "user_id": user_id},
        )


class JobRequestAlreadyAnsweredError(ValidationError):
    """Raised when answering a request that is no longer pending."""

    def __init__(self, request_id: str, status: str):
        super().__init__(
            f"Job request {request_id} was already {status}",
            code="JOB_REQUEST_ANSWERED",
            details={"request_id": request_id, "status": status},
        )


class WorkItemNotFoundError(NotFoundError):
    """Raised when a work item is not found."""

    def __init__(self, work_id: str):
        super().__init__(
            f"Work item not found: {work_id}",
            code="WORK_ITEM_NOT_FOUND",
            details={"work_id": work_id},
        )


class WorkItemAccessDeniedError(AuthorizationError):
    """Raised when a user changes a work item they are not part of."""

    def __init__(self, work_id: str, user_id: str):
        super().__init__(
            f"Access denied to work item: {work_id}",
            code="WORK_ITEM_ACCESS_DENIED",
            details={"work_id": work_id, "user_id": user_id},
        )


class InvalidProgressError(ValidationError):
    """Raised for a progress value outside 0-100."""

    def __init__(self, progress: int):
        super().__init__(
            "Progress must be between 0 and 100",
            code="INVALID_PROGRESS",
            details={"progress": progress},
        )


class OrderNotFoundError(NotFoundError):
    """Raised when an order is not found."""

    def __init__(self, order_id: str):
        super().__init__(
            f"Order not found: {order_id}",
            code="ORDER_NOT_FOUND",
            details={"order_id": order_id},
        )
