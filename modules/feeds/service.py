"""
Home feed and dashboard loading.

Each feed is a handful of independent reads gathered concurrently and
raced against the configured load timeout. A timeout or a failed read
yields an empty, `degraded` feed so the screen can still render.
"""

import asyncio
import logging
from typing import Optional

from shared.config import get_settings
from shared.timeouts import with_timeout

from modules.listings.interfaces import IListingService
from modules.jobs.interfaces import IJobService
from modules.jobs.models import JobFilters
from modules.engagements.interfaces import IJobRequestService, IWorkService

from .models import ClientHomeFeed, DashboardFeed

logger = logging.getLogger(__name__)


class FeedService:
    """Loads the combined feeds of the two home screens."""

    def __init__(
        self,
        listings: IListingService,
        jobs: IJobService,
        requests: IJobRequestService,
        work: IWorkService,
        timeout: Optional[float] = None,
    ):
        settings = get_settings()
        self._listings = listings
        self._jobs = jobs
        self._requests = requests
        self._work = work
        self._timeout = timeout if timeout is not None else settings.feed_load_timeout_seconds
        self._listing_limit = settings.home_listing_limit
        self._job_limit = settings.home_job_limit

    async def load_client_home(self, client_id: Optional[str]) -> ClientHomeFeed:
        """Active listings plus the client's own latest job postings."""
        degraded = ClientHomeFeed(degraded=True)
        try:
            result = await with_timeout(
                asyncio.gather(
                    self._listings.list_active(limit=self._listing_limit),
                    self._own_jobs(client_id),
                ),
                self._timeout,
                None,
                label="client home feed",
            )
        except Exception as e:
            logger.error(f"Error loading client home feed: {e}")
            return degraded

        if result is None:
            return degraded
        listings, my_jobs = result
        return ClientHomeFeed(listings=listings, my_jobs=my_jobs)

    async def load_dashboard(self, freelancer_id: str) -> DashboardFeed:
        """Freelancer stats plus pending job requests."""
        degraded = DashboardFeed(degraded=True)
        try:
            result = await with_timeout(
                asyncio.gather(
                    self._work.get_stats(freelancer_id),
                    self._requests.list_pending(freelancer_id),
                ),
                self._timeout,
                None,
                label="dashboard",
            )
        except Exception as e:
            logger.error(f"Error loading dashboard for {freelancer_id}: {e}")
            return degraded

        if result is None:
            return degraded
        stats, pending = result
        return DashboardFeed(stats=stats, pending_requests=pending)

    async def _own_jobs(self, client_id: Optional[str]):
        if not client_id:
            return []
        return await self._jobs.list_jobs(JobFilters(client_id=client_id, limit=self._job_limit))


# Module-level instance getter
_service_instance: Optional[FeedService] = None


def get_feed_service() -> FeedService:
    """Get the feed service singleton."""
    global _service_instance
    if _service_instance is None:
        from modules.listings.service import get_listing_service
        from modules.jobs.service import get_job_service
        from modules.engagements.service import get_job_request_service, get_work_service

        _service_instance = FeedService(
            get_listing_service(),
            get_job_service(),
            get_job_request_service(),
            get_work_service(),
        )
    return _service_instance


def reset_feed_service() -> None:
    """Reset the feed service singleton (for testing)."""
    global _service_instance
    _service_instance = None
