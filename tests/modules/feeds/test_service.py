"""Tests for FeedService."""

import asyncio
import threading
import time
from unittest.mock import AsyncMock, patch

import pytest

from modules.engagements.models import FreelancerStats
from modules.engagements.repository import JobRequestRepository, WorkItemRepository
from modules.engagements.service import JobRequestService, WorkService
from modules.feeds.service import FeedService
from modules.jobs.models import JobFilters
from modules.jobs.repository import JobRepository
from modules.jobs.service import JobService
from modules.listings.repository import ListingRepository
from modules.listings.service import ListingService
from modules.users.repository import UserRepository
from modules.users.service import UserService

from tests.factories import make_listing, make_listing_row


@pytest.fixture
def listings():
    mock = AsyncMock()
    mock.list_active.return_value = [make_listing("l-1")]
    return mock


@pytest.fixture
def jobs():
    mock = AsyncMock()
    mock.list_jobs.return_value = []
    return mock


@pytest.fixture
def requests():
    mock = AsyncMock()
    mock.list_pending.return_value = []
    return mock


@pytest.fixture
def work():
    mock = AsyncMock()
    mock.get_stats.return_value = FreelancerStats(total_earnings=150, completed_jobs=2)
    return mock


@pytest.fixture
def feeds(listings, jobs, requests, work):
    return FeedService(listings, jobs, requests, work, timeout=0.05)


class TestClientHomeFeed:
    @pytest.mark.asyncio
    async def test_loads_listings_and_own_jobs(self, feeds, listings, jobs, client_id):
        """Should fetch five active listings and the client's three latest jobs."""
        feed = await feeds.load_client_home(client_id)

        assert feed.degraded is False
        assert [listing.id for listing in feed.listings] == ["l-1"]
        listings.list_active.assert_awaited_once_with(limit=5)
        jobs.list_jobs.assert_awaited_once_with(JobFilters(client_id=client_id, limit=3))

    @pytest.mark.asyncio
    async def test_signed_out_skips_own_jobs(self, feeds, jobs):
        feed = await feeds.load_client_home(None)

        assert feed.my_jobs == []
        jobs.list_jobs.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_timeout_degrades(self, feeds, listings, client_id):
        """A stalled read should yield an empty degraded feed."""
        async def stalled(limit=None):
            await asyncio.sleep(10)
            return []

        listings.list_active.side_effect = stalled

        feed = await feeds.load_client_home(client_id)

        assert feed.degraded is True
        assert feed.listings == []
        assert feed.my_jobs == []

    @pytest.mark.asyncio
    async def test_error_degrades(self, feeds, jobs, client_id):
        jobs.list_jobs.side_effect = RuntimeError("job_postings unavailable")

        feed = await feeds.load_client_home(client_id)

        assert feed.degraded is True


class TestDashboardFeed:
    @pytest.mark.asyncio
    async def test_loads_stats_and_requests(self, feeds, freelancer_id):
        feed = await feeds.load_dashboard(freelancer_id)

        assert feed.degraded is False
        assert feed.stats.total_earnings == 150

    @pytest.mark.asyncio
    async def test_timeout_degrades(self, feeds, requests, freelancer_id):
        async def stalled(freelancer_id):
            await asyncio.sleep(10)
            return []

        requests.list_pending.side_effect = stalled

        feed = await feeds.load_dashboard(freelancer_id)

        assert feed.degraded is True
        assert feed.stats == FreelancerStats()


class TestBlockingReads:
    """Feeds over real services whose repository calls block the calling thread."""

    @pytest.fixture
    def release(self):
        event = threading.Event()
        yield event
        event.set()

    @pytest.fixture
    def real_feeds(self, fake_db):
        return FeedService(
            ListingService(ListingRepository(fake_db)),
            JobService(JobRepository(fake_db)),
            JobRequestService(JobRequestRepository(fake_db), WorkItemRepository(fake_db)),
            WorkService(WorkItemRepository(fake_db), UserService(UserRepository(fake_db))),
            timeout=0.1,
        )

    @pytest.mark.asyncio
    async def test_blocking_listing_read_times_out(self, real_feeds, release, client_id):
        """A repository stuck on the network should not hold the feed past its timeout."""
        def stuck(*args, **kwargs):
            release.wait(5)
            return []

        with patch.object(ListingRepository, "list_active", side_effect=stuck):
            started = time.monotonic()
            feed = await real_feeds.load_client_home(client_id)
            elapsed = time.monotonic() - started
            release.set()

        assert feed.degraded is True
        assert elapsed < 1.0

    @pytest.mark.asyncio
    async def test_blocking_dashboard_read_times_out(self, real_feeds, release, freelancer_id):
        def stuck(*args, **kwargs):
            release.wait(5)
            return []

        with patch.object(JobRequestRepository, "list_pending_for_freelancer", side_effect=stuck):
            started = time.monotonic()
            feed = await real_feeds.load_dashboard(freelancer_id)
            elapsed = time.monotonic() - started
            release.set()

        assert feed.degraded is True
        assert elapsed < 1.0

    @pytest.mark.asyncio
    async def test_unblocked_reads_load_normally(self, real_feeds, fake_db, client_id):
        fake_db.tables["listings"] = [make_listing_row("listing-1")]

        feed = await real_feeds.load_client_home(client_id)

        assert feed.degraded is False
        assert [listing.id for listing in feed.listings] == ["listing-1"]
