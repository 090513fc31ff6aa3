"""
Dependency injection setup for the marketplace shell.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations on one shared
Supabase client.
"""

import logging
from typing import TYPE_CHECKING, Optional

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import IAuthProvider, IAuthService
    from modules.auth.session import SessionStore
    from modules.users.interfaces import IUserService
    from modules.listings.interfaces import IListingService, IFavoriteService
    from modules.jobs.interfaces import IJobService, IProposalService
    from modules.engagements.interfaces import IJobRequestService, IWorkService, IOrderService
    from modules.messaging.interfaces import IMessagingService
    from modules.storage.interfaces import IStorageService
    from modules.feeds.service import FeedService

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached within the
    container. Pass a client to run against something other than the
    configured Supabase project (tests pass a fake).
    """

    def __init__(self, client: "Optional[Client]" = None) -> None:
        self._client = client
        self._services: dict[str, object] = {}

    @property
    def client(self) -> "Client":
        if self._client is None:
            from shared.database import get_supabase_client
            self._client = get_supabase_client()
        return self._client

    def _cached(self, name: str, factory):
        if name not in self._services:
            self._services[name] = factory()
        return self._services[name]

    @property
    def auth_provider(self) -> "IAuthProvider":
        """Get the authentication provider shared by the auth service and session store."""
        def build():
            from modules.auth.provider import SupabaseAuthProvider
            from shared.database import get_supabase_admin_client

            admin_client = None
            try:
                admin_client = get_supabase_admin_client()
            except RuntimeError:
                logger.warning("Service-role key not configured; account deletion is unavailable")
            return SupabaseAuthProvider(self.client, admin_client)

        return self._cached("auth_provider", build)

    @property
    def users(self) -> "IUserService":
        def build():
            from modules.users.service import UserService
            from modules.users.repository import UserRepository
            return UserService(UserRepository(self.client))

        return self._cached("users", build)

    @property
    def auth(self) -> "IAuthService":
        def build():
            from modules.auth.service import AuthService
            return AuthService(self.auth_provider, self.users)

        return self._cached("auth", build)

    @property
    def session(self) -> "SessionStore":
        def build():
            from modules.auth.session import SessionStore
            return SessionStore(self.auth_provider, self.users)

        return self._cached("session", build)

    @property
    def listings(self) -> "IListingService":
        def build():
            from modules.listings.service import ListingService
            from modules.listings.repository import ListingRepository
            return ListingService(ListingRepository(self.client))

        return self._cached("listings", build)

    @property
    def favorites(self) -> "IFavoriteService":
        def build():
            from modules.listings.service import FavoriteService
            from modules.listings.repository import FavoriteRepository
            return FavoriteService(FavoriteRepository(self.client))

        return self._cached("favorites", build)

    @property
    def jobs(self) -> "IJobService":
        def build():
            from modules.jobs.service import JobService
            from modules.jobs.repository import JobRepository
            return JobService(JobRepository(self.client))

        return self._cached("jobs", build)

    @property
    def proposals(self) -> "IProposalService":
        def build():
            from modules.jobs.service import ProposalService
            from modules.jobs.repository import JobRepository, ProposalRepository
            return ProposalService(ProposalRepository(self.client), JobRepository(self.client))

        return self._cached("proposals", build)

    @property
    def job_requests(self) -> "IJobRequestService":
        def build():
            from modules.engagements.service import JobRequestService
            from modules.engagements.repository import JobRequestRepository, WorkItemRepository
            return JobRequestService(
                JobRequestRepository(self.client), WorkItemRepository(self.client)
            )

        return self._cached("job_requests", build)

    @property
    def work(self) -> "IWorkService":
        def build():
            from modules.engagements.service import WorkService
            from modules.engagements.repository import WorkItemRepository
            return WorkService(WorkItemRepository(self.client), self.users)

        return self._cached("work", build)

    @property
    def orders(self) -> "IOrderService":
        def build():
            from modules.engagements.service import OrderService
            from modules.engagements.repository import OrderRepository
            return OrderService(OrderRepository(self.client))

        return self._cached("orders", build)

    @property
    def messaging(self) -> "IMessagingService":
        def build():
            from modules.messaging.service import MessagingService
            from modules.messaging.repository import ConversationRepository, MessageRepository
            return MessagingService(
                ConversationRepository(self.client),
                MessageRepository(self.client),
                self.users,
            )

        return self._cached("messaging", build)

    @property
    def storage(self) -> "IStorageService":
        def build():
            from modules.storage.service import StorageService
            from shared.config import get_settings

            settings = get_settings()
            return StorageService(
                self.client, settings.storage_bucket, settings.storage_content_type
            )

        return self._cached("storage", build)

    @property
    def feeds(self) -> "FeedService":
        def build():
            from modules.feeds.service import FeedService
            return FeedService(self.listings, self.jobs, self.job_requests, self.work)

        return self._cached("feeds", build)

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._services.clear()


# Module-level container singleton
_container: Optional[ServiceContainer] = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container with new
    service instances. Primarily used for testing.
    """
    global _container
    _container = None
