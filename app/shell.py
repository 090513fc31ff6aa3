"""
Marketplace shell.

The root of the application: owns the session store, the navigation
controller and the unread-count aggregator, and wires them together.

    session store --snapshot--> bootstrap redirect --> navigation
                  --identity--> unread aggregator  --> Messages badge

Screens get the shell's navigation controller and services; nothing
else writes identity, profile or navigation state.
"""

import logging
from typing import Callable, Optional

from shared.models import AccountType

from modules.auth.interfaces import IAuthService
from modules.auth.models import SessionSnapshot
from modules.auth.session import SessionStore
from modules.messaging.interfaces import IMessagingService
from modules.messaging.unread import UnreadCountAggregator
from modules.navigation import flows
from modules.navigation.bootstrap import BootstrapRedirector
from modules.navigation.controller import NavigationController
from modules.navigation.screens import NAV_ITEMS, NavItem, Screen, badge_label

logger = logging.getLogger(__name__)

# Name a counterpart is shown under when their profile has none
FALLBACK_NAMES = {
    AccountType.FREELANCER: "Freelancer",
    AccountType.CLIENT: "Employer",
}


class MarketplaceShell:
    """Root application component."""

    def __init__(
        self,
        session: SessionStore,
        auth: IAuthService,
        messaging: IMessagingService,
        navigation: Optional[NavigationController] = None,
    ):
        self._session = session
        self._auth = auth
        self._messaging = messaging
        self._navigation = navigation or NavigationController()
        self._redirector = BootstrapRedirector(self._navigation)
        self._unread = UnreadCountAggregator(messaging)
        self._remove_listener: Optional[Callable[[], None]] = None

    @property
    def navigation(self) -> NavigationController:
        return self._navigation

    @property
    def session(self) -> SessionStore:
        return self._session

    @property
    def unread(self) -> UnreadCountAggregator:
        return self._unread

    @property
    def is_loading(self) -> bool:
        """True until the first session resolution; show a spinner meanwhile."""
        return self._session.snapshot.is_loading

    def start(self) -> None:
        """Start the session store. Must be called on the event loop."""
        if self._remove_listener is not None:
            return
        self._remove_listener = self._session.add_listener(self._on_session)
        self._session.start()
        logger.info("Marketplace shell started")

    def stop(self) -> None:
        """Tear down every subscription the shell owns."""
        if self._remove_listener is not None:
            self._remove_listener()
            self._remove_listener = None
        self._session.stop()
        self._unread.close()
        self._redirector.reset()
        logger.info("Marketplace shell stopped")

    def nav_items(self) -> tuple[NavItem, ...]:
        """Bottom-navigation items over the rendered screen, empty if none."""
        zone = self._navigation.zone()
        if zone is None:
            return ()
        return NAV_ITEMS[zone]

    def unread_badge(self) -> Optional[str]:
        return badge_label(self._unread.count)

    async def logout(self) -> None:
        await self._auth.logout()
        self._navigation.reset(Screen.ONBOARDING)

    async def check_email_verified(self) -> bool:
        """
        Re-check the email verification status.

        A newly verified identity changes the redirect key, so the
        bootstrap redirect moves the user on to their home screen.
        """
        snapshot = await self._session.refresh()
        return snapshot.identity is not None and snapshot.identity.email_verified

    async def start_chat(self, other_user_id: str, other_user_name: str = "") -> bool:
        """
        Open (creating if needed) the conversation with another user.

        Returns:
            True if the chat screen was entered
        """
        snapshot = self._session.snapshot
        if snapshot.identity is None:
            logger.warning("Cannot start a chat while signed out")
            return False

        own_name = ""
        other_fallback = "User"
        if snapshot.profile is not None:
            own_type = snapshot.profile.account_type
            own_name = snapshot.profile.display_name or FALLBACK_NAMES[own_type]
            other_type = (
                AccountType.CLIENT if own_type == AccountType.FREELANCER else AccountType.FREELANCER
            )
            other_fallback = FALLBACK_NAMES[other_type]

        other_name = other_user_name or other_fallback
        try:
            conversation = await self._messaging.get_or_create_conversation(
                snapshot.identity.id, other_user_id, own_name, other_name
            )
        except Exception as e:
            logger.error(f"Error starting conversation with {other_user_id}: {e}")
            return False

        return flows.open_chat(self._navigation, conversation.id, other_user_id, other_name)

    def _on_session(self, snapshot: SessionSnapshot) -> None:
        if snapshot.is_loading:
            return
        self._unread.bind(snapshot.identity.id if snapshot.identity else None)
        self._redirector.on_session(snapshot)


def create_shell() -> MarketplaceShell:
    """Build a shell on the configured Supabase project."""
    from shared.log_config import configure_logging
    from .dependencies import get_container

    configure_logging()
    container = get_container()
    return MarketplaceShell(container.session, container.auth, container.messaging)
