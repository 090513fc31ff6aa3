"""
Bootstrap redirect policy.

Chooses the landing screen from the session store's snapshot. The rule
itself (`landing_for`) is pure; BootstrapRedirector adds the
"at most once per distinct key" behaviour so unrelated session
notifications do not yank the user back to a home screen.
"""

import logging
from typing import Optional

from shared.models import AccountType

from modules.auth.models import SessionSnapshot

from .interfaces import INavigationController
from .models import NavigateAction, EmailPayload
from .screens import Screen, FREELANCER_HOME, CLIENT_HOME

logger = logging.getLogger(__name__)

RedirectKey = tuple[str, Optional[AccountType], bool]


def landing_for(snapshot: SessionSnapshot) -> Optional[NavigateAction]:
    """
    Landing transition for a session snapshot. First match wins:

    1. still loading -> None (the caller shows a spinner)
    2. unverified email -> email verification, carrying the email
    3. freelancer -> dashboard
    4. client -> client home
    5. signed out -> None (onboarding is the default placement)

    A signed-in identity without a profile also yields None.
    """
    if snapshot.is_loading:
        return None

    identity = snapshot.identity
    if identity is None:
        return None

    profile = snapshot.profile
    if profile is None:
        logger.warning(f"Identity {identity.id} has no profile; staying on current screen")
        return None

    if not identity.email_verified:
        return NavigateAction(
            screen=Screen.EMAIL_VERIFICATION,
            payload=EmailPayload(email=identity.email),
        )

    if profile.account_type == AccountType.FREELANCER:
        return NavigateAction(screen=FREELANCER_HOME)
    return NavigateAction(screen=CLIENT_HOME)


def redirect_key(snapshot: SessionSnapshot) -> Optional[RedirectKey]:
    """Key the redirect is de-duplicated on; None when signed out."""
    identity = snapshot.identity
    if identity is None:
        return None
    account_type = snapshot.profile.account_type if snapshot.profile else None
    return (identity.id, account_type, identity.email_verified)


class BootstrapRedirector:
    """
    Applies `landing_for` to a navigation controller.

    Fires at most once per distinct redirect key in sequence. Loading
    snapshots neither fire nor touch the key, so the settled snapshot
    that follows is always evaluated.
    """

    def __init__(self, navigation: INavigationController):
        self._navigation = navigation
        self._last_key: Optional[RedirectKey] = None
        self._seen_settled = False

    @property
    def last_key(self) -> Optional[RedirectKey]:
        return self._last_key

    def on_session(self, snapshot: SessionSnapshot) -> bool:
        """
        Handle a session snapshot.

        Returns:
            True if a redirect was dispatched
        """
        if snapshot.is_loading:
            return False

        key = redirect_key(snapshot)
        if self._seen_settled and key == self._last_key:
            return False

        self._seen_settled = True
        self._last_key = key

        action = landing_for(snapshot)
        if action is None:
            return False

        logger.info(f"Bootstrap redirect to {action.screen.value}")
        self._navigation.dispatch(action)
        return True

    def reset(self) -> None:
        """Forget the last key (e.g. after the shell restarts)."""
        self._last_key = None
        self._seen_settled = False
