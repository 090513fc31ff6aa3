"""
Screen registry.

Every reachable screen, its zone (which bottom-navigation bar is shown
over it, if any), the bottom-navigation items of each zone, and the
screens that need a selected entity before they can render.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel


class Screen(str, Enum):
    # Auth
    SPLASH = "Splash"
    ONBOARDING = "Onboarding"
    ACCOUNT_TYPE = "AccountType"
    LOGIN = "Login"
    EMAIL_VERIFICATION = "EmailVerification"
    REGISTER = "Register"
    CLIENT_REGISTER = "ClientRegister"

    # Freelancer
    DASHBOARD = "Dashboard"
    LISTING_MANAGEMENT = "ListingManagement"
    JOB_MANAGEMENT = "JobManagement"
    MESSAGES = "Messages"
    CATEGORIES = "Categories"
    FREELANCER_PROFILE = "FreelancerProfile"
    EDIT_PROFILE = "EditProfile"
    NOTIFICATION_SETTINGS = "NotificationSettings"
    SETTINGS = "Settings"
    CREATE_LISTING = "CreateListing"
    JOB_BOARD = "JobBoard"
    JOB_DETAILS = "JobDetails"
    SUBMIT_PROPOSAL = "SubmitProposal"

    # Client
    CLIENT_HOME = "ClientHome"
    CLIENT_SEARCH = "ClientSearch"
    CREATE_JOB = "CreateJob"
    SERVICE_DETAIL = "ServiceDetail"
    JOB_REQUEST = "JobRequest"
    CLIENT_ORDERS = "ClientOrders"
    CLIENT_MESSAGES = "ClientMessages"
    CLIENT_FAVORITES = "ClientFavorites"
    CLIENT_PROFILE = "ClientProfile"
    CLIENT_FREELANCER_PROFILE = "ClientFreelancerProfile"
    CLIENT_JOB_DETAILS = "ClientJobDetails"
    CLIENT_EDIT_PROFILE = "ClientEditProfile"

    # Shared
    CHAT = "Chat"


class Zone(str, Enum):
    FREELANCER = "freelancer"
    CLIENT = "client"


INITIAL_SCREEN = Screen.ONBOARDING
FREELANCER_HOME = Screen.DASHBOARD
CLIENT_HOME = Screen.CLIENT_HOME

FREELANCER_ZONE: frozenset[Screen] = frozenset({
    Screen.DASHBOARD,
    Screen.LISTING_MANAGEMENT,
    Screen.JOB_MANAGEMENT,
    Screen.MESSAGES,
    Screen.CATEGORIES,
    Screen.FREELANCER_PROFILE,
})

CLIENT_ZONE: frozenset[Screen] = frozenset({
    Screen.CLIENT_HOME,
    Screen.CLIENT_ORDERS,
    Screen.CLIENT_MESSAGES,
    Screen.CLIENT_FAVORITES,
    Screen.CLIENT_PROFILE,
    Screen.CLIENT_SEARCH,
})


def zone_of(screen: Screen) -> Optional[Zone]:
    """Which bottom-navigation bar is overlaid on `screen`, if any."""
    if screen in FREELANCER_ZONE:
        return Zone.FREELANCER
    if screen in CLIENT_ZONE:
        return Zone.CLIENT
    return None


class NavItem(BaseModel):
    screen: Screen
    label: str
    shows_unread: bool = False

    model_config = {"frozen": True}


NAV_ITEMS: dict[Zone, tuple[NavItem, ...]] = {
    Zone.FREELANCER: (
        NavItem(screen=Screen.DASHBOARD, label="Dashboard"),
        NavItem(screen=Screen.JOB_BOARD, label="Jobs"),
        NavItem(screen=Screen.MESSAGES, label="Messages", shows_unread=True),
        NavItem(screen=Screen.LISTING_MANAGEMENT, label="My Listings"),
        NavItem(screen=Screen.FREELANCER_PROFILE, label="Profile"),
    ),
    Zone.CLIENT: (
        NavItem(screen=Screen.CLIENT_HOME, label="Home"),
        NavItem(screen=Screen.CLIENT_SEARCH, label="Explore"),
        NavItem(screen=Screen.CLIENT_MESSAGES, label="Messages", shows_unread=True),
        NavItem(screen=Screen.CLIENT_PROFILE, label="Profile"),
    ),
}


def badge_label(unread: int) -> Optional[str]:
    """Badge text for an unread count; None hides the badge."""
    if unread <= 0:
        return None
    if unread > 99:
        return "99+"
    return str(unread)


# Screens that render only with a selection in the named state slot
REQUIRED_SELECTION: dict[Screen, str] = {
    Screen.SERVICE_DETAIL: "editing_listing",
    Screen.CLIENT_FREELANCER_PROFILE: "selected_freelancer",
    Screen.JOB_REQUEST: "selected_freelancer",
}

# Rendered instead of a screen whose required selection is missing
MISSING_SELECTION_FALLBACK = Screen.CLIENT_HOME
