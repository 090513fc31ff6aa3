"""
Navigation module.

Screen registry, typed navigation actions and their reducer, the
navigation controller screens drive, and the bootstrap redirect policy.
"""

from .screens import (
    Screen,
    Zone,
    NavItem,
    NAV_ITEMS,
    FREELANCER_ZONE,
    CLIENT_ZONE,
    REQUIRED_SELECTION,
    zone_of,
    badge_label,
)
from .models import (
    NavigationState,
    FreelancerRef,
    ListingPayload,
    JobPayload,
    FreelancerPayload,
    ConversationPayload,
    SearchPayload,
    EmailPayload,
    NavigateAction,
    BackAction,
    ResetAction,
    parse_action,
)
from .reducer import reduce, back_target, rendered_screen
from .interfaces import INavigationController
from .controller import NavigationController
from .bootstrap import landing_for, redirect_key, BootstrapRedirector
from . import flows

__all__ = [
    "Screen",
    "Zone",
    "NavItem",
    "NAV_ITEMS",
    "FREELANCER_ZONE",
    "CLIENT_ZONE",
    "REQUIRED_SELECTION",
    "zone_of",
    "badge_label",
    "NavigationState",
    "FreelancerRef",
    "ListingPayload",
    "JobPayload",
    "FreelancerPayload",
    "ConversationPayload",
    "SearchPayload",
    "EmailPayload",
    "NavigateAction",
    "BackAction",
    "ResetAction",
    "parse_action",
    "reduce",
    "back_target",
    "rendered_screen",
    "INavigationController",
    "NavigationController",
    "landing_for",
    "redirect_key",
    "BootstrapRedirector",
    "flows",
]
