"""
Named navigation edges.

Each function is one "event on the current screen -> next screen" edge,
expressed against INavigationController. Screens call these instead of
building actions by hand.
"""

from typing import Optional

from shared.models import AccountType
from modules.listings.models import Listing, SearchFilters

from .interfaces import INavigationController
from .models import (
    FreelancerRef,
    ListingPayload,
    JobPayload,
    FreelancerPayload,
    ConversationPayload,
    SearchPayload,
    EmailPayload,
)
from .screens import Screen


# Auth

def start_onboarding(nav: INavigationController) -> bool:
    return nav.go(Screen.ACCOUNT_TYPE)


def choose_account_type(nav: INavigationController, account_type: AccountType) -> bool:
    if account_type == AccountType.FREELANCER:
        return nav.go(Screen.REGISTER)
    return nav.go(Screen.CLIENT_REGISTER)


def go_to_login(nav: INavigationController) -> bool:
    return nav.go(Screen.LOGIN)


def registration_succeeded(nav: INavigationController, email: str) -> bool:
    return nav.go(Screen.EMAIL_VERIFICATION, EmailPayload(email=email))


# Freelancer

def add_listing(nav: INavigationController) -> bool:
    return nav.go(Screen.CREATE_LISTING, clear=("editing_listing",))


def edit_listing(nav: INavigationController, listing: Listing) -> bool:
    return nav.go(Screen.CREATE_LISTING, ListingPayload(listing=listing))


def listing_saved(nav: INavigationController) -> bool:
    return nav.go(Screen.LISTING_MANAGEMENT, clear=("editing_listing",))


def open_job(nav: INavigationController, job_id: str) -> bool:
    """Job board -> job details."""
    return nav.go(Screen.JOB_DETAILS, JobPayload(job_id=job_id))


def apply_to_job(nav: INavigationController, job_id: str) -> bool:
    return nav.go(Screen.SUBMIT_PROPOSAL, JobPayload(job_id=job_id))


def profile_saved(nav: INavigationController, account_type: AccountType) -> bool:
    if account_type == AccountType.FREELANCER:
        return nav.go(Screen.FREELANCER_PROFILE)
    return nav.go(Screen.CLIENT_PROFILE)


# Client

def search(nav: INavigationController, filters: Optional[SearchFilters] = None) -> bool:
    return nav.go(Screen.CLIENT_SEARCH, SearchPayload(filters=filters or SearchFilters()))


def open_client_job(nav: INavigationController, job_id: str) -> bool:
    return nav.go(Screen.CLIENT_JOB_DETAILS, JobPayload(job_id=job_id))


def open_service(nav: INavigationController, listing: Listing) -> bool:
    return nav.go(Screen.SERVICE_DETAIL, ListingPayload(listing=listing))


def view_freelancer(nav: INavigationController, freelancer: FreelancerRef) -> bool:
    return nav.go(Screen.CLIENT_FREELANCER_PROFILE, FreelancerPayload(freelancer=freelancer))


def hire(nav: INavigationController, freelancer: FreelancerRef) -> bool:
    """Service detail -> job request; the selected listing stays attached."""
    return nav.go(Screen.JOB_REQUEST, FreelancerPayload(freelancer=freelancer))


def make_direct_offer(nav: INavigationController, freelancer: FreelancerRef) -> bool:
    """Freelancer profile -> job request with no listing attached."""
    return nav.go(
        Screen.JOB_REQUEST,
        FreelancerPayload(freelancer=freelancer),
        clear=("editing_listing",),
    )


def job_request_sent(nav: INavigationController) -> bool:
    return nav.go(
        Screen.CLIENT_ORDERS,
        clear=("editing_listing", "selected_freelancer"),
    )


# Shared

def open_chat(
    nav: INavigationController,
    conversation_id: str,
    recipient_id: str,
    recipient_name: str = "",
) -> bool:
    """Enter the chat screen; `back` returns to the screen this was called from."""
    return nav.go(
        Screen.CHAT,
        ConversationPayload(
            conversation_id=conversation_id,
            recipient_id=recipient_id,
            recipient_name=recipient_name,
        ),
    )
