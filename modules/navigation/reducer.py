"""
Navigation reducer.

`reduce(state, action)` is the only place a NavigationState is derived
from another. It is pure: no I/O, no listeners, no clock.
"""

import logging
from typing import Any, Optional

from .models import (
    Action,
    NavigateAction,
    BackAction,
    ResetAction,
    NavigationState,
    ListingPayload,
    JobPayload,
    FreelancerPayload,
    ConversationPayload,
    SearchPayload,
    EmailPayload,
)
from .screens import Screen, REQUIRED_SELECTION, MISSING_SELECTION_FALLBACK

logger = logging.getLogger(__name__)


# Statically known prior screen of each screen that has a back edge
BACK_TARGETS: dict[Screen, Screen] = {
    Screen.ACCOUNT_TYPE: Screen.ONBOARDING,
    Screen.LOGIN: Screen.ACCOUNT_TYPE,
    Screen.EMAIL_VERIFICATION: Screen.ONBOARDING,
    Screen.REGISTER: Screen.ACCOUNT_TYPE,
    Screen.CLIENT_REGISTER: Screen.ACCOUNT_TYPE,
    Screen.EDIT_PROFILE: Screen.FREELANCER_PROFILE,
    Screen.NOTIFICATION_SETTINGS: Screen.FREELANCER_PROFILE,
    Screen.SETTINGS: Screen.FREELANCER_PROFILE,
    Screen.CREATE_LISTING: Screen.LISTING_MANAGEMENT,
    Screen.JOB_BOARD: Screen.DASHBOARD,
    Screen.JOB_DETAILS: Screen.JOB_BOARD,
    Screen.SUBMIT_PROPOSAL: Screen.JOB_DETAILS,
    Screen.CREATE_JOB: Screen.CLIENT_HOME,
    Screen.CLIENT_JOB_DETAILS: Screen.CLIENT_HOME,
    Screen.CLIENT_SEARCH: Screen.CLIENT_HOME,
    Screen.SERVICE_DETAIL: Screen.CLIENT_SEARCH,
    Screen.CLIENT_ORDERS: Screen.CLIENT_HOME,
    Screen.CLIENT_EDIT_PROFILE: Screen.CLIENT_PROFILE,
}

# Slot name -> fields it resets
_SLOT_FIELDS: dict[str, tuple[str, ...]] = {
    "editing_listing": ("editing_listing",),
    "selected_freelancer": ("selected_freelancer",),
    "selected_job_id": ("selected_job_id",),
    "conversation": (
        "selected_conversation_id",
        "selected_recipient_name",
        "selected_recipient_id",
    ),
    "search_params": ("search_params",),
    "pending_email": ("pending_email",),
}


def back_target(state: NavigationState) -> Optional[Screen]:
    """Screen `back` leads to from the current screen, or None."""
    screen = state.current_screen

    if screen == Screen.CHAT:
        return state.previous_screen

    if screen == Screen.CLIENT_FREELANCER_PROFILE:
        if state.editing_listing is not None:
            return Screen.SERVICE_DETAIL
        return Screen.CLIENT_SEARCH

    if screen == Screen.JOB_REQUEST:
        if state.editing_listing is not None:
            return Screen.SERVICE_DETAIL
        return Screen.CLIENT_FREELANCER_PROFILE

    return BACK_TARGETS.get(screen)


def rendered_screen(state: NavigationState) -> Screen:
    """
    Screen that actually renders for `state`.

    A screen whose required selection is missing renders the fallback
    home screen instead; `current_screen` itself is left untouched.
    """
    slot = REQUIRED_SELECTION.get(state.current_screen)
    if slot is not None and getattr(state, slot) is None:
        logger.warning(
            f"{state.current_screen.value} rendered without {slot}, "
            f"falling back to {MISSING_SELECTION_FALLBACK.value}"
        )
        return MISSING_SELECTION_FALLBACK
    return state.current_screen


def reduce(state: NavigationState, action: Action) -> NavigationState:
    """
    Apply one action to the navigation state.

    Returns the same object when the action is a no-op, so callers can
    detect "no transition" with an identity check.
    """
    if isinstance(action, NavigateAction):
        new_state = _navigate(state, action)
    elif isinstance(action, BackAction):
        new_state = _back(state)
    elif isinstance(action, ResetAction):
        new_state = NavigationState(current_screen=action.screen)
    else:
        logger.warning(f"Ignoring unknown navigation action: {action!r}")
        return state

    if new_state == state:
        return state
    return new_state


def _navigate(state: NavigationState, action: NavigateAction) -> NavigationState:
    updates: dict[str, Any] = {}

    for slot in action.clear:
        for field in _SLOT_FIELDS[slot]:
            updates[field] = "" if field == "pending_email" else None

    if action.payload is not None:
        updates.update(_payload_fields(action.payload))

    if action.screen == Screen.CHAT and state.current_screen != Screen.CHAT:
        updates["previous_screen"] = state.current_screen

    updates["current_screen"] = action.screen
    return state.model_copy(update=updates)


def _back(state: NavigationState) -> NavigationState:
    target = back_target(state)
    if target is None:
        logger.debug(f"No back edge from {state.current_screen.value}")
        return state

    updates: dict[str, Any] = {"current_screen": target}
    if state.current_screen == Screen.CREATE_LISTING:
        updates["editing_listing"] = None
    return state.model_copy(update=updates)


def _payload_fields(payload) -> dict[str, Any]:
    if isinstance(payload, ListingPayload):
        return {"editing_listing": payload.listing}
    if isinstance(payload, JobPayload):
        return {"selected_job_id": payload.job_id}
    if isinstance(payload, FreelancerPayload):
        return {"selected_freelancer": payload.freelancer}
    if isinstance(payload, ConversationPayload):
        return {
            "selected_conversation_id": payload.conversation_id,
            "selected_recipient_id": payload.recipient_id,
            "selected_recipient_name": payload.recipient_name,
        }
    if isinstance(payload, SearchPayload):
        return {"search_params": payload.filters}
    if isinstance(payload, EmailPayload):
        return {"pending_email": payload.email}
    raise TypeError(f"Unsupported navigation payload: {type(payload).__name__}")
