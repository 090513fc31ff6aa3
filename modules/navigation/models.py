"""
Navigation data models.

NavigationState is the whole transient navigation state. Transitions are
typed actions (a tagged union on `type`) reduced by `reducer.reduce`.
Each payload kind owns one named slot, so only one pending value of each
kind exists at a time.
"""

from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field, TypeAdapter

from modules.listings.models import Listing, SearchFilters

from .screens import Screen, INITIAL_SCREEN, FREELANCER_HOME


class FreelancerRef(BaseModel):
    """The freelancer a client is looking at or hiring."""

    id: str
    display_name: str = ""

    model_config = {"frozen": True}


class NavigationState(BaseModel):
    """In-memory navigation state; reset on process restart."""

    current_screen: Screen = INITIAL_SCREEN
    pending_email: str = ""
    editing_listing: Optional[Listing] = None
    selected_freelancer: Optional[FreelancerRef] = None
    selected_job_id: Optional[str] = None
    selected_conversation_id: Optional[str] = None
    selected_recipient_name: Optional[str] = None
    selected_recipient_id: Optional[str] = None
    search_params: Optional[SearchFilters] = None
    previous_screen: Screen = FREELANCER_HOME

    model_config = {"frozen": True}


# -----------------------------------------------------------------------------
# Payloads
# -----------------------------------------------------------------------------


class ListingPayload(BaseModel):
    kind: Literal["listing"] = "listing"
    listing: Listing


class JobPayload(BaseModel):
    kind: Literal["job"] = "job"
    job_id: str


class FreelancerPayload(BaseModel):
    kind: Literal["freelancer"] = "freelancer"
    freelancer: FreelancerRef


class ConversationPayload(BaseModel):
    kind: Literal["conversation"] = "conversation"
    conversation_id: str
    recipient_id: str
    recipient_name: str = ""


class SearchPayload(BaseModel):
    kind: Literal["search"] = "search"
    filters: SearchFilters = Field(default_factory=SearchFilters)


class EmailPayload(BaseModel):
    kind: Literal["email"] = "email"
    email: str


Payload = Annotated[
    Union[
        ListingPayload,
        JobPayload,
        FreelancerPayload,
        ConversationPayload,
        SearchPayload,
        EmailPayload,
    ],
    Field(discriminator="kind"),
]

# Slots a navigate action can clear before applying its payload
Slot = Literal[
    "editing_listing",
    "selected_freelancer",
    "selected_job_id",
    "conversation",
    "search_params",
    "pending_email",
]


# -----------------------------------------------------------------------------
# Actions
# -----------------------------------------------------------------------------


class NavigateAction(BaseModel):
    """Go to `screen`, clearing `clear` slots, then storing `payload`."""

    type: Literal["navigate"] = "navigate"
    screen: Screen
    payload: Optional[Payload] = None
    clear: tuple[Slot, ...] = ()

    model_config = {"frozen": True}


class BackAction(BaseModel):
    """Return to the statically known prior screen of the current one."""

    type: Literal["back"] = "back"

    model_config = {"frozen": True}


class ResetAction(BaseModel):
    """Drop every selection and start over at `screen` (sign-out)."""

    type: Literal["reset"] = "reset"
    screen: Screen = INITIAL_SCREEN

    model_config = {"frozen": True}


Action = Annotated[
    Union[NavigateAction, BackAction, ResetAction],
    Field(discriminator="type"),
]

_action_adapter: TypeAdapter[Action] = TypeAdapter(Action)


def parse_action(data: dict) -> Action:
    """Validate a plain dict (e.g. from a UI event) into a typed action."""
    return _action_adapter.validate_python(data)
