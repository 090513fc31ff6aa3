"""
Navigation module interfaces.

Screens receive an INavigationController instead of ad hoc callbacks, so
each "caller decides the next screen" edge can be tested without
rendering anything.
"""

from typing import Callable, Optional, Protocol, runtime_checkable

from .models import Action, NavigationState, Payload, Slot
from .screens import Screen, Zone


NavigationListener = Callable[[NavigationState], None]


@runtime_checkable
class INavigationController(Protocol):
    """Single writer of the navigation state."""

    @property
    def state(self) -> NavigationState:
        ...

    def dispatch(self, action: Action) -> bool:
        """Apply an action. Returns True if the state changed."""
        ...

    def go(
        self,
        screen: Screen,
        payload: Optional[Payload] = None,
        clear: tuple[Slot, ...] = (),
    ) -> bool:
        """Navigate to `screen`, optionally carrying one payload."""
        ...

    def back(self) -> bool:
        """Follow the back edge of the current screen, if it has one."""
        ...

    def reset(self, screen: Screen = ...) -> bool:
        """Clear every selection and land on `screen`."""
        ...

    def rendered_screen(self) -> Screen:
        """Screen to render, after selection guards."""
        ...

    def zone(self) -> Optional[Zone]:
        """Bottom-navigation zone of the rendered screen."""
        ...

    def add_listener(self, listener: NavigationListener) -> Callable[[], None]:
        """Register for state changes. Returns the removal handle."""
        ...
