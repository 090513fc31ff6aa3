"""
Navigation controller.

Owns the NavigationState and runs every transition through the reducer.
Listeners are notified after each transition, never for a no-op.
"""

import logging
from typing import Callable, Optional

from .interfaces import INavigationController, NavigationListener
from .models import Action, NavigateAction, BackAction, ResetAction, NavigationState, Payload, Slot
from .reducer import reduce, rendered_screen
from .screens import Screen, Zone, INITIAL_SCREEN, zone_of

logger = logging.getLogger(__name__)


class NavigationController(INavigationController):
    """In-memory navigation controller."""

    def __init__(self, state: Optional[NavigationState] = None):
        self._state = state or NavigationState()
        self._listeners: list[NavigationListener] = []

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def current_screen(self) -> Screen:
        return self._state.current_screen

    def dispatch(self, action: Action) -> bool:
        previous = self._state
        new_state = reduce(previous, action)
        if new_state is previous:
            logger.debug(f"No transition for {action.type} on {previous.current_screen.value}")
            return False

        self._state = new_state
        logger.debug(
            f"Navigation {action.type}: "
            f"{previous.current_screen.value} -> {new_state.current_screen.value}"
        )
        self._notify()
        return True

    def go(
        self,
        screen: Screen,
        payload: Optional[Payload] = None,
        clear: tuple[Slot, ...] = (),
    ) -> bool:
        return self.dispatch(NavigateAction(screen=screen, payload=payload, clear=clear))

    def back(self) -> bool:
        return self.dispatch(BackAction())

    def reset(self, screen: Screen = INITIAL_SCREEN) -> bool:
        return self.dispatch(ResetAction(screen=screen))

    def rendered_screen(self) -> Screen:
        return rendered_screen(self._state)

    def zone(self) -> Optional[Zone]:
        return zone_of(self.rendered_screen())

    def add_listener(self, listener: NavigationListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception as e:
                logger.error(f"Navigation listener failed: {e}", exc_info=True)
