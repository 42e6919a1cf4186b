"""Navigation state machine over a cache of preloaded screens.

Two stacks are kept independently:

- the **navigation stack**: push navigation with pop-to-previous; its first
  element is the root screen and is never popped by ``go_back``
- the **modal stack**: overlays presented on top of navigation

The current screen is derived: the top modal if any, else the top of the
navigation stack. Modal operations never touch navigation history.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from dslkit.model.screen import Screen

logger = logging.getLogger(__name__)

RouterListener = Callable[["Router"], None]


class Router:
    """Navigation and modal stacks over an id -> ``Screen`` cache."""

    def __init__(self) -> None:
        self._cache: dict[str, Screen] = {}
        self._stack: list[Screen] = []
        self._modals: list[Screen] = []
        self._listeners: list[RouterListener] = []

    # -----------------------------------------------------------------------
    # Cache
    # -----------------------------------------------------------------------

    def preload(self, screens: Iterable[Screen]) -> None:
        """Cache *screens* by id. Later entries overwrite same-id ones."""
        for screen in screens:
            self._cache[screen.id] = screen

    def screen(self, screen_id: str) -> Screen | None:
        return self._cache.get(screen_id)

    @property
    def screens(self) -> dict[str, Screen]:
        """Copy of the id -> screen cache."""
        return dict(self._cache)

    # -----------------------------------------------------------------------
    # State views
    # -----------------------------------------------------------------------

    @property
    def navigation_stack(self) -> tuple[Screen, ...]:
        return tuple(self._stack)

    @property
    def modal_stack(self) -> tuple[Screen, ...]:
        return tuple(self._modals)

    @property
    def current_screen(self) -> Screen | None:
        """Top modal if one is presented, else the top of navigation."""
        if self._modals:
            return self._modals[-1]
        if self._stack:
            return self._stack[-1]
        return None

    # -----------------------------------------------------------------------
    # Navigation stack
    # -----------------------------------------------------------------------

    def navigate(self, screen_id: str) -> bool:
        """Push the cached screen *screen_id*. Returns ``False`` if uncached."""
        screen = self._cache.get(screen_id)
        if screen is None:
            return False
        self._stack.append(screen)
        self._notify()
        return True

    def go_back(self) -> bool:
        """Pop to the previous screen. The root screen is never popped."""
        if len(self._stack) <= 1:
            return False
        self._stack.pop()
        self._notify()
        return True

    def reset(self, screen_id: str) -> bool:
        """Clear navigation history and make *screen_id* the sole root.

        Returns whether a screen was pushed. History is cleared even when
        *screen_id* is not cached.
        """
        screen = self._cache.get(screen_id)
        self._stack.clear()
        if screen is not None:
            self._stack.append(screen)
        else:
            logger.debug("reset: screen %r is not cached", screen_id)
        self._notify()
        return screen is not None

    # -----------------------------------------------------------------------
    # Modal stack
    # -----------------------------------------------------------------------

    def present_modal(self, screen_id: str) -> bool:
        """Present the cached screen *screen_id* as a modal."""
        screen = self._cache.get(screen_id)
        if screen is None:
            return False
        self.push(screen)
        return True

    def push(self, screen: Screen) -> None:
        """Present *screen* as a modal, by reference."""
        self._modals.append(screen)
        self._notify()

    def dismiss_modal(self) -> bool:
        """Dismiss the topmost modal. No-op when none is presented."""
        if not self._modals:
            return False
        self._modals.pop()
        self._notify()
        return True

    pop = dismiss_modal

    # -----------------------------------------------------------------------
    # Change notification
    # -----------------------------------------------------------------------

    def subscribe(self, listener: RouterListener) -> Callable[[], None]:
        """Call ``listener(router)`` after every state change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
