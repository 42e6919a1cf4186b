"""Session: router, interpreter and views wired together for one app run."""

from __future__ import annotations

from typing import Any

from dslkit.model.screen import Screen

from ._channel import CommandChannel
from ._context import DataContext
from ._interpreter import Interpreter
from ._registry import ComponentRegistry, RenderNode
from ._router import Router
from ._settings import RuntimeSettings
from ._view import ScreenView


class Session:
    """User-facing object for driving a screen document.

    Every trigger executes its action and then drains the command channel,
    so router changes are visible as soon as the awaited call returns.
    Hosts that run their own consumer (``channel.serve()``) should call
    ``interpreter.execute`` directly instead.
    """

    def __init__(
        self,
        router: Router,
        interpreter: Interpreter,
        registry: ComponentRegistry | None = None,
    ) -> None:
        self.router = router
        self.interpreter = interpreter
        self.registry = registry if registry is not None else ComponentRegistry.with_defaults()
        self._views: dict[str, ScreenView] = {}

    @property
    def context(self) -> DataContext:
        return self.interpreter.context

    @property
    def channel(self) -> CommandChannel:
        return self.interpreter.channel

    @property
    def current_screen(self) -> Screen | None:
        return self.router.current_screen

    def view(self, screen: Screen | None = None) -> ScreenView | None:
        """View for *screen* (default: current screen), one per screen id."""
        screen = screen if screen is not None else self.router.current_screen
        if screen is None:
            return None
        view = self._views.get(screen.id)
        if view is None:
            view = ScreenView(screen, self.interpreter, self.router, self.registry)
            self._views[screen.id] = view
        return view

    async def flush(self) -> int:
        """Apply pending UI commands. Returns how many were applied."""
        return await self.channel.drain()

    async def show(self) -> list[RenderNode]:
        """Appear and render the current screen."""
        # onAppearLogic may navigate away; the target appears in turn. Each
        # view's latch lets it run once, which bounds the loop.
        while True:
            view = self.view()
            if view is None:
                return []
            ran = await view.appear()
            await self.flush()
            if not ran:
                return view.render()

    async def trigger(self, action: Any, interpreter: Interpreter | None = None) -> None:
        """Execute *action* in *interpreter*'s scope, then apply UI commands."""
        scope = interpreter if interpreter is not None else self.interpreter
        await scope.execute(action, self.router)
        await self.flush()

    async def tap(self, node: RenderNode) -> None:
        """Run a rendered button's ``onTap`` in the scope it was rendered in."""
        if node.action is None:
            return
        await self.trigger(node.action, node.interpreter)

    async def tap_trailing(self) -> None:
        """Run the current screen's trailing navigation-bar button action."""
        view = self.view()
        button = view.trailing_button if view is not None else None
        if button is not None and button.action is not None:
            await self.trigger(button.action)
