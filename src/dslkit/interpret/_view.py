"""Screen view: drives one screen's lifecycle and renders its components."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dslkit.model.screen import DisplayMode, Screen, TrailingButton

from ._interpreter import Interpreter
from ._registry import ComponentRegistry, RenderNode

if TYPE_CHECKING:
    from ._router import Router

logger = logging.getLogger(__name__)


class ScreenView:
    """Headless view of a single ``Screen``.

    Holds the "appeared" latch: ``onAppearLogic`` runs the first time the
    view appears and never again, so coming back from a modal or a pushed
    screen does not repeat it.
    """

    def __init__(
        self,
        screen: Screen,
        interpreter: Interpreter,
        router: Router | None,
        registry: ComponentRegistry,
    ) -> None:
        self.screen = screen
        self.interpreter = interpreter
        self.router = router
        self.registry = registry
        self.appeared = False

    @property
    def title(self) -> str:
        bar = self.screen.navigation_bar
        return bar.title if bar is not None else ""

    @property
    def display_mode(self) -> DisplayMode:
        bar = self.screen.navigation_bar
        return bar.display_mode if bar is not None else DisplayMode.INLINE

    @property
    def trailing_button(self) -> TrailingButton | None:
        bar = self.screen.navigation_bar
        return bar.trailing_button if bar is not None else None

    async def appear(self) -> bool:
        """Run ``onAppearLogic`` once. Returns whether it ran now."""
        if self.appeared or self.screen.on_appear_logic is None:
            return False
        self.appeared = True
        await self.interpreter.execute(self.screen.on_appear_logic, self.router)
        return True

    def is_visible(self, component: dict) -> bool:
        """Only an explicit ``False`` from ``visibleIf`` hides a component."""
        if "visibleIf" not in component:
            return True
        return self.interpreter.evaluate(component["visibleIf"]) is not False

    def render(self) -> list[RenderNode]:
        nodes = []
        for index, component in enumerate(self.screen.components):
            type_ = component.get("type")
            if not isinstance(type_, str):
                logger.warning(
                    "screen %r component #%d has no type; skipped", self.screen.id, index,
                )
                continue
            if not self.is_visible(component):
                continue
            node = self.registry.resolve(type_, component, self.interpreter, self.router)
            if node is not None:
                nodes.append(node)
        return nodes
