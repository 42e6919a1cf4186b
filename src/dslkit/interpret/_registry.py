"""Component registry and the default headless renderers.

A renderer receives a component's raw properties, the interpreter that owns
its data scope and the router, and returns a ``RenderNode``: a paint-free
description of what the host should show. Unregistered types render as
nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ._interpreter import Interpreter

if TYPE_CHECKING:
    from ._router import Router

logger = logging.getLogger(__name__)


@dataclass
class RenderNode:
    """One rendered component.

    *action* is the raw action node to run on tap (buttons). *bind* is the
    context path of a two-way bound input. *interpreter* is the scope the
    node was rendered in; row nodes carry their row's forked interpreter.
    """

    type: str
    props: dict[str, Any] = field(default_factory=dict)
    children: list[RenderNode] = field(default_factory=list)
    action: Any = None
    bind: str | None = None
    interpreter: Interpreter | None = field(default=None, repr=False, compare=False)

    @property
    def text(self) -> str:
        """Current text of a bound input, or the ``value`` prop otherwise."""
        if self.bind is not None and self.interpreter is not None:
            value = self.interpreter.context.resolve(self.bind)
            return value if isinstance(value, str) else ""
        value = self.props.get("value", "")
        return value if isinstance(value, str) else ""

    def set_text(self, text: str) -> None:
        """Write *text* back through the input's binding."""
        if self.bind is None or self.interpreter is None:
            raise ValueError(f"{self.type!r} node has no binding")
        self.interpreter.context.set(self.bind, text)

    def find(self, type_: str) -> list[RenderNode]:
        """All nodes of *type_* in this subtree, depth-first."""
        found = [self] if self.type == type_ else []
        for child in self.children:
            found.extend(child.find(type_))
        return found


Renderer = Callable[[dict[str, Any], Interpreter, "Router | None"], "RenderNode | None"]


class ComponentRegistry:
    """Component ``type`` -> renderer lookup."""

    def __init__(self) -> None:
        self._renderers: dict[str, Renderer] = {}

    @classmethod
    def with_defaults(cls) -> ComponentRegistry:
        registry = cls()
        registry.register("text", render_text)
        registry.register("input", render_input)
        registry.register("button", render_button)
        registry.register("list", list_renderer(registry))
        return registry

    def register(self, type_: str, renderer: Renderer) -> None:
        self._renderers[type_] = renderer

    def types(self) -> list[str]:
        return sorted(self._renderers)

    def resolve(
        self,
        type_: str,
        props: dict[str, Any],
        interpreter: Interpreter,
        router: Router | None = None,
    ) -> RenderNode | None:
        renderer = self._renderers.get(type_)
        if renderer is None:
            logger.debug("no renderer registered for component type %r", type_)
            return None
        return renderer(props, interpreter, router)


# ---------------------------------------------------------------------------
# Default renderers
# ---------------------------------------------------------------------------

def render_text(props: dict[str, Any], interpreter: Interpreter, _router: Router | None) -> RenderNode:
    value = interpreter.evaluate(props.get("value", ""))
    return RenderNode(
        type="text",
        props={"value": value if isinstance(value, str) else "", "style": props.get("style")},
        interpreter=interpreter,
    )


def render_input(props: dict[str, Any], interpreter: Interpreter, _router: Router | None) -> RenderNode:
    placeholder = props.get("placeholder")
    bind = props.get("bind")
    return RenderNode(
        type="input",
        props={
            "placeholder": placeholder if isinstance(placeholder, str) else "",
            "style": props.get("style"),
        },
        bind=bind if isinstance(bind, str) else "",
        interpreter=interpreter,
    )


def render_button(props: dict[str, Any], interpreter: Interpreter, _router: Router | None) -> RenderNode:
    label = props.get("label")
    return RenderNode(
        type="button",
        props={"label": label if isinstance(label, str) else "Button", "style": props.get("style")},
        action=props.get("onTap"),
        interpreter=interpreter,
    )


def list_renderer(registry: ComponentRegistry) -> Renderer:
    """Build the ``list`` renderer; rows resolve their components in *registry*."""

    def render_list(props: dict[str, Any], interpreter: Interpreter, router: Router | None) -> RenderNode:
        items = interpreter.evaluate(props.get("items"))
        rows = [item for item in items if isinstance(item, dict)] if isinstance(items, list) else []
        row_components = props.get("rowComponents")
        if not isinstance(row_components, list):
            row_components = []

        children = []
        for row in rows:
            # Each row gets its own scope: parent data merged with the row.
            row_interpreter = interpreter.fork(row)
            rendered = []
            for component in row_components:
                if not isinstance(component, dict) or not isinstance(component.get("type"), str):
                    continue
                node = registry.resolve(component["type"], component, row_interpreter, router)
                if node is not None:
                    rendered.append(node)
            children.append(
                RenderNode(type="row", props=dict(row), children=rendered, interpreter=row_interpreter)
            )

        return RenderNode(
            type="list",
            props={"style": props.get("style")},
            children=children,
            interpreter=interpreter,
        )

    return render_list
