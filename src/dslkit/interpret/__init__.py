"""dslkit interpreter — runs JSON screen documents.

Entry point::

    from dslkit.interpret import start_session

    session = start_session(load_screens(path), settings=RuntimeSettings(initial_screen="home"))
    nodes = await session.show()
    nodes[0].set_text("Ana")        # two-way bound input
    await session.tap(nodes[1])     # button: runs onTap, applies navigation
    print(session.current_screen.id)
"""

from __future__ import annotations

import copy
from collections.abc import Iterable
from typing import Any

from dslkit.model.screen import Screen

from ._channel import CommandChannel, LoggingPresenter, Presenter
from ._context import DataContext
from ._evaluator import ExpressionEvaluator
from ._executor import ActionExecutor
from ._interpreter import Interpreter
from ._registry import ComponentRegistry, RenderNode
from ._router import Router
from ._session import Session
from ._settings import RuntimeSettings, SettingsError
from ._values import MISSING, ChannelError, DslError
from ._view import ScreenView


def start_session(
    screens: Iterable[Any],
    *,
    settings: RuntimeSettings | None = None,
    presenter: Presenter | None = None,
    registry: ComponentRegistry | None = None,
) -> Session:
    """Create a session over a screen document.

    Parameters
    ----------
    screens
        ``Screen`` models or raw screen mappings, in document order.
    settings
        Initial screen, alert title and initial context data.
    presenter
        Receives alerts. Defaults to ``LoggingPresenter``.
    registry
        Component renderers. Defaults to ``ComponentRegistry.with_defaults()``.

    Returns
    -------
    Session
        Navigation stack reset to the initial screen (default: the first
        screen of the document).
    """
    settings = settings if settings is not None else RuntimeSettings()
    resolved = [_resolve_screen(s) for s in screens]

    router = Router()
    router.preload(resolved)

    initial = settings.initial_screen
    if initial is None and resolved:
        initial = resolved[0].id
    if initial is not None:
        router.reset(initial)

    interpreter = Interpreter(
        context=DataContext(copy.deepcopy(settings.initial_data)),
        channel=CommandChannel(presenter),
        settings=settings,
    )
    return Session(router, interpreter, registry)


def _resolve_screen(screen: Any) -> Screen:
    """Resolve a document entry to a ``Screen``."""
    if isinstance(screen, Screen):
        return screen
    if isinstance(screen, dict):
        return Screen.model_validate(screen)
    raise TypeError(
        f"start_session() expects Screen models or screen mappings, "
        f"got {type(screen).__name__}"
    )


__all__ = [
    "ActionExecutor",
    "ChannelError",
    "CommandChannel",
    "ComponentRegistry",
    "DataContext",
    "DslError",
    "ExpressionEvaluator",
    "Interpreter",
    "LoggingPresenter",
    "MISSING",
    "Presenter",
    "RenderNode",
    "Router",
    "RuntimeSettings",
    "ScreenView",
    "Session",
    "SettingsError",
    "start_session",
]
