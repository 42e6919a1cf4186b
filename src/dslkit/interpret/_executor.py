"""Action executor: runs action nodes against the data context.

Each raw node is classified once by ``parse_action`` and then dispatched on
its ``kind``. Data steps (``set``, ``append``) mutate the context directly;
named commands are turned into ``UICommand`` messages and handed to the
``CommandChannel``. Malformed steps are logged and skipped; nothing a document
contains can make ``execute`` raise.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from dslkit.model.actions import (
    ActionNode,
    AppendAction,
    CommandAction,
    SequenceAction,
    SetAction,
    UnrecognizedAction,
    parse_action,
)
from dslkit.model.commands import (
    CommandName,
    DismissModalCommand,
    NavigateBackCommand,
    NavigateCommand,
    PresentModalCommand,
    ResetCommand,
    ShowAlertCommand,
)

from ._channel import CommandChannel
from ._context import DataContext
from ._evaluator import ExpressionEvaluator
from ._values import MISSING

if TYPE_CHECKING:
    from ._router import Router

logger = logging.getLogger(__name__)


class ActionExecutor:
    """Interpret action nodes.

    Parameters
    ----------
    context : DataContext
        Target of ``set`` and ``append`` steps.
    evaluator : ExpressionEvaluator
        Evaluates the expressions embedded in steps.
    channel : CommandChannel
        Receives navigation and alert commands.
    alert_title : str
        Title attached to ``showAlert`` commands.
    """

    def __init__(
        self,
        context: DataContext,
        evaluator: ExpressionEvaluator,
        channel: CommandChannel,
        alert_title: str = "Alerta",
    ) -> None:
        self.context = context
        self.evaluator = evaluator
        self.channel = channel
        self.alert_title = alert_title

    async def execute(self, node: object, router: Router | None = None) -> None:
        """Execute *node* (raw mapping or parsed ``ActionNode``) to completion."""
        await self._exec(parse_action(node), router)

    async def _exec(self, action: ActionNode, router: Router | None) -> None:
        handler = self._ACTION_DISPATCH[action.kind]
        await handler(self, action, router)

    # -----------------------------------------------------------------------
    # Data steps
    # -----------------------------------------------------------------------

    async def _exec_append(self, action: AppendAction, _router: Router | None) -> None:
        entry = self.evaluator.evaluate(action.value)
        if not isinstance(entry, dict):
            logger.warning(
                "append to %r skipped: value is not a mapping (%r)", action.var, entry,
            )
            return
        current = self.context.lookup(action.var)
        items = list(current) if isinstance(current, list) else []
        items.append(entry)
        self.context.set(action.var, items)

    async def _exec_sequence(self, action: SequenceAction, router: Router | None) -> None:
        for step in action.steps:
            await self._exec(step, router)

    async def _exec_set(self, action: SetAction, _router: Router | None) -> None:
        value = self.evaluator.eval_node(action.value)
        self.context.set(action.var, None if value is MISSING else value)

    async def _exec_unrecognized(self, action: UnrecognizedAction, _router: Router | None) -> None:
        if isinstance(action.node, dict) and ("set" in action.node or "append" in action.node):
            logger.warning("skipping action node: %s", action.reason)
            return
        logger.debug("skipping action node: %s", action.reason)

    # -----------------------------------------------------------------------
    # Named commands
    # -----------------------------------------------------------------------

    async def _exec_command(self, action: CommandAction, router: Router | None) -> None:
        handler = self._COMMAND_DISPATCH.get(action.name)
        if handler is None:
            logger.debug("unknown command %r ignored", action.name)
            return
        await handler(self, action, router)

    def _screen_param(self, action: CommandAction) -> str | None:
        screen_id = action.params.get("screen")
        if not isinstance(screen_id, str):
            logger.warning("%s skipped: 'params.screen' must be a string", action.name)
            return None
        return screen_id

    async def _send_routed(self, command, action: CommandAction, router: Router | None) -> None:
        if router is None:
            logger.debug("%s skipped: no router", action.name)
            return
        await self.channel.send(command, router)

    async def _cmd_navigate(self, action: CommandAction, router: Router | None) -> None:
        screen_id = self._screen_param(action)
        if screen_id is not None:
            await self._send_routed(NavigateCommand(screen_id=screen_id), action, router)

    async def _cmd_navigate_back(self, action: CommandAction, router: Router | None) -> None:
        await self._send_routed(NavigateBackCommand(), action, router)

    async def _cmd_reset(self, action: CommandAction, router: Router | None) -> None:
        screen_id = self._screen_param(action)
        if screen_id is not None:
            await self._send_routed(ResetCommand(screen_id=screen_id), action, router)

    async def _cmd_present_modal(self, action: CommandAction, router: Router | None) -> None:
        screen_id = self._screen_param(action)
        if screen_id is not None:
            await self._send_routed(PresentModalCommand(screen_id=screen_id), action, router)

    async def _cmd_dismiss_modal(self, action: CommandAction, router: Router | None) -> None:
        await self._send_routed(DismissModalCommand(), action, router)

    async def _cmd_show_alert(self, action: CommandAction, router: Router | None) -> None:
        message = self.evaluator.evaluate(action.params.get("message", ""))
        if not isinstance(message, str):
            message = ""
        await self.channel.send(
            ShowAlertCommand(title=self.alert_title, message=message), router,
        )

    # Dispatch tables
    _ACTION_DISPATCH: dict[str, Callable[[ActionExecutor, ActionNode, Router | None], Awaitable[None]]] = {
        "append": _exec_append,
        "sequence": _exec_sequence,
        "set": _exec_set,
        "command": _exec_command,
        "unrecognized": _exec_unrecognized,
    }

    _COMMAND_DISPATCH: dict[str, Callable[[ActionExecutor, CommandAction, Router | None], Awaitable[None]]] = {
        CommandName.NAVIGATE.value: _cmd_navigate,
        CommandName.NAVIGATE_BACK.value: _cmd_navigate_back,
        CommandName.RESET.value: _cmd_reset,
        CommandName.PRESENT_MODAL.value: _cmd_present_modal,
        CommandName.DISMISS_MODAL.value: _cmd_dismiss_modal,
        CommandName.SHOW_ALERT.value: _cmd_show_alert,
    }
