"""Interpreter: the two entry points renderers use, over one data context."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ._channel import CommandChannel
from ._context import DataContext
from ._evaluator import ExpressionEvaluator
from ._executor import ActionExecutor
from ._settings import RuntimeSettings

if TYPE_CHECKING:
    from ._router import Router


class Interpreter:
    """Evaluate expressions and execute actions against one ``DataContext``.

    Forks share the command channel and settings but own their context, so
    list rows can write row-local state without touching the screen's.
    """

    def __init__(
        self,
        context: DataContext | None = None,
        channel: CommandChannel | None = None,
        settings: RuntimeSettings | None = None,
    ) -> None:
        self.context = context if context is not None else DataContext()
        self.channel = channel if channel is not None else CommandChannel()
        self.settings = settings if settings is not None else RuntimeSettings()
        self.evaluator = ExpressionEvaluator(self.context)
        self.executor = ActionExecutor(
            self.context,
            self.evaluator,
            self.channel,
            alert_title=self.settings.alert_title,
        )

    def evaluate(self, node: object) -> object:
        return self.evaluator.evaluate(node)

    async def execute(self, node: object, router: Router | None = None) -> None:
        await self.executor.execute(node, router)

    def fork(self, overrides: dict[str, Any] | None = None) -> Interpreter:
        return Interpreter(
            context=self.context.fork(overrides),
            channel=self.channel,
            settings=self.settings,
        )
