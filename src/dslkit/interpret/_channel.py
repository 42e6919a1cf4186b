"""Command channel: hand-off from action execution to the UI-owning loop.

The executor only ever *sends* commands. Exactly one consumer, owned by the
presentation layer, applies them to the router and the presenter, so router
state is only ever mutated from one place.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from dslkit.model.commands import (
    DismissModalCommand,
    NavigateBackCommand,
    NavigateCommand,
    PresentModalCommand,
    ResetCommand,
    ShowAlertCommand,
    UICommand,
)

from ._values import ChannelError

if TYPE_CHECKING:
    from ._router import Router

logger = logging.getLogger(__name__)


@runtime_checkable
class Presenter(Protocol):
    """Host UI boundary for fire-and-forget alerts."""

    def show_alert(self, title: str, message: str) -> None: ...


class LoggingPresenter:
    """Presenter for headless hosts: alerts are written to the log."""

    def show_alert(self, title: str, message: str) -> None:
        logger.info("alert %r: %s", title, message)


@dataclass(frozen=True)
class _Envelope:
    command: UICommand
    router: Router | None


_STOP = object()


class CommandChannel:
    """Single-consumer FIFO of UI commands.

    Parameters
    ----------
    presenter : Presenter, optional
        Receives ``ShowAlertCommand``. Defaults to ``LoggingPresenter``.
    """

    def __init__(self, presenter: Presenter | None = None) -> None:
        self.presenter: Presenter = presenter or LoggingPresenter()
        self._queue: asyncio.Queue = asyncio.Queue()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._serving = False

    @property
    def pending(self) -> int:
        """Number of commands waiting for the consumer."""
        return self._queue.qsize()

    # -----------------------------------------------------------------------
    # Producer side
    # -----------------------------------------------------------------------

    async def send(self, command: UICommand, router: Router | None = None) -> None:
        """Queue *command* for the consumer."""
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        await self._queue.put(_Envelope(command, router))

    def send_threadsafe(self, command: UICommand, router: Router | None = None) -> None:
        """Queue *command* from a thread other than the consumer's loop."""
        if self._loop is None:
            raise ChannelError("channel is not bound to an event loop yet")
        self._loop.call_soon_threadsafe(self._queue.put_nowait, _Envelope(command, router))

    def bind(self, loop: asyncio.AbstractEventLoop) -> None:
        """Bind the channel to the consumer's loop ahead of the first send."""
        self._loop = loop

    # -----------------------------------------------------------------------
    # Consumer side
    # -----------------------------------------------------------------------

    async def drain(self) -> int:
        """Apply every pending command in order. Returns how many ran."""
        if self._serving:
            raise ChannelError("channel already has a serving consumer")
        applied = 0
        while not self._queue.empty():
            envelope = self._queue.get_nowait()
            try:
                if envelope is not _STOP:
                    self._apply(envelope)
                    applied += 1
            finally:
                self._queue.task_done()
        return applied

    async def serve(self) -> None:
        """Apply commands as they arrive until ``close()`` is called."""
        if self._serving:
            raise ChannelError("channel already has a serving consumer")
        self._serving = True
        self._loop = asyncio.get_running_loop()
        try:
            while True:
                envelope = await self._queue.get()
                try:
                    if envelope is _STOP:
                        return
                    self._apply(envelope)
                except Exception:
                    logger.exception("failed to apply %r", envelope.command)
                finally:
                    self._queue.task_done()
        finally:
            self._serving = False

    async def close(self) -> None:
        """Stop a running ``serve()`` after the commands already queued."""
        await self._queue.put(_STOP)

    def _apply(self, envelope: _Envelope) -> None:
        command = envelope.command
        handler = self._APPLY_DISPATCH.get(command.kind)
        if handler is None:
            logger.debug("no handler for command kind %r", command.kind)
            return
        handler(self, command, envelope.router)

    # -----------------------------------------------------------------------
    # Command handlers
    # -----------------------------------------------------------------------

    def _apply_navigate(self, command: NavigateCommand, router: Router | None) -> None:
        if router is not None and not router.navigate(command.screen_id):
            logger.debug("navigate: screen %r is not cached", command.screen_id)

    def _apply_navigate_back(self, _command: NavigateBackCommand, router: Router | None) -> None:
        if router is not None:
            router.go_back()

    def _apply_reset(self, command: ResetCommand, router: Router | None) -> None:
        if router is not None:
            router.reset(command.screen_id)

    def _apply_present_modal(self, command: PresentModalCommand, router: Router | None) -> None:
        if router is not None and not router.present_modal(command.screen_id):
            logger.debug("presentModal: screen %r is not cached", command.screen_id)

    def _apply_dismiss_modal(self, _command: DismissModalCommand, router: Router | None) -> None:
        if router is not None:
            router.dismiss_modal()

    def _apply_show_alert(self, command: ShowAlertCommand, _router: Router | None) -> None:
        self.presenter.show_alert(command.title, command.message)

    _APPLY_DISPATCH: dict[str, Callable[[CommandChannel, UICommand, Router | None], None]] = {
        "navigate": _apply_navigate,
        "navigate_back": _apply_navigate_back,
        "reset": _apply_reset,
        "present_modal": _apply_present_modal,
        "dismiss_modal": _apply_dismiss_modal,
        "show_alert": _apply_show_alert,
    }
