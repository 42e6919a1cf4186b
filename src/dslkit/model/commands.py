"""UI commands handed from the action executor to the presentation layer.

The executor never touches the router or the host UI directly; it sends one
of these messages over a ``CommandChannel`` and the channel's single consumer
applies it.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class CommandName(str, Enum):
    """Names accepted by ``{"action": <name>}`` nodes."""

    NAVIGATE = "navigate"
    NAVIGATE_BACK = "navigateBack"
    SHOW_ALERT = "showAlert"
    PRESENT_MODAL = "presentModal"
    DISMISS_MODAL = "dismissModal"
    RESET = "reset"


class NavigateCommand(BaseModel):
    """Push a cached screen onto the navigation stack."""

    kind: Literal["navigate"] = "navigate"
    screen_id: str


class NavigateBackCommand(BaseModel):
    kind: Literal["navigate_back"] = "navigate_back"


class ResetCommand(BaseModel):
    """Clear navigation history and make *screen_id* the root."""

    kind: Literal["reset"] = "reset"
    screen_id: str


class PresentModalCommand(BaseModel):
    kind: Literal["present_modal"] = "present_modal"
    screen_id: str


class DismissModalCommand(BaseModel):
    kind: Literal["dismiss_modal"] = "dismiss_modal"


class ShowAlertCommand(BaseModel):
    """Ask the host to show a message with an acknowledgement control."""

    kind: Literal["show_alert"] = "show_alert"
    title: str
    message: str = ""


UICommand = Annotated[
    Union[
        NavigateCommand,
        NavigateBackCommand,
        ResetCommand,
        PresentModalCommand,
        DismissModalCommand,
        ShowAlertCommand,
    ],
    Field(discriminator="kind"),
]
