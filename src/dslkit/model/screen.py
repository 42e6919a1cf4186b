"""Screen documents: the immutable unit the router navigates between."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DisplayMode(str, Enum):
    LARGE = "large"
    INLINE = "inline"


class TrailingButton(BaseModel):
    """Button placed at the trailing edge of the navigation bar."""

    model_config = ConfigDict(frozen=True)

    label: str
    action: Any = None


class NavigationBar(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = ""
    display_mode: DisplayMode = Field(DisplayMode.INLINE, alias="displayMode")
    trailing_button: TrailingButton | None = Field(None, alias="trailingButton")

    @field_validator("display_mode", mode="before")
    @classmethod
    def _unknown_mode_is_inline(cls, value: object) -> object:
        if not isinstance(value, str) or value not in {m.value for m in DisplayMode}:
            return DisplayMode.INLINE
        return value


class Screen(BaseModel):
    """One screen of a document.

    *components* are kept as raw descriptors (``{"type": ..., **props}``);
    their property values are expression nodes evaluated at render time.
    *on_appear_logic* is a raw action node run once when the screen is first
    shown.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    components: list[dict[str, Any]] = []
    navigation_bar: NavigationBar | None = Field(None, alias="navigationBar")
    on_appear_logic: Any = Field(None, alias="onAppearLogic")
