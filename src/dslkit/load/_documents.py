"""Decode screen documents into ``Screen`` models."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from dslkit.interpret._values import DslError
from dslkit.model.screen import Screen

_SCREENS = TypeAdapter(list[Screen])


class ScreenLoadError(DslError):
    """A screen document could not be read or does not match the schema."""


def load_screens(source: str | bytes | Path | list[Any]) -> list[Screen]:
    """Load the ordered list of screens in a document.

    *source* is JSON text, a path to a JSON file, or an already decoded
    list of screen mappings.
    """
    try:
        if isinstance(source, Path):
            return _SCREENS.validate_json(source.read_bytes())
        if isinstance(source, (str, bytes)):
            return _SCREENS.validate_json(source)
        return _SCREENS.validate_python(source)
    except ValidationError as exc:
        raise ScreenLoadError(
            f"invalid screen document: {exc.error_count()} error(s)\n{exc}"
        ) from exc
    except OSError as exc:
        raise ScreenLoadError(f"cannot read screen document {source}: {exc}") from exc
