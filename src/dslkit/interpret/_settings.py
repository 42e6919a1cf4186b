"""Runtime settings for a session."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from ._values import DslError


class SettingsError(DslError):
    """A settings file could not be read or does not match the schema."""


class RuntimeSettings(BaseModel):
    """Settings consumed by ``start_session``.

    *initial_screen* defaults to the first screen of the document.
    *initial_data* seeds the data context (deep-copied per session).
    """

    model_config = ConfigDict(extra="forbid")

    initial_screen: str | None = None
    alert_title: str = "Alerta"
    initial_data: dict[str, Any] = {}

    @classmethod
    def from_file(cls, path: str | Path) -> RuntimeSettings:
        """Load settings from a JSON file. Raises ``SettingsError``."""
        try:
            return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))
        except ValidationError as exc:
            raise SettingsError(
                f"invalid settings file {path}: {exc.error_count()} error(s)\n{exc}"
            ) from exc
        except OSError as exc:
            raise SettingsError(f"cannot read settings file {path}: {exc}") from exc
