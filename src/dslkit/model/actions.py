"""Action nodes: imperative steps described as JSON.

Raw documents are plain mappings whose *shape* selects the step type.
``parse_action`` classifies a raw node into exactly one of the models below,
so the executor dispatches on ``kind`` instead of probing keys.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class AppendAction(BaseModel):
    """Append an evaluated mapping to the list stored at *var*."""

    kind: Literal["append"] = "append"
    var: str
    value: Any = None


class SequenceAction(BaseModel):
    """Run *steps* one after another, strictly in order."""

    kind: Literal["sequence"] = "sequence"
    steps: list[ActionNode] = []


class SetAction(BaseModel):
    """Write the evaluated *value* to the context path *var*."""

    kind: Literal["set"] = "set"
    var: str
    value: Any = None


class CommandAction(BaseModel):
    """A named side-effecting command (``navigate``, ``showAlert``, ...).

    *name* is kept as the raw string so documents written for newer
    runtimes still parse; unknown names are no-ops at execution time.
    """

    kind: Literal["command"] = "command"
    name: str
    params: dict[str, Any] = {}


class UnrecognizedAction(BaseModel):
    """A node that matched no known shape. Executes as a no-op."""

    kind: Literal["unrecognized"] = "unrecognized"
    reason: str
    node: Any = None


ActionNode = Annotated[
    Union[
        AppendAction,
        SequenceAction,
        SetAction,
        CommandAction,
        UnrecognizedAction,
    ],
    Field(discriminator="kind"),
]

SequenceAction.model_rebuild()

_ACTION_MODELS = (AppendAction, SequenceAction, SetAction, CommandAction, UnrecognizedAction)


def _assignment_body(node: dict, key: str) -> dict | None:
    """Return ``node[key]`` when it is a ``{"var": str, "value": ...}`` mapping."""
    body = node.get(key)
    if not isinstance(body, dict):
        return None
    if not isinstance(body.get("var"), str) or "value" not in body:
        return None
    return body


def parse_action(raw: Any) -> ActionNode:
    """Classify a raw action node.

    Shapes are checked in a fixed priority order and the first well-formed
    one wins: ``append``, ``sequence``, ``set``, ``action``. A malformed
    shape does not match, so the next one is tried. Anything left over
    becomes an ``UnrecognizedAction``.
    """
    if isinstance(raw, _ACTION_MODELS):
        return raw

    if not isinstance(raw, dict):
        return UnrecognizedAction(
            reason=f"action node must be a mapping, got {type(raw).__name__}",
            node=raw,
        )

    append = _assignment_body(raw, "append")
    if append is not None:
        return AppendAction(var=append["var"], value=append["value"])

    steps = raw.get("sequence")
    if isinstance(steps, list):
        return SequenceAction(steps=[parse_action(step) for step in steps])

    assignment = _assignment_body(raw, "set")
    if assignment is not None:
        return SetAction(var=assignment["var"], value=assignment["value"])

    name = raw.get("action")
    if isinstance(name, str):
        params = raw.get("params")
        return CommandAction(name=name, params=params if isinstance(params, dict) else {})

    if any(key in raw for key in ("append", "set")):
        reason = "malformed assignment (needs a string 'var' and a 'value')"
    else:
        reason = f"no action shape matched keys {sorted(raw)}"
    return UnrecognizedAction(reason=reason, node=raw)
