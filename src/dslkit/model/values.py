"""Dynamic values flowing through screen documents and the data context."""

from __future__ import annotations

from typing import TypeAlias, Union

DynamicValue: TypeAlias = Union[
    None,
    bool,
    int,
    float,
    str,
    list["DynamicValue"],
    dict[str, "DynamicValue"],
]
"""Any JSON-compatible value: the closed variant used for context storage,
expression results and action parameters."""

DynamicMapping: TypeAlias = dict[str, DynamicValue]
