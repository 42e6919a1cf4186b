"""Expression evaluator: turns data-bound expression nodes into values.

The grammar is closed:

- ``"Hello $user.name"``: string interpolation of ``$path`` tokens
- ``{"var": "a.b"}``: variable lookup
- ``{"concat": [...]}``: string concatenation of evaluated parts
- any other mapping or list: evaluated structurally, element by element
- everything else evaluates to itself

Evaluation never mutates the context.
"""

from __future__ import annotations

import re

from dslkit.model.values import DynamicValue

from ._context import DataContext
from ._values import MISSING, as_text

_TOKEN_RE = re.compile(r"\$([A-Za-z0-9_.]+)")


class ExpressionEvaluator:
    """Evaluate expression nodes against a ``DataContext``."""

    def __init__(self, context: DataContext) -> None:
        self.context = context

    def evaluate(self, node: object) -> DynamicValue:
        """Evaluate *node*; a top-level "nothing" becomes ``None``."""
        result = self.eval_node(node)
        return None if result is MISSING else result

    def eval_node(self, node: object) -> object:
        """Evaluate *node*, returning ``MISSING`` when it yields nothing."""
        if isinstance(node, str):
            if "$" not in node:
                return node
            return self._interpolate(node)

        if isinstance(node, dict):
            variable = node.get("var")
            if isinstance(variable, str):
                return self.context.lookup(variable)

            parts = node.get("concat")
            if isinstance(parts, list):
                return "".join(as_text(self.eval_node(part)) for part in parts)

            out: dict[str, object] = {}
            for key, value in node.items():
                evaluated = self.eval_node(value)
                if evaluated is not MISSING:
                    out[key] = evaluated
            return out

        if isinstance(node, list):
            return [
                evaluated
                for evaluated in map(self.eval_node, node)
                if evaluated is not MISSING
            ]

        return node

    def _interpolate(self, text: str) -> str:
        return _TOKEN_RE.sub(
            lambda m: as_text(self.context.lookup(m.group(1))),
            text,
        )
