"""Value helpers shared by the context, evaluator and executor.

Provides the "nothing" sentinel, path splitting and the error hierarchy.
"""

from __future__ import annotations


class DslError(Exception):
    """Base class for errors raised around the interpreter core."""


class ChannelError(DslError):
    """Misuse of a command channel (second consumer, unbound loop)."""


class _Missing:
    """Marker for "no value": distinct from a stored ``None``."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def split_path(path: str) -> list[str]:
    """Split a dotted context path, ignoring empty segments.

    ``"a.b.c"`` -> ``["a", "b", "c"]``; ``"a..b."`` -> ``["a", "b"]``.
    """
    return [key for key in path.split(".") if key]


def as_text(value: object) -> str:
    """String view used by interpolation and ``concat``: non-strings are ``""``."""
    return value if isinstance(value, str) else ""
