"""Data context: the path-addressed store behind every screen.

All reads and writes go through dotted paths. Writes are copy-on-write along
the path, so a forked context can share nested mappings with its parent
without either side ever seeing the other's updates.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable

from dslkit.model.values import DynamicMapping, DynamicValue

from ._values import MISSING, split_path

logger = logging.getLogger(__name__)

ContextListener = Callable[[str], None]


def _assign(mapping: dict, keys: list[str], value: DynamicValue) -> dict:
    """Return a copy of *mapping* with *value* written at *keys*."""
    updated = dict(mapping)
    head = keys[0]
    if len(keys) == 1:
        updated[head] = value
        return updated
    child = mapping.get(head)
    if not isinstance(child, dict):
        child = {}
    updated[head] = _assign(child, keys[1:], value)
    return updated


class DataContext:
    """Mutable root mapping addressed by dotted paths.

    Parameters
    ----------
    data : dict, optional
        Initial root mapping. It is copied shallowly; nested values are
        shared until a write replaces them.
    """

    def __init__(self, data: DynamicMapping | None = None) -> None:
        self._data: DynamicMapping = dict(data) if data else {}
        self._listeners: list[ContextListener] = []

    @property
    def data(self) -> DynamicMapping:
        """The current root mapping. Treat it as read-only; use ``set``."""
        return self._data

    @data.setter
    def data(self, value: DynamicMapping) -> None:
        self._data = dict(value)

    # -----------------------------------------------------------------------
    # Reads
    # -----------------------------------------------------------------------

    def lookup(self, path: str) -> object:
        """Value at *path*, or ``MISSING`` if any segment is absent."""
        current: object = self._data
        for key in split_path(path):
            if not isinstance(current, dict) or key not in current:
                return MISSING
            current = current[key]
        return current

    def resolve(self, path: str, default: object = None) -> object:
        """Value at *path*, or *default* if any segment is absent."""
        value = self.lookup(path)
        return default if value is MISSING else value

    def snapshot(self) -> DynamicMapping:
        """Deep copy of the root mapping."""
        return copy.deepcopy(self._data)

    # -----------------------------------------------------------------------
    # Writes
    # -----------------------------------------------------------------------

    def set(self, path: str, value: DynamicValue) -> None:
        """Write *value* at *path*, creating or replacing intermediates.

        Never fails. A path without any segment is ignored.
        """
        keys = split_path(path)
        if not keys:
            logger.debug("ignoring write to empty context path %r", path)
            return
        self._data = _assign(self._data, keys, value)
        for listener in list(self._listeners):
            listener(path)

    def fork(self, overrides: DynamicMapping | None = None) -> DataContext:
        """Child context: a snapshot of this root merged with *overrides*.

        Writes on either side never reach the other. The fork starts with
        no listeners.
        """
        data = dict(self._data)
        if overrides:
            data.update(overrides)
        return DataContext(data)

    def subscribe(self, listener: ContextListener) -> Callable[[], None]:
        """Call ``listener(path)`` after every write. Returns an unsubscriber."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"
