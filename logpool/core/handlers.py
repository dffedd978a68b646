"""
Handler registry with per-handler level filters.

Handlers are keyed by the callable itself and keep insertion order, so dispatch order is
deterministic even though callers should not rely on it.
"""
from __future__ import annotations
from typing import Iterator
from .constants import ALL
from .errors import usage_error
from .numeric import is_number
from .protocols import Handler

class HandlerRegistry:
    """Set of handlers, each mapped to a level filter (a number or ``ALL``)."""

    def __init__(self) -> None:
        self._handlers: dict[Handler, object] = {}

    def add(self, handler: Handler, level: object = None) -> None:
        """Register ``handler``; re-adding keeps the filter it was first given."""
        if not callable(handler):
            raise usage_error("Logger.add_handler(handler, level=None)", "handler", "callable", handler)
        if level is not None and level is not ALL and not is_number(level):
            raise usage_error("Logger.add_handler(handler, level=None)", "level", "number", level)
        if handler in self._handlers:
            return
        self._handlers[handler] = ALL if level is None else level

    def remove(self, handler: Handler) -> None:
        if not callable(handler):
            raise usage_error("Logger.remove_handler(handler)", "handler", "callable", handler)
        self._handlers.pop(handler, None)

    def matching(self, level: float) -> list[Handler]:
        """Handlers whose filter accepts ``level``, snapshotted for dispatch."""
        return [h for h, lvl in self._handlers.items() if lvl is ALL or lvl == level]

    def filter_of(self, handler: Handler) -> object | None:
        return self._handlers.get(handler)

    def clear(self) -> None:
        self._handlers.clear()

    def __contains__(self, handler: object) -> bool:
        try:
            return handler in self._handlers
        except TypeError:  # unhashable
            return False

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[Handler]:
        return iter(list(self._handlers))
