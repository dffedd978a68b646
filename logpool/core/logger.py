"""
The named Logger.

A Logger keeps and distributes log messages:
1. ``log(level, message, *args)`` discards messages below ``log_level``
2. Surviving messages are rendered (timestamp + level prefix + message)
3. The rendered text is cached in a bounded history (``max_log`` entries)
4. Every handler whose filter matches the level receives the text

Loggers are singletons per name: ``Logger("app")`` and ``get_logger("app")``
return the same object until it is disposed. The object is read-only apart
from its ``log_level``, ``max_log`` and ``time_format`` properties.

Example:
    >>> log = Logger("app")
    >>> log.max_log = 3
    >>> log.set_prefix(2, "[INFO]")
    >>> log(2, "ready in %.1fs", 1.5)
    >>> log[1]
    '[INFO] ready in 1.5s'
"""
from __future__ import annotations
from dataclasses import dataclass, field
from threading import RLock
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping, MutableMapping, TYPE_CHECKING
from .errors import DisposedLoggerError, InvalidArgumentError, ReadOnlyViolation, usage_error
from .handlers import HandlerRegistry
from .numeric import coerce_level, floor_index, is_number
from .protocols import Handler, TimestampRenderer
from .render import normalize_prefix, normalize_time_format, render
from .ring import RingBuffer
from ..observability.hooks import report_error
if TYPE_CHECKING:
    from .registry import LoggerRegistry

_SETTABLE = frozenset({'log_level', 'max_log', 'time_format'})

@dataclass
class _LoggerState:
    """Mutable state owned by one live Logger."""
    renderer: TimestampRenderer
    level: int = 0
    time_format: str | None = None
    history: RingBuffer = field(default_factory=RingBuffer)
    handlers: HandlerRegistry = field(default_factory=HandlerRegistry)
    prefixes: dict[float, str] = field(default_factory=dict)
    shortcuts: dict[str, Callable[..., None]] = field(default_factory=dict)

class Logger:
    """Keeps and distributes log messages for one name.

    Construct with ``Logger(name)`` or ``get_logger(name)``; both return the
    live instance for the normalised name when one exists.

    Attributes:
        name: Normalised name (first run of letters, digits and underscores)
        log_level: Minimum level that is kept and dispatched
        max_log: Number of rendered messages kept in history
        time_format: strftime-like specifier for the timestamp, or None
    """

    def __new__(cls, name: str, registry: LoggerRegistry | None = None) -> Logger:
        from .registry import default_registry
        if registry is None:
            registry = default_registry()
        return registry.get_or_create(name, factory=cls)

    def __init__(self, name: str, registry: LoggerRegistry | None = None):
        # state is set up once, by _create; re-construction returns the live instance untouched
        pass

    @classmethod
    def _create(cls, name: str, registry: LoggerRegistry) -> Logger:
        self = object.__new__(cls)
        object.__setattr__(self, '_name', name)
        object.__setattr__(self, '_registry', registry)
        object.__setattr__(self, '_lock', RLock())
        object.__setattr__(self, '_state', _LoggerState(renderer=registry.renderer))
        return self

    def _live(self) -> _LoggerState:
        state = self._state
        if state is None:
            raise DisposedLoggerError(f"logger {self._name!r} has been disposed.")
        return state

    # ------------------------------------------------------------------
    # logging
    # ------------------------------------------------------------------
    def log(self, level: float, message: str, *args: Any) -> None:
        """Log ``message`` at ``level``.

        Args:
            level: Message level; below ``log_level`` the call does nothing
            message: Message text, a ``%``-template when ``args`` are given
            *args: Values interpolated into ``message``

        Raises:
            InvalidArgumentError: ``level`` is not a number or ``message`` not a str
            LogFormatError: ``message`` and ``args`` do not match
        """
        if not is_number(level) or level != level:
            raise usage_error("Logger.log(level, message, *args)", "level", "number", level)
        if not isinstance(message, str):
            raise usage_error("Logger.log(level, message, *args)", "message", "string", message)

        with self._lock:
            state = self._live()
            if level < state.level:
                return
            rendered = render(message, args, state.prefixes.get(level),
                              state.time_format, state.renderer)
            state.history.push(rendered)

            for handler in state.handlers.matching(level):
                try:
                    handler(rendered)
                except Exception as exc:
                    report_error(exc)

    def __call__(self, level: float, message: str, *args: Any) -> None:
        self.log(level, message, *args)

    # ------------------------------------------------------------------
    # handlers
    # ------------------------------------------------------------------
    def add_handler(self, handler: Handler, level: float | None = None) -> None:
        """Add a handler receiving rendered messages.

        Args:
            handler: Callable taking the rendered message
            level: Only messages of exactly this level are delivered; every
                level when omitted (or ``ALL``)
        """
        with self._lock:
            self._live().handlers.add(handler, level)

    def remove_handler(self, handler: Handler) -> None:
        with self._lock:
            self._live().handlers.remove(handler)

    def has_handler(self, handler: Handler) -> bool:
        with self._lock:
            return handler in self._live().handlers

    def handler_filter(self, handler: Handler) -> object | None:
        """The level filter of ``handler`` (a number or ``ALL``), None if not registered."""
        with self._lock:
            return self._live().handlers.filter_of(handler)

    # ------------------------------------------------------------------
    # prefixes and shortcuts
    # ------------------------------------------------------------------
    def set_prefix(self, level: float, prefix: str | None, name: str | None = None,
                   namespace: MutableMapping[str, Any] | None = None) -> Callable[..., None] | None:
        """Set the prefix added to messages of exactly ``level``.

        A prefix not ending in whitespace gets one trailing space; a non-string
        prefix clears it.

        Args:
            level: The log level
            prefix: The prefix text, or None to clear
            name: If given, bind a shortcut ``name(message, *args)`` logging at
                ``level``; existing bindings under ``name`` are left alone
            namespace: Extra table to bind the shortcut into (e.g. ``globals()``);
                it receives the same callable ``shortcuts[name]`` holds

        Returns:
            The callable bound under ``name`` in ``namespace`` (or in
            ``shortcuts`` when no namespace is given); None without ``name``

        Example:
            >>> info = log.set_prefix(2, "[Info]", "info")
            >>> info("This is a test message")   # logs '[Info] This is a test message'
        """
        if not is_number(level):
            raise usage_error("Logger.set_prefix(level, prefix, name=None)", "level", "number", level)
        if name is not None and not isinstance(name, str):
            raise usage_error("Logger.set_prefix(level, prefix, name=None)", "name", "string", name)

        with self._lock:
            state = self._live()
            text = normalize_prefix(prefix)
            if text is None:
                state.prefixes.pop(level, None)
            else:
                state.prefixes[level] = text

            if name is None:
                return None
            shortcut = self._make_shortcut(level, name)
            bound = state.shortcuts.setdefault(name, shortcut)
        if namespace is None:
            return bound
        if namespace.get(name) is None:
            namespace[name] = bound
        return namespace[name]

    def _make_shortcut(self, level: float, name: str) -> Callable[..., None]:
        def shortcut(message: str, *args: Any) -> None:
            if level >= self.log_level:
                self.log(level, message, *args)
        shortcut.__name__ = shortcut.__qualname__ = name
        shortcut.__doc__ = f"Log a message at level {level} on logger {self._name!r}."
        return shortcut

    def get_prefix(self, level: float) -> str | None:
        with self._lock:
            return self._live().prefixes.get(level)

    @property
    def shortcuts(self) -> Mapping[str, Callable[..., None]]:
        """Read-only view of the shortcuts bound by ``set_prefix``."""
        with self._lock:
            return MappingProxyType(dict(self._live().shortcuts))

    # ------------------------------------------------------------------
    # properties
    # ------------------------------------------------------------------
    @property
    def name(self) -> str:
        return self._name

    @property
    def log_level(self) -> int:
        with self._lock:
            return self._live().level

    @log_level.setter
    def log_level(self, value: float) -> None:
        level = _coerce("Logger.log_level = value", value, 0)
        with self._lock:
            self._live().level = level

    @property
    def max_log(self) -> int:
        with self._lock:
            return self._live().history.capacity

    @max_log.setter
    def max_log(self, value: float) -> None:
        capacity = _coerce("Logger.max_log = value", value, 1)
        with self._lock:
            self._live().history.capacity = capacity

    @property
    def time_format(self) -> str | None:
        """If set, rendered messages start with a ``[timestamp]``.

        See ``TIME_FORMAT_CODES`` for the supported codes; a leading ``!``
        renders UTC. ``"*t"``, ``"!*t"`` and non-strings clear the format.
        """
        with self._lock:
            return self._live().time_format

    @time_format.setter
    def time_format(self, value: str | None) -> None:
        with self._lock:
            self._live().time_format = normalize_time_format(value)

    # ------------------------------------------------------------------
    # history access
    # ------------------------------------------------------------------
    def get_recent(self, k: float = 1) -> str | None:
        """The k-th most recent message (1 = newest), None when not cached."""
        if not is_number(k):
            raise usage_error("Logger[k]", "k", "number", k)
        index = floor_index(k)
        with self._lock:
            history = self._live().history
            return None if index is None else history.get(index)

    def __getitem__(self, k: float) -> str | None:
        return self.get_recent(k)

    def snapshot(self) -> list[str]:
        """Cached messages, newest first."""
        with self._lock:
            return self._live().history.snapshot()

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._live().history)

    def __bool__(self) -> bool:
        return self._state is not None

    # ------------------------------------------------------------------
    # write protection
    # ------------------------------------------------------------------
    def __setattr__(self, key: str, value: Any) -> None:
        if key not in _SETTABLE:
            raise ReadOnlyViolation(f"a logger is readonly: cannot set {key!r}.")
        object.__setattr__(self, key, value)

    def __delattr__(self, key: str) -> None:
        raise ReadOnlyViolation(f"a logger is readonly: cannot delete {key!r}.")

    def __setitem__(self, key: Any, value: Any) -> None:
        raise ReadOnlyViolation("a logger is readonly.")

    def __delitem__(self, key: Any) -> None:
        raise ReadOnlyViolation("a logger is readonly.")

    # ------------------------------------------------------------------
    # lifecycle
    # ------------------------------------------------------------------
    def dispose(self) -> None:
        """Remove the logger from its registry and release its state.

        Calling it again is a no-op; any other use afterwards raises
        DisposedLoggerError.
        """
        with self._lock:
            state = self._state
            if state is None:
                return
            self._registry._forget(self)
            state.history.clear()
            state.handlers.clear()
            state.prefixes.clear()
            state.shortcuts.clear()
            object.__setattr__(self, '_state', None)

    @property
    def disposed(self) -> bool:
        return self._state is None

    def __repr__(self) -> str:
        if self._state is None:
            return f"<Logger {self._name!r} (disposed)>"
        state = self._state
        return (f"<Logger {self._name!r} log_level={state.level} "
                f"max_log={state.history.capacity} size={len(state.history)}>")

def _coerce(usage: str, value: Any, lo: int) -> int:
    if not is_number(value):
        raise usage_error(usage, "value", "number", value)
    try:
        return coerce_level(value, lo)
    except ValueError as exc:
        raise InvalidArgumentError(f"Usage {usage} : {exc}.") from exc
