"""
Configuration and factory functions for creating pre-configured loggers.

This module provides:
- LoggerConfig: Configuration dataclass
- make_logger: Get-or-create a logger and apply a LoggerConfig
- make_standard_logger: Logger with the LogLevel prefix table and shortcuts

Example:
    >>> from logpool.config import make_standard_logger, LoggerConfig
    >>> log = make_standard_logger("app", LoggerConfig(log_level=2, max_log=50))
    >>> log.shortcuts["warning"]("disk at %d%%", 90)
    >>> log[1]
    '[WARNING] disk at 90%'
"""
from __future__ import annotations
from dataclasses import dataclass, field
from .core import Logger, LoggerRegistry, LogLevel, default_registry

STANDARD_PREFIXES = {
    LogLevel.DEBUG: '[DEBUG]',
    LogLevel.INFO: '[INFO]',
    LogLevel.WARNING: '[WARNING]',
    LogLevel.ERROR: '[ERROR]',
    LogLevel.FATAL: '[FATAL]',
}

@dataclass
class LoggerConfig:
    """Configuration applied to a logger by ``make_logger``.

    Attributes:
        log_level: Minimum level kept and dispatched
        max_log: Number of rendered messages kept in history
        time_format: Timestamp format, None for no timestamp
        prefixes: Level -> prefix text
        shortcuts: If True, bind a lowercase shortcut per entry in ``prefixes``
            whose level is a LogLevel (``log.shortcuts["info"]``)
    """
    log_level: int = 0
    max_log: int = 1
    time_format: str | None = None
    prefixes: dict[int, str] = field(default_factory=dict)
    shortcuts: bool = False

def make_logger(name: str, cfg: LoggerConfig | None = None,
                registry: LoggerRegistry | None = None) -> Logger:
    """Get or create the logger for ``name`` and apply ``cfg``.

    Unlike plain ``get_logger``, an existing logger is reconfigured: its
    level, capacity, time format and the prefixes named in ``cfg`` are
    overwritten. History and handlers are kept.

    Args:
        name: Logger name
        cfg: Configuration (uses defaults if None)
        registry: Registry to use (the process-wide one if None)

    Returns:
        Configured Logger instance
    """
    cfg = cfg or LoggerConfig()
    registry = registry if registry is not None else default_registry()
    logger = registry.get_or_create(name)

    logger.log_level = cfg.log_level
    logger.max_log = cfg.max_log
    logger.time_format = cfg.time_format
    for level, prefix in cfg.prefixes.items():
        shortcut = _shortcut_name(level) if cfg.shortcuts else None
        logger.set_prefix(level, prefix, shortcut)
    return logger

def make_standard_logger(name: str, cfg: LoggerConfig | None = None,
                         registry: LoggerRegistry | None = None) -> Logger:
    """Create a logger with the standard level table.

    Components:
    - Prefixes: ``[DEBUG]`` .. ``[FATAL]`` for the LogLevel values
    - Shortcuts: ``debug``, ``info``, ``warning``, ``error``, ``fatal``

    Prefixes given in ``cfg`` override the standard ones per level.
    """
    cfg = cfg or LoggerConfig()
    prefixes = {**STANDARD_PREFIXES, **cfg.prefixes}
    return make_logger(name, LoggerConfig(log_level=cfg.log_level, max_log=cfg.max_log,
                                          time_format=cfg.time_format, prefixes=prefixes,
                                          shortcuts=True), registry)

def _shortcut_name(level: int) -> str | None:
    try:
        return LogLevel(level).name.lower()
    except ValueError:
        return None
