"""
Constants and enumerations for logpool.

This module defines the standard level table, the handler filter sentinel
and the timestamp vocabulary understood by the default renderer.
"""
from enum import IntEnum

class LogLevel(IntEnum):
    """Standard message levels.

    Loggers accept any non-negative number as a level; these values are only
    the conventional table used by ``make_standard_logger``.

    Attributes:
        DEBUG: Developer diagnostics
        INFO: Normal operational messages
        WARNING: Something unexpected that does not stop work
        ERROR: A failed operation
        FATAL: An unrecoverable failure
    """
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5

class _AllLevels:
    """Handler filter sentinel: the handler receives messages of every level."""
    __slots__ = ()

    def __repr__(self) -> str:
        return 'ALL'

    def __reduce__(self):
        return 'ALL'

ALL = _AllLevels()

# format strings that would make the renderer return a structure, not text
CLEARING_TIME_FORMATS = frozenset({'*t', '!*t'})

UTC_MARKER = '!'

TIME_FORMAT_CODES = {
    '%a': 'abbreviated weekday name (e.g., Wed)',
    '%A': 'full weekday name (e.g., Wednesday)',
    '%b': 'abbreviated month name (e.g., Sep)',
    '%B': 'full month name (e.g., September)',
    '%c': 'date and time (e.g., 09/16/98 23:48:10)',
    '%d': 'day of the month (16) [01-31]',
    '%H': 'hour, using a 24-hour clock (23) [00-23]',
    '%I': 'hour, using a 12-hour clock (11) [01-12]',
    '%M': 'minute (48) [00-59]',
    '%m': 'month (09) [01-12]',
    '%p': 'either "AM" or "PM" (PM)',
    '%S': 'second (10) [00-61]',
    '%w': 'weekday (3) [0-6 = Sunday-Saturday]',
    '%x': 'date (e.g., 09/16/98)',
    '%X': 'time (e.g., 23:48:10)',
    '%Y': 'full year (1998)',
    '%y': 'two-digit year (98) [00-99]',
}
