"""
Message rendering: timestamp segment, level prefix and interpolation.

A rendered message is ``timestamp + prefix + message``:
- timestamp: ``[...]`` produced from the logger's time format, or empty
- prefix: the text registered for the message's exact level, or empty
- message: the template, ``%``-interpolated when arguments are given
"""
from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import Any
from .constants import CLEARING_TIME_FORMATS, UTC_MARKER
from .errors import LogFormatError
from .protocols import TimestampRenderer

_log = logging.getLogger(__name__)

def strftime_renderer(time_format: str) -> str:
    """Default renderer: local time, or UTC when the format starts with ``!``."""
    if time_format.startswith(UTC_MARKER):
        return datetime.now(timezone.utc).strftime(time_format[1:])
    return datetime.now().strftime(time_format)

def normalize_time_format(value: Any) -> str | None:
    if isinstance(value, str) and value not in CLEARING_TIME_FORMATS:
        return value
    return None

def normalize_prefix(value: Any) -> str | None:
    """Append a separating space unless the prefix already ends in whitespace.

    Unlike the classic rule, a prefix ending in punctuation still gets the
    space: ``"[WARN]"`` becomes ``"[WARN] "`` and ``"INFO:"`` becomes ``"INFO: "``.
    Non-string values clear the prefix.
    """
    if not isinstance(value, str):
        return None
    if value and not value[-1].isspace():
        return value + ' '
    return value

def render_timestamp(time_format: str | None, renderer: TimestampRenderer) -> str:
    if time_format is None:
        return ''
    try:
        stamp = renderer(time_format)
    except Exception as exc:
        _log.debug("timestamp renderer failed for %r: %s", time_format, exc)
        return ''
    if not isinstance(stamp, str) or not stamp:
        return ''
    if not (len(stamp) >= 2 and stamp[0] == '[' and stamp[-1] == ']'):
        stamp = f"[{stamp}]"
    return stamp

def interpolate(message: str, args: tuple) -> str:
    """``message % args`` when args are given; mismatches raise LogFormatError."""
    if not args:
        return message
    try:
        return message % args
    except (TypeError, ValueError, KeyError) as exc:
        raise LogFormatError(f"cannot format {message!r} with {len(args)} argument(s): {exc}") from exc

def render(message: str, args: tuple, prefix: str | None,
           time_format: str | None, renderer: TimestampRenderer) -> str:
    """Build the rendered message.

    Interpolation runs first so a format error leaves the renderer uncalled.
    """
    body = interpolate(message, args)
    return render_timestamp(time_format, renderer) + (prefix or '') + body
