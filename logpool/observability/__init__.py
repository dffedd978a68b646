"""Error reporting and handler adapters for logpool."""

from .hooks import (
    get_error_reporter,
    log_error,
    report_error,
    set_error_reporter,
    use_error_reporter,
)
from .bridge import STD_LEVELS, to_std_logger, to_stream

__all__ = [
    "get_error_reporter",
    "log_error",
    "report_error",
    "set_error_reporter",
    "use_error_reporter",
    "STD_LEVELS",
    "to_std_logger",
    "to_stream",
]
