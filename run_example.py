#!/usr/bin/env python
"""Example script demonstrating logpool loggers"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent))

from logpool import LogLevel, get_logger, use_error_reporter
from logpool.config import make_standard_logger, LoggerConfig
from logpool.observability import to_stream

def demo_history():
    print("=" * 60)
    print("HISTORY DEMO")
    print("=" * 60)

    log = make_standard_logger("demo", LoggerConfig(log_level=LogLevel.INFO, max_log=3,
                                                     time_format="%H:%M:%S"))
    info, debug = log.shortcuts["info"], log.shortcuts["debug"]
    for i in range(1, 6):
        info("message %d of %d", i, 5)
    debug("below the gate, never kept")

    print(f"Cached: {len(log)} of max {log.max_log}")
    for k in range(1, log.max_log + 2):
        print(f"  log[{k}] = {log[k]!r}")
    log.dispose()

def demo_handlers():
    print("\n" + "=" * 60)
    print("HANDLER DEMO")
    print("=" * 60)

    log = get_logger("handlers")
    log.set_prefix(LogLevel.ERROR, "[ERROR]")

    def broken(message: str):
        raise RuntimeError("handler is down")

    log.add_handler(broken)
    log.add_handler(to_stream())
    log.add_handler(lambda m: print(f"  errors only -> {m}"), LogLevel.ERROR)

    failures = []
    with use_error_reporter(failures.append):
        log(LogLevel.INFO, "plain message reaches the stream handler")
        log(LogLevel.ERROR, "disk at %d%%", 97)

    print(f"Handler failures reported: {len(failures)} ({failures[0]!r})")
    log.dispose()

if __name__ == '__main__':
    demo_history()
    demo_handlers()
