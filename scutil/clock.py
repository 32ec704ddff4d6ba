"""Wall-clock and monotonic time readings, and a millisecond sleep."""

from __future__ import annotations

import time as _time

_NS_PER_MS = 1_000_000


def time_ms() -> int:
    """Wall-clock time in milliseconds since the epoch."""
    return _time.time_ns() // _NS_PER_MS


def time_ns() -> int:
    """Wall-clock time in nanoseconds since the epoch."""
    return _time.time_ns()


def mono_ms() -> int:
    """Monotonic clock reading in milliseconds."""
    return _time.monotonic_ns() // _NS_PER_MS


def mono_ns() -> int:
    """Monotonic clock reading in nanoseconds."""
    return _time.monotonic_ns()


def sleep(millis: int) -> None:
    """Sleep for ``millis`` milliseconds, resuming after signal interrupts."""
    if millis < 0:
        raise ValueError("sleep duration must not be negative")
    _time.sleep(millis / 1000)