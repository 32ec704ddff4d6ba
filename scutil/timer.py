"""Hashed timer wheel driven by caller-supplied millisecond timestamps."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

TICK = 16
WHEEL_COUNT = 16
INVALID = 2**64 - 1

# Largest per-slot capacity, as with 24-byte entries indexed by 32-bit sizes.
MAX_WHEEL = (0xFFFFFFFF // 24) // WHEEL_COUNT

_U32 = 0xFFFFFFFF


class TimerFullError(Exception):
    """Raised when a timer cannot be added because the wheel cannot grow."""


class _Slot:
    __slots__ = ("timeout", "type", "data")

    def __init__(self) -> None:
        self.timeout = INVALID
        self.type = 0
        self.data: Any = None


def _next_timeout(elapsed: int) -> int:
    return TICK - elapsed if elapsed <= TICK else TICK


class Timer:
    """Timer wheel of 16 slots, each ``TICK`` milliseconds wide.

    Timeouts given to :meth:`add` are relative to the latest timestamp the
    timer has seen, either at construction or in :meth:`timeout`.
    """

    def __init__(self, timestamp: int = 0, *, max_wheel: int = MAX_WHEEL) -> None:
        self.timestamp = timestamp
        self._head = 0
        self._wheel = 0
        self._max_wheel = max_wheel
        self._slots: list[_Slot] = []

    def _expand(self) -> None:
        if self._wheel >= self._max_wheel // 2:
            raise TimerFullError("timer wheel cannot grow any further")
        old = self._wheel
        wheel = old * 2 if old else 4
        slots = [_Slot() for _ in range(wheel * WHEEL_COUNT * 2)]
        if old:
            for pos in range(WHEEL_COUNT):
                slots[pos * old * 2 : pos * old * 2 + old] = self._slots[
                    pos * old : pos * old + old
                ]
        self._slots = slots
        self._wheel = wheel

    def add(self, timeout: int, type: int, data: Any) -> int:
        """Schedule ``data`` to fire ``timeout`` ms from now; return its id."""
        if timeout < 0:
            raise ValueError("timeout must not be negative")
        pos = ((timeout // TICK + self._head) & _U32) & (WHEEL_COUNT - 1)
        base = pos * self._wheel
        seq = next(
            (
                s
                for s, slot in enumerate(self._slots[base : base + self._wheel])
                if slot.timeout == INVALID
            ),
            None,
        )
        if seq is None:
            seq = self._wheel
            self._expand()
        slot = self._slots[pos * self._wheel + seq]
        slot.timeout = timeout + self.timestamp
        slot.type = type
        slot.data = data
        return (seq << 32) | pos

    def cancel(self, timer_id: int | None) -> None:
        """Cancel the timer with ``timer_id``; ``None`` is ignored."""
        if timer_id is None or timer_id == INVALID:
            return
        index = (timer_id & _U32) * self._wheel + (timer_id >> 32)
        slot = self._slots[index]
        slot.timeout = INVALID
        slot.data = None

    def clear(self) -> None:
        """Drop every timer, keeping the allocated wheel."""
        self._head = 0
        for slot in self._slots:
            slot.timeout = INVALID
            slot.data = None

    def term(self) -> None:
        """Drop every timer and release the wheel; the timestamp is kept."""
        self._slots = []
        self._wheel = 0
        self._head = 0

    def timeout(
        self,
        timestamp: int,
        arg: Any,
        callback: Callable[[Any, int, int, Any], None],
    ) -> int:
        """Fire expired timers as ``callback(arg, timeout, type, data)``.

        Returns the number of milliseconds until the next check is due.
        """
        elapsed = timestamp - self.timestamp
        if elapsed < 0:
            raise ValueError("timestamp must not go backwards")
        wheels = min(elapsed // TICK, WHEEL_COUNT)
        if wheels == 0:
            return _next_timeout(elapsed)

        head = self._head
        self.timestamp = timestamp
        self._head = (head + wheels) & (WHEEL_COUNT - 1)

        for _ in range(wheels):
            width = self._wheel
            for i in range(width):
                # Callbacks may add timers and grow the wheel, so the slot's
                # position is recomputed from the current width every time.
                slot = self._slots[self._wheel * head + i]
                if slot.timeout <= self.timestamp:
                    fired = slot.timeout
                    data = slot.data
                    slot.timeout = INVALID
                    slot.data = None
                    callback(arg, fired, slot.type, data)
            head = (head + 1) & (WHEEL_COUNT - 1)

        return _next_timeout(elapsed)