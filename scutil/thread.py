"""A joinable worker thread that runs one function and keeps its result."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any


class ThreadError(Exception):
    """Raised when a thread cannot be started or its function failed."""


class Thread:
    """Runs ``fn(arg)`` on a separate thread; ``join`` hands back the result.

    Joining a thread that was never started, or one already joined, returns
    ``None`` and is not an error.
    """

    def __init__(self) -> None:
        self._worker: threading.Thread | None = None
        self._result: Any = None
        self._error: Exception | None = None

    def __enter__(self) -> Thread:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.term()

    def _run(self, fn: Callable[[Any], Any], arg: Any) -> None:
        try:
            self._result = fn(arg)
        except Exception as exc:  # handed to the joining thread
            self._error = exc

    def start(self, fn: Callable[[Any], Any], arg: Any = None) -> None:
        """Start running ``fn(arg)``; raises ThreadError if it cannot start."""
        if self._worker is not None:
            raise ThreadError("thread is already running; join it first")
        self._result = None
        self._error = None
        worker = threading.Thread(target=self._run, args=(fn, arg), daemon=False)
        try:
            worker.start()
        except RuntimeError as exc:
            raise ThreadError(f"cannot start thread: {exc}") from exc
        self._worker = worker

    def join(self) -> Any:
        """Wait for the thread to finish and return what its function returned.

        Raises ThreadError if the function raised an exception.
        """
        worker = self._worker
        if worker is None:
            return None
        self._worker = None
        worker.join()
        result, error = self._result, self._error
        self._result = None
        self._error = None
        if error is not None:
            raise ThreadError(f"thread function failed: {error!r}") from error
        return result

    def term(self) -> None:
        """Join the thread, discarding its result."""
        self.join()