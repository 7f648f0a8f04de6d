"""Background work: a periodically repeated action and an event queue."""

from __future__ import annotations

import queue
import threading
import time
from collections.abc import Callable
from types import TracebackType

from .logger import log_debug, log_error

_CLOSED = object()


class PeriodicTask:
    """Runs ``action`` every ``period_ms`` milliseconds while started.

    The task is created stopped; exceptions raised by the action are logged and
    do not end the task.
    """

    def __init__(self, action: Callable[[], object], period_ms: int) -> None:
        self._action = action
        self._period = period_ms / 1000.0
        self._alive = True
        self._running = False
        self._condition = threading.Condition()
        self._closing = threading.Event()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()
        log_debug("PeriodicTask", "created")

    def _run(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._running or not self._alive)
                if not self._alive:
                    break
            deadline = time.monotonic() + self._period
            try:
                self._action()
            except Exception as exc:  # the task must survive a failing action
                log_error("PeriodicTask.execute", str(exc) or type(exc).__name__)
            remaining = deadline - time.monotonic()
            if remaining > 0:
                self._closing.wait(remaining)
        log_debug("PeriodicTask.execute", "exit")

    def start(self) -> None:
        with self._condition:
            self._running = True
            self._condition.notify_all()

    def stop(self) -> None:
        with self._condition:
            self._running = False

    def start_stop(self) -> None:
        """Toggle between running and stopped."""
        if self._running:
            self.stop()
        else:
            self.start()

    def is_running(self) -> bool:
        return self._running

    def close(self) -> None:
        """End the task and wait for its thread to finish."""
        with self._condition:
            self._alive = False
            self._running = False
            self._condition.notify_all()
        self._closing.set()
        self._thread.join()

    def __enter__(self) -> PeriodicTask:
        return self

    def __exit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> None:
        self.close()


def _log_event(event: int) -> None:
    log_debug("EventQueue.handle", f"event {event} processed")


class EventQueue:
    """Hands posted integer events, in order, to ``handler`` on a worker thread.

    Closing processes the events still queued. An exception from the handler is
    logged and ends event handling.
    """

    def __init__(self, handler: Callable[[int], object] | None = None) -> None:
        self._handler = handler or _log_event
        self._queue: queue.Queue[object] = queue.Queue()
        self._closed = False
        self._lock = threading.Lock()
        self._thread = threading.Thread(target=self._handle, daemon=True)
        self._thread.start()

    def _handle(self) -> None:
        try:
            while (event := self._queue.get()) is not _CLOSED:
                self._handler(event)  # type: ignore[arg-type]
        except Exception as exc:
            log_error("EventQueue.handle", str(exc) or type(exc).__name__)

    def post(self, event: int) -> None:
        with self._lock:
            if self._closed:
                raise RuntimeError("event queue is closed")
            self._queue.put(event)
        log_debug("EventQueue.post", "event posted")

    def close(self) -> None:
        """Process the remaining events, then stop the worker thread."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(_CLOSED)
        self._thread.join()

    def __enter__(self) -> EventQueue:
        return self

    def __exit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> None:
        self.close()