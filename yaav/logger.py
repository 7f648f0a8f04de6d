"""Thread-safe logging of timestamped messages to a file."""

from __future__ import annotations

import functools
import threading
from datetime import datetime, timezone
from typing import TextIO

DEFAULT_FILENAME = "YAAVsimulator.log"


class Logger:
    """Writes one timestamped line per message to a log file.

    In debug mode only debug messages and plain messages are written; otherwise
    info messages and plain messages are written.
    """

    def __init__(self, filename: str = DEFAULT_FILENAME) -> None:
        self._lock = threading.Lock()
        self.filename = ""
        self.debug_mode = True
        self._file: TextIO | None = self._open(filename)
        if self._file is not None:
            self.filename = filename

    @staticmethod
    def _open(filename: str) -> TextIO | None:
        try:
            return open(filename, "w", encoding="utf-8")
        except OSError:
            return None

    def set_filename(self, filename: str) -> None:
        """Continue logging in ``filename``; the old name is kept if it cannot be opened."""
        with self._lock:
            if self._file is not None:
                self._file.close()
            self._file = self._open(filename)
            if self._file is not None:
                self.filename = filename
        self.log_info(f"  I  [Logger.set_filename] LOGGER filename: {self.filename}")

    def set_debug_mode(self, on: bool) -> None:
        self.debug_mode = on

    def log(self, message: str) -> None:
        """Write ``message`` unconditionally; nothing happens if no file is open."""
        stamp = datetime.now(timezone.utc).strftime("%Y-%b-%d %H:%M:%S.%f")
        with self._lock:
            if self._file is None:
                return
            self._file.write(f"{stamp}  {message}\n")
            self._file.flush()

    def log_debug(self, message: str) -> None:
        if self.debug_mode:
            self.log(message)

    def log_info(self, message: str) -> None:
        if not self.debug_mode:
            self.log(message)

    def close(self) -> None:
        """Write a closing note and close the file."""
        if self._file is None:
            return
        self.log_info("  I  [Logger.close] LOGGER closed")
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None


@functools.lru_cache(maxsize=None)
def get_logger() -> Logger:
    """Return the application-wide logger."""
    return Logger()


def log_error(where: str, message: str) -> None:
    get_logger().log(f"E    [{where}] {message}")


def log_warning(where: str, message: str) -> None:
    get_logger().log(f" W   [{where}] {message}")


def log_info(where: str, message: str) -> None:
    get_logger().log_info(f"  I  [{where}] {message}")


def log_debug(where: str, message: str) -> None:
    get_logger().log_debug(f"   D [{where}] {message}")