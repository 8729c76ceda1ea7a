"""Background thread that runs a maintenance task on a fixed interval."""

from __future__ import annotations

import logging
import threading
from typing import Callable

logger = logging.getLogger("pastebin")


class Sweeper:
    """Run ``task`` every ``interval_seconds`` until stopped.

    Each thread gets its own stop event, so a thread that outlives a
    ``stop()`` timeout still exits and is never revived by a later
    ``start()``.
    """

    def __init__(
        self,
        task: Callable[[], object],
        *,
        interval_seconds: float,
        name: str = "snippet-sweeper",
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self.task = task
        self.interval_seconds = interval_seconds
        self.name = name
        self._stop_event: threading.Event | None = None
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    @property
    def running(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive()

    def start(self) -> None:
        with self._lock:
            if self.running:
                return
            stop_event = threading.Event()
            self._stop_event = stop_event
            self._thread = threading.Thread(
                target=self._run, args=(stop_event,), name=self.name, daemon=True
            )
            self._thread.start()
        logger.debug("Started %s (interval %.1fs)", self.name, self.interval_seconds)

    def stop(self, timeout: float | None = 5.0) -> None:
        """Wake the thread and wait for it to exit."""
        with self._lock:
            thread = self._thread
            stop_event = self._stop_event
            self._thread = None
            self._stop_event = None
        if stop_event is not None:
            stop_event.set()
        if thread is None:
            return
        thread.join(timeout)
        if thread.is_alive():
            logger.warning("%s did not stop within %.1fs", self.name, timeout or 0.0)
        else:
            logger.debug("Stopped %s", self.name)

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.interval_seconds):
            try:
                self.task()
            except Exception:
                logger.exception("%s task failed", self.name)


__all__ = ["Sweeper"]
