from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

ROUND_DURATION = 60


@dataclass(frozen=True)
class TimerState:
    remaining: int
    running: bool
    expired: bool


class CountdownTimer:
    """Once-per-second countdown running on a background thread.

    All shared fields live behind one lock. The foreground reads them through
    ``state()`` on every redraw; the thread only writes them once per tick.
    ``cancel()`` and ``halt()`` wait on a one-shot completion event instead of
    polling ``running``.
    """

    def __init__(self, duration: int = ROUND_DURATION, interval: float = 1.0) -> None:
        self.duration = duration
        self.interval = interval
        self._lock = threading.Lock()
        self._remaining = duration
        self._running = False
        self._expired = False
        self._stop_requested = False
        self._wake = threading.Event()
        self._done = threading.Event()
        self._done.set()
        self._thread: Optional[threading.Thread] = None

    # ---------------------------
    # Foreground API
    # ---------------------------

    def reset(self) -> None:
        with self._lock:
            if self._running:
                return
            self._remaining = self.duration
            self._expired = False

    def start(self) -> bool:
        """Launch the countdown thread. Returns False if one is already running."""
        with self._lock:
            if self._running:
                return False
            self._running = True
            self._expired = False
            self._stop_requested = False
            self._wake.clear()
            self._done.clear()
        self._thread = threading.Thread(target=self._run, name="countdown", daemon=True)
        self._thread.start()
        logger.debug("countdown started at %ds", self.remaining)
        return True

    def cancel(self) -> None:
        """Force the clock to zero and block until the thread has exited."""
        with self._lock:
            self._remaining = 0
            self._stop_requested = True
        self._wake.set()
        self._done.wait()
        # the thread may have expired on its own just before the request
        with self._lock:
            self._expired = False

    def halt(self) -> None:
        """Stop the thread but keep the remaining time as it is."""
        with self._lock:
            self._stop_requested = True
        self._wake.set()
        self._done.wait()

    def join(self, timeout: Optional[float] = None) -> bool:
        return self._done.wait(timeout)

    def consume_expired(self) -> bool:
        with self._lock:
            expired, self._expired = self._expired, False
        return expired

    def state(self) -> TimerState:
        with self._lock:
            return TimerState(self._remaining, self._running, self._expired)

    @property
    def remaining(self) -> int:
        with self._lock:
            return self._remaining

    @property
    def running(self) -> bool:
        with self._lock:
            return self._running

    @property
    def elapsed(self) -> int:
        return self.duration - self.remaining

    # ---------------------------
    # Countdown thread
    # ---------------------------

    def _run(self) -> None:
        cancelled = False
        try:
            while True:
                self._wake.wait(self.interval)
                with self._lock:
                    if self._stop_requested:
                        cancelled = True
                        break
                    if self._remaining > 0:
                        self._remaining -= 1
                    if self._remaining == 0:
                        self._expired = True
                        break
        finally:
            with self._lock:
                self._running = False
            self._done.set()
            logger.debug("countdown stopped (cancelled=%s)", cancelled)
