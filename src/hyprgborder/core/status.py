"""Status and statistics shared between the preview thread and readers."""

import threading
from dataclasses import replace

from hyprgborder.models import PreviewStats, PreviewStatus


class StatusCell:
    """
    Current PreviewStatus.

    Readers take the value without locking; a single attribute assignment is
    atomic, and readers tolerate a value one transition stale.
    """

    def __init__(self, status: PreviewStatus = PreviewStatus.STOPPED):
        self._status = status

    def load(self) -> PreviewStatus:
        return self._status

    def store(self, status: PreviewStatus) -> PreviewStatus:
        """Set the status; returns the previous value."""
        previous = self._status
        self._status = status
        return previous


class StatsTracker:
    """Lock-guarded PreviewStats written by the preview thread."""

    def __init__(self):
        self._stats = PreviewStats()
        self._lock = threading.Lock()

    def reset(self) -> None:
        with self._lock:
            self._stats = PreviewStats()

    def record_frame(self, now: float) -> None:
        """Count a successful frame at monotonic time ``now``; marks the connection good."""
        with self._lock:
            self._stats.record_frame(now)
            self._stats.connection_ok = True

    def set_connection(self, ok: bool) -> None:
        with self._lock:
            self._stats.connection_ok = ok

    def snapshot(self) -> PreviewStats:
        """Copy of the current statistics."""
        with self._lock:
            return replace(self._stats)
