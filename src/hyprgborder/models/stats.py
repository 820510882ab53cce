"""Preview statistics.

A dataclass rather than a pydantic model: it is rewritten on every frame by
the preview thread and copied out for every UI poll, so it stays minimal.
"""

from dataclasses import dataclass


@dataclass(slots=True)
class PreviewStats:
    """Frame counters for the live preview."""

    frames_rendered: int = 0
    last_frame_time: float = 0.0  # Monotonic seconds of the last good frame (0 = none yet)
    actual_fps: float = 0.0  # Measured from the last frame-to-frame delta
    connection_ok: bool = False

    def record_frame(self, now: float) -> None:
        """
        Count a successfully transmitted frame.

        Args:
            now: Monotonic timestamp (seconds) of the frame
        """
        if self.last_frame_time > 0:
            delta = now - self.last_frame_time
            if delta > 0:
                self.actual_fps = 1.0 / delta
        self.last_frame_time = now
        self.frames_rendered += 1
