"""Enumerations for HyprGBorder."""

from enum import Enum


class AnimationType(str, Enum):
    """Border animation styles."""

    RAINBOW = "rainbow"  # Two opposite hues rotating around the wheel
    PULSE = "pulse"  # First color fading in and out
    GRADIENT = "gradient"  # Cycle through consecutive color pairs
    SOLID = "solid"  # Static color
    NONE = "none"  # Leave the border alone

    @property
    def min_colors(self) -> int:
        """Minimum number of configured colors this animation needs."""
        if self is AnimationType.GRADIENT:
            return 2
        if self in (AnimationType.PULSE, AnimationType.SOLID):
            return 1
        return 0


class AnimationDirection(str, Enum):
    """Direction the rainbow hue travels."""

    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"

    @property
    def sign(self) -> float:
        """+1.0 for clockwise, -1.0 for counter-clockwise."""
        return 1.0 if self is AnimationDirection.CLOCKWISE else -1.0


class PreviewStatus(str, Enum):
    """Lifecycle state of the live preview worker."""

    STOPPED = "stopped"
    STARTING = "starting"
    RUNNING = "running"
    ERROR = "error"

    @property
    def label(self) -> str:
        """Text shown in status displays."""
        return {
            PreviewStatus.STOPPED: "Stopped",
            PreviewStatus.STARTING: "Starting...",
            PreviewStatus.RUNNING: "Running",
            PreviewStatus.ERROR: "Error",
        }[self]
