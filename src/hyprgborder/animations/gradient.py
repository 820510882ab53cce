"""Gradient animation: step through consecutive pairs of configured colors."""

from typing import TYPE_CHECKING

from hyprgborder.colors import COLORS, format_hyprland_color
from hyprgborder.models import AnimationConfig, AnimationType

from .base import GRADIENT_ANGLE, AnimationProvider

if TYPE_CHECKING:
    from hyprgborder.ipc import IpcChannel

DEFAULT_GRADIENT = (
    f"{format_hyprland_color(*COLORS.RED)} {format_hyprland_color(*COLORS.BLUE)} "
    f"{GRADIENT_ANGLE}deg"
)


def gradient_indices(phase: float, count: int) -> tuple[int, int]:
    """
    Color pair shown at ``phase``.

    Example:
        >>> gradient_indices(2.5, 3)
        (2, 0)
    """
    first = int(phase) % count
    return first, (first + 1) % count


class GradientAnimation(AnimationProvider):
    """Show colors[i] -> colors[i+1], advancing i as the phase passes each integer."""

    animation_type = AnimationType.GRADIENT

    def __init__(self) -> None:
        super().__init__()
        self.phase = 0.0
        self.angle = GRADIENT_ANGLE
        self.stops: list[str] = []

    def configure(self, config: AnimationConfig) -> None:
        self.speed = config.speed
        self.stops = [color.to_hyprland() for color in config.colors]

    def update(self, channel: "IpcChannel", elapsed: float) -> None:
        count = len(self.stops)
        if count < 2:
            self.send_border(channel, DEFAULT_GRADIENT)
            return

        first, second = gradient_indices(self.phase, count)
        self.send_border(channel, f"{self.stops[first]} {self.stops[second]} {self.angle}deg")

        self.phase += self.speed
        if self.phase >= count:
            self.phase = 0.0
