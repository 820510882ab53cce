"""Pulse animation: the first configured color fading in and out."""

import math
from typing import TYPE_CHECKING

from hyprgborder.colors import COLORS, RGB, format_hyprland_color, scale_color
from hyprgborder.models import AnimationConfig, AnimationType

from .base import AnimationProvider

if TYPE_CHECKING:
    from hyprgborder.ipc import IpcChannel

TWO_PI = 2.0 * math.pi


def pulse_intensity(phase: float) -> float:
    """Brightness in [0, 1] for a phase in radians: ``(sin(phase) + 1) / 2``."""
    return (math.sin(phase) + 1.0) / 2.0


class PulseAnimation(AnimationProvider):
    """
    Scale the base color by a sine wave.

    Falls back to a steady red border when no color is configured.
    """

    animation_type = AnimationType.PULSE

    def __init__(self) -> None:
        super().__init__()
        self.speed = 0.02
        self.phase = 0.0
        self.base_color: RGB | None = None

    def configure(self, config: AnimationConfig) -> None:
        self.speed = config.speed
        self.base_color = config.colors[0].to_rgb() if config.colors else None

    def update(self, channel: "IpcChannel", elapsed: float) -> None:
        if self.base_color is None:
            self.send_border(channel, format_hyprland_color(*COLORS.RED))
            return

        pulsed = scale_color(self.base_color, pulse_intensity(self.phase))
        self.send_border(channel, format_hyprland_color(*pulsed))

        self.phase += self.speed
        if self.phase > TWO_PI:
            self.phase -= TWO_PI
