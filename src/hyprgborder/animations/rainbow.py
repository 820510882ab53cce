"""Rainbow animation: two opposite hues sweeping around the color wheel."""

from typing import TYPE_CHECKING

from hyprgborder.colors import format_hyprland_color, hsv_to_rgb
from hyprgborder.models import AnimationConfig, AnimationDirection, AnimationType

from .base import GRADIENT_ANGLE, AnimationProvider

if TYPE_CHECKING:
    from hyprgborder.ipc import IpcChannel


def rainbow_gradient(hue: float) -> str:
    """Gradient value with ``hue`` and the hue 180 degrees opposite."""
    c1 = format_hyprland_color(*hsv_to_rgb(hue, 1.0, 1.0))
    c2 = format_hyprland_color(*hsv_to_rgb((hue + 0.5) % 1.0, 1.0, 1.0))
    return f"{c1} {c2} {GRADIENT_ANGLE}deg"


class RainbowAnimation(AnimationProvider):
    """Rotate a two-stop rainbow gradient; direction sets the hue step sign."""

    animation_type = AnimationType.RAINBOW

    def __init__(self) -> None:
        super().__init__()
        self.hue = 0.0
        self.direction = AnimationDirection.CLOCKWISE

    def configure(self, config: AnimationConfig) -> None:
        self.speed = config.speed
        self.direction = config.direction

    def update(self, channel: "IpcChannel", elapsed: float) -> None:
        self.send_border(channel, rainbow_gradient(self.hue))
        self.hue = (self.hue + self.direction.sign * self.speed) % 1.0
