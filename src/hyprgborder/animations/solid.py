"""Solid animation: a static border color."""

from typing import TYPE_CHECKING, Optional

from hyprgborder.colors import COLORS, format_hyprland_color
from hyprgborder.models import AnimationConfig, AnimationType

from .base import AnimationProvider

if TYPE_CHECKING:
    from hyprgborder.ipc import IpcChannel


class SolidAnimation(AnimationProvider):
    """
    Keep the border on one configured color.

    Called every frame like any provider, but only writes when the target
    color differs from the last one sent, or the channel has reconnected since
    (the compositor may have lost the color with the connection).
    """

    animation_type = AnimationType.SOLID

    def __init__(self) -> None:
        super().__init__()
        self.colors: list[str] = []
        self.color_index = 0
        self.last_sent: Optional[str] = None
        self._sent_epoch = -1

    def configure(self, config: AnimationConfig) -> None:
        self.colors = [color.to_hyprland() for color in config.colors]
        self.color_index = 0
        self.last_sent = None  # Force the next update to send

    def set_color_index(self, index: int) -> None:
        """Switch to another configured color; out-of-range indices are ignored."""
        if 0 <= index < len(self.colors):
            self.color_index = index

    def update(self, channel: "IpcChannel", elapsed: float) -> None:
        if self.colors:
            target = self.colors[self.color_index]
        else:
            target = format_hyprland_color(*COLORS.WHITE)

        if target == self.last_sent and channel.epoch == self._sent_epoch:
            return

        self.send_border(channel, target)
        self.last_sent = target
        self._sent_epoch = channel.epoch

    def cleanup(self) -> None:
        self.last_sent = None
