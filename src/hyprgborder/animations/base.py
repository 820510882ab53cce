"""Animation provider interface."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from hyprgborder.ipc import HyprlandBorderVars
from hyprgborder.models import AnimationConfig, AnimationType

if TYPE_CHECKING:
    from hyprgborder.ipc import IpcChannel

GRADIENT_ANGLE = 270  # Degrees; fixed sweep for two-stop gradients


class AnimationProvider(ABC):
    """
    Per-frame border color computation.

    The preview worker creates one provider per animation type, calls
    ``configure()`` whenever the configuration changes, ``update()`` once per
    frame and ``cleanup()`` when the provider is replaced or the preview stops.

    Each ``update()`` transmits at most one command on the channel it is
    given. Transport errors propagate to the caller.
    """

    animation_type: ClassVar[AnimationType]

    def __init__(self) -> None:
        self.speed = 0.01

    @abstractmethod
    def configure(self, config: AnimationConfig) -> None:
        """
        Replace the stored settings with those of ``config``.

        Args:
            config: Validated configuration; providers copy what they keep
        """

    @abstractmethod
    def update(self, channel: "IpcChannel", elapsed: float) -> None:
        """
        Compute and send the next frame.

        Args:
            channel: Open or reconnectable compositor channel
            elapsed: Seconds since the preview loop started
        """

    def cleanup(self) -> None:
        """Release anything the provider holds."""

    @staticmethod
    def send_border(channel: "IpcChannel", value: str) -> None:
        """Set the active border to ``value`` (single color or gradient)."""
        channel.send_keyword(HyprlandBorderVars.ACTIVE_BORDER, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(speed={self.speed})"
