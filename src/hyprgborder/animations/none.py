"""No-op animation."""

from typing import TYPE_CHECKING

from hyprgborder.models import AnimationConfig, AnimationType

from .base import AnimationProvider

if TYPE_CHECKING:
    from hyprgborder.ipc import IpcChannel


class NoAnimation(AnimationProvider):
    """Leaves the border untouched; every call does nothing."""

    animation_type = AnimationType.NONE

    def configure(self, config: AnimationConfig) -> None:
        pass

    def update(self, channel: "IpcChannel", elapsed: float) -> None:
        pass
