"""Border animation providers.

```
AnimationType.RAINBOW   -> RainbowAnimation   (hue sweep, two-stop gradient)
AnimationType.PULSE     -> PulseAnimation     (first color, sine brightness)
AnimationType.GRADIENT  -> GradientAnimation  (consecutive color pairs)
AnimationType.SOLID     -> SolidAnimation     (static, redundant writes skipped)
AnimationType.NONE      -> NoAnimation        (no-op)
```
"""

from hyprgborder.models import AnimationType

from .base import GRADIENT_ANGLE, AnimationProvider
from .gradient import DEFAULT_GRADIENT, GradientAnimation, gradient_indices
from .none import NoAnimation
from .pulse import PulseAnimation, pulse_intensity
from .rainbow import RainbowAnimation, rainbow_gradient
from .solid import SolidAnimation

_PROVIDERS: dict[AnimationType, type[AnimationProvider]] = {
    AnimationType.RAINBOW: RainbowAnimation,
    AnimationType.PULSE: PulseAnimation,
    AnimationType.GRADIENT: GradientAnimation,
    AnimationType.SOLID: SolidAnimation,
    AnimationType.NONE: NoAnimation,
}


def create_animation_provider(animation_type: AnimationType) -> AnimationProvider:
    """
    Create an unconfigured provider for ``animation_type``.

    Args:
        animation_type: The animation style

    Returns:
        A fresh provider instance
    """
    return _PROVIDERS[AnimationType(animation_type)]()


__all__ = [
    "DEFAULT_GRADIENT",
    "GRADIENT_ANGLE",
    "AnimationProvider",
    "GradientAnimation",
    "NoAnimation",
    "PulseAnimation",
    "RainbowAnimation",
    "SolidAnimation",
    "create_animation_provider",
    "gradient_indices",
    "pulse_intensity",
    "rainbow_gradient",
]
