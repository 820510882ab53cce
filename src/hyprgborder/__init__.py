"""HyprGBorder: animated window borders for the Hyprland compositor."""

__version__ = "0.1.0"

from .core import ConfigGate, PreviewWorker
from .models import AnimationConfig, AnimationType, PreviewStats, PreviewStatus

__all__ = [
    "AnimationConfig",
    "AnimationType",
    "ConfigGate",
    "PreviewStats",
    "PreviewStatus",
    "PreviewWorker",
]
