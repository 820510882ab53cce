"""Data models for HyprGBorder."""

from .color import ColorValue, HexColor, HsvColor, RgbColor, color_from_string
from .config import AnimationConfig
from .enums import AnimationDirection, AnimationType, PreviewStatus
from .stats import PreviewStats

__all__ = [
    # Models
    "AnimationConfig",
    "ColorValue",
    "HexColor",
    "HsvColor",
    "PreviewStats",
    "RgbColor",
    "color_from_string",
    # Enums
    "AnimationDirection",
    "AnimationType",
    "PreviewStatus",
]
