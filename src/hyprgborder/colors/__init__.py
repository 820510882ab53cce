"""Color math and the fixed colors the animations fall back to.

Everything in this package works on plain 8-bit ``(r, g, b)`` tuples. The
user-facing color values (hex, RGB, HSV) live in ``hyprgborder.models`` and
convert to these tuples before any math is done.

Wire format: the compositor takes colors as ``0xAARRGGBB``. Alpha is always
forced to ``ff`` (opaque)::

    #FF8000  ->  0xffFF8000
"""

from .math import (
    HSV,
    RGB,
    format_hex_color,
    format_hyprland_color,
    hex_to_hyprland,
    hsv_to_rgb,
    interpolate_colors,
    parse_hex_color,
    parse_rgb_color,
    rgb_to_hsv,
    scale_color,
)


class COLORS:
    """Fallback colors used when an animation has no usable color list."""

    RED: RGB = (255, 0, 0)
    """Pulse fallback and first gradient stop"""

    BLUE: RGB = (0, 0, 255)
    """Second gradient stop"""

    WHITE: RGB = (255, 255, 255)
    """Solid fallback"""


__all__ = [
    "COLORS",
    "HSV",
    "RGB",
    "format_hex_color",
    "format_hyprland_color",
    "hex_to_hyprland",
    "hsv_to_rgb",
    "interpolate_colors",
    "parse_hex_color",
    "parse_rgb_color",
    "rgb_to_hsv",
    "scale_color",
]
