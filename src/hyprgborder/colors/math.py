"""Pure color conversion helpers.

Colors are handled as plain ``(r, g, b)`` tuples of 8-bit ints here; the
pydantic color models in ``hyprgborder.models`` wrap these functions.
Float-to-byte conversions truncate toward zero, matching what the
compositor receives from every animation.
"""

import math
import string

from hyprgborder.exceptions import ColorFormatError

RGB = tuple[int, int, int]
HSV = tuple[float, float, float]

_HEX_DIGITS = frozenset(string.hexdigits)


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """Convert HSV (all components 0-1) to 8-bit RGB.

    Hue wraps, so ``h=1.0`` is the same color as ``h=0.0``.

    Example:
        >>> hsv_to_rgb(0.0, 1.0, 1.0)
        (255, 0, 0)
    """
    sector = math.floor(h * 6.0)
    i = int(sector) % 6
    f = h * 6.0 - sector
    p = v * (1.0 - s)
    q = v * (1.0 - f * s)
    t = v * (1.0 - (1.0 - f) * s)

    if i == 0:
        r, g, b = v, t, p
    elif i == 1:
        r, g, b = q, v, p
    elif i == 2:
        r, g, b = p, v, t
    elif i == 3:
        r, g, b = p, q, v
    elif i == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q

    return (int(r * 255.0), int(g * 255.0), int(b * 255.0))


def rgb_to_hsv(r: int, g: int, b: int) -> HSV:
    """Convert 8-bit RGB to HSV with every component in 0-1."""
    rf = r / 255.0
    gf = g / 255.0
    bf = b / 255.0

    max_val = max(rf, gf, bf)
    min_val = min(rf, gf, bf)
    delta = max_val - min_val

    h = 0.0
    s = 0.0
    v = max_val

    if delta != 0:
        s = delta / max_val

        if max_val == rf:
            h = ((gf - bf) / delta) % 6.0
        elif max_val == gf:
            h = (bf - rf) / delta + 2.0
        else:
            h = (rf - gf) / delta + 4.0

        h /= 6.0
        if h < 0:
            h += 1.0

    return (h, s, v)


def parse_hex_color(hex_str: str) -> RGB:
    """Parse ``#RRGGBB`` into an RGB tuple.

    Raises:
        ColorFormatError: On any other length, a missing ``#`` or a non-hex digit
    """
    if len(hex_str) != 7 or hex_str[0] != "#":
        raise ColorFormatError(hex_str)
    # int(..., 16) tolerates signs, whitespace and underscores
    if not all(c in _HEX_DIGITS for c in hex_str[1:]):
        raise ColorFormatError(hex_str)

    return (int(hex_str[1:3], 16), int(hex_str[3:5], 16), int(hex_str[5:7], 16))


def format_hex_color(r: int, g: int, b: int) -> str:
    """Format RGB as ``#RRGGBB`` (upper case)."""
    return f"#{r:02X}{g:02X}{b:02X}"


def format_hyprland_color(r: int, g: int, b: int) -> str:
    """Format RGB as an opaque Hyprland color token (``0xffRRGGBB``)."""
    return f"0xff{r:02X}{g:02X}{b:02X}"


def hex_to_hyprland(hex_str: str) -> str:
    """Map ``#RRGGBB`` to ``0xffRRGGBB``, forcing alpha to opaque."""
    parse_hex_color(hex_str)
    return f"0xff{hex_str[1:]}"


def parse_rgb_color(rgb_str: str) -> RGB:
    """Parse ``"r,g,b"`` (spaces allowed around each value).

    Raises:
        ColorFormatError: If there are not exactly three integer parts in 0-255
    """
    parts = rgb_str.split(",")
    if len(parts) != 3:
        raise ColorFormatError(rgb_str, expected="r,g,b")

    values = []
    for part in parts:
        part = part.strip(" ")
        if not (part.isascii() and part.isdigit()) or int(part) > 255:
            raise ColorFormatError(rgb_str, expected="r,g,b")
        values.append(int(part))

    return (values[0], values[1], values[2])


def interpolate_colors(color1: RGB, color2: RGB, t: float) -> RGB:
    """Linear RGB blend; ``t`` is clamped to [0, 1]."""
    t = max(0.0, min(1.0, t))
    return (
        int(color1[0] * (1.0 - t) + color2[0] * t),
        int(color1[1] * (1.0 - t) + color2[1] * t),
        int(color1[2] * (1.0 - t) + color2[2] * t),
    )


def scale_color(color: RGB, intensity: float) -> RGB:
    """Scale each channel by ``intensity``, truncating toward zero.

    Example:
        >>> format_hex_color(*scale_color((255, 128, 0), 0.5))
        '#7F4000'
    """
    return (int(color[0] * intensity), int(color[1] * intensity), int(color[2] * intensity))
