"""Color value models.

A configured color is one of three tagged variants:

- ``HexColor(value="#FF8000")``
- ``RgbColor(r=255, g=128, b=0)``
- ``HsvColor(h=0.08, s=1.0, v=1.0)``

The variants are frozen so a configuration copy can never be changed
through a shared color object. ``ColorValue`` is the discriminated union
used in ``AnimationConfig.colors``.
"""

from abc import ABC, abstractmethod
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hyprgborder.colors.math import (
    RGB,
    format_hex_color,
    format_hyprland_color,
    hsv_to_rgb,
    parse_hex_color,
    parse_rgb_color,
)


class _ColorModel(BaseModel, ABC):
    """Shared conversions for every color variant.

    Only the tagged subclasses are instantiated; each supplies ``to_rgb()``.
    """

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def to_rgb(self) -> RGB:
        """Convert to an 8-bit ``(r, g, b)`` tuple."""

    def to_hex(self) -> str:
        """Convert to ``#RRGGBB``."""
        return format_hex_color(*self.to_rgb())

    def to_hyprland(self) -> str:
        """Convert to the compositor's ``0xffRRGGBB`` token."""
        return format_hyprland_color(*self.to_rgb())


class HexColor(_ColorModel):
    """Color written as ``#RRGGBB``."""

    kind: Literal["hex"] = "hex"
    value: str = Field(description="Hex color in #RRGGBB format")

    @field_validator("value")
    @classmethod
    def validate_hex(cls, v: str) -> str:
        """Reject anything that is not exactly ``#`` plus six hex digits."""
        parse_hex_color(v)
        return v

    def to_rgb(self) -> RGB:
        return parse_hex_color(self.value)


class RgbColor(_ColorModel):
    """Standard 8-bit RGB color."""

    kind: Literal["rgb"] = "rgb"
    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    def to_rgb(self) -> RGB:
        return (self.r, self.g, self.b)


class HsvColor(_ColorModel):
    """HSV color with every component in 0-1."""

    kind: Literal["hsv"] = "hsv"
    h: float = Field(ge=0.0, le=1.0, description="Hue (0-1)")
    s: float = Field(ge=0.0, le=1.0, description="Saturation (0-1)")
    v: float = Field(ge=0.0, le=1.0, description="Value (0-1)")

    def to_rgb(self) -> RGB:
        return hsv_to_rgb(self.h, self.s, self.v)


ColorValue = Annotated[Union[HexColor, RgbColor, HsvColor], Field(discriminator="kind")]


def color_from_string(text: str) -> HexColor | RgbColor:
    """Build a color from user input: ``#RRGGBB`` or ``r,g,b``.

    Raises:
        ColorFormatError: If the text matches neither format
    """
    text = text.strip()
    if text.startswith("#"):
        parse_hex_color(text)
        return HexColor(value=text)
    r, g, b = parse_rgb_color(text)
    return RgbColor(r=r, g=g, b=b)
