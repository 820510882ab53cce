"""Animation configuration model."""

from typing import Any

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator

from hyprgborder.exceptions import wrap_validation_error

from .color import ColorValue, color_from_string
from .enums import AnimationDirection, AnimationType


class AnimationConfig(BaseModel):
    """Border animation settings.

    Owned by the configuration UI, which may mutate it freely. Attribute
    assignment is not validated; ``validate_config()`` returns the checked
    copy, which is what ConfigGate hands to the preview worker.
    """

    animation_type: AnimationType = Field(
        default=AnimationType.RAINBOW, description="Animation style"
    )
    fps: int = Field(default=30, ge=1, le=120, description="Frames sent per second")
    speed: float = Field(
        default=0.01, ge=0.001, le=1.0, description="Phase advance per frame"
    )
    colors: list[ColorValue] = Field(
        default_factory=list,
        description="Ordered colors (pulse/solid need 1, gradient needs 2)",
    )
    direction: AnimationDirection = Field(
        default=AnimationDirection.CLOCKWISE, description="Rainbow hue direction"
    )

    @field_validator("colors", mode="before")
    @classmethod
    def coerce_color_strings(cls, v: Any) -> Any:
        """Accept ``"#RRGGBB"`` / ``"r,g,b"`` strings next to color models."""
        if isinstance(v, list):
            return [color_from_string(c) if isinstance(c, str) else c for c in v]
        return v

    @field_validator("colors")
    @classmethod
    def validate_color_count(cls, v: list, info: ValidationInfo) -> list:
        """Enforce the per-animation minimum color count."""
        animation_type = info.data.get("animation_type")
        if animation_type is not None and len(v) < animation_type.min_colors:
            raise ValueError(
                f"{animation_type.value} animation needs at least "
                f"{animation_type.min_colors} color(s), got {len(v)}"
            )
        return v

    @classmethod
    def default(cls) -> "AnimationConfig":
        """Rainbow at 30 FPS, speed 0.01, clockwise."""
        return cls()

    def validate_config(self, source: str | None = None) -> "AnimationConfig":
        """
        Re-run every field and invariant check on the current values.

        Values assigned after construction are coerced the way the constructor
        coerces them: a ``"#00FF00"`` appended to ``colors`` comes back as a
        HexColor and ``speed = "0.5"`` comes back as a float.

        Args:
            source: Where the configuration came from, for error messages

        Returns:
            A new validated configuration; ``self`` is left as it was

        Raises:
            ConfigValidationError: If any value is out of range or the color
                list is too short for the animation type
        """
        try:
            return type(self).model_validate(self.model_dump(warnings=False))
        except ValidationError as e:
            raise wrap_validation_error(e, source) from e
