"""Render-wide settings passed explicitly through the pipeline."""

from dataclasses import dataclass, field

from py_raycast.errors import ConfigurationError
from py_raycast.vectors import Vec3

AMBIENT_LIGHT = 0.7
ACCURACY = 0.00001
SHADOW_BIAS = 0.1


@dataclass(frozen=True)
class RenderConfig:
    """Constants shared by the camera, the resolver and the shader.

    Attributes:
        ambient_light: Scene-wide scalar applied to each surface's ambient color.
        accuracy: Epsilon rejecting near-zero hits and self-intersections.
        shadow_bias: Offset along the light direction for shadow ray origins.
        background: Color written for pixels that hit nothing.
        corrected_camera: Apply the field of view and sample true row centres.
    """

    ambient_light: float = AMBIENT_LIGHT
    accuracy: float = ACCURACY
    shadow_bias: float = SHADOW_BIAS
    background: Vec3 = field(default_factory=lambda: Vec3(0, 0, 0))
    corrected_camera: bool = False

    def validate(self) -> "RenderConfig":
        """Raise ``ConfigurationError`` if a setting is out of range."""
        if self.accuracy <= 0:
            raise ConfigurationError(f"accuracy must be positive, got {self.accuracy}")
        if self.ambient_light < 0:
            raise ConfigurationError(f"ambient_light must not be negative, got {self.ambient_light}")
        if self.shadow_bias < 0:
            raise ConfigurationError(f"shadow_bias must not be negative, got {self.shadow_bias}")
        return self
