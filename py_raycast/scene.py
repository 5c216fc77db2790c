"""Scene container handed to the renderer by whoever builds the scene."""

from py_raycast.camera import Camera
from py_raycast.errors import ConfigurationError
from py_raycast.vectors import Vec3


class Light:
    """Point light source."""

    def __init__(self, p: Vec3, color) -> None:
        self.p = Vec3.of(p)
        self.color = Vec3.of(color)

    @property
    def position(self) -> Vec3:
        return self.p

    def __repr__(self) -> str:
        return f"Light({self.p!r}, {self.color!r})"


class Scene:
    """Camera, bodies, lights and output size.

    A scene is built once and treated as read-only while it is rendered.
    Bodies keep their insertion order, which decides ties between equally
    distant hits.
    """

    def __init__(self, camera: Camera, bodies=None, lights=None,
                 width: int = 0, height: int = 0) -> None:
        self.camera = camera
        self.bodies = list(bodies) if bodies else []
        self.lights = list(lights) if lights else []
        self.width = width
        self.height = height

    def validate(self) -> "Scene":
        """Fail fast on a scene that cannot be rendered."""
        if self.camera is None:
            raise ConfigurationError("scene has no camera")
        for name in ("width", "height"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ConfigurationError(f"scene {name} must be a positive integer, got {value!r}")
        return self
