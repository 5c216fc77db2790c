"""Frame loop that turns a scene into a buffer of colors."""

import logging
import time
from typing import Optional

from py_raycast.config import RenderConfig
from py_raycast.scene import Scene
from py_raycast.tracer import closest_hit, shade
from py_raycast.vectors import Vec3

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 10


class PixelBuffer:
    """Dense row-major ``width * height`` grid of colors.

    Pixel ``(x, y)`` lives at index ``y * width + x``. Row ``0`` is the
    bottom of the image; the image writer flips rows on output.
    """

    def __init__(self, width: int, height: int, fill: Optional[Vec3] = None) -> None:
        self.width = width
        self.height = height
        self.pixels = [fill or Vec3(0, 0, 0)] * (width * height)

    def __getitem__(self, xy) -> Vec3:
        x, y = xy
        return self.pixels[y * self.width + x]

    def __setitem__(self, xy, color: Vec3) -> None:
        x, y = xy
        self.pixels[y * self.width + x] = color

    def __len__(self) -> int:
        return len(self.pixels)

    def __iter__(self):
        return iter(self.pixels)


def trace_pixel(scene: Scene, x: int, y: int, config: RenderConfig) -> Vec3:
    """Return the color of pixel ``(x, y)``."""
    ray = scene.camera.ray_for(x, y, scene.width, scene.height, config)
    hit = closest_hit(ray, scene.bodies)
    if hit is None:
        return config.background

    index, distance = hit
    if distance <= config.accuracy:
        return config.background
    position = ray.at(distance)
    return shade(position, ray.direction, scene.bodies, scene.lights, index, config)


def render(scene: Scene, config: Optional[RenderConfig] = None) -> PixelBuffer:
    """Render every pixel of *scene* and return the finished buffer.

    Raises:
        ConfigurationError: If the scene or configuration is invalid.
    """
    config = (config or RenderConfig()).validate()
    scene.validate()

    width, height = scene.width, scene.height
    logger.info("Rendering %dx%d: %d bodies, %d lights",
                width, height, len(scene.bodies), len(scene.lights))
    start = time.perf_counter()

    buffer = PixelBuffer(width, height, config.background)
    for y in range(height):
        if y % PROGRESS_EVERY == 0:
            logger.debug("Tracing row %d of %d", y, height)
        for x in range(width):
            buffer[x, y] = trace_pixel(scene, x, y, config)

    logger.info("Render finished in %.2fs", time.perf_counter() - start)
    return buffer
