"""Pinhole camera with a fixed orientation and the primary ray mapping."""

import math

from py_raycast.ray import Ray
from py_raycast.vectors import Vec3

FORWARD = Vec3(0, 0, -1)
RIGHT = Vec3(1, 0, 0)
DOWN = Vec3(0, -1, 0)


def generate_ray(x: int, y: int, width: int, height: int, aspect_ratio: float,
                 fov: float, position: Vec3, corrected: bool = False) -> Ray:
    """Return the primary ray through the centre of pixel ``(x, y)``.

    The sample point is normalized to ``[0, 1]`` so that the image plane
    spans the shorter image dimension. By default ``fov`` is ignored and
    rows are sampled one pixel above their centre. With ``corrected`` set,
    the plane offsets are scaled by ``2*tan(fov/2)`` and each row is
    sampled at its true centre.
    """
    row = (height - y) - 0.5 if corrected else (height - y) + 0.5

    if width > height:
        xamt = ((x + 0.5) / width) * aspect_ratio - ((width - height) / height) / 2
        yamt = row / height
    elif height > width:
        xamt = (x + 0.5) / width
        yamt = (row / height) / aspect_ratio - ((height - width) / width) / 2
    else:
        xamt = (x + 0.5) / width
        yamt = row / height

    scale = 2 * math.tan(math.radians(fov) / 2) if corrected else 1.0
    offset = RIGHT.s_mult((xamt - 0.5) * scale).add(DOWN.s_mult((yamt - 0.5) * scale))
    return Ray(position, FORWARD.add(offset).norm())


class Camera:
    """Camera looking down ``-z`` with ``+x`` right and ``+y`` up."""

    def __init__(self, position: Vec3, fov: float = 90.0, aspect_ratio: float = 1.0) -> None:
        """Create a camera.

        Args:
            position: Eye position, the origin of every primary ray.
            fov: Field of view in degrees.
            aspect_ratio: Width over height of the image plane.
        """
        self.position = Vec3.of(position)
        self.fov = float(fov)
        self.aspect_ratio = float(aspect_ratio)

    def ray_for(self, x: int, y: int, width: int, height: int, config) -> Ray:
        """Return the primary ray for pixel ``(x, y)`` under *config*."""
        return generate_ray(x, y, width, height, self.aspect_ratio, self.fov,
                            self.position, corrected=config.corrected_camera)

    def __repr__(self) -> str:
        return f"Camera({self.position!r}, fov={self.fov!r}, aspect_ratio={self.aspect_ratio!r})"
