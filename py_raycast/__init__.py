"""Single-bounce ray caster with Phong shading and hard shadows."""

from py_raycast.camera import Camera, generate_ray
from py_raycast.config import RenderConfig
from py_raycast.errors import ConfigurationError, RaycastError
from py_raycast.image import to_image, write_image
from py_raycast.primitives import Body, Material, Plane, Sphere, Triangle
from py_raycast.ray import Ray
from py_raycast.render import PixelBuffer, render
from py_raycast.scene import Light, Scene
from py_raycast.tracer import closest_hit, is_shadowed, shade
from py_raycast.vectors import Vec3

__version__ = "0.1.0"
