"""Closest-hit resolution and local Phong shading with hard shadows."""

from typing import Optional, Sequence, Tuple

from py_raycast.config import RenderConfig
from py_raycast.ray import Ray
from py_raycast.vectors import Vec3


def closest_hit(ray: Ray, bodies: Sequence) -> Optional[Tuple[int, float]]:
    """Return ``(index, distance)`` of the nearest forward hit, or ``None``.

    Only strictly positive distances count. When two bodies are equally
    close the one with the lower index wins.
    """
    nearest = None
    for index, body in enumerate(bodies):
        t = body.intersect(ray)
        if t is None or not t > 0:
            continue
        if nearest is None or t < nearest[1]:
            nearest = (index, t)
    return nearest


def is_shadowed(position: Vec3, light, bodies: Sequence, config: RenderConfig) -> bool:
    """Check if *position* is hidden from *light* by any body.

    The shadow ray starts ``config.shadow_bias`` towards the light so the
    surface being shaded does not occlude itself.
    """
    to_light = light.position.sub(position)
    distance = to_light.mag()
    direction = to_light.norm()
    shadow_ray = Ray(position.add(direction.s_mult(config.shadow_bias)), direction)

    for body in bodies:
        t = body.intersect(shadow_ray)
        if t is not None and config.accuracy < t <= distance:
            return True
    return False


def shade(position: Vec3, direction: Vec3, bodies: Sequence, lights: Sequence,
          index: int, config: Optional[RenderConfig] = None) -> Vec3:
    """Return the color seen at *position* on ``bodies[index]``.

    Args:
        position: World-space hit point.
        direction: Direction of the incoming primary ray.
        bodies: Every body in the scene, used for shadow tests.
        lights: Point lights illuminating the scene.
        index: Index of the body that was hit.
        config: Ambient constant, epsilon and shadow bias.

    Returns:
        The unclamped sum of the ambient term and the diffuse and specular
        terms of each visible light.
    """
    config = config or RenderConfig()
    body = bodies[index]
    color = body.ambient.s_mult(config.ambient_light)
    normal = body.normal_at(position).norm()

    for light in lights:
        light_dir = light.position.sub(position).norm()
        cosine = normal.dot(light_dir)
        if cosine <= 0:
            continue
        if is_shadowed(position, light, bodies, config):
            continue

        diffuse = body.diffuse.s_mult(max(0.0, cosine))
        r = normal.s_mult(2 * light_dir.dot(normal)).sub(light_dir).norm()
        r_dot_l = r.dot(light_dir)
        if r_dot_l > config.accuracy:
            specular = body.specular.s_mult(max(0.0, r_dot_l ** body.shininess))
            color = color.add(light.color.mul(diffuse.add(specular)))
        else:
            color = color.add(light.color.mul(diffuse))
    return color
