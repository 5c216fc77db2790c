import math

import pytest

from py_raycast.camera import Camera, generate_ray
from py_raycast.config import RenderConfig
from py_raycast.vectors import Vec3

EYE = Vec3(1, 2, 3)


def slope(direction):
    """Image-plane offsets of a direction relative to the forward axis."""
    return direction.x / -direction.z, direction.y / -direction.z


def test_origin_is_camera_position():
    ray = generate_ray(0, 0, 4, 4, 1.0, 90, EYE)
    assert ray.origin == EYE
    assert ray.direction.mag() == pytest.approx(1.0)


def test_square_center_column_looks_forward():
    ray = generate_ray(2, 2, 5, 5, 1.0, 90, EYE)
    dx, dy = slope(ray.direction)
    assert dx == pytest.approx(0.0)
    # default framing samples each row one pixel above its centre
    assert dy == pytest.approx(-1 / 5)


def test_corrected_center_pixel_within_half_pixel():
    fov = math.degrees(2 * math.atan(0.5))
    ray = generate_ray(2, 2, 5, 5, 1.0, fov, EYE, corrected=True)
    dx, dy = slope(ray.direction)
    half_pixel = 0.5 / 5
    assert abs(dx) <= half_pixel
    assert abs(dy) <= half_pixel


def test_corrected_applies_field_of_view():
    ray = generate_ray(0, 0, 2, 2, 1.0, 90, EYE, corrected=True)
    dx, dy = slope(ray.direction)
    assert dx == pytest.approx(-0.5)
    assert dy == pytest.approx(-0.5)


def test_field_of_view_ignored_by_default():
    a = generate_ray(0, 0, 4, 4, 1.0, 30, EYE)
    b = generate_ray(0, 0, 4, 4, 1.0, 120, EYE)
    assert a.direction == b.direction


def test_row_zero_looks_down():
    dx, dy = slope(generate_ray(1, 0, 4, 4, 1.0, 90, EYE).direction)
    assert dy == pytest.approx(-0.625)


def test_wide_image_is_symmetric_across_columns():
    left = generate_ray(0, 1, 8, 4, 2.0, 90, EYE).direction
    right = generate_ray(7, 1, 8, 4, 2.0, 90, EYE).direction
    assert left.x == pytest.approx(-right.x)
    assert slope(left)[0] == pytest.approx(-0.875)


def test_tall_image_is_symmetric_across_columns():
    left = generate_ray(0, 3, 4, 8, 0.5, 90, EYE).direction
    right = generate_ray(3, 3, 4, 8, 0.5, 90, EYE).direction
    assert left.x == pytest.approx(-right.x)
    assert left.y == pytest.approx(right.y)


def test_camera_ray_for_uses_config():
    camera = Camera(EYE, fov=90, aspect_ratio=1.0)
    plain = camera.ray_for(0, 0, 2, 2, RenderConfig())
    corrected = camera.ray_for(0, 0, 2, 2, RenderConfig(corrected_camera=True))
    assert plain.direction == generate_ray(0, 0, 2, 2, 1.0, 90, EYE).direction
    assert corrected.direction == generate_ray(0, 0, 2, 2, 1.0, 90, EYE, corrected=True).direction
