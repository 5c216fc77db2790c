import pytest

from py_raycast.primitives import Material, Plane, Sphere, Triangle
from py_raycast.ray import Ray
from py_raycast.vectors import Vec3

DOWN_Z = Vec3(0, 0, -1)


@pytest.mark.parametrize("radius", [0.5, 1.0, 2.0])
def test_sphere_hit_distance(matte, radius):
    sphere = Sphere(Vec3(0, 0, 0), radius, matte)
    t = sphere.intersect(Ray(Vec3(0, 0, 5), DOWN_Z))
    assert t == pytest.approx(5 - radius)


def test_sphere_miss_returns_none(matte):
    sphere = Sphere(Vec3(0, 0, 0), 1, matte)
    assert sphere.intersect(Ray(Vec3(0, 5, 5), DOWN_Z)) is None


def test_sphere_from_inside_uses_far_root(matte):
    sphere = Sphere(Vec3(0, 0, 0), 1, matte)
    assert sphere.intersect(Ray(Vec3(0, 0, 0), DOWN_Z)) == pytest.approx(1.0)


def test_sphere_behind_ray_is_negative(matte):
    sphere = Sphere(Vec3(0, 0, 0), 1, matte)
    assert sphere.intersect(Ray(Vec3(0, 0, -5), DOWN_Z)) < 0


def test_sphere_normal_points_outward(matte):
    sphere = Sphere(Vec3(1, 1, 1), 2, matte)
    assert sphere.normal_at(Vec3(1, 1, 3)) == Vec3(0, 0, 1)


def test_plane_normal_is_normalized(matte):
    plane = Plane(Vec3(0, -1, 0), Vec3(0, 2, 0), matte)
    assert plane.normal_at(Vec3(5, -1, 5)) == Vec3(0, 1, 0)


def test_plane_hit_distance(matte):
    plane = Plane(Vec3(0, -1, 0), Vec3(0, 1, 0), matte)
    assert plane.intersect(Ray(Vec3(0, 0, 0), Vec3(0, -1, 0))) == pytest.approx(1.0)


def test_plane_parallel_ray_misses(matte):
    plane = Plane(Vec3(0, -1, 0), Vec3(0, 1, 0), matte)
    assert plane.intersect(Ray(Vec3(0, 0, 0), Vec3(1, 0, 0))) is None


def test_plane_behind_ray_is_negative(matte):
    plane = Plane(Vec3(0, -1, 0), Vec3(0, 1, 0), matte)
    assert plane.intersect(Ray(Vec3(0, 0, 0), Vec3(0, 1, 0))) < 0


def test_triangle_hit_and_normal(matte):
    tri = Triangle(Vec3(-1, -1, -2), Vec3(1, -1, -2), Vec3(0, 1, -2), matte)
    assert tri.intersect(Ray(Vec3(0, 0, 0), DOWN_Z)) == pytest.approx(2.0)
    assert tri.normal_at(Vec3(0, 0, -2)) == Vec3(0, 0, 1)


def test_triangle_miss_outside_edges(matte):
    tri = Triangle(Vec3(-1, -1, -2), Vec3(1, -1, -2), Vec3(0, 1, -2), matte)
    assert tri.intersect(Ray(Vec3(5, 0, 0), DOWN_Z)) is None
    assert tri.intersect(Ray(Vec3(0, 0, 0), Vec3(1, 0, 0))) is None


def test_material_fields_are_exposed_on_bodies():
    m = Material((0.1, 0.2, 0.3), [0.4, 0.5, 0.6], Vec3(1, 1, 1), 32)
    sphere = Sphere((0, 0, 0), 1, m)
    assert sphere.ambient == Vec3(0.1, 0.2, 0.3)
    assert sphere.diffuse == Vec3(0.4, 0.5, 0.6)
    assert sphere.specular == Vec3(1, 1, 1)
    assert sphere.shininess == 32.0
