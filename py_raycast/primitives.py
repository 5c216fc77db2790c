"""Geometric primitives and the surface material they carry.

Every primitive implements the same small capability set used by the
tracer: ``intersect`` a ray, report the ``normal_at`` a surface point and
expose its material coefficients. The tracer never looks at concrete
shape types.
"""

from typing import Optional

from py_raycast.ray import Ray
from py_raycast.vectors import Vec3

PARALLEL_EPSILON = 0.00001


class Material:
    """Phong reflectance coefficients for a renderable object."""

    def __init__(self, ambient, diffuse, specular, shininess: float) -> None:
        """Initialize a material.

        Args:
            ambient: RGB ambient reflectance, a ``Vec3`` or 3-item sequence.
            diffuse: RGB diffuse reflectance.
            specular: RGB specular reflectance.
            shininess: Specular exponent.
        """
        self.ambient = Vec3.of(ambient)
        self.diffuse = Vec3.of(diffuse)
        self.specular = Vec3.of(specular)
        self.shininess = float(shininess)

    def __repr__(self) -> str:
        return (f"Material({self.ambient!r}, {self.diffuse!r}, "
                f"{self.specular!r}, {self.shininess!r})")


class Body:
    """Base for scene objects.

    Subclasses implement :meth:`intersect` and :meth:`normal_at`.
    """

    def __init__(self, m: Material) -> None:
        self.m = m

    @property
    def ambient(self) -> Vec3:
        return self.m.ambient

    @property
    def diffuse(self) -> Vec3:
        return self.m.diffuse

    @property
    def specular(self) -> Vec3:
        return self.m.specular

    @property
    def shininess(self) -> float:
        return self.m.shininess

    def intersect(self, ray: Ray) -> Optional[float]:
        """Return the distance along *ray* to this body, or ``None``.

        A non-positive distance means the body lies behind the ray origin.
        """
        raise NotImplementedError

    def normal_at(self, point: Vec3) -> Vec3:
        """Return the unit outward normal at *point* on the surface."""
        raise NotImplementedError


class Sphere(Body):
    """Simple sphere primitive."""

    def __init__(self, c: Vec3, r: float, m: Material) -> None:
        """Create a sphere.

        Args:
            c: Centre of the sphere.
            r: Radius of the sphere.
            m: Material applied to the surface.
        """
        super().__init__(m)
        self.c = Vec3.of(c)
        self.r = float(r)

    def intersect(self, ray: Ray) -> Optional[float]:
        """Return the nearest positive root, or the far root from inside.

        ``None`` is returned when the ray misses or only grazes the sphere.
        """
        oc = ray.origin.sub(self.c)
        k = ray.direction.dot(oc)
        dis = (k**2) - (oc.sqMag() - (self.r**2))
        if dis <= 0:
            return None
        t1 = -k + dis**0.5
        t2 = -k - dis**0.5
        t = min(t1, t2)
        return t if t > 0 else max(t1, t2)

    def normal_at(self, point: Vec3) -> Vec3:
        return point.sub(self.c).norm()

    def __repr__(self) -> str:
        return f"Sphere({self.c!r}, {self.r!r})"


class Plane(Body):
    """Infinite plane primitive."""

    def __init__(self, p: Vec3, n: Vec3, m: Material) -> None:
        """Create a plane defined by point ``p`` and normal ``n``."""
        super().__init__(m)
        self.p = Vec3.of(p)
        self.n = Vec3.of(n).norm()

    def intersect(self, ray: Ray) -> Optional[float]:
        """Return the signed distance to the plane, ``None`` when parallel."""
        denominator = ray.direction.dot(self.n)
        if denominator == 0:
            return None
        return self.p.sub(ray.origin).dot(self.n) / denominator

    def normal_at(self, point: Vec3) -> Vec3:
        return self.n

    def __repr__(self) -> str:
        return f"Plane({self.p!r}, {self.n!r})"


class Triangle(Body):
    """Single triangle with counter-clockwise winding."""

    def __init__(self, v1: Vec3, v2: Vec3, v3: Vec3, m: Material) -> None:
        super().__init__(m)
        self.v1 = Vec3.of(v1)
        self.v2 = Vec3.of(v2)
        self.v3 = Vec3.of(v3)
        self.e1 = self.v2.sub(self.v1)
        self.e2 = self.v3.sub(self.v1)
        self.n = self.e1.cross(self.e2).norm()

    def intersect(self, ray: Ray) -> Optional[float]:
        """Moller-Trumbore test; ``None`` for parallel rays or outside hits."""
        h = ray.direction.cross(self.e2)
        a = self.e1.dot(h)
        if abs(a) < PARALLEL_EPSILON:
            return None

        f = 1.0 / a
        s = ray.origin.sub(self.v1)
        u = f * s.dot(h)
        if u < 0.0 or u > 1.0:
            return None

        q = s.cross(self.e1)
        v = f * ray.direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return None

        t = f * self.e2.dot(q)
        if t > PARALLEL_EPSILON:
            return t
        return None

    def normal_at(self, point: Vec3) -> Vec3:
        return self.n

    def __repr__(self) -> str:
        return f"Triangle({self.v1!r}, {self.v2!r}, {self.v3!r})"
