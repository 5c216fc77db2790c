"""Small immutable 3D vector used for points, directions and colors."""


class Vec3:
    """Simple 3D vector with basic arithmetic helpers.

    Colors reuse the same type, with ``x``, ``y`` and ``z`` holding the red,
    green and blue channels.
    """

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float) -> None:
        """Create a new vector from components."""
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Vec3 is immutable")

    @classmethod
    def of(cls, value) -> "Vec3":
        """Build a vector from another ``Vec3`` or any 3-item sequence."""
        if isinstance(value, cls):
            return value
        x, y, z = value
        return cls(x, y, z)

    def dot(self, other: "Vec3") -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def sqMag(self) -> float:
        """Return the squared magnitude of the vector."""
        return self.x**2 + self.y**2 + self.z**2

    def mag(self) -> float:
        """Return the magnitude of the vector."""
        return self.sqMag()**0.5

    def norm(self) -> "Vec3":
        """Return a normalized copy of the vector.

        The zero vector has no direction and is returned unchanged.
        """
        m = self.mag()
        if m == 0:
            return self
        return Vec3(self.x / m, self.y / m, self.z / m)

    def s_mult(self, other: float) -> "Vec3":
        """Return the vector scaled by *other*."""
        return Vec3(self.x * other, self.y * other, self.z * other)

    def mul(self, other: "Vec3") -> "Vec3":
        """Return the component-wise product with *other*."""
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)

    def add(self, other: "Vec3") -> "Vec3":
        """Return the sum of this vector and *other*."""
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: "Vec3") -> "Vec3":
        """Return the difference between this vector and *other*."""
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def neg(self) -> "Vec3":
        """Return the negated vector."""
        return Vec3(-self.x, -self.y, -self.z)

    def cross(self, other: "Vec3") -> "Vec3":
        """Return the cross product with *other*."""
        return Vec3(self.y * other.z - self.z * other.y,
                    self.z * other.x - self.x * other.z,
                    self.x * other.y - self.y * other.x)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return (self.x, self.y, self.z) == (other.x, other.y, other.z)

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __repr__(self) -> str:
        return f"Vec3({self.x!r}, {self.y!r}, {self.z!r})"


ZERO = Vec3(0, 0, 0)
