"""The ray value every geometric query is made with."""

from py_raycast.vectors import Vec3


class Ray:
    """Ray with an ``origin`` and a unit ``direction``.

    The direction is expected to be normalized by the caller. Rays are
    immutable once built.
    """

    __slots__ = ("origin", "direction")

    def __init__(self, origin: Vec3, direction: Vec3) -> None:
        object.__setattr__(self, "origin", origin)
        object.__setattr__(self, "direction", direction)

    def __setattr__(self, name, value):
        raise AttributeError("Ray is immutable")

    def at(self, t: float) -> Vec3:
        """Return the point reached after travelling ``t`` along the ray."""
        return self.origin.add(self.direction.s_mult(t))

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
