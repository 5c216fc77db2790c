import pytest

from py_raycast.primitives import Material


class FixedBody:
    """Body whose intersect always reports the same distance."""

    def __init__(self, distance, ambient=(0, 0, 0)):
        self.distance = distance
        self.m = Material(ambient, (0, 0, 0), (0, 0, 0), 1)

    def intersect(self, ray):
        return self.distance


@pytest.fixture
def fixed_body():
    return FixedBody


@pytest.fixture
def matte():
    return Material((0.1, 0.2, 0.3), (0.5, 0.4, 0.3), (0.1, 0.2, 0.3), 8)
