"""
3D vector arithmetic for the Sphere Caster renderer.

Vector3 is used both for points and for directions. Instances are immutable
and compare approximately: two vectors are equal when every component differs
by less than machine epsilon, which absorbs the rounding introduced by sqrt and
division.
"""
import math
from dataclasses import dataclass

import numpy as np

from sphere_caster import constants


@dataclass(frozen=True, eq=False)
class Vector3:
    x: float
    y: float
    z: float

    __hash__ = None

    @classmethod
    def from_iterable(cls, values):
        """Build a vector from any 3-element iterable (tuple, list, ndarray)."""
        x, y, z = values
        return cls(float(x), float(y), float(z))

    def as_array(self):
        return np.array([self.x, self.y, self.z], dtype=float)

    def add(self, other):
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other):
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, k):
        return Vector3(self.x * k, self.y * k, self.z * k)

    def divide(self, k):
        return Vector3(self.x / k, self.y / k, self.z / k)

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self):
        return math.sqrt(self.dot(self))

    def normalize(self):
        """
        Unit vector in the same direction.

        The zero vector has no direction; dividing by its length raises
        ZeroDivisionError. Callers must not pass one.
        """
        return self.divide(self.length())

    def distance_to(self, other):
        return self.sub(other).length()

    def direction_to(self, other):
        """Unit vector pointing from this point towards `other`."""
        return other.sub(self).normalize()

    def approx_equal(self, other, eps=constants.VECTOR_EPSILON):
        return (abs(self.x - other.x) < eps
                and abs(self.y - other.y) < eps
                and abs(self.z - other.z) < eps)

    def __eq__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.approx_equal(other)

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.sub(other)

    def __mul__(self, k):
        return self.scale(k)

    __rmul__ = __mul__

    def __truediv__(self, k):
        return self.divide(k)

    def __neg__(self):
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z


ORIGIN = Vector3(0.0, 0.0, 0.0)
