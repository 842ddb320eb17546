"""
Two-dimensional points and vectors.

Minimal value types used by the polygon kernel. Coordinates may be any
scalar satisfying the capabilities in ``scalar``; orientation tests use
the exact sign of the cross product with no tolerance.
"""

from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Any, Callable, Iterable, List

from .scalar import ScalarField


class Orientation(Enum):
    """Turn direction of three points."""
    COUNTER_CLOCKWISE = "ccw"
    CLOCKWISE = "cw"
    COLLINEAR = "collinear"

    @classmethod
    def from_cross(cls, cross) -> "Orientation":
        if cross > 0:
            return cls.COUNTER_CLOCKWISE
        if cross < 0:
            return cls.CLOCKWISE
        return cls.COLLINEAR


@dataclass(frozen=True)
class Vector:
    x: Any
    y: Any

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y)

    def __mul__(self, factor) -> "Vector":
        return Vector(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor) -> "Vector":
        return Vector(self.x / divisor, self.y / divisor)

    def cross(self, other: "Vector"):
        """z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def cast(self, f: Callable) -> "Vector":
        return Vector(f(self.x), f(self.y))

    @classmethod
    def zero(cls, field: ScalarField) -> "Vector":
        return cls(field.zero(), field.zero())


@dataclass(frozen=True)
class Point:
    x: Any
    y: Any

    def __add__(self, other: Vector) -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        # Point - Point is a displacement, Point - Vector is a point
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        return Point(self.x - other.x, self.y - other.y)

    def as_vector(self) -> Vector:
        return Vector(self.x, self.y)

    def cast(self, f: Callable) -> "Point":
        return Point(f(self.x), f(self.y))

    def orientation(self, q: "Point", r: "Point") -> Orientation:
        """Turn direction of the path self -> q -> r."""
        return Orientation.from_cross((q - self).cross(r - self))

    def __iter__(self):
        yield self.x
        yield self.y

    @classmethod
    def origin(cls, field: ScalarField) -> "Point":
        return cls(field.zero(), field.zero())


def _upper_half(v: Vector) -> bool:
    # Angles in [0, pi) belong to the upper half
    return v.y > 0 or (v.y == 0 and v.x > 0)


def ccw_compare(a: Vector, b: Vector) -> int:
    """
    Compare two non-zero vectors by polar angle measured from the positive
    x axis, counter-clockwise, in [0, 2*pi).

    Vectors pointing in the same direction compare equal.
    """
    ha, hb = _upper_half(a), _upper_half(b)
    if ha != hb:
        return -1 if ha else 1
    cross = a.cross(b)
    if cross > 0:
        return -1
    if cross < 0:
        return 1
    return 0


def sort_around(vectors: Iterable[Vector]) -> List[Vector]:
    """Return the vectors sorted counter-clockwise by polar angle."""
    return sorted(vectors, key=cmp_to_key(ccw_compare))
