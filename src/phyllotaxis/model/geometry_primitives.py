"""
Geometric Primitives shared by the curves and the generators.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt

@dataclass
class Vector:
    """
    A vector in 3D space representing direction and magnitude.
    """
    x: float
    y: float
    z: float = 0.0

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)


@dataclass
class Point:
    """A point in 3D space. Surfaces of revolution turn about the Z axis."""
    x: float
    y: float
    z: float = 0.0

    @classmethod
    def coerce(cls, value: Any) -> Point:
        """
        Accept a Point, anything with x/y/z attributes, or a 3-sequence.

        Curves supplied by other libraries are free to return tuples or
        numpy rows, so the packer funnels every sample through here.
        """
        if isinstance(value, Point):
            return value
        if hasattr(value, "x") and hasattr(value, "y") and hasattr(value, "z"):
            return cls(float(value.x), float(value.y), float(value.z))
        coords = np.asarray(value, dtype=np.float64).reshape(-1)
        if coords.shape[0] != 3:
            raise TypeError(f"Expected a 3D point, got {coords.shape[0]} coordinates.")
        return cls(float(coords[0]), float(coords[1]), float(coords[2]))

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Point) -> Vector:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        raise TypeError("Can only subtract a Point from a Point.")

    @property
    def radial_distance(self) -> float:
        """Distance from the Z (revolution) axis."""
        return math.hypot(self.x, self.y)

    def rotate_z(self, angle_rad: float) -> Point:
        """Rotate point around Z axis."""
        cos_a = math.cos(angle_rad)
        sin_a = math.sin(angle_rad)
        return Point(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
            self.z
        )

    def lerp(self, other: Point, t: float) -> Point:
        return self + (other - self) * t

    def distance_to(self, other: Point) -> float:
        return (other - self).magnitude

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])
