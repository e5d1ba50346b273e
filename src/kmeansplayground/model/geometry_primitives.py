"""
Geometric Primitives for the clustering canvas.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import numpy as np
import math

from kmeansplayground.utils import lerp

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass
class Vector:
    """
    A vector (or position) in the 2D canvas plane.
    """
    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vector:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2)

    def distance_squared_to(self, other: Vector) -> float:
        return (self.x - other.x) ** 2 + (self.y - other.y) ** 2

    def distance_to(self, other: Vector) -> float:
        return math.sqrt(self.distance_squared_to(other))

    def lerp(self, other: Vector, amount: float) -> Vector:
        """Move `amount` of the way from this vector towards `other`, per axis."""
        return Vector(
            lerp(self.x, other.x, amount),
            lerp(self.y, other.y, amount)
        )

    def copy(self) -> Vector:
        return Vector(self.x, self.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in canvas coordinates (y grows downwards)."""
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> Vector:
        return Vector(self.left + self.width / 2, self.top + self.height / 2)

    def contains(self, v: Vector) -> bool:
        return self.left <= v.x <= self.right and self.top <= v.y <= self.bottom

    def inset(self, fraction: float) -> Rect:
        """Shrink by `fraction` of the width/height from every edge."""
        dx = self.width * fraction
        dy = self.height * fraction
        return Rect(self.left + dx, self.top + dy, self.width - 2 * dx, self.height - 2 * dy)

    def random_point(self, rng: np.random.Generator) -> Vector:
        """Uniform sample; the far edges are excluded."""
        return Vector(
            float(rng.uniform(self.left, self.right)),
            float(rng.uniform(self.top, self.bottom))
        )
