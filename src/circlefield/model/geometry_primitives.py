"""
Geometric Primitives for the circle field.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector:
    """
    A displacement in the field plane.
    """
    x: float
    y: float

    def exceeds(self, tolerance: float) -> bool:
        """True if the displacement is larger than `tolerance` along either axis."""
        return abs(self.x) > tolerance or abs(self.y) > tolerance


@dataclass(frozen=True)
class Point:
    """A location in field-local coordinates (origin at the top-left corner)."""
    x: float
    y: float

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Point) -> Vector:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Point from a Point.")

    def distance_to(self, other: Point) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""
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

    def shrink(self, margin: float) -> Rect:
        """
        Shrink the rectangle by `margin` on every edge.

        Raises:
            ValueError: If the margin is negative or consumes the whole rectangle.
        """
        if margin < 0.0:
            raise ValueError(f"Margin must be non-negative, got {margin}.")
        if 2 * margin > self.width or 2 * margin > self.height:
            raise ValueError(f"Margin {margin} leaves no room inside {self}.")
        return Rect(
            left=self.left + margin,
            top=self.top + margin,
            width=self.width - 2 * margin,
            height=self.height - 2 * margin,
        )

    def contains(self, point: Point) -> bool:
        """Inclusive containment test on all four edges."""
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom

    def clamp(self, point: Point) -> Point:
        """Nearest point inside the rectangle."""
        return Point(
            x=min(max(point.x, self.left), self.right),
            y=min(max(point.y, self.top), self.bottom),
        )


def centers_to_array(points: list[Point]) -> npt.NDArray[np.float64]:
    """Stack points into an (N, 2) array; an empty input gives shape (0, 2)."""
    if not points:
        return np.empty((0, 2), dtype=np.float64)
    return np.array([(p.x, p.y) for p in points], dtype=np.float64)


def distances_from(origin: Point, others: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Euclidean distances from `origin` to each row of an (N, 2) array."""
    return np.hypot(others[:, 0] - origin.x, others[:, 1] - origin.y)
