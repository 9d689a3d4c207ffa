"""
Placement of new circles.

Random placement samples uniformly inside the field bounds shrunk by a margin
and keeps resampling until the candidate is farther than `min_separation` from
every existing circle. The number of attempts is bounded; a saturated field
raises `PlacementExhausted` instead of spinning forever.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional, TYPE_CHECKING

import numpy as np

from circlefield.config import MAX_PLACEMENT_ATTEMPTS
from circlefield.model.exceptions import PlacementExhausted
from circlefield.model.geometry_primitives import Point, Rect, centers_to_array, distances_from

if TYPE_CHECKING:
    from circlefield.model.field import Circle

logger = logging.getLogger(__name__)


def to_field_coords(device_point: Point, origin: Point) -> Point:
    """
    Translate a pointer position into field-local coordinates.

    Args:
        device_point: Pointer position in device (window/screen) coordinates.
        origin: Position of the field's top-left corner in the same coordinates.
    """
    return Point(device_point.x - origin.x, device_point.y - origin.y)


class PlacementGenerator:
    """Produces coordinates for new circles."""

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}.")
        self.rng: np.random.Generator = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    @classmethod
    def seeded(cls, seed: Optional[int], max_attempts: int = MAX_PLACEMENT_ATTEMPTS) -> PlacementGenerator:
        return cls(rng=np.random.default_rng(seed), max_attempts=max_attempts)

    def generate(
        self,
        existing: Iterable[Circle],
        bounds: Rect,
        min_margin: float,
        min_separation: float,
    ) -> Point:
        """
        Sample a random point that keeps clear of the existing circles.

        Args:
            existing: Circles already on the field.
            bounds: The field rectangle.
            min_margin: Distance to keep from every edge of `bounds`.
            min_separation: Accepted points are strictly farther than this from every existing center.

        Returns:
            The accepted point.

        Raises:
            ValueError: If the margin leaves no room or the separation is negative.
            PlacementExhausted: If no candidate was accepted within `max_attempts`.
        """
        if min_separation < 0.0:
            raise ValueError(f"min_separation must be non-negative, got {min_separation}.")
        area = bounds.shrink(min_margin)
        centers = centers_to_array([c.center for c in existing])

        for attempt in range(1, self.max_attempts + 1):
            candidate = Point(
                x=float(self.rng.uniform(area.left, area.right)),
                y=float(self.rng.uniform(area.top, area.bottom)),
            )
            if self._is_free(candidate, area, centers, min_separation):
                logger.debug(f"Placed candidate ({candidate.x:.1f}, {candidate.y:.1f}) after {attempt} attempt(s).")
                return candidate

        logger.warning(f"Placement exhausted after {self.max_attempts} attempts with {len(centers)} circles.")
        raise PlacementExhausted(attempts=self.max_attempts, existing=len(centers))

    def at(self, point: Point) -> Point:
        """Accept an explicit point as-is (clicks and merge results): no separation check, no resampling."""
        return Point(float(point.x), float(point.y))

    @staticmethod
    def _is_free(candidate: Point, area: Rect, centers: np.ndarray, min_separation: float) -> bool:
        if not area.contains(candidate):
            return False
        if centers.shape[0] == 0:
            return True
        return bool(np.all(distances_from(candidate, centers) > min_separation))
