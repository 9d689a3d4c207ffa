"""
Merge Engine
============
Decides what happens when a dragged circle is dropped.

Rules:
    - Two circles intersect iff the distance between their centers is
      strictly less than the threshold.
    - Only circles intersecting the *moved* circle are merged. The merge is
      not transitive, and the merged circle is not re-evaluated in the same
      call.
    - The merged circle sits at the arithmetic mean of the group centers and
      takes the truncated per-channel mean of the group colors.

Classes:
    NoOp: Nothing intersected, the circle stays where it was dropped.
    Merge: Circles to remove (moved first) and the circle to create.
    MergeEngine: Evaluates drops and applies the results to a Field.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable, Optional, Tuple, Union

from circlefield.config import MERGE_THRESHOLD
from circlefield.model.color import Color, mix_colors
from circlefield.model.field import Circle, Field
from circlefield.model.geometry_primitives import Point, centers_to_array, distances_from
from circlefield.model.placement import PlacementGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoOp:
    """The drop did not touch any other circle."""


@dataclass(frozen=True)
class MergedCircle:
    """Position and color of the circle a merge creates."""
    center: Point
    color: Color


@dataclass(frozen=True)
class Merge:
    removed: Tuple[Circle, ...]
    created: MergedCircle

    @property
    def group_size(self) -> int:
        return len(self.removed)


MergeResult = Union[NoOp, Merge]


def average_center(circles: Iterable[Circle]) -> Point:
    """Arithmetic mean of the centers, no rounding."""
    centers = centers_to_array([c.center for c in circles])
    if centers.shape[0] == 0:
        raise ValueError("Cannot average an empty set of circles.")
    x, y = centers.sum(axis=0) / centers.shape[0]
    return Point(float(x), float(y))


class MergeEngine:
    def __init__(self, threshold: float = MERGE_THRESHOLD) -> None:
        if threshold <= 0.0:
            raise ValueError(f"Merge threshold must be positive, got {threshold}.")
        self.threshold = threshold

    def find_intersecting(self, moved: Circle, others: Iterable[Circle], threshold: Optional[float] = None) -> list[Circle]:
        """Circles closer than the threshold to `moved`, in the order of `others`."""
        threshold = self.threshold if threshold is None else threshold
        candidates = [o for o in others if o is not moved]
        if not candidates:
            return []
        dist = distances_from(moved.center, centers_to_array([o.center for o in candidates]))
        return [o for o, hit in zip(candidates, dist < threshold) if hit]

    def on_drag_finish(self, moved: Circle, others: Iterable[Circle], threshold: Optional[float] = None) -> MergeResult:
        """
        Evaluate a completed drag of `moved`.

        Args:
            moved: The circle that was dropped, at its new position.
            others: The other circles on the field. `moved` itself is skipped if present.
            threshold: Overrides the engine threshold for this call.

        Returns:
            NoOp if nothing intersects, otherwise a Merge describing the change.
        """
        threshold = self.threshold if threshold is None else threshold
        if threshold <= 0.0:
            raise ValueError(f"Merge threshold must be positive, got {threshold}.")

        intersecting = self.find_intersecting(moved, others, threshold)
        if not intersecting:
            logger.debug(f"{moved} dropped without touching another circle.")
            return NoOp()

        group = (moved, *intersecting)
        created = MergedCircle(center=average_center(group), color=mix_colors(c.color for c in group))
        logger.debug(f"{moved} intersects {len(intersecting)} circle(s); merging into {created}.")
        return Merge(removed=group, created=created)

    @staticmethod
    def apply(field: Field, result: MergeResult, placement: PlacementGenerator) -> Optional[Circle]:
        """
        Apply a merge result to the field.

        Returns:
            The newly created circle, or None for NoOp.
        """
        if isinstance(result, NoOp):
            return None

        count_before = len(field)
        field.remove(*result.removed)
        merged = field.add(Circle(center=placement.at(result.created.center), color=result.created.color))
        logger.info(
            f"Merged {result.group_size} circles into {merged} "
            f"({count_before} -> {len(field)} circles)."
        )
        return merged
