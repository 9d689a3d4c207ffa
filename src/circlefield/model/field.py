"""
Field State (Data Model)
========================
This module defines the circles and the collection that owns them.

Why is this file needed?
------------------------
1. State Management: The Field holds every live circle and the bounds they
   occupy in one place. It is owned by the controller, never global.
2. Identity: Circles are compared by identity, two circles with the same
   center and color are still different circles.

Classes:
    Circle: A colored disc at a position.
    Field: The owned, ordered collection of live circles.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Iterable, Iterator, List, Optional

from circlefield.model.color import Color
from circlefield.model.geometry_primitives import Point, Rect

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Circle:
    """
    A colored circle on the field.
    Equality and hashing are by identity, `id` is only a readable label
    handed out by the Field when the circle is added.
    """
    center: Point
    color: Color
    id: Optional[int] = None

    def move_to(self, center: Point) -> None:
        self.center = center

    def distance_to(self, other: Circle) -> float:
        return self.center.distance_to(other.center)

    def __repr__(self) -> str:
        return f"Circle(id={self.id}, center=({self.center.x:g}, {self.center.y:g}), color={self.color.to_hex()})"


@dataclass
class Field:
    """
    The live circles and the coordinate bounds they occupy.
    Insertion order is kept but carries no meaning for the merge rules.
    """
    bounds: Rect
    circles: List[Circle] = field(default_factory=list)
    _next_id: int = field(default=1, repr=False)

    def __len__(self) -> int:
        return len(self.circles)

    def __iter__(self) -> Iterator[Circle]:
        # iterate a snapshot so callers may mutate the field while looping
        return iter(list(self.circles))

    def __contains__(self, circle: object) -> bool:
        return any(c is circle for c in self.circles)

    def _index_of(self, circle: Circle) -> Optional[int]:
        for i, c in enumerate(self.circles):
            if c is circle:
                return i
        return None

    def add(self, circle: Circle) -> Circle:
        if circle in self:
            raise ValueError(f"{circle} is already on the field.")
        if circle.id is None:
            circle.id = self._next_id
            self._next_id += 1
        self.circles.append(circle)
        logger.debug(f"Added {circle}; {len(self)} circles on the field.")
        return circle

    def remove(self, *targets: Circle) -> None:
        """
        Remove circles by identity.

        Raises:
            ValueError: If a target is not on the field or is listed twice.
                Nothing is removed in that case.
        """
        if len({id(t) for t in targets}) != len(targets):
            raise ValueError("A circle was listed more than once for removal.")
        for target in targets:
            if target not in self:
                raise ValueError(f"{target} is not on the field.")
        for target in targets:
            del self.circles[self._index_of(target)]
            logger.debug(f"Removed {target}; {len(self)} circles on the field.")

    def others(self, circle: Circle) -> List[Circle]:
        """Every circle on the field except `circle`, in field order."""
        return [c for c in self.circles if c is not circle]

    def clear(self) -> None:
        self.circles.clear()
        logger.debug("Field cleared.")

    def extend(self, circles: Iterable[Circle]) -> None:
        for circle in circles:
            self.add(circle)
