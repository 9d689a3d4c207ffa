"""
Drag Gesture Tracking
=====================
Turns a pointer-down / pointer-move / pointer-up sequence into circle motion.

A move only counts once the pointer has travelled more than the jitter
tolerance from the last accepted position along either axis. Smaller moves
accumulate against the same anchor. A gesture that never crossed the
tolerance is a click, not a drag, and `finish` reports nothing to merge.

The gesture keeps its own anchor and flags, so removing the dragged circle
from the field mid-gesture cannot corrupt them.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional

from circlefield.config import CIRCLE_RADIUS, JITTER_TOLERANCE
from circlefield.model.field import Circle, Field
from circlefield.model.geometry_primitives import Point

logger = logging.getLogger(__name__)


@dataclass
class _ActiveDrag:
    circle: Circle
    anchor: Point
    was_moved: bool = False


class DragGesture:
    def __init__(
        self,
        field: Field,
        jitter_tolerance: float = JITTER_TOLERANCE,
        circle_radius: float = CIRCLE_RADIUS,
    ) -> None:
        self.field = field
        self.jitter_tolerance = jitter_tolerance
        self.circle_radius = circle_radius
        self._active: Optional[_ActiveDrag] = None

    @property
    def active(self) -> bool:
        return self._active is not None

    @property
    def circle(self) -> Optional[Circle]:
        return self._active.circle if self._active else None

    def begin(self, circle: Circle, pointer: Point) -> None:
        if self._active is not None:
            logger.debug(f"Discarding unfinished drag of {self._active.circle}.")
        self._active = _ActiveDrag(circle=circle, anchor=pointer)

    def move(self, pointer: Point) -> bool:
        """
        Feed a pointer position.

        Returns:
            True if the circle was moved by this event.
        """
        drag = self._active
        if drag is None:
            logger.debug("Pointer move without an active drag ignored.")
            return False
        if drag.circle not in self.field:
            return False

        delta = pointer - drag.anchor
        if not delta.exceeds(self.jitter_tolerance):
            return False

        drag.circle.move_to(self._clamp(drag.circle.center + delta))
        drag.anchor = pointer
        drag.was_moved = True
        return True

    def finish(self) -> Optional[Circle]:
        """
        End the gesture.

        Returns:
            The dragged circle if the gesture was a completed drag and the
            circle is still on the field, otherwise None.
        """
        drag, self._active = self._active, None
        if drag is None:
            logger.debug("Pointer release without an active drag ignored.")
            return None
        if not drag.was_moved:
            return None
        if drag.circle not in self.field:
            logger.debug(f"{drag.circle} left the field during the drag.")
            return None
        return drag.circle

    def cancel(self) -> None:
        self._active = None

    def _clamp(self, center: Point) -> Point:
        """Keep the whole disc inside the field bounds."""
        b = self.field.bounds
        r = min(self.circle_radius, b.width / 2, b.height / 2)
        return b.shrink(r).clamp(center)
