"""
Field Controller
================
Connects user interactions to the model.

Why is this file needed?
------------------------
1. Ownership: It owns the Field, the PlacementGenerator, the MergeEngine and
   the DragGesture of one session. Nothing is global.
2. Routing: The view reports clicks and pointer events here. A completed drag
   is handed straight to `MergeEngine.on_drag_finish` (no event bubbling).
3. Notification: Listeners (the view) are told which circles appeared,
   disappeared or moved, so they never inspect the model themselves.

Classes:
    FieldListener: Callbacks a presentation layer implements.
    FieldController: The session object.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from circlefield.config import FieldConfig
from circlefield.controller.gesture import DragGesture
from circlefield.model.color import Color
from circlefield.model.field import Circle, Field
from circlefield.model.geometry_primitives import Point, Rect
from circlefield.model.merge import Merge, MergeEngine, MergeResult
from circlefield.model.placement import PlacementGenerator

logger = logging.getLogger(__name__)


class FieldListener(Protocol):
    def circle_added(self, circle: Circle) -> None: ...
    def circle_removed(self, circle: Circle) -> None: ...
    def circle_moved(self, circle: Circle) -> None: ...
    def field_reset(self) -> None: ...


class FieldController:
    def __init__(
        self,
        config: Optional[FieldConfig] = None,
        placement: Optional[PlacementGenerator] = None,
        merge_engine: Optional[MergeEngine] = None,
    ) -> None:
        self.config: FieldConfig = (config or FieldConfig()).validate()
        self.field = Field(bounds=Rect(0.0, 0.0, self.config.width, self.config.height))
        self.placement = placement or PlacementGenerator.seeded(self.config.seed, self.config.max_attempts)
        self.merge_engine = merge_engine or MergeEngine(self.config.merge_threshold)
        self.gesture = DragGesture(
            self.field,
            jitter_tolerance=self.config.jitter_tolerance,
            circle_radius=self.config.circle_radius,
        )
        self._listeners: List[FieldListener] = []

    # ------------------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------------------

    def add_listener(self, listener: FieldListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: FieldListener) -> None:
        self._listeners.remove(listener)

    def _notify_added(self, circle: Circle) -> None:
        for listener in self._listeners:
            listener.circle_added(circle)

    def _notify_removed(self, circle: Circle) -> None:
        for listener in self._listeners:
            listener.circle_removed(circle)

    def _notify_moved(self, circle: Circle) -> None:
        for listener in self._listeners:
            listener.circle_moved(circle)

    # ------------------------------------------------------------------------------
    # Field population
    # ------------------------------------------------------------------------------

    def seed(self, count: Optional[int] = None) -> List[Circle]:
        """
        Clear the field and place `count` random circles, each clear of the ones before it.

        Raises:
            PlacementExhausted: If the field saturates before `count` circles are placed.
                Circles placed up to that point stay on the field.
        """
        count = self.config.seed_count if count is None else count
        if count < 0:
            raise ValueError(f"Seed count must be non-negative, got {count}.")

        self._reset()
        placed: List[Circle] = []
        while len(placed) < count:
            center = self.placement.generate(
                self.field,
                self.field.bounds,
                min_margin=self.config.margin,
                min_separation=self.config.min_separation,
            )
            placed.append(self._add(center, Color.random(self.placement.rng)))

        logger.info(f"Seeded the field with {len(placed)} circles.")
        return placed

    def clear(self) -> None:
        self._reset()
        logger.info("Field cleared.")

    def handle_click(self, point: Point, target: Optional[Circle] = None) -> Optional[Circle]:
        """
        Handle a click already hit-tested by the view.

        Args:
            point: Click position in field-local coordinates.
            target: The circle under the pointer, None for empty space.

        Returns:
            The circle that was added or removed, None if `target` was not on the field.
        """
        if target is None:
            circle = self._add(self.placement.at(point), Color.random(self.placement.rng))
            logger.info(f"Added {circle} at click position.")
            return circle

        if target not in self.field:
            logger.warning(f"Click on {target} which is no longer on the field ignored.")
            return None
        self._remove(target)
        logger.info(f"Removed {target} by click.")
        return target

    # ------------------------------------------------------------------------------
    # Dragging
    # ------------------------------------------------------------------------------

    def begin_drag(self, circle: Circle, pointer: Point) -> None:
        self.gesture.begin(circle, pointer)

    def drag_to(self, pointer: Point) -> bool:
        moved = self.gesture.move(pointer)
        if moved:
            self._notify_moved(self.gesture.circle)
        return moved

    def end_drag(self) -> Optional[MergeResult]:
        """
        Finish the current gesture and merge if it was a real drag.

        Returns:
            None if the gesture was only a click (or nothing was being dragged),
            otherwise the merge result that has been applied to the field.
        """
        moved = self.gesture.finish()
        if moved is None:
            return None

        result = self.merge_engine.on_drag_finish(moved, self.field.others(moved))
        if isinstance(result, Merge):
            merged = self.merge_engine.apply(self.field, result, self.placement)
            for circle in result.removed:
                self._notify_removed(circle)
            self._notify_added(merged)
        return result

    # ------------------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------------------

    def _reset(self) -> None:
        self.gesture.cancel()
        self.field.clear()
        for listener in self._listeners:
            listener.field_reset()

    def _add(self, center: Point, color: Color) -> Circle:
        circle = self.field.add(Circle(center=center, color=color))
        self._notify_added(circle)
        return circle

    def _remove(self, circle: Circle) -> None:
        self.field.remove(circle)
        self._notify_removed(circle)
