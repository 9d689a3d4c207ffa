"""
Field Scene
Renders the circles with QGraphicsItems and forwards pointer events to the controller.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

from PySide6.QtCore import QObject, QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QBrush, QColor, QPen, QTransform
from PySide6.QtWidgets import QGraphicsEllipseItem, QGraphicsScene, QGraphicsSceneMouseEvent

from circlefield.controller.field_controller import FieldController
from circlefield.model.field import Circle
from circlefield.model.geometry_primitives import Point
from circlefield.model.placement import to_field_coords

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = "#F4F4F4"
OUTLINE_COLOR = "#303030"
MOVING_OPACITY = 0.7


class CircleItem(QGraphicsEllipseItem):
    """Visual representation of one Circle, centered on its item position."""

    def __init__(self, circle: Circle, radius: float) -> None:
        super().__init__(QRectF(-radius, -radius, 2 * radius, 2 * radius))
        self.circle = circle
        self.setBrush(QBrush(QColor(circle.color.to_hex())))
        self.setPen(QPen(QColor(OUTLINE_COLOR), 1.0))
        self.setToolTip(f"#{circle.id} {circle.color.to_hex()}")
        self.sync_position()

    def sync_position(self) -> None:
        self.setPos(QPointF(self.circle.center.x, self.circle.center.y))

    def set_moving(self, moving: bool) -> None:
        self.setOpacity(MOVING_OPACITY if moving else 1.0)
        self.setZValue(1.0 if moving else 0.0)


class FieldScene(QGraphicsScene):
    """
    Scene whose coordinates are the field-local coordinates.

    Hit-testing lives here: a double-click on empty space adds a circle,
    a double-click on a circle removes it, press-move-release on a circle drags it.
    """
    count_changed = Signal(int)

    def __init__(self, controller: FieldController, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.controller = controller
        cfg = controller.config
        self.setSceneRect(QRectF(0.0, 0.0, cfg.width, cfg.height))
        self.setBackgroundBrush(QBrush(QColor(BACKGROUND_COLOR)))

        self._items: Dict[int, CircleItem] = {}
        self._dragging: Optional[CircleItem] = None

        controller.add_listener(self)
        for circle in controller.field:
            self.circle_added(circle)

    # ------------------------------------------------------------------------------
    # FieldListener
    # ------------------------------------------------------------------------------

    def circle_added(self, circle: Circle) -> None:
        item = CircleItem(circle, self.controller.config.circle_radius)
        self._items[circle.id] = item
        self.addItem(item)
        self.count_changed.emit(len(self.controller.field))

    def circle_removed(self, circle: Circle) -> None:
        item = self._items.pop(circle.id, None)
        if item is None:
            logger.debug(f"No item for removed {circle}.")
            return
        if item is self._dragging:
            self._dragging = None
        self.removeItem(item)
        self.count_changed.emit(len(self.controller.field))

    def circle_moved(self, circle: Circle) -> None:
        item = self._items.get(circle.id)
        if item is not None:
            item.set_moving(True)
            item.sync_position()

    def field_reset(self) -> None:
        for item in self._items.values():
            self.removeItem(item)
        self._items.clear()
        self._dragging = None
        self.count_changed.emit(0)

    # ------------------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------------------

    def _field_point(self, event: QGraphicsSceneMouseEvent) -> Point:
        pos = event.scenePos()
        origin = self.sceneRect().topLeft()
        return to_field_coords(Point(pos.x(), pos.y()), Point(origin.x(), origin.y()))

    def _circle_item_at(self, event: QGraphicsSceneMouseEvent) -> Optional[CircleItem]:
        item = self.itemAt(event.scenePos(), QTransform())
        return item if isinstance(item, CircleItem) else None

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent) -> None:
        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return
        item = self._circle_item_at(event)
        if item is not None:
            self._dragging = item
            self.controller.begin_drag(item.circle, self._field_point(event))
        event.accept()

    def mouseMoveEvent(self, event: QGraphicsSceneMouseEvent) -> None:
        if self._dragging is not None:
            self.controller.drag_to(self._field_point(event))
        event.accept()

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent) -> None:
        if event.button() != Qt.LeftButton:
            super().mouseReleaseEvent(event)
            return
        item, self._dragging = self._dragging, None
        if item is not None:
            item.set_moving(False)
        self.controller.end_drag()
        event.accept()

    def mouseDoubleClickEvent(self, event: QGraphicsSceneMouseEvent) -> None:
        if event.button() != Qt.LeftButton:
            super().mouseDoubleClickEvent(event)
            return
        item = self._circle_item_at(event)
        self.controller.handle_click(self._field_point(event), item.circle if item else None)
        event.accept()
