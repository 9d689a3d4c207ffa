"""
circlefield
===========
Draggable colored circles that merge when dropped onto each other.

Layers:
    model       Pure data and rules (placement, merging, colors). No Qt.
    controller  Gesture tracking and the field session. No Qt.
    view        PySide6 widgets rendering the field.
"""
