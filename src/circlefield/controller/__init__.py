"""
Interaction Controllers
=======================
Translate user gestures into model operations.

Why is this file needed?
------------------------
1. Gestures: `DragGesture` decides whether pointer motion is a drag or a click.
2. Session: `FieldController` owns the Field and calls the placement and merge
   logic at the right moments.

Note: This package should be pure Python and should NOT import PySide6.
"""
