"""
Errors raised by the circle field.
"""


class CircleFieldError(Exception):
    """Base class for errors raised by the circle field."""


class PlacementExhausted(CircleFieldError):
    """No free spot was found for a new circle within the attempt budget."""

    def __init__(self, attempts: int, existing: int) -> None:
        super().__init__(
            f"No position found after {attempts} attempts; "
            f"the field with {existing} circles is saturated."
        )
        self.attempts = attempts
        self.existing = existing
