"""
Configuration & Constants
=========================
This module serves as the central registry for the field geometry and the
thresholds used by placement, merging and drag tracking.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (600, 50, 100, 25, 3, ...) scattered
   throughout the model, controller and view.
2. Overrides: The CLI builds a `FieldConfig` from these defaults and replaces
   only what the user asked for (seed, count).

Exports:
    FieldConfig: Dataclass bundling every tunable value of a session.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional


# Global Constants
FIELD_WIDTH: float = 600.0
FIELD_HEIGHT: float = 600.0
CIRCLE_RADIUS: float = 50.0

PLACEMENT_MARGIN: float = 50.0
MIN_SEPARATION: float = 100.0
MAX_PLACEMENT_ATTEMPTS: int = 10_000

MERGE_THRESHOLD: float = 25.0
JITTER_TOLERANCE: float = 3.0

SEED_COUNT: int = 10


@dataclass(frozen=True)
class FieldConfig:
    """Every tunable value of a single field session."""
    width: float = FIELD_WIDTH
    height: float = FIELD_HEIGHT
    circle_radius: float = CIRCLE_RADIUS

    margin: float = PLACEMENT_MARGIN
    min_separation: float = MIN_SEPARATION
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS

    merge_threshold: float = MERGE_THRESHOLD
    jitter_tolerance: float = JITTER_TOLERANCE

    seed_count: int = SEED_COUNT
    seed: Optional[int] = None  # RNG seed, None = nondeterministic

    def validate(self) -> FieldConfig:
        """
        Check the values for consistency.

        Returns:
            The same instance, so calls can be chained.

        Raises:
            ValueError: If any value is out of its allowed range.
        """
        if self.width <= 0.0 or self.height <= 0.0:
            raise ValueError(f"Field size must be positive, got {self.width}x{self.height}.")
        if self.margin < 0.0:
            raise ValueError(f"Margin must be non-negative, got {self.margin}.")
        if 2 * self.margin > min(self.width, self.height):
            raise ValueError(f"Margin {self.margin} leaves no room inside a {self.width}x{self.height} field.")
        if self.min_separation < 0.0:
            raise ValueError(f"Minimum separation must be non-negative, got {self.min_separation}.")
        if self.max_attempts < 1:
            raise ValueError(f"Max attempts must be at least 1, got {self.max_attempts}.")
        if self.merge_threshold <= 0.0:
            raise ValueError(f"Merge threshold must be positive, got {self.merge_threshold}.")
        if self.jitter_tolerance < 0.0:
            raise ValueError(f"Jitter tolerance must be non-negative, got {self.jitter_tolerance}.")
        if self.circle_radius < 0.0:
            raise ValueError(f"Circle radius must be non-negative, got {self.circle_radius}.")
        if self.seed_count < 0:
            raise ValueError(f"Seed count must be non-negative, got {self.seed_count}.")
        return self

    def with_overrides(self, **overrides: Any) -> FieldConfig:
        """Return a validated copy, ignoring overrides that are None."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes).validate()
