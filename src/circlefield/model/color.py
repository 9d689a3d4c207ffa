"""
Circle Colors
=============
8-bit RGB colors and the blending rule used when circles merge.

The blend is a per-channel integer mean that truncates toward zero, so mixing
255 and 0 gives 127 (not 128).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

CHANNELS: tuple[str, str, str] = ("r", "g", "b")
CHANNEL_MAX: int = 255


@dataclass(frozen=True)
class Color:
    """An RGB color with three 8-bit unsigned channels."""
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in CHANNELS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"Channel '{name}' must be an integer, got {value!r}.")
            if not 0 <= value <= CHANNEL_MAX:
                raise ValueError(f"Channel '{name}' must be in [0, {CHANNEL_MAX}], got {value}.")
            # numpy integers are normalised so equality and hashing behave
            object.__setattr__(self, name, int(value))

    @classmethod
    def random(cls, rng: Optional[np.random.Generator] = None) -> Color:
        """Draw each channel uniformly from 0..255."""
        rng = rng if rng is not None else np.random.default_rng()
        r, g, b = rng.integers(0, CHANNEL_MAX + 1, size=3)
        return cls(int(r), int(g), int(b))

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """
        Parse '#rrggbb' or 'rrggbb'.

        Raises:
            ValueError: If the string is not six hex digits.
        """
        digits = text[1:] if text.startswith("#") else text
        if len(digits) != 6:
            raise ValueError(f"Expected six hex digits, got '{text}'.")
        try:
            return cls(*(int(digits[i:i + 2], 16) for i in (0, 2, 4)))
        except ValueError as e:
            raise ValueError(f"Invalid hex color '{text}'.") from e

    def hex_channels(self) -> tuple[str, str, str]:
        """Each channel as a zero-padded two-digit lowercase hex string."""
        return tuple(f"{getattr(self, name):02x}" for name in CHANNELS)

    def to_hex(self) -> str:
        return "#" + "".join(self.hex_channels())

    def to_array(self) -> npt.NDArray[np.int64]:
        return np.array([self.r, self.g, self.b], dtype=np.int64)


def mix_colors(colors: Iterable[Color]) -> Color:
    """
    Blend colors by truncated per-channel mean.

    Args:
        colors: At least one color.

    Returns:
        A new color whose channels are floor(sum / count).

    Raises:
        ValueError: If no colors are given.

    Example:
        >>> mix_colors([Color(255, 0, 0), Color(0, 0, 0)])
        Color(r=127, g=0, b=0)
    """
    stacked = np.array([c.to_array() for c in colors], dtype=np.int64).reshape(-1, 3)
    if stacked.shape[0] == 0:
        raise ValueError("Cannot mix an empty set of colors.")
    # channels are non-negative, so floor division truncates toward zero
    r, g, b = stacked.sum(axis=0) // stacked.shape[0]
    return Color(int(r), int(g), int(b))
