"""Rectangles and small helpers for the on-screen scene."""

from __future__ import annotations

from dataclasses import dataclass

from .audio_util import to_hex
from .rng import RngService


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its edges."""

    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def __str__(self) -> str:
        return (
            f"rect:\nleft: {self.left:.2f}, top: {self.top:.2f}, "
            f"right: {self.right:.2f}, bottom: {self.bottom:.2f}"
        )


def move_rect(rect: Rect, x: float, y: float) -> Rect:
    """``rect`` moved so its top-left corner is at (``x``, ``y``)."""
    return Rect(x, y, x + rect.width, y + rect.height)


def to_hex_string(value: int) -> str:
    """Hex text of ``value``, as shown in error messages."""
    return to_hex(value)


def random_int(low: int, high: int, rng: RngService | None = None) -> int:
    """Random integer between ``low`` and ``high`` inclusive."""
    return (rng if rng is not None else RngService()).rand(low, high)