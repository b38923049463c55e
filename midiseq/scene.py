"""The demo scene: a movable square and a text label."""

from __future__ import annotations

from collections.abc import Collection

from .geometry import Rect, move_rect
from .graphics import BLACK, LIGHT_BLUE, GraphicsService

STEP = 5
LABEL = "Hello World test 123456 sdfsfdsdfsdfsdfsdf"
LABEL_RECT = Rect(0, 0, 100, 100)


class Scene:
    """A square moved by clicks and by the held arrow keys.

    Keys passed to :meth:`tick` are ``"left"``, ``"right"``, ``"up"`` and ``"down"``.
    """

    def __init__(self) -> None:
        self.rect = Rect(100, 100, 150, 150)

    def on_left_click(self, x: float, y: float) -> None:
        self.rect = move_rect(self.rect, x, y)

    def tick(self, pressed: Collection[str]) -> None:
        """Move the square by one step for each held arrow key."""
        moves = {
            "left": (-STEP, 0),
            "right": (STEP, 0),
            "up": (0, -STEP),
            "down": (0, STEP),
        }
        for key, (dx, dy) in moves.items():
            if key in pressed:
                self.rect = move_rect(self.rect, self.rect.left + dx, self.rect.top + dy)

    def paint(self, gfx: GraphicsService) -> None:
        gfx.clear()
        gfx.draw_rect(self.rect, BLACK)
        gfx.draw_text(LABEL, LABEL_RECT, 1)
        gfx.draw_rect(LABEL_RECT, LIGHT_BLUE)
        gfx.render()