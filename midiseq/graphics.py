"""Z-ordered drawing of rectangles and text through a renderer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from .geometry import Rect

WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 1000


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0


WHITE = Color(1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)
LIGHT_BLUE = Color(0xAD / 255, 0xD8 / 255, 0xE6 / 255)


class GraphicsTag(Enum):
    RECT = "rect"
    TEXT = "text"


@dataclass(frozen=True)
class GraphicsElt:
    """Something to draw: a filled rectangle or text laid out in a rectangle."""

    tag: GraphicsTag
    rect: Rect
    z: int = 0
    color: Color | None = None
    text: str | None = None


def make_rect(rect: Rect, color: Color, z: int = 0) -> GraphicsElt:
    return GraphicsElt(GraphicsTag.RECT, rect, z, color=color)


def make_text(text: str, rect: Rect, z: int = 0) -> GraphicsElt:
    return GraphicsElt(GraphicsTag.TEXT, rect, z, text=text)


class Renderer(Protocol):
    """A drawing surface."""

    def clear(self, color: Color) -> None: ...

    def fill_rect(self, rect: Rect, color: Color) -> None: ...

    def draw_text(self, text: str, rect: Rect, color: Color) -> None: ...


class GraphicsService:
    """Collects draw calls and renders them lowest ``z`` first."""

    def __init__(self, renderer: Renderer) -> None:
        self.renderer = renderer
        self.draw_queue: list[GraphicsElt] = []

    def clear(self) -> None:
        self.renderer.clear(WHITE)

    def draw_rect(self, rect: Rect, color: Color, z: int = 0) -> None:
        self.draw_queue.append(make_rect(rect, color, z))

    def draw_text(self, text: str, rect: Rect, z: int = 0) -> None:
        self.draw_queue.append(make_text(text, rect, z))

    def render(self) -> None:
        """Draw every queued element, higher ``z`` on top, and empty the queue."""
        elements = sorted(self.draw_queue, key=lambda elt: elt.z)
        self.draw_queue.clear()
        for elt in elements:
            if elt.tag is GraphicsTag.RECT:
                self.renderer.fill_rect(elt.rect, elt.color)
            else:
                self.renderer.draw_text(elt.text, elt.rect, BLACK)