from midiseq.geometry import Rect
from midiseq.graphics import (
    BLACK,
    LIGHT_BLUE,
    WHITE,
    GraphicsService,
    GraphicsTag,
    make_rect,
    make_text,
)


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def fill_rect(self, rect, color):
        self.calls.append(("rect", rect, color))

    def draw_text(self, text, rect, color):
        self.calls.append(("text", text, rect, color))


def test_make_rect_and_text():
    rect = Rect(0, 0, 10, 10)
    elt = make_rect(rect, BLACK, 2)
    assert (elt.tag, elt.rect, elt.color, elt.z) == (GraphicsTag.RECT, rect, BLACK, 2)
    text = make_text("hi", rect)
    assert (text.tag, text.text, text.z) == (GraphicsTag.TEXT, "hi", 0)


def test_clear_uses_white():
    renderer = RecordingRenderer()
    GraphicsService(renderer).clear()
    assert renderer.calls == [("clear", WHITE)]


def test_render_orders_by_z_and_empties_queue():
    renderer = RecordingRenderer()
    gfx = GraphicsService(renderer)
    a, b, c = Rect(0, 0, 1, 1), Rect(1, 1, 2, 2), Rect(2, 2, 3, 3)
    gfx.draw_rect(a, BLACK, 2)
    gfx.draw_text("label", b, 0)
    gfx.draw_rect(c, LIGHT_BLUE, 1)
    gfx.render()
    assert renderer.calls == [
        ("text", "label", b, BLACK),
        ("rect", c, LIGHT_BLUE),
        ("rect", a, BLACK),
    ]
    assert gfx.draw_queue == []
    gfx.render()
    assert len(renderer.calls) == 3


def test_equal_z_keeps_insertion_order():
    renderer = RecordingRenderer()
    gfx = GraphicsService(renderer)
    rects = [Rect(i, i, i + 1, i + 1) for i in range(4)]
    for rect in rects:
        gfx.draw_rect(rect, BLACK)
    gfx.render()
    assert [call[1] for call in renderer.calls] == rects