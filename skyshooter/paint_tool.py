"""Simple mouse-driven drawing tool with selectable mode and colour."""

from __future__ import annotations

from enum import IntEnum

from skyshooter.circle import BLACK, Canvas, Color

VK_F1 = 0x70
COLOR_KEY_BASE = ord("1")


class DrawType(IntEnum):
    POINT = 0
    PEN = 1
    LINE = 2
    RECTANGLE = 3
    ELLIPSE = 4
    END = 5


class ColorType(IntEnum):
    RED = 0
    GREEN = 1
    BLUE = 2
    YELLOW = 3
    CYAN = 4
    MAGENTA = 5
    END = 6


COLORS: dict[ColorType, Color] = {
    ColorType.RED: (255, 0, 0),
    ColorType.GREEN: (0, 255, 0),
    ColorType.BLUE: (0, 0, 255),
    ColorType.YELLOW: (255, 255, 0),
    ColorType.CYAN: (0, 255, 255),
    ColorType.MAGENTA: (255, 0, 255),
}


class PaintTool:
    """Draws points, freehand strokes and straight lines onto a canvas.

    F1 onwards selects the draw type, the digit keys from 1 select the colour.
    """

    def __init__(self, canvas: Canvas) -> None:
        self.canvas = canvas
        self.draw_type = DrawType.POINT
        self.color_type = ColorType.RED
        self.is_mouse_down = False
        self._prev: tuple[int, int] = (0, 0)
        self._cur: tuple[int, int] = (0, 0)
        self._pen_color: Color = BLACK

    def _selected_color(self) -> Color:
        return COLORS.get(self.color_type, BLACK)

    def on_mouse_move(self, x: int, y: int) -> None:
        self._cur = (x, y)
        if not self.is_mouse_down or self.draw_type is not DrawType.PEN:
            return
        self.canvas.line(self._prev, self._cur, self._pen_color, 1)
        self._prev = self._cur

    def on_lbutton_down(self, x: int, y: int) -> None:
        self._pen_color = self._selected_color()
        self._prev = (x, y)
        if self.draw_type is DrawType.POINT:
            self.canvas.pixel(x, y, self._selected_color())
            return
        self.is_mouse_down = True

    def on_lbutton_up(self, x: int, y: int) -> None:
        """Finish a stroke; the end point is the last reported mouse position."""
        self.is_mouse_down = False
        if self.draw_type is DrawType.LINE:
            self.canvas.line(self._prev, self._cur, self._pen_color, 1)

    def on_key_down(self, key: int) -> None:
        self._select_type(key)
        self._select_color(key)

    def _select_type(self, key: int) -> None:
        if VK_F1 <= key <= VK_F1 + DrawType.END:
            self.draw_type = DrawType(key - VK_F1)

    def _select_color(self, key: int) -> None:
        if COLOR_KEY_BASE <= key <= COLOR_KEY_BASE + ColorType.END:
            self.color_type = ColorType(key - COLOR_KEY_BASE)