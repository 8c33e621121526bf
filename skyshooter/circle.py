"""Drawing surface and the circle shape that game objects build on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from skyshooter.vector2 import Vector2

Color = tuple[int, int, int]
BLACK: Color = (0, 0, 0)


@dataclass(frozen=True)
class DrawCommand:
    """One recorded drawing operation."""

    shape: str
    args: tuple[Any, ...]


class Canvas:
    """A drawing surface that records every operation in ``commands``."""

    def __init__(self) -> None:
        self.commands: list[DrawCommand] = []

    def clear(self) -> None:
        self.commands.clear()

    def _record(self, shape: str, *args: Any) -> None:
        self.commands.append(DrawCommand(shape, args))

    def ellipse(self, left, top, right, bottom, fill: Optional[Color] = None) -> None:
        self._record("ellipse", left, top, right, bottom, fill)

    def line(self, start, end, color: Color = BLACK, width: int = 1) -> None:
        self._record("line", start, end, color, width)

    def rectangle(self, left, top, right, bottom, fill: Optional[Color] = None) -> None:
        self._record("rectangle", left, top, right, bottom, fill)

    def polygon(self, points, fill: Optional[Color] = None) -> None:
        self._record("polygon", tuple(points), fill)

    def pixel(self, x, y, color: Color = BLACK) -> None:
        self._record("pixel", x, y, color)

    def text(self, x, y, text: str) -> None:
        self._record("text", x, y, text)


class Circle:
    """A circle with an integer radius that can be drawn and collided."""

    def __init__(self, radius: int, center: Optional[Vector2] = None) -> None:
        self.radius = radius
        self.center = center.copy() if center is not None else Vector2()
        self.active = True
        self.fill: Optional[Color] = None

    def render(self, canvas: Canvas) -> None:
        if not self.active:
            return
        canvas.ellipse(
            self.center.x - self.radius,
            self.center.y - self.radius,
            self.center.x + self.radius,
            self.center.y + self.radius,
            self.fill,
        )

    def is_collision_point(self, x: float, y: float) -> bool:
        """Point test using offsets truncated to whole pixels."""
        dx = int(self.center.x - x)
        dy = int(self.center.y - y)
        return dx * dx + dy * dy <= self.radius * self.radius

    def is_collision_circle(self, other: Circle) -> bool:
        """Circle overlap test using offsets truncated to whole pixels."""
        dx = int(self.center.x - other.center.x)
        dy = int(self.center.y - other.center.y)
        reach = self.radius + other.radius
        return dx * dx + dy * dy <= reach * reach