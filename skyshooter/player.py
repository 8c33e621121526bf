"""The player's ship: moves with WASD, aims with Q/E and fires with the mouse."""

from __future__ import annotations

import math

from skyshooter.bullet import BulletManager
from skyshooter.circle import Canvas, Circle, Color
from skyshooter.enemy import SCREEN_HEIGHT, SCREEN_WIDTH
from skyshooter.keyboard import Keyboard
from skyshooter.vector2 import Vector2

VK_LBUTTON = 0x01
PI = 3.141592


class Player(Circle):
    """A triangular ship that stays inside the screen."""

    RADIUS = 50
    SPEED = 300
    AIM_LENGTH = 50.0
    PEN_COLOR: Color = (100, 230, 150)
    PEN_WIDTH = 5

    def __init__(self) -> None:
        super().__init__(
            self.RADIUS, Vector2(SCREEN_WIDTH >> 1, SCREEN_HEIGHT * 4 // 5)
        )
        self.angle = PI * 0.5
        self.fire_pos = Vector2()
        self.aim_point = Vector2()

    def update(
        self,
        dt: float,
        keyboard: Keyboard,
        mouse_pos: Vector2,
        bullets: BulletManager,
    ) -> None:
        self._control_move(dt, keyboard)
        self._control_fire(dt, keyboard, mouse_pos, bullets)
        self._aim()
        self._clamp_to_screen()

    def render(self, canvas: Canvas) -> None:
        self._draw_ship(canvas)
        canvas.line(tuple(self.fire_pos), tuple(self.aim_point))

    def _fire(self, mouse_pos: Vector2, bullets: BulletManager) -> None:
        direction = mouse_pos - self.fire_pos
        bullets.fire(self.fire_pos, "Player", direction.normalized())

    def _control_fire(
        self,
        dt: float,
        keyboard: Keyboard,
        mouse_pos: Vector2,
        bullets: BulletManager,
    ) -> None:
        if keyboard.is_key_down(VK_LBUTTON):
            self._fire(mouse_pos, bullets)
        if keyboard.is_key_press(ord("E")):
            self.angle -= dt
        if keyboard.is_key_press(ord("Q")):
            self.angle += dt

    def _control_move(self, dt: float, keyboard: Keyboard) -> None:
        moves = {
            "D": Vector2.right(),
            "A": Vector2.left(),
            "W": Vector2.up(),
            "S": Vector2.down(),
        }
        for key, direction in moves.items():
            if keyboard.is_key_held(ord(key)):
                self.center = self.center + direction * self.SPEED * dt

    def _clamp_to_screen(self) -> None:
        r = self.radius
        if self.center.x - r < 0:
            self.center.x = r
        if self.center.x + r > SCREEN_WIDTH:
            self.center.x = SCREEN_WIDTH - r
        if self.center.y - r < 0:
            self.center.y = r
        if self.center.y + r > SCREEN_HEIGHT:
            self.center.y = SCREEN_HEIGHT - r

    def _aim(self) -> None:
        x = math.cos(self.angle) * self.AIM_LENGTH
        y = -math.sin(self.angle) * self.AIM_LENGTH
        self.aim_point = self.fire_pos + Vector2(x, y)

    def _draw_ship(self, canvas: Canvas) -> None:
        cx, cy, r = self.center.x, self.center.y, self.radius
        self.fire_pos = Vector2(cx, cy - r)
        nose = (int(self.fire_pos.x), int(self.fire_pos.y))
        right = (int(cx + r), int(cy + r))
        left = (int(cx - r), int(cy + r))
        tail = (int(cx), int(cy + (r >> 1)))

        for start, end in ((nose, right), (nose, left), (tail, right), (tail, left)):
            canvas.line(start, end, self.PEN_COLOR, self.PEN_WIDTH)