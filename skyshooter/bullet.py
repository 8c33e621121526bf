"""Bullets and the fixed-size pool that fires and collides them."""

from __future__ import annotations

from typing import Optional

from skyshooter.circle import Canvas, Circle
from skyshooter.vector2 import Vector2


class Bullet(Circle):
    """A small circle that travels in a straight line."""

    SPEED = 500.0
    RADIUS = 10

    def __init__(self) -> None:
        super().__init__(self.RADIUS)
        self.tag = ""
        self.direction = Vector2.up()

    def update(self, dt: float) -> None:
        self.center = self.center + self.direction * self.SPEED * dt
        if self.center.y < 0:
            self.active = False

    def fire(self, pos: Vector2, direction: Optional[Vector2] = None) -> None:
        """Launch from ``pos`` along ``direction`` (upwards by default)."""
        if direction is None:
            direction = Vector2.up()
        self.direction = direction.normalized()
        self.active = True
        self.center = pos.copy()


class BulletManager:
    """A pool of reusable bullets, all inactive at first."""

    POOL_SIZE = 50

    def __init__(self, pool_size: int = POOL_SIZE) -> None:
        self.bullets = [Bullet() for _ in range(pool_size)]
        for bullet in self.bullets:
            bullet.active = False

    def update(self, dt: float) -> None:
        for bullet in self.bullets:
            bullet.update(dt)

    def render(self, canvas: Canvas) -> None:
        for bullet in self.bullets:
            bullet.render(canvas)

    def is_collision(self, circle: Circle, tag: str) -> bool:
        """Consume the first active bullet with ``tag`` that touches ``circle``."""
        for bullet in self.bullets:
            if bullet.active and bullet.tag == tag and bullet.is_collision_circle(circle):
                bullet.active = False
                return True
        return False

    def fire(
        self, pos: Vector2, tag: str, direction: Optional[Vector2] = None
    ) -> Optional[Bullet]:
        """Fire the first free bullet; returns it, or None when the pool is spent."""
        bullet = next((b for b in self.bullets if not b.active), None)
        if bullet is None:
            return None
        bullet.fire(pos, direction)
        bullet.tag = tag
        return bullet