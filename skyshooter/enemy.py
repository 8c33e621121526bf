"""Enemies that fall down the screen, fire at the player and take bullet hits."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Optional

from skyshooter.bullet import BulletManager
from skyshooter.circle import Canvas, Circle, Color
from skyshooter.vector2 import Vector2

if TYPE_CHECKING:
    from skyshooter.player import Player

SCREEN_WIDTH = 600
SCREEN_HEIGHT = 800


class Enemy(Circle):
    """A falling enemy with hit points and a short flash after each hit."""

    RADIUS = 30
    SPEED = 300
    MAX_HP = 30
    DAMAGE = 10
    DAMAGE_INTERVAL = 0.1
    FIRE_INTERVAL = 1.0
    NORMAL_COLOR: Color = (0, 0, 255)
    DAMAGED_COLOR: Color = (255, 0, 0)

    def __init__(self) -> None:
        super().__init__(self.RADIUS)
        self.hp = 0
        self.damage_timer = 0.0
        self.fire_timer = 0.0
        self.is_damaged = False
        self.fill = self.NORMAL_COLOR
        self.player: Optional[Player] = None

    def update(self, dt: float, bullets: BulletManager) -> None:
        if not self.active:
            return
        self._move(dt)
        self._damage(dt, bullets)
        self._fire(dt, bullets)

    def render(self, canvas: Canvas) -> None:
        if not self.active:
            return
        super().render(canvas)

    def spawn(self, pos: Vector2) -> None:
        """Bring the enemy to life at ``pos`` with full health."""
        self.center = pos.copy()
        self.active = True
        self.fill = self.NORMAL_COLOR
        self.hp = self.MAX_HP
        self.is_damaged = False

    def _damage(self, dt: float, bullets: BulletManager) -> None:
        if self.is_damaged:
            self.damage_timer += dt
            if self.damage_timer >= self.DAMAGE_INTERVAL:
                self.damage_timer = 0.0
                self.is_damaged = False
                self.fill = self.NORMAL_COLOR
            return

        if bullets.is_collision(self, "Player"):
            self.hp -= self.DAMAGE
            self.is_damaged = True
            self.fill = self.DAMAGED_COLOR
            if self.hp <= 0:
                self.active = False

    def _move(self, dt: float) -> None:
        self.center.y += self.SPEED * dt
        if self.center.y > SCREEN_HEIGHT:
            self.active = False

    def _fire(self, dt: float, bullets: BulletManager) -> None:
        self.fire_timer += dt
        if self.fire_timer >= self.FIRE_INTERVAL:
            self.fire_timer = 0.0
            if self.player is None:
                return
            direction = self.player.center - self.center
            bullets.fire(self.center, "Enemy", direction)


class EnemyManager:
    """Spawns enemies in rounds from a fixed pool."""

    ENEMY_SPAWN = 5
    POOL_SIZE = 50
    SPAWN_TIME = 0.5
    BOSS_SPAWN_TIME = 180.0
    ROUND_TIME = 5.0

    def __init__(
        self, rng: Optional[random.Random] = None, pool_size: int = POOL_SIZE
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.spawn_positions = [Vector2(100.0 * i, 0.0) for i in range(1, 6)]
        self.enemies = [Enemy() for _ in range(pool_size)]
        for enemy in self.enemies:
            enemy.active = False
        self.boss = Enemy()
        self.boss.active = False

        self.spawn_count = 0
        self.spawn_timer = 0.0
        self.boss_spawn_timer = 0.0
        self.round_timer = 0.0
        self.spawning = False

    def update(self, dt: float, bullets: BulletManager) -> None:
        self._round_timer(dt)
        self._spawn_timer(dt)
        for enemy in self.enemies:
            enemy.update(dt, bullets)

    def render(self, canvas: Canvas) -> None:
        for enemy in self.enemies:
            enemy.render(canvas)

    def set_player(self, player: Player) -> None:
        for enemy in self.enemies:
            enemy.player = player
        self.boss.player = player

    def _round_timer(self, dt: float) -> None:
        if not self.spawning:
            self.round_timer += dt
        self.boss_spawn_timer += dt

        if not self.spawning and self.round_timer >= self.ROUND_TIME:
            self.spawning = True
            self.round_timer = 0.0

        if self.boss_spawn_timer >= self.BOSS_SPAWN_TIME:
            self._boss_spawn()

    def _spawn_timer(self, dt: float) -> None:
        position_index = self._rng.randrange(len(self.spawn_positions))
        if not self.spawning:
            return

        self.spawn_timer += dt
        if self.spawn_timer >= self.SPAWN_TIME:
            self.spawn_timer = 0.0
            self.spawn_count += 1
            self._spawn(position_index)
            if self.spawn_count == self.ENEMY_SPAWN:
                self.spawn_count = 0
                self.spawning = False

    def _spawn(self, position_index: int) -> None:
        enemy = next((e for e in self.enemies if not e.active), None)
        if enemy is not None:
            enemy.spawn(self.spawn_positions[position_index])

    def _boss_spawn(self) -> None:
        self.boss.spawn(Vector2(SCREEN_WIDTH / 2, 0.0))