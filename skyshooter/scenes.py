"""Game scenes and the manager that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from skyshooter.bullet import BulletManager
from skyshooter.circle import Canvas, Color
from skyshooter.enemy import SCREEN_WIDTH, EnemyManager
from skyshooter.keyboard import Keyboard
from skyshooter.player import VK_LBUTTON, Player
from skyshooter.score import ScoreManager
from skyshooter.vector2 import Vector2

Rect = tuple[int, int, int, int]
WHITE: Color = (255, 255, 255)


def _contains(rect: Rect, point: Vector2) -> bool:
    left, top, right, bottom = rect
    return left <= point.x <= right and top <= point.y <= bottom


@dataclass
class GameContext:
    """State shared by every scene during a frame."""

    keyboard: Keyboard = field(default_factory=Keyboard)
    mouse_pos: Vector2 = field(default_factory=Vector2)
    bullets: BulletManager = field(default_factory=BulletManager)
    enemies: EnemyManager = field(default_factory=EnemyManager)
    score: ScoreManager = field(default_factory=ScoreManager)
    dt: float = 0.0


class SceneType(Enum):
    LOBBY = 0
    CHOICE_CHARACTER = 1
    IN_GAME = 2
    GAME_OVER = 3
    GAME_CLEAR = 4
    MAX = 5


class Scene(ABC):
    """A screen of the game that updates and draws itself."""

    def __init__(self, manager: SceneManager) -> None:
        self.manager = manager

    @property
    def context(self) -> GameContext:
        return self.manager.context

    @abstractmethod
    def update(self) -> None: ...

    @abstractmethod
    def render(self, canvas: Canvas) -> None: ...


class LobbyScene(Scene):
    """Title screen with a single play button."""

    BUTTON_COLOR: Color = (75, 227, 131)
    HOVER_COLOR: Color = (58, 166, 98)

    def __init__(self, manager: SceneManager) -> None:
        super().__init__(manager)
        center_x = SCREEN_WIDTH // 2
        self.play_button: Rect = (center_x - 100, 600, center_x + 100, 700)
        self.hovered = False

    def update(self) -> None:
        self.hovered = _contains(self.play_button, self.context.mouse_pos)
        if self.hovered and self.context.keyboard.is_key_down(VK_LBUTTON):
            self.manager.set_scene_type(SceneType.CHOICE_CHARACTER)

    def render(self, canvas: Canvas) -> None:
        center_x = SCREEN_WIDTH // 2
        fill = self.HOVER_COLOR if self.hovered else self.BUTTON_COLOR
        canvas.rectangle(*self.play_button, fill)
        triangle = ((center_x - 30, 630), (center_x - 30, 670), (center_x + 30, 650))
        canvas.polygon(triangle, WHITE)


class ChoiceCharacterScene(Scene):
    """Character selection: clicking any button starts the game."""

    BUTTON_COLOR: Color = (63, 193, 232)
    HOVER_COLOR: Color = (64, 168, 199)

    def __init__(self, manager: SceneManager) -> None:
        super().__init__(manager)
        self.buttons: list[Rect] = [
            (20, 300, 193, 500),
            (213, 300, 386, 500),
            (406, 300, 579, 500),
        ]
        self.hovered = [False] * len(self.buttons)

    def update(self) -> None:
        if any(self.hovered) and self.context.keyboard.is_key_down(VK_LBUTTON):
            self.manager.init_in_game_player(Player())
            self.manager.set_scene_type(SceneType.IN_GAME)

    def render(self, canvas: Canvas) -> None:
        """Draw the buttons; hover state is refreshed here, as drawn."""
        self.hovered = [_contains(b, self.context.mouse_pos) for b in self.buttons]
        for button, hovered in zip(self.buttons, self.hovered):
            canvas.rectangle(*button, self.HOVER_COLOR if hovered else self.BUTTON_COLOR)


class ShootingScene(Scene):
    """The playing field: player, bullets, enemies, score and a life icon."""

    SCORE_POSITION = (SCREEN_WIDTH // 2, 50)
    ICON_CENTER = (30, 30)
    ICON_RADIUS = 20

    def __init__(self, manager: SceneManager) -> None:
        super().__init__(manager)
        self.player: Optional[Player] = None

    def set_player(self, player: Player) -> None:
        self.player = player

    def update(self) -> None:
        ctx = self.context
        if self.player is not None:
            self.player.update(ctx.dt, ctx.keyboard, ctx.mouse_pos, ctx.bullets)
        ctx.bullets.update(ctx.dt)
        ctx.enemies.update(ctx.dt, ctx.bullets)

    def render(self, canvas: Canvas) -> None:
        ctx = self.context
        if self.player is not None:
            self.player.render(canvas)
        ctx.bullets.render(canvas)
        ctx.enemies.render(canvas)
        self._show_score(canvas)
        self._draw_player_icon(canvas)

    def _show_score(self, canvas: Canvas) -> None:
        x, y = self.SCORE_POSITION
        canvas.text(x, y, str(self.context.score.score))

    def _draw_player_icon(self, canvas: Canvas) -> None:
        cx, cy = self.ICON_CENTER
        r = self.ICON_RADIUS
        front = (cx, cy - r)
        right = (cx + r, cy + r)
        left = (cx - r, cy + r)
        tail = (cx, cy + (r >> 1))
        for start, end in ((front, right), (front, left), (tail, right), (tail, left)):
            canvas.line(start, end)


class SceneManager:
    """Owns the scenes and knows which one is current."""

    def __init__(self, context: Optional[GameContext] = None) -> None:
        self.context = context if context is not None else GameContext()
        self.scene_type = SceneType.LOBBY
        self.scenes: dict[SceneType, Scene] = {
            SceneType.LOBBY: LobbyScene(self),
            SceneType.CHOICE_CHARACTER: ChoiceCharacterScene(self),
            SceneType.IN_GAME: ShootingScene(self),
        }

    def scene(self) -> Scene:
        try:
            return self.scenes[self.scene_type]
        except KeyError:
            raise LookupError(f"no scene for {self.scene_type.name}") from None

    def set_scene_type(self, scene_type: SceneType) -> None:
        self.scene_type = scene_type

    def init_in_game_player(self, player: Player) -> None:
        in_game = self.scenes[SceneType.IN_GAME]
        assert isinstance(in_game, ShootingScene)
        in_game.set_player(player)
        self.context.enemies.set_player(player)