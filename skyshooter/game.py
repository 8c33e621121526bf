"""Game loop: owns the timer and scenes, and runs the window."""

from __future__ import annotations

import argparse
import string
import time
from typing import Callable, Iterable, Optional

import pygame

from skyshooter.circle import BLACK, Canvas
from skyshooter.enemy import SCREEN_HEIGHT, SCREEN_WIDTH
from skyshooter.player import VK_LBUTTON
from skyshooter.scenes import GameContext, SceneManager, SceneType
from skyshooter.timer import Timer
from skyshooter.vector2 import Vector2

TITLE = "Sky Shooter"
WHITE = (255, 255, 255)


class GameManager:
    """Advances the current scene each frame and draws it."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self.timer = Timer(clock)
        self.context = GameContext()
        self.scenes = SceneManager(self.context)

    def update(self, pressed: Iterable[int]) -> None:
        """Run one frame with ``pressed`` as the keys held right now."""
        self.timer.update()
        self.context.keyboard.update(pressed)
        self.context.dt = self.timer.elapsed_time
        self.scenes.scene().update()

    def render(self, canvas: Canvas) -> None:
        canvas.clear()
        self.scenes.scene().render(canvas)

    def on_mouse_move(self, x: float, y: float) -> None:
        self.context.mouse_pos = Vector2(float(x), float(y))

    def game_over(self) -> None:
        self.scenes.set_scene_type(SceneType.GAME_OVER)

    def game_clear(self) -> None:
        self.scenes.set_scene_type(SceneType.GAME_CLEAR)


def _pressed_keys() -> set[int]:
    keys = pygame.key.get_pressed()
    held = {ord(ch) for ch in string.ascii_uppercase if keys[ord(ch.lower())]}
    if pygame.mouse.get_pressed()[0]:
        held.add(VK_LBUTTON)
    return held


def _paint(surface: pygame.Surface, font: pygame.font.Font, canvas: Canvas) -> None:
    surface.fill(WHITE)
    for command in canvas.commands:
        args = command.args
        if command.shape in ("ellipse", "rectangle"):
            left, top, right, bottom, fill = args
            rect = pygame.Rect(int(left), int(top), int(right - left), int(bottom - top))
            draw = pygame.draw.ellipse if command.shape == "ellipse" else pygame.draw.rect
            draw(surface, fill or WHITE, rect)
            draw(surface, BLACK, rect, 1)
        elif command.shape == "line":
            start, end, color, width = args
            pygame.draw.line(surface, color, tuple(start), tuple(end), width)
        elif command.shape == "polygon":
            points, fill = args
            pygame.draw.polygon(surface, fill or WHITE, points)
            pygame.draw.polygon(surface, BLACK, points, 1)
        elif command.shape == "pixel":
            x, y, color = args
            surface.set_at((int(x), int(y)), color)
        elif command.shape == "text":
            x, y, text = args
            image = font.render(text, True, BLACK)
            surface.blit(image, image.get_rect(midbottom=(int(x), int(y))))


def main(argv: Optional[list[str]] = None) -> int:
    """Open the game window and run until it is closed."""
    argparse.ArgumentParser(prog="skyshooter", description=TITLE).parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        font = pygame.font.Font(None, 48)
        game = GameManager()
        canvas = Canvas()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEMOTION:
                    game.on_mouse_move(*event.pos)
            if not running:
                break
            game.update(_pressed_keys())
            game.render(canvas)
            _paint(screen, font, canvas)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0