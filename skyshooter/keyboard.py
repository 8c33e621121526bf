"""Keyboard state tracking with per-frame transitions."""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class KeyState(Enum):
    NONE = 0
    DOWN = 1
    UP = 2
    PRESS = 3


class Keyboard:
    """Remembers which keys were held last frame and this frame."""

    def __init__(self) -> None:
        self._previous: frozenset[int] = frozenset()
        self._current: frozenset[int] = frozenset()

    def update(self, pressed: Iterable[int]) -> None:
        """Advance one frame; ``pressed`` holds the key codes held right now."""
        self._previous = self._current
        self._current = frozenset(pressed)

    def state(self, key: int) -> KeyState:
        was_held = key in self._previous
        is_held = key in self._current
        if is_held and not was_held:
            return KeyState.DOWN
        if was_held and not is_held:
            return KeyState.UP
        if was_held and is_held:
            return KeyState.PRESS
        return KeyState.NONE

    def is_key_down(self, key: int) -> bool:
        """True on the frame the key went down."""
        return self.state(key) is KeyState.DOWN

    def is_key_up(self, key: int) -> bool:
        """True on the frame the key was released."""
        return self.state(key) is KeyState.UP

    def is_key_press(self, key: int) -> bool:
        """True while the key stays held after the first frame."""
        return self.state(key) is KeyState.PRESS

    def is_key_held(self, key: int) -> bool:
        """True whenever the key is currently held."""
        return key in self._current