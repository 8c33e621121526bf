import pytest

from skyshooter.circle import Canvas
from skyshooter.player import VK_LBUTTON, Player
from skyshooter.scenes import (
    ChoiceCharacterScene,
    GameContext,
    LobbyScene,
    SceneManager,
    SceneType,
    ShootingScene,
)
from skyshooter.vector2 import Vector2


def _click(manager, x, y):
    manager.context.mouse_pos = Vector2(x, y)
    manager.context.keyboard.update({VK_LBUTTON})


def test_starts_in_lobby():
    manager = SceneManager()
    assert manager.scene_type is SceneType.LOBBY
    assert isinstance(manager.scene(), LobbyScene)


def test_lobby_click_on_play_goes_to_choice():
    manager = SceneManager()
    left, top, right, bottom = manager.scene().play_button
    _click(manager, (left + right) / 2, (top + bottom) / 2)
    manager.scene().update()
    assert manager.scene_type is SceneType.CHOICE_CHARACTER


def test_lobby_click_elsewhere_stays():
    manager = SceneManager()
    _click(manager, 0, 0)
    manager.scene().update()
    assert manager.scene_type is SceneType.LOBBY


def test_lobby_render_button_and_triangle():
    manager = SceneManager()
    canvas = Canvas()
    lobby = manager.scene()
    lobby.render(canvas)
    rect, triangle = canvas.commands
    assert rect.shape == "rectangle"
    assert rect.args[:4] == lobby.play_button
    assert rect.args[4] == LobbyScene.BUTTON_COLOR
    assert triangle.shape == "polygon"
    assert triangle.args[1] == (255, 255, 255)


def test_lobby_hover_changes_colour():
    manager = SceneManager()
    lobby = manager.scene()
    left, top, _, _ = lobby.play_button
    manager.context.mouse_pos = Vector2(left, top)
    lobby.update()
    canvas = Canvas()
    lobby.render(canvas)
    assert canvas.commands[0].args[4] == LobbyScene.HOVER_COLOR


def test_choice_click_starts_game_with_player():
    manager = SceneManager()
    manager.set_scene_type(SceneType.CHOICE_CHARACTER)
    choice = manager.scene()
    left, top, right, bottom = choice.buttons[0]
    _click(manager, left + 1, top + 1)
    choice.render(Canvas())
    choice.update()
    assert manager.scene_type is SceneType.IN_GAME
    shooting = manager.scene()
    assert isinstance(shooting.player, Player)
    assert all(e.player is shooting.player for e in manager.context.enemies.enemies)


def test_choice_without_hover_does_nothing():
    manager = SceneManager()
    manager.set_scene_type(SceneType.CHOICE_CHARACTER)
    _click(manager, 5, 5)
    manager.scene().render(Canvas())
    manager.scene().update()
    assert manager.scene_type is SceneType.CHOICE_CHARACTER


def test_choice_render_marks_hovered_button():
    manager = SceneManager()
    choice = manager.scenes[SceneType.CHOICE_CHARACTER]
    left, top, _, _ = choice.buttons[2]
    manager.context.mouse_pos = Vector2(left, top)
    canvas = Canvas()
    choice.render(canvas)
    assert choice.hovered == [False, False, True]
    fills = [c.args[4] for c in canvas.commands]
    assert fills[2] == ChoiceCharacterScene.HOVER_COLOR
    assert fills[0] == ChoiceCharacterScene.BUTTON_COLOR


def test_game_over_has_no_scene():
    manager = SceneManager()
    manager.set_scene_type(SceneType.GAME_OVER)
    with pytest.raises(LookupError):
        manager.scene()


def test_shooting_update_moves_bullets():
    context = GameContext(dt=0.1)
    manager = SceneManager(context)
    manager.set_scene_type(SceneType.IN_GAME)
    bullet = context.bullets.fire(Vector2(100.0, 400.0), "Player")
    manager.scene().update()
    assert bullet.center.y == pytest.approx(400.0 - bullet.SPEED * 0.1)


def test_shooting_render_shows_score():
    manager = SceneManager()
    manager.set_scene_type(SceneType.IN_GAME)
    manager.context.score.add_score(25)
    canvas = Canvas()
    manager.scene().render(canvas)
    texts = [c.args[2] for c in canvas.commands if c.shape == "text"]
    assert texts == ["25"]


def test_shooting_render_draws_player_when_set():
    manager = SceneManager()
    shooting = manager.scenes[SceneType.IN_GAME]
    assert isinstance(shooting, ShootingScene)
    without = Canvas()
    shooting.render(without)
    shooting.set_player(Player())
    with_player = Canvas()
    shooting.render(with_player)
    assert len(with_player.commands) == len(without.commands) + 5