import pytest

from skyshooter.bullet import BulletManager
from skyshooter.circle import Canvas
from skyshooter.enemy import SCREEN_HEIGHT, SCREEN_WIDTH
from skyshooter.keyboard import Keyboard
from skyshooter.player import VK_LBUTTON, Player
from skyshooter.vector2 import Vector2


def _step(player, keys, dt=0.1, mouse=None, bullets=None, keyboard=None):
    keyboard = keyboard or Keyboard()
    keyboard.update(keys)
    bullets = bullets or BulletManager()
    player.update(dt, keyboard, mouse or Vector2(), bullets)
    return bullets


def test_starts_near_bottom_centre():
    player = Player()
    assert player.center == Vector2(SCREEN_WIDTH >> 1, SCREEN_HEIGHT * 4 // 5)


def test_moves_right_while_d_held():
    player = Player()
    start = player.center.x
    _step(player, {ord("D")}, dt=0.1)
    assert player.center.x == pytest.approx(start + Player.SPEED * 0.1)


def test_moves_up_while_w_held():
    player = Player()
    start = player.center.y
    _step(player, {ord("W")}, dt=0.1)
    assert player.center.y == pytest.approx(start - Player.SPEED * 0.1)


def test_clamped_to_left_edge():
    player = Player()
    _step(player, {ord("A")}, dt=10.0)
    assert player.center.x == Player.RADIUS


def test_clamped_to_bottom_edge():
    player = Player()
    _step(player, {ord("S")}, dt=10.0)
    assert player.center.y == SCREEN_HEIGHT - Player.RADIUS


def test_render_sets_fire_position_and_draws_ship():
    player = Player()
    canvas = Canvas()
    player.render(canvas)
    assert player.fire_pos == Vector2(player.center.x, player.center.y - Player.RADIUS)
    lines = [c for c in canvas.commands if c.shape == "line"]
    assert len(lines) == 5
    assert all(c.args[2] == Player.PEN_COLOR for c in lines[:4])
    assert lines[0].args[3] == Player.PEN_WIDTH


def test_click_fires_towards_mouse():
    player = Player()
    player.render(Canvas())
    bullets = _step(player, {VK_LBUTTON}, mouse=Vector2(player.fire_pos.x, 0.0))
    fired = [b for b in bullets.bullets if b.active]
    assert len(fired) == 1
    assert fired[0].tag == "Player"
    assert fired[0].direction == Vector2(0.0, -1.0)
    assert fired[0].center == player.fire_pos


def test_holding_button_fires_once():
    player = Player()
    player.render(Canvas())
    keyboard = Keyboard()
    bullets = BulletManager()
    mouse = Vector2(0.0, 0.0)
    _step(player, {VK_LBUTTON}, mouse=mouse, bullets=bullets, keyboard=keyboard)
    _step(player, {VK_LBUTTON}, mouse=mouse, bullets=bullets, keyboard=keyboard)
    assert sum(b.active for b in bullets.bullets) == 1


def test_aim_points_straight_up_initially():
    player = Player()
    player.render(Canvas())
    _step(player, set())
    assert player.aim_point.x == pytest.approx(player.fire_pos.x, abs=1e-4)
    assert player.aim_point.y == pytest.approx(player.fire_pos.y - Player.AIM_LENGTH)


def test_e_held_turns_aim_clockwise():
    player = Player()
    keyboard = Keyboard()
    start = player.angle
    _step(player, {ord("E")}, dt=0.2, keyboard=keyboard)
    assert player.angle == start
    _step(player, {ord("E")}, dt=0.2, keyboard=keyboard)
    assert player.angle == pytest.approx(start - 0.2)


def test_q_held_turns_aim_anticlockwise():
    player = Player()
    keyboard = Keyboard()
    start = player.angle
    _step(player, {ord("Q")}, dt=0.2, keyboard=keyboard)
    _step(player, {ord("Q")}, dt=0.2, keyboard=keyboard)
    assert player.angle == pytest.approx(start + 0.2)