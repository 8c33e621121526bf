# skyshooter

A small vertical arcade shooter. It opens on a lobby screen. From there
you pick a character, and then you fly a ship at the bottom of a 600 × 800
window while waves of enemies drop from the top and shoot at you.

## Installing

```
pip install .
```

## Playing

```
skyshooter
```

- **Lobby**: move the pointer over the green play button and click it.
- **Character choice**: click any of the three buttons. Each one starts
  the game with the same ship.
- **In game**:
  - `W` `A` `S` `D` move the ship. The ship stays inside the window.
  - The left mouse button fires a bullet from the nose of the ship
    towards the mouse pointer.
  - `Q` and `E` turn the aiming line while they are held.

Enemies come in rounds of five, one every half second. They spawn at one
of five points along the top edge. A new round starts five seconds after
the last one ends. Each enemy falls down the screen and fires at the ship
once a second. An enemy takes three hits and flashes red for a tenth of a
second after each hit. While it is red it cannot be hit.

## What it does not do

- The ship has no health, and enemy bullets pass through it. There is no
  game-over or game-clear screen. `GameManager.game_over()` and
  `GameManager.game_clear()` switch to scene types that have no scene,
  and after that `SceneManager.scene()` raises `LookupError`.
- The score shown at the top of the playing field starts at 0 and nothing
  in the game adds to it. `ScoreManager.add_score` is there for code that
  drives the game.
- After three minutes a boss enemy is placed at the top centre of the
  screen, but it is neither moved nor drawn.
- The window can only be closed. There is no menu or pause.

## Using the pieces

The game logic does not depend on a window, so you can drive it directly:

```python
from skyshooter.vector2 import Vector2
from skyshooter.bullet import BulletManager
from skyshooter.circle import Circle

bullets = BulletManager()
bullets.fire(Vector2(100, 500), "Player", Vector2.up())
bullets.update(0.5)

target = Circle(30)
target.center = Vector2(100, 250)
print(bullets.is_collision(target, "Player"))  # True
```

The modules:

- `skyshooter.vector2`: `Vector2`, a mutable 2D vector with `+`, `-`,
  scaling, `magnitude()`, `normalize()` and `normalized()`. It also has the
  unit directions `up()`, `down()`, `left()` and `right()`. On screen, `up()`
  is `(0, -1)`.
- `skyshooter.timer`: `Timer`, which measures `elapsed_time` between
  `update()` calls and keeps a `frame_rate` for the last full second. It
  takes an optional clock function.
- `skyshooter.keyboard`: `Keyboard`, which is fed the set of held key codes
  once per frame. It answers `is_key_down`, `is_key_up`, `is_key_press`
  (held for more than one frame) and `is_key_held`.
- `skyshooter.circle`: `Circle` with point and circle collision, and
  `Canvas`, a drawing surface that records each operation in `commands`.
- `skyshooter.bullet`: `Bullet` and `BulletManager`, a pool of 50
  reusable bullets. `fire` returns the bullet it used, or `None` when the
  pool is spent.
- `skyshooter.enemy`: `Enemy` and `EnemyManager`. The manager takes an
  optional `random.Random` for the choice of spawn point.
- `skyshooter.player`: `Player`, the ship.
- `skyshooter.score`: `ScoreManager`.
- `skyshooter.scenes`: `LobbyScene`, `ChoiceCharacterScene`,
  `ShootingScene`, the `SceneManager` that switches between them, and the
  `GameContext` they share.
- `skyshooter.game`: `GameManager`, which ties it together. Pass the set of
  pressed keys to `update(pressed)`, mouse positions to `on_mouse_move(x, y)`,
  and a `Canvas` to `render`. `main()` runs the pygame window.
- `skyshooter.paint_tool`: `PaintTool`, a small mouse-driven drawing tool
  that is separate from the game. F1 onwards picks the mode (point, pen,
  line) and the keys `1` to `6` pick the colour. It draws onto a `Canvas`.

## Running the tests

```
pip install .[test]
pytest
```