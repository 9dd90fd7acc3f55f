# mariogame

A small side-scrolling platform game. The player runs to the right through an
endless world of platforms, which is generated at random as the player moves.
Along the way there are coins to collect and enemies to avoid or stomp.

The package holds the complete game simulation, a rendering layer that draws
onto any drawing surface you supply, and a terminal menu to start runs from.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## The `mariogame` command

```
mariogame [--seed N]
```

This starts the main menu and reads one command per line from standard input:

| Command                      | Effect                                            |
|------------------------------|---------------------------------------------------|
| `new` or `n`                 | starts a fresh run and plays it until game over   |
| `about` or `a`               | prints the About title and the control lines      |
| `exit`, `e`, `quit` or `q`   | quits                                             |

Any other non-empty line prints `Unknown command: ...`. When a run ends, the
command prints `GAME OVER - coins: N`. `--seed` makes level generation
repeatable.

## Rules

- Touching a coin adds one to the coin counter.
- Landing on an enemy while falling defeats it and also adds one coin.
- Touching an enemy in any other way, or falling below the world, costs a life.
  The player starts with one life, so this ends the run.
- After a hit the player is invulnerable for two seconds, and `GameView`
  makes the character blink during that time.
- Enemies walk along platforms, turn round near the edges, and disappear when
  they fall below the world.

The controls the game understands are Left (move left), Right (move right) and
Space (jump). They are given as `Key` values from `mariogame.game_view`.

## What the package does not do

The package does not open a window or read the keyboard itself. `GameView` and
`AboutWindow` draw onto a `Canvas` object that you provide. `MenuView` exposes
its buttons as methods (`new_game()`, `about()`, `exit()`). In the `mariogame`
command, no keys are held during a run, so the player does not move and the
run continues until the game ends by itself. To play interactively, connect a
display and keyboard backend to the classes described below.

## Modules

- `mariogame.entities`: `GameObject` (a rectangle with `x`, `y`, `width`,
  `height`, `active`, `set_position()`, `set_size()` and `collides_with()`),
  `Platform` and the 20×20 `Coin`.
- `mariogame.enemy`: `Enemy`, a 40×40 walker with `update()` and
  `apply_gravity(platforms)`.
- `mariogame.player`: `Player`, with `jump()`, `move_left()`, `move_right()`,
  `stop()`, `add_coin()`, `take_damage()`, `respawn()`, `stop_jump()`,
  `set_invulnerable()`, `update()` and `reset()`.
- `mariogame.model`: `GameModel(seed=None)`, which holds the `player`,
  `platforms`, `enemies`, `coins`, `camera_x`, `world_width`, `game_over` and
  `running`. It provides `update()`, `check_collisions()`,
  `generate_more_world()` and `reset()`. `start()` and `stop()` run and end a
  60 Hz update loop on a background thread.
- `mariogame.game_view`: `GameView`, which renders a model through its camera.
  The module also defines the `Canvas` protocol and the `Key` enum.
- `mariogame.menu_view`: `MenuView` with its three `Button`s.
- `mariogame.about_window`: `AboutWindow`, which holds the control help and an
  OK button.
- `mariogame.controllers`: `AboutController`, `GameController`,
  `MenuController` and the `main()` entry point.

## Using the model directly

```python
from mariogame.entities import Platform
from mariogame.player import Player
from mariogame.model import GameModel

player = Player(100, 300)
player.move_right()
player.jump()
player.update()

ground = Platform(0, 550, 800, 20)
print(player.collides_with(ground))

model = GameModel(seed=1)
model.start()      # steps the world 60 times a second in the background
with model.locked():
    print(model.player.coins, len(model.enemies))
model.stop()
```

`GameModel.locked()` is a context manager that holds the model's data lock.
Use it to read a consistent snapshot while the background loop is running.

## Driving a game with your own input

```python
from mariogame.controllers import GameController
from mariogame.game_view import Key

game = GameController(1200, 600, seed=1)
game.run()
game.handle_key_down(Key.RIGHT)
while game.tick():          # call once per frame
    ...                     # draw with game.view.render(canvas)
```

`tick()` applies the held keys to the player and returns `False` once the game
is over. At that point it returns to the menu controller, if one is set.

A `Canvas` is any object with the methods `color`, `rectf`, `rect`, `line`,
`pie`, `arc`, `text`, `font` and `line_style`.