# invasores

A small space-invaders style arcade game that runs in your terminal.

Three rows of five invaders wait at the top of a 40×20 playfield. Move your
ship along the bottom and shoot them down; each hit is worth 10 points.
When the last invader falls, the game shows "Parabens voce venceu" with your
final score for three seconds, then exits.

## Installing

```
pip install .
```

The game draws with the standard library's `curses` module, so it needs a
Python that has `curses` and a terminal that curses supports (any usual Linux
or macOS terminal). The game modules import `curses` too, for its key codes.

## Playing

```
invasores
```

| Key                 | Action       |
|---------------------|--------------|
| `a`, `A`, ←         | Move left    |
| `d`, `D`, →         | Move right   |
| space               | Shoot        |
| `q`, `Q`            | Quit         |

Up to ten bullets can be in the air at once. The game waits a tenth of a
second between frames.

## What the game does not do

The invaders stand still and never shoot back, so there is no way to lose:
a game ends only when you quit or when every invader is down. There are no
levels, lives or saved high scores.

## Using it from Python

The rules do not need a real terminal. `invasores.game.Game` holds the state
(`enemies`, `bullets`, `player`, `score` and `state`, a
`invasores.game.GameState`), `Game.update(action)` advances one tick given an
`invasores.keyboard.PlayerAction`, and `Game.render(screen)` draws onto
anything with the drawing methods of `invasores.terminal.TextCanvas`, an
in-memory screen whose `lines()` give the drawn text:

```python
from invasores.game import Game
from invasores.keyboard import PlayerAction
from invasores.terminal import TextCanvas

game = Game()
game.update(PlayerAction.SHOOT)

canvas = TextCanvas(40, 21)
game.render(canvas)
print("\n".join(canvas.lines()))
```

`invasores.keyboard.action_for_key(key)` turns a curses key code into a
`PlayerAction`. `invasores.terminal.Terminal` wraps a curses window as a
context manager with the same drawing methods plus `read_key()`.
`invasores.main.run(terminal, game, sleep)` is the game loop itself, and
`invasores.main.main()` starts a full game in the current terminal.

## Running the tests

```
pip install .[test]
pytest
```