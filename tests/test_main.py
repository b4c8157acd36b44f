import pytest

from invasores.game import HEIGHT, WIDTH, WIN_MESSAGE, Game, GameState
from invasores.main import FRAME_DELAY, VICTORY_DELAY, main, run
from invasores.terminal import TextCanvas


class ScriptedTerminal(TextCanvas):
    def __init__(self, keys):
        super().__init__(WIDTH, HEIGHT + 1)
        self.keys = list(keys)

    def read_key(self):
        return self.keys.pop(0) if self.keys else None


def test_quit_stops_after_one_frame():
    sleeps = []
    terminal = ScriptedTerminal([ord("q")])
    state = run(terminal, Game(), sleeps.append)
    assert state is GameState.QUIT
    assert sleeps == [FRAME_DELAY]
    assert terminal.frames == 1


def test_moves_are_applied_each_frame():
    sleeps = []
    game = Game()
    start = game.player.x
    terminal = ScriptedTerminal([ord("a"), ord("a"), ord("q")])
    run(terminal, game, sleeps.append)
    assert game.player.x == start - 2
    assert len(sleeps) == 3


def test_win_shows_victory_and_waits():
    sleeps = []
    game = Game()
    column = game.player.x + 2
    target = max(
        (e for e in game.enemies if e.x <= column < e.x + 5),
        key=lambda e: e.y,
    )
    for enemy in game.enemies:
        enemy.alive = enemy is target
    terminal = ScriptedTerminal([ord(" ")])
    state = run(terminal, game, sleeps.append)
    assert state is GameState.WON
    assert sleeps[-1] == VICTORY_DELAY
    assert all(s == FRAME_DELAY for s in sleeps[:-1])
    assert WIN_MESSAGE in terminal.lines()[HEIGHT // 2]


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0