"""Entry point: runs the game loop in a curses terminal."""

from __future__ import annotations

import argparse
import curses
import time
from typing import Callable

from invasores.game import Game, GameState
from invasores.keyboard import get_player_action
from invasores.terminal import Terminal

FRAME_DELAY = 0.1
VICTORY_DELAY = 3.0


def run(terminal, game: Game, sleep: Callable[[float], None]) -> GameState:
    """Play until the player quits or wins; return the final state."""
    while game.state is GameState.RUNNING:
        game.update(get_player_action(terminal))
        game.render(terminal)
        sleep(FRAME_DELAY)
    if game.state is GameState.WON:
        game.render(terminal)
        sleep(VICTORY_DELAY)
    return game.state


def _play(stdscr) -> None:
    with Terminal(stdscr) as terminal:
        run(terminal, Game(), time.sleep)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="invasores",
        description="Space invaders in the terminal: a/d or arrows move, space shoots, q quits.",
    )
    parser.parse_args(argv)
    curses.wrapper(_play)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())