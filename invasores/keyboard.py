"""Mapping of key presses to player actions."""

from __future__ import annotations

import curses
from enum import Enum
from typing import Protocol


class PlayerAction(Enum):
    NONE = 0
    MOVE_LEFT = 1
    MOVE_RIGHT = 2
    SHOOT = 3
    QUIT = 4


class _KeySource(Protocol):
    def read_key(self) -> int | None: ...


_KEY_ACTIONS = {
    ord("a"): PlayerAction.MOVE_LEFT,
    ord("A"): PlayerAction.MOVE_LEFT,
    curses.KEY_LEFT: PlayerAction.MOVE_LEFT,
    ord("d"): PlayerAction.MOVE_RIGHT,
    ord("D"): PlayerAction.MOVE_RIGHT,
    curses.KEY_RIGHT: PlayerAction.MOVE_RIGHT,
    ord(" "): PlayerAction.SHOOT,
    ord("q"): PlayerAction.QUIT,
    ord("Q"): PlayerAction.QUIT,
}


def action_for_key(key: int | None) -> PlayerAction:
    """Translate a key code (None for no key) into a player action."""
    if key is None:
        return PlayerAction.NONE
    return _KEY_ACTIONS.get(key, PlayerAction.NONE)


def get_player_action(terminal: _KeySource) -> PlayerAction:
    """Read one pending key from the terminal and return its action."""
    return action_for_key(terminal.read_key())