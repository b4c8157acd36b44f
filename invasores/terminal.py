"""Drawing surfaces: a curses-backed terminal and an in-memory text canvas."""

from __future__ import annotations

import curses
from typing import Any


def _set_cursor(visibility: int) -> None:
    try:
        curses.curs_set(visibility)
    except curses.error:
        # Not every terminal can hide the cursor; drawing still works.
        pass


class Terminal:
    """Character screen on top of a curses window, with non-blocking keys."""

    def __init__(self, stdscr: Any) -> None:
        self.stdscr = stdscr

    def __enter__(self) -> "Terminal":
        self.stdscr.nodelay(True)
        self.stdscr.keypad(True)
        _set_cursor(0)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        _set_cursor(1)

    def clear(self) -> None:
        self.stdscr.clear()

    def draw_char(self, x: int, y: int, c: str) -> None:
        try:
            self.stdscr.addch(y, x, c)
        except curses.error:
            # Writing outside the window or into its last cell is not fatal.
            pass

    def draw_string(self, x: int, y: int, s: str) -> None:
        try:
            self.stdscr.addstr(y, x, s)
        except curses.error:
            pass

    def draw_int(self, x: int, y: int, value: int) -> None:
        self.draw_string(x, y, str(value))

    def flush(self) -> None:
        self.stdscr.refresh()

    def read_key(self) -> int | None:
        """Return the pending key code, or None when no key is waiting."""
        key = self.stdscr.getch()
        return None if key == -1 else key


class TextCanvas:
    """A fixed-size grid of characters with the same drawing calls as Terminal."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self.frames = 0
        self._grid: list[list[str]] = []
        self.clear()

    def clear(self) -> None:
        self._grid = [[" "] * self.width for _ in range(self.height)]

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def draw_char(self, x: int, y: int, c: str) -> None:
        if len(c) != 1:
            raise ValueError("draw_char expects a single character")
        if self._inside(x, y):
            self._grid[y][x] = c

    def draw_string(self, x: int, y: int, s: str) -> None:
        for offset, c in enumerate(s):
            self.draw_char(x + offset, y, c)

    def draw_int(self, x: int, y: int, value: int) -> None:
        self.draw_string(x, y, str(value))

    def flush(self) -> None:
        self.frames += 1

    def lines(self) -> list[str]:
        return ["".join(row) for row in self._grid]

    def char_at(self, x: int, y: int) -> str:
        if not self._inside(x, y):
            raise IndexError(f"position ({x}, {y}) is outside the canvas")
        return self._grid[y][x]