"""Game state, rules and rendering for the space invaders board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from invasores.keyboard import PlayerAction

WIDTH = 40
HEIGHT = 20
MAX_BULLETS = 10

PLAYER_STR = "<^^>"
PLAYER_WIDTH = 5

ENEMY_STR = "['.']"
ENEMY_WIDTH = 5
NUM_ENEMY_ROWS = 3
ENEMIES_PER_ROW = 5
ENEMY_ROW_START_Y = 2
ENEMY_COL_START_X = 3
ENEMY_X_SPACING = ENEMY_WIDTH + 2
ENEMY_Y_SPACING = 2

POINTS_PER_ENEMY = 10
WIN_MESSAGE = "Parabens voce venceu"


class GameState(Enum):
    QUIT = 0
    RUNNING = 1
    WON = 2


@dataclass
class Enemy:
    x: int
    y: int
    alive: bool = True


@dataclass
class Bullet:
    x: int = 0
    y: int = 0
    active: bool = False


@dataclass
class Player:
    x: int
    y: int


class Screen(Protocol):
    def clear(self) -> None: ...
    def draw_char(self, x: int, y: int, c: str) -> None: ...
    def draw_string(self, x: int, y: int, s: str) -> None: ...
    def flush(self) -> None: ...


class Game:
    """One round of the game: a formation of enemies, a player and bullets."""

    def __init__(self) -> None:
        self.enemies: list[Enemy] = []
        self.bullets: list[Bullet] = []
        self.player = Player(0, 0)
        self.state = GameState.RUNNING
        self.score = 0
        self.reset()

    def reset(self) -> None:
        self.state = GameState.RUNNING
        self.score = 0
        self.enemies = [
            Enemy(
                ENEMY_COL_START_X + col * ENEMY_X_SPACING,
                ENEMY_ROW_START_Y + row * ENEMY_Y_SPACING,
            )
            for row in range(NUM_ENEMY_ROWS)
            for col in range(ENEMIES_PER_ROW)
        ]
        self.bullets = [Bullet() for _ in range(MAX_BULLETS)]
        self.player = Player(max((WIDTH - PLAYER_WIDTH) // 2, 1), HEIGHT - 3)

    def all_enemies_defeated(self) -> bool:
        return not any(enemy.alive for enemy in self.enemies)

    def shoot_bullet(self) -> None:
        """Fire from the player's centre if a bullet slot is free."""
        free = next((b for b in self.bullets if not b.active), None)
        if free is not None:
            free.x = self.player.x + PLAYER_WIDTH // 2
            free.y = self.player.y - 1
            free.active = True

    def _hit_enemy(self, bullet: Bullet) -> Enemy | None:
        return next(
            (
                enemy
                for enemy in self.enemies
                if enemy.alive
                and bullet.y == enemy.y
                and enemy.x <= bullet.x < enemy.x + ENEMY_WIDTH
            ),
            None,
        )

    def move_bullets(self) -> None:
        for bullet in self.bullets:
            if not bullet.active:
                continue
            bullet.y -= 1
            if bullet.y < 1:
                bullet.active = False
                continue
            enemy = self._hit_enemy(bullet)
            if enemy is not None:
                enemy.alive = False
                bullet.active = False
                self.score += POINTS_PER_ENEMY
                if self.all_enemies_defeated():
                    self.state = GameState.WON

    def update(self, action: PlayerAction) -> None:
        if action is PlayerAction.MOVE_LEFT:
            if self.player.x > 1:
                self.player.x -= 1
        elif action is PlayerAction.MOVE_RIGHT:
            if self.player.x < WIDTH - 1 - PLAYER_WIDTH:
                self.player.x += 1
        elif action is PlayerAction.SHOOT:
            self.shoot_bullet()
        elif action is PlayerAction.QUIT:
            self.state = GameState.QUIT
        self.move_bullets()

    def render(self, screen: Screen) -> None:
        screen.clear()
        if self.state is GameState.WON:
            self._render_victory(screen)
        else:
            self._render_board(screen)
        screen.flush()

    def _render_victory(self, screen: Screen) -> None:
        msg_y = HEIGHT // 2
        screen.draw_string(max((WIDTH - len(WIN_MESSAGE)) // 2, 0), msg_y, WIN_MESSAGE)
        final = f"Pontuacao final: {self.score}"
        screen.draw_string(max((WIDTH - len(final)) // 2, 0), msg_y + 2, final)

    def _render_board(self, screen: Screen) -> None:
        for x in range(WIDTH):
            screen.draw_char(x, 0, "-")
            screen.draw_char(x, HEIGHT - 1, "-")
        for y in range(1, HEIGHT - 1):
            screen.draw_char(0, y, "|")
            screen.draw_char(WIDTH - 1, y, "|")
        for x, y in ((0, 0), (WIDTH - 1, 0), (0, HEIGHT - 1), (WIDTH - 1, HEIGHT - 1)):
            screen.draw_char(x, y, "+")

        for enemy in self.enemies:
            if (
                enemy.alive
                and enemy.x >= 1
                and enemy.x + ENEMY_WIDTH <= WIDTH - 1
                and 1 <= enemy.y < HEIGHT - 1
            ):
                screen.draw_string(enemy.x, enemy.y, ENEMY_STR)

        for bullet in self.bullets:
            if bullet.active and 1 <= bullet.x < WIDTH - 1 and 1 <= bullet.y < HEIGHT - 1:
                screen.draw_char(bullet.x, bullet.y, "^")

        player = self.player
        if (
            player.x >= 1
            and player.x + PLAYER_WIDTH <= WIDTH - 1
            and 1 <= player.y < HEIGHT - 1
        ):
            screen.draw_string(player.x, player.y, PLAYER_STR)

        screen.draw_string(1, HEIGHT, f"Score: {self.score}")