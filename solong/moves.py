"""Player movement and key handling over a validated map."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from solong.maps import COLLECTIBLE, EXIT, FLOOR, WALL, GameMap, Position
from solong.printf import printf

PIXEL = 64


class Direction(Enum):
    """A step on the grid as (row delta, column delta)."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


class Key(Enum):
    """Keys the game reacts to."""

    ESCAPE = "escape"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Game:
    """The state of a running game on one map."""

    game_map: GameMap
    grid: list[list[str]] = field(init=False)
    position: Position = field(init=False)
    collected: int = 0
    moves: int = 0
    closed: bool = False
    won: bool = False

    def __post_init__(self) -> None:
        self.grid = [list(row) for row in self.game_map.rows]
        self.position = self.game_map.player_position()

    @property
    def total_collectibles(self) -> int:
        return self.game_map.collectibles

    def step(self, direction: Direction) -> bool:
        """Move one tile if the way is open; return whether the player moved."""
        if self.closed:
            return False
        dr, dc = direction.value
        row, col = self.position[0] + dr, self.position[1] + dc
        if not (0 <= row < len(self.grid) and 0 <= col < len(self.grid[row])):
            return False
        tile = self.grid[row][col]
        if tile == WALL:
            return False
        self.position = (row, col)
        if tile == COLLECTIBLE:
            self.collected += 1
            self.grid[row][col] = FLOOR
        self.moves += 1
        printf("Moves: %d\n", self.moves)
        if tile == EXIT and self.collected == self.total_collectibles:
            self.won = True
            self.close()
        return True

    def handle_key(self, key: Key) -> bool:
        """React to a key press; return whether the player moved."""
        if key is Key.ESCAPE:
            self.close()
            return False
        return self.step(Direction[key.name])

    def close(self) -> None:
        """End the game."""
        self.closed = True