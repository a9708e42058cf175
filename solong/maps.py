"""Loading and validating game maps stored in ``.ber`` files."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
TILES = frozenset(WALL + FLOOR + COLLECTIBLE + EXIT + PLAYER)
MIN_HEIGHT = 3
MIN_WIDTH = 6

Position = tuple[int, int]


class MapError(Exception):
    """Raised when a map file or its contents are invalid."""


def check_extension(name: str | os.PathLike[str]) -> str:
    """Return ``name`` if it ends in ``.ber``; raise :class:`MapError` otherwise."""
    text = os.fspath(name)
    if len(text) < 4:
        raise MapError("file name")
    if not text.endswith(".ber"):
        raise MapError("file format")
    return text


def read_rows(path: str | os.PathLike[str]) -> list[str]:
    """Read the rows of a map file, without their line endings.

    Every row must have the width of the first one.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError(f"cannot read {os.fspath(path)}") from exc
    if not text:
        raise MapError("Invalid map")
    rows = text.split("\n")
    if text.endswith("\n"):
        rows.pop()
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise MapError(f"rows of unequal length in {os.fspath(path)}")
    return rows


def check_wall_row(row: str) -> None:
    """Require a row to be a run of walls, optionally followed by blanks."""
    rest = row.lstrip(WALL)
    if rest and rest[0] not in " \t":
        raise MapError("Incorrect characters")


@dataclass(frozen=True)
class GameMap:
    """A rectangular grid of tiles, one string per row."""

    rows: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", tuple(self.rows))

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def _count(self, tile: str) -> int:
        return sum(row.count(tile) for row in self.rows)

    @property
    def players(self) -> int:
        return self._count(PLAYER)

    @property
    def collectibles(self) -> int:
        return self._count(COLLECTIBLE)

    @property
    def exits(self) -> int:
        return self._count(EXIT)

    def _cells(self) -> Iterable[tuple[Position, str]]:
        for r, row in enumerate(self.rows):
            for c, tile in enumerate(row):
                yield (r, c), tile

    def player_position(self) -> Position:
        """The (row, column) of the single player tile."""
        if self.players != 1:
            raise MapError("wrong players number")
        return next(pos for pos, tile in self._cells() if tile == PLAYER)

    def flood_fill(self, start: Position) -> frozenset[Position]:
        """All cells reachable from ``start`` through non-wall tiles."""
        reached: set[Position] = set()
        pending = [start]
        while pending:
            r, c = pending.pop()
            if (r, c) in reached:
                continue
            if not (0 <= r < self.height and 0 <= c < self.width):
                continue
            if self.rows[r][c] == WALL:
                continue
            reached.add((r, c))
            pending.extend(((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)))
        return frozenset(reached)

    def check_reachable(self) -> None:
        """Require every player, collectible and exit to be reachable."""
        reached = self.flood_fill(self.player_position())
        for pos, tile in self._cells():
            if tile in (PLAYER, COLLECTIBLE, EXIT) and pos not in reached:
                raise MapError("Invalid map construction")

    def validate(self) -> GameMap:
        """Check walls, tiles, counts, size and reachability; return self."""
        if not self.rows:
            raise MapError("Invalid map")
        check_wall_row(self.rows[0])
        check_wall_row(self.rows[-1])
        last = self.width - 1
        for row in self.rows:
            if not row or row[0] != WALL or row[last] != WALL:
                raise MapError("Incorrect characters")
            if any(tile not in TILES for tile in row):
                raise MapError("Invalid characters")
        if self.height < MIN_HEIGHT or self.width < MIN_WIDTH:
            raise MapError("Wrong map size")
        if self.collectibles < 1:
            raise MapError("Wrong collectable number")
        if self.exits != 1:
            raise MapError("Wrong exit number")
        self.player_position()
        self.check_reachable()
        return self


def load_map(path: str | os.PathLike[str]) -> GameMap:
    """Read and validate the map stored at ``path``."""
    check_extension(path)
    return GameMap(tuple(read_rows(path))).validate()