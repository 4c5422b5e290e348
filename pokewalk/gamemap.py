"""Loading and validating ``.ber`` maps.

A map is a rectangle of the characters ``0`` (floor), ``1`` (wall),
``C`` (collectible), ``E`` (exit) and ``P`` (player). It must be closed by
walls, hold exactly one player and one exit and at least one collectible,
and every collectible and the exit must be reachable from the player.
Positions are ``(row, column)`` pairs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Sequence, Tuple, Union

from pokewalk.linereader import read_lines

Position = Tuple[int, int]
Rows = Sequence[Sequence[str]]

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
VALID_CHARS = frozenset({WALL, FLOOR, COLLECTIBLE, EXIT, PLAYER})
MAP_EXTENSION = ".ber"


class MapError(ValueError):
    """Raised when a map cannot be read or is not a valid map."""


@dataclass
class GameMap:
    """A validated map grid with the positions of its player and exit."""

    grid: List[List[str]]
    player: Position
    exit: Position
    collectibles: int

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def find(self, char: str) -> Optional[Position]:
        """Position of the first cell holding ``char``, or ``None``."""
        for row_index, row in enumerate(self.grid):
            for col_index, cell in enumerate(row):
                if cell == char:
                    return row_index, col_index
        return None

    def count(self, char: str) -> int:
        """Number of cells holding ``char``."""
        return sum(row.count(char) for row in self.grid)

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.grid)


def has_ber_extension(path: Union[str, "os.PathLike[str]"]) -> bool:
    """True when the first dot in ``path`` begins ``.ber``."""
    text = os.fspath(path)
    dot = text.find(".")
    return dot != -1 and text[dot:dot + len(MAP_EXTENSION)] == MAP_EXTENSION


def is_rectangular(rows: Rows) -> bool:
    """True when there is at least one row and all rows share one length."""
    if not rows:
        return False
    width = len(rows[0])
    return all(len(row) == width for row in rows)


def has_valid_chars(rows: Rows) -> bool:
    """True when every cell is one of the map characters."""
    return all(cell in VALID_CHARS for row in rows for cell in row)


def is_walled(rows: Rows) -> bool:
    """True when the first and last rows and columns are all walls."""
    if not rows or not rows[0]:
        return False
    if any(cell != WALL for cell in rows[0]) or any(cell != WALL for cell in rows[-1]):
        return False
    return all(row and row[0] == WALL and row[-1] == WALL for row in rows)


def has_valid_objects(rows: Rows) -> bool:
    """True with one player, one exit and at least one collectible."""
    cells = [cell for row in rows for cell in row]
    return (
        cells.count(COLLECTIBLE) >= 1
        and cells.count(EXIT) == 1
        and cells.count(PLAYER) == 1
    )


def flood_fill(rows: Rows, start: Position) -> FrozenSet[Position]:
    """Every non-wall cell reachable from ``start`` by orthogonal steps."""
    reached = set()
    stack = [start]
    while stack:
        row, col = stack.pop()
        if (row, col) in reached:
            continue
        if not (0 <= row < len(rows) and 0 <= col < len(rows[row])):
            continue
        if rows[row][col] == WALL:
            continue
        reached.add((row, col))
        stack.extend(((row + 1, col), (row - 1, col), (row, col + 1), (row, col - 1)))
    return frozenset(reached)


def _positions(rows: Rows, char: str) -> List[Position]:
    return [
        (row_index, col_index)
        for row_index, row in enumerate(rows)
        for col_index, cell in enumerate(row)
        if cell == char
    ]


def parse_map(lines: Sequence[str]) -> GameMap:
    """Validate raw map lines (newlines kept) and build a :class:`GameMap`.

    The row width is taken from the first line less its newline, so the
    first line must end with one; every later line is compared with it.
    """
    if not lines:
        raise MapError("the map is empty")
    width = len(lines[0]) - 1
    rows = [line[:-1] if line.endswith("\n") else line for line in lines]
    if any(len(row) != width for row in rows) or not is_rectangular(rows):
        raise MapError("the map rows do not all have the same length")
    if not has_valid_chars(rows):
        raise MapError("the map holds characters other than 0, 1, C, E and P")
    if not is_walled(rows):
        raise MapError("the map is not surrounded by walls")
    if not has_valid_objects(rows):
        raise MapError("the map needs one player, one exit and at least one collectible")
    player = _positions(rows, PLAYER)[-1]
    exit_position = _positions(rows, EXIT)[-1]
    reachable = flood_fill(rows, player)
    targets = _positions(rows, COLLECTIBLE) + [exit_position, player]
    if any(position not in reachable for position in targets):
        raise MapError("not every collectible and the exit can be reached")
    return GameMap(
        grid=[list(row) for row in rows],
        player=player,
        exit=exit_position,
        collectibles=len(_positions(rows, COLLECTIBLE)),
    )


def load_map(path: Union[str, "os.PathLike[str]"]) -> GameMap:
    """Read and validate the ``.ber`` map file at ``path``."""
    if not has_ber_extension(path):
        raise MapError(f"{os.fspath(path)!r} is not a {MAP_EXTENSION} file")
    try:
        lines = read_lines(path)
    except OSError as error:
        raise MapError(f"cannot read {os.fspath(path)!r}: {error.strerror}") from error
    return parse_map(lines)