"""Game state: moving the player, collecting, reaching the exit, drawing order."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from pokewalk.gamemap import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap
from pokewalk.printer import printf

TILE_WIDTH = 48
TILE_HEIGHT = 48
WINDOW_TITLE = "GOTTA CATCH 'EM ALL"

COLLECTIBLE_PATH = "textures/masterball_ground.xpm"
PLAYER_LEFT_PATH = "textures/Garchomp_left_ground.xpm"
PLAYER_RIGHT_PATH = "textures/Garchomp_right_ground.xpm"
PLAYER_UP_PATH = "textures/Garchomp_up_ground.xpm"
PLAYER_DOWN_PATH = "textures/Garchomp_down_ground.xpm"
EXIT_RIGHT_PATH = "textures/pokeball48_right.xpm"
EXIT_LEFT_PATH = "textures/pokeball48_left.xpm"
GROUND_PATH = "textures/grass2.xpm"
WALL_PATH = "textures/tree_wall_ground.xpm"

QUIT_KEY = "escape"
_UP_KEYS = frozenset({"up", "w", "q"})
_DOWN_KEYS = frozenset({"down", "s", "z"})
_LEFT_KEYS = frozenset({"left", "a", "s"})
_RIGHT_KEYS = frozenset({"right", "d"})

DrawItem = Tuple[str, int, int]


class Direction(Enum):
    """A step on the grid as a ``(row, column)`` offset."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


@dataclass(frozen=True)
class Sprites:
    """Image paths for every kind of tile."""

    player: str
    exit: str
    collectible: str
    ground: str
    wall: str


def create_trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack transparency and colour channels into one integer."""
    return (t << 24) | (r << 16) | (g << 8) | b


def sprite_paths(game_map: GameMap, exit_col: int, key: Optional[str] = None) -> Sprites:
    """Choose the images to draw, given the exit column and the last key pressed.

    The exit faces left in the left half of the map, right otherwise. The
    player faces the way the key points; with no key it faces down.
    """
    half = (game_map.width + 1) // 2
    exit_path = EXIT_LEFT_PATH if exit_col <= half else EXIT_RIGHT_PATH
    if key in _UP_KEYS:
        player_path = PLAYER_UP_PATH
    elif key in _LEFT_KEYS:
        player_path = PLAYER_LEFT_PATH
    elif key in _RIGHT_KEYS:
        player_path = PLAYER_RIGHT_PATH
    else:
        player_path = PLAYER_DOWN_PATH
    return Sprites(
        player=player_path,
        exit=exit_path,
        collectible=COLLECTIBLE_PATH,
        ground=GROUND_PATH,
        wall=WALL_PATH,
    )


class Game:
    """A running game on its own copy of a validated map."""

    def __init__(self, game_map: GameMap) -> None:
        self.map = GameMap(
            grid=[list(row) for row in game_map.grid],
            player=game_map.player,
            exit=game_map.exit,
            collectibles=game_map.collectibles,
        )
        self.moves = 0
        self.running = True
        self.won = False
        self.sprites = sprite_paths(self.map, self.map.exit[1])

    @property
    def player(self) -> Tuple[int, int]:
        return self.map.player

    @property
    def collectibles(self) -> int:
        return self.map.collectibles

    def move(self, direction: Direction, key: Optional[str] = None) -> bool:
        """Try one step; return True when the step was taken.

        A wall blocks the step. Stepping onto the exit with nothing left to
        collect wins and ends the game. Every other step is counted and the
        running total is printed.
        """
        if not self.running:
            return False
        row, col = self.map.player
        d_row, d_col = direction.value
        new_row, new_col = row + d_row, col + d_col
        grid = self.map.grid
        target = grid[new_row][new_col]
        if target == WALL:
            return False
        self.sprites = sprite_paths(self.map, self.map.exit[1], key)
        if target == EXIT and self.map.collectibles == 0:
            self.won = True
            self.running = False
            return True
        if target == COLLECTIBLE:
            self.map.collectibles -= 1
        grid[new_row][new_col] = PLAYER
        grid[row][col] = EXIT if (row, col) == self.map.exit else FLOOR
        self.map.player = (new_row, new_col)
        self.moves += 1
        printf("Steps: %d\n", self.moves)
        return True

    def handle_key(self, key: str) -> bool:
        """React to a key name; return True while the game is still running."""
        if key == QUIT_KEY:
            self.running = False
        elif key in _UP_KEYS:
            self.move(Direction.UP, key)
        elif key in _DOWN_KEYS:
            self.move(Direction.DOWN, key)
        elif key in _LEFT_KEYS:
            self.move(Direction.LEFT, key)
        elif key in _RIGHT_KEYS:
            self.move(Direction.RIGHT, key)
        return self.running

    def draw_list(self) -> List[DrawItem]:
        """Images to draw, in order, as ``(path, x, y)`` pixel positions."""
        items: List[DrawItem] = []
        for row_index, row in enumerate(self.map.grid):
            for col_index, cell in enumerate(row):
                path = self.sprites.wall if cell == WALL else self.sprites.ground
                items.append((path, col_index * TILE_WIDTH, row_index * TILE_HEIGHT))
        player_row, player_col = self.map.player
        items.append((self.sprites.player, player_col * TILE_WIDTH, player_row * TILE_HEIGHT))
        exit_row, exit_col = self.map.exit
        for row_index, row in enumerate(self.map.grid):
            for col_index, cell in enumerate(row):
                if cell == COLLECTIBLE:
                    items.append(
                        (self.sprites.collectible, col_index * TILE_WIDTH, row_index * TILE_HEIGHT)
                    )
                elif cell == EXIT:
                    items.append((self.sprites.exit, exit_col * TILE_WIDTH, exit_row * TILE_HEIGHT))
        return items