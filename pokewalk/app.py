"""The windowed game and its command-line entry point."""

from __future__ import annotations

import sys
import zlib
from typing import Dict, Optional, Sequence

import pygame

from pokewalk.chars import itoa
from pokewalk.game import TILE_HEIGHT, TILE_WIDTH, WINDOW_TITLE, QUIT_KEY, Game, create_trgb
from pokewalk.gamemap import MapError, load_map
from pokewalk.printer import printf

_TEXT_COLOUR = create_trgb(255, 255, 255, 255)
_LABEL_POSITION = (10, 10)
_COUNT_POSITION = (60, 10)
_FRAME_RATE = 60


def _rgb(trgb: int) -> tuple:
    return ((trgb >> 16) & 0xFF, (trgb >> 8) & 0xFF, trgb & 0xFF)


def _load_image(path: str) -> pygame.Surface:
    try:
        return pygame.image.load(path).convert_alpha()
    except (pygame.error, OSError):
        # A missing texture becomes a flat tile so the map stays playable.
        surface = pygame.Surface((TILE_WIDTH, TILE_HEIGHT))
        shade = zlib.crc32(path.encode("utf-8"))
        surface.fill((shade & 0xFF, (shade >> 8) & 0xFF, (shade >> 16) & 0xFF))
        return surface


def _draw(screen: pygame.Surface, game: Game, images: Dict[str, pygame.Surface], font) -> None:
    for path, x, y in game.draw_list():
        if path not in images:
            images[path] = _load_image(path)
        screen.blit(images[path], (x, y))
    colour = _rgb(_TEXT_COLOUR)
    screen.blit(font.render("Steps: ", True, colour), _LABEL_POSITION)
    screen.blit(font.render(itoa(game.moves), True, colour), _COUNT_POSITION)
    pygame.display.flip()


def run(game: Game) -> bool:
    """Open the window and play until the game ends; return True on a win."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (TILE_WIDTH * game.map.width, TILE_HEIGHT * game.map.height)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        font = pygame.font.Font(None, 20)
        images: Dict[str, pygame.Surface] = {}
        clock = pygame.time.Clock()
        _draw(screen, game, images, font)
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.handle_key(QUIT_KEY)
                elif event.type == pygame.KEYDOWN:
                    game.handle_key(pygame.key.name(event.key))
                if not game.running:
                    break
            if game.running:
                _draw(screen, game, images, font)
                clock.tick(_FRAME_RATE)
    finally:
        pygame.quit()
    return game.won


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the map named on the command line and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        printf("Error\nInvalid arguments.\n")
        return 0
    try:
        game_map = load_map(args[0])
    except MapError:
        printf("Error\nInvalid map\n")
        return 0
    run(Game(game_map))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())