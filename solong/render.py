"""Drawing the game with pygame and running its window."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import pygame

from solong.game import Direction, Game, Outcome, map_size

TILE = 60
TITLE = "My first window"
TEXT_COLOUR = (255, 255, 255)
TEXT_POSITION = (10, 10)
FONT_SIZE = 24
ANIMATION_HALF = 50
ANIMATION_PERIOD = 100
FRAME_RATE = 100

_FILE_STEMS = {
    "grass": "grass",
    "wall": "wall",
    "player": "plaer",
    "coin": "mario",
    "coin_alt": "Manimation",
    "exit": "exit",
    "enemy": "opponent",
    "enemy_alt": "Fanimation",
}
_REQUIRED = ("grass", "wall", "player", "coin", "exit", "enemy")
_FALLBACKS = {"coin_alt": "coin", "enemy_alt": "enemy"}
_EXTENSIONS = (".xpm", ".png", ".bmp")

_KEY_DIRECTIONS = {
    pygame.K_w: Direction.UP,
    pygame.K_a: Direction.LEFT,
    pygame.K_s: Direction.DOWN,
    pygame.K_d: Direction.RIGHT,
}


@dataclass
class Sprites:
    """The tile images of the game and the font for the step counter."""

    grass: pygame.Surface
    wall: pygame.Surface
    player: pygame.Surface
    coin: pygame.Surface
    exit: pygame.Surface
    enemy: pygame.Surface
    coin_alt: Optional[pygame.Surface] = None
    enemy_alt: Optional[pygame.Surface] = None
    font: Optional[pygame.font.Font] = None

    def image(self, name: str) -> pygame.Surface:
        """Return the sprite called ``name``, falling back to the still frame."""
        surface = getattr(self, name)
        if surface is None:
            surface = getattr(self, _FALLBACKS[name])
        return surface


def _find_file(directory: Path, stem: str) -> Optional[Path]:
    for extension in _EXTENSIONS:
        candidate = directory / f"{stem}{extension}"
        if candidate.is_file():
            return candidate
    return None


def load_sprites(directory: Union[str, Path]) -> Sprites:
    """Load the tile images from ``directory``."""
    directory = Path(directory)
    loaded: dict[str, Optional[pygame.Surface]] = {}
    for name, stem in _FILE_STEMS.items():
        path = _find_file(directory, stem)
        if path is None:
            if name in _REQUIRED:
                raise FileNotFoundError(f"Failed to load XPM image: {stem}")
            loaded[name] = None
            continue
        loaded[name] = pygame.image.load(str(path))
    return Sprites(**loaded)


def sprite_name(cell: str, tick: int) -> Optional[str]:
    """Name the sprite drawn over the grass for ``cell`` at animation ``tick``."""
    if cell == "C":
        return "coin" if tick <= ANIMATION_HALF else "coin_alt"
    if cell == "F":
        return "enemy" if tick <= ANIMATION_HALF else "enemy_alt"
    return {"P": "player", "E": "exit", "1": "wall"}.get(cell)


def direction_for_key(key: int) -> Optional[Direction]:
    """Map W, A, S and D to a direction; other keys give None."""
    return _KEY_DIRECTIONS.get(key)


def _next_tick(tick: int) -> int:
    if tick > ANIMATION_PERIOD:
        tick = 0
    return tick + 1


def draw_frame(surface: pygame.Surface, game: Game, sprites: Sprites, tick: int) -> None:
    """Draw the map and the step counter onto ``surface``."""
    for row_index, row in enumerate(game.rows):
        for column, cell in enumerate(row):
            position = (column * TILE, row_index * TILE)
            surface.blit(sprites.grass, position)
            name = sprite_name(cell, tick)
            if name is not None:
                surface.blit(sprites.image(name), position)
    if sprites.font is not None:
        text = sprites.font.render(str(game.steps), True, TEXT_COLOUR)
        surface.blit(text, TEXT_POSITION)


def _handle_event(game: Game, event: pygame.event.Event) -> Optional[Outcome]:
    if event.type == pygame.QUIT:
        return game.quit()
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return game.quit()
        direction = direction_for_key(event.key)
        if direction is not None:
            return game.move(direction)
    return None


def _announce(outcome: Outcome) -> None:
    if outcome is Outcome.WON:
        print(outcome.value)
    elif outcome is Outcome.LOST:
        print(outcome.value, file=sys.stderr)


def run(grid: Sequence[str], image_dir: Union[str, Path]) -> Outcome:
    """Open a window for ``grid`` and play until the game finishes."""
    pygame.init()
    try:
        width, height = map_size(grid)
        screen = pygame.display.set_mode((width * TILE, height * TILE))
        pygame.display.set_caption(TITLE)
        sprites = load_sprites(image_dir)
        sprites.font = pygame.font.Font(None, FONT_SIZE)
        game = Game(grid)
        clock = pygame.time.Clock()
        tick = 0
        while True:
            for event in pygame.event.get():
                outcome = _handle_event(game, event)
                if outcome is not None and outcome.finishes:
                    _announce(outcome)
                    return outcome
            tick = _next_tick(tick)
            draw_frame(screen, game, sprites, tick)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()