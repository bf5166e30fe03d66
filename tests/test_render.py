from unittest import mock

import pygame
import pytest

from solong.game import Direction, Game, Outcome
from solong.render import (
    TILE,
    Sprites,
    direction_for_key,
    draw_frame,
    load_sprites,
    run,
    sprite_name,
)

COLOURS = {
    "grass": (10, 200, 10),
    "wall": (100, 100, 100),
    "plaer": (0, 0, 255),
    "mario": (255, 255, 0),
    "Manimation": (255, 128, 0),
    "exit": (0, 255, 255),
    "opponent": (255, 0, 0),
    "Fanimation": (128, 0, 0),
}

GRID = ["11111", "1PCE1", "1F001", "11111"]


def _surface(colour):
    surface = pygame.Surface((TILE, TILE))
    surface.fill(colour)
    return surface


def _sprites(with_alt=True):
    return Sprites(
        grass=_surface(COLOURS["grass"]),
        wall=_surface(COLOURS["wall"]),
        player=_surface(COLOURS["plaer"]),
        coin=_surface(COLOURS["mario"]),
        exit=_surface(COLOURS["exit"]),
        enemy=_surface(COLOURS["opponent"]),
        coin_alt=_surface(COLOURS["Manimation"]) if with_alt else None,
        enemy_alt=_surface(COLOURS["Fanimation"]) if with_alt else None,
    )


def _write_images(directory, skip=()):
    for stem, colour in COLOURS.items():
        if stem in skip:
            continue
        pygame.image.save(_surface(colour), str(directory / f"{stem}.bmp"))


def _pixel(surface, row, column):
    return tuple(surface.get_at((column * TILE + 30, row * TILE + 30)))[:3]


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


@pytest.mark.parametrize(
    "key, direction",
    [
        (pygame.K_w, Direction.UP),
        (pygame.K_a, Direction.LEFT),
        (pygame.K_s, Direction.DOWN),
        (pygame.K_d, Direction.RIGHT),
    ],
)
def test_direction_for_key(key, direction):
    assert direction_for_key(key) is direction


def test_other_keys_have_no_direction():
    assert direction_for_key(pygame.K_q) is None
    assert direction_for_key(pygame.K_ESCAPE) is None


def test_sprite_name_animates_at_half_period():
    assert sprite_name("C", 50) == "coin"
    assert sprite_name("C", 51) == "coin_alt"
    assert sprite_name("F", 1) == "enemy"
    assert sprite_name("F", 101) == "enemy_alt"


def test_sprite_name_for_static_cells():
    assert sprite_name("P", 70) == "player"
    assert sprite_name("E", 70) == "exit"
    assert sprite_name("1", 70) == "wall"
    assert sprite_name("0", 70) is None


def test_draw_frame_places_tiles():
    game = Game(GRID)
    surface = pygame.Surface((5 * TILE, 4 * TILE))
    draw_frame(surface, game, _sprites(), 10)
    assert _pixel(surface, 0, 0) == COLOURS["wall"]
    assert _pixel(surface, 1, 1) == COLOURS["plaer"]
    assert _pixel(surface, 1, 2) == COLOURS["mario"]
    assert _pixel(surface, 1, 3) == COLOURS["exit"]
    assert _pixel(surface, 2, 1) == COLOURS["opponent"]
    assert _pixel(surface, 2, 2) == COLOURS["grass"]


def test_draw_frame_uses_animation_frames_late_in_cycle():
    game = Game(GRID)
    surface = pygame.Surface((5 * TILE, 4 * TILE))
    draw_frame(surface, game, _sprites(), 75)
    assert _pixel(surface, 1, 2) == COLOURS["Manimation"]
    assert _pixel(surface, 2, 1) == COLOURS["Fanimation"]


def test_draw_frame_falls_back_without_animation_frames():
    game = Game(GRID)
    surface = pygame.Surface((5 * TILE, 4 * TILE))
    draw_frame(surface, game, _sprites(with_alt=False), 75)
    assert _pixel(surface, 1, 2) == COLOURS["mario"]
    assert _pixel(surface, 2, 1) == COLOURS["opponent"]


def test_draw_frame_follows_player_moves():
    game = Game(GRID)
    game.move(Direction.RIGHT)
    surface = pygame.Surface((5 * TILE, 4 * TILE))
    draw_frame(surface, game, _sprites(), 10)
    assert _pixel(surface, 1, 1) == COLOURS["grass"]
    assert _pixel(surface, 1, 2) == COLOURS["plaer"]


def test_load_sprites_reads_files(tmp_path):
    _write_images(tmp_path)
    sprites = load_sprites(tmp_path)
    assert tuple(sprites.grass.get_at((0, 0)))[:3] == COLOURS["grass"]
    assert tuple(sprites.player.get_at((5, 5)))[:3] == COLOURS["plaer"]
    assert tuple(sprites.coin_alt.get_at((5, 5)))[:3] == COLOURS["Manimation"]


def test_load_sprites_animation_frames_are_optional(tmp_path):
    _write_images(tmp_path, skip=("Manimation", "Fanimation"))
    sprites = load_sprites(tmp_path)
    assert sprites.coin_alt is None
    assert sprites.image("coin_alt") is sprites.coin


def test_load_sprites_requires_base_images(tmp_path):
    _write_images(tmp_path, skip=("wall",))
    with pytest.raises(FileNotFoundError):
        load_sprites(tmp_path)


def test_run_quits_on_window_close(tmp_path, headless):
    _write_images(tmp_path)
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        outcome = run(GRID, tmp_path)
    assert outcome is Outcome.QUIT


def test_run_reports_victory(tmp_path, headless, capsys):
    _write_images(tmp_path)
    step = [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_d)]
    with mock.patch("pygame.event.get", side_effect=[step, step]):
        outcome = run(["11111", "1PCE1", "11111"], tmp_path)
    assert outcome is Outcome.WON
    assert "Victory" in capsys.readouterr().out


def test_run_reports_loss(tmp_path, headless, capsys):
    _write_images(tmp_path)
    step = [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_s)]
    with mock.patch("pygame.event.get", side_effect=[step]):
        outcome = run(["11111", "1PCE1", "1F001", "11111"], tmp_path)
    assert outcome is Outcome.LOST
    assert "Game over" in capsys.readouterr().err