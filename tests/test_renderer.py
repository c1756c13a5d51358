import pygame

from config import COLOR_BACKGROUND, COLOR_BLACK, COLOR_SELECTRUM, COLOR_WHITE
from randomness.graphics.renderer import play_area_outline, render_frame
from randomness.sim.contracts import DrawWH
from randomness.state import CommandBuffer, from_seed, sizes, update

ZERO_SEED = bytes(16)


def _frame():
    state = from_seed(ZERO_SEED)
    commands = CommandBuffer()
    update(state, commands, 0, DrawWH(1280, 720))
    surface = pygame.Surface((1280, 720))
    render_frame(surface, sizes(state), commands)
    return surface, sizes(state)


def _rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_outline_sits_just_outside_play_area() -> None:
    _, s = _frame()
    rect = play_area_outline(s)
    assert rect.topleft == (int(s.play_xywh.x) - 1, int(s.play_xywh.y) - 1)
    assert rect.size == (int(s.play_xywh.w) + 2, int(s.play_xywh.h) + 2)


def test_tiles_selectrum_and_background_are_drawn() -> None:
    surface, s = _frame()
    side = int(s.tile_side_length)
    x0, y0 = int(s.play_xywh.x), int(s.play_xywh.y)
    half = side // 2

    assert _rgb(surface, (5, 5)) == COLOR_BACKGROUND
    assert _rgb(surface, (x0 - 1, y0 - 1)) == COLOR_WHITE
    # zero seed: (0, 0) unlit, (1, 0) lit
    assert _rgb(surface, (x0 + half, y0 + half)) == COLOR_BLACK
    assert _rgb(surface, (x0 + side + half, y0 + half)) == COLOR_WHITE
    # cursor starts on (0, 0)
    assert _rgb(surface, (x0, y0)) == COLOR_SELECTRUM
