"""
Rasterize one frame's draw commands onto a pygame surface.

Render-only: nothing here feeds back into the simulation.
"""

from __future__ import annotations

from typing import Iterable, Optional

import pygame

from config import (
    COLOR_BACKGROUND,
    COLOR_BLACK,
    COLOR_SELECTRUM,
    COLOR_WHITE,
    SELECTRUM_WIDTH,
)
from randomness.draw import Sizes
from randomness.graphics.font_cache import render_label_cached
from randomness.sim.contracts import Command, SelectrumCommand, TileCommand
from randomness.tile import TileState

TILE_COLORS = {
    TileState.UNLIT: COLOR_BLACK,
    TileState.LIT: COLOR_WHITE,
}

SEED_LABEL_SIZE = 20
SEED_LABEL_PAD = 6


def play_area_outline(sizes: Sizes) -> pygame.Rect:
    """Outline rect lying just outside the play area (one pixel each side)."""
    play = sizes.play_xywh
    return pygame.Rect(int(play.x) - 1, int(play.y) - 1, int(play.w) + 2, int(play.h) + 2)


def render_frame(
    surface: pygame.Surface,
    sizes: Sizes,
    commands: Iterable[Command],
    seed_label: Optional[str] = None,
) -> None:
    surface.fill(COLOR_BACKGROUND)

    side = int(sizes.tile_side_length)
    pygame.draw.rect(surface, COLOR_WHITE, play_area_outline(sizes), 1)

    if side > 0:
        for cmd in commands:
            if isinstance(cmd, TileCommand):
                rect = pygame.Rect(int(cmd.spec.xy.x), int(cmd.spec.xy.y), side, side)
                pygame.draw.rect(surface, TILE_COLORS[cmd.spec.state], rect)
            elif isinstance(cmd, SelectrumCommand):
                rect = pygame.Rect(int(cmd.xy.x), int(cmd.xy.y), side, side)
                pygame.draw.rect(surface, COLOR_SELECTRUM, rect, min(SELECTRUM_WIDTH, max(1, side // 4)))

    if seed_label:
        label = render_label_cached(SEED_LABEL_SIZE, seed_label, COLOR_WHITE)
        surface.blit(label, (SEED_LABEL_PAD, surface.get_height() - label.get_height() - SEED_LABEL_PAD))
