"""
Layout: where the 8x8 grid sits on the drawable surface.

Pure functions of the surface size. The update pipeline caches the result and
only asks for fresh sizes when the surface dimensions change.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from randomness.sim.contracts import (
    DrawLength,
    DrawWH,
    DrawXY,
    DrawXYWH,
)
from randomness.tile import Coord, XY

# Pixels kept free on every side so the renderer's outline, drawn just outside
# the play area, stays on screen.
OUTLINE_MARGIN: DrawLength = 1.0

W_TILES_COUNT = Coord.COUNT
H_TILES_COUNT = Coord.COUNT


@dataclass(frozen=True, slots=True)
class Sizes:
    draw_wh: DrawWH = field(default_factory=DrawWH)
    play_xywh: DrawXYWH = field(default_factory=DrawXYWH)
    tile_side_length: DrawLength = 0.0


def fresh_sizes(draw_wh: DrawWH) -> Sizes:
    """Compute the layout for a surface of size `draw_wh`."""
    available_w = max(0.0, float(draw_wh.w) - 2 * OUTLINE_MARGIN)
    available_h = max(0.0, float(draw_wh.h) - 2 * OUTLINE_MARGIN)

    # Whole pixels keep tile edges crisp.
    tile_side_length = float(math.floor(min(available_w / W_TILES_COUNT, available_h / H_TILES_COUNT)))

    play_w = tile_side_length * W_TILES_COUNT
    play_h = tile_side_length * H_TILES_COUNT

    play_xywh = DrawXYWH(
        x=float(math.floor((float(draw_wh.w) - play_w) / 2)),
        y=float(math.floor((float(draw_wh.h) - play_h) / 2)),
        w=play_w,
        h=play_h,
    )

    return Sizes(draw_wh=draw_wh, play_xywh=play_xywh, tile_side_length=tile_side_length)


# Name used by callers that think of this as "the layout function".
compute_sizes = fresh_sizes


def tile_xy_to_draw(sizes: Sizes, xy: XY) -> DrawXY:
    """Top-left corner of cell `xy`, in surface space."""
    play = sizes.play_xywh
    return DrawXY(
        x=play.x + play.w * xy.x.proportion(),
        y=play.y + play.h * xy.y.proportion(),
    )
