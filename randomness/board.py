"""
Board: the 8x8 tile grid, the generator that rolled it, and the cursor.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from randomness.sim.xorshift import SEED_LENGTH, Seed, Xs
from randomness.tile import TILES_LENGTH, Coord, TileState, XY, xy_to_i


@dataclass(slots=True)
class Tile:
    state: TileState = field(default_factory=TileState.default)

    @classmethod
    def from_rng(cls, rng: Xs) -> "Tile":
        return cls(state=TileState.from_rng(rng))


def tiles_from_rng(rng: Xs) -> List[Tile]:
    """Roll one tile per cell. Index order is the row-major XY order."""
    return [Tile.from_rng(rng) for _ in range(TILES_LENGTH)]


class Board:
    """Tile grid plus cursor (`ui_pos`)."""

    def __init__(self, tiles: Optional[List[Tile]] = None, rng: Optional[Xs] = None, ui_pos: XY = XY()):
        if tiles is None:
            tiles = [Tile() for _ in range(TILES_LENGTH)]
        if len(tiles) != TILES_LENGTH:
            raise ValueError(f"board needs {TILES_LENGTH} tiles, got {len(tiles)}")
        self.tiles = tiles
        self.rng = rng if rng is not None else Xs.from_seed(bytes(SEED_LENGTH))
        self.ui_pos = ui_pos

    @classmethod
    def from_seed(cls, seed: Seed) -> "Board":
        rng = Xs.from_seed(seed)
        tiles = tiles_from_rng(rng)
        return cls(tiles=tiles, rng=rng)

    def tile_at(self, xy: XY) -> Tile:
        return self.tiles[xy_to_i(xy)]

    def lit_count(self) -> int:
        return sum(1 for t in self.tiles if t.state is TileState.LIT)

    def pretty(self, cursor: Optional[XY] = None) -> str:
        """Text view of the grid: '#' lit, '.' unlit, cursor cell in brackets."""
        lines: List[str] = []
        for y in range(Coord.COUNT):
            row: List[str] = []
            for x in range(Coord.COUNT):
                xy = XY.of(x, y)
                mark = "#" if self.tile_at(xy).state is TileState.LIT else "."
                row.append(f"[{mark}]" if xy == cursor else f" {mark} ")
            lines.append("".join(row).rstrip())
        return "\n".join(lines)
