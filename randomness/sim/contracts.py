"""
Thin, stable data contracts between the simulation and the renderer.

These are intentionally small "struct-like" dataclasses so:
- the core can describe a frame without knowing anything about pygame
- a frame is easy to inspect in tests and headless tools
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from randomness.tile import TileState

DrawLength = float
DrawX = float
DrawY = float
DrawW = float
DrawH = float


@dataclass(frozen=True, slots=True)
class DrawXY:
    x: DrawX = 0.0
    y: DrawY = 0.0


@dataclass(frozen=True, slots=True)
class DrawWH:
    w: DrawW = 0.0
    h: DrawH = 0.0


@dataclass(frozen=True, slots=True)
class DrawXYWH:
    x: DrawX = 0.0
    y: DrawY = 0.0
    w: DrawW = 0.0
    h: DrawH = 0.0


@dataclass(frozen=True, slots=True)
class TileSpec:
    xy: DrawXY
    state: TileState


@dataclass(frozen=True, slots=True)
class TileCommand:
    """Draw one grid cell at `spec.xy` (top-left, surface space)."""

    spec: TileSpec

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "tile",
            "x": float(self.spec.xy.x),
            "y": float(self.spec.xy.y),
            "state": self.spec.state.name.lower(),
        }


@dataclass(frozen=True, slots=True)
class SelectrumCommand:
    """Draw the cursor highlight over the cell whose top-left is `xy`."""

    xy: DrawXY

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "selectrum", "x": float(self.xy.x), "y": float(self.xy.y)}


Command = Union[TileCommand, SelectrumCommand]
