"""
Grid coordinates and tile states.

A Coord is one of eight ordered positions along an axis. X and Y wrap a Coord
so the two axes cannot be mixed up, and XY names one cell of the 8x8 grid.
Nothing here can produce a position off the grid: stepping past an edge
yields None instead of clamping or wrapping.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Iterator, Optional, Tuple

if TYPE_CHECKING:
    from randomness.sim.xorshift import Xs

Count = int
# Only ever holds values in [0, 1].
Proportion = float


@dataclass(frozen=True, order=True, slots=True)
class Coord:
    value: int = 0

    COUNT: ClassVar[Count] = 8
    MAX_INDEX: ClassVar[Count] = 7

    ALL: ClassVar[Tuple["Coord", ...]]
    ZERO: ClassVar["Coord"]
    # Eight is even, so this is the lower-right of the two middle values.
    CENTER: ClassVar["Coord"]
    MAX: ClassVar["Coord"]

    def __post_init__(self):
        if type(self.value) is not int or not 0 <= self.value < Coord.COUNT:
            raise ValueError(f"Coord must be an int in [0, {Coord.MAX_INDEX}], got {self.value!r}")

    @classmethod
    def try_from(cls, value: int) -> Optional["Coord"]:
        if 0 <= value < cls.COUNT:
            return cls.ALL[value]
        return None

    @classmethod
    def from_rng(cls, rng: "Xs") -> "Coord":
        return cls.ALL[rng.uniform(0, len(cls.ALL))]

    def checked_add_one(self) -> Optional["Coord"]:
        return Coord.try_from(self.value + 1)

    def checked_sub_one(self) -> Optional["Coord"]:
        return Coord.try_from(self.value - 1)

    def proportion(self) -> Proportion:
        return self.value / float(Coord.COUNT)

    def __int__(self) -> int:
        return self.value


Coord.ALL = tuple(Coord(i) for i in range(Coord.COUNT))
Coord.ZERO = Coord.ALL[0]
Coord.CENTER = Coord.ALL[len(Coord.ALL) // 2]
Coord.MAX = Coord.ALL[-1]


@dataclass(frozen=True, order=True, slots=True)
class _Axis:
    """Shared behaviour for X and Y. Results keep the caller's axis type."""

    coord: Coord = Coord.ZERO

    COUNT: ClassVar[Count] = Coord.COUNT
    ALL: ClassVar[tuple]
    ZERO: ClassVar["_Axis"]
    CENTER: ClassVar["_Axis"]
    MAX: ClassVar["_Axis"]

    def __post_init__(self):
        if not isinstance(self.coord, Coord):
            raise TypeError(f"{type(self).__name__} wraps a Coord, got {type(self.coord).__name__}")

    @classmethod
    def of(cls, value: int):
        return cls(Coord(value))

    @classmethod
    def from_rng(cls, rng: "Xs"):
        return cls(Coord.from_rng(rng))

    @property
    def value(self) -> int:
        return self.coord.value

    def checked_add_one(self):
        coord = self.coord.checked_add_one()
        return None if coord is None else type(self)(coord)

    def checked_sub_one(self):
        coord = self.coord.checked_sub_one()
        return None if coord is None else type(self)(coord)

    def proportion(self) -> Proportion:
        return self.coord.proportion()

    def __int__(self) -> int:
        return self.coord.value


@dataclass(frozen=True, order=True, slots=True)
class X(_Axis):
    pass


@dataclass(frozen=True, order=True, slots=True)
class Y(_Axis):
    pass


for _axis in (X, Y):
    _axis.ALL = tuple(_axis(c) for c in Coord.ALL)
    _axis.ZERO = _axis(Coord.ZERO)
    _axis.CENTER = _axis(Coord.CENTER)
    _axis.MAX = _axis(Coord.MAX)
del _axis


@dataclass(frozen=True, slots=True)
class XY:
    x: X = X.ZERO
    y: Y = Y.ZERO

    def __post_init__(self):
        if not isinstance(self.x, X) or not isinstance(self.y, Y):
            raise TypeError("XY needs an X and a Y, in that order")

    @classmethod
    def of(cls, x: int, y: int) -> "XY":
        return cls(X.of(x), Y.of(y))

    @staticmethod
    def all() -> Iterator["XY"]:
        """Every cell, row by row: all of y=0 first, then y=1, and so on."""
        for yc in Coord.ALL:
            y = Y(yc)
            for xc in Coord.ALL:
                yield XY(X(xc), y)

    def __repr__(self) -> str:
        return f"XY({self.x.value}, {self.y.value})"


class TileState(Enum):
    UNLIT = 0
    LIT = 1

    @classmethod
    def default(cls) -> "TileState":
        return cls.UNLIT

    @classmethod
    def from_rng(cls, rng: "Xs") -> "TileState":
        if rng.uniform(0, 2) == 0:
            return cls.UNLIT
        return cls.LIT


TILES_LENGTH = Coord.COUNT * Coord.COUNT


def xy_to_i(xy: XY) -> int:
    return xy_to_i_usize((int(xy.x), int(xy.y)))


def xy_to_i_usize(xy: Tuple[int, int]) -> int:
    x, y = xy
    return y * Coord.COUNT + x
