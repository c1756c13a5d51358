"""
Top-level game state and the per-frame update.

`update()` is the only entry point the frame loop needs: it applies one input
step to the cursor, refreshes the layout when the surface size changed, and
refills the caller's command sink with this frame's draw commands.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Protocol

from randomness import draw
from randomness.board import Board
from randomness.input import Input, InputFlags
from randomness.sim import perf_stats
from randomness.sim.contracts import Command, DrawWH, SelectrumCommand, TileCommand, TileSpec
from randomness.sim.xorshift import Seed
from randomness.tile import TILES_LENGTH, XY, xy_to_i


class ClearableStorage(Protocol):
    """What the core needs from a command sink. The caller owns the storage."""

    def clear(self) -> None: ...

    def push(self, command: Command) -> None: ...


class CommandBuffer:
    """List-backed sink, reused across frames by the driver."""

    __slots__ = ("commands",)

    def __init__(self) -> None:
        self.commands: List[Command] = []

    def clear(self) -> None:
        self.commands.clear()

    def push(self, command: Command) -> None:
        self.commands.append(command)

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __getitem__(self, index):
        return self.commands[index]


@dataclass
class State:
    sizes: draw.Sizes = field(default_factory=draw.Sizes)
    board: Board = field(default_factory=Board)

    @classmethod
    def from_seed(cls, seed: Seed) -> "State":
        return cls(board=Board.from_seed(seed))

    @property
    def cursor(self) -> XY:
        return self.board.ui_pos


def from_seed(seed: Seed) -> State:
    return State.from_seed(seed)


def sizes(state: State) -> draw.Sizes:
    """Current layout. Sizes is frozen, so handing out the cached object is safe."""
    return state.sizes


def _step_cursor(xy: XY, action: Input) -> XY:
    if action is Input.UP:
        new_y = xy.y.checked_sub_one()
        if new_y is not None:
            return XY(xy.x, new_y)
    elif action is Input.DOWN:
        new_y = xy.y.checked_add_one()
        if new_y is not None:
            return XY(xy.x, new_y)
    elif action is Input.LEFT:
        new_x = xy.x.checked_sub_one()
        if new_x is not None:
            return XY(new_x, xy.y)
    elif action is Input.RIGHT:
        new_x = xy.x.checked_add_one()
        if new_x is not None:
            return XY(new_x, xy.y)
    # NO_CHANGE and INTERACT leave the cursor where it is.
    return xy


def update(
    state: State,
    commands: ClearableStorage,
    input_flags: InputFlags,
    draw_wh: DrawWH,
) -> None:
    """Advance one frame. Afterwards `commands` holds 64 tiles then 1 selectrum."""
    action = Input.from_flags(input_flags)
    state.board.ui_pos = _step_cursor(state.board.ui_pos, action)

    if draw_wh != state.sizes.draw_wh:
        state.sizes = draw.fresh_sizes(draw_wh)
        perf_stats.layout.recomputes += 1

    commands.clear()

    tiles = state.board.tiles
    for xy in XY.all():
        tile = tiles[xy_to_i(xy)]
        commands.push(
            TileCommand(
                TileSpec(
                    xy=draw.tile_xy_to_draw(state.sizes, xy),
                    state=tile.state,
                )
            )
        )

    commands.push(SelectrumCommand(draw.tile_xy_to_draw(state.sizes, state.board.ui_pos)))

    perf_stats.frames.updates += 1
    perf_stats.frames.commands_pushed += TILES_LENGTH + 1
