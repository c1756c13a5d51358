import pytest

import randomness
from randomness import draw
from randomness.input import (
    INPUT_DOWN_PRESSED,
    INPUT_INTERACT_PRESSED,
    INPUT_LEFT_PRESSED,
    INPUT_RIGHT_DOWN,
    INPUT_RIGHT_PRESSED,
    INPUT_UP_PRESSED,
)
from randomness.sim import perf_stats
from randomness.sim.contracts import DrawWH, SelectrumCommand, TileCommand
from randomness.sim.xorshift import Xs
from randomness.state import CommandBuffer, State, from_seed, sizes, update
from randomness.tile import XY

ZERO_SEED = bytes(16)


class RecordingSink:
    """Sink that remembers every call, to check clear-then-push ordering."""

    def __init__(self, leftovers=()):
        self.items = list(leftovers)
        self.calls = []

    def clear(self) -> None:
        self.calls.append("clear")
        self.items.clear()

    def push(self, command) -> None:
        self.calls.append("push")
        self.items.append(command)


def test_public_surface_reexported() -> None:
    assert randomness.from_seed is from_seed
    assert randomness.update is update
    assert randomness.INPUT_RIGHT_PRESSED == INPUT_RIGHT_PRESSED


def test_first_frame_zero_seed(draw_wh: DrawWH) -> None:
    state = from_seed(ZERO_SEED)
    assert state.cursor == XY()
    commands = CommandBuffer()

    update(state, commands, 0, draw_wh)

    assert len(commands) == 65
    assert all(isinstance(c, TileCommand) for c in commands[:64])
    assert isinstance(commands[64], SelectrumCommand)
    assert commands[64].xy == draw.tile_xy_to_draw(sizes(state), XY.of(0, 0))


def test_every_cell_appears_once_in_row_major_order(draw_wh: DrawWH) -> None:
    state = from_seed(b"0123456789abcdef")
    commands = CommandBuffer()
    update(state, commands, 0, draw_wh)

    expected = [draw.tile_xy_to_draw(state.sizes, xy) for xy in XY.all()]
    assert [c.spec.xy for c in commands[:64]] == expected
    assert len(set(expected)) == 64
    assert [c.spec.state for c in commands[:64]] == [t.state for t in state.board.tiles]


def test_sink_is_cleared_before_refill(draw_wh: DrawWH) -> None:
    state = from_seed(ZERO_SEED)
    sink = RecordingSink(leftovers=["stale"] * 10)

    update(state, sink, 0, draw_wh)
    update(state, sink, 0, draw_wh)

    assert "stale" not in sink.items
    assert len(sink.items) == 65
    assert sink.calls == (["clear"] + ["push"] * 65) * 2


def test_right_then_saturate(draw_wh: DrawWH) -> None:
    state = from_seed(ZERO_SEED)
    commands = CommandBuffer()

    update(state, commands, INPUT_RIGHT_PRESSED, draw_wh)
    assert state.cursor == XY.of(1, 0)

    for _ in range(7):
        update(state, commands, INPUT_RIGHT_PRESSED, draw_wh)
    assert state.cursor == XY.of(7, 0)

    update(state, commands, INPUT_RIGHT_PRESSED, draw_wh)
    assert state.cursor == XY.of(7, 0)
    assert commands[-1].xy == draw.tile_xy_to_draw(state.sizes, XY.of(7, 0))


@pytest.mark.parametrize(
    "flags,expected",
    [
        (INPUT_UP_PRESSED, XY.of(3, 2)),
        (INPUT_DOWN_PRESSED, XY.of(3, 4)),
        (INPUT_LEFT_PRESSED, XY.of(2, 3)),
        (INPUT_RIGHT_PRESSED, XY.of(4, 3)),
        (INPUT_INTERACT_PRESSED, XY.of(3, 3)),
        (INPUT_INTERACT_PRESSED | INPUT_RIGHT_PRESSED, XY.of(3, 3)),
        (INPUT_RIGHT_DOWN, XY.of(3, 3)),
        (0, XY.of(3, 3)),
    ],
)
def test_single_step(flags: int, expected: XY, draw_wh: DrawWH) -> None:
    state = from_seed(ZERO_SEED)
    state.board.ui_pos = XY.of(3, 3)
    update(state, CommandBuffer(), flags, draw_wh)
    assert state.cursor == expected


def test_edges_are_silent(draw_wh: DrawWH) -> None:
    state = from_seed(ZERO_SEED)
    commands = CommandBuffer()
    update(state, commands, INPUT_UP_PRESSED, draw_wh)
    update(state, commands, INPUT_LEFT_PRESSED, draw_wh)
    assert state.cursor == XY.of(0, 0)


def test_cursor_stays_on_grid_for_random_input(draw_wh: DrawWH) -> None:
    state = from_seed(b"cursor-fuzzing!!")
    commands = CommandBuffer()
    rng = Xs.from_seed(b"input-generator!")
    for _ in range(2000):
        update(state, commands, rng.next_u32() & 0xFFFF, draw_wh)
        assert 0 <= state.cursor.x.value <= 7
        assert 0 <= state.cursor.y.value <= 7
        assert len(commands) == 65


def test_same_inputs_same_path(draw_wh: DrawWH) -> None:
    script = [INPUT_RIGHT_PRESSED, INPUT_DOWN_PRESSED, INPUT_DOWN_PRESSED, INPUT_LEFT_PRESSED, 0]

    def run():
        state = from_seed(b"replay me please")
        commands = CommandBuffer()
        path = []
        for flags in script:
            update(state, commands, flags, draw_wh)
            path.append(state.cursor)
        return path, [c.to_dict() for c in commands]

    assert run() == run()


def test_tiles_do_not_change_across_frames(draw_wh: DrawWH) -> None:
    state = from_seed(ZERO_SEED)
    before = [t.state for t in state.board.tiles]
    commands = CommandBuffer()
    for flags in (INPUT_INTERACT_PRESSED, INPUT_RIGHT_PRESSED, INPUT_DOWN_PRESSED):
        update(state, commands, flags, draw_wh)
    assert [t.state for t in state.board.tiles] == before


def test_layout_recomputed_only_on_size_change() -> None:
    state = State.from_seed(ZERO_SEED)
    commands = CommandBuffer()

    update(state, commands, 0, DrawWH(800, 600))
    first = sizes(state)
    assert perf_stats.layout.recomputes == 1

    update(state, commands, 0, DrawWH(800, 600))
    assert sizes(state) is first
    assert perf_stats.layout.recomputes == 1

    update(state, commands, 0, DrawWH(1024, 768))
    assert sizes(state) is not first
    assert sizes(state).draw_wh == DrawWH(1024, 768)
    assert perf_stats.layout.recomputes == 2


def test_layout_function_called_once_per_change(monkeypatch) -> None:
    calls = []
    real = draw.fresh_sizes

    def counting(draw_wh):
        calls.append(draw_wh)
        return real(draw_wh)

    monkeypatch.setattr(draw, "fresh_sizes", counting)
    state = State.from_seed(ZERO_SEED)
    commands = CommandBuffer()
    for wh in (DrawWH(640, 480), DrawWH(640, 480), DrawWH(640, 480), DrawWH(320, 240), DrawWH(320, 240)):
        update(state, commands, 0, wh)
    assert calls == [DrawWH(640, 480), DrawWH(320, 240)]


def test_zero_surface_keeps_default_sizes() -> None:
    state = State.from_seed(ZERO_SEED)
    default = sizes(state)
    update(state, CommandBuffer(), 0, DrawWH())
    assert sizes(state) is default
    assert perf_stats.layout.recomputes == 0


def test_frame_counters(draw_wh: DrawWH) -> None:
    state = from_seed(ZERO_SEED)
    commands = CommandBuffer()
    update(state, commands, 0, draw_wh)
    update(state, commands, 0, draw_wh)
    assert perf_stats.frames.updates == 2
    assert perf_stats.frames.commands_pushed == 130
