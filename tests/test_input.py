import pytest

from randomness.input import (
    INPUT_DOWN_DOWN,
    INPUT_DOWN_PRESSED,
    INPUT_INTERACT_PRESSED,
    INPUT_LEFT_DOWN,
    INPUT_LEFT_PRESSED,
    INPUT_RIGHT_DOWN,
    INPUT_RIGHT_PRESSED,
    INPUT_UP_DOWN,
    INPUT_UP_PRESSED,
    Input,
)


def test_bit_layout() -> None:
    assert [
        INPUT_UP_PRESSED,
        INPUT_DOWN_PRESSED,
        INPUT_LEFT_PRESSED,
        INPUT_RIGHT_PRESSED,
        INPUT_UP_DOWN,
        INPUT_DOWN_DOWN,
        INPUT_LEFT_DOWN,
        INPUT_RIGHT_DOWN,
        INPUT_INTERACT_PRESSED,
    ] == [1 << i for i in range(9)]


@pytest.mark.parametrize(
    "flags,expected",
    [
        (0, Input.NO_CHANGE),
        (INPUT_UP_PRESSED, Input.UP),
        (INPUT_DOWN_PRESSED, Input.DOWN),
        (INPUT_LEFT_PRESSED, Input.LEFT),
        (INPUT_RIGHT_PRESSED, Input.RIGHT),
        (INPUT_INTERACT_PRESSED, Input.INTERACT),
        (0x1FF, Input.INTERACT),
        (INPUT_UP_PRESSED | INPUT_RIGHT_PRESSED, Input.UP),
        (INPUT_DOWN_PRESSED | INPUT_LEFT_PRESSED, Input.DOWN),
        (INPUT_LEFT_PRESSED | INPUT_RIGHT_PRESSED, Input.LEFT),
        (INPUT_RIGHT_PRESSED | INPUT_UP_DOWN, Input.RIGHT),
    ],
)
def test_priority_order(flags: int, expected: Input) -> None:
    assert Input.from_flags(flags) is expected


def test_held_bits_are_ignored() -> None:
    held = INPUT_UP_DOWN | INPUT_DOWN_DOWN | INPUT_LEFT_DOWN | INPUT_RIGHT_DOWN
    assert Input.from_flags(held) is Input.NO_CHANGE


def test_unassigned_high_bits_are_ignored() -> None:
    assert Input.from_flags(0xFE00) is Input.NO_CHANGE
