"""
Per-frame input flags and the single action they resolve to.

The driver sets "pressed" bits on the frame a key goes down and "held" bits on
every frame it stays down. Only the pressed bits and interact pick the action;
the held bits are passed through but not consulted.
"""
from __future__ import annotations

from enum import Enum, auto

InputFlags = int

INPUT_UP_PRESSED: InputFlags = 0b0000_0000_0000_0001
INPUT_DOWN_PRESSED: InputFlags = 0b0000_0000_0000_0010
INPUT_LEFT_PRESSED: InputFlags = 0b0000_0000_0000_0100
INPUT_RIGHT_PRESSED: InputFlags = 0b0000_0000_0000_1000

INPUT_UP_DOWN: InputFlags = 0b0000_0000_0001_0000
INPUT_DOWN_DOWN: InputFlags = 0b0000_0000_0010_0000
INPUT_LEFT_DOWN: InputFlags = 0b0000_0000_0100_0000
INPUT_RIGHT_DOWN: InputFlags = 0b0000_0000_1000_0000

INPUT_INTERACT_PRESSED: InputFlags = 0b0000_0001_0000_0000

INPUT_FLAGS_MASK: InputFlags = 0xFFFF


class Input(Enum):
    NO_CHANGE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    INTERACT = auto()

    @classmethod
    def from_flags(cls, flags: InputFlags) -> "Input":
        """First match wins: interact, up, down, left, right."""
        if INPUT_INTERACT_PRESSED & flags:
            return cls.INTERACT
        elif INPUT_UP_PRESSED & flags:
            return cls.UP
        elif INPUT_DOWN_PRESSED & flags:
            return cls.DOWN
        elif INPUT_LEFT_PRESSED & flags:
            return cls.LEFT
        elif INPUT_RIGHT_PRESSED & flags:
            return cls.RIGHT
        return cls.NO_CHANGE
