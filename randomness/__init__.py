"""
Find the Randomness - simulation core.

The public surface is small: build a State from a seed, then call update() once
per frame with the input flags and the surface size.
"""
from .state import ClearableStorage, CommandBuffer, State, from_seed, sizes, update
from .input import (
    Input,
    InputFlags,
    INPUT_UP_PRESSED,
    INPUT_DOWN_PRESSED,
    INPUT_LEFT_PRESSED,
    INPUT_RIGHT_PRESSED,
    INPUT_UP_DOWN,
    INPUT_DOWN_DOWN,
    INPUT_LEFT_DOWN,
    INPUT_RIGHT_DOWN,
    INPUT_INTERACT_PRESSED,
)
from .draw import Sizes
from .sim.contracts import DrawWH, DrawXY, SelectrumCommand, TileCommand
from .tile import TileState, XY
