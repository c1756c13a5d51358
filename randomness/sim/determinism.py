"""
Determinism helpers.

Goals:
- Turn the integer seeds people type (CLI, env) into the 16-byte seeds the board uses
- Keep the one wall-clock read (the "pick me a seed" default) in a single place

Non-goals:
- Cryptographic security
"""

from __future__ import annotations

import time
from typing import Optional

from .xorshift import SEED_LENGTH, Seed

_SEED_BITS = SEED_LENGTH * 8


def seed_from_int(value: int) -> Seed:
    """Encode a non-negative integer as a 128-bit little-endian seed."""
    value = int(value)
    if value < 0:
        raise ValueError("seed must be non-negative")
    if value.bit_length() > _SEED_BITS:
        raise ValueError(f"seed must fit in {_SEED_BITS} bits")
    return value.to_bytes(SEED_LENGTH, "little")


def seed_to_int(seed: Seed) -> int:
    """Inverse of seed_from_int (for printing and replaying seeds)."""
    seed = bytes(seed)
    if len(seed) != SEED_LENGTH:
        raise ValueError(f"seed must be {SEED_LENGTH} bytes, got {len(seed)}")
    return int.from_bytes(seed, "little")


def clock_seed_int() -> int:
    """Nanoseconds since the epoch, used when no seed was given."""
    return time.time_ns() & ((1 << _SEED_BITS) - 1)


def resolve_seed(explicit: Optional[int] = None, configured: Optional[int] = None) -> int:
    """
    Pick the seed for a run: CLI value first, then config/env, then the clock.
    """
    if explicit is not None:
        return int(explicit)
    if configured is not None:
        return int(configured)
    return clock_seed_int()
