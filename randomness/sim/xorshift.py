"""
xorshift128 generator over a 16-byte seed.

All randomness in the game comes from here. Every word operation is masked to
32 bits so sequences match across platforms and interpreter versions.
"""

from __future__ import annotations

from typing import MutableSequence, Tuple

Seed = bytes
Words = Tuple[int, int, int, int]

SEED_LENGTH = 16
U32_MASK = 0xFFFFFFFF

# An all-zero state never leaves zero, so the zero seed maps to this instead.
ZERO_SEED_REPLACEMENT: Seed = (0xBAD5EED).to_bytes(SEED_LENGTH, "little")


def state_from_seed(seed: Seed) -> Words:
    """Split a 16-byte seed into four little-endian 32-bit words."""
    seed = bytes(seed)
    if len(seed) != SEED_LENGTH:
        raise ValueError(f"seed must be {SEED_LENGTH} bytes, got {len(seed)}")
    if seed == bytes(SEED_LENGTH):
        seed = ZERO_SEED_REPLACEMENT

    return (
        int.from_bytes(seed[0:4], "little"),
        int.from_bytes(seed[4:8], "little"),
        int.from_bytes(seed[8:12], "little"),
        int.from_bytes(seed[12:16], "little"),
    )


class Xs:
    """Four-word xorshift128 state."""

    __slots__ = ("_words",)

    def __init__(self, words: Words) -> None:
        if len(words) != 4:
            raise ValueError("xorshift128 state needs exactly four words")
        self._words = [int(w) & U32_MASK for w in words]

    @classmethod
    def from_seed(cls, seed: Seed) -> "Xs":
        return cls(state_from_seed(seed))

    @property
    def state(self) -> Words:
        w = self._words
        return (w[0], w[1], w[2], w[3])

    def next_u32(self) -> int:
        w = self._words
        t = w[3]

        w[3] = w[2]
        w[2] = w[1]
        w[1] = w[0]

        t ^= (t << 11) & U32_MASK
        t ^= t >> 8
        w[0] = (t ^ w[0] ^ (w[0] >> 19)) & U32_MASK

        return w[0]

    def uniform(self, min_value: int, one_past_max: int) -> int:
        """
        Draw from [min_value, one_past_max).

        Uses a plain modulo, so ranges that do not divide 2**32 are slightly
        biased. Every range drawn in the game is 8 or smaller.
        """
        return (self.next_u32() % (one_past_max - min_value)) + min_value

    def shuffle(self, items: MutableSequence) -> None:
        """
        Fisher-Yates shuffle in place.

        Only the first 2**32 - 1 elements of a longer sequence are shuffled,
        because the swap index is drawn as a 32-bit value.
        """
        for i in range(1, min(len(items), U32_MASK)):
            r = self.uniform(0, i + 1)
            items[i], items[r] = items[r], items[i]

    def new_seed(self) -> Seed:
        """Draw a fresh seed from this generator."""
        return b"".join(self.next_u32().to_bytes(4, "little") for _ in range(4))

    def __repr__(self) -> str:
        return "Xs(" + ", ".join(f"0x{w:08X}" for w in self._words) + ")"
