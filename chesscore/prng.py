"""Xorshift64* pseudo-random number generator and 64-bit helpers."""

from __future__ import annotations

_MASK64 = (1 << 64) - 1
_MULTIPLIER = 2685821657736338717


class PRNG:
    """Xorshift64* generator with a single 64-bit word of state.

    Outputs 64-bit numbers and has a period of 2**64 - 1. It needs no
    warm-up and the same seed always yields the same sequence.
    """

    __slots__ = ("_state",)

    def __init__(self, seed: int) -> None:
        if not 0 < seed <= _MASK64:
            raise ValueError("seed must be a non-zero unsigned 64-bit integer")
        self._state = seed

    def rand64(self) -> int:
        """Return the next 64-bit pseudo-random number."""
        s = self._state
        s ^= s >> 12
        s ^= (s << 25) & _MASK64
        s ^= s >> 27
        self._state = s
        return (s * _MULTIPLIER) & _MASK64

    def sparse_rand(self) -> int:
        """Return a number with about one eighth of its bits set."""
        return self.rand64() & self.rand64() & self.rand64()

    def __iter__(self) -> PRNG:
        return self

    def __next__(self) -> int:
        return self.rand64()


def mul_hi64(a: int, b: int) -> int:
    """Return the high 64 bits of the 128-bit product of two 64-bit values."""
    return ((a & _MASK64) * (b & _MASK64)) >> 64