"""Chess engine core: bitboards with magic attacks, a xorshift PRNG, debug statistics and helpers."""

__version__ = "0.1.0"
__all__ = ["bitboard", "debug", "misc", "prng"]