# chesscore

Building blocks for a chess engine, written in plain Python with no
third-party dependencies.

## Modules

- `chesscore.bitboard`: 64-bit bitboards with one bit per square, A1 = 0 and
  H8 = 63. It has the enums `Color`, `PieceType` and `Direction`, rank and
  file masks, `square_bb`, `make_square`, `file_of`, `rank_of`, `rank_bb`,
  `file_bb`, `shift`, `pawn_attacks_bb`, and lookup tables for pawn
  (`pawn_attacks`), king and knight (`pseudo_attacks`) attacks. Bishop, rook
  and queen attacks come from `attacks_bb`, which uses "fancy" magic
  bitboards (one `Magic` per square and slider). It also has `line_bb`,
  `between_bb`, `aligned`, `distance`, `file_distance`, `rank_distance`,
  `edge_distance`, `popcount`, `lsb`, `msb`, `least_significant_square_bb`,
  `pop_lsb`, `iter_squares`, `more_than_one` and the board printer `pretty`.
  The tables are built when the module is imported; `init()` builds them
  again.
- `chesscore.prng`: the xorshift64* generator `PRNG`, with `rand64` and
  `sparse_rand`; it is also an endless iterator. `mul_hi64` gives the high
  64 bits of a 128-bit product.
- `chesscore.debug`: `DebugStats`, which collects hit rates, means, standard
  deviations, extremes and correlations in numbered slots (32 by default).
  `report()` returns the lines, `print()` writes them to standard error or a
  given stream, and `clear()` resets everything.
- `chesscore.misc`: `engine_version_info` and `engine_info` version strings,
  the string helpers `split`, `remove_whitespace`, `is_whitespace` and
  `str_to_size_t`, the file and path helpers `read_file_to_string`,
  `get_working_directory` and `get_binary_directory`, and `move_to_front`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from chesscore import bitboard as bb

rook_square = bb.make_square(0, 0)             # a1
blocker = bb.square_bb(bb.make_square(0, 3))   # a4
attacks = bb.attacks_bb(bb.PieceType.ROOK, rook_square, blocker)
print(bb.pretty(attacks))
print(bb.popcount(attacks))
print(list(bb.iter_squares(attacks)))
```

```python
from chesscore.prng import PRNG, mul_hi64

rng = PRNG(1070372)
print(rng.rand64(), rng.sparse_rand())
print(mul_hi64(2**63, 4))   # 2
```

```python
from chesscore.debug import DebugStats

stats = DebugStats()
for v in (3, 5, 7):
    stats.mean_of(v, 0)
print(stats.report())
```

## What it does not do

This package holds only the low-level pieces. It has no position or board
state, no move generation, no evaluation, no search, no UCI command loop and
no benchmark runner, and it installs no command-line program.