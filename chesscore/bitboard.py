"""Bitboards: 64-bit square sets, attack tables and magic sliding-piece lookups."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum

from chesscore.prng import PRNG

MASK64 = (1 << 64) - 1
SQUARE_NB = 64

FILE_A_BB = 0x0101010101010101
FILE_B_BB = FILE_A_BB << 1
FILE_C_BB = FILE_A_BB << 2
FILE_D_BB = FILE_A_BB << 3
FILE_E_BB = FILE_A_BB << 4
FILE_F_BB = FILE_A_BB << 5
FILE_G_BB = FILE_A_BB << 6
FILE_H_BB = FILE_A_BB << 7

RANK_1_BB = 0xFF
RANK_2_BB = RANK_1_BB << 8
RANK_3_BB = RANK_1_BB << 16
RANK_4_BB = RANK_1_BB << 24
RANK_5_BB = RANK_1_BB << 32
RANK_6_BB = RANK_1_BB << 40
RANK_7_BB = RANK_1_BB << 48
RANK_8_BB = RANK_1_BB << 56


class Color(IntEnum):
    WHITE = 0
    BLACK = 1


class PieceType(IntEnum):
    NO_PIECE_TYPE = 0
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class Direction(IntEnum):
    NORTH = 8
    EAST = 1
    SOUTH = -8
    WEST = -1
    NORTH_EAST = 9
    SOUTH_EAST = -7
    SOUTH_WEST = -9
    NORTH_WEST = 7


@dataclass
class Magic:
    """Magic bitboard data for one square and one slider type."""

    mask: int = 0
    magic: int = 0
    shift: int = 64
    attacks: list[int] = field(default_factory=list)

    def index(self, occupied: int) -> int:
        """Return the attack table index for the given occupancy."""
        return (((occupied & self.mask) * self.magic) & MASK64) >> self.shift

    def attacks_bb(self, occupied: int) -> int:
        """Return the sliding attacks for the given occupancy."""
        return self.attacks[self.index(occupied)]


# Seeds giving quick magic searches, one per rank.
_MAGIC_SEEDS = (728, 10316, 55013, 32803, 12281, 15100, 16645, 255)

_SQUARE_DISTANCE: list[list[int]] = [[0] * SQUARE_NB for _ in range(SQUARE_NB)]
_LINE_BB: list[list[int]] = [[0] * SQUARE_NB for _ in range(SQUARE_NB)]
_BETWEEN_BB: list[list[int]] = [[0] * SQUARE_NB for _ in range(SQUARE_NB)]
_PSEUDO_ATTACKS: dict[PieceType, list[int]] = {pt: [0] * SQUARE_NB for pt in PieceType}
_PAWN_ATTACKS: dict[Color, list[int]] = {c: [0] * SQUARE_NB for c in Color}

MAGICS: dict[PieceType, list[Magic]] = {
    PieceType.BISHOP: [Magic() for _ in range(SQUARE_NB)],
    PieceType.ROOK: [Magic() for _ in range(SQUARE_NB)],
}


def _is_ok(s: int) -> bool:
    return 0 <= s < SQUARE_NB


def square_bb(s: int) -> int:
    """Return the bitboard holding only square s."""
    if not _is_ok(s):
        raise ValueError(f"square {s} out of range")
    return 1 << s


def make_square(file: int, rank: int) -> int:
    """Return the square index for a file and rank, both 0..7."""
    if not (0 <= file < 8 and 0 <= rank < 8):
        raise ValueError(f"file {file} or rank {rank} out of range")
    return (rank << 3) + file


def file_of(s: int) -> int:
    return s & 7


def rank_of(s: int) -> int:
    return s >> 3


def more_than_one(b: int) -> bool:
    """Return True if b has at least two bits set."""
    return bool(b & (b - 1))


def rank_bb(s: int) -> int:
    """Return all squares on the rank of square s."""
    return RANK_1_BB << (8 * rank_of(s))


def file_bb(s: int) -> int:
    """Return all squares on the file of square s."""
    return FILE_A_BB << file_of(s)


def shift(b: int, direction: int) -> int:
    """Move every square of b one step (or two, vertically) in the given direction."""
    d = int(direction)
    if d == 8:
        return (b << 8) & MASK64
    if d == -8:
        return b >> 8
    if d == 16:
        return (b << 16) & MASK64
    if d == -16:
        return b >> 16
    if d == 1:
        return ((b & ~FILE_H_BB) << 1) & MASK64
    if d == -1:
        return (b & ~FILE_A_BB) >> 1
    if d == 9:
        return ((b & ~FILE_H_BB) << 9) & MASK64
    if d == 7:
        return ((b & ~FILE_A_BB) << 7) & MASK64
    if d == -7:
        return (b & ~FILE_H_BB) >> 7
    if d == -9:
        return (b & ~FILE_A_BB) >> 9
    return 0


def pawn_attacks_bb(color: Color, b: int) -> int:
    """Return the squares attacked by pawns of the given color on the squares of b."""
    if color == Color.WHITE:
        return shift(b, Direction.NORTH_WEST) | shift(b, Direction.NORTH_EAST)
    return shift(b, Direction.SOUTH_WEST) | shift(b, Direction.SOUTH_EAST)


def _check_pair(s1: int, s2: int) -> None:
    if not (_is_ok(s1) and _is_ok(s2)):
        raise ValueError(f"squares {s1}, {s2} out of range")


def line_bb(s1: int, s2: int) -> int:
    """Return the full edge-to-edge line through s1 and s2, or 0 if not aligned."""
    _check_pair(s1, s2)
    return _LINE_BB[s1][s2]


def between_bb(s1: int, s2: int) -> int:
    """Return the squares after s1 up to and including s2, or just s2 if not aligned."""
    _check_pair(s1, s2)
    return _BETWEEN_BB[s1][s2]


def aligned(s1: int, s2: int, s3: int) -> bool:
    """Return True if the three squares lie on one rank, file or diagonal."""
    return bool(line_bb(s1, s2) & square_bb(s3))


def file_distance(x: int, y: int) -> int:
    return abs(file_of(x) - file_of(y))


def rank_distance(x: int, y: int) -> int:
    return abs(rank_of(x) - rank_of(y))


def distance(x: int, y: int) -> int:
    """Return the number of king steps between two squares."""
    _check_pair(x, y)
    return _SQUARE_DISTANCE[x][y]


def edge_distance(f: int) -> int:
    """Return how far file f is from the nearest board edge."""
    return min(f, 7 - f)


def pseudo_attacks(pt: PieceType, s: int) -> int:
    """Return the attacks of a non-pawn piece on an empty board."""
    pt = PieceType(pt)
    if pt in (PieceType.PAWN, PieceType.NO_PIECE_TYPE):
        raise ValueError("pawn attacks depend on color; use pawn_attacks()")
    square_bb(s)
    return _PSEUDO_ATTACKS[pt][s]


def pawn_attacks(color: Color, s: int) -> int:
    """Return the squares a pawn of the given color on s attacks."""
    square_bb(s)
    return _PAWN_ATTACKS[Color(color)][s]


def attacks_bb(pt: PieceType, s: int, occupied: int = 0) -> int:
    """Return the attacks of a non-pawn piece on s given the board occupancy."""
    pt = PieceType(pt)
    if pt in (PieceType.PAWN, PieceType.NO_PIECE_TYPE):
        raise ValueError("attacks_bb() does not handle pawns")
    square_bb(s)
    if pt == PieceType.BISHOP or pt == PieceType.ROOK:
        return MAGICS[pt][s].attacks_bb(occupied)
    if pt == PieceType.QUEEN:
        return MAGICS[PieceType.BISHOP][s].attacks_bb(occupied) | MAGICS[
            PieceType.ROOK
        ][s].attacks_bb(occupied)
    return _PSEUDO_ATTACKS[pt][s]


def popcount(b: int) -> int:
    """Return the number of set bits."""
    return bin(b & MASK64).count("1")


def lsb(b: int) -> int:
    """Return the least significant set square of a non-empty bitboard."""
    if not b:
        raise ValueError("empty bitboard")
    return (b & -b).bit_length() - 1


def msb(b: int) -> int:
    """Return the most significant set square of a non-empty bitboard."""
    if not b:
        raise ValueError("empty bitboard")
    return b.bit_length() - 1


def least_significant_square_bb(b: int) -> int:
    """Return the bitboard of the least significant square of a non-empty bitboard."""
    if not b:
        raise ValueError("empty bitboard")
    return b & -b


def pop_lsb(b: int) -> tuple[int, int]:
    """Return the least significant square and the bitboard without it."""
    s = lsb(b)
    return s, b & (b - 1)


def iter_squares(b: int) -> Iterator[int]:
    """Yield the set squares of b from least to most significant."""
    while b:
        s, b = pop_lsb(b)
        yield s


def pretty(b: int) -> str:
    """Return an ASCII drawing of the bitboard, rank 8 at the top."""
    border = "+---+---+---+---+---+---+---+---+\n"
    parts = [border]
    for r in range(7, -1, -1):
        for f in range(8):
            parts.append("| X " if b & (1 << make_square(f, r)) else "|   ")
        parts.append(f"| {r + 1}\n{border}")
    parts.append("  a   b   c   d   e   f   g   h\n")
    return "".join(parts)


def _safe_destination(s: int, step: int) -> int:
    to = s + step
    if _is_ok(to) and max(file_distance(s, to), rank_distance(s, to)) <= 2:
        return 1 << to
    return 0


_ROOK_DIRECTIONS = (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)
_BISHOP_DIRECTIONS = (
    Direction.NORTH_EAST,
    Direction.SOUTH_EAST,
    Direction.SOUTH_WEST,
    Direction.NORTH_WEST,
)


def _sliding_attack(pt: PieceType, sq: int, occupied: int) -> int:
    attacks = 0
    for d in _ROOK_DIRECTIONS if pt == PieceType.ROOK else _BISHOP_DIRECTIONS:
        s = sq
        while _safe_destination(s, d):
            s += d
            attacks |= 1 << s
            if occupied & (1 << s):
                break
    return attacks


def _init_magics(pt: PieceType) -> None:
    for s in range(SQUARE_NB):
        edges = ((RANK_1_BB | RANK_8_BB) & ~rank_bb(s)) | (
            (FILE_A_BB | FILE_H_BB) & ~file_bb(s)
        )
        m = MAGICS[pt][s]
        m.mask = _sliding_attack(pt, s, 0) & ~edges & MASK64
        m.shift = 64 - popcount(m.mask)

        # Enumerate all subsets of the mask (carry-rippler).
        occupancy: list[int] = []
        reference: list[int] = []
        b = 0
        while True:
            occupancy.append(b)
            reference.append(_sliding_attack(pt, s, b))
            b = (b - m.mask) & m.mask
            if not b:
                break

        size = len(occupancy)
        table = [0] * size
        epoch = [0] * size
        cnt = 0
        rng = PRNG(_MAGIC_SEEDS[rank_of(s)])
        mask = m.mask
        shift_ = m.shift

        found = False
        while not found:
            magic = 0
            while popcount(((magic * mask) & MASK64) >> 56) < 6:
                magic = rng.sparse_rand()
            cnt += 1
            found = True
            for occ, ref in zip(occupancy, reference):
                idx = ((occ * magic) & MASK64) >> shift_
                if epoch[idx] < cnt:
                    epoch[idx] = cnt
                    table[idx] = ref
                elif table[idx] != ref:
                    found = False
                    break
        m.magic = magic
        m.attacks = table


def init() -> None:
    """Build every lookup table. Safe to call more than once."""
    for s1 in range(SQUARE_NB):
        for s2 in range(SQUARE_NB):
            _SQUARE_DISTANCE[s1][s2] = max(file_distance(s1, s2), rank_distance(s1, s2))
            _LINE_BB[s1][s2] = 0
            _BETWEEN_BB[s1][s2] = 0

    _init_magics(PieceType.ROOK)
    _init_magics(PieceType.BISHOP)

    for s1 in range(SQUARE_NB):
        sb = 1 << s1
        _PAWN_ATTACKS[Color.WHITE][s1] = pawn_attacks_bb(Color.WHITE, sb)
        _PAWN_ATTACKS[Color.BLACK][s1] = pawn_attacks_bb(Color.BLACK, sb)

        king = 0
        for step in (-9, -8, -7, -1, 1, 7, 8, 9):
            king |= _safe_destination(s1, step)
        _PSEUDO_ATTACKS[PieceType.KING][s1] = king

        knight = 0
        for step in (-17, -15, -10, -6, 6, 10, 15, 17):
            knight |= _safe_destination(s1, step)
        _PSEUDO_ATTACKS[PieceType.KNIGHT][s1] = knight

        bishop = MAGICS[PieceType.BISHOP][s1].attacks_bb(0)
        rook = MAGICS[PieceType.ROOK][s1].attacks_bb(0)
        _PSEUDO_ATTACKS[PieceType.BISHOP][s1] = bishop
        _PSEUDO_ATTACKS[PieceType.ROOK][s1] = rook
        _PSEUDO_ATTACKS[PieceType.QUEEN][s1] = bishop | rook

        for pt in (PieceType.BISHOP, PieceType.ROOK):
            magics = MAGICS[pt]
            for s2 in range(SQUARE_NB):
                if _PSEUDO_ATTACKS[pt][s1] & (1 << s2):
                    _LINE_BB[s1][s2] = (
                        magics[s1].attacks_bb(0) & magics[s2].attacks_bb(0)
                    ) | (1 << s1) | (1 << s2)
                    _BETWEEN_BB[s1][s2] = magics[s1].attacks_bb(1 << s2) & magics[
                        s2
                    ].attacks_bb(1 << s1)
                _BETWEEN_BB[s1][s2] |= 1 << s2


init()