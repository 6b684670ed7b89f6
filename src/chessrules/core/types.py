"""Square type and coordinate helpers.

Board layout (row-major, rank 8 first, matching the exported grid):
    a8=(0, 0), b8=(1, 0), ..., h8=(7, 0)
    a7=(0, 1), ...
    ...
    a1=(0, 7), b1=(1, 7), ..., h1=(7, 7)

``rank`` is always the row index into the grid, never the chess rank digit.
"""

from __future__ import annotations

from typing import NamedTuple

_FILES = "abcdefgh"
_RANKS = "12345678"


class Square(NamedTuple):
    """Board coordinate: file 0–7 (a–h), rank row 0–7 (rank 8 → row 0)."""

    file: int
    rank: int

    def __str__(self) -> str:
        return square_name(self)


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq.file


def rank_of(sq: Square) -> int:
    """Row index 0–7 (8–1)."""
    return sq.rank


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and row (0–7)."""
    return Square(file, rank)


def is_on_board(file: int, rank: int) -> bool:
    """Check whether a file/row pair lies on the board."""
    return 0 <= file < 8 and 0 <= rank < 8


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (0, 7) → 'a1', (7, 0) → 'h8'."""
    return _FILES[sq.file] + str(8 - sq.rank)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (4, 4)."""
    if (
        not isinstance(name, str)
        or len(name) != 2
        or name[0] not in _FILES
        or name[1] not in _RANKS
    ):
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(_FILES.index(name[0]), 8 - int(name[1]))


def square_color(sq: Square) -> int:
    """Square shade parity; equal values mean same-coloured squares."""
    return (sq.file + sq.rank) % 2


def all_squares() -> list[Square]:
    """Every square in grid order (a8 … h8, a7 … h1)."""
    return [Square(f, r) for r in range(8) for f in range(8)]


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Square(f, 0) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(f, 1) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(f, 2) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(f, 3) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(f, 4) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(f, 5) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(f, 6) for f in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Square(f, 7) for f in range(8))
