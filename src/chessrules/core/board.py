"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square, make_square, parse_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional pieces, row 0 = rank 8."""

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._grid[sq.rank][sq.file]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._grid[sq.rank][sq.file] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._grid[sq.rank][sq.file] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """(square, piece) pairs for every occupied square, a8 first."""
        for rank, row in enumerate(self._grid):
            for file, piece in enumerate(row):
                if piece is not None:
                    yield make_square(file, rank), piece

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in self.occupied() if piece == target]

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or None if it is not on the board."""
        king = Piece(color, PieceType.KING)
        for sq, piece in self.occupied():
            if piece == king:
                return sq
        return None

    def grid(self) -> list[list[Piece | None]]:
        """Independent copy of the grid; mutating it never touches the board."""
        return [row.copy() for row in self._grid]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = self.grid()
        return b

    def clear(self) -> None:
        self._grid = [[None] * 8 for _ in range(8)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(Color.BLACK, pt)
            b[make_square(f, 1)] = Piece(Color.BLACK, PieceType.PAWN)
            b[make_square(f, 6)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(f, 7)] = Piece(Color.WHITE, pt)
        return b

    @classmethod
    def from_pieces(cls, placement: Mapping[str, str]) -> Board:
        """Board from ``{"e1": "K", "e8": "k", ...}`` (letter case = colour)."""
        b = cls()
        for name, char in placement.items():
            b[parse_square(name)] = Piece.from_char(char)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank, row in enumerate(self._grid):
            cells = [str(p) if p else "." for p in row]
            rows.append(f"{8 - rank} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
