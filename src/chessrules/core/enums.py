"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum

_PIECE_CHARS = "kqrbnp"


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types, king first."""

    KING = 0
    QUEEN = 1
    ROOK = 2
    BISHOP = 3
    KNIGHT = 4
    PAWN = 5

    @property
    def char(self) -> str:
        """Lowercase letter, e.g. 'n' for a knight."""
        return _PIECE_CHARS[self.value]

    @classmethod
    def from_char(cls, char: str) -> PieceType:
        """Piece type from a letter, case-insensitive."""
        lowered = char.lower() if isinstance(char, str) else ""
        if len(lowered) != 1 or lowered not in _PIECE_CHARS:
            raise ValueError(f"Invalid piece type character: {char!r}")
        return cls(_PIECE_CHARS.index(lowered))


class CastlingSide(IntEnum):
    """Which wing the king castles towards."""

    KINGSIDE = 0
    QUEENSIDE = 1


class DrawReason(str, Enum):
    """Why a committed position is drawn."""

    STALEMATE = "stalemate"
    INSUFFICIENT = "insufficient"
    FIFTY_MOVE = "fifty-move"

    def __str__(self) -> str:
        return self.value


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
