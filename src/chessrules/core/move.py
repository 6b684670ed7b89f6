"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessrules.core.enums import CastlingSide, Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class MoveFlags:
    """Special move classification."""

    capture: bool = False
    en_passant: bool = False
    double_push: bool = False
    promotion: bool = False
    castle: CastlingSide | None = None


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable description of a single move; never points into a board.

    ``capture_square`` is only set for en passant, where the captured pawn
    stands beside the mover rather than on ``to_sq``.
    """

    from_sq: Square
    to_sq: Square
    piece_type: PieceType
    color: Color
    captured: Piece | None = None
    promotion: PieceType | None = None
    flags: MoveFlags = field(default_factory=MoveFlags)
    capture_square: Square | None = None

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_capture(self) -> bool:
        return self.flags.capture

    @property
    def is_castle(self) -> bool:
        return self.flags.castle is not None

    @property
    def effective_capture_square(self) -> Square:
        """Square the captured piece is removed from."""
        return self.capture_square if self.capture_square is not None else self.to_sq

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += self.promotion.char
        return base

    @property
    def uci(self) -> str:
        """Coordinate notation, e.g. ``e7e8q``."""
        return str(self)
