"""Position — complete game state (board + metadata) and the move applier."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.board import Board
from chessrules.core.enums import CastlingSide, Color, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import Square, make_square

_HOME_ROW: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}
_CORNER_SIDE: dict[int, CastlingSide] = {
    0: CastlingSide.QUEENSIDE,
    7: CastlingSide.KINGSIDE,
}


@dataclass(frozen=True, slots=True)
class CastlingRights:
    """Castling availability for one colour. Rights are only ever revoked."""

    kingside: bool = True
    queenside: bool = True

    def allows(self, side: CastlingSide) -> bool:
        return self.kingside if side == CastlingSide.KINGSIDE else self.queenside

    def revoke(self, side: CastlingSide) -> CastlingRights:
        if side == CastlingSide.KINGSIDE:
            return CastlingRights(False, self.queenside)
        return CastlingRights(self.kingside, False)

    def revoke_all(self) -> CastlingRights:
        return CastlingRights(False, False)


class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    This is the unit of snapshotting. Simulations and undo always work on
    :meth:`copy` results; a position is never shared between two owners.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: dict[Color, CastlingRights] | None = None,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        if castling is None:
            castling = {Color.WHITE: CastlingRights(), Color.BLACK: CastlingRights()}
        self.castling = dict(castling)
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position, white to move."""
        return cls()

    def can_castle(self, color: Color, side: CastlingSide) -> bool:
        return self.castling[color].allows(side)

    # ── Move application ─────────────────────────────────────────────────

    def make_move(self, move: Move) -> Piece | None:
        """Apply *move* in place and return the captured piece, if any.

        Performs no legality checking; callers apply generated moves to a
        copy they own.
        """
        board = self.board
        piece = board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        # Lift piece from origin
        board[move.from_sq] = None

        # En passant: the captured pawn sits beside the mover, not on to_sq
        capture_sq = move.to_sq
        if move.flags.en_passant and move.capture_square is not None:
            capture_sq = move.capture_square
            captured = board[capture_sq]
            board[capture_sq] = None
        else:
            captured = board[move.to_sq]

        # Place piece (handle promotion)
        if move.promotion is not None:
            board[move.to_sq] = Piece(piece.color, move.promotion)
        else:
            board[move.to_sq] = piece

        # Slide the rook for castling
        if move.flags.castle is not None:
            self._relocate_castling_rook(move)

        # En passant target for the opponent
        self.en_passant = None
        if move.flags.double_push:
            self.en_passant = make_square(
                move.from_sq.file, (move.from_sq.rank + move.to_sq.rank) // 2
            )

        self._update_castling(piece, move.from_sq, captured, capture_sq)

        # Clocks
        if piece.piece_type == PieceType.PAWN or captured is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        if piece.color == Color.BLACK:
            self.fullmove_number += 1

        self.side_to_move = piece.color.opposite
        return captured

    def _relocate_castling_rook(self, move: Move) -> None:
        row = move.from_sq.rank
        if move.flags.castle == CastlingSide.KINGSIDE:
            rook_from = make_square(7, row)
            rook_to = make_square(move.to_sq.file - 1, row)
        else:
            rook_from = make_square(0, row)
            rook_to = make_square(move.to_sq.file + 1, row)
        rook = self.board[rook_from]
        assert rook is not None, f"Castling without a rook on {rook_from}"
        self.board[rook_to] = rook
        self.board[rook_from] = None

    # ── Castling bookkeeping ─────────────────────────────────────────────

    def _update_castling(
        self,
        piece: Piece,
        from_sq: Square,
        captured: Piece | None,
        capture_sq: Square,
    ) -> None:
        color = piece.color
        if piece.piece_type == PieceType.KING:
            self.castling[color] = self.castling[color].revoke_all()
        elif piece.piece_type == PieceType.ROOK and from_sq.rank == _HOME_ROW[color]:
            side = _CORNER_SIDE.get(from_sq.file)
            if side is not None:
                self.castling[color] = self.castling[color].revoke(side)

        if captured is not None and captured.piece_type == PieceType.ROOK:
            enemy = captured.color
            if capture_sq.rank == _HOME_ROW[enemy]:
                side = _CORNER_SIDE.get(capture_sq.file)
                if side is not None:
                    self.castling[enemy] = self.castling[enemy].revoke(side)

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy; the board grid and rights map are never shared."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.castling == other.castling
            and self.en_passant == other.en_passant
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
        )

    def __repr__(self) -> str:
        return (
            f"Position(side_to_move={self.side_to_move}, "
            f"en_passant={self.en_passant}, halfmove_clock={self.halfmove_clock}, "
            f"fullmove_number={self.fullmove_number})\n{self.board!r}"
        )
