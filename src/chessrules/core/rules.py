"""High-level chess rules: checkmate, stalemate, draw detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, DrawReason, GameResult, PieceType
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.types import square_color

if TYPE_CHECKING:
    from chessrules.core.position import Position

_MATING_MATERIAL = frozenset({PieceType.PAWN, PieceType.ROOK, PieceType.QUEEN})

FIFTY_MOVE_HALFMOVES = 100  # 100 half-moves = 50 full moves


@dataclass(frozen=True, slots=True)
class Classification:
    """Status of a freshly committed position, seen from the side to move."""

    check: bool = False
    checkmate: bool = False
    stalemate: bool = False
    draw_reason: DrawReason | None = None

    @property
    def draw(self) -> bool:
        return self.draw_reason is not None


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # Draw policy: stalemate, insufficient material and the fifty-move rule
    # are all reported as draws when a move is committed, in that priority.

    @staticmethod
    def is_in_check(position: Position) -> bool:
        gen = MoveGenerator(position)
        return gen.is_in_check(position.side_to_move)

    @staticmethod
    def has_legal_moves(position: Position) -> bool:
        gen = MoveGenerator(position)
        return any(gen.is_legal(m) for m in gen.generate_pseudo_legal_moves())

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return Rules.is_in_check(position) and not Rules.has_legal_moves(position)

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        return not Rules.is_in_check(position) and not Rules.has_legal_moves(position)

    @staticmethod
    def is_insufficient_material(position: Position) -> bool:
        """Only kings plus minor pieces that can never force mate.

        Drawn when no pawn, rook or queen remains and either there are no
        bishops and at most one knight, or there are no knights and every
        bishop (of either colour) stands on the same square shade.
        """
        bishop_shades: set[int] = set()
        knights = 0
        for sq, piece in position.board.occupied():
            ptype = piece.piece_type
            if ptype in _MATING_MATERIAL:
                return False
            if ptype == PieceType.BISHOP:
                bishop_shades.add(square_color(sq))
            elif ptype == PieceType.KNIGHT:
                knights += 1

        if not bishop_shades:
            return knights <= 1
        return knights == 0 and len(bishop_shades) == 1

    @staticmethod
    def is_fifty_move_rule(position: Position) -> bool:
        return position.halfmove_clock >= FIFTY_MOVE_HALFMOVES

    @staticmethod
    def draw_reason(position: Position, stalemate: bool) -> DrawReason | None:
        """First applicable draw reason: stalemate, material, fifty-move."""
        if stalemate:
            return DrawReason.STALEMATE
        if Rules.is_insufficient_material(position):
            return DrawReason.INSUFFICIENT
        if Rules.is_fifty_move_rule(position):
            return DrawReason.FIFTY_MOVE
        return None

    @staticmethod
    def classify(position: Position) -> Classification:
        """Check / mate / stalemate / draw status for the side to move."""
        check = Rules.is_in_check(position)
        no_moves = not Rules.has_legal_moves(position)
        checkmate = no_moves and check
        stalemate = no_moves and not check
        return Classification(
            check=check,
            checkmate=checkmate,
            stalemate=stalemate,
            draw_reason=Rules.draw_reason(position, stalemate),
        )

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the current game result."""
        status = Rules.classify(position)
        if status.checkmate:
            return (
                GameResult.BLACK_WINS
                if position.side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        if status.draw:
            return GameResult.DRAW
        return GameResult.IN_PROGRESS
