"""ChessEngine — the stateful game facade over the core rules layer.

Coordinates: Position, MoveGenerator, Rules, History.
Emits events via simple callbacks so a text interface / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import describe_move, piece_glyph
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.rules import Rules
from chessrules.core.types import Square, parse_square, square_name
from chessrules.game.history import History, MoveRecord

_LOGGER = logging.getLogger(__name__)

_PROMOTION_CHOICES = frozenset(
    {PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT}
)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord], None]
ResetCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_undo: list[MoveCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


def _try_parse_square(name: str) -> Square | None:
    try:
        return parse_square(name)
    except ValueError:
        return None


# ── Engine ───────────────────────────────────────────────────────────────────


class ChessEngine:
    """One independent chess game: legal moves, commits, history and undo.

    Every commit replaces the live position with a freshly computed copy, and
    every record keeps its own copy of the position it replaced.

    Thread-safety: instances hold no shared state, but a single instance is
    not safe for concurrent callers. Hosts that share one across threads must
    serialise every call behind a single lock.
    """

    __slots__ = ("_position", "_history", "events")

    def __init__(self, position: Position | None = None) -> None:
        self._position = position.copy() if position is not None else Position.initial()
        self._history = History()
        self.events = GameEvents()

    # ── Lifecycle ────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Restore the standard starting position and clear the history."""
        self._position = Position.initial()
        self._history.clear()
        _LOGGER.debug("Game reset to the starting position")
        for cb in self.events.on_reset:
            cb()

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        """Copy of the live position."""
        return self._position.copy()

    def piece_at(self, square: str) -> Piece | None:
        """Occupant of *square* (e.g. ``"e4"``); None for empty or malformed."""
        sq = _try_parse_square(square)
        if sq is None:
            return None
        return self._position.board[sq]

    def current_turn(self) -> Color:
        return self._position.side_to_move

    def pieces(self, color: Color | None = None) -> list[tuple[str, Piece]]:
        """Occupied squares with their pieces, optionally for one colour."""
        return [
            (square_name(sq), piece)
            for sq, piece in self._position.board.occupied()
            if color is None or piece.color == color
        ]

    def legal_moves(self, from_square: str | None = None) -> list[Move]:
        """Legal moves from *from_square*, or for the whole side to move."""
        gen = MoveGenerator(self._position.copy())
        if from_square is None:
            return gen.generate_legal_moves()
        sq = _try_parse_square(from_square)
        if sq is None:
            return []
        return gen.generate_legal_moves(sq)

    def is_in_check(self) -> bool:
        return Rules.is_in_check(self._position)

    def result(self) -> GameResult:
        return Rules.game_result(self._position)

    def history(self) -> list[MoveRecord]:
        """Committed moves, oldest first."""
        return list(self._history.records())

    def export_board(self) -> list[list[Piece | None]]:
        """Deep copy of the 8x8 grid, row 0 = rank 8."""
        return self._position.board.grid()

    @staticmethod
    def piece_glyph(piece_type: PieceType, color: Color) -> str:
        return piece_glyph(piece_type, color)

    # ── Mutation ─────────────────────────────────────────────────────────

    def make_move(
        self,
        from_square: str,
        to_square: str,
        promotion: str | None = None,
    ) -> MoveRecord | None:
        """Commit the legal move *from_square* → *to_square*.

        *promotion* is one of ``q r b n`` (any case) and defaults to a queen
        when a pawn promotes. Returns None when no legal move matches.
        """
        selected = self._select_move(from_square, to_square, promotion)
        if selected is None:
            _LOGGER.debug(
                "Rejected move request %r -> %r (promotion=%r)",
                from_square,
                to_square,
                promotion,
            )
            return None

        previous = self._position.copy()
        successor = self._position.copy()
        captured = successor.make_move(selected)
        status = Rules.classify(successor)

        # Black's move has already bumped the counter on the successor.
        fullmove_number = (
            successor.fullmove_number - 1
            if successor.side_to_move == Color.WHITE
            else successor.fullmove_number
        )
        record = MoveRecord(
            move=selected,
            notation=describe_move(selected, status),
            captured_piece=captured,
            check=status.check,
            checkmate=status.checkmate,
            stalemate=status.stalemate,
            draw=status.draw,
            draw_reason=status.draw_reason,
            fullmove_number=fullmove_number,
            _snapshot=previous,
        )

        self._position = successor
        self._history.append(record)
        _LOGGER.debug("Committed %s (%s)", selected, record.notation)
        for cb in self.events.on_move:
            cb(record)
        return record

    def undo(self) -> MoveRecord | None:
        """Step back one ply. Returns the undone record, or None if empty."""
        record = self._history.pop()
        if record is None:
            return None
        self._position = record.previous_position
        _LOGGER.debug("Undid %s", record.move)
        for cb in self.events.on_undo:
            cb(record)
        return record

    # ── Internal helpers ─────────────────────────────────────────────────

    def _select_move(
        self,
        from_square: str,
        to_square: str,
        promotion: str | None,
    ) -> Move | None:
        from_sq = _try_parse_square(from_square)
        to_sq = _try_parse_square(to_square)
        if from_sq is None or to_sq is None:
            return None

        desired: PieceType | None = None
        if promotion is not None:
            try:
                desired = PieceType.from_char(promotion)
            except ValueError:
                return None
            if desired not in _PROMOTION_CHOICES:
                return None
        promote_to = desired if desired is not None else PieceType.QUEEN

        for move in MoveGenerator(self._position.copy()).generate_legal_moves(from_sq):
            if move.to_sq != to_sq:
                continue
            if move.promotion is not None:
                if move.promotion == promote_to:
                    return move
            elif desired is None:
                return move
        return None
