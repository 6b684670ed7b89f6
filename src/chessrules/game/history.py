"""Move history — committed moves with the snapshots needed to undo them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from chessrules.core.enums import Color, DrawReason, PieceType
from chessrules.core.move import Move, MoveFlags
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import Square


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history.

    The pre-move position is held privately and ``previous_position`` hands
    out a fresh copy on every access. ``fullmove_number`` is the number of
    the full move this ply belongs to (white's and black's halves share it).
    """

    move: Move
    notation: str
    captured_piece: Piece | None
    check: bool
    checkmate: bool
    stalemate: bool
    draw: bool
    draw_reason: DrawReason | None
    fullmove_number: int
    _snapshot: Position = field(repr=False, compare=False)

    @property
    def previous_position(self) -> Position:
        return self._snapshot.copy()

    @property
    def from_sq(self) -> Square:
        return self.move.from_sq

    @property
    def to_sq(self) -> Square:
        return self.move.to_sq

    @property
    def color(self) -> Color:
        return self.move.color

    @property
    def piece_type(self) -> PieceType:
        return self.move.piece_type

    @property
    def promotion(self) -> PieceType | None:
        return self.move.promotion

    @property
    def flags(self) -> MoveFlags:
        return self.move.flags

    def __str__(self) -> str:
        return self.notation


class History:
    """Ordered log of committed moves, oldest first. No redo stack."""

    __slots__ = ("_records",)

    def __init__(self) -> None:
        self._records: list[MoveRecord] = []

    def append(self, record: MoveRecord) -> None:
        self._records.append(record)

    def pop(self) -> MoveRecord | None:
        """Remove and return the newest record, or None if empty."""
        if not self._records:
            return None
        return self._records.pop()

    def clear(self) -> None:
        self._records.clear()

    @property
    def last(self) -> MoveRecord | None:
        return self._records[-1] if self._records else None

    def records(self) -> tuple[MoveRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[MoveRecord]:
        return iter(tuple(self._records))
