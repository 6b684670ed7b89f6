"""Descriptive move notation and piece glyphs.

The notation is deliberately simple: piece glyph, origin, a capture or move
symbol, destination, then optional promotion and status markers::

    ♘ g1 – f3
    ♙ e5 × d6
    ♙ e7 – e8 (= ♕) +
    O-O #

It is not SAN; there is no disambiguation between identical pieces.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import CastlingSide, Color, PieceType
from chessrules.core.piece import glyph
from chessrules.core.types import square_name

if TYPE_CHECKING:
    from chessrules.core.move import Move
    from chessrules.core.rules import Classification

CAPTURE_SYMBOL = "×"
MOVE_SYMBOL = "–"

_CASTLE_NOTATION: dict[CastlingSide, str] = {
    CastlingSide.KINGSIDE: "O-O",
    CastlingSide.QUEENSIDE: "O-O-O",
}


def piece_glyph(piece_type: PieceType, color: Color) -> str:
    """Display symbol for a piece, e.g. ``piece_glyph(KNIGHT, BLACK) == "♞"``."""
    return glyph(color, piece_type)


def status_marker(status: Classification) -> str:
    """``#`` for mate, ``+`` for check, ``½`` for a draw, else empty."""
    if status.checkmate:
        return "#"
    if status.check:
        return "+"
    if status.stalemate or status.draw:
        return "½"
    return ""


def describe_move(move: Move, status: Classification) -> str:
    """Render *move* (already committed, with resulting *status*)."""
    if move.flags.castle is not None:
        text = _CASTLE_NOTATION[move.flags.castle]
    else:
        symbol = CAPTURE_SYMBOL if move.flags.capture else MOVE_SYMBOL
        text = (
            f"{piece_glyph(move.piece_type, move.color)} "
            f"{square_name(move.from_sq)} {symbol} {square_name(move.to_sq)}"
        )
        if move.promotion is not None:
            text += f" (= {piece_glyph(move.promotion, move.color)})"

    marker = status_marker(status)
    if marker:
        text += f" {marker}"
    return text
