"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import MoveGenerator, Position

    pos = Position.initial()
    gen = MoveGenerator(pos)
    for move in gen.generate_legal_moves():
        print(move)
"""

from chessrules.core.board import Board
from chessrules.core.enums import CastlingSide, Color, DrawReason, GameResult, PieceType
from chessrules.core.move import Move, MoveFlags
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import describe_move, piece_glyph
from chessrules.core.piece import Piece
from chessrules.core.position import CastlingRights, Position
from chessrules.core.rules import Classification, Rules
from chessrules.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "CastlingSide",
    "Color",
    "DrawReason",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "CastlingRights",
    "Classification",
    "Move",
    "MoveFlags",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    # Notation
    "describe_move",
    "piece_glyph",
]
