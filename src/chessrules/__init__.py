"""chessrules — a chess rules engine: legal moves, commits, draws and undo."""

from chessrules.core import Color, Move, Piece, PieceType, Position
from chessrules.game import ChessEngine, MoveRecord

__all__ = [
    "ChessEngine",
    "Color",
    "Move",
    "MoveRecord",
    "Piece",
    "PieceType",
    "Position",
]

__version__ = "0.1.0"
