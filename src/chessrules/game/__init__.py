"""Game layer — the stateful engine facade, move history and events.

Quick start::

    from chessrules.game import ChessEngine

    engine = ChessEngine()
    record = engine.make_move("e2", "e4")
    print(record.notation)  # ♙ e2 – e4
    engine.undo()
"""

from chessrules.game.engine import ChessEngine, GameEvents
from chessrules.game.history import History, MoveRecord

__all__ = [
    "ChessEngine",
    "GameEvents",
    "History",
    "MoveRecord",
]
