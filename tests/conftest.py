"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.game.engine import ChessEngine


@pytest.fixture
def engine() -> ChessEngine:
    """A fresh game at the standard starting position."""
    return ChessEngine()


@pytest.fixture
def play(engine: ChessEngine):
    """Play a sequence of ``"e2e4"``-style moves, asserting each is legal."""

    def _play(*moves: str) -> ChessEngine:
        for text in moves:
            record = engine.make_move(text[0:2], text[2:4], text[4:] or None)
            assert record is not None, f"Illegal move in sequence: {text}"
        return engine

    return _play
