"""Tests for History and MoveRecord."""

from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.position import Position
from chessrules.core.types import E2, E3
from chessrules.game.history import History, MoveRecord


def _record(notation: str) -> MoveRecord:
    return MoveRecord(
        move=Move(E2, E3, PieceType.PAWN, Color.WHITE),
        notation=notation,
        captured_piece=None,
        check=False,
        checkmate=False,
        stalemate=False,
        draw=False,
        draw_reason=None,
        fullmove_number=1,
        _snapshot=Position.initial(),
    )


class TestHistory:
    def test_empty_pop_returns_none(self) -> None:
        assert History().pop() is None

    def test_order_oldest_first(self) -> None:
        history = History()
        first, second = _record("one"), _record("two")
        history.append(first)
        history.append(second)
        assert history.records() == (first, second)
        assert [str(r) for r in history] == ["one", "two"]
        assert history.last is second
        assert len(history) == 2

    def test_pop_newest(self) -> None:
        history = History()
        first, second = _record("one"), _record("two")
        history.append(first)
        history.append(second)
        assert history.pop() is second
        assert history.records() == (first,)

    def test_clear(self) -> None:
        history = History()
        history.append(_record("one"))
        history.clear()
        assert len(history) == 0
        assert history.last is None


class TestMoveRecord:
    def test_pass_through_properties(self) -> None:
        record = _record("♙ e2 – e3")
        assert record.from_sq == E2
        assert record.to_sq == E3
        assert record.color == Color.WHITE
        assert record.piece_type == PieceType.PAWN
        assert record.promotion is None
        assert not record.flags.capture

    def test_previous_position_is_a_fresh_copy(self) -> None:
        record = _record("♙ e2 – e3")
        first = record.previous_position
        first.board[E2] = None
        assert record.previous_position == Position.initial()
        assert record.previous_position is not record.previous_position

    def test_hashable(self) -> None:
        first, second = _record("one"), _record("one")
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1
