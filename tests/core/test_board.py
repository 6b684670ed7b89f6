"""Tests for Board."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import A8, E1, E2, E4, E8, all_squares, make_square

_BACK_RANK = "rnbqkbnr"


class TestBoardInitial:
    @pytest.mark.parametrize("color, row", [(Color.BLACK, 0), (Color.WHITE, 7)])
    def test_back_rank_order(self, color: Color, row: int) -> None:
        board = Board.initial()
        for file, char in enumerate(_BACK_RANK):
            expected = Piece(color, PieceType.from_char(char))
            assert board[make_square(file, row)] == expected

    def test_kings_on_e_file(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_pawns_on_second_and_seventh_ranks(self) -> None:
        board = Board.initial()
        white = board.pieces(Color.WHITE, PieceType.PAWN)
        black = board.pieces(Color.BLACK, PieceType.PAWN)
        assert len(white) == 8 and all(sq.rank == 6 for sq in white)
        assert len(black) == 8 and all(sq.rank == 1 for sq in black)

    def test_middle_ranks_empty(self) -> None:
        board = Board.initial()
        middle = [sq for sq in all_squares() if 2 <= sq.rank <= 5]
        assert len(middle) == 32
        assert all(board.is_empty(sq) for sq in middle)

class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board[E4] == piece
        assert board.is_empty(E2)

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_grid_is_defensive(self) -> None:
        board = Board.initial()
        grid = board.grid()
        grid[7][4] = None
        grid[0].clear()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert board[A8] == Piece(Color.BLACK, PieceType.ROOK)

    def test_grid_rank_eight_first(self) -> None:
        grid = Board.initial().grid()
        assert grid[0][4] == Piece(Color.BLACK, PieceType.KING)
        assert grid[7][4] == Piece(Color.WHITE, PieceType.KING)

    def test_king_square_missing_is_none(self) -> None:
        assert Board().king_square(Color.WHITE) is None

    def test_all_pieces_count(self) -> None:
        board = Board.initial()
        assert len(board.all_pieces(Color.WHITE)) == 16
        assert len(board.all_pieces(Color.BLACK)) == 16

    def test_from_pieces(self) -> None:
        board = Board.from_pieces({"e1": "K", "e8": "k", "d4": "N"})
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)
        assert len(list(board.occupied())) == 3

    def test_from_pieces_rejects_bad_input(self) -> None:
        with pytest.raises(ValueError):
            Board.from_pieces({"z9": "K"})
        with pytest.raises(ValueError):
            Board.from_pieces({"e1": "X"})

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert list(board.occupied()) == []

    def test_repr_not_empty(self) -> None:
        board = Board.initial()
        text = repr(board)
        assert "K" in text
        assert text.splitlines()[0].startswith("8 r n b q k")
        assert "a b c d e f g h" in text
