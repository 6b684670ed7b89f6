"""Tests for square helpers."""

import pytest

from chessrules.core.types import (
    A1, A8, E4, H1, H8,
    Square,
    all_squares,
    file_of,
    parse_square,
    rank_of,
    square_color,
    square_name,
)


class TestSquareNames:
    def test_corners(self) -> None:
        assert square_name(A8) == "a8"
        assert square_name(H1) == "h1"
        assert A8 == Square(0, 0)
        assert H1 == Square(7, 7)

    def test_rank_eight_is_row_zero(self) -> None:
        assert parse_square("e8") == Square(4, 0)
        assert parse_square("e1") == Square(4, 7)

    def test_parse_round_trip_all_squares(self) -> None:
        for sq in all_squares():
            assert parse_square(square_name(sq)) == sq

    def test_file_and_rank_accessors(self) -> None:
        assert file_of(E4) == 4
        assert rank_of(E4) == 4

    def test_str_is_name(self) -> None:
        assert str(H8) == "h8"

    @pytest.mark.parametrize("label", ["", "e", "e44", "i1", "a0", "a9", "E4", "4e"])
    def test_malformed_labels_rejected(self, label: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(label)


class TestSquareColor:
    def test_a1_and_h8_share_a_shade(self) -> None:
        assert square_color(A1) == square_color(H8)

    def test_neighbours_differ(self) -> None:
        assert square_color(A1) != square_color(parse_square("b1"))
