"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessrules.core.enums import CastlingSide, Color, PieceType
from chessrules.core.move import Move, MoveFlags
from chessrules.core.piece import Piece
from chessrules.core.types import Square, all_squares, is_on_board, make_square

if TYPE_CHECKING:
    from chessrules.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 2),
    (2, 1),
    (-1, 2),
    (-2, 1),
    (1, -2),
    (2, -1),
    (-1, -2),
    (-2, -1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS
KING_OFFSETS: tuple[tuple[int, int], ...] = QUEEN_DIRS

_PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# Row step of a pawn moving forward; white advances towards row 0.
_PAWN_STEP: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
_PAWN_PROMOTION_ROW: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}
_HOME_ROW: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}

_DIAGONAL_SLIDERS = frozenset({PieceType.BISHOP, PieceType.QUEEN})
_ORTHOGONAL_SLIDERS = frozenset({PieceType.ROOK, PieceType.QUEEN})

# Castling geometry, by file: squares that must be empty, squares the king
# crosses or lands on, and the king's destination.
_CASTLE_EMPTY_FILES: dict[CastlingSide, tuple[int, ...]] = {
    CastlingSide.KINGSIDE: (5, 6),
    CastlingSide.QUEENSIDE: (1, 2, 3),
}
_CASTLE_SAFE_FILES: dict[CastlingSide, tuple[int, ...]] = {
    CastlingSide.KINGSIDE: (5, 6),
    CastlingSide.QUEENSIDE: (3, 2),
}
_CASTLE_KING_TO_FILE: dict[CastlingSide, int] = {
    CastlingSide.KINGSIDE: 6,
    CastlingSide.QUEENSIDE: 2,
}
_CASTLE_ROOK_FILE: dict[CastlingSide, int] = {
    CastlingSide.KINGSIDE: 7,
    CastlingSide.QUEENSIDE: 0,
}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in all_squares():
        moves: list[Square] = []
        for df, dr in offsets:
            af = sq.file + df
            ar = sq.rank + dr
            if is_on_board(af, ar):
                moves.append(make_square(af, ar))
        targets[sq] = tuple(moves)
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in all_squares():
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            af = sq.file + df
            ar = sq.rank + dr
            ray: list[Square] = []
            while is_on_board(af, ar):
                ray.append(make_square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


class MoveGenerator:
    """Generates moves and answers attack queries for a :class:`Position`.

    The generator never mutates the position it was given: legality is decided
    by applying each candidate to a private copy.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self, from_sq: Square | None = None) -> list[Move]:
        """Strictly legal moves for the side to move (optionally one square)."""
        return [m for m in self.generate_pseudo_legal_moves(from_sq) if self.is_legal(m)]

    def generate_pseudo_legal_moves(self, from_sq: Square | None = None) -> list[Move]:
        """Pseudo-legal moves (may leave own king in check).

        With *from_sq*, only that square's piece is considered, and only if it
        belongs to the side to move.
        """
        moves: list[Move] = []
        color = self._pos.side_to_move

        if from_sq is not None:
            piece = self._board[from_sq]
            if piece is not None and piece.color == color:
                self._gen_piece(from_sq, piece, moves)
            return moves

        for sq, piece in self._board.occupied():
            if piece.color == color:
                self._gen_piece(sq, piece, moves)
        return moves

    def is_legal(self, move: Move) -> bool:
        """Would *move* leave the mover's own king safe?"""
        simulated = self._pos.copy()
        simulated.make_move(move)
        return not MoveGenerator(simulated).is_in_check(move.color)

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent? False with no king."""
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?

        Does not require a king (or any piece) to stand on *sq*.
        """
        board = self._board

        # Attacking pawns stand one row "behind" sq from their own point of view.
        pawn_row = sq.rank - _PAWN_STEP[by_color]
        attacker_pawn = Piece(by_color, PieceType.PAWN)
        for df in (-1, 1):
            af = sq.file + df
            if is_on_board(af, pawn_row) and board[make_square(af, pawn_row)] == attacker_pawn:
                return True

        attacker_knight = Piece(by_color, PieceType.KNIGHT)
        for from_sq in _KNIGHT_TARGETS[sq]:
            if board[from_sq] == attacker_knight:
                return True

        for (df, dr), ray in zip(QUEEN_DIRS, _QUEEN_RAYS[sq]):
            diagonal = df != 0 and dr != 0
            for distance, to_sq in enumerate(ray, start=1):
                piece = board[to_sq]
                if piece is None:
                    continue
                if piece.color == by_color:
                    ptype = piece.piece_type
                    if diagonal and ptype in _DIAGONAL_SLIDERS:
                        return True
                    if not diagonal and ptype in _ORTHOGONAL_SLIDERS:
                        return True
                    if distance == 1 and ptype == PieceType.KING:
                        return True
                break

        return False

    # -- Piece-specific generators (private) -------------------------------

    def _gen_piece(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        generator = _DISPATCH.get(piece.piece_type)
        if generator is None:
            raise AssertionError(f"No movement pattern for {piece.piece_type!r}")
        generator(self, sq, piece, moves)

    def _gen_pawn(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        color = piece.color
        step = _PAWN_STEP[color]

        one_row = sq.rank + step
        if not is_on_board(sq.file, one_row):
            return

        one_step = make_square(sq.file, one_row)
        if board.is_empty(one_step):
            self._add_pawn_move(sq, one_step, color, None, moves)
            if sq.rank == _PAWN_START_ROW[color]:
                two_step = make_square(sq.file, sq.rank + 2 * step)
                if board.is_empty(two_step):
                    moves.append(
                        Move(
                            sq,
                            two_step,
                            PieceType.PAWN,
                            color,
                            flags=MoveFlags(double_push=True),
                        )
                    )

        for df in (-1, 1):
            af = sq.file + df
            if not is_on_board(af, one_row):
                continue
            cap_sq = make_square(af, one_row)
            target = board[cap_sq]
            if target is not None:
                if target.color != color:
                    self._add_pawn_move(sq, cap_sq, color, target, moves)
            elif cap_sq == self._pos.en_passant:
                victim_sq = make_square(af, sq.rank)
                victim = board[victim_sq]
                if victim is not None and victim.color != color:
                    moves.append(
                        Move(
                            sq,
                            cap_sq,
                            PieceType.PAWN,
                            color,
                            captured=victim,
                            flags=MoveFlags(capture=True, en_passant=True),
                            capture_square=victim_sq,
                        )
                    )

    @staticmethod
    def _add_pawn_move(
        from_sq: Square,
        to_sq: Square,
        color: Color,
        captured: Piece | None,
        moves: list[Move],
    ) -> None:
        capture = captured is not None
        if to_sq.rank != _PAWN_PROMOTION_ROW[color]:
            moves.append(
                Move(
                    from_sq,
                    to_sq,
                    PieceType.PAWN,
                    color,
                    captured=captured,
                    flags=MoveFlags(capture=capture),
                )
            )
            return
        flags = MoveFlags(capture=capture, promotion=True)
        for pt in _PROMOTION_TYPES:
            moves.append(
                Move(
                    from_sq,
                    to_sq,
                    PieceType.PAWN,
                    color,
                    captured=captured,
                    promotion=pt,
                    flags=flags,
                )
            )

    def _gen_knight(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        self._gen_steps(sq, piece, _KNIGHT_TARGETS[sq], moves)

    def _gen_bishop(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        self._gen_sliding(sq, piece, _BISHOP_RAYS[sq], moves)

    def _gen_rook(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        self._gen_sliding(sq, piece, _ROOK_RAYS[sq], moves)

    def _gen_queen(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        self._gen_sliding(sq, piece, _QUEEN_RAYS[sq], moves)

    def _gen_king(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        self._gen_steps(sq, piece, _KING_TARGETS[sq], moves)
        self._gen_castling(sq, piece.color, moves)

    def _gen_steps(
        self,
        sq: Square,
        piece: Piece,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None:
                moves.append(Move(sq, to_sq, piece.piece_type, piece.color))
            elif target.color != piece.color:
                moves.append(
                    Move(
                        sq,
                        to_sq,
                        piece.piece_type,
                        piece.color,
                        captured=target,
                        flags=MoveFlags(capture=True),
                    )
                )

    def _gen_sliding(
        self,
        sq: Square,
        piece: Piece,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq, piece.piece_type, piece.color))
                    continue
                if target.color != piece.color:
                    moves.append(
                        Move(
                            sq,
                            to_sq,
                            piece.piece_type,
                            piece.color,
                            captured=target,
                            flags=MoveFlags(capture=True),
                        )
                    )
                break

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Move]) -> None:
        row = _HOME_ROW[color]
        if king_sq != make_square(4, row):
            return

        board = self._board
        opponent = color.opposite
        own_rook = Piece(color, PieceType.ROOK)

        for side in (CastlingSide.KINGSIDE, CastlingSide.QUEENSIDE):
            if not self._pos.can_castle(color, side):
                continue
            if board[make_square(_CASTLE_ROOK_FILE[side], row)] != own_rook:
                continue
            if not all(
                board.is_empty(make_square(f, row)) for f in _CASTLE_EMPTY_FILES[side]
            ):
                continue
            if self.is_square_attacked(king_sq, opponent):
                return
            if any(
                self.is_square_attacked(make_square(f, row), opponent)
                for f in _CASTLE_SAFE_FILES[side]
            ):
                continue
            moves.append(
                Move(
                    king_sq,
                    make_square(_CASTLE_KING_TO_FILE[side], row),
                    PieceType.KING,
                    color,
                    flags=MoveFlags(castle=side),
                )
            )


_Generator = Callable[[MoveGenerator, Square, Piece, list[Move]], None]

# Closed dispatch over every piece type.
_DISPATCH: dict[PieceType, _Generator] = {
    PieceType.PAWN: MoveGenerator._gen_pawn,
    PieceType.KNIGHT: MoveGenerator._gen_knight,
    PieceType.BISHOP: MoveGenerator._gen_bishop,
    PieceType.ROOK: MoveGenerator._gen_rook,
    PieceType.QUEEN: MoveGenerator._gen_queen,
    PieceType.KING: MoveGenerator._gen_king,
}
