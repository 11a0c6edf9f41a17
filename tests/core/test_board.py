"""Tests for Board."""

import pytest

from piecemoves.core.board import Board
from piecemoves.core.enums import Color, PieceType
from piecemoves.core.piece import Piece
from piecemoves.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E2, E4,
    Position,
)


class TestBoardInitial:
    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for pos, pt in expected:
            assert board[pos] == Piece(Color.WHITE, pt), f"Mismatch at {pos}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for pos, pt in expected:
            assert board[pos] == Piece(Color.BLACK, pt), f"Mismatch at {pos}"

    def test_pawns(self) -> None:
        board = Board.initial()
        for col in range(1, 9):
            assert board.piece_at(Position(2, col)) == Piece(Color.WHITE, PieceType.PAWN)
            assert board.piece_at(Position(7, col)) == Piece(Color.BLACK, PieceType.PAWN)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(3, 7):
            for col in range(1, 9):
                assert board.is_empty(Position(row, col))

    def test_pieces_per_side(self) -> None:
        board = Board.initial()
        white = board.pieces(Color.WHITE)
        assert len(white) == 16
        assert all(pos.row in (1, 2) for pos in white)
        assert white[0] == A1


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board.piece_at(E4) == piece
        assert board.is_empty(E2)

    def test_clear_square(self) -> None:
        board = Board.initial()
        board[E2] = None
        assert board.piece_at(E2) is None

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    @pytest.mark.parametrize("pos", [Position(0, 1), Position(1, 9), Position(9, 9)])
    def test_off_board_access_raises(self, pos: Position) -> None:
        board = Board()
        with pytest.raises(ValueError, match="off the board"):
            board.piece_at(pos)
        with pytest.raises(ValueError):
            board[pos] = Piece(Color.WHITE, PieceType.KING)

    def test_repr(self) -> None:
        text = repr(Board.initial())
        lines = text.splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  a b c d e f g h"
