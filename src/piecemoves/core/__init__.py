"""Core domain layer: per-piece move enumeration with zero external dependencies.

Quick start::

    from piecemoves.core import Board, Position, piece_moves

    board = Board.initial()
    for move in piece_moves(board, Position.parse("g1")):
        print(move)
"""

from piecemoves.core.board import Board, BoardView, TeamBoardView
from piecemoves.core.enums import Color, PieceType
from piecemoves.core.move import Move
from piecemoves.core.move_generator import (
    MoveGenerator,
    is_valid_target,
    piece_moves,
)
from piecemoves.core.piece import Piece
from piecemoves.core.types import Position, all_positions

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Value objects
    "Move",
    "Piece",
    "Position",
    "all_positions",
    # Board
    "Board",
    "BoardView",
    "TeamBoardView",
    # Move generation
    "MoveGenerator",
    "is_valid_target",
    "piece_moves",
]
