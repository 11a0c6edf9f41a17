"""Pseudo-legal move enumeration for individual chess pieces."""

from piecemoves.core import (
    Board,
    BoardView,
    Color,
    Move,
    MoveGenerator,
    Piece,
    PieceType,
    Position,
    TeamBoardView,
    all_positions,
    is_valid_target,
    piece_moves,
)

__all__ = [
    "Board",
    "BoardView",
    "Color",
    "Move",
    "MoveGenerator",
    "Piece",
    "PieceType",
    "Position",
    "TeamBoardView",
    "all_positions",
    "is_valid_target",
    "piece_moves",
]
