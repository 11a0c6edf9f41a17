"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from piecemoves.core.board import Board
from piecemoves.core.piece import Piece
from piecemoves.core.types import Position

BoardFactory = Callable[[str], Board]


def board_from_diagram(diagram: str) -> Board:
    """Build a board from eight text rows, row 8 first.

    Each row holds eight cells: ``.`` for empty, a FEN letter otherwise
    (uppercase white, lowercase black). Whitespace between cells is ignored.
    """
    rows = [line.replace(" ", "") for line in diagram.strip().splitlines()]
    if len(rows) != 8 or any(len(r) != 8 for r in rows):
        raise ValueError(f"Diagram must be 8x8:\n{diagram}")
    board = Board()
    for idx, cells in enumerate(rows):
        row = 8 - idx
        for col, ch in enumerate(cells, start=1):
            if ch != ".":
                board[Position(row, col)] = Piece.from_char(ch)
    return board


@pytest.fixture
def make_board() -> BoardFactory:
    """Factory fixture turning a text diagram into a :class:`Board`."""
    return board_from_diagram


@pytest.fixture
def empty_board() -> Board:
    return Board()
