"""Position value object and board coordinate helpers.

Coordinates are 1-indexed ``(row, column)`` pairs:
    row 1 is White's back rank, row 8 is Black's
    column 1 is the a-file, column 8 is the h-file

A :class:`Position` may hold off-board coordinates; candidate squares are
built first and validated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8
MIN_INDEX = 1
MAX_INDEX = BOARD_SIZE

_FILES = "abcdefgh"


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable ``(row, column)`` coordinate."""

    row: int
    column: int

    @property
    def is_on_board(self) -> bool:
        return (
            MIN_INDEX <= self.row <= MAX_INDEX
            and MIN_INDEX <= self.column <= MAX_INDEX
        )

    def offset(self, d_row: int, d_col: int) -> Position:
        """Position shifted by ``(d_row, d_col)``, possibly off-board."""
        return Position(self.row + d_row, self.column + d_col)

    @property
    def name(self) -> str:
        """Algebraic name, e.g. ``Position(4, 5).name == 'e4'``."""
        if not self.is_on_board:
            raise ValueError(f"Off-board position has no name: {self!r}")
        return f"{_FILES[self.column - 1]}{self.row}"

    @classmethod
    def parse(cls, name: str) -> Position:
        """Parse an algebraic square name, e.g. 'e4' → Position(4, 5)."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(int(name[1]), _FILES.index(name[0]) + 1)

    def __str__(self) -> str:
        if self.is_on_board:
            return self.name
        return f"({self.row}, {self.column})"


def all_positions() -> list[Position]:
    """Every on-board position, row by row from a1 to h8."""
    return [
        Position(row, col)
        for row in range(MIN_INDEX, MAX_INDEX + 1)
        for col in range(MIN_INDEX, MAX_INDEX + 1)
    ]


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Position(1, c) for c in range(1, 9))
A2, B2, C2, D2, E2, F2, G2, H2 = (Position(2, c) for c in range(1, 9))
A3, B3, C3, D3, E3, F3, G3, H3 = (Position(3, c) for c in range(1, 9))
A4, B4, C4, D4, E4, F4, G4, H4 = (Position(4, c) for c in range(1, 9))
A5, B5, C5, D5, E5, F5, G5, H5 = (Position(5, c) for c in range(1, 9))
A6, B6, C6, D6, E6, F6, G6, H6 = (Position(6, c) for c in range(1, 9))
A7, B7, C7, D7, E7, F7, G7, H7 = (Position(7, c) for c in range(1, 9))
A8, B8, C8, D8, E8, F8, G8, H8 = (Position(8, c) for c in range(1, 9))
