"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from typing import Protocol

from piecemoves.core.enums import Color, PieceType
from piecemoves.core.piece import Piece
from piecemoves.core.types import BOARD_SIZE, MAX_INDEX, MIN_INDEX, Position

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class BoardView(Protocol):
    """Read-only occupancy lookup consumed by the move generator."""

    def piece_at(self, position: Position) -> Piece | None: ...


class TeamBoardView(BoardView, Protocol):
    """Board view that can also list the squares held by one side."""

    def pieces(self, color: Color) -> list[Position]: ...


class Board:
    """64-square board snapshot.

    Callers place pieces with ``board[pos] = piece`` while building a
    snapshot; move generation only ever reads it through :meth:`piece_at`.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)

    @staticmethod
    def _index(position: Position) -> int:
        if not position.is_on_board:
            raise ValueError(f"Position off the board: {position!r}")
        return (position.row - 1) * BOARD_SIZE + (position.column - 1)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, position: Position) -> Piece | None:
        return self._squares[self._index(position)]

    def __setitem__(self, position: Position, piece: Piece | None) -> None:
        self._squares[self._index(position)] = piece

    def piece_at(self, position: Position) -> Piece | None:
        return self[position]

    def is_empty(self, position: Position) -> bool:
        return self[position] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Position]:
        """Squares occupied by *color*, from a1 to h8."""
        found: list[Position] = []
        for idx, piece in enumerate(self._squares):
            if piece is not None and piece.color == color:
                found.append(Position(idx // BOARD_SIZE + 1, idx % BOARD_SIZE + 1))
        return found

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col in range(MIN_INDEX, MAX_INDEX + 1):
            b[Position(2, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Position(7, col)] = Piece(Color.BLACK, PieceType.PAWN)
        for col, pt in enumerate(_BACK_RANK, start=MIN_INDEX):
            b[Position(1, col)] = Piece(Color.WHITE, pt)
            b[Position(8, col)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(MAX_INDEX, MIN_INDEX - 1, -1):
            cells = []
            for col in range(MIN_INDEX, MAX_INDEX + 1):
                p = self[Position(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
