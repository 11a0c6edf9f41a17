"""Pseudo-legal move generation for a single piece.

Generated moves respect piece geometry, board edges and occupancy only.
They may leave the mover's own king in check; filtering those out is the
caller's job.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from piecemoves.core.enums import Color, PieceType
from piecemoves.core.move import Move
from piecemoves.core.types import Position

if TYPE_CHECKING:
    from piecemoves.core.board import BoardView, TeamBoardView
    from piecemoves.core.piece import Piece

_LOGGER = logging.getLogger(__name__)

Offset = tuple[int, int]  # (d_row, d_col)

KNIGHT_OFFSETS: tuple[Offset, ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[Offset, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[Offset, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[Offset, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
HOME_RANK: dict[Color, int] = {Color.WHITE: 2, Color.BLACK: 7}
TERMINAL_ROWS: tuple[int, ...] = (1, 8)
_CAPTURE_COLUMNS: tuple[int, ...] = (-1, 1)


def is_valid_target(board: BoardView, position: Position, moving_color: Color) -> bool:
    """Can a piece of *moving_color* land on *position*?

    False when the square is off the board or holds a friendly piece.
    An opponent's piece is a valid landing square (a capture).
    """
    if not position.is_on_board:
        return False
    occupant = board.piece_at(position)
    return occupant is None or occupant.color != moving_color


def piece_moves(board: BoardView, position: Position) -> set[Move]:
    """All pseudo-legal moves for the piece standing on *position*."""
    return MoveGenerator(board).piece_moves(position)


class MoveGenerator:
    """Enumerates moves for pieces on a read-only board snapshot.

    Each public method is a pure query: the board is never modified and
    repeated calls on an unchanged snapshot return equal sets.
    """

    __slots__ = ("_board",)

    def __init__(self, board: BoardView) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def piece_moves(self, position: Position) -> set[Move]:
        """Dispatch to the generator matching the piece on *position*."""
        piece = self._piece_at_origin(position)

        match piece.piece_type:
            case PieceType.KING:
                moves = self.king_moves(position)
            case PieceType.QUEEN:
                moves = self.queen_moves(position)
            case PieceType.BISHOP:
                moves = self.bishop_moves(position)
            case PieceType.KNIGHT:
                moves = self.knight_moves(position)
            case PieceType.ROOK:
                moves = self.rook_moves(position)
            case PieceType.PAWN:
                moves = self.pawn_moves(position)
            case _:
                raise ValueError(f"Unsupported piece type: {piece.piece_type!r}")

        _LOGGER.debug("%s on %s: %d moves", piece.symbol, position, len(moves))
        return moves

    def team_moves(self, color: Color) -> set[Move]:
        """Union of :meth:`piece_moves` over every piece of *color*.

        Requires a board that can list its occupied squares (see
        :class:`TeamBoardView`).
        """
        board: TeamBoardView = self._board  # type: ignore[assignment]
        moves: set[Move] = set()
        for position in board.pieces(color):
            moves |= self.piece_moves(position)
        return moves

    # -- Geometry generators ------------------------------------------------

    def bishop_moves(self, position: Position) -> set[Move]:
        return self._slide(position, BISHOP_DIRS)

    def rook_moves(self, position: Position) -> set[Move]:
        return self._slide(position, ROOK_DIRS)

    def queen_moves(self, position: Position) -> set[Move]:
        return self.bishop_moves(position) | self.rook_moves(position)

    def king_moves(self, position: Position) -> set[Move]:
        return self._step(position, KING_OFFSETS)

    def knight_moves(self, position: Position) -> set[Move]:
        return self._step(position, KNIGHT_OFFSETS)

    def pawn_moves(self, position: Position) -> set[Move]:
        """Advances, double advance from the home rank, diagonal captures.

        Any arrival on row 1 or 8 yields one move per promotion type and
        never a plain move.
        """
        color = self._piece_at_origin(position).color
        direction = PAWN_DIRECTION[color]

        forward = position.offset(direction, 0)
        is_home_rank = position.row == HOME_RANK[color]
        reaches_terminal_rank = forward.row in TERMINAL_ROWS

        moves: set[Move] = set()
        if self._is_empty_square(forward):
            self._add_pawn_arrival(moves, position, forward, reaches_terminal_rank)

            double = forward.offset(direction, 0)
            if is_home_rank and self._is_empty_square(double):
                moves.add(Move(position, double))

        for d_col in _CAPTURE_COLUMNS:
            target = position.offset(direction, d_col)
            if self._is_opponent_occupied(target, color):
                self._add_pawn_arrival(moves, position, target, reaches_terminal_rank)

        return moves

    # -- Helpers (private) --------------------------------------------------

    def _piece_at_origin(self, position: Position) -> Piece:
        if not position.is_on_board:
            raise ValueError(f"Origin off the board: {position!r}")
        piece = self._board.piece_at(position)
        if piece is None:
            raise ValueError(f"No piece at {position}")
        return piece

    def _slide(self, origin: Position, directions: tuple[Offset, ...]) -> set[Move]:
        color = self._piece_at_origin(origin).color
        board = self._board
        moves: set[Move] = set()
        for d_row, d_col in directions:
            target = origin.offset(d_row, d_col)
            while is_valid_target(board, target, color):
                moves.add(Move(origin, target))
                if board.piece_at(target) is not None:
                    break
                target = target.offset(d_row, d_col)
        return moves

    def _step(self, origin: Position, offsets: tuple[Offset, ...]) -> set[Move]:
        color = self._piece_at_origin(origin).color
        board = self._board
        moves: set[Move] = set()
        for d_row, d_col in offsets:
            target = origin.offset(d_row, d_col)
            if is_valid_target(board, target, color):
                moves.add(Move(origin, target))
        return moves

    def _is_empty_square(self, position: Position) -> bool:
        return position.is_on_board and self._board.piece_at(position) is None

    def _is_opponent_occupied(self, position: Position, color: Color) -> bool:
        if not position.is_on_board:
            return False
        occupant = self._board.piece_at(position)
        return occupant is not None and occupant.color != color

    @staticmethod
    def _add_pawn_arrival(
        moves: set[Move],
        origin: Position,
        target: Position,
        promotes: bool,
    ) -> None:
        if promotes:
            for pt in PROMOTION_TYPES:
                moves.add(Move(origin, target, pt))
        else:
            moves.add(Move(origin, target))
