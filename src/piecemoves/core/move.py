"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from piecemoves.core.enums import PieceType
from piecemoves.core.types import Position

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.QUEEN: "q",
    PieceType.ROOK: "r",
    PieceType.BISHOP: "b",
    PieceType.KNIGHT: "n",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable ``start → end`` transition with optional promotion."""

    start: Position
    end: Position
    promotion: PieceType | None = None

    def __post_init__(self) -> None:
        if self.promotion is not None and self.promotion not in _PROMO_CHARS:
            raise ValueError(f"Invalid promotion piece: {self.promotion.name}")

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.start}{self.end}"
        if self.promotion is not None:
            base += _PROMO_CHARS[self.promotion]
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)
