"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chessreel.core.enums import PieceType
from chessreel.core.types import Square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """A resolved move: origin, destination and optional promotion.

    Whether the move captures, castles or takes en passant is not stored
    here; the applier derives it from the board.
    """

    origin: Square
    destination: Square
    promotion: PieceType | None = None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.origin)}{square_name(self.destination)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base
