"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from chessreel.core.enums import Color, PieceType

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

_EMPTY_CHAR = "."


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object for the content of one square.

    ``Piece()`` (exported as :data:`EMPTY`) is the empty square. Otherwise both
    *color* and *piece_type* are set.
    """

    color: Color | None = None
    piece_type: PieceType | None = None

    def __post_init__(self) -> None:
        if (self.color is None) != (self.piece_type is None):
            raise ValueError(
                f"Piece needs both color and type or neither: "
                f"{self.color!r}, {self.piece_type!r}"
            )

    @property
    def is_empty(self) -> bool:
        return self.piece_type is None

    def is_a(self, color: Color, piece_type: PieceType) -> bool:
        return self.color == color and self.piece_type == piece_type

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black, '.' = empty)."""
        if self.color is None or self.piece_type is None:
            return _EMPTY_CHAR
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight, '.' → empty."""
        if char == _EMPTY_CHAR:
            return EMPTY
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞ (empty string for an empty square)."""
        if self.color is None or self.piece_type is None:
            return ""
        return _UNICODE[(self.color, self.piece_type)]


EMPTY: Final[Piece] = Piece()
