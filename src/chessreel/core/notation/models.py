"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, auto
from typing import Literal

from chessreel.core.enums import Color, GameResult, PieceType
from chessreel.core.notation.tags import game_result_from_pgn, last_name
from chessreel.core.types import Square, square_name

CastleSide = Literal["kingside", "queenside"]


class FailureReason(IntEnum):
    """Why a SAN token could not be resolved to a move."""

    BAD_SYNTAX = auto()
    OUT_OF_RANGE = auto()
    NO_CANDIDATE = auto()
    NO_LEGAL_CANDIDATE = auto()  # every candidate leaves its own king in check

    @property
    def description(self) -> str:
        return _REASON_TEXT[self]


_REASON_TEXT: dict[FailureReason, str] = {
    FailureReason.BAD_SYNTAX: "malformed notation",
    FailureReason.OUT_OF_RANGE: "destination off the board",
    FailureReason.NO_CANDIDATE: "no piece can make this move",
    FailureReason.NO_LEGAL_CANDIDATE: "every candidate leaves the king in check",
}


@dataclass(frozen=True, slots=True)
class DecodeFailure:
    """A token that did not resolve to a move."""

    token: str
    reason: FailureReason

    def __str__(self) -> str:
        return f"cannot decode {self.token!r}: {self.reason.description}"


@dataclass(frozen=True, slots=True)
class SanToken:
    """Syntactic parts of one SAN token, before any board lookup."""

    piece_type: PieceType
    destination: Square
    capture: bool = False
    hint_file: int | None = None
    hint_row: int | None = None
    promotion: PieceType | None = None
    castle: CastleSide | None = None

    def __str__(self) -> str:
        if self.castle == "kingside":
            return "O-O"
        if self.castle == "queenside":
            return "O-O-O"
        return f"{self.piece_type.name.lower()} to {square_name(self.destination)}"


@dataclass(slots=True)
class GameRecord:
    """One recorded game: move tokens plus the metadata the viewer shows."""

    moves: list[str]
    white: str = "White"
    black: str = "Black"
    year: str = ""
    result_token: str = "*"
    headers: dict[str, str] = field(default_factory=dict)
    source: str | None = None

    @property
    def result(self) -> GameResult:
        return game_result_from_pgn(self.result_token)

    @property
    def loser(self) -> Color | None:
        result = self.result
        if result == GameResult.WHITE_WINS:
            return Color.BLACK
        if result == GameResult.BLACK_WINS:
            return Color.WHITE
        return None

    @property
    def is_draw(self) -> bool:
        return self.result == GameResult.DRAW

    @property
    def white_label(self) -> str:
        """Short display name: surname, falling back to the full tag."""
        return last_name(self.white) or self.white or "White"

    @property
    def black_label(self) -> str:
        return last_name(self.black) or self.black or "Black"

    def __len__(self) -> int:
        return len(self.moves)
