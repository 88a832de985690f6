"""FEN piece-placement parsing and serialization.

Only the first FEN field is handled: a replay always starts from the
standard position, so side to move, castling rights and clocks have no
meaning here.  Full FEN strings are accepted and their extra fields
ignored.
"""

from __future__ import annotations

from chessreel.core.board import Board
from chessreel.core.piece import EMPTY, Piece
from chessreel.core.types import Square

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_fen(fen: str) -> Board:
    """Build a :class:`Board` from a FEN placement (``"8/8/.../8"``)."""
    fields = fen.split()
    if not fields:
        raise ValueError(f"Invalid FEN: {fen!r}")
    ranks = fields[0].split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN: expected 8 ranks, got {len(ranks)}")

    board = Board()
    for row, rank_str in enumerate(ranks):
        col = 0
        for ch in rank_str:
            if ch.isdigit():
                col += int(ch)
                continue
            if col >= 8:
                raise ValueError(f"Invalid FEN: rank {8 - row} too long: {rank_str!r}")
            board[Square(row, col)] = Piece.from_char(ch)
            col += 1
        if col != 8:
            raise ValueError(f"Invalid FEN: rank {8 - row} has {col} squares: {rank_str!r}")
    return board


def board_to_fen(board: Board) -> str:
    """Serialize the piece placement of *board*."""
    ranks: list[str] = []
    for row in range(8):
        empty = 0
        parts: list[str] = []
        for col in range(8):
            piece = board[Square(row, col)]
            if piece == EMPTY:
                empty += 1
                continue
            if empty:
                parts.append(str(empty))
                empty = 0
            parts.append(str(piece))
        if empty:
            parts.append(str(empty))
        ranks.append("".join(parts))
    return "/".join(ranks)
