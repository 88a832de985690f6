"""Commit a resolved :class:`Move` to a :class:`Board`."""

from __future__ import annotations

from chessreel.core.board import Board
from chessreel.core.enums import Color, PieceType
from chessreel.core.move import Move
from chessreel.core.move_validator import PAWN_DIRECTION
from chessreel.core.piece import EMPTY, Piece
from chessreel.core.types import Square, is_on_board


def apply_move(board: Board, move: Move, side: Color) -> None:
    """Play *move* for *side* on *board* in place.

    No validation happens here: the move is trusted to come from the
    decoder.  Captures, en passant and castling are derived from the board.
    """
    origin, destination = move.origin, move.destination
    piece = board[origin]
    captured = board[destination]
    col_step = destination.col - origin.col

    if piece.piece_type == PieceType.PAWN and abs(col_step) == 1 and captured.is_empty:
        # En passant: the captured pawn stands one row behind the destination.
        ep_row = destination.row - PAWN_DIRECTION[side]
        if is_on_board(ep_row, destination.col):
            board[Square(ep_row, destination.col)] = EMPTY

    if move.promotion is not None:
        board[destination] = Piece(side, move.promotion)
    else:
        board[destination] = piece
    board[origin] = EMPTY

    if piece.piece_type == PieceType.KING and abs(col_step) == 2:
        rook_from, rook_to = (7, 5) if col_step > 0 else (0, 3)
        # Whatever stands in the corner is moved; castling rights are not tracked.
        board[Square(origin.row, rook_to)] = board[Square(origin.row, rook_from)]
        board[Square(origin.row, rook_from)] = EMPTY
