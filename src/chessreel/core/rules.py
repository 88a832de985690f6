"""Check detection built on :class:`MoveValidator` geometry."""

from __future__ import annotations

from chessreel.core.board import Board
from chessreel.core.enums import Color, PieceType
from chessreel.core.move_validator import MoveValidator
from chessreel.core.types import Square


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    A missing king never raises: the side is reported as not in check, so
    a replay of noisy archive data keeps going.
    """

    @staticmethod
    def is_square_attacked(board: Board, target: Square, by_color: Color) -> bool:
        """Whether any *by_color* piece has a capturing move onto *target*."""
        validator = MoveValidator(board)
        for sq, piece in board.occupied():
            if piece.color != by_color:
                continue
            if validator.is_valid_move(piece, sq, target, capture=True):
                return True
        return False

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        king_sq = board.king_square(color)
        if king_sq is None:
            return False
        return Rules.is_square_attacked(board, king_sq, color.opposite)

    @staticmethod
    def check_status(board: Board) -> dict[Color, bool]:
        """Check flag per color, as consumed by the renderer."""
        return {color: Rules.is_in_check(board, color) for color in Color}

    @staticmethod
    def has_both_kings(board: Board) -> bool:
        """Exactly one king of each color is on the board."""
        return all(board.count(color, PieceType.KING) == 1 for color in Color)
