"""Per-piece move geometry, independent of check safety."""

from __future__ import annotations

from chessreel.core.board import Board
from chessreel.core.enums import Color, PieceType
from chessreel.core.piece import Piece
from chessreel.core.types import Square, is_on_board

# Row step of a pawn push (row 0 is rank 8, so white moves up = -1).
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
# Row a pawn starts on; only from here may it double-step.
PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
# Row a pawn must stand on to capture en passant (ranks 5 / 4).
EN_PASSANT_ROW: dict[Color, int] = {Color.WHITE: 3, Color.BLACK: 4}


def _sign(x: int) -> int:
    return (x > 0) - (x < 0)


class MoveValidator:
    """Answers "can *piece* go from A to B" for a given :class:`Board`.

    Reads the board only.  Whether the move leaves the mover's own king in
    check is a separate question, see :class:`~chessreel.core.rules.Rules`.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def is_path_clear(self, origin: Square, destination: Square) -> bool:
        """Whether every square strictly between *origin* and *destination*
        is empty.  Only meaningful for straight or diagonal lines."""
        d_row = _sign(destination.row - origin.row)
        d_col = _sign(destination.col - origin.col)
        steps = max(abs(destination.row - origin.row), abs(destination.col - origin.col))
        board = self._board
        for i in range(1, steps):
            if not board.is_empty(Square(origin.row + i * d_row, origin.col + i * d_col)):
                return False
        return True

    def is_valid_move(
        self,
        piece: Piece,
        origin: Square,
        destination: Square,
        capture: bool,
    ) -> bool:
        """Whether *piece* standing on *origin* may move to *destination*.

        With *capture* set the destination must hold an enemy piece (or be
        an en-passant target for a pawn); without it the destination must be
        empty.
        """
        color = piece.color
        if color is None or piece.piece_type is None:
            return False
        if not (is_on_board(*origin) and is_on_board(*destination)):
            return False

        target = self._board[destination]
        dest_empty = target.is_empty
        dest_enemy = not dest_empty and target.color != color

        if piece.piece_type == PieceType.PAWN:
            if not self._pawn_movement(color, origin, destination, capture, dest_empty, dest_enemy):
                return False
            if capture:
                # Diagonal onto an empty square already passed the en-passant test.
                return dest_enemy or dest_empty
            return dest_empty

        if not self._piece_movement(piece.piece_type, origin, destination):
            return False
        return dest_enemy if capture else dest_empty

    # ── Geometry ─────────────────────────────────────────────────────────

    def _pawn_movement(
        self,
        color: Color,
        origin: Square,
        destination: Square,
        capture: bool,
        dest_empty: bool,
        dest_enemy: bool,
    ) -> bool:
        direction = PAWN_DIRECTION[color]
        row_step = destination.row - origin.row
        col_step = abs(destination.col - origin.col)

        if col_step == 0:
            if capture or not dest_empty:
                return False
            if row_step == direction:
                return True
            if row_step == 2 * direction and origin.row == PAWN_HOME_ROW[color]:
                return self.is_path_clear(origin, destination)
            return False

        if col_step != 1 or row_step != direction or not capture:
            return False
        if dest_enemy:
            return True
        if not dest_empty or origin.row != EN_PASSANT_ROW[color]:
            return False
        # En passant: the enemy pawn sits beside the origin, on the target file.
        beside = self._board[Square(origin.row, destination.col)]
        return beside.is_a(color.opposite, PieceType.PAWN)

    def _piece_movement(
        self,
        piece_type: PieceType,
        origin: Square,
        destination: Square,
    ) -> bool:
        d_row = abs(destination.row - origin.row)
        d_col = abs(destination.col - origin.col)
        if d_row == 0 and d_col == 0:
            return False

        if piece_type == PieceType.KNIGHT:
            return (d_row, d_col) in ((1, 2), (2, 1))
        if piece_type == PieceType.KING:
            return d_row <= 1 and d_col <= 1

        diagonal = d_row == d_col
        straight = d_row == 0 or d_col == 0
        if piece_type == PieceType.BISHOP:
            shape_ok = diagonal
        elif piece_type == PieceType.ROOK:
            shape_ok = straight
        else:  # queen
            shape_ok = diagonal or straight
        return shape_ok and self.is_path_clear(origin, destination)
