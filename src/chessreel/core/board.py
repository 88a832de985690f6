"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeAlias

from chessreel.core.enums import Color, PieceType
from chessreel.core.piece import EMPTY, Piece
from chessreel.core.types import ALL_SQUARES, Square

BoardSnapshot: TypeAlias = tuple[Piece, ...]

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


class Board:
    """Mutable 64-square board.

    Every square always holds a :class:`Piece`; empty squares hold
    :data:`~chessreel.core.piece.EMPTY`.  Snapshots are plain 64-tuples, so
    taking and restoring one is a fixed-size copy.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece] = [EMPTY] * 64

    @staticmethod
    def _index(sq: Square) -> int:
        row, col = sq
        if not (0 <= row < 8 and 0 <= col < 8):
            raise IndexError(f"Square off the board: {sq!r}")
        return row * 8 + col

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece:
        return self._squares[self._index(sq)]

    def __setitem__(self, sq: Square, piece: Piece) -> None:
        self._squares[self._index(sq)] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq].is_empty

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every non-empty square, row-major."""
        for sq, piece in zip(ALL_SQUARES, self._squares):
            if not piece.is_empty:
                yield sq, piece

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*, row-major."""
        return [
            sq for sq, piece in self.occupied() if piece.is_a(color, piece_type)
        ]

    def count(self, color: Color, piece_type: PieceType) -> int:
        return len(self.pieces(color, piece_type))

    def king_square(self, color: Color) -> Square | None:
        """First square holding *color*'s king, or ``None`` if there is none."""
        for sq, piece in self.occupied():
            if piece.is_a(color, PieceType.KING):
                return sq
        return None

    # -- Mutation / copying -------------------------------------------------

    def snapshot(self) -> BoardSnapshot:
        return tuple(self._squares)

    def restore(self, snapshot: BoardSnapshot) -> None:
        if len(snapshot) != 64:
            raise ValueError(f"Board snapshot needs 64 squares, got {len(snapshot)}")
        self._squares = list(snapshot)

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [EMPTY] * 64

    def reset(self) -> None:
        """Put the standard starting arrangement on the board."""
        self.clear()
        for col, pt in enumerate(_BACK_RANK):
            self._squares[col] = Piece(Color.BLACK, pt)
            self._squares[8 + col] = Piece(Color.BLACK, PieceType.PAWN)
            self._squares[48 + col] = Piece(Color.WHITE, PieceType.PAWN)
            self._squares[56 + col] = Piece(Color.WHITE, pt)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.reset()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = self._squares[row * 8 : row * 8 + 8]
            rows.append(f"{8 - row} {' '.join(str(p) for p in cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
