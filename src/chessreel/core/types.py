"""Square type and coordinate helpers.

Board layout (row-major, rank 8 on top)::

    row 0: a8 b8 c8 d8 e8 f8 g8 h8
    row 1: a7 ...
    ...
    row 7: a1 b1 c1 d1 e1 f1 g1 h1

Every conversion between notation ranks and rows goes through
:func:`make_square` / :func:`rank_of` so the inversion lives in one place.
"""

from __future__ import annotations

from typing import NamedTuple


class Square(NamedTuple):
    """A ``(row, col)`` board coordinate, both in 0–7."""

    row: int
    col: int

    def __str__(self) -> str:
        return square_name(self)


def is_on_board(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies inside the 8x8 board."""
    return 0 <= row < 8 and 0 <= col < 8


def make_square(file: int, rank: int) -> Square:
    """Create a square from file (0–7, a–h) and rank index (0–7, ranks 1–8)."""
    return Square(7 - rank, file)


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq.col


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (ranks 1–8)."""
    return 7 - sq.row


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. ``Square(4, 4)`` → ``'e4'``."""
    return chr(ord("a") + sq.col) + str(8 - sq.row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. ``'e4'`` → ``Square(4, 4)``."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(ord(name[0]) - ord("a"), int(name[1]) - 1)


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, col) for row in range(8) for col in range(8)
)

# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[0:8]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[8:16]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[16:24]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[24:32]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[32:40]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[40:48]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[48:56]
A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[56:64]
