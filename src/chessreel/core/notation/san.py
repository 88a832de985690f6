"""SAN (Standard Algebraic Notation) decoding.

A token is resolved against a board in two stages: :func:`parse_san_token`
splits it into its syntactic parts, then :func:`resolve_san` looks for the
piece that can make the move, breaking ties by rejecting candidates that
would leave their own king in check.
"""

from __future__ import annotations

from chessreel.core.applier import apply_move
from chessreel.core.board import Board
from chessreel.core.enums import Color, PieceType
from chessreel.core.move import Move
from chessreel.core.move_validator import MoveValidator
from chessreel.core.notation.models import (
    CastleSide,
    DecodeFailure,
    FailureReason,
    SanToken,
)
from chessreel.core.rules import Rules
from chessreel.core.types import Square, make_square

_SAN_PIECE_REV: dict[str, PieceType] = {
    "N": PieceType.KNIGHT,
    "B": PieceType.BISHOP,
    "R": PieceType.ROOK,
    "Q": PieceType.QUEEN,
    "K": PieceType.KING,
}
_PROMOTION_REV: dict[str, PieceType] = {
    k: v for k, v in _SAN_PIECE_REV.items() if v != PieceType.KING
}

_CASTLES: dict[str, CastleSide] = {
    "O-O": "kingside",
    "0-0": "kingside",
    "O-O-O": "queenside",
    "0-0-0": "queenside",
}
_FILES = "abcdefgh"
_RANKS = "12345678"
_KING_HOME_ROW: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}


def castling_move(side: Color, castle: CastleSide) -> Move:
    """The fixed king move for a castle.

    Rook presence, a clear path and attacked transit squares are not checked:
    the notation comes from a game that was actually played.
    """
    row = _KING_HOME_ROW[side]
    to_col = 6 if castle == "kingside" else 2
    return Move(Square(row, 4), Square(row, to_col))


def parse_san_token(token: str) -> SanToken | DecodeFailure:
    """Split *token* into piece type, hint, capture flag, destination and
    promotion.  Does not look at any board."""

    def fail(reason: FailureReason) -> DecodeFailure:
        return DecodeFailure(token, reason)

    clean = token.rstrip("+#")

    castle = _CASTLES.get(clean)
    if castle is not None:
        # Destination is filled in per side by resolve_san.
        return SanToken(PieceType.KING, Square(0, 4), castle=castle)

    promotion: PieceType | None = None
    if "=" in clean:
        clean, _, promo = clean.partition("=")
        if promo not in _PROMOTION_REV:
            return fail(FailureReason.BAD_SYNTAX)
        promotion = _PROMOTION_REV[promo]

    if len(clean) < 2:
        return fail(FailureReason.BAD_SYNTAX)
    dest_file, dest_rank = clean[-2], clean[-1]
    if dest_file not in _FILES or dest_rank not in _RANKS:
        return fail(FailureReason.OUT_OF_RANGE)
    destination = make_square(_FILES.index(dest_file), _RANKS.index(dest_rank))
    body = clean[:-2]

    piece_type = PieceType.PAWN
    if body and body[0] in _SAN_PIECE_REV:
        piece_type = _SAN_PIECE_REV[body[0]]
        body = body[1:]

    capture = "x" in body
    if capture:
        body, _, rest = body.partition("x")
        if rest:
            return fail(FailureReason.BAD_SYNTAX)

    hint_file: int | None = None
    hint_row: int | None = None
    if len(body) == 2:
        if body[0] not in _FILES or body[1] not in _RANKS:
            return fail(FailureReason.BAD_SYNTAX)
        hint_file = _FILES.index(body[0])
        hint_row = make_square(0, _RANKS.index(body[1])).row
    elif len(body) == 1:
        if body in _FILES:
            hint_file = _FILES.index(body)
        elif body in _RANKS:
            hint_row = make_square(0, _RANKS.index(body)).row
        else:
            return fail(FailureReason.BAD_SYNTAX)
    elif body:
        return fail(FailureReason.BAD_SYNTAX)

    if promotion is not None and piece_type != PieceType.PAWN:
        return fail(FailureReason.BAD_SYNTAX)

    return SanToken(
        piece_type=piece_type,
        destination=destination,
        capture=capture,
        hint_file=hint_file,
        hint_row=hint_row,
        promotion=promotion,
    )


def resolve_san(board: Board, token: str, side: Color) -> Move | DecodeFailure:
    """Resolve *token* to a :class:`Move` for *side* on *board*.

    Pure with respect to *board*: ties are broken on copies, the board
    passed in is never modified.
    """
    parsed = parse_san_token(token)
    if isinstance(parsed, DecodeFailure):
        return parsed
    if parsed.castle is not None:
        return castling_move(side, parsed.castle)

    candidates = _candidates(board, parsed, side)
    if not candidates:
        return DecodeFailure(token, FailureReason.NO_CANDIDATE)
    if len(candidates) == 1:
        return candidates[0]

    for move in candidates:
        trial = board.copy()
        apply_move(trial, move, side)
        if not Rules.is_in_check(trial, side):
            return move
    return DecodeFailure(token, FailureReason.NO_LEGAL_CANDIDATE)


def _candidates(board: Board, parsed: SanToken, side: Color) -> list[Move]:
    """Moves of every *side* piece of the parsed type that matches the hint
    and can geometrically reach the destination."""
    validator = MoveValidator(board)
    moves: list[Move] = []
    for origin in board.pieces(side, parsed.piece_type):
        if parsed.hint_file is not None and origin.col != parsed.hint_file:
            continue
        if parsed.hint_row is not None and origin.row != parsed.hint_row:
            continue
        if validator.is_valid_move(board[origin], origin, parsed.destination, parsed.capture):
            moves.append(Move(origin, parsed.destination, parsed.promotion))
    return moves
