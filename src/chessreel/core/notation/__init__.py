"""Notation package: SAN decoding, PGN tokenizing and FEN placement."""

from chessreel.core.notation.fen import STARTING_PLACEMENT, board_from_fen, board_to_fen
from chessreel.core.notation.models import (
    DecodeFailure,
    FailureReason,
    GameRecord,
    SanToken,
)
from chessreel.core.notation.pgn import (
    extract_san_token,
    parse_pgn_game,
    parse_pgn_games,
    strip_movetext,
    tokenize_movetext,
)
from chessreel.core.notation.san import castling_move, parse_san_token, resolve_san
from chessreel.core.notation.tags import (
    extract_year,
    game_result_from_pgn,
    is_result_token,
    last_name,
    pgn_result_token,
)

__all__ = [
    "STARTING_PLACEMENT",
    "DecodeFailure",
    "FailureReason",
    "GameRecord",
    "SanToken",
    "board_from_fen",
    "board_to_fen",
    "castling_move",
    "extract_san_token",
    "extract_year",
    "game_result_from_pgn",
    "is_result_token",
    "last_name",
    "parse_pgn_game",
    "parse_pgn_games",
    "parse_san_token",
    "pgn_result_token",
    "resolve_san",
    "strip_movetext",
    "tokenize_movetext",
]
