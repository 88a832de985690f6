"""Core domain layer — board, move decoding and replay, zero external dependencies.

Quick start::

    from chessreel.core import replay_to, resolve_san, Board, Color

    result = replay_to(["e4", "e5", "Nf3", "Nc6", "Bb5"])
    move = resolve_san(result.board, "O-O", Color.BLACK)
"""

from chessreel.core.applier import apply_move
from chessreel.core.board import Board
from chessreel.core.enums import Color, GameResult, PieceType
from chessreel.core.move import Move
from chessreel.core.move_validator import MoveValidator
from chessreel.core.notation import (
    DecodeFailure,
    FailureReason,
    GameRecord,
    board_from_fen,
    board_to_fen,
    parse_pgn_games,
    resolve_san,
)
from chessreel.core.piece import EMPTY, Piece
from chessreel.core.replay import ReplayEngine, ReplayResult, replay_to
from chessreel.core.rules import Rules
from chessreel.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "EMPTY",
    "Board",
    "Move",
    "MoveValidator",
    "Piece",
    "Rules",
    "apply_move",
    # Notation
    "DecodeFailure",
    "FailureReason",
    "GameRecord",
    "board_from_fen",
    "board_to_fen",
    "parse_pgn_games",
    "resolve_san",
    # Replay
    "ReplayEngine",
    "ReplayResult",
    "replay_to",
]
