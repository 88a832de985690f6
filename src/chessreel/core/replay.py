"""Replay a list of SAN tokens from the standard starting position."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from chessreel.core.applier import apply_move
from chessreel.core.board import Board
from chessreel.core.enums import Color
from chessreel.core.move import Move
from chessreel.core.notation.models import DecodeFailure
from chessreel.core.notation.san import resolve_san
from chessreel.core.rules import Rules

_LOGGER = logging.getLogger(__name__)


def side_to_move(ply: int) -> Color:
    """White moves on even plies."""
    return Color.WHITE if ply % 2 == 0 else Color.BLACK


@dataclass(frozen=True, slots=True)
class ReplayResult:
    """Board reached by :func:`replay_to` and how far the replay got."""

    board: Board
    applied: int
    moves: tuple[Move, ...] = ()
    failure: DecodeFailure | None = None

    @property
    def complete(self) -> bool:
        return self.failure is None

    @property
    def last_move(self) -> Move | None:
        return self.moves[-1] if self.moves else None

    @property
    def side_to_move(self) -> Color:
        return side_to_move(self.applied)

    @property
    def kings_intact(self) -> bool:
        return Rules.has_both_kings(self.board)


def _play(board: Board, token: str, ply: int) -> Move | DecodeFailure:
    side = side_to_move(ply)
    result = resolve_san(board, token, side)
    if isinstance(result, DecodeFailure):
        _LOGGER.warning("Failed to parse move %d (%s): %s", ply + 1, token, result)
        return result

    had_kings = Rules.has_both_kings(board)
    apply_move(board, result, side)
    if had_kings and not Rules.has_both_kings(board):
        _LOGGER.warning("Move %d (%s) removed a king from the board", ply + 1, token)
    return result


def replay_to(tokens: Sequence[str], target_index: int | None = None) -> ReplayResult:
    """Replay *tokens* from the starting position up to *target_index* plies.

    ``None`` replays everything.  The replay stops before the first token
    that fails to decode; ``applied`` then counts the moves played before it.
    """
    limit = len(tokens) if target_index is None else max(0, min(target_index, len(tokens)))
    board = Board.initial()
    moves: list[Move] = []

    for ply in range(limit):
        outcome = _play(board, tokens[ply], ply)
        if isinstance(outcome, DecodeFailure):
            return ReplayResult(board, ply, tuple(moves), outcome)
        moves.append(outcome)

    return ReplayResult(board, limit, tuple(moves))


class ReplayEngine:
    """Cursor over one game's tokens.

    ``step`` plays the next token in place; ``seek`` rebuilds from scratch,
    so there is no undo history to keep consistent.
    """

    __slots__ = ("_tokens", "_board", "_moves", "_failure")

    def __init__(self, tokens: Sequence[str]) -> None:
        self._tokens = tuple(tokens)
        self._board = Board.initial()
        self._moves: list[Move] = []
        self._failure: DecodeFailure | None = None

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def tokens(self) -> tuple[str, ...]:
        return self._tokens

    @property
    def board(self) -> Board:
        return self._board

    @property
    def index(self) -> int:
        """Number of tokens applied so far."""
        return len(self._moves)

    @property
    def total(self) -> int:
        return len(self._tokens)

    @property
    def side_to_move(self) -> Color:
        return side_to_move(self.index)

    @property
    def last_move(self) -> Move | None:
        return self._moves[-1] if self._moves else None

    @property
    def failure(self) -> DecodeFailure | None:
        """Failure that blocked the next token, if the engine hit one."""
        return self._failure

    @property
    def is_at_end(self) -> bool:
        return self.index >= self.total

    # ── Navigation ───────────────────────────────────────────────────────

    def reset(self) -> None:
        self._board = Board.initial()
        self._moves = []
        self._failure = None

    def step(self) -> Move | DecodeFailure | None:
        """Play the next token; ``None`` when there is nothing left."""
        if self._failure is not None:
            return self._failure
        if self.is_at_end:
            return None
        outcome = _play(self._board, self._tokens[self.index], self.index)
        if isinstance(outcome, DecodeFailure):
            self._failure = outcome
        else:
            self._moves.append(outcome)
        return outcome

    def seek(self, index: int) -> ReplayResult:
        """Rebuild the position after *index* plies."""
        result = replay_to(self._tokens, index)
        self._board = result.board
        self._moves = list(result.moves)
        self._failure = result.failure
        return result
