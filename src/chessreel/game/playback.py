"""PlaybackController — timed replay of one recorded game.

Knows nothing about timers or widgets: the UI calls :meth:`advance` on each
tick and subscribes to :class:`PlaybackEvents`, so tests can drive a whole
game synchronously.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum, auto

from chessreel.core.board import Board
from chessreel.core.enums import Color
from chessreel.core.move import Move
from chessreel.core.notation.models import DecodeFailure, GameRecord
from chessreel.core.replay import ReplayEngine
from chessreel.core.rules import Rules

_LOGGER = logging.getLogger(__name__)


class PlaybackPhase(IntEnum):
    """Finite-state-machine states of a playback."""

    NOT_STARTED = auto()
    PLAYING = auto()
    PAUSED = auto()
    FINISHED = auto()  # end reached or a move failed to decode


# ── Event definitions ────────────────────────────────────────────────────────

PositionCallback = Callable[[], None]
MoveCallback = Callable[[Move, int], None]  # move, plies played after it
PhaseCallback = Callable[[PlaybackPhase], None]
GameOverCallback = Callable[[GameRecord, "DecodeFailure | None"], None]


@dataclass
class PlaybackEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_position: list[PositionCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class PlaybackController:
    """Drives one game through a :class:`ReplayEngine`.

    ``on_move`` fires for linear playback (the UI animates it);
    ``on_position`` fires when the board jumps (load, seek, flip).
    """

    __slots__ = ("_game", "_engine", "_phase", "_held", "_view_from_white", "events")

    def __init__(self) -> None:
        self._game: GameRecord | None = None
        self._engine = ReplayEngine(())
        self._phase = PlaybackPhase.NOT_STARTED
        self._held = False
        self._view_from_white = True
        self.events = PlaybackEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def game(self) -> GameRecord | None:
        return self._game

    @property
    def phase(self) -> PlaybackPhase:
        return self._phase

    @property
    def board(self) -> Board:
        return self._engine.board

    @property
    def index(self) -> int:
        return self._engine.index

    @property
    def total(self) -> int:
        return self._engine.total

    @property
    def last_move(self) -> Move | None:
        return self._engine.last_move

    @property
    def failure(self) -> DecodeFailure | None:
        return self._engine.failure

    @property
    def view_from_white(self) -> bool:
        return self._view_from_white

    @property
    def is_held(self) -> bool:
        """Whether the post-game countdown is frozen."""
        return self._held

    @property
    def check_status(self) -> dict[Color, bool]:
        return Rules.check_status(self._engine.board)

    @property
    def stopped_early(self) -> bool:
        """Finished before the last token (a move failed to decode)."""
        return self._phase == PlaybackPhase.FINISHED and not self._engine.is_at_end

    @property
    def show_result_marker(self) -> bool:
        """Whether the final-position result marker (toppled king) applies."""
        game = self._game
        if game is None or self._phase != PlaybackPhase.FINISHED:
            return False
        if not self._engine.is_at_end:
            return False
        return game.loser is not None or game.is_draw

    # ── Lifecycle ────────────────────────────────────────────────────────

    def load(self, game: GameRecord, view_from_white: bool = True) -> None:
        """Start playing *game* from the initial position."""
        self._game = game
        self._engine = ReplayEngine(game.moves)
        self._held = False
        self._view_from_white = view_from_white
        _LOGGER.info(
            "Playing %s vs %s %s(%d moves, %s)",
            game.white,
            game.black,
            f"{game.year} " if game.year else "",
            len(game.moves),
            game.result_token,
        )
        self._set_phase(PlaybackPhase.PLAYING)
        self._emit_position()
        if self._engine.is_at_end:
            self._finish()

    def advance(self) -> Move | None:
        """Play the next move; ``None`` if nothing was played."""
        if self._phase != PlaybackPhase.PLAYING:
            return None
        outcome = self._engine.step()
        if not isinstance(outcome, Move):
            self._finish()
            return None

        for cb in self.events.on_move:
            cb(outcome, self._engine.index)
        if self._engine.is_at_end:
            self._finish()
        return outcome

    # ── User controls ────────────────────────────────────────────────────

    def toggle_pause(self) -> None:
        if self._phase == PlaybackPhase.PLAYING:
            self._set_phase(PlaybackPhase.PAUSED)
        elif self._phase == PlaybackPhase.PAUSED:
            self._set_phase(PlaybackPhase.PLAYING)
        elif self._phase == PlaybackPhase.FINISHED:
            self._held = not self._held
            self._emit_phase(self._phase)

    def step_back(self) -> bool:
        if not self._can_review() or self._engine.index == 0:
            return False
        self._engine.seek(self._engine.index - 1)
        self._emit_position()
        return True

    def step_forward(self) -> bool:
        if not self._can_review():
            return False
        if not isinstance(self._engine.step(), Move):
            return False
        self._emit_position()
        return True

    def jump_to(self, index: int) -> bool:
        """Show the position after *index* plies (review only)."""
        if not self._can_review():
            return False
        self._engine.seek(index)
        self._emit_position()
        return True

    def flip(self) -> None:
        self._view_from_white = not self._view_from_white
        self._emit_position()

    # ── Internal ─────────────────────────────────────────────────────────

    def _can_review(self) -> bool:
        return self._phase in (PlaybackPhase.PAUSED, PlaybackPhase.FINISHED)

    def _finish(self) -> None:
        self._set_phase(PlaybackPhase.FINISHED)
        failure = self._engine.failure
        game = self._game
        assert game is not None
        if failure is not None:
            _LOGGER.info(
                "Stopped after %d of %d moves: %s",
                self._engine.index,
                self._engine.total,
                failure,
            )
        else:
            _LOGGER.info("Finished after %d moves: %s", self._engine.index, game.result_token)
        for cb in self.events.on_game_over:
            cb(game, failure)

    def _set_phase(self, phase: PlaybackPhase) -> None:
        self._phase = phase
        self._emit_phase(phase)

    def _emit_phase(self, phase: PlaybackPhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_position(self) -> None:
        for cb in self.events.on_position:
            cb()
