"""ViewerWindow — top-level window that replays random games forever."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from typing import TypeVar

from PyQt6.QtCore import QAbstractAnimation, QEasingCurve, Qt, QTimer, QVariantAnimation
from PyQt6.QtGui import QCloseEvent, QKeyEvent
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QStatusBar, QVBoxLayout, QWidget

from chessreel.core.enums import Color
from chessreel.core.move import Move
from chessreel.core.notation.models import DecodeFailure, GameRecord
from chessreel.game.library import GameLibrary
from chessreel.game.playback import PlaybackController, PlaybackPhase
from chessreel.settings import ViewerSettings
from chessreel.ui.board.board_view import BoardView
from chessreel.ui.panels.move_panel import MovePanel
from chessreel.ui.panels.player_panel import PlayerPanel
from chessreel.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)

TCallback = TypeVar("TCallback", bound=Callable[..., None])

LOSER_KING_ANGLE = 180.0
DRAW_KING_ANGLE = 90.0


class ViewerWindow(QMainWindow):
    """Plays one game after another from a :class:`GameLibrary`.

    The window owns all timing; :class:`PlaybackController` only knows
    plies and phases.
    """

    def __init__(
        self,
        settings: ViewerSettings,
        library: GameLibrary,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("chessreel")
        self.setMinimumSize(900, 640)
        self.resize(1100, 750)

        self._settings = settings
        self._library = library
        self._rng = rng if rng is not None else library.rng
        self._controller = PlaybackController()
        self._ending_pending = False
        self._marker_angles: dict[Color, float] = {}
        self._held_remaining_ms: int | None = None
        self._flip_anim: QVariantAnimation | None = None

        self._move_timer = QTimer(self)
        self._move_timer.setSingleShot(True)
        self._move_timer.timeout.connect(self._on_move_tick)

        self._next_game_timer = QTimer(self)
        self._next_game_timer.setSingleShot(True)
        self._next_game_timer.timeout.connect(self.load_next_game)

        self._setup_ui()
        self._apply_settings()
        self._connect_signals()
        self._connect_game_events()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=3)

        right = QVBoxLayout()
        right.setSpacing(6)

        self._player_panel = PlayerPanel()
        right.addWidget(self._player_panel)

        self._move_panel = MovePanel()
        right.addWidget(self._move_panel, stretch=1)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(280)
        root.addWidget(right_widget)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel("Ready")
        self._status.addWidget(self._status_label)

    def _apply_settings(self) -> None:
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.by_name(self._settings.board_theme))
        scene.set_show_coordinates(self._settings.show_coordinates)

    def _connect_signals(self) -> None:
        self._move_panel.move_clicked.connect(self._on_move_clicked)

    def _connect_game_events(self) -> None:
        """Subscribe to PlaybackController callbacks (idempotent)."""
        events = self._controller.events
        self._replace_callback(events.on_position, self._on_position)
        self._replace_callback(events.on_move, self._on_move)
        self._replace_callback(events.on_phase_changed, self._on_phase_changed)
        self._replace_callback(events.on_game_over, self._on_game_over)

    def _disconnect_game_events(self) -> None:
        events = self._controller.events
        self._remove_callback(events.on_position, self._on_position)
        self._remove_callback(events.on_move, self._on_move)
        self._remove_callback(events.on_phase_changed, self._on_phase_changed)
        self._remove_callback(events.on_game_over, self._on_game_over)

    @staticmethod
    def _replace_callback(callbacks: list[TCallback], callback: TCallback) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]
        callbacks.append(callback)

    @staticmethod
    def _remove_callback(callbacks: list[TCallback], callback: TCallback) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> PlaybackController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def player_panel(self) -> PlayerPanel:
        return self._player_panel

    @property
    def move_panel(self) -> MovePanel:
        return self._move_panel

    # ── Game lifecycle ───────────────────────────────────────────────────

    def load_next_game(self) -> bool:
        """Pick a random game and start playing it."""
        self._stop_timers()
        try:
            game = self._library.pick_game()
        except NotADirectoryError as exc:
            _LOGGER.error("%s", exc)
            self._status_label.setText(str(exc))
            return False
        if game is None:
            self._status_label.setText(f"No games found in {self._library.games_dir}")
            return False
        self.play_game(game)
        return True

    def play_game(self, game: GameRecord) -> None:
        """Start *game* in a random orientation."""
        self._stop_timers()
        self._ending_pending = False
        self._marker_angles.clear()
        self._held_remaining_ms = None

        scene = self._board_view.board_scene
        scene.clear_king_rotations()
        scene.set_dimmed(False)

        self._player_panel.set_game(game.white_label, game.black_label, game.year)
        self._move_panel.set_tokens(list(game.moves))
        self.setWindowTitle(f"chessreel: {game.white_label} vs {game.black_label}")

        view_from_white = self._rng.random() < 0.5
        self._controller.load(game, view_from_white=view_from_white)
        if self._controller.phase == PlaybackPhase.PLAYING:
            self._move_timer.start(self._settings.move_delay_ms)

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._stop_timers()
        self._board_view.board_scene.stop_animation()
        self._disconnect_game_events()
        super().closeEvent(event)

    def _stop_timers(self) -> None:
        self._move_timer.stop()
        self._next_game_timer.stop()
        if self._flip_anim is not None:
            anim, self._flip_anim = self._flip_anim, None
            anim.stop()

    # ── Keyboard ─────────────────────────────────────────────────────────

    def keyPressEvent(self, event: QKeyEvent | None) -> None:
        if event is None:
            return
        key = event.key()
        if key == Qt.Key.Key_Space:
            self._controller.toggle_pause()
        elif key == Qt.Key.Key_F:
            self._controller.flip()
        elif key == Qt.Key.Key_Left:
            self._controller.step_back()
        elif key == Qt.Key.Key_Right:
            self._controller.step_forward()
        elif key == Qt.Key.Key_Escape:
            self.close()
        else:
            super().keyPressEvent(event)

    def _on_move_clicked(self, ply: int) -> None:
        self._controller.jump_to(ply + 1)

    # ── Move timing ──────────────────────────────────────────────────────

    def _on_move_tick(self) -> None:
        self._controller.advance()

    def _after_move_animation(self) -> None:
        if self._ending_pending:
            self._ending_pending = False
            self._begin_ending()
        elif self._controller.phase == PlaybackPhase.PLAYING:
            self._move_timer.start(self._settings.move_delay_ms)

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_move(self, move: Move, ply: int) -> None:
        scene = self._board_view.board_scene
        scene.highlight_last_move(move)
        self._move_panel.set_active_ply(ply - 1)
        self._update_status()
        scene.animate_and_sync(
            move,
            self._controller.board.copy(),
            self._settings.animation_ms,
            on_done=self._after_move_animation,
        )
        # The check highlight follows the animated board.
        scene.highlight_check(self._controller.check_status)

    def _on_position(self) -> None:
        ctrl = self._controller
        scene = self._board_view.board_scene
        scene.set_flipped(not ctrl.view_from_white)
        scene.set_board(ctrl.board.copy())
        scene.highlight_last_move(ctrl.last_move)
        scene.highlight_check(ctrl.check_status)
        scene.clear_king_rotations()
        if ctrl.index == ctrl.total:
            for color, angle in self._marker_angles.items():
                scene.set_king_rotation(color, angle)
        self._player_panel.set_view_from_white(ctrl.view_from_white)
        self._move_panel.set_active_ply(ctrl.index - 1 if ctrl.index else None)
        self._update_status()

    def _on_phase_changed(self, phase: PlaybackPhase) -> None:
        scene = self._board_view.board_scene
        if phase == PlaybackPhase.PAUSED:
            self._move_timer.stop()
            scene.stop_animation()
            scene.set_dimmed(True)
        elif phase == PlaybackPhase.PLAYING:
            scene.set_dimmed(False)
            if self._controller.game is not None and not self._move_timer.isActive():
                self._move_timer.start(self._settings.move_delay_ms)
        elif phase == PlaybackPhase.FINISHED:
            self._move_timer.stop()
            self._sync_hold()
        self._update_status()

    def _on_game_over(self, _game: GameRecord, failure: DecodeFailure | None) -> None:
        if failure is not None:
            self._move_panel.mark_failed(self._controller.index)
        if self._board_view.board_scene.is_animating():
            self._ending_pending = True
        else:
            self._begin_ending()

    # ── Game end ─────────────────────────────────────────────────────────

    def _begin_ending(self) -> None:
        """Topple the loser's king, then count down to the next game."""
        ctrl = self._controller
        game = ctrl.game
        if game is None:
            return
        self._marker_angles.clear()
        if ctrl.show_result_marker:
            if game.loser is not None:
                self._marker_angles[game.loser] = LOSER_KING_ANGLE
            else:
                self._marker_angles = {
                    Color.WHITE: DRAW_KING_ANGLE,
                    Color.BLACK: DRAW_KING_ANGLE,
                }

        if not self._marker_angles or self._settings.king_flip_ms <= 0:
            self._show_result_marker(1.0)
            self._start_next_game_countdown()
            return

        anim = QVariantAnimation(self)
        anim.setDuration(self._settings.king_flip_ms)
        anim.setStartValue(0.0)
        anim.setEndValue(1.0)
        anim.setEasingCurve(QEasingCurve.Type.InOutQuad)
        anim.valueChanged.connect(lambda value: self._show_result_marker(float(value)))
        anim.finished.connect(self._on_flip_finished)
        self._flip_anim = anim
        anim.start(QAbstractAnimation.DeletionPolicy.DeleteWhenStopped)

    def _show_result_marker(self, progress: float) -> None:
        ctrl = self._controller
        if ctrl.index != ctrl.total:
            return
        scene = self._board_view.board_scene
        for color, angle in self._marker_angles.items():
            scene.set_king_rotation(color, angle * progress)

    def _on_flip_finished(self) -> None:
        if self._flip_anim is None:
            return
        self._flip_anim = None
        self._show_result_marker(1.0)
        self._start_next_game_countdown()

    def _start_next_game_countdown(self) -> None:
        if self._controller.failure is not None:
            delay = self._settings.abort_pause_ms
        else:
            delay = self._settings.game_over_pause_ms
        if self._controller.is_held:
            self._held_remaining_ms = delay
            return
        self._next_game_timer.start(delay)
        self._update_status()

    def _sync_hold(self) -> None:
        """Freeze or resume the next-game countdown."""
        scene = self._board_view.board_scene
        if self._controller.is_held:
            scene.set_dimmed(True)
            if self._next_game_timer.isActive():
                self._held_remaining_ms = max(0, self._next_game_timer.remainingTime())
                self._next_game_timer.stop()
            return
        scene.set_dimmed(False)
        if self._held_remaining_ms is not None:
            remaining, self._held_remaining_ms = self._held_remaining_ms, None
            self._next_game_timer.start(remaining)

    # ── Status ───────────────────────────────────────────────────────────

    def _update_status(self) -> None:
        ctrl = self._controller
        if ctrl.game is None:
            self._status_label.setText("Ready")
            return
        text = f"Ply {ctrl.index}/{ctrl.total}"
        phase = ctrl.phase
        if phase == PlaybackPhase.PAUSED:
            text += " · paused"
        elif phase == PlaybackPhase.FINISHED:
            if ctrl.failure is not None:
                text += f" · {ctrl.failure}"
            else:
                text += f" · {ctrl.game.result_token}"
            if ctrl.is_held:
                text += " · held"
        self._status_label.setText(text)
