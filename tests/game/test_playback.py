"""Tests for PlaybackController — the Qt-free playback state machine."""

from chessreel.core.enums import Color
from chessreel.core.move import Move
from chessreel.core.notation import DecodeFailure, FailureReason, GameRecord
from chessreel.core.types import parse_square as sq
from chessreel.game.playback import PlaybackController, PlaybackPhase

SCHOLARS_MATE = GameRecord(
    moves=["e4", "e5", "Qh5", "Nc6", "Bc4", "Nf6", "Qxf7#"],
    white="Attacker",
    black="Victim",
    result_token="1-0",
)


def _loaded(game: GameRecord = SCHOLARS_MATE) -> PlaybackController:
    ctrl = PlaybackController()
    ctrl.load(game)
    return ctrl


def _play_out(ctrl: PlaybackController) -> None:
    while ctrl.phase == PlaybackPhase.PLAYING:
        ctrl.advance()


class TestLoad:
    def test_initial_state(self) -> None:
        ctrl = PlaybackController()
        assert ctrl.phase == PlaybackPhase.NOT_STARTED
        assert ctrl.game is None
        assert ctrl.advance() is None

    def test_load_starts_playing(self) -> None:
        ctrl = PlaybackController()
        phases: list[PlaybackPhase] = []
        positions: list[int] = []
        ctrl.events.on_phase_changed.append(phases.append)
        ctrl.events.on_position.append(lambda: positions.append(ctrl.index))

        ctrl.load(SCHOLARS_MATE, view_from_white=False)

        assert ctrl.phase == PlaybackPhase.PLAYING
        assert phases == [PlaybackPhase.PLAYING]
        assert positions == [0]
        assert ctrl.total == 7
        assert not ctrl.view_from_white
        assert ctrl.last_move is None

    def test_empty_game_finishes_immediately(self) -> None:
        ctrl = PlaybackController()
        over: list[GameRecord] = []
        ctrl.events.on_game_over.append(lambda game, _failure: over.append(game))
        game = GameRecord(moves=[])
        ctrl.load(game)
        assert ctrl.phase == PlaybackPhase.FINISHED
        assert over == [game]
        assert not ctrl.show_result_marker


class TestAdvance:
    def test_moves_are_reported(self) -> None:
        ctrl = _loaded()
        seen: list[tuple[Move, int]] = []
        ctrl.events.on_move.append(lambda move, ply: seen.append((move, ply)))

        move = ctrl.advance()

        assert move == Move(sq("e2"), sq("e4"))
        assert seen == [(move, 1)]
        assert ctrl.index == 1
        assert ctrl.last_move == move

    def test_plays_to_the_end(self) -> None:
        ctrl = _loaded()
        results: list[tuple[GameRecord, DecodeFailure | None]] = []
        ctrl.events.on_game_over.append(lambda game, failure: results.append((game, failure)))

        _play_out(ctrl)

        assert ctrl.phase == PlaybackPhase.FINISHED
        assert ctrl.index == 7
        assert results == [(SCHOLARS_MATE, None)]
        assert ctrl.check_status[Color.BLACK]
        assert not ctrl.stopped_early
        assert ctrl.show_result_marker
        assert ctrl.advance() is None

    def test_decode_failure_stops_playback(self) -> None:
        game = GameRecord(moves=["e4", "Ke7", "Nf3"], result_token="0-1")
        ctrl = _loaded(game)
        failures: list[DecodeFailure | None] = []
        ctrl.events.on_game_over.append(lambda _game, failure: failures.append(failure))

        assert ctrl.advance() is not None
        assert ctrl.advance() is None

        assert ctrl.phase == PlaybackPhase.FINISHED
        assert ctrl.index == 1
        assert failures == [DecodeFailure("Ke7", FailureReason.NO_CANDIDATE)]
        assert ctrl.stopped_early
        assert not ctrl.show_result_marker

    def test_paused_does_not_advance(self) -> None:
        ctrl = _loaded()
        ctrl.toggle_pause()
        assert ctrl.advance() is None
        assert ctrl.index == 0


class TestPauseAndReview:
    def test_toggle_pause(self) -> None:
        ctrl = _loaded()
        ctrl.toggle_pause()
        assert ctrl.phase == PlaybackPhase.PAUSED
        ctrl.toggle_pause()
        assert ctrl.phase == PlaybackPhase.PLAYING

    def test_steps_need_review_phase(self) -> None:
        ctrl = _loaded()
        ctrl.advance()
        assert not ctrl.step_back()
        assert not ctrl.step_forward()
        assert not ctrl.jump_to(0)
        assert ctrl.index == 1

    def test_step_back_and_forward_while_paused(self) -> None:
        ctrl = _loaded()
        ctrl.advance()
        ctrl.advance()
        ctrl.toggle_pause()
        positions: list[int] = []
        ctrl.events.on_position.append(lambda: positions.append(ctrl.index))

        assert ctrl.step_back()
        assert ctrl.index == 1
        assert ctrl.last_move == Move(sq("e2"), sq("e4"))
        assert ctrl.step_back()
        assert not ctrl.step_back()
        assert ctrl.step_forward()
        assert positions == [1, 0, 1]

    def test_resume_continues_from_reviewed_position(self) -> None:
        ctrl = _loaded()
        ctrl.advance()
        ctrl.advance()
        ctrl.toggle_pause()
        ctrl.step_back()
        ctrl.toggle_pause()
        assert ctrl.advance() == Move(sq("e7"), sq("e5"))

    def test_review_after_finish(self) -> None:
        ctrl = _loaded()
        _play_out(ctrl)
        assert ctrl.jump_to(3)
        assert ctrl.index == 3
        assert not ctrl.show_result_marker
        assert ctrl.jump_to(7)
        assert not ctrl.step_forward()
        assert ctrl.show_result_marker

    def test_step_forward_stops_at_failure(self) -> None:
        ctrl = _loaded(GameRecord(moves=["e4", "Ke7"]))
        _play_out(ctrl)
        ctrl.step_back()
        assert ctrl.step_forward()
        assert not ctrl.step_forward()
        assert ctrl.index == 1

    def test_hold_at_game_end(self) -> None:
        ctrl = _loaded()
        _play_out(ctrl)
        phases: list[PlaybackPhase] = []
        ctrl.events.on_phase_changed.append(phases.append)

        ctrl.toggle_pause()
        assert ctrl.is_held
        ctrl.toggle_pause()
        assert not ctrl.is_held
        assert phases == [PlaybackPhase.FINISHED, PlaybackPhase.FINISHED]

    def test_flip(self) -> None:
        ctrl = _loaded()
        calls: list[bool] = []
        ctrl.events.on_position.append(lambda: calls.append(ctrl.view_from_white))
        ctrl.flip()
        ctrl.flip()
        assert calls == [False, True]

    def test_load_clears_hold(self) -> None:
        ctrl = _loaded()
        _play_out(ctrl)
        ctrl.toggle_pause()
        ctrl.load(SCHOLARS_MATE)
        assert not ctrl.is_held
        assert ctrl.index == 0
