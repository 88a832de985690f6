"""Tests for SAN token parsing and board resolution."""

import pytest

from chessreel.core.applier import apply_move
from chessreel.core.board import Board
from chessreel.core.enums import Color, PieceType
from chessreel.core.move import Move
from chessreel.core.notation import (
    DecodeFailure,
    FailureReason,
    SanToken,
    board_from_fen,
    castling_move,
    parse_san_token,
    resolve_san,
)
from chessreel.core.piece import EMPTY, Piece
from chessreel.core.replay import replay_to
from chessreel.core.types import Square
from chessreel.core.types import parse_square as sq


def _resolve_ok(board: Board, token: str, side: Color) -> Move:
    move = resolve_san(board, token, side)
    assert isinstance(move, Move), move
    return move


class TestParseSanToken:
    def test_pawn_push(self) -> None:
        token = parse_san_token("e4")
        assert token == SanToken(PieceType.PAWN, sq("e4"))

    def test_piece_with_check_marker(self) -> None:
        token = parse_san_token("Nf3+")
        assert isinstance(token, SanToken)
        assert token.piece_type == PieceType.KNIGHT
        assert token.destination == sq("f3")
        assert not token.capture

    def test_mate_marker_stripped(self) -> None:
        token = parse_san_token("Qxf7#")
        assert isinstance(token, SanToken)
        assert token.capture
        assert token.destination == sq("f7")

    def test_pawn_capture_hint(self) -> None:
        token = parse_san_token("exd5")
        assert isinstance(token, SanToken)
        assert token.piece_type == PieceType.PAWN
        assert token.capture
        assert token.hint_file == 4
        assert token.hint_row is None

    def test_rank_hint_uses_row_inversion(self) -> None:
        token = parse_san_token("R1a3")
        assert isinstance(token, SanToken)
        assert token.hint_row == 7
        assert token.hint_file is None

    def test_full_square_hint(self) -> None:
        token = parse_san_token("Qh4xe1")
        assert isinstance(token, SanToken)
        assert (token.hint_file, token.hint_row) == (7, 4)
        assert token.capture

    def test_promotion(self) -> None:
        token = parse_san_token("exd8=N+")
        assert isinstance(token, SanToken)
        assert token.promotion == PieceType.KNIGHT
        assert token.destination == sq("d8")

    @pytest.mark.parametrize(
        ("text", "castle"),
        [("O-O", "kingside"), ("0-0", "kingside"), ("O-O-O+", "queenside"), ("0-0-0", "queenside")],
    )
    def test_castling_literals(self, text: str, castle: str) -> None:
        token = parse_san_token(text)
        assert isinstance(token, SanToken)
        assert token.castle == castle

    @pytest.mark.parametrize(
        ("text", "reason"),
        [
            ("", FailureReason.BAD_SYNTAX),
            ("e", FailureReason.BAD_SYNTAX),
            ("e9", FailureReason.OUT_OF_RANGE),
            ("i4", FailureReason.OUT_OF_RANGE),
            ("e8=K", FailureReason.BAD_SYNTAX),
            ("e8=", FailureReason.BAD_SYNTAX),
            ("Nf3=Q", FailureReason.BAD_SYNTAX),
            ("exfd5", FailureReason.BAD_SYNTAX),
            ("Nbcd2", FailureReason.BAD_SYNTAX),
            ("Nb1cd2", FailureReason.BAD_SYNTAX),
            ("Zf3", FailureReason.BAD_SYNTAX),
        ],
    )
    def test_failures(self, text: str, reason: FailureReason) -> None:
        result = parse_san_token(text)
        assert result == DecodeFailure(text, reason)


class TestResolveScenarios:
    def test_e4(self) -> None:
        move = _resolve_ok(Board.initial(), "e4", Color.WHITE)
        assert move == Move(Square(6, 4), Square(4, 4))
        assert move.promotion is None

    def test_nf3(self) -> None:
        move = _resolve_ok(Board.initial(), "Nf3", Color.WHITE)
        assert move.origin == Square(7, 6)
        assert move.destination == Square(5, 5)

    def test_black_reply(self) -> None:
        board = replay_to(["e4"]).board
        move = _resolve_ok(board, "e5", Color.BLACK)
        assert move == Move(sq("e7"), sq("e5"))

    def test_castle_after_ruy_lopez(self) -> None:
        board = replay_to(["e4", "e5", "Nf3", "Nc6", "Bb5"]).board
        move = _resolve_ok(board, "O-O", Color.WHITE)
        assert move == Move(Square(7, 4), Square(7, 6))

        apply_move(board, move, Color.WHITE)
        assert board[Square(7, 6)] == Piece(Color.WHITE, PieceType.KING)
        assert board[Square(7, 5)] == Piece(Color.WHITE, PieceType.ROOK)
        assert board[Square(7, 7)] is EMPTY
        assert board[Square(7, 4)] is EMPTY

    def test_black_queenside_castle(self) -> None:
        assert castling_move(Color.BLACK, "queenside") == Move(sq("e8"), sq("c8"))
        move = _resolve_ok(Board.initial(), "O-O-O", Color.BLACK)
        assert move == Move(sq("e8"), sq("c8"))

    def test_knight_file_disambiguation(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/1N2KN2")
        assert _resolve_ok(board, "Nbd2", Color.WHITE).origin == Square(7, 1)
        assert _resolve_ok(board, "Nfd2", Color.WHITE).origin == Square(7, 5)

    def test_rook_rank_disambiguation(self) -> None:
        board = board_from_fen("4k3/8/8/R7/8/8/8/R3K3")
        assert _resolve_ok(board, "R1a3", Color.WHITE).origin == sq("a1")
        assert _resolve_ok(board, "R5a3", Color.WHITE).origin == sq("a5")

    def test_square_disambiguation(self) -> None:
        # Three queens reach b2; only file+rank names one of them.
        board = board_from_fen("4k3/8/8/7K/8/Q7/8/Q1Q5")
        assert _resolve_ok(board, "Qa1b2", Color.WHITE).origin == sq("a1")
        assert _resolve_ok(board, "Qa3b2", Color.WHITE).origin == sq("a3")
        assert _resolve_ok(board, "Qc1b2", Color.WHITE).origin == sq("c1")

    def test_en_passant(self) -> None:
        result = replay_to(["e4", "a6", "e5", "d5", "exd6"])
        assert result.complete
        board = result.board
        assert board[sq("d6")] == Piece(Color.WHITE, PieceType.PAWN)
        assert board[sq("d5")] is EMPTY
        assert board[sq("e5")] is EMPTY

    def test_promotion(self) -> None:
        board = board_from_fen("k7/4P3/8/8/8/8/8/K7")
        move = _resolve_ok(board, "e8=Q", Color.WHITE)
        assert move == Move(sq("e7"), sq("e8"), PieceType.QUEEN)
        apply_move(board, move, Color.WHITE)
        assert board[sq("e8")] == Piece(Color.WHITE, PieceType.QUEEN)

    def test_capture_promotion(self) -> None:
        board = board_from_fen("k2r4/4P3/8/8/8/8/8/K7")
        move = _resolve_ok(board, "exd8=R", Color.WHITE)
        assert move == Move(sq("e7"), sq("d8"), PieceType.ROOK)


class TestResolveFailures:
    def test_no_candidate(self) -> None:
        result = resolve_san(Board.initial(), "Nf6", Color.WHITE)
        assert result == DecodeFailure("Nf6", FailureReason.NO_CANDIDATE)

    def test_missing_capture_marker_fails(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/5n2/8/4K1N1")
        result = resolve_san(board, "Nf3", Color.WHITE)
        assert isinstance(result, DecodeFailure)
        assert result.reason == FailureReason.NO_CANDIDATE

    def test_capture_marker_on_empty_square_fails(self) -> None:
        result = resolve_san(Board.initial(), "Nxf3", Color.WHITE)
        assert isinstance(result, DecodeFailure)

    def test_every_candidate_exposes_king(self) -> None:
        # King already in check along the e-file; neither knight blocks it.
        board = board_from_fen("4r1k1/8/8/8/8/8/8/1N2KN2")
        result = resolve_san(board, "Nd2", Color.WHITE)
        assert result == DecodeFailure("Nd2", FailureReason.NO_LEGAL_CANDIDATE)

    def test_failure_message(self) -> None:
        failure = DecodeFailure("Nf6", FailureReason.NO_CANDIDATE)
        assert str(failure) == "cannot decode 'Nf6': no piece can make this move"


class TestSelfCheckFiltering:
    def test_pinned_knight_is_skipped(self) -> None:
        # The e2 knight is pinned by the e8 rook; only the b1 knight may go to c3.
        board = board_from_fen("4r1k1/8/8/8/8/8/4N3/1N2K3")
        move = _resolve_ok(board, "Nc3", Color.WHITE)
        assert move.origin == sq("b1")

    def test_single_candidate_skips_filter(self) -> None:
        board = board_from_fen("4r1k1/8/8/8/8/8/4N3/4K3")
        move = _resolve_ok(board, "Nc3", Color.WHITE)
        assert move.origin == sq("e2")

    def test_pinned_knight_for_black(self) -> None:
        # The d7 knight is pinned by the b5 bishop.
        board = board_from_fen("4k3/3n4/6n1/1B6/8/8/8/4K3")
        move = _resolve_ok(board, "Ne5", Color.BLACK)
        assert move.origin == sq("g6")


class TestPurity:
    @pytest.mark.parametrize("token", ["e4", "Nf3", "Nf6", "O-O", "e9", "Nd2"])
    def test_board_unchanged(self, token: str) -> None:
        board = Board.initial()
        before = board.snapshot()
        resolve_san(board, token, Color.WHITE)
        assert board.snapshot() == before

    def test_board_unchanged_after_tie_break(self) -> None:
        board = board_from_fen("4r1k1/8/8/8/8/8/4N3/1N2K3")
        before = board.snapshot()
        resolve_san(board, "Nc3", Color.WHITE)
        resolve_san(board, "Nd2", Color.WHITE)
        assert board.snapshot() == before

    @pytest.mark.parametrize("token", ["Nc3", "Nd4", "Qa4", "Nd2"])
    def test_deterministic(self, token: str) -> None:
        board = board_from_fen("4r1k1/8/8/8/8/8/4N3/1N2K3")
        assert resolve_san(board, token, Color.WHITE) == resolve_san(board, token, Color.WHITE)
