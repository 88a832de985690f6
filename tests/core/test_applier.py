"""Tests for apply_move: the mechanical board update."""

from chessreel.core.applier import apply_move
from chessreel.core.board import Board
from chessreel.core.enums import Color, PieceType
from chessreel.core.move import Move
from chessreel.core.notation import board_from_fen, board_to_fen
from chessreel.core.piece import EMPTY, Piece
from chessreel.core.types import parse_square as sq


class TestApplyMove:
    def test_quiet_move(self) -> None:
        board = Board.initial()
        apply_move(board, Move(sq("e2"), sq("e4")), Color.WHITE)
        assert board[sq("e2")] is EMPTY
        assert board[sq("e4")] == Piece(Color.WHITE, PieceType.PAWN)

    def test_capture_replaces_target(self) -> None:
        board = board_from_fen("8/8/8/8/8/5n2/8/6N1")
        apply_move(board, Move(sq("g1"), sq("f3")), Color.WHITE)
        assert board[sq("f3")] == Piece(Color.WHITE, PieceType.KNIGHT)
        assert board.count(Color.BLACK, PieceType.KNIGHT) == 0

    def test_en_passant_removes_passed_pawn(self) -> None:
        board = board_from_fen("8/8/8/3pP3/8/8/8/8")
        apply_move(board, Move(sq("e5"), sq("d6")), Color.WHITE)
        assert board[sq("d6")] == Piece(Color.WHITE, PieceType.PAWN)
        assert board[sq("d5")] is EMPTY
        assert board[sq("e5")] is EMPTY

    def test_black_en_passant(self) -> None:
        board = board_from_fen("8/8/8/8/3Pp3/8/8/8")
        apply_move(board, Move(sq("e4"), sq("d3")), Color.BLACK)
        assert board_to_fen(board) == "8/8/8/8/8/3p4/8/8"

    def test_promotion_writes_new_piece(self) -> None:
        board = board_from_fen("8/4P3/8/8/8/8/8/8")
        apply_move(board, Move(sq("e7"), sq("e8"), PieceType.QUEEN), Color.WHITE)
        assert board[sq("e8")] == Piece(Color.WHITE, PieceType.QUEEN)
        assert board[sq("e7")] is EMPTY

    def test_black_underpromotion(self) -> None:
        board = board_from_fen("8/8/8/8/8/8/p7/8")
        apply_move(board, Move(sq("a2"), sq("a1"), PieceType.KNIGHT), Color.BLACK)
        assert board[sq("a1")] == Piece(Color.BLACK, PieceType.KNIGHT)

    def test_last_rank_without_promotion_stays_pawn(self) -> None:
        board = board_from_fen("8/4P3/8/8/8/8/8/8")
        apply_move(board, Move(sq("e7"), sq("e8")), Color.WHITE)
        assert board[sq("e8")] == Piece(Color.WHITE, PieceType.PAWN)

    def test_kingside_castle_moves_rook(self) -> None:
        board = board_from_fen("8/8/8/8/8/8/8/4K2R")
        apply_move(board, Move(sq("e1"), sq("g1")), Color.WHITE)
        assert board_to_fen(board).endswith("/5RK1")

    def test_queenside_castle_moves_rook(self) -> None:
        board = board_from_fen("r3k3/8/8/8/8/8/8/8")
        apply_move(board, Move(sq("e8"), sq("c8")), Color.BLACK)
        assert board_to_fen(board).startswith("2kr4/")

    def test_castle_without_rook_is_not_corrected(self) -> None:
        board = board_from_fen("8/8/8/8/8/8/8/4K3")
        apply_move(board, Move(sq("e1"), sq("g1")), Color.WHITE)
        assert board[sq("g1")] == Piece(Color.WHITE, PieceType.KING)
        assert board[sq("f1")] is EMPTY
        assert board.count(Color.WHITE, PieceType.ROOK) == 0

    def test_castle_moves_foreign_corner_piece(self) -> None:
        board = board_from_fen("8/8/8/8/8/8/8/4K2n")
        apply_move(board, Move(sq("e1"), sq("g1")), Color.WHITE)
        assert board[sq("f1")] == Piece(Color.BLACK, PieceType.KNIGHT)
        assert board[sq("h1")] is EMPTY

    def test_no_validation(self) -> None:
        board = Board.initial()
        apply_move(board, Move(sq("a1"), sq("h8")), Color.WHITE)
        assert board[sq("h8")] == Piece(Color.WHITE, PieceType.ROOK)
        assert board[sq("a1")] is EMPTY
