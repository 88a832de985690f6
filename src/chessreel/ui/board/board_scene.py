"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QAbstractAnimation, QEasingCurve, QObject, QPointF, Qt, QVariantAnimation
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsRectItem, QGraphicsScene, QGraphicsSimpleTextItem

from chessreel.core.board import Board
from chessreel.core.enums import Color, PieceType
from chessreel.core.move import Move
from chessreel.core.move_validator import PAWN_DIRECTION
from chessreel.core.types import ALL_SQUARES, Square
from chessreel.ui.board.piece_item import PieceItem
from chessreel.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece items.

    Read-only: the scene shows whatever board it is given and never
    changes it.
    """

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._flipped = False
        self._show_coordinates = True
        self._king_rotation: dict[Color, float] = {}
        self._active_anim: QVariantAnimation | None = None
        self._anim_done: Callable[[], None] | None = None
        self._pending_board: Board | None = None

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._check_items: list[QGraphicsRectItem] = []
        self._last_move_highlights: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._dim_item: QGraphicsRectItem | None = None

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, board: Board) -> None:
        """Update the displayed board (full redraw of pieces)."""
        self.stop_animation()
        self._board = board
        self._sync_pieces()

    def set_flipped(self, flipped: bool) -> None:
        """Show the board from black's side when *flipped*."""
        if flipped == self._flipped:
            return
        self.stop_animation()
        self._flipped = flipped
        self._draw_board()
        self._sync_pieces()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_dimmed(self, dimmed: bool) -> None:
        """Veil the whole board (used while playback is paused)."""
        if dimmed and self._dim_item is None:
            t = self.TILE
            self._dim_item = QGraphicsRectItem(0, 0, 8 * t, 8 * t)
            self._dim_item.setBrush(QBrush(self._theme.dim_overlay))
            self._dim_item.setPen(QPen(Qt.PenStyle.NoPen))
            self._dim_item.setZValue(5)
            self.addItem(self._dim_item)
        elif not dimmed and self._dim_item is not None:
            self.removeItem(self._dim_item)
            self._dim_item = None

    def is_dimmed(self) -> bool:
        return self._dim_item is not None

    def highlight_last_move(self, move: Move | None) -> None:
        """Highlight origin/destination of the last played move."""
        self._clear_items(self._last_move_highlights)
        if move is None:
            return
        for sq, color in [
            (move.origin, self._theme.last_move_from),
            (move.destination, self._theme.last_move_to),
        ]:
            rect = self._make_highlight(sq, color)
            rect.setZValue(0.5)
            self._last_move_highlights.append(rect)

    def highlight_check(self, status: dict[Color, bool]) -> None:
        """Highlight every king whose side is in check."""
        self._clear_items(self._check_items)
        board = self._pending_board if self._pending_board is not None else self._board
        if board is None:
            return
        for color, in_check in status.items():
            if not in_check:
                continue
            king_sq = board.king_square(color)
            if king_sq is None:
                continue
            rect = self._make_highlight(king_sq, self._theme.highlight_check)
            rect.setZValue(0.6)
            self._check_items.append(rect)

    def set_king_rotation(self, color: Color, degrees: float) -> None:
        """Turn *color*'s king glyph (180 = toppled, 90 = on its side)."""
        if degrees:
            self._king_rotation[color] = degrees
        else:
            self._king_rotation.pop(color, None)
        for item in self._piece_items.values():
            if item.piece.is_a(color, PieceType.KING):
                item.setRotation(degrees)

    def clear_king_rotations(self) -> None:
        for color in list(self._king_rotation):
            self.set_king_rotation(color, 0.0)

    def king_rotation(self, color: Color) -> float:
        return self._king_rotation.get(color, 0.0)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        self._clear_items(self._coord_items)

        t = self.TILE
        font = QFont("Adwaita Sans", max(9, t // 8))

        for sq in ALL_SQUARES:
            vc, vr = self._visual_coords(sq)
            is_light = (sq.row + sq.col) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(vc * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_dark if is_light else self._theme.coord_light
            labels: list[tuple[str, float, float]] = []
            # Rank numbers (left edge)
            if vc == 0:
                labels.append((str(8 - sq.row), vc * t + 2, vr * t + 1))
            # File letters (bottom edge)
            if vr == 7:
                labels.append((chr(ord("a") + sq.col), vc * t + t - 12, vr * t + t - 16))
            for text, x, y in labels:
                txt = QGraphicsSimpleTextItem(text)
                txt.setFont(font)
                txt.setBrush(QBrush(text_color))
                txt.setPos(x, y)
                txt.setZValue(0.3)
                txt.setVisible(self._show_coordinates)
                self.addItem(txt)
                self._coord_items.append(txt)

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._board is None:
            return

        t = self.TILE
        for sq, piece in self._board.occupied():
            fill = self._theme.white_piece if piece.color == Color.WHITE else self._theme.black_piece
            outline = self._theme.black_piece if piece.color == Color.WHITE else self._theme.white_piece
            item = PieceItem(piece, sq, t, fill, outline)
            item.setPos(self._piece_pos(item, sq))
            if piece.piece_type == PieceType.KING and piece.color in self._king_rotation:
                item.setRotation(self._king_rotation[piece.color])
            self.addItem(item)
            self._piece_items[sq] = item

    def animate_and_sync(
        self,
        move: Move,
        new_board: Board,
        duration_ms: int,
        *,
        on_done: Callable[[], None] | None = None,
    ) -> None:
        """Slide the moving piece to its destination, then full-sync.

        Falls back to an instant sync when *duration_ms* is 0 or there is no
        piece on the origin square.
        """
        self.stop_animation()

        item = self._piece_items.get(move.origin)
        if duration_ms <= 0 or item is None:
            self._board = new_board
            self._sync_pieces()
            if on_done:
                on_done()
            return

        # ── Remove captured piece visually before animating ──────────────
        captured_sq = move.destination
        if (
            item.piece.piece_type == PieceType.PAWN
            and move.origin.col != move.destination.col
            and move.destination not in self._piece_items
            and item.piece.color is not None
        ):
            captured_sq = Square(
                move.destination.row - PAWN_DIRECTION[item.piece.color],
                move.destination.col,
            )
        cap = self._piece_items.pop(captured_sq, None)
        if cap is not None:
            self.removeItem(cap)

        # ── Snap castling rook to its destination instantly ──────────────
        col_step = move.destination.col - move.origin.col
        if item.piece.piece_type == PieceType.KING and abs(col_step) == 2:
            rook_from = Square(move.origin.row, 7 if col_step > 0 else 0)
            rook_to = Square(move.origin.row, 5 if col_step > 0 else 3)
            rook_item = self._piece_items.pop(rook_from, None)
            if rook_item is not None:
                rook_item.setPos(self._piece_pos(rook_item, rook_to))
                rook_item.square = rook_to
                self._piece_items[rook_to] = rook_item

        # ── Animate main piece ───────────────────────────────────────────
        del self._piece_items[move.origin]
        self._piece_items[move.destination] = item
        item.square = move.destination
        item.setZValue(2)

        anim = QVariantAnimation(self)
        anim.setDuration(duration_ms)
        anim.setStartValue(item.pos())
        anim.setEndValue(self._piece_pos(item, move.destination))
        anim.setEasingCurve(QEasingCurve.Type.OutCubic)
        anim.valueChanged.connect(lambda value: item.setPos(value))
        anim.finished.connect(self._finish_animation)

        self._pending_board = new_board
        self._anim_done = on_done
        self._active_anim = anim
        anim.start(QAbstractAnimation.DeletionPolicy.DeleteWhenStopped)

    def is_animating(self) -> bool:
        return self._active_anim is not None

    def stop_animation(self) -> None:
        """Jump a running animation to its end state."""
        anim = self._active_anim
        if anim is None:
            return
        anim.finished.disconnect(self._finish_animation)
        anim.stop()
        self._finish_animation()

    def _finish_animation(self) -> None:
        self._active_anim = None
        if self._pending_board is not None:
            self._board = self._pending_board
            self._pending_board = None
        self._sync_pieces()
        done, self._anim_done = self._anim_done, None
        if done:
            done()

    # ── Helpers ──────────────────────────────────────────────────────────

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    def _visual_coords(self, sq: Square) -> tuple[int, int]:
        """Board square → visual (column, row)."""
        if self._flipped:
            return 7 - sq.col, 7 - sq.row
        return sq.col, sq.row

    def _piece_pos(self, item: PieceItem, sq: Square) -> QPointF:
        t = self.TILE
        vc, vr = self._visual_coords(sq)
        dx, dy = item.tile_offset()
        return QPointF(vc * t + dx, vr * t + dy)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vc, vr = self._visual_coords(sq)
        rect = QGraphicsRectItem(vc * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
