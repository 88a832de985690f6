"""PieceItem — a chess piece drawn as a Unicode glyph."""

from __future__ import annotations

from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsItem, QGraphicsSimpleTextItem

from chessreel.core.piece import Piece
from chessreel.core.types import Square


class PieceItem(QGraphicsSimpleTextItem):
    """A single chess piece on the board.

    Stores its logical *square*; rotates about its own centre so a king can
    be toppled in place.
    """

    _GLYPH_RATIO = 0.78

    def __init__(
        self,
        piece: Piece,
        square: Square,
        tile_size: int,
        fill: QColor,
        outline: QColor,
    ) -> None:
        super().__init__(piece.symbol)
        self.piece = piece
        self.square = square
        self._tile_size = tile_size

        self.setBrush(QBrush(fill))
        pen = QPen(outline)
        pen.setWidthF(1.0)
        self.setPen(pen)
        self.setCacheMode(QGraphicsItem.CacheMode.NoCache)
        self.setZValue(1)
        self.set_tile_size(tile_size)

    def set_tile_size(self, size: int) -> None:
        """Update tile size and re-centre the glyph."""
        self._tile_size = size
        font = QFont("DejaVu Sans")
        font.setPixelSize(max(int(size * self._GLYPH_RATIO), 1))
        self.setFont(font)
        bounds = self.boundingRect()
        self.setTransformOriginPoint(bounds.center())

    def tile_offset(self) -> tuple[float, float]:
        """Offset that centres the glyph inside its tile."""
        bounds = self.boundingRect()
        return (
            (self._tile_size - bounds.width()) / 2.0,
            (self._tile_size - bounds.height()) / 2.0,
        )
