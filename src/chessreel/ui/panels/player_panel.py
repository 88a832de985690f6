"""PlayerPanel — player names, colour swatches and the game year."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QSizePolicy, QVBoxLayout, QWidget

from chessreel.core.enums import Color

_SWATCH_STYLE: dict[Color, str] = {
    Color.WHITE: "background-color: #e6e6e6; border: 1px solid #1e1e1e;",
    Color.BLACK: "background-color: #141414; border: 1px solid #e6e6e6;",
}


class _PlayerRow(QWidget):
    """Swatch plus name for one side."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        self._swatch = QLabel()
        self._swatch.setFixedSize(16, 16)
        layout.addWidget(self._swatch)

        self._name = QLabel()
        self._name.setFont(QFont("Adwaita Sans", 16, QFont.Weight.Bold))
        self._name.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        layout.addWidget(self._name)

        self.color = Color.WHITE

    def set_player(self, color: Color, name: str) -> None:
        self.color = color
        self._swatch.setStyleSheet(_SWATCH_STYLE[color])
        self._name.setText(name)

    def text(self) -> str:
        return self._name.text()


class PlayerPanel(QWidget):
    """Both players, the side at the top of the board listed first."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._names: dict[Color, str] = {Color.WHITE: "White", Color.BLACK: "Black"}
        self._view_from_white = True

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(8)

        self._year = QLabel()
        self._year.setFont(QFont("Adwaita Sans", 20, QFont.Weight.Bold))
        self._year.setAlignment(Qt.AlignmentFlag.AlignLeft)
        layout.addWidget(self._year)

        self._top = _PlayerRow()
        layout.addWidget(self._top)
        self._bottom = _PlayerRow()
        layout.addWidget(self._bottom)
        self._refresh()

    def set_game(self, white: str, black: str, year: str) -> None:
        self._names = {Color.WHITE: white, Color.BLACK: black}
        self._year.setText(year)
        self._year.setVisible(bool(year))
        self._refresh()

    def set_view_from_white(self, view_from_white: bool) -> None:
        """White sits at the bottom when viewing from white."""
        self._view_from_white = view_from_white
        self._refresh()

    def top_player(self) -> tuple[Color, str]:
        return self._top.color, self._top.text()

    def bottom_player(self) -> tuple[Color, str]:
        return self._bottom.color, self._bottom.text()

    def year_text(self) -> str:
        return self._year.text()

    def _refresh(self) -> None:
        top = Color.BLACK if self._view_from_white else Color.WHITE
        self._top.set_player(top, self._names[top])
        self._bottom.set_player(top.opposite, self._names[top.opposite])
