"""MovePanel — scrollable list of the game's SAN tokens."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QSizePolicy,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

_BUTTON_STYLE = """
QToolButton {
    background: transparent;
    color: #d4d4d4;
    border: 1px solid transparent;
    border-radius: 4px;
    padding: 2px 8px;
    text-align: left;
    font-family: "AdwaitaMono Nerd Font", "Adwaita Sans", monospace;
    font-size: 13px;
}
QToolButton:hover {
    background: #3c3c3c;
    border-color: #555;
}
QToolButton[activeMove="true"] {
    background: #264f78;
    border-color: #3b79b7;
    color: #f0f6ff;
}
QToolButton[failedMove="true"] {
    color: #e07070;
}
"""


class MovePanel(QWidget):
    """Shows the move tokens two per row and marks the current ply.

    Signals:
        move_clicked(int): 0-based index of the clicked token.
    """

    move_clicked = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._tokens: list[str] = []
        self._move_buttons: dict[int, QToolButton] = {}
        self._active_ply: int | None = None
        self._failed_ply: int | None = None
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel("Moves")
        self._header.setFont(QFont("Adwaita Sans", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._list = QListWidget()
        self._list.setAlternatingRowColors(True)
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        self._list.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        layout.addWidget(self._list)

    # ── Public API ───────────────────────────────────────────────────────

    def set_tokens(self, tokens: list[str]) -> None:
        """Rebuild the list for a new game."""
        self._tokens = list(tokens)
        self._active_ply = None
        self._failed_ply = None
        self._rebuild_list()

    def set_active_ply(self, ply: int | None) -> None:
        """Highlight token *ply* (0-based); ``None`` clears the highlight."""
        self._active_ply = ply
        for move_ply, btn in self._move_buttons.items():
            self._set_button_flag(btn, "activeMove", move_ply == ply)
        if ply is not None and ply in self._move_buttons:
            self._list.scrollToItem(self._list.item(ply // 2))

    def active_ply(self) -> int | None:
        return self._active_ply

    def mark_failed(self, ply: int | None) -> None:
        """Mark the token that could not be decoded."""
        self._failed_ply = ply
        for move_ply, btn in self._move_buttons.items():
            self._set_button_flag(btn, "failedMove", move_ply == ply)

    def token_count(self) -> int:
        return len(self._tokens)

    # ── Internal ─────────────────────────────────────────────────────────

    def _create_move_button(self, text: str, ply: int) -> QToolButton:
        btn = QToolButton()
        btn.setText(text)
        btn.setCursor(Qt.CursorShape.PointingHandCursor)
        btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        btn.setProperty("activeMove", False)
        btn.setProperty("failedMove", False)
        btn.setStyleSheet(_BUTTON_STYLE)
        btn.clicked.connect(
            lambda _checked=False, move_ply=ply: self.move_clicked.emit(move_ply)
        )
        return btn

    @staticmethod
    def _set_button_flag(btn: QToolButton, name: str, value: bool) -> None:
        btn.setProperty(name, value)
        style = btn.style()
        if style is not None:
            style.unpolish(btn)
            style.polish(btn)
        btn.update()

    def _rebuild_list(self) -> None:
        self._list.clear()
        self._move_buttons.clear()
        for move_idx in range(0, len(self._tokens), 2):
            row_widget = QWidget()
            row_layout = QHBoxLayout(row_widget)
            row_layout.setContentsMargins(6, 2, 6, 2)
            row_layout.setSpacing(8)

            num_label = QLabel(f"{move_idx // 2 + 1}.")
            num_label.setFont(QFont("Adwaita Sans", 12))
            num_label.setFixedWidth(36)
            num_label.setAlignment(
                Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
            )
            row_layout.addWidget(num_label)

            for ply in (move_idx, move_idx + 1):
                if ply < len(self._tokens):
                    btn = self._create_move_button(self._tokens[ply], ply)
                    row_layout.addWidget(btn, 1)
                    self._move_buttons[ply] = btn
                else:
                    spacer = QWidget()
                    spacer.setSizePolicy(
                        QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed
                    )
                    row_layout.addWidget(spacer, 1)

            item = QListWidgetItem()
            item.setSizeHint(row_widget.sizeHint())
            self._list.addItem(item)
            self._list.setItemWidget(item, row_widget)
