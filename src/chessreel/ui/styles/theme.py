"""Visual theme constants and QSS styles for the viewer."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_check: QColor  # king in check
    last_move_from: QColor  # last move origin
    last_move_to: QColor  # last move destination
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    dim_overlay: QColor  # whole-board veil while paused
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_check=QColor(255, 0, 0, 120),  # red transparent
            last_move_from=QColor(155, 199, 0, 105),  # green
            last_move_to=QColor(155, 199, 0, 105),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
            dim_overlay=QColor(0, 0, 0, 110),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_check=QColor(255, 0, 0, 120),
            last_move_from=QColor(155, 199, 0, 105),
            last_move_to=QColor(155, 199, 0, 105),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
            dim_overlay=QColor(0, 0, 0, 110),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight_check=QColor(255, 0, 0, 120),
            last_move_from=QColor(155, 199, 0, 105),
            last_move_to=QColor(155, 199, 0, 105),
            coord_light=QColor(112, 149, 120),
            coord_dark=QColor(236, 238, 220),
            dim_overlay=QColor(0, 0, 0, 110),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Theme for a settings name, falling back to the default."""
        factory = {
            "Classic": cls.default,
            "Blue": cls.blue,
            "Green": cls.green,
        }.get(name, cls.default)
        return factory()


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #323232;
}

QLabel {
    color: #e6e6e6;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QListWidget {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    font-family: "Adwaita Sans", "Consolas", monospace;
    font-size: 13px;
}

QListWidget::item:selected {
    background: #264f78;
}

QStatusBar {
    background: #2b2b2b;
    color: #a0a0a0;
}
"""
