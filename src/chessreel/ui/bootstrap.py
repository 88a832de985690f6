"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import random
import sys
from typing import TYPE_CHECKING

from chessreel.settings import ViewerSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from chessreel.ui.styles.theme import APP_STYLE

    app.setApplicationName("chessreel")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(settings: ViewerSettings, argv: list[str] | None = None) -> int:
    """Create the window, load the first game and run the Qt event loop."""
    from PyQt6.QtWidgets import QApplication

    from chessreel.game.library import GameLibrary
    from chessreel.ui.viewer_window import ViewerWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    library = GameLibrary(settings.games_dir, random.Random(settings.seed))
    window = ViewerWindow(settings, library)
    if not window.load_next_game():
        _LOGGER.warning("No playable game found in %s", settings.games_dir)
        return 1

    if settings.fullscreen:
        window.showFullScreen()
    else:
        window.show()

    return app.exec()
