"""Game layer — PGN library and the playback state machine.

Quick start::

    from chessreel.game import GameLibrary, PlaybackController

    ctrl = PlaybackController()
    game = GameLibrary("games").pick_game()
    if game is not None:
        ctrl.load(game)
        while ctrl.advance() is not None:
            pass
"""

from chessreel.game.library import GameLibrary
from chessreel.game.playback import PlaybackController, PlaybackEvents, PlaybackPhase

__all__ = [
    "GameLibrary",
    "PlaybackController",
    "PlaybackEvents",
    "PlaybackPhase",
]
