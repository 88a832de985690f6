"""Viewer configuration."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path

BOARD_THEMES: tuple[str, ...] = ("Classic", "Blue", "Green")


@dataclass
class ViewerSettings:
    """All user-configurable settings.

    Durations are in milliseconds.
    """

    # Games
    games_dir: Path = field(default_factory=lambda: Path("games"))
    seed: int | None = None

    # Timing
    move_delay_ms: int = 5000
    animation_ms: int = 300
    game_over_pause_ms: int = 10000
    abort_pause_ms: int = 2000
    king_flip_ms: int = 800

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    fullscreen: bool = False

    def __post_init__(self) -> None:
        self.games_dir = Path(self.games_dir)
        for f in fields(self):
            if f.name.endswith("_ms") and getattr(self, f.name) < 0:
                raise ValueError(f"{f.name} must not be negative")
        if self.board_theme not in BOARD_THEMES:
            raise ValueError(f"Unknown board theme: {self.board_theme!r}")
