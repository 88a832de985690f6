"""GameLibrary — PGN file discovery and random game selection."""

from __future__ import annotations

import logging
import random
from pathlib import Path

from chessreel.core.notation.models import GameRecord
from chessreel.core.notation.pgn import parse_pgn_games

_LOGGER = logging.getLogger(__name__)

PGN_SUFFIX = ".pgn"


class GameLibrary:
    """A directory of PGN files to pick games from."""

    __slots__ = ("_games_dir", "_rng")

    def __init__(self, games_dir: Path | str, rng: random.Random | None = None) -> None:
        self._games_dir = Path(games_dir)
        self._rng = rng if rng is not None else random.Random()

    @property
    def games_dir(self) -> Path:
        return self._games_dir

    @property
    def rng(self) -> random.Random:
        return self._rng

    def pgn_files(self) -> list[Path]:
        """PGN files in the games directory, sorted by name."""
        if not self._games_dir.is_dir():
            raise NotADirectoryError(f"PGN directory not found: {self._games_dir}")
        return sorted(
            path
            for path in self._games_dir.iterdir()
            if path.is_file() and path.suffix.lower() == PGN_SUFFIX
        )

    def load_file(self, path: Path) -> list[GameRecord]:
        """All games in *path*; an unreadable file yields no games."""
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            _LOGGER.warning("Failed to open %s: %s", path, exc)
            return []
        games = parse_pgn_games(text, source=str(path))
        if not games:
            _LOGGER.warning("No games found in %s", path)
        return games

    def pick_game(self) -> GameRecord | None:
        """A random game from a random file.

        Files without games are skipped; ``None`` if no file has any.
        """
        files = self.pgn_files()
        self._rng.shuffle(files)
        for path in files:
            games = self.load_file(path)
            if not games:
                continue
            index = self._rng.randrange(len(games))
            game = games[index]
            _LOGGER.info(
                "Picked game %d/%d from %s: %s vs %s",
                index + 1,
                len(games),
                path.name,
                game.white,
                game.black,
            )
            return game
        return None
