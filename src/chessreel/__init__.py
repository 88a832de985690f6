"""chessreel — replay recorded chess games from PGN files."""

__version__ = "0.1.0"
