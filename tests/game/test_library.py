"""Tests for GameLibrary."""

import random
from pathlib import Path

import pytest

from chessreel.game.library import GameLibrary

GAME_A = '[White "Anand, Viswanathan"]\n[Black "Topalov"]\n\n1. e4 e5 1-0\n'
GAME_B = '[White "Kramnik"]\n[Black "Leko"]\n\n1. d4 d5 *\n'


@pytest.fixture
def games_dir(tmp_path: Path) -> Path:
    (tmp_path / "one.pgn").write_text(GAME_A + "\n" + GAME_B, encoding="utf-8")
    (tmp_path / "notes.txt").write_text("not a game", encoding="utf-8")
    return tmp_path


class TestPgnFiles:
    def test_only_pgn_files(self, games_dir: Path) -> None:
        (games_dir / "UPPER.PGN").write_text(GAME_B, encoding="utf-8")
        names = [p.name for p in GameLibrary(games_dir).pgn_files()]
        assert names == ["UPPER.PGN", "one.pgn"]

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(NotADirectoryError):
            GameLibrary(tmp_path / "nope").pgn_files()


class TestLoadFile:
    def test_loads_all_games(self, games_dir: Path) -> None:
        games = GameLibrary(games_dir).load_file(games_dir / "one.pgn")
        assert [g.white for g in games] == ["Anand, Viswanathan", "Kramnik"]
        assert games[0].source == str(games_dir / "one.pgn")

    def test_unreadable_file(self, games_dir: Path) -> None:
        assert GameLibrary(games_dir).load_file(games_dir / "missing.pgn") == []

    def test_invalid_utf8_replaced(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.pgn"
        path.write_bytes(b'[White "J\xf6rg"]\n\n1. e4 *\n')
        games = GameLibrary(tmp_path).load_file(path)
        assert len(games) == 1
        assert games[0].moves == ["e4"]


class TestPickGame:
    def test_picks_a_game(self, games_dir: Path) -> None:
        library = GameLibrary(games_dir, random.Random(1))
        game = library.pick_game()
        assert game is not None
        assert game.white in ("Anand, Viswanathan", "Kramnik")

    def test_seed_is_reproducible(self, games_dir: Path) -> None:
        first = GameLibrary(games_dir, random.Random(7)).pick_game()
        second = GameLibrary(games_dir, random.Random(7)).pick_game()
        assert first == second

    def test_skips_files_without_games(self, tmp_path: Path) -> None:
        (tmp_path / "a_empty.pgn").write_text('[White "X"]\n', encoding="utf-8")
        (tmp_path / "b_real.pgn").write_text(GAME_B, encoding="utf-8")
        for seed in range(5):
            game = GameLibrary(tmp_path, random.Random(seed)).pick_game()
            assert game is not None
            assert game.white == "Kramnik"

    def test_no_games_at_all(self, tmp_path: Path) -> None:
        (tmp_path / "empty.pgn").write_text("", encoding="utf-8")
        assert GameLibrary(tmp_path).pick_game() is None
