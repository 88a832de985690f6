"""PGN tag-value helpers: result tokens, dates and player names."""

from __future__ import annotations

from chessreel.core.enums import GameResult

RESULT_TOKENS: frozenset[str] = frozenset({"1-0", "0-1", "1/2-1/2", "*"})


def is_result_token(token: str) -> bool:
    """Whether *token* is a game-termination marker rather than a move."""
    return token in RESULT_TOKENS


def pgn_result_token(result: GameResult) -> str:
    """Convert :class:`GameResult` to a PGN result token."""
    if result == GameResult.WHITE_WINS:
        return "1-0"
    if result == GameResult.BLACK_WINS:
        return "0-1"
    if result == GameResult.DRAW:
        return "1/2-1/2"
    return "*"


def game_result_from_pgn(token: str) -> GameResult:
    """Convert PGN result token to :class:`GameResult`."""
    if token == "1-0":
        return GameResult.WHITE_WINS
    if token == "0-1":
        return GameResult.BLACK_WINS
    if token == "1/2-1/2":
        return GameResult.DRAW
    return GameResult.IN_PROGRESS


def extract_year(date: str) -> str:
    """Year of a PGN ``Date`` value (``"1972.07.11"`` → ``"1972"``).

    Returns ``""`` unless the first four characters are digits, so
    ``"????.??.??"`` yields nothing.
    """
    head = date.strip()[:4]
    if len(head) == 4 and head.isdigit():
        return head
    return ""


def last_name(full: str) -> str:
    """Surname from a PGN player tag.

    ``"Fischer, Robert J."`` → ``"Fischer"`` (text before the comma);
    ``"Magnus Carlsen"`` → ``"Carlsen"`` (last word).
    """
    name = full.strip()
    if not name:
        return ""
    if "," in name:
        return name.split(",", 1)[0].strip()
    return name.split()[-1]
