"""PGN tokenizing and game loading.

Turns raw PGN text into :class:`GameRecord` objects whose ``moves`` are clean
SAN tokens: comments, variations, move numbers, NAGs and ``!``/``?``
annotations are removed, and the move list ends at the first result token.
"""

from __future__ import annotations

import logging
import re

from chessreel.core.notation.models import GameRecord
from chessreel.core.notation.tags import (
    RESULT_TOKENS,
    extract_year,
    game_result_from_pgn,
    is_result_token,
    last_name,
    pgn_result_token,
)

__all__ = [
    "extract_san_token",
    "extract_year",
    "game_result_from_pgn",
    "is_result_token",
    "last_name",
    "parse_pgn_game",
    "parse_pgn_games",
    "pgn_result_token",
    "strip_movetext",
    "tokenize_movetext",
]

_LOGGER = logging.getLogger(__name__)

_PGN_HEADER_RE = re.compile(r'^\[(\w+)\s+"((?:[^"\\]|\\.)*)"\]\s*$')
_MOVE_NUMBER_RE = re.compile(r"^\d+\.+")


def strip_movetext(movetext: str) -> str:
    """Remove ``{...}`` and ``;`` comments and ``(...)`` variations."""
    out: list[str] = []
    variation_depth = 0
    idx = 0
    total = len(movetext)

    while idx < total:
        ch = movetext[idx]

        if ch == "{":
            end = movetext.find("}", idx + 1)
            idx = total if end < 0 else end + 1
            out.append(" ")
            continue

        if ch == ";":
            end = movetext.find("\n", idx + 1)
            idx = total if end < 0 else end
            continue

        if ch == "(":
            variation_depth += 1
            idx += 1
            out.append(" ")
            continue

        if ch == ")":
            variation_depth = max(0, variation_depth - 1)
            idx += 1
            out.append(" ")
            continue

        if variation_depth == 0:
            out.append(ch)
        idx += 1

    return "".join(out)


def extract_san_token(raw: str) -> str | None:
    """Clean one whitespace-delimited word of movetext.

    ``"12.e4"`` → ``"e4"``, ``"3..."`` → ``None``, ``"Nf3!?"`` → ``"Nf3"``,
    ``"$14"`` → ``None``.  Result tokens pass through unchanged.
    """
    if is_result_token(raw):
        return raw
    if raw.startswith("$") and raw[1:].isdigit():
        return None

    token = _MOVE_NUMBER_RE.sub("", raw, count=1).lstrip(".")
    for mark in "!?":
        cut = token.find(mark)
        if cut >= 0:
            token = token[:cut]
    return token or None


def tokenize_movetext(movetext: str) -> tuple[list[str], str | None]:
    """Split movetext into SAN tokens.

    Returns the tokens and the result token that ended them, or ``None`` if
    the text ran out first.
    """
    tokens: list[str] = []
    for raw in strip_movetext(movetext).split():
        token = extract_san_token(raw)
        if token is None:
            continue
        if is_result_token(token):
            return tokens, token
        tokens.append(token)
    return tokens, None


def _parse_header(line: str) -> tuple[str, str] | None:
    match = _PGN_HEADER_RE.match(line)
    if match is None:
        _LOGGER.debug("Skipping malformed PGN header line: %s", line)
        return None
    key, raw_value = match.groups()
    return key, raw_value.replace('\\"', '"').replace("\\\\", "\\")


def _build_record(
    headers: dict[str, str],
    move_lines: list[str],
    source: str | None,
) -> GameRecord | None:
    moves, movetext_result = tokenize_movetext("\n".join(move_lines))
    if not moves:
        return None

    result_token = movetext_result
    if result_token is None:
        header_result = headers.get("Result")
        result_token = header_result if header_result in RESULT_TOKENS else "*"

    return GameRecord(
        moves=moves,
        white=headers.get("White") or "White",
        black=headers.get("Black") or "Black",
        year=extract_year(headers.get("Date", "")),
        result_token=result_token,
        headers=headers,
        source=source,
    )


def parse_pgn_games(pgn_text: str, source: str | None = None) -> list[GameRecord]:
    """Parse every game in a (possibly multi-game) PGN document.

    A tag line that follows movetext starts a new game.  Games without a
    single move token are dropped.
    """
    games: list[GameRecord] = []
    headers: dict[str, str] = {}
    move_lines: list[str] = []

    def flush() -> None:
        record = _build_record(headers, move_lines, source)
        if record is not None:
            games.append(record)

    in_comment = False
    for raw_line in pgn_text.splitlines():
        line = raw_line.strip()
        if not line:
            if in_comment:
                _LOGGER.warning("Unterminated comment in PGN movetext, closing it at blank line")
                in_comment = False
            continue
        if line.startswith("%"):
            continue

        # A '[' inside a multi-line brace comment is not a tag.
        if not in_comment and line.startswith("["):
            if move_lines:
                flush()
                headers = {}
                move_lines = []
            parsed = _parse_header(line)
            if parsed is not None:
                headers[parsed[0]] = parsed[1]
            continue

        move_lines.append(line)
        in_comment = _ends_inside_comment(line, in_comment)

    flush()
    return games


def parse_pgn_game(pgn_text: str) -> GameRecord | None:
    """First game of *pgn_text*, or ``None`` if it holds no moves."""
    games = parse_pgn_games(pgn_text)
    return games[0] if games else None


def _ends_inside_comment(line: str, in_comment: bool) -> bool:
    for ch in line:
        if in_comment:
            if ch == "}":
                in_comment = False
        elif ch == "{":
            in_comment = True
        elif ch == ";":
            break
    return in_comment
