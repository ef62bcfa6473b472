"""Rating and outcome labels attached to every position of a game."""

from __future__ import annotations

from pgnfacts.GameRecord import GameRecord
from pgnfacts.utils import to_int

WHITE_WIN_RESULT = "1-0"


def _average_half_up(first: int, second: int) -> int:
    return (first + second + 1) // 2


def resolve_elo(record: GameRecord, rating_mode: str = "average") -> int | None:
    """Return the rating label for a game.

    ``average`` averages the white and black ratings, using the available
    one when the other is missing. ``legacy_white`` reproduces the historical
    datasets, which read the white rating twice and stored 0 when it was
    missing or not a number.
    """
    white = to_int(record.header("WhiteElo"))
    if rating_mode == "legacy_white":
        return white if white is not None else 0
    black = to_int(record.header("BlackElo"))
    if white is None:
        return black
    if black is None:
        return white
    return _average_half_up(white, black)


def resolve_white_won(record: GameRecord) -> bool:
    return record.header("Result") == WHITE_WIN_RESULT
