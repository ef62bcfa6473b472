"""Replay a game's SAN tokens against a fresh board."""

from __future__ import annotations

from collections.abc import Iterator

import chess

from pgnfacts.errors import ReplayError, UnreadableGameError
from pgnfacts.GameRecord import GameRecord

_ZERO_CASTLING = {"0-0": "O-O", "0-0-0": "O-O-O"}


def _normalize_san(token: str) -> str:
    stripped = token.rstrip("+#")
    suffix = token[len(stripped) :]
    return _ZERO_CASTLING.get(stripped, stripped) + suffix


def replay_positions(record: GameRecord) -> Iterator[tuple[int, chess.Board]]:
    """Yield ``(ply, board)`` after each move, ply counting from 1.

    The same board object is yielded each time and mutated by the next move,
    so consumers must finish with a position before advancing.

    Raises:
        ReplayError: when a token is not a legal move in the current position.
        UnreadableGameError: when the reader reported errors for the game.
    """
    if record.reader_errors:
        raise UnreadableGameError(record.reader_errors)
    board = chess.Board()
    for ply, token in enumerate(record.moves, start=1):
        try:
            move = board.parse_san(_normalize_san(token))
        except ValueError as exc:
            raise ReplayError(ply, token, record.moves, str(exc) or type(exc).__name__) from exc
        if not move:
            raise ReplayError(ply, token, record.moves, "null move")
        board.push(move)
        yield ply, board
