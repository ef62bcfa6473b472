"""Fold PGN events into game records."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Iterator
from dataclasses import dataclass, field
from functools import singledispatch

from pgnfacts.config import DEFAULT_EXCLUDED_HEADERS
from pgnfacts.errors import PgnEventOrderError
from pgnfacts.GameRecord import GameRecord
from pgnfacts.pgn_events import GameEnd, GameStart, Header, MoveToken, ReaderError


@dataclass
class _GameBuffer:
    excluded: frozenset[str]
    index: int = 0
    headers: dict[str, str] | None = None
    moves: list[str] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)
    reader_errors: list[str] = field(default_factory=list)

    def require_open(self, what: str) -> dict[str, str]:
        if self.headers is None:
            raise PgnEventOrderError(f"{what} outside of a game")
        return self.headers


@singledispatch
def _apply_event(event: object, buffer: _GameBuffer) -> GameRecord | None:
    raise TypeError(f"Unknown PGN event: {event!r}")


@_apply_event.register
def _apply_game_start(event: GameStart, buffer: _GameBuffer) -> GameRecord | None:
    buffer.headers = {}
    buffer.moves = []
    buffer.comments = []
    buffer.reader_errors = []
    return None


@_apply_event.register
def _apply_header(event: Header, buffer: _GameBuffer) -> GameRecord | None:
    headers = buffer.require_open(f"Header {event.key!r}")
    if event.key not in buffer.excluded:
        headers[event.key] = event.value
    return None


@_apply_event.register
def _apply_move(event: MoveToken, buffer: _GameBuffer) -> GameRecord | None:
    buffer.require_open(f"Move {event.token!r}")
    buffer.moves.append(event.token)
    buffer.comments.append(event.comment)
    return None


@_apply_event.register
def _apply_reader_error(event: ReaderError, buffer: _GameBuffer) -> GameRecord | None:
    buffer.require_open("Reader error")
    buffer.reader_errors.append(event.message)
    return None


@_apply_event.register
def _apply_game_end(event: GameEnd, buffer: _GameBuffer) -> GameRecord | None:
    headers = buffer.require_open("Game end")
    record = GameRecord(
        index=buffer.index,
        headers=headers,
        moves=tuple(buffer.moves),
        comments=tuple(buffer.comments),
        reader_errors=tuple(buffer.reader_errors),
    )
    buffer.index += 1
    buffer.headers = None
    return record


def accumulate_games(
    events: Iterable[object],
    excluded_headers: Collection[str] = DEFAULT_EXCLUDED_HEADERS,
) -> Iterator[GameRecord]:
    """Yield one ``GameRecord`` per ``GameStart``/``GameEnd`` pair.

    Excluded headers are dropped and repeated headers keep the last value.
    A header or move outside of a game raises ``PgnEventOrderError``.
    """
    buffer = _GameBuffer(excluded=frozenset(excluded_headers))
    for event in events:
        record = _apply_event(event, buffer)
        if record is not None:
            yield record


_VULTURE_USED = (
    _apply_game_start,
    _apply_header,
    _apply_move,
    _apply_reader_error,
    _apply_game_end,
)
