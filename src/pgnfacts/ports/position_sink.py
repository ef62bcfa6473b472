"""Persistent sink port for imported games and positions."""

from __future__ import annotations

from typing import Protocol

from pgnfacts.FactRow import FactRow
from pgnfacts.GameRecord import GameRecord


class PositionSink(Protocol):
    """Store interface consumed by the import pipeline.

    Every write method raises ``StoreWriteError`` on failure; ``ensure_schema``
    and ``count_games`` raise ``StoreError``.
    """

    def ensure_schema(self) -> None:
        """Create the tables if they do not exist."""

    def count_games(self) -> int:
        """Return the number of committed game summary rows."""

    def begin(self) -> None:
        """Start the unit of work for one game."""

    def commit(self) -> None:
        """Commit the active unit of work."""

    def rollback(self) -> None:
        """Discard the active unit of work."""

    def write_game_summary(self, record: GameRecord) -> int:
        """Insert the summary row for a game and return its id."""

    def write_fact_row(self, row: FactRow) -> None:
        """Insert one encoded position."""

    def write_replay_failure(self, game_id: int, ply: int | None, token: str | None, error: str) -> None:
        """Record why a game's positions were not imported."""

    def close(self) -> None:
        """Release the underlying connection."""
