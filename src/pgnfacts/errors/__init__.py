"""Custom error types used in pgnfacts."""

from __future__ import annotations

from collections.abc import Sequence


class PgnFactsError(Exception):
    """Base class for all pgnfacts errors."""


class ConfigError(PgnFactsError, ValueError):
    """Invalid configuration value."""


class PgnEventOrderError(PgnFactsError):
    """A PGN event arrived outside of a game."""


class StoreError(PgnFactsError):
    """Fatal store failure: the store cannot be opened or its schema created."""


class StoreWriteError(PgnFactsError):
    """A single write against the store failed while importing a game."""


class ReplayError(PgnFactsError):
    """A move token could not be parsed or applied to the current board.

    Attributes:
        ply: 1-based index of the failing move.
        token: The SAN token that failed.
        moves: The full move list of the game.
    """

    def __init__(self, ply: int, token: str, moves: Sequence[str], reason: str) -> None:
        super().__init__(f"Cannot apply move {ply} ({token!r}): {reason}")
        self.ply = ply
        self.token = token
        self.moves = tuple(moves)
        self.reason = reason


class UnreadableGameError(PgnFactsError):
    """The PGN reader reported a problem setting up the game, so it cannot be replayed."""

    def __init__(self, reasons: Sequence[str]) -> None:
        super().__init__(f"Unreadable game: {'; '.join(reasons)}")
        self.reasons = tuple(reasons)
