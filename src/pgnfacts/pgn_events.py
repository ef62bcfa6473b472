"""Tagged events emitted by the PGN token source."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameStart:
    """Marks the beginning of a game."""


@dataclass(frozen=True)
class Header:
    key: str
    value: str


@dataclass(frozen=True)
class MoveToken:
    """A raw SAN token from the mainline, with the comment that follows it."""

    token: str
    comment: str = ""


@dataclass(frozen=True)
class ReaderError:
    """The PGN reader could not set up the game, e.g. a bad FEN or Variant header."""

    message: str


@dataclass(frozen=True)
class GameEnd:
    """Marks the end of a game."""


PgnEvent = GameStart | Header | MoveToken | ReaderError | GameEnd
