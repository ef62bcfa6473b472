from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class GameRecord:
    """Headers and mainline moves of one game.

    Attributes:
        index: 0-based position of the game in the input stream.
        headers: Header name to value, excluded headers already dropped.
        moves: SAN tokens in play order.
        comments: Comment following each move, aligned with ``moves``.
        reader_errors: Problems the PGN reader reported while setting up the game.
    """

    index: int
    headers: Mapping[str, str] = field(default_factory=dict)
    moves: tuple[str, ...] = ()
    comments: tuple[str, ...] = ()
    reader_errors: tuple[str, ...] = ()

    def header(self, key: str) -> str | None:
        return self.headers.get(key)
