"""Forward-only PGN event source."""

from __future__ import annotations

from collections.abc import Iterator
from functools import partial
from typing import TextIO

import chess.pgn

from pgnfacts.pgn_events import PgnEvent
from pgnfacts.PgnEventVisitor import PgnEventVisitor
from pgnfacts.UnknownTokenReader import UnknownTokenReader


def iter_pgn_events(handle: TextIO) -> Iterator[PgnEvent]:
    """Yield the tagged events of every game in ``handle``, in input order."""
    reader = UnknownTokenReader(handle)
    visitor = partial(PgnEventVisitor, reader.unknown_tokens)
    while True:
        events = chess.pgn.read_game(reader, Visitor=visitor)  # type: ignore[arg-type]
        if events is None:
            return
        yield from events
