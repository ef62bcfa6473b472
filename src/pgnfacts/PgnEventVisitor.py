"""python-chess visitor that records raw PGN tokens as events."""

# pylint: disable=invalid-name

from __future__ import annotations

from collections import deque
from dataclasses import replace

import chess
import chess.pgn

from pgnfacts.pgn_events import GameEnd, GameStart, Header, MoveToken, PgnEvent, ReaderError
from pgnfacts.UnknownTokenReader import UNKNOWN_TOKEN_PLACEHOLDER
from pgnfacts.utils.logger import get_logger

logger = get_logger(__name__)


class PgnEventVisitor(chess.pgn.BaseVisitor[list[PgnEvent]]):
    """Collect the events of one game without interpreting its moves.

    SAN tokens are recorded verbatim and answered with a null move so that
    legality is decided later by the replayer, not by the reader. Variations
    are skipped; only the mainline is reported.

    Words the reader could not scan as moves arrive as a placeholder and are
    replaced by the original text queued in ``unknown_tokens``.
    """

    def __init__(self, unknown_tokens: deque[str] | None = None) -> None:
        self.events: list[PgnEvent] = []
        self.unknown_tokens = unknown_tokens if unknown_tokens is not None else deque()

    def begin_game(self) -> None:
        self.events.append(GameStart())

    def visit_header(self, tagname: str, tagvalue: str) -> None:
        self.events.append(Header(tagname, tagvalue))

    def parse_san(self, board: chess.Board, san: str) -> chess.Move:
        if san == UNKNOWN_TOKEN_PLACEHOLDER and self.unknown_tokens:
            san = self.unknown_tokens.popleft()
        self.events.append(MoveToken(san))
        return chess.Move.null()

    def visit_comment(self, comment: str | list[str]) -> None:
        if not self.events or not isinstance(self.events[-1], MoveToken):
            return
        text = comment if isinstance(comment, str) else " ".join(comment)
        previous = self.events[-1]
        joined = f"{previous.comment} {text}".strip() if previous.comment else text.strip()
        self.events[-1] = replace(previous, comment=joined)

    def begin_variation(self) -> chess.pgn.SkipType:
        return chess.pgn.SKIP

    def end_game(self) -> None:
        self.events.append(GameEnd())

    def handle_error(self, error: Exception) -> None:
        logger.warning("PGN reader error: %s", error)
        self.events.append(ReaderError(str(error) or type(error).__name__))

    def result(self) -> list[PgnEvent]:
        return self.events
