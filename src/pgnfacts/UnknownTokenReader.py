"""Line reader that keeps unrecognised movetext visible to the PGN visitor."""

from __future__ import annotations

import re
from collections import deque
from typing import TextIO

import chess.pgn

# A null-move spelling: matched as a SAN token by the reader, never a legal move.
UNKNOWN_TOKEN_PLACEHOLDER = "@@@@"

# Text the movetext grammar skips on purpose: move numbers, check marks and
# en passant suffixes.
_IGNORED_WORD = re.compile(r"(?:\d+\.+|\.+|[+#]+|e\.p\.)+")
_WORD = re.compile(r"\S+")


class UnknownTokenReader:
    """Wrap a PGN text handle for ``chess.pgn.read_game``.

    The python-chess movetext scanner silently drops words that do not look
    like a move, a comment, a NAG or a result, so a corrupted token such as
    ``Qh9`` would vanish from the game. This reader finds those words on the
    mainline, queues them in ``unknown_tokens`` and hands the scanner a
    null-move placeholder in their place; the visitor swaps the queued word
    back in when it sees the placeholder.

    Comments and variations are tracked the same way the scanner tracks them,
    so words inside them are left alone. The queue is reset at every blank or
    header line, which is where games start and end.
    """

    def __init__(self, handle: TextIO) -> None:
        self.handle = handle
        self.unknown_tokens: deque[str] = deque()
        self._in_comment = False
        self._variation_depth = 0
        self._mainline_moves = 0

    def readline(self) -> str:
        line = self.handle.readline()
        if self._in_comment:
            return self._close_comment(line)
        stripped = line.lstrip("\ufeff")
        if not stripped.strip() or stripped.startswith("["):
            self._reset()
            return line
        if stripped.startswith(("%", ";")):
            return line
        return self._scan(line)

    def _reset(self) -> None:
        self.unknown_tokens.clear()
        self._variation_depth = 0
        self._mainline_moves = 0

    def _close_comment(self, line: str) -> str:
        close = line.find("}")
        if close < 0:
            return line
        self._in_comment = False
        return line[: close + 1] + self._scan(line[close + 1 :])

    def _scan(self, text: str) -> str:
        pieces: list[str] = []
        last = 0
        for match in chess.pgn.MOVETEXT_REGEX.finditer(text):
            pieces.append(self._flag_unknown(text[last : match.start()]))
            last = match.end()
            token = match.group(0)
            if token.startswith("{"):
                close = token.find("}")
                if close < 0:
                    self._in_comment = True
                    pieces.append(token)
                    return "".join(pieces)
                pieces.append(token[: close + 1])
                pieces.append(self._scan(token[close + 1 :]))
                return "".join(pieces)
            if token.startswith(";"):
                pieces.append(token)
                return "".join(pieces)
            self._track(token, is_move=match.group(1) is not None)
            pieces.append(token)
        pieces.append(self._flag_unknown(text[last:]))
        return "".join(pieces)

    def _track(self, token: str, is_move: bool) -> None:
        if token == "(":
            if self._variation_depth:
                self._variation_depth += 1
            elif self._mainline_moves:
                self._variation_depth = 1
        elif token == ")":
            if self._variation_depth:
                self._variation_depth -= 1
        elif is_move and not self._variation_depth:
            self._mainline_moves += 1
            if token == UNKNOWN_TOKEN_PLACEHOLDER:
                self.unknown_tokens.append(token)

    def _flag_unknown(self, gap: str) -> str:
        if self._variation_depth or not gap.strip():
            return gap
        return _WORD.sub(self._replace_word, gap)

    def _replace_word(self, match: re.Match[str]) -> str:
        word = match.group(0)
        if _IGNORED_WORD.fullmatch(word):
            return word
        self.unknown_tokens.append(word)
        self._mainline_moves += 1
        return f" {UNKNOWN_TOKEN_PLACEHOLDER} "
