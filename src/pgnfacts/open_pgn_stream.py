"""Open a PGN archive as a text stream."""

from __future__ import annotations

import bz2
import gzip
import io
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

import zstandard as zstd

from pgnfacts.utils.logger import get_logger

logger = get_logger(__name__)


@contextmanager
def open_pgn_stream(path: Path) -> Iterator[TextIO]:
    """Yield a UTF-8 text stream over a plain, ``.gz``, ``.bz2`` or ``.zst`` PGN file."""
    suffix = path.suffix.lower()
    logger.debug("Opening PGN input %s", path)
    if suffix == ".zst":
        with (
            open(path, "rb") as fh,
            zstd.ZstdDecompressor().stream_reader(fh) as reader,
            io.TextIOWrapper(reader, encoding="utf-8", errors="replace", newline="\n") as text,
        ):
            yield text
        return
    if suffix == ".gz":
        with gzip.open(path, "rt", encoding="utf-8", errors="replace") as text:
            yield text
        return
    if suffix == ".bz2":
        with bz2.open(path, "rt", encoding="utf-8", errors="replace") as text:
            yield text
        return
    with open(path, encoding="utf-8", errors="replace") as text:
        yield text
