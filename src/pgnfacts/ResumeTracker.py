"""Cursor gate that skips games committed by an earlier run."""

from __future__ import annotations

from dataclasses import dataclass

from pgnfacts.GameRecord import GameRecord


@dataclass
class ResumeTracker:
    """Drop the first ``cursor`` games of the input stream.

    Resuming is only correct when the input keeps its game order between runs.

    Attributes:
        cursor: Number of games already committed when the run started.
        seen: Number of games handed to the tracker so far.
    """

    cursor: int
    seen: int = 0

    def admit(self, record: GameRecord) -> bool:
        """Count ``record`` and return whether it still needs importing."""
        admitted = self.seen >= self.cursor
        self.seen += 1
        return admitted

    @property
    def skipped(self) -> int:
        return min(self.seen, self.cursor)
