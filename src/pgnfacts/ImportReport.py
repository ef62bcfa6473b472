from dataclasses import dataclass


@dataclass
class ImportReport:
    """Counters for one import run."""

    games_seen: int = 0
    games_skipped: int = 0
    games_imported: int = 0
    games_failed: int = 0
    positions_written: int = 0

    def summary(self) -> str:
        return (
            f"games seen={self.games_seen} skipped={self.games_skipped} "
            f"imported={self.games_imported} failed={self.games_failed} "
            f"positions={self.positions_written}"
        )
