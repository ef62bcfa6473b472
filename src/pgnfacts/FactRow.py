from dataclasses import dataclass


@dataclass(frozen=True)
class FactRow:
    """One encoded position with its labels."""

    site: str | None
    position_fen: str
    position_binary: bytes
    elo: int | None
    white_won: bool
