"""Import one game as a single unit of work."""

from __future__ import annotations

from pgnfacts.db.base_store import moves_to_json
from pgnfacts.encode_position import encode_position
from pgnfacts.EncodingLayout import EncodingLayout
from pgnfacts.errors import ReplayError, StoreError, StoreWriteError, UnreadableGameError
from pgnfacts.FactRow import FactRow
from pgnfacts.GameRecord import GameRecord
from pgnfacts.ports.position_sink import PositionSink
from pgnfacts.replay_positions import replay_positions
from pgnfacts.resolve_elo import resolve_elo, resolve_white_won
from pgnfacts.utils.logger import get_logger

logger = get_logger(__name__)


def _write_positions(
    sink: PositionSink,
    record: GameRecord,
    layout: EncodingLayout,
    rating_mode: str,
) -> int:
    site = record.header("Site")
    elo = resolve_elo(record, rating_mode)
    white_won = resolve_white_won(record)
    written = 0
    for _ply, board in replay_positions(record):
        encoded = encode_position(board, layout)
        sink.write_fact_row(
            FactRow(
                site=site,
                position_fen=board.fen(),
                position_binary=encoded.to_bytes(),
                elo=elo,
                white_won=white_won,
            )
        )
        written += 1
    return written


def _record_failure(
    sink: PositionSink,
    record: GameRecord,
    error: ReplayError | StoreWriteError | UnreadableGameError,
) -> None:
    logger.error("Failed parsing game %s: %s", record.index, error)
    logger.error("%s", moves_to_json(record.moves))
    ply = error.ply if isinstance(error, ReplayError) else None
    token = error.token if isinstance(error, ReplayError) else None
    try:
        sink.rollback()
        sink.begin()
        game_id = sink.write_game_summary(record)
        sink.write_replay_failure(game_id, ply, token, str(error))
        sink.commit()
    except StoreWriteError as exc:
        raise StoreError(f"Cannot record failed game {record.index}: {exc}") from exc
    logger.warning("Resuming parsing after game %s", record.index)


def write_game(
    sink: PositionSink,
    record: GameRecord,
    layout: EncodingLayout,
    rating_mode: str = "average",
) -> int | None:
    """Write the summary and fact rows of ``record`` atomically.

    Returns the number of fact rows written, or ``None`` when the game failed.
    A failed game keeps its summary row plus a failure row and no fact rows,
    so the committed summary count still matches the number of games consumed.

    Raises:
        StoreError: when even the failure record cannot be committed.
    """
    try:
        sink.begin()
        sink.write_game_summary(record)
        written = _write_positions(sink, record, layout, rating_mode)
        sink.commit()
    except (ReplayError, StoreWriteError, UnreadableGameError) as exc:
        _record_failure(sink, record, exc)
        return None
    return written
