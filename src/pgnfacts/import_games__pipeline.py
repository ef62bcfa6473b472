"""Stream a PGN archive into the relational store."""

from __future__ import annotations

from pgnfacts.accumulate_games import accumulate_games
from pgnfacts.config import Settings
from pgnfacts.db.build_store import build_store
from pgnfacts.ImportReport import ImportReport
from pgnfacts.iter_pgn_events import iter_pgn_events
from pgnfacts.open_pgn_stream import open_pgn_stream
from pgnfacts.ports.position_sink import PositionSink
from pgnfacts.ResumeTracker import ResumeTracker
from pgnfacts.utils.logger import get_logger
from pgnfacts.write_game__pipeline import write_game

logger = get_logger(__name__)


def _maybe_log_progress(report: ImportReport, interval: int) -> None:
    if report.games_seen % interval == 0:
        logger.info("Finished parsing game number: %s", report.games_seen)


def import_into_sink(sink: PositionSink, settings: Settings) -> ImportReport:
    """Import ``settings.input_path`` into an already opened sink.

    Games already committed by an earlier run over the same input are read
    and discarded; the first uncommitted game is imported next.
    """
    layout = settings.encoding_layout()
    sink.ensure_schema()
    tracker = ResumeTracker(cursor=sink.count_games())
    if tracker.cursor:
        logger.info("Resuming after %s committed games", tracker.cursor)
    report = ImportReport()
    with open_pgn_stream(settings.input_path) as handle:
        records = accumulate_games(iter_pgn_events(handle), settings.excluded_headers)
        for record in records:
            if not tracker.admit(record):
                report.games_skipped += 1
            else:
                written = write_game(sink, record, layout, settings.rating_mode)
                if written is None:
                    report.games_failed += 1
                else:
                    report.games_imported += 1
                    report.positions_written += written
            report.games_seen = tracker.seen
            _maybe_log_progress(report, settings.progress_interval)
            if settings.max_games is not None and report.games_seen >= settings.max_games:
                logger.info("Stopping after %s games", report.games_seen)
                break
    logger.info("Import finished: %s", report.summary())
    return report


def import_games(settings: Settings) -> ImportReport:
    """Open the configured store and import the configured PGN input."""
    with build_store(settings) as sink:
        return import_into_sink(sink, settings)
