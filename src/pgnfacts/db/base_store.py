"""Shared behaviour of the relational store backends."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pgnfacts.db.schema import (
    COUNT_GAMES,
    INSERT_GAME_SUMMARY,
    INSERT_POSITION_FACT,
    INSERT_REPLAY_FAILURE,
    SUMMARY_HEADER_COLUMNS,
)
from pgnfacts.errors import StoreError, StoreWriteError
from pgnfacts.FactRow import FactRow
from pgnfacts.GameRecord import GameRecord
from pgnfacts.utils.logger import get_logger

logger = get_logger(__name__)


def moves_to_json(moves: tuple[str, ...] | list[str]) -> str:
    """Serialize SAN moves as a JSON array, preserving order."""
    return json.dumps(list(moves))


def summary_params(record: GameRecord) -> tuple[str | None, ...]:
    """Return the summary insert parameters; unknown headers are dropped."""
    return (
        *(record.header(column) for column in SUMMARY_HEADER_COLUMNS),
        moves_to_json(record.moves),
    )


class BaseStore:
    """Base class for the SQLite and DuckDB stores.

    Subclasses provide the driver: ``_connect``, ``_insert_returning_id``,
    ``schema`` and ``driver_errors``.
    """

    backend = "base"
    schema: tuple[str, ...] = ()
    driver_errors: tuple[type[BaseException], ...] = ()

    def __init__(self, path: Path | str, *, relaxed_durability: bool = True) -> None:
        self.path = Path(path)
        self.relaxed_durability = relaxed_durability
        self._conn: Any = None
        self._active = False

    def _connect(self) -> Any:
        raise NotImplementedError("Subclasses must implement _connect")

    def _configure(self) -> None:
        """Apply backend session settings after connecting."""

    def _insert_returning_id(self, sql: str, params: tuple[object, ...]) -> int:
        raise NotImplementedError("Subclasses must implement _insert_returning_id")

    def open(self) -> BaseStore:
        if self._conn is not None:
            return self
        logger.debug("Opening %s store at %s", self.backend, self.path)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = self._connect()
        except (OSError, *self.driver_errors) as exc:
            raise StoreError(f"Cannot open {self.backend} store at {self.path}: {exc}") from exc
        self._configure()
        return self

    @property
    def connection(self) -> Any:
        if self._conn is None:
            raise StoreError(f"{self.backend} store at {self.path} is not open")
        return self._conn

    def _execute(
        self,
        sql: str,
        params: tuple[object, ...] = (),
        *,
        error_cls: type[Exception] = StoreWriteError,
    ) -> Any:
        try:
            if params:
                return self.connection.execute(sql, params)
            return self.connection.execute(sql)
        except self.driver_errors as exc:
            raise error_cls(f"{self.backend} statement failed: {exc}") from exc

    def ensure_schema(self) -> None:
        for statement in self.schema:
            self._execute(statement, error_cls=StoreError)

    def count_games(self) -> int:
        row = self._execute(COUNT_GAMES, error_cls=StoreError).fetchone()
        return int(row[0]) if row else 0

    def begin(self) -> None:
        if self._active:
            return
        self._execute("BEGIN TRANSACTION")
        self._active = True

    def commit(self) -> None:
        if not self._active:
            return
        self._execute("COMMIT")
        self._active = False

    def rollback(self) -> None:
        if not self._active:
            return
        self._active = False
        self._execute("ROLLBACK")

    def write_game_summary(self, record: GameRecord) -> int:
        return self._insert_returning_id(INSERT_GAME_SUMMARY, summary_params(record))

    def write_fact_row(self, row: FactRow) -> None:
        self._execute(
            INSERT_POSITION_FACT,
            (row.site, row.position_fen, row.position_binary, row.elo, row.white_won),
        )

    def write_replay_failure(
        self,
        game_id: int,
        ply: int | None,
        token: str | None,
        error: str,
    ) -> None:
        self._execute(INSERT_REPLAY_FAILURE, (game_id, ply, token, error))

    def close(self) -> None:
        if self._conn is None:
            return
        if self._active:
            self.rollback()
        self._conn.close()
        self._conn = None

    def __enter__(self) -> BaseStore:
        return self.open()

    def __exit__(self, *exc_info: object) -> None:
        self.close()
