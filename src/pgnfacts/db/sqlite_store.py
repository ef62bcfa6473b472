"""SQLite store, compatible with the historical ``.sqlite`` datasets."""

from __future__ import annotations

import sqlite3

from pgnfacts.db.base_store import BaseStore
from pgnfacts.db.schema import SQLITE_SCHEMA
from pgnfacts.errors import StoreError

RELAXED_DURABILITY_PRAGMAS = (
    "PRAGMA synchronous=OFF",
    "PRAGMA journal_mode=MEMORY",
    "PRAGMA temp_store=MEMORY",
)


class SqliteStore(BaseStore):
    backend = "sqlite"
    schema = SQLITE_SCHEMA
    driver_errors = (sqlite3.Error,)

    def _connect(self) -> sqlite3.Connection:
        # Transactions are managed explicitly, one per game.
        return sqlite3.connect(str(self.path), isolation_level=None)

    def _configure(self) -> None:
        if not self.relaxed_durability:
            return
        for pragma in RELAXED_DURABILITY_PRAGMAS:
            self._execute(pragma, error_cls=StoreError)

    def _insert_returning_id(self, sql: str, params: tuple[object, ...]) -> int:
        cursor = self._execute(sql, params)
        return int(cursor.lastrowid)
