"""DuckDB store."""

from __future__ import annotations

import duckdb

from pgnfacts.db.base_store import BaseStore
from pgnfacts.db.schema import DUCKDB_SCHEMA
from pgnfacts.errors import StoreWriteError


class DuckDbStore(BaseStore):
    backend = "duckdb"
    schema = DUCKDB_SCHEMA
    driver_errors = (duckdb.Error,)

    def _connect(self) -> duckdb.DuckDBPyConnection:
        return duckdb.connect(str(self.path))

    def _insert_returning_id(self, sql: str, params: tuple[object, ...]) -> int:
        row = self._execute(f"{sql} RETURNING id", params).fetchone()
        if not row:
            raise StoreWriteError("duckdb insert returned no id")
        return int(row[0])
