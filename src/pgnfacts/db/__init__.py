"""Relational store backends."""

from pgnfacts.db.base_store import BaseStore
from pgnfacts.db.build_store import build_store
from pgnfacts.db.duckdb_store import DuckDbStore
from pgnfacts.db.sqlite_store import SqliteStore

__all__ = ["BaseStore", "DuckDbStore", "SqliteStore", "build_store"]
