from __future__ import annotations

from pgnfacts.config import Settings
from pgnfacts.db.base_store import BaseStore
from pgnfacts.db.duckdb_store import DuckDbStore
from pgnfacts.db.sqlite_store import SqliteStore
from pgnfacts.errors import ConfigError

_STORES: dict[str, type[BaseStore]] = {
    "sqlite": SqliteStore,
    "duckdb": DuckDbStore,
}


def build_store(settings: Settings) -> BaseStore:
    """Return an unopened store for the configured backend and output path."""
    backend = settings.resolved_backend
    store_cls = _STORES.get(backend)
    if store_cls is None:
        raise ConfigError(f"Unknown store backend: {backend}")
    return store_cls(settings.output_path, relaxed_durability=settings.relaxed_durability)
