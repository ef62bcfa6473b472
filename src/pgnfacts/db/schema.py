"""Table definitions and statements shared by the store backends."""

from __future__ import annotations

GAME_SUMMARY_TABLE = "game_summary"
POSITION_FACT_TABLE = "position_fact"
REPLAY_FAILURE_TABLE = "replay_failure"

SUMMARY_HEADER_COLUMNS = (
    "Event",
    "Site",
    "White",
    "Black",
    "Result",
    "UTCDate",
    "UTCTime",
    "WhiteElo",
    "BlackElo",
    "WhiteRatingDiff",
    "BlackRatingDiff",
    "ECO",
    "Opening",
    "TimeControl",
    "Termination",
)
SUMMARY_COLUMNS = (*SUMMARY_HEADER_COLUMNS, "Moves")
FACT_COLUMNS = ("Site", "PositionFen", "PositionBinary", "Elo", "WhiteWon")
FAILURE_COLUMNS = ("GameId", "Ply", "Token", "Error")

_SUMMARY_COLUMN_DDL = ",\n    ".join(f"{column} TEXT" for column in SUMMARY_COLUMNS)

SQLITE_SCHEMA = (
    f"""
CREATE TABLE IF NOT EXISTS {GAME_SUMMARY_TABLE} (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    {_SUMMARY_COLUMN_DDL}
);
""",
    f"""
CREATE TABLE IF NOT EXISTS {POSITION_FACT_TABLE} (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    Site TEXT,
    PositionFen TEXT,
    PositionBinary BLOB,
    Elo INTEGER,
    WhiteWon BOOLEAN
);
""",
    f"""
CREATE TABLE IF NOT EXISTS {REPLAY_FAILURE_TABLE} (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    GameId INTEGER REFERENCES {GAME_SUMMARY_TABLE}(id),
    Ply INTEGER,
    Token TEXT,
    Error TEXT
);
""",
)

DUCKDB_SCHEMA = (
    f"CREATE SEQUENCE IF NOT EXISTS {GAME_SUMMARY_TABLE}_id_seq START 1;",
    f"CREATE SEQUENCE IF NOT EXISTS {POSITION_FACT_TABLE}_id_seq START 1;",
    f"CREATE SEQUENCE IF NOT EXISTS {REPLAY_FAILURE_TABLE}_id_seq START 1;",
    f"""
CREATE TABLE IF NOT EXISTS {GAME_SUMMARY_TABLE} (
    id BIGINT PRIMARY KEY DEFAULT nextval('{GAME_SUMMARY_TABLE}_id_seq'),
    {_SUMMARY_COLUMN_DDL}
);
""",
    f"""
CREATE TABLE IF NOT EXISTS {POSITION_FACT_TABLE} (
    id BIGINT PRIMARY KEY DEFAULT nextval('{POSITION_FACT_TABLE}_id_seq'),
    Site TEXT,
    PositionFen TEXT,
    PositionBinary BLOB,
    Elo INTEGER,
    WhiteWon BOOLEAN
);
""",
    f"""
CREATE TABLE IF NOT EXISTS {REPLAY_FAILURE_TABLE} (
    id BIGINT PRIMARY KEY DEFAULT nextval('{REPLAY_FAILURE_TABLE}_id_seq'),
    GameId BIGINT,
    Ply INTEGER,
    Token TEXT,
    Error TEXT
);
""",
)


def _insert_sql(table: str, columns: tuple[str, ...]) -> str:
    placeholders = ", ".join("?" for _ in columns)
    return f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({placeholders})"


INSERT_GAME_SUMMARY = _insert_sql(GAME_SUMMARY_TABLE, SUMMARY_COLUMNS)
INSERT_POSITION_FACT = _insert_sql(POSITION_FACT_TABLE, FACT_COLUMNS)
INSERT_REPLAY_FAILURE = _insert_sql(REPLAY_FAILURE_TABLE, FAILURE_COLUMNS)
COUNT_GAMES = f"SELECT COUNT(*) FROM {GAME_SUMMARY_TABLE}"
