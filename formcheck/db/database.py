"""
SQLite database connection management and schema initialization.

Provides a singleton connection to the key-value database,
auto-creates the table on first use.
"""

import sqlite3
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

_connection: sqlite3.Connection | None = None

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT (datetime('now'))
);
"""


def get_db(db_path: str = None) -> sqlite3.Connection:
    """Get or create the singleton database connection."""
    global _connection
    if _connection is not None:
        return _connection

    if db_path is None:
        from formcheck.config.settings import DB_PATH
        db_path = DB_PATH

    if db_path != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    _connection = sqlite3.connect(db_path, check_same_thread=False)
    _connection.row_factory = sqlite3.Row
    if db_path != ":memory:":
        _connection.execute("PRAGMA journal_mode=WAL")

    init_db(_connection)
    logger.info(f"Database initialized: {db_path}")
    return _connection


def init_db(conn: sqlite3.Connection):
    """Create tables if they don't exist."""
    conn.executescript(SCHEMA_SQL)
    conn.commit()


def close_db():
    """Close the database connection."""
    global _connection
    if _connection is not None:
        _connection.close()
        _connection = None
        logger.info("Database connection closed")
