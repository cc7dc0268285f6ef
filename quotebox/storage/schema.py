"""
schema.py - Schema creation
Single responsibility: define and apply the key/value table.
"""
import logging

from quotebox.storage.connection import get_connection

logger = logging.getLogger(__name__)


SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS kv_store (
    key        TEXT PRIMARY KEY,
    value      TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
"""


def initialize_schema(db_path: str | None = None) -> None:
    """Create tables if missing."""
    try:
        conn = get_connection(db_path)
        try:
            with conn:
                conn.executescript(SCHEMA_SQL)
        finally:
            conn.close()
    except Exception as e:
        logger.error("Failed to initialize database schema: %s", e)
        raise
