"""Database handling for dividend_tracker.

Provides a thin wrapper around SQLite used as a small key-value store for
the user's holdings list.
"""

import sqlite3
from datetime import datetime
from typing import Optional

from . import config

SCHEMA = """
CREATE TABLE IF NOT EXISTS storage (
    slot TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    last_updated DATE
);
"""


def get_connection() -> sqlite3.Connection:
    """Return a connection to the SQLite database, creating it if needed."""
    try:
        conn = sqlite3.connect(str(config.DB_PATH))
        conn.row_factory = sqlite3.Row
        conn.executescript(SCHEMA)
        return conn
    except sqlite3.OperationalError as e:
        print(f"Error opening database at {config.DB_PATH}: {e}")
        raise


def load_slot(slot: str) -> Optional[str]:
    """Return the raw value stored under ``slot`` or None."""
    conn = get_connection()
    try:
        cur = conn.execute("SELECT value FROM storage WHERE slot = ?", (slot,))
        row = cur.fetchone()
        return row["value"] if row else None
    finally:
        conn.close()


def save_slot(slot: str, value: str) -> None:
    """Insert or replace the value stored under ``slot``."""
    conn = get_connection()
    try:
        conn.execute(
            "INSERT OR REPLACE INTO storage (slot, value, last_updated) VALUES (?,?,?)",
            (slot, value, datetime.utcnow().isoformat()),
        )
        conn.commit()
    finally:
        conn.close()


def delete_slot(slot: str) -> None:
    conn = get_connection()
    try:
        conn.execute("DELETE FROM storage WHERE slot = ?", (slot,))
        conn.commit()
    finally:
        conn.close()
