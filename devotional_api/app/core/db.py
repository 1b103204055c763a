"""
SQLite store client.

``Database`` wraps the path to an embedded SQLite file.  It is built
once at application startup, kept on ``app.state`` and handed to the
service layer; nothing in the package holds a module-level connection.
Each operation acquires its own connection through :meth:`Database.cursor`,
which commits on success, rolls back on failure and always closes.

``init_schema`` creates the single ``devotionals`` table if it does not
exist yet.  There is no migration history: the schema is created once
and never altered.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import Settings

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS devotionals (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    verse TEXT NOT NULL,
    content TEXT NOT NULL,
    created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%d %H:%M:%f', 'now')),
    updated_at TEXT DEFAULT NULL,
    deleted_at TEXT DEFAULT NULL
);
"""


def resolve_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are used as is; relative paths are resolved against
    the project root (the directory containing ``devotional_api``).
    """
    if os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


class Database:
    """Explicitly constructed handle on the SQLite store."""

    def __init__(self, path: str, busy_timeout: float = 5.0) -> None:
        self.path = path
        self.busy_timeout = busy_timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            resolve_database_path(settings.database_url),
            busy_timeout=settings.db_busy_timeout,
        )

    def connect(self) -> sqlite3.Connection:
        """Open a new connection with rows addressable by column name."""
        conn = sqlite3.connect(self.path, timeout=self.busy_timeout)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor on a fresh connection and release it on exit."""
        conn = self.connect()
        try:
            yield conn.cursor()
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_schema(self) -> bool:
        """Create the ``devotionals`` table if absent.

        Returns ``True`` when the database file did not exist before
        this call.
        """
        created = not os.path.exists(self.path)
        with self.cursor() as cursor:
            cursor.executescript(SCHEMA)
        if created:
            logger.info("Database and all tables created successfully!")
        return created
