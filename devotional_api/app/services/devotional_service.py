"""
Service layer for devotional entries.

The service owns the ``devotionals`` table and implements list, get,
create, partial update and soft delete.  Soft-deleted rows (those with a
non-null ``deleted_at``) are invisible to every operation but are never
removed from the table.

All queries use parameterized statements.  Store failures are logged
and re-raised as ``StoreError`` so the API layer can answer 500 without
leaking database details; missing rows raise ``DevotionalNotFound``.
"""

from __future__ import annotations

import logging
import re
import sqlite3
from datetime import datetime, timezone
from typing import Callable, List, Optional

from devotional_api.app.core.db import Database
from devotional_api.app.core.errors import DevotionalNotFound, StoreError
from devotional_api.app.core.sql import UpdateBuilder
from devotional_api.app.schemas.devotional import (
    DevotionalCreate,
    DevotionalRead,
    DevotionalUpdate,
)

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"
UPDATABLE_COLUMNS = ("verse", "content", "updated_at")
MAX_ID = 2 ** 63 - 1
ID_PATTERN = re.compile(r"-?[0-9]+")


def utc_now() -> str:
    """Current UTC time in the text format stored in the database."""
    return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)


def parse_id(raw_id) -> Optional[int]:
    """Interpret a path parameter as a devotional id.

    Only plain ASCII decimal literals are accepted; anything else (signs
    other than a leading minus, underscores, whitespace, non-ASCII digits)
    returns ``None`` and can never match a stored row.
    """
    if not isinstance(raw_id, str):
        raw_id = str(raw_id)
    if ID_PATTERN.fullmatch(raw_id) is None:
        return None
    pk = int(raw_id)
    # SQLite integers are signed 64-bit
    return pk if -MAX_ID <= pk <= MAX_ID else None


class DevotionalService:
    """CRUD operations on devotionals backed by a :class:`Database`.

    ``created_at`` is filled in by the column default; ``clock`` stamps
    ``updated_at`` and ``deleted_at``.  Methods are synchronous because
    ``sqlite3`` blocks; FastAPI runs the calling endpoints in its threadpool.
    """

    def __init__(self, db: Database, clock: Callable[[], str] = utc_now) -> None:
        self.db = db
        self.clock = clock

    def list_devotionals(self) -> List[DevotionalRead]:
        """Return live devotionals, newest first."""
        try:
            with self.db.cursor() as cursor:
                rows = cursor.execute(
                    """
                    SELECT * FROM devotionals
                    WHERE deleted_at IS NULL
                    ORDER BY created_at DESC, id DESC
                    """
                ).fetchall()
        except sqlite3.Error as exc:
            logger.exception("Failed to list devotionals")
            raise StoreError("Failed to retrieve devotionals.") from exc
        return [self._row_to_read(row) for row in rows]

    def get_devotional(self, devotional_id) -> DevotionalRead:
        """Retrieve a single live devotional by its ID."""
        pk = parse_id(devotional_id)
        if pk is None:
            raise DevotionalNotFound()
        try:
            with self.db.cursor() as cursor:
                row = self._fetch_live(cursor, pk)
        except sqlite3.Error as exc:
            logger.exception("Failed to fetch devotional %s", pk)
            raise StoreError("Failed to retrieve devotional.") from exc
        if row is None:
            raise DevotionalNotFound()
        return self._row_to_read(row)

    def create_devotional(self, data: DevotionalCreate) -> int:
        """Insert a new devotional and return its ID."""
        try:
            with self.db.cursor() as cursor:
                cursor.execute(
                    "INSERT INTO devotionals (verse, content) VALUES (?, ?)",
                    (data.verse, data.content),
                )
                devotional_id = cursor.lastrowid
        except sqlite3.Error as exc:
            logger.exception("Failed to create devotional")
            raise StoreError("Failed to create devotional.") from exc
        logger.info("Created devotional %s", devotional_id)
        return devotional_id

    def update_devotional(self, devotional_id, data: DevotionalUpdate) -> DevotionalRead:
        """Apply a partial update to a live devotional.

        Only supplied fields change; ``updated_at`` is always refreshed.
        Raises ``DevotionalNotFound`` when the row is missing or deleted.
        """
        pk = parse_id(devotional_id)
        if pk is None:
            raise DevotionalNotFound()

        builder = UpdateBuilder("devotionals", UPDATABLE_COLUMNS)
        for column, value in data.changes().items():
            builder.set(column, value)
        builder.set("updated_at", self.clock())
        sql, params = builder.render("id = ? AND deleted_at IS NULL", (pk,))

        try:
            with self.db.cursor() as cursor:
                cursor.execute(sql, params)
                if cursor.rowcount == 0:
                    raise DevotionalNotFound()
                row = self._fetch_live(cursor, pk)
        except sqlite3.Error as exc:
            logger.exception("Failed to update devotional %s", pk)
            raise StoreError("Failed to update devotional.") from exc
        logger.info("Updated devotional %s (%s)", pk, ", ".join(builder.columns))
        return self._row_to_read(row)

    def delete_devotional(self, devotional_id) -> None:
        """Soft delete a live devotional by stamping ``deleted_at``."""
        pk = parse_id(devotional_id)
        if pk is None:
            raise DevotionalNotFound()
        try:
            with self.db.cursor() as cursor:
                cursor.execute(
                    "UPDATE devotionals SET deleted_at = ? WHERE id = ? AND deleted_at IS NULL",
                    (self.clock(), pk),
                )
                affected = cursor.rowcount
        except sqlite3.Error as exc:
            logger.exception("Failed to delete devotional %s", pk)
            raise StoreError("Failed to delete devotional.") from exc
        if not affected:
            raise DevotionalNotFound()
        logger.info("Deleted devotional %s", pk)

    @staticmethod
    def _fetch_live(cursor: sqlite3.Cursor, pk: int) -> Optional[sqlite3.Row]:
        return cursor.execute(
            "SELECT * FROM devotionals WHERE id = ? AND deleted_at IS NULL",
            (pk,),
        ).fetchone()

    @staticmethod
    def _row_to_read(row: sqlite3.Row) -> DevotionalRead:
        """Convert a database row to a DevotionalRead schema instance."""
        return DevotionalRead(
            id=row["id"],
            verse=row["verse"],
            content=row["content"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
            deleted_at=row["deleted_at"],
        )
