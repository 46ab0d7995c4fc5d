"""SQLite storage for job openings, with soft deletion."""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from estudos.opportunities.logger import get_logger
from estudos.opportunities.schemas import Opening

DEFAULT_DB_PATH = "./db/main.db"

_FIELDS = ("created_at", "updated_at", "deleted_at", "role", "company",
           "location", "remote", "link", "salary")
_SCHEMA = """
CREATE TABLE IF NOT EXISTS openings (
    id INTEGER PRIMARY KEY AUTOINCREMENT, created_at TEXT, updated_at TEXT,
    deleted_at TEXT, role TEXT, company TEXT, location TEXT, remote INTEGER,
    link TEXT, salary INTEGER
);
CREATE INDEX IF NOT EXISTS idx_openings_deleted_at ON openings (deleted_at);
"""


class OpeningNotFound(LookupError):
    """No live opening has the requested id."""

    def __init__(self, opening_id: Any) -> None:
        super().__init__(f"record not found: {opening_id}")
        self.opening_id = opening_id


def _values(opening: Opening) -> tuple:
    return tuple(
        value.isoformat() if isinstance(value, datetime)
        else int(value) if isinstance(value, bool) else value
        for value in (getattr(opening, name) for name in _FIELDS))


def _to_opening(row: sqlite3.Row) -> Opening:
    values = dict(row)
    for key in ("created_at", "updated_at", "deleted_at"):
        if values[key] is not None:
            values[key] = datetime.fromisoformat(values[key])
    values["remote"] = bool(values["remote"])
    return Opening(**values)


class OpeningStore:
    """Openings kept in an SQLite database file (or ``:memory:``)."""

    def __init__(self, path: str | Path) -> None:
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._conn.executescript(_SCHEMA)

    def __enter__(self) -> "OpeningStore":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def create(self, opening: Opening) -> Opening:
        opening.created_at = opening.updated_at = datetime.now(timezone.utc)
        opening.deleted_at = None
        with self._conn:
            cursor = self._conn.execute(
                f"INSERT INTO openings ({', '.join(_FIELDS)}) VALUES ({', '.join('?' * 9)})",
                _values(opening))
        opening.id = cursor.lastrowid
        return opening

    def first(self, opening_id: Any) -> Opening:
        try:
            key = int(opening_id)
        except (TypeError, ValueError):
            raise OpeningNotFound(opening_id) from None
        row = self._conn.execute(
            "SELECT * FROM openings WHERE id = ? AND deleted_at IS NULL", (key,)).fetchone()
        if row is None:
            raise OpeningNotFound(opening_id)
        return _to_opening(row)

    def find_all(self) -> list[Opening]:
        rows = self._conn.execute(
            "SELECT * FROM openings WHERE deleted_at IS NULL ORDER BY id")
        return [_to_opening(row) for row in rows]

    def save(self, opening: Opening) -> Opening:
        if not opening.id:
            return self.create(opening)
        opening.updated_at = datetime.now(timezone.utc)
        opening.created_at = opening.created_at or opening.updated_at
        with self._conn:
            self._conn.execute(
                f"UPDATE openings SET {', '.join(f + ' = ?' for f in _FIELDS)} WHERE id = ?",
                (*_values(opening), opening.id))
        return opening

    def delete(self, opening: Opening) -> Opening:
        """Mark the opening as deleted; it no longer appears in queries."""
        if not opening.id:
            raise ValueError("opening has no primary key")
        opening.deleted_at = datetime.now(timezone.utc)
        with self._conn:
            self._conn.execute(
                "UPDATE openings SET deleted_at = ? WHERE id = ? AND deleted_at IS NULL",
                (opening.deleted_at.isoformat(), opening.id))
        return opening

    def close(self) -> None:
        self._conn.close()


def initialize_sqlite(path: str | Path = DEFAULT_DB_PATH) -> OpeningStore:
    """Create the database file if needed and open a migrated store."""
    logger = get_logger("sqlite")
    db_path = Path(path)
    if not db_path.exists():
        logger.info("database file not found, creating...")
        db_path.parent.mkdir()
        db_path.touch()
    try:
        return OpeningStore(db_path)
    except sqlite3.Error as err:
        logger.errorf("sqlite opening error: %v", err)
        raise