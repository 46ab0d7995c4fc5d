"""SQLite storage for polls and their options, with soft deletion."""

from __future__ import annotations

import sqlite3
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from estudos.polls.models import Poll, PollOption

DEFAULT_DB_PATH = "polls.db"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS polls (
    id INTEGER PRIMARY KEY AUTOINCREMENT, title TEXT, start_date TEXT, end_date TEXT,
    status TEXT, created_at TEXT, updated_at TEXT, deleted_at TEXT
);
CREATE INDEX IF NOT EXISTS idx_polls_deleted_at ON polls (deleted_at);
CREATE TABLE IF NOT EXISTS poll_options (
    id INTEGER PRIMARY KEY AUTOINCREMENT, poll_id INTEGER, description TEXT,
    votes INTEGER, created_at TEXT, updated_at TEXT, deleted_at TEXT
);
CREATE INDEX IF NOT EXISTS idx_poll_options_deleted_at ON poll_options (deleted_at);
"""

_POLL_FIELDS = ("title", "start_date", "end_date", "status", "created_at", "updated_at")
_OPTION_FIELDS = ("poll_id", "description", "votes", "created_at", "updated_at")
_OPTIONS_SQL = f"SELECT id, {', '.join(_OPTION_FIELDS)} FROM poll_options"


class PollNotFound(LookupError):
    """No live poll has the requested id."""

    def __init__(self, poll_id: Any) -> None:
        super().__init__(f"poll not found: {poll_id}")
        self.poll_id = poll_id


class OptionNotFound(LookupError):
    """The poll has no live option with the requested id."""

    def __init__(self, poll_id: Any, option_id: Any) -> None:
        super().__init__(f"option {option_id} not found in poll {poll_id}")
        self.poll_id = poll_id
        self.option_id = option_id


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _key(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _fields(row: sqlite3.Row) -> dict[str, Any]:
    """Row values, with the stored timestamps parsed back into datetimes."""
    return {key: datetime.fromisoformat(row[key])
            if key.endswith(("_at", "_date")) and row[key] is not None else row[key]
            for key in row.keys()}


class PollStore:
    """Polls kept in an SQLite database file (or ``:memory:``)."""

    def __init__(self, path: str | Path) -> None:
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._lock = threading.Lock()
        self._conn.executescript(_SCHEMA)

    def __enter__(self) -> "PollStore":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _upsert(self, table: str, names: tuple, item: Any, now: datetime,
                touch: bool) -> None:
        if item.created_at is None:
            item.created_at = now
        if touch or item.updated_at is None:
            item.updated_at = now
        values = [v.isoformat() if isinstance(v, datetime) else v
                  for v in (getattr(item, name) for name in names)]
        exists = item.id and self._conn.execute(
            f"SELECT 1 FROM {table} WHERE id = ?", (item.id,)).fetchone()
        if exists:
            self._conn.execute(
                f"UPDATE {table} SET {', '.join(n + ' = ?' for n in names)} WHERE id = ?",
                (*values, item.id))
        else:
            cursor = self._conn.execute(
                f"INSERT INTO {table} (id, {', '.join(names)}) "
                f"VALUES ({', '.join('?' * (len(names) + 1))})",
                (item.id or None, *values))
            item.id = cursor.lastrowid

    def _write(self, poll: Poll, touch: bool) -> Poll:
        now = _now()
        with self._lock, self._conn:
            self._upsert("polls", _POLL_FIELDS, poll, now, touch)
            for option in poll.options:
                option.poll_id = poll.id
                self._upsert("poll_options", _OPTION_FIELDS, option, now, touch)
        return poll

    def create(self, poll: Poll) -> Poll:
        """Insert the poll and its options, filling in ids and timestamps."""
        return self._write(poll, touch=False)

    def save(self, poll: Poll) -> Poll:
        """Write the poll and the options it holds, inserting what is new."""
        return self._write(poll, touch=True)

    def _polls(self, where: str, params: tuple) -> list[Poll]:
        with self._lock:
            rows = self._conn.execute(
                f"SELECT id, {', '.join(_POLL_FIELDS)} FROM polls "
                f"WHERE deleted_at IS NULL {where} ORDER BY id", params).fetchall()
            options = self._conn.execute(
                f"{_OPTIONS_SQL} WHERE deleted_at IS NULL ORDER BY id").fetchall()
        grouped: dict[int, list[PollOption]] = {}
        for row in options:
            grouped.setdefault(row["poll_id"], []).append(PollOption(**_fields(row)))
        return [Poll(**_fields(row), options=grouped.get(row["id"], [])) for row in rows]

    def list_all(self) -> list[Poll]:
        """Every live poll in id order, with its options."""
        return self._polls("", ())

    def get(self, poll_id: Any) -> Poll:
        """Return the live poll with ``poll_id`` and its options."""
        key = _key(poll_id)
        found = [] if key is None else self._polls("AND id = ?", (key,))
        if not found:
            raise PollNotFound(poll_id)
        return found[0]

    def delete(self, poll_id: Any) -> bool:
        """Mark the poll deleted; return whether a live poll was affected."""
        key = _key(poll_id)
        if key is None:
            raise PollNotFound(poll_id)
        with self._lock, self._conn:
            cursor = self._conn.execute(
                "UPDATE polls SET deleted_at = ? WHERE id = ? AND deleted_at IS NULL",
                (_now().isoformat(), key))
        return cursor.rowcount > 0

    def vote(self, poll_id: Any, option_id: Any) -> PollOption:
        """Add one vote to an option of a poll and return the option."""
        poll_key, option_key = _key(poll_id), _key(option_id)
        if poll_key is None or option_key is None:
            raise OptionNotFound(poll_id, option_id)
        with self._lock, self._conn:
            row = self._conn.execute(
                f"{_OPTIONS_SQL} WHERE poll_id = ? AND id = ? AND deleted_at IS NULL",
                (poll_key, option_key)).fetchone()
            if row is None:
                raise OptionNotFound(poll_id, option_id)
            option = PollOption(**_fields(row))
            option.votes += 1
            option.updated_at = _now()
            self._conn.execute(
                "UPDATE poll_options SET votes = ?, updated_at = ? WHERE id = ?",
                (option.votes, option.updated_at.isoformat(), option.id))
        return option

    def close(self) -> None:
        self._conn.close()