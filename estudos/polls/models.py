"""Polls, their options, and the status of a poll at a given moment."""

from __future__ import annotations

import enum
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_RFC3339 = re.compile(
    r"(\d{4}-\d{2}-\d{2})[Tt](\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})")


class PollStatus(enum.Enum):
    """Where a poll stands relative to its voting window."""

    ACTIVE = "active"
    NOT_STARTED = "not_started"
    ENDED = "ended"


def _aware(value: datetime | None) -> datetime:
    if value is None:
        return _ZERO_TIME
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def _format_time(value: datetime | None) -> str:
    return _aware(value).isoformat().replace("+00:00", "Z")


def _time(name: str, value: Any) -> datetime:
    match = _RFC3339.fullmatch(value) if isinstance(value, str) else None
    try:
        if match is None:
            raise ValueError("bad format")
        date, clock, fraction, zone = match.groups()
        micro = (fraction or "0")[:6].ljust(6, "0")
        zone = "+00:00" if zone in "Zz" else zone
        return datetime.fromisoformat(f"{date}T{clock}.{micro}{zone}")
    except ValueError:
        raise ValueError(f"{name}: cannot parse {value!r} as RFC 3339 time") from None


def _string(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{name}: expected a string")
    return value


def _int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name}: expected an integer")
    return value


def _uint(name: str, value: Any) -> int:
    if _int(name, value) < 0:
        raise ValueError(f"{name}: expected a non-negative integer")
    return value


def _options(name: str, value: Any) -> list["PollOption"]:
    if not isinstance(value, list):
        raise ValueError(f"{name}: expected an array")
    return [PollOption.from_dict(item) for item in value]


def _apply(target: Any, data: Any, parsers: dict) -> None:
    """Set every field present (and not null) in ``data`` on ``target``."""
    if not isinstance(data, Mapping):
        raise ValueError("expected a JSON object")
    for name, parse in parsers.items():
        if data.get(name) is not None:
            setattr(target, name, parse(name, data[name]))


@dataclass
class PollOption:
    """One answer a poll offers, with its vote count."""

    description: str = ""
    votes: int = 0
    id: int = 0
    poll_id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "poll_id": self.poll_id, "description": self.description,
                "votes": self.votes, "created_at": _format_time(self.created_at),
                "updated_at": _format_time(self.updated_at)}

    @classmethod
    def from_dict(cls, data: Any) -> "PollOption":
        option = cls()
        if data is not None:
            _apply(option, data, {"id": _uint, "poll_id": _uint, "description": _string,
                                  "votes": _int, "created_at": _time, "updated_at": _time})
        return option


@dataclass
class Poll:
    """A poll with a voting window and its options."""

    title: str = ""
    start_date: datetime | None = None
    end_date: datetime | None = None
    options: list[PollOption] = field(default_factory=list)
    status: str = ""
    id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title,
                "start_date": _format_time(self.start_date),
                "end_date": _format_time(self.end_date),
                "options": [option.to_dict() for option in self.options],
                "status": self.status, "created_at": _format_time(self.created_at),
                "updated_at": _format_time(self.updated_at)}

    @classmethod
    def from_dict(cls, data: Any) -> "Poll":
        return cls().update_from_dict(data)

    def update_from_dict(self, data: Any) -> "Poll":
        """Overwrite the fields that ``data`` carries; return the poll."""
        _apply(self, data, {"id": _uint, "title": _string, "start_date": _time,
                            "end_date": _time, "options": _options, "status": _string,
                            "created_at": _time, "updated_at": _time})
        return self


def poll_status(poll: Poll, now: datetime | None = None) -> PollStatus:
    """Return the status of ``poll`` at ``now`` (default: the current time)."""
    moment = _aware(now or datetime.now(timezone.utc))
    start, end = _aware(poll.start_date), _aware(poll.end_date)
    if start < moment < end:
        return PollStatus.ACTIVE
    if moment < start:
        return PollStatus.NOT_STARTED
    return PollStatus.ENDED