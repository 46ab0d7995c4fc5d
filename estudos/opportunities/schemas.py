"""The job opening record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


def _format_time(value: datetime | None) -> str:
    if value is None:
        return "0001-01-01T00:00:00Z"
    return value.isoformat().replace("+00:00", "Z")


@dataclass
class Opening:
    """A job opening together with its bookkeeping fields."""

    role: str = ""
    company: str = ""
    location: str = ""
    remote: bool = False
    link: str = ""
    salary: int = 0
    id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation of the opening."""
        return {
            "ID": self.id,
            "CreatedAt": _format_time(self.created_at),
            "UpdatedAt": _format_time(self.updated_at),
            "DeletedAt": None if self.deleted_at is None else _format_time(self.deleted_at),
            "Role": self.role,
            "Company": self.company,
            "Location": self.location,
            "Remote": self.remote,
            "Link": self.link,
            "Salary": self.salary,
        }