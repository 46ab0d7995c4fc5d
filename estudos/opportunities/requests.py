"""Request bodies for creating and updating openings, with validation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from estudos.opportunities.schemas import Opening

_MALFORMED = "request body is empty or malformed"
_STRINGS = ("role", "company", "location", "link")


class ValidationError(ValueError):
    """A request body failed validation."""


def param_is_required(name: str, type_name: str) -> ValidationError:
    """Return the error for a missing required parameter."""
    return ValidationError(f"param: {name} (type: {type_name}) is required")


def _parse_fields(data: Any) -> dict[str, Any]:
    data = {} if data is None else data
    if not isinstance(data, Mapping):
        raise ValidationError(_MALFORMED)
    checks = {name: (str, "") for name in _STRINGS}
    checks.update(remote=(bool, None), salary=(int, 0))
    fields = {}
    for name, (kind, default) in checks.items():
        value = data.get(name)
        if value is None:
            fields[name] = default
        elif not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
            raise ValidationError(_MALFORMED)
        else:
            fields[name] = value
    return fields


@dataclass
class _OpeningFields:
    role: str = ""
    company: str = ""
    location: str = ""
    remote: bool | None = None
    link: str = ""
    salary: int = 0


class CreateOpeningRequest(_OpeningFields):
    """Body of a request that creates an opening."""

    @classmethod
    def from_json(cls, data: Any) -> "CreateOpeningRequest":
        return cls(**_parse_fields(data))

    def validate(self) -> None:
        if (not self.role and not self.company and not self.location
                and self.remote is None and self.salary <= 0):
            raise ValidationError(_MALFORMED)
        for name in _STRINGS:
            if not getattr(self, name):
                raise param_is_required(name, "string")
        if self.remote is None:
            raise param_is_required("remote", "bool")
        if self.salary <= 0:
            raise param_is_required("salary", "int64")

    def to_opening(self) -> Opening:
        """Validate the request and build the opening it describes."""
        self.validate()
        return Opening(role=self.role, company=self.company, location=self.location,
                       remote=bool(self.remote), link=self.link, salary=self.salary)


class UpdateOpeningRequest(_OpeningFields):
    """Body of a request that changes some fields of an opening."""

    @classmethod
    def from_json(cls, data: Any) -> "UpdateOpeningRequest":
        return cls(**_parse_fields(data))

    def validate(self) -> None:
        if not (self.role or self.company or self.location or self.remote is not None
                or self.link or self.salary > 0):
            raise ValidationError("at least one valid field must be provided")

    def apply(self, opening: Opening) -> Opening:
        """Copy every provided field onto ``opening`` and return it."""
        for name in _STRINGS:
            if getattr(self, name):
                setattr(opening, name, getattr(self, name))
        if self.remote is not None:
            opening.remote = self.remote
        if self.salary > 0:
            opening.salary = self.salary
        return opening