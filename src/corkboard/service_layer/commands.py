"""Module defining Commands."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class RegisterUser(Command):
    """Command to register a new user.

    Fields hold raw request values. Missing or malformed values are reported
    by the validator, not on construction.
    """

    username: Any = None
    email: Any = None
    password: Any = field(default=None, repr=False)
    confirmation: Any = field(default=None, repr=False)

    @classmethod
    def from_props(cls, props: Mapping[str, Any]) -> RegisterUser:
        """Build the command from a request mapping, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in props.items() if k in names})

    def as_props(self) -> dict[str, Any]:
        """Return the provided fields as a mapping (absent fields omitted)."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(frozen=True)
class CreateBoard(Command):
    """Command to create a board owned by an existing user."""

    user_id: str
    title: str
