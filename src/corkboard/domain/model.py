"""Value types shared across corkboard's layers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class FieldViolation:
    """A single failed validation rule."""

    field: str
    message: str

    def as_dict(self) -> dict[str, str]:
        """Return ``{"field": ..., "message": ...}``."""
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True, slots=True)
class Credentials:
    """Password digest and the salt it was derived with."""

    hash: str
    salt: str


@dataclass(frozen=True, slots=True)
class NewUser:
    """A validated user about to be persisted.

    `created_at` and `index` are assigned by the store.
    """

    id: str
    username: str
    email: str
    credentials: Credentials


@dataclass(frozen=True, slots=True)
class UserRecord:
    """A persisted ``users`` row."""

    id: str
    username: str
    email: str
    hash: str
    salt: str
    created_at: datetime
    index: int

    def public(self) -> PublicUser:
        """Return the projection that is safe to hand to a client."""
        return PublicUser(id=self.id, username=self.username)


@dataclass(frozen=True, slots=True)
class PublicUser:
    """The public projection of a user."""

    id: str
    username: str

    def as_dict(self) -> dict[str, str]:
        """Return ``{"id": ..., "username": ...}``."""
        return {"id": self.id, "username": self.username}


@dataclass(frozen=True, slots=True)
class Board:
    """A board. Ownership lives in the ``users_boards`` join table."""

    id: str
    title: str

    def as_dict(self) -> dict[str, str]:
        """Return ``{"id": ..., "title": ...}``."""
        return {"id": self.id, "title": self.title}
