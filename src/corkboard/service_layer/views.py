"""Read-side operations.

Each function opens its own unit of work and only reads. Lookups return
plain dicts (the shape an HTTP layer serializes) and ``None`` when nothing
matches.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from corkboard.domain.model import Credentials, PublicUser, UserRecord
from corkboard.interfaces.password_hasher import PasswordHasher
from corkboard.interfaces.stores import USER_FIELDS
from corkboard.interfaces.unit_of_work import AbstractUnitOfWork

from . import validation

PUBLIC_FIELDS = ("id", "username")
EXTRA_FIELDS = tuple(f for f in USER_FIELDS if f not in PUBLIC_FIELDS)


def _check_extra_fields(extra_fields: Sequence[str]) -> None:
    if unknown := [f for f in extra_fields if f not in EXTRA_FIELDS]:
        raise ValueError(f"Unknown user fields: {unknown}; expected some of {EXTRA_FIELDS}")


def _project(record: UserRecord, extra_fields: Sequence[str] = ()) -> dict[str, Any]:
    projected = record.public().as_dict()
    projected.update({f: getattr(record, f) for f in extra_fields})
    return projected


def check_availability(uow: AbstractUnitOfWork, field: str, value: str) -> bool:
    """Return True if `value` is not yet used as `field` ("username" or "email")."""
    with uow:
        return validation.check_availability(uow.users, field, value)


def validate(uow: AbstractUnitOfWork, props: Mapping[str, Any]) -> None:
    """Validate registration input; raises `ValidationError` on failure."""
    with uow:
        validation.validate(uow.users, props)


def find_by_username(
    uow: AbstractUnitOfWork,
    username: str,
    extra_fields: Sequence[str] | None = None,
) -> dict[str, Any] | None:
    """Return ``{"id", "username"}`` plus any requested `extra_fields`, or None.

    Args:
        uow: Unit of work to read through.
        username: Username to look up (case-insensitive).
        extra_fields: Additional columns to include, e.g. ``["hash", "salt"]``.

    Raises:
        ValueError: If an extra field is not a user column.
    """
    extra_fields = extra_fields or ()
    _check_extra_fields(extra_fields)
    with uow:
        record = uow.users.get_by("username", username.lower())
    if record is None:
        return None
    return _project(record, extra_fields)


def find_by_id(uow: AbstractUnitOfWork, user_id: str) -> dict[str, Any] | None:
    """Return ``{"id", "username"}`` for `user_id`, or None."""
    with uow:
        record = uow.users.get_by("id", user_id)
    if record is None:
        return None
    return _project(record)


def boards_for_user(uow: AbstractUnitOfWork, user_id: str) -> list[dict[str, str]]:
    """Return the boards owned by `user_id` as ``{"id", "title"}`` dicts."""
    with uow:
        return [board.as_dict() for board in uow.boards.list_for_user(user_id)]


def authenticate(
    uow: AbstractUnitOfWork, hasher: PasswordHasher, username: str, password: str
) -> PublicUser | None:
    """Return the user's public projection if `password` matches, else None."""
    with uow:
        record = uow.users.get_by("username", username.lower())
    if record is None:
        return None
    if not hasher.verify(str(password), Credentials(hash=record.hash, salt=record.salt)):
        return None
    return record.public()
