"""In-memory user and board stores.

The stores share an `InMemoryTables` instance, which plays the role of the
database. They enforce the same uniqueness and ownership rules as the
relational schema so contract tests can run against either family.

Note: not thread-safe; intended for single-threaded tests and demos.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from corkboard.domain.model import Board, NewUser, UserRecord
from corkboard.interfaces.stores import (
    LOOKUP_FIELDS,
    BoardStore,
    DuplicateUserError,
    UnknownUserError,
    UserStore,
)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass
class InMemoryTables:
    """Rows of the ``users``, ``boards`` and ``users_boards`` tables."""

    users: dict[str, UserRecord] = field(default_factory=dict)  # by id
    boards: dict[str, Board] = field(default_factory=dict)  # by id
    owners: dict[str, str] = field(default_factory=dict)  # board id -> user id
    next_index: int = 1

    def copy(self) -> InMemoryTables:
        """Return an independent snapshot."""
        snapshot = InMemoryTables()
        snapshot.load(self)
        return snapshot

    def load(self, other: InMemoryTables) -> None:
        """Replace this instance's rows with a copy of `other`'s."""
        self.users = dict(other.users)
        self.boards = dict(other.boards)
        self.owners = dict(other.owners)
        self.next_index = other.next_index


class InMemoryUserStore(UserStore):
    """UserStore over `InMemoryTables`."""

    def __init__(self, tables: InMemoryTables, clock: Clock = utcnow):
        self.tables = tables
        self._clock = clock

    def exists(self, field: str, value: str) -> bool:
        return self.get_by(field, value) is not None

    def get_by(self, field: str, value: str) -> UserRecord | None:
        if field not in LOOKUP_FIELDS:
            raise ValueError(f"Cannot look users up by {field!r}")
        if field == "id":
            return self.tables.users.get(value)
        for record in self.tables.users.values():
            if getattr(record, field) == value:
                return record
        return None

    def add(self, user: NewUser) -> UserRecord:
        for field in ("id", "username", "email"):
            value = getattr(user, field)
            if self.exists(field, value):
                raise DuplicateUserError(field=field, value=value)

        record = UserRecord(
            id=user.id,
            username=user.username,
            email=user.email,
            hash=user.credentials.hash,
            salt=user.credentials.salt,
            created_at=self._clock(),
            index=self.tables.next_index,
        )
        self.tables.users[record.id] = record
        self.tables.next_index += 1
        return record


class InMemoryBoardStore(BoardStore):
    """BoardStore over `InMemoryTables`."""

    def __init__(self, tables: InMemoryTables):
        self.tables = tables

    def add(self, board: Board, owner_id: str) -> None:
        # checked up front so a failure leaves no orphan board behind
        if owner_id not in self.tables.users:
            raise UnknownUserError(owner_id)
        if board.id in self.tables.boards:
            raise ValueError(f"Board '{board.id}' already exists.")
        self.tables.boards[board.id] = board
        self.tables.owners[board.id] = owner_id

    def get(self, board_id: str) -> Board | None:
        return self.tables.boards.get(board_id)

    def owner_of(self, board_id: str) -> str | None:
        return self.tables.owners.get(board_id)

    def list_for_user(self, user_id: str) -> list[Board]:
        owned = [
            self.tables.boards[board_id]
            for board_id, owner in self.tables.owners.items()
            if owner == user_id
        ]
        return sorted(owned, key=lambda b: (b.title, b.id))
