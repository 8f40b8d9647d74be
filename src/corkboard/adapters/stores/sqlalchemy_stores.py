"""User and board stores backed by SQLAlchemy Core.

Both stores run on the connection owned by the unit of work and never commit
on their own.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError

from corkboard.adapters.db.dialects import DialectName, UnsupportedDialect
from corkboard.adapters.db.schema import boards, users, users_boards
from corkboard.domain.model import Board, NewUser, UserRecord
from corkboard.interfaces.stores import (
    LOOKUP_FIELDS,
    BoardStore,
    DuplicateUserError,
    UnknownUserError,
    UserStore,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, RowMapping
    from sqlalchemy.sql.dml import Insert

logger = logging.getLogger(__name__)


def _lookup_column(field: str):
    if field not in LOOKUP_FIELDS:
        raise ValueError(f"Cannot look users up by {field!r}")
    return users.c[field]


def _to_record(row: RowMapping) -> UserRecord:
    return UserRecord(
        id=row["id"],
        username=row["username"],
        email=row["email"],
        hash=row["hash"],
        salt=row["salt"],
        created_at=row["created_at"],
        index=int(row["index"]),
    )


class SqlAlchemyUserStore(UserStore):
    """UserStore implementation that supports both Postgres and SQLite."""

    def __init__(self, connection: Connection):
        self.connection = connection
        self.dialect = DialectName.from_sqlalchemy(connection)

    # --- lookups ---

    def exists(self, field: str, value: str) -> bool:
        column = _lookup_column(field)
        stmt = select(users.c.id).where(column == value).limit(1)
        return self.connection.execute(stmt).first() is not None

    def get_by(self, field: str, value: str) -> UserRecord | None:
        column = _lookup_column(field)
        if not (row := self.connection.execute(select(users).where(column == value)).first()):
            return None
        return _to_record(row._mapping)  # pylint: disable=protected-access

    # --- add: no-throw insert + decide outcome via reads ---

    def add(self, user: NewUser) -> UserRecord:
        result = self.connection.execute(self._build_no_throw_insert(user))

        if result.rowcount == 1 and (stored := self.get_by("id", user.id)):
            return stored

        # Nothing inserted: one of the unique columns already holds the value.
        for field in ("id", "username", "email"):
            value = getattr(user, field)
            if self.exists(field, value):
                logger.debug("Insert of user %s lost on %s", user.id, field)
                raise DuplicateUserError(field=field, value=value)

        msg = "add(): insert failed but no conflicting rows found"  # pragma: no cover
        raise RuntimeError(msg)  # pragma: no cover

    def _build_no_throw_insert(self, user: NewUser) -> Insert:
        values = {
            "id": user.id,
            "username": user.username,
            "email": user.email,
            "hash": user.credentials.hash,
            "salt": user.credentials.salt,
        }
        if self.dialect is DialectName.POSTGRES:
            return pg_insert(users).values(**values).on_conflict_do_nothing()
        if self.dialect is DialectName.SQLITE:
            return sqlite_insert(users).values(**values).on_conflict_do_nothing()

        msg = f"Unsupported dialect: {self.dialect}"  # pragma: no cover
        raise UnsupportedDialect(msg)  # pragma: no cover


class SqlAlchemyBoardStore(BoardStore):
    """BoardStore writing ``boards`` and ``users_boards`` on one connection."""

    def __init__(self, connection: Connection):
        self.connection = connection

    def add(self, board: Board, owner_id: str) -> None:
        self.connection.execute(insert(boards).values(id=board.id, title=board.title))
        try:
            self.connection.execute(
                insert(users_boards).values(user_id=owner_id, board_id=board.id)
            )
        except IntegrityError as e:
            # the board row was just inserted, so only the user FK can fail
            raise UnknownUserError(owner_id) from e

    def get(self, board_id: str) -> Board | None:
        stmt = select(boards.c.id, boards.c.title).where(boards.c.id == board_id)
        if not (row := self.connection.execute(stmt).first()):
            return None
        return Board(id=row.id, title=row.title)

    def owner_of(self, board_id: str) -> str | None:
        stmt = select(users_boards.c.user_id).where(users_boards.c.board_id == board_id)
        return self.connection.execute(stmt).scalar_one_or_none()

    def list_for_user(self, user_id: str) -> list[Board]:
        stmt = (
            select(boards.c.id, boards.c.title)
            .join(users_boards, users_boards.c.board_id == boards.c.id)
            .where(users_boards.c.user_id == user_id)
            .order_by(boards.c.title, boards.c.id)
        )
        return [Board(id=row.id, title=row.title) for row in self.connection.execute(stmt)]
