"""Unit of Work implementations for corkboard.

`SqlAlchemyUnitOfWork` opens one connection per ``with`` block and hands it
to both stores, so everything done inside the block shares one transaction.
Blocks entered on different threads never share a connection.
`InMemoryUnitOfWork` gives the same commit/rollback semantics over
`InMemoryTables` by working on a snapshot.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from corkboard.adapters.stores import (
    InMemoryBoardStore,
    InMemoryTables,
    InMemoryUserStore,
    SqlAlchemyBoardStore,
    SqlAlchemyUserStore,
)
from corkboard.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work.

    One instance may be shared by every handler and view. The connection and
    stores of an entered block live in thread-local state, so blocks running
    on different threads each get their own connection and transaction.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._local = threading.local()

    @property
    def connection(self) -> Connection:
        """Connection of the block entered on the current thread."""
        return self._local.connection

    @property
    def users(self) -> SqlAlchemyUserStore:  # type: ignore[override]
        return self._local.users

    @property
    def boards(self) -> SqlAlchemyBoardStore:  # type: ignore[override]
        return self._local.boards

    def __enter__(self):
        connection = self.engine.connect()
        self._local.connection = connection
        self._local.users = SqlAlchemyUserStore(connection)
        self._local.boards = SqlAlchemyBoardStore(connection)
        return super().__enter__()

    def __exit__(self, *args):
        try:
            super().__exit__(*args)
        finally:
            self.connection.close()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """In-memory Unit of Work.

    Stores operate on a working copy of `tables`; `commit()` publishes the
    copy and `rollback()` discards it.
    Entered blocks are serialized by a lock, one at a time across threads.

    Attributes:
        tables: The committed state.
        committed: True once `commit()` has been called at least once.
    """

    def __init__(self, tables: InMemoryTables | None = None):
        self.tables = tables if tables is not None else InMemoryTables()
        self._working = self.tables.copy()
        self.users = InMemoryUserStore(self._working)
        self.boards = InMemoryBoardStore(self._working)
        self.committed = False
        self._lock = threading.Lock()

    def __enter__(self):
        self._lock.acquire()
        self._working.load(self.tables)
        return super().__enter__()

    def __exit__(self, *args):
        try:
            super().__exit__(*args)
        finally:
            self._lock.release()

    def commit(self):
        self.tables.load(self._working)
        self.committed = True

    def rollback(self):
        self._working.load(self.tables)
