"""User and board store adapters.

Two families are provided: SQLAlchemy Core stores bound to a single
connection (durable, used in production) and in-memory stores over plain
dicts (fast, used by unit tests and demos).
"""

from .memory import InMemoryBoardStore, InMemoryTables, InMemoryUserStore
from .sqlalchemy_stores import SqlAlchemyBoardStore, SqlAlchemyUserStore

__all__ = [
    "InMemoryBoardStore",
    "InMemoryTables",
    "InMemoryUserStore",
    "SqlAlchemyBoardStore",
    "SqlAlchemyUserStore",
]
