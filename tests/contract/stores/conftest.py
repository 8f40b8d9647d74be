"""Fixtures for user/board store contract tests.

Stores are exercised through a unit of work, which is how the application
uses them: each ``with uow:`` block is one transaction.

Provided fixtures
-----------------
- **uow**: Parametrized over every backend; returns a fresh, empty
  `AbstractUnitOfWork`. Postgres cases are skipped without Docker.
- **make_uow_factory**: Like `uow` but limited to backends where separate
  units of work can run concurrently against one database.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from corkboard.adapters.unit_of_work import InMemoryUnitOfWork, SqlAlchemyUnitOfWork
from corkboard.interfaces.unit_of_work import AbstractUnitOfWork


@pytest.fixture(params=["memory", "sql_memory", "sql_file", "postgres"])
def uow(request: pytest.FixtureRequest) -> AbstractUnitOfWork:
    """Return a fresh unit of work for the requested backend.

    Current params:
      - `"memory"` → `InMemoryUnitOfWork`
      - `"sql_memory"` → SQLAlchemy on in-memory SQLite (create_all)
      - `"sql_file"` → SQLAlchemy on a migrated SQLite file
      - `"postgres"` → SQLAlchemy on a migrated Postgres container
    """
    match request.param:
        case "memory":
            return InMemoryUnitOfWork()
        case "sql_memory":
            return SqlAlchemyUnitOfWork(request.getfixturevalue("sqlite_engine_memory"))
        case "sql_file":
            return SqlAlchemyUnitOfWork(request.getfixturevalue("sqlite_engine_file"))
        case "postgres":
            return SqlAlchemyUnitOfWork(request.getfixturevalue("postgres_engine"))
        case _:
            raise ValueError(f"unknown store type: {request.param}")


@pytest.fixture(params=["sql_file", "postgres"])
def make_uow_factory(request: pytest.FixtureRequest) -> Callable[[], AbstractUnitOfWork]:
    """Return a factory of independent units of work sharing one database."""
    match request.param:
        case "sql_file":
            engine = request.getfixturevalue("sqlite_engine_file")
        case "postgres":
            engine = request.getfixturevalue("postgres_engine")
        case _:
            raise ValueError(f"unknown store type: {request.param}")
    return lambda: SqlAlchemyUnitOfWork(engine)
