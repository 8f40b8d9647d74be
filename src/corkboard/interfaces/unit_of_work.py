"""Unit of Work interface for corkboard.

Defines the AbstractUnitOfWork contract: a context-managed unit of work
exposing the user and board stores, with abstract commit/rollback methods.
"""

from __future__ import annotations

import abc

from .stores import BoardStore, UserStore


class AbstractUnitOfWork(abc.ABC):
    """Contract for a transactional unit of work."""

    users: UserStore
    boards: BoardStore

    def __enter__(self) -> AbstractUnitOfWork:
        """Enter the unit of work context and return the unit.

        Implementations may acquire transactional resources here.
        """
        return self

    def __exit__(self, *args):
        """Exit the unit of work context.

        Default behavior is to roll back on exit; committed work is unaffected.
        """
        self.rollback()

    @abc.abstractmethod
    def commit(self):
        """Persist changes and finalize the transaction."""

    @abc.abstractmethod
    def rollback(self):
        """Revert changes and clean up transactional resources."""
