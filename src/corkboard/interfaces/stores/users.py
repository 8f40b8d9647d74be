"""Interface for the ``users`` table."""

from __future__ import annotations

import abc

from corkboard.domain.model import NewUser, UserRecord

#: Columns that identify a single user.
LOOKUP_FIELDS = frozenset({"id", "username", "email"})

#: Every column of a stored user, in table order.
USER_FIELDS = ("id", "username", "email", "hash", "salt", "created_at", "index")


class UserStore(abc.ABC):
    """Point lookups and inserts on users."""

    @abc.abstractmethod
    def exists(self, field: str, value: str) -> bool:
        """Return True if a user row has `value` in column `field`.

        Args:
            field: One of `LOOKUP_FIELDS`.
            value: Exact value to match.
        """

    @abc.abstractmethod
    def get_by(self, field: str, value: str) -> UserRecord | None:
        """Return the user whose `field` equals `value`, or None.

        Args:
            field: One of `LOOKUP_FIELDS`.
            value: Exact value to match.
        """

    @abc.abstractmethod
    def add(self, user: NewUser) -> UserRecord:
        """Insert a new user and return the stored row.

        The store assigns `created_at` and the next `index`.

        Raises:
            DuplicateUserError: If the id, username or email is already stored.
        """
