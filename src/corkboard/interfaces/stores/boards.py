"""Interface for the ``boards`` and ``users_boards`` tables."""

from __future__ import annotations

import abc

from corkboard.domain.model import Board


class BoardStore(abc.ABC):
    """Boards and their ownership links."""

    @abc.abstractmethod
    def add(self, board: Board, owner_id: str) -> None:
        """Insert `board` and link it to the user `owner_id`.

        Both rows belong to the caller's transaction; nothing is visible
        until the unit of work commits.

        Raises:
            UnknownUserError: If `owner_id` does not reference a user.
        """

    @abc.abstractmethod
    def get(self, board_id: str) -> Board | None:
        """Return the board with id `board_id`, or None."""

    @abc.abstractmethod
    def owner_of(self, board_id: str) -> str | None:
        """Return the id of the user owning `board_id`, or None."""

    @abc.abstractmethod
    def list_for_user(self, user_id: str) -> list[Board]:
        """Return the boards owned by `user_id`, ordered by title."""
