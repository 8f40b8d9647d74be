"""Command handlers for user registration and board creation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from corkboard.domain.model import Board, NewUser, PublicUser
from corkboard.domain.users import sanitize
from corkboard.interfaces.id_generator import IdGenerator
from corkboard.interfaces.password_hasher import PasswordHasher
from corkboard.interfaces.unit_of_work import AbstractUnitOfWork
from corkboard.service_layer import commands
from corkboard.service_layer.validation import validate

logger = logging.getLogger(__name__)


def register_user(
    cmd: commands.RegisterUser,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
    hasher: PasswordHasher,
) -> PublicUser:
    """Register a new user and return its public projection.

    Raises:
        ValidationError: If the input breaks any registration rule.
        DuplicateUserError: If a concurrent registration took the username
            or email after validation passed.
    """
    props = sanitize(cmd.as_props())

    with uow:
        validate(uow.users, props)
        user = NewUser(
            id=id_generator.new_id(),
            username=str(props["username"]).lower(),
            email=str(props["email"]).lower(),
            credentials=hasher.hash(str(props["password"])),
        )
        record = uow.users.add(user)
        uow.commit()

    logger.info("Registered user %s (#%d)", record.id, record.index)
    return record.public()


def create_board(
    cmd: commands.CreateBoard,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
) -> Board:
    """Create a board owned by `cmd.user_id`.

    The board row and its ownership link are committed together.

    Raises:
        UnknownUserError: If `cmd.user_id` does not reference a user. Nothing
            is persisted in that case.
    """
    board = Board(id=id_generator.new_id(), title=cmd.title)

    with uow:
        uow.boards.add(board, owner_id=cmd.user_id)
        uow.commit()

    logger.info("Created board %s for user %s", board.id, cmd.user_id)
    return board


COMMAND_HANDLERS: dict[type, Callable[..., Any]] = {
    commands.RegisterUser: register_user,
    commands.CreateBoard: create_board,
}
