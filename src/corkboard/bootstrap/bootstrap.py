"""Wire adapters into the message bus and read views."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from corkboard import config
from corkboard.adapters.db.engine import make_engine
from corkboard.adapters.id_generators import ShortIdGenerator, ULIDGenerator, UUIDv4Generator
from corkboard.adapters.password_hashers import Pbkdf2PasswordHasher
from corkboard.adapters.unit_of_work import SqlAlchemyUnitOfWork
from corkboard.interfaces.id_generator import IdGenerator
from corkboard.interfaces.password_hasher import PasswordHasher
from corkboard.interfaces.unit_of_work import AbstractUnitOfWork
from corkboard.service_layer.handlers import COMMAND_HANDLERS
from corkboard.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from corkboard.service_layer.commands import Command


@dataclass(frozen=True)
class AppContainer:
    """Wired application objects handed to entry points.

    `uow` and `hasher` are the same instances the handlers use, so read
    views (`corkboard.service_layer.views`) see the same database.
    """

    message_bus: MessageBus
    uow: AbstractUnitOfWork
    hasher: PasswordHasher


def build_uow(url: str) -> AbstractUnitOfWork:
    """Build a unit of work on a new engine for `url`."""
    return SqlAlchemyUnitOfWork(make_engine(url))


ID_GENERATOR_TYPES: dict[str, type[IdGenerator]] = {
    "short": ShortIdGenerator,
    "ulid": ULIDGenerator,
    "uuid4": UUIDv4Generator,
}


def build_id_generator() -> IdGenerator:
    """Build the id generator named by `CORKBOARD_ID_GENERATOR`."""
    return ID_GENERATOR_TYPES[config.get_id_generator_name()]()


def build_hasher() -> PasswordHasher:
    """Build a PBKDF2 hasher, honoring `CORKBOARD_HASH_ITERATIONS`."""
    if (iterations := config.get_hash_iterations()) is None:
        return Pbkdf2PasswordHasher()
    return Pbkdf2PasswordHasher(iterations=iterations)


def build_message_bus(
    uow: AbstractUnitOfWork,
    command_handlers: dict[type[Command], Callable[..., Any]] | None = None,
    *,
    id_generator: IdGenerator | None = None,
    hasher: PasswordHasher | None = None,
) -> MessageBus:
    """Build a message bus whose handlers receive the given dependencies."""
    dependencies = {
        "uow": uow,
        "id_generator": id_generator or build_id_generator(),
        "hasher": hasher or build_hasher(),
    }
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in (command_handlers or COMMAND_HANDLERS).items()
    }
    return MessageBus(uow, command_handlers=injected_command_handlers)


def bootstrap(
    url: str | None = None,
    *,
    uow: AbstractUnitOfWork | None = None,
    id_generator: IdGenerator | None = None,
    hasher: PasswordHasher | None = None,
) -> AppContainer:
    """Assemble the application.

    Args:
        url: Database URL; defaults to `CORKBOARD_DB_URL`. Ignored when `uow`
            is given.
        uow: Unit of work to use instead of a SQLAlchemy one (e.g. an
            `InMemoryUnitOfWork` in tests).
        id_generator: Id generator for users and boards; defaults to the one
            named by `CORKBOARD_ID_GENERATOR`.
        hasher: Password hasher; defaults to PBKDF2 with
            `CORKBOARD_HASH_ITERATIONS` rounds when that is set.

    Raises:
        DatabaseUrlNotSetError: If neither `url`, `uow` nor `CORKBOARD_DB_URL`
            is provided.
        ConfigError: If a `CORKBOARD_*` setting is invalid.
    """
    if uow is None:
        uow = build_uow(url or config.get_db_url())
    hasher = hasher or build_hasher()
    message_bus = build_message_bus(
        uow, COMMAND_HANDLERS, id_generator=id_generator, hasher=hasher
    )
    return AppContainer(message_bus=message_bus, uow=uow, hasher=hasher)


def inject_dependencies(
    handler: Callable[..., Any], dependencies: Mapping[str, object]
) -> Callable[..., Any]:
    """Bind the dependencies a handler asks for by parameter name."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)
