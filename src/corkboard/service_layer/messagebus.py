"""Message bus implementation for handling commands."""

import logging
from collections.abc import Callable
from typing import Any

from corkboard.interfaces.unit_of_work import AbstractUnitOfWork

from .commands import Command

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Exception raised when no handler is found for a command."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """Routes commands to their handlers.

    Handlers are callables taking only the command; their other dependencies
    (unit of work, id generator, hasher) are bound by the bootstrap. The
    handler's return value is passed back to the caller, which is how
    registration hands back the new user's public projection.

    Args:
        uow: The unit of work injected into the handlers, exposed here for
            convenience.
        command_handlers: A mapping of command types to their handlers.
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        command_handlers: dict[type[Command], Callable[..., Any]],
    ) -> None:
        self.uow = uow
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> Any:
        """Dispatch `cmd` to its handler and return the handler's result.

        Raises:
            NoHandlerForCommand: If no handler is found for the command type.
            Exception: Whatever the handler raises, unchanged.
        """
        handler = self._command_handlers.get(type(cmd))
        if handler is None:
            logger.error("No handler found for command %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd)

        handler_name = self._get_handler_name(handler)
        logger.debug("Handling %s with handler %s", type(cmd).__name__, handler_name)
        try:
            return handler(cmd)
        except Exception:  # pylint: disable=broad-except
            logger.exception(
                "Exception handling %s with handler %s",
                type(cmd).__name__,
                handler_name,
            )
            raise

    @staticmethod
    def _get_handler_name(fn: Callable[..., Any]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
