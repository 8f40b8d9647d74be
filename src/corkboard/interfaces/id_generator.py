"""Interface for ID generators."""

import abc


class IdGenerator(abc.ABC):
    """Contract for an ID generator."""

    @abc.abstractmethod
    def new_id(self) -> str:
        """Generate a new unique identifier."""

    @abc.abstractmethod
    def is_valid(self, value: str) -> bool:
        """Return True if `value` has the shape of an id this generator makes."""
