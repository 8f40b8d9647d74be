"""ID generators for corkboard."""

import re
import secrets
import string
import threading
import uuid

import ulid
from ulid import monotonic

from corkboard.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods

URL_SAFE_ALPHABET = string.digits + string.ascii_letters + "-_"


class ShortIdGenerator(IdGenerator):
    """Short, URL-safe random identifiers (the default for users and boards).

    Each id is `length` characters drawn from ``[0-9A-Za-z_-]`` with the
    `secrets` module. With the default length of 10 there are 64**10
    possible ids; the unique constraints in storage catch the improbable
    collision.
    """

    def __init__(self, length: int = 10) -> None:
        self._length = length
        self._pattern = re.compile(rf"[0-9A-Za-z_-]{{{length}}}")

    def new_id(self) -> str:
        """Generate a new random id."""
        return "".join(secrets.choice(URL_SAFE_ALPHABET) for _ in range(self._length))

    def is_valid(self, value: str) -> bool:
        return isinstance(value, str) and bool(self._pattern.fullmatch(value))


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator.

    ULIDs are unique, lexicographically sortable identifiers.
    They generally consist of a timestamp and a random component.
    This generator uses the `ulid-py` library to create ULIDs.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())

    def is_valid(self, value: str) -> bool:
        try:
            ulid.from_str(value)
        except (TypeError, ValueError):
            return False
        return True


class UUIDv4Generator(IdGenerator):
    """UUIDv4 generator.

    UUIDv4 are universally unique identifiers that are randomly generated.
    They are not guaranteed to be sequential or ordered in any way.
    """

    def new_id(self) -> str:
        """Generate a new UUID."""
        return str(uuid.uuid4())

    def is_valid(self, value: str) -> bool:
        try:
            parsed = uuid.UUID(value)
        except (AttributeError, TypeError, ValueError):
            return False
        return parsed.version == 4 and str(parsed) == value


class SimpleIdGenerator(IdGenerator):
    """A simple ID generator that produces sequential, zero-padded IDs.

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    def __init__(self, length: int = 10) -> None:
        self._counter = 0
        self._length = length
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate the next sequential identifier."""
        with self._lock:
            self._counter += 1
            return f"{self._counter:0{self._length}d}"

    def is_valid(self, value: str) -> bool:
        return isinstance(value, str) and len(value) == self._length and value.isdigit()
