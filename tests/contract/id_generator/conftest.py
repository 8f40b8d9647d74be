"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from corkboard.adapters.id_generators import (
    ShortIdGenerator,
    SimpleIdGenerator,
    ULIDGenerator,
    UUIDv4Generator,
)
from corkboard.interfaces.id_generator import IdGenerator


@pytest.fixture(params=["short", "ulid", "uuid4", "simple"])
def id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Return a fresh IdGenerator instance for the requested backend.

    Supported params:
      - `"short"` → ShortIdGenerator (the application default)
      - `"ulid"` → ULIDGenerator
      - `"uuid4"` → UUIDv4Generator
      - `"simple"` → SimpleIdGenerator
    """
    match request.param:
        case "short":
            yield ShortIdGenerator()
        case "ulid":
            yield ULIDGenerator()
        case "uuid4":
            yield UUIDv4Generator()
        case "simple":
            yield SimpleIdGenerator()
        case _:
            raise ValueError(f"unknown id generator type: {request.param}")
