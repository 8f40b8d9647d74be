"""Pytest fixtures for service layer handler unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest

from corkboard.adapters.id_generators import SimpleIdGenerator
from corkboard.adapters.unit_of_work import InMemoryUnitOfWork
from corkboard.bootstrap import bootstrap

if TYPE_CHECKING:
    from corkboard.bootstrap import AppContainer

# pylint: disable=redefined-outer-name


@pytest.fixture
def make_test_app(fast_hasher) -> Callable[[], AppContainer]:
    """Factory for an application wired to a fresh in-memory unit of work.

    Ids come from `SimpleIdGenerator`, so the first user is "0000000001".
    """

    def _make() -> AppContainer:
        return bootstrap(
            uow=InMemoryUnitOfWork(),
            id_generator=SimpleIdGenerator(),
            hasher=fast_hasher,
        )

    return _make
