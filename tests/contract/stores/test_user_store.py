"""Contract tests for the UserStore port."""

from __future__ import annotations

import pytest

from corkboard.domain.model import UserRecord
from corkboard.interfaces.stores import DuplicateUserError
from tests.helpers.time_asserts import assert_strict_utc

# pylint: disable=magic-value-comparison


def test_add_returns_stored_record(uow, make_new_user):
    """add() returns the full row, with index and created_at assigned."""
    with uow:
        record = uow.users.add(make_new_user())
        uow.commit()

    assert isinstance(record, UserRecord)
    assert (record.id, record.username, record.email) == ("u-1", "test", "test@test.com")
    assert record.hash == "0123456789abcdef" * 2
    assert record.index == 1
    assert_strict_utc(record.created_at)


def test_indexes_follow_insertion_order(uow, make_new_user):
    """Each committed user takes the next index."""
    with uow:
        first = uow.users.add(make_new_user())
        second = uow.users.add(make_new_user(id="u-2", username="b", email="b@test.com"))
        uow.commit()
    assert (first.index, second.index) == (1, 2)


@pytest.mark.parametrize("field", ["id", "username", "email"])
def test_get_by_each_lookup_field(uow, make_new_user, field):
    """Users can be fetched by id, username or email."""
    with uow:
        stored = uow.users.add(make_new_user())
        uow.commit()
    with uow:
        assert uow.users.get_by(field, getattr(stored, field)) == stored
        assert uow.users.exists(field, getattr(stored, field))


def test_missing_users(uow):
    """Lookups of absent values return None/False."""
    with uow:
        assert uow.users.get_by("username", "ghost") is None
        assert not uow.users.exists("email", "ghost@test.com")


def test_lookups_are_exact(uow, make_new_user):
    """Stores match values as given; callers lowercase first."""
    with uow:
        uow.users.add(make_new_user())
        uow.commit()
    with uow:
        assert not uow.users.exists("username", "TEST")


def test_lookup_field_is_checked(uow):
    """Only identifying columns can be used for lookups."""
    with uow:
        with pytest.raises(ValueError, match="Cannot look users up by"):
            uow.users.get_by("hash", "x")


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"id": "u-1"}, "id"),
        ({"username": "test"}, "username"),
        ({"email": "test@test.com"}, "email"),
    ],
)
def test_duplicates_are_refused(uow, make_new_user, overrides, field):
    """Each unique column rejects a second user with the same value."""
    with uow:
        uow.users.add(make_new_user())
        uow.commit()

    fresh = {"id": "u-2", "username": "other", "email": "other@test.com", **overrides}
    with uow:
        with pytest.raises(DuplicateUserError) as excinfo:
            uow.users.add(make_new_user(**fresh))
        assert excinfo.value.field == field
        assert excinfo.value.value == overrides[field]


def test_uncommitted_user_is_discarded(uow, make_new_user):
    """Leaving the unit of work without commit rolls the insert back."""
    with uow:
        uow.users.add(make_new_user())
    with uow:
        assert uow.users.get_by("id", "u-1") is None
