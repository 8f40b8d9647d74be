"""Functional tests for the ``corkboard users`` subcommands.

Most tests hand the CLI an in-memory application through ``obj``; the last
one runs the whole flow against a migrated SQLite file configured through
``CORKBOARD_DB_URL``.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from corkboard.adapters.unit_of_work import InMemoryUnitOfWork
from corkboard.bootstrap import bootstrap
from corkboard.entrypoints.cli.main import corkboard

# pylint: disable=redefined-outer-name, magic-value-comparison

QUIET = ["--no-flight-recorder"]


@pytest.fixture
def app(fast_hasher):
    """In-memory application shared by the invocations of one test."""
    return bootstrap(uow=InMemoryUnitOfWork(), hasher=fast_hasher)


@pytest.fixture
def invoke(app):
    """Run ``corkboard users ...`` against `app`."""
    runner = CliRunner()

    def _invoke(*args: str, input: str | None = None):  # pylint: disable=redefined-builtin
        return runner.invoke(corkboard, [*QUIET, "users", *args], obj=app, input=input)

    return _invoke


def register(invoke, username="alice", email="alice@mail.com", password="s3cret!"):
    """Register a user with matching password and confirmation."""
    return invoke(
        "register", username, email, "--password", password, "--confirmation", password
    )


def test_register_prints_public_user(invoke):
    """A new user is echoed as JSON without secrets."""
    result = register(invoke, username="Alice")
    assert result.exit_code == 0, result.output
    user = json.loads(result.stdout)
    assert set(user) == {"id", "username"}
    assert user["username"] == "alice"
    assert "Registered alice" in result.output


def test_register_prompts_for_passwords(invoke):
    """Passwords can be typed at the prompts."""
    result = invoke("register", "bob", "bob@mail.com", input="hunter22\nhunter22\n")
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout[result.stdout.index("{"):])["username"] == "bob"


def test_register_reports_every_violation(invoke):
    """Validation failures are listed one per line and exit non-zero."""
    result = invoke(
        "register", "a b", "nope", "--password", "123", "--confirmation", "321"
    )
    assert result.exit_code == 1
    assert "username: Must not contain spaces" in result.output
    assert "password: Must be at least 6 characters long" in result.output
    assert "confirmation: Passwords not match" in result.output
    assert "email: Invalid email" in result.output


def test_register_taken_username(invoke):
    """A second registration of a username is refused."""
    register(invoke)
    result = register(invoke, username="ALICE", email="other@mail.com")
    assert result.exit_code == 1
    assert "username: Username is already taken" in result.output


def test_show_user_with_boards(invoke):
    """show prints the user, requested extras and owned boards."""
    register(invoke)
    assert invoke("add-board", "alice", "Zines").exit_code == 0
    assert invoke("add-board", "alice", "Art").exit_code == 0

    result = invoke("show", "Alice", "-f", "email", "-f", "index")
    assert result.exit_code == 0, result.output
    user = json.loads(result.stdout)
    assert user["email"] == "alice@mail.com"
    assert user["index"] == 1
    assert [b["title"] for b in user["boards"]] == ["Art", "Zines"]
    assert "hash" not in user


def test_unknown_user(invoke):
    """Commands naming a missing user fail cleanly."""
    for args in (("show", "ghost"), ("add-board", "ghost", "Nothing")):
        result = invoke(*args)
        assert result.exit_code == 1
        assert "No user named 'ghost'" in result.output


def test_users_against_sqlite_file(tmp_path: Path):
    """Upgrade the schema, then register and inspect a user from the environment."""
    runner = CliRunner(env={"CORKBOARD_DB_URL": f"sqlite:///{tmp_path / 'cb.db'}"})
    assert runner.invoke(corkboard, [*QUIET, "db", "upgrade", "--force"]).exit_code == 0

    result = runner.invoke(
        corkboard,
        [*QUIET, "users", "register", "carol", "carol@mail.com",
         "--password", "123456", "--confirmation", "123456"],
    )
    assert result.exit_code == 0, result.output

    result = runner.invoke(corkboard, [*QUIET, "users", "show", "carol", "-f", "hash"])
    assert result.exit_code == 0, result.output
    user = json.loads(result.stdout)
    assert len(user["hash"]) == 32
    assert user["boards"] == []
