"""corkboard users CLI: manual account and board management.

Results are printed to stdout as JSON; notices and validation failures go to
stderr. Commands use the `AppContainer` found in ``ctx.obj`` when one is
provided (tests pass an in-memory container) and bootstrap from
``CORKBOARD_DB_URL`` otherwise.
"""

from __future__ import annotations

import json
from typing import Any

import click
import click_extra as clickx

from corkboard import config
from corkboard.bootstrap import AppContainer, bootstrap
from corkboard.domain.errors import ValidationError
from corkboard.interfaces.stores import StoreError
from corkboard.service_layer import commands, views

from .db import MISSING_DB_URL_MSG
from .helpers import error, success


def _container(ctx: click.Context) -> AppContainer:
    if isinstance(ctx.obj, AppContainer):
        return ctx.obj
    try:
        ctx.obj = bootstrap()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e
    except config.ConfigError as e:
        raise click.ClickException(str(e)) from e
    return ctx.obj


def _emit(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2, default=str))


@click.group(cls=clickx.ExtraGroup)
def users() -> None:
    """User and board management commands."""


@users.command()
@click.argument("username")
@click.argument("email")
@click.password_option(
    "--password", confirmation_prompt=False, help="Password (prompted if omitted)."
)
@click.option(
    "--confirmation",
    prompt="Repeat for confirmation",
    hide_input=True,
    help="Password confirmation (prompted if omitted).",
)
@click.pass_context
def register(
    ctx: click.Context, username: str, email: str, password: str, confirmation: str
) -> None:
    """Register a new user."""
    app = _container(ctx)
    cmd = commands.RegisterUser(
        username=username, email=email, password=password, confirmation=confirmation
    )
    try:
        user = app.message_bus.handle(cmd)
    except ValidationError as e:
        for item in e.validation:
            error(f"{item['field']}: {item['message']}")
        ctx.exit(1)
    except StoreError as e:
        raise click.ClickException(str(e)) from e

    success(f"Registered {user.username}")
    _emit(user.as_dict())


@users.command()
@click.argument("username")
@click.option(
    "--field",
    "-f",
    "extra_fields",
    multiple=True,
    type=click.Choice(views.EXTRA_FIELDS),
    help="Extra column to include (repeatable).",
)
@click.pass_context
def show(ctx: click.Context, username: str, extra_fields: tuple[str, ...]) -> None:
    """Show a user and the boards they own."""
    app = _container(ctx)
    if (user := views.find_by_username(app.uow, username, list(extra_fields))) is None:
        raise click.ClickException(f"No user named {username!r}")
    user["boards"] = views.boards_for_user(app.uow, user["id"])
    _emit(user)


@users.command("add-board")
@click.argument("username")
@click.argument("title")
@click.pass_context
def add_board(ctx: click.Context, username: str, title: str) -> None:
    """Create a board owned by USERNAME."""
    app = _container(ctx)
    if (user := views.find_by_username(app.uow, username)) is None:
        raise click.ClickException(f"No user named {username!r}")
    try:
        board = app.message_bus.handle(
            commands.CreateBoard(user_id=user["id"], title=title)
        )
    except StoreError as e:
        raise click.ClickException(str(e)) from e
    success(f"Created board {board.id} for {user['username']}")
    _emit(board.as_dict())
