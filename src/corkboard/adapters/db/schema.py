"""Relational schema for users and boards.

Constraints (enforced here):

| Constraint                        | Purpose                                   |
|-----------------------------------|-------------------------------------------|
| PK(index), identity               | monotonic per-table sequence              |
| UNIQUE(id)                        | public identifier                         |
| UNIQUE(username), UNIQUE(email)   | backstop for the availability pre-check   |
| CHECK(length(hash) > 0)           | no user without credentials               |
| FK users_boards.user_id → users   | a board link always names a real user     |
| FK users_boards.board_id → boards | a board link always names a real board    |

Usernames and emails are stored lowercased by the service layer, so the
plain unique constraints behave case-insensitively for data written through
corkboard.
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Identity,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    text,
)

from .metadata import metadata
from .sa_types import BIGINT_PK, UTCDateTime

__all__ = ["boards", "users", "users_boards"]

ID_LENGTH = 36

users = Table(
    "users",
    metadata,
    Column(
        "index",
        BIGINT_PK,
        Identity(start=1),
        nullable=False,
        primary_key=True,
        comment="Monotonically increasing insertion sequence.",
    ),
    Column(
        "id",
        String(ID_LENGTH),
        nullable=False,
        unique=True,
        comment="Short URL-safe public identifier.",
    ),
    Column(
        "username",
        String(20),
        nullable=False,
        unique=True,
        comment="Lowercased login name.",
    ),
    Column(
        "email",
        String(254),
        nullable=False,
        unique=True,
        comment="Lowercased email address.",
    ),
    Column("hash", String(64), nullable=False, comment="Hex password digest."),
    Column("salt", String(64), nullable=False, comment="Salt used for the digest."),
    Column(
        "created_at",
        UTCDateTime(),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="Server-assigned UTC timestamp.",
    ),
    CheckConstraint("length(hash) > 0", name="hash_not_empty"),
    sqlite_autoincrement=True,
    comment="Registered users.",
)

boards = Table(
    "boards",
    metadata,
    Column(
        "id",
        String(ID_LENGTH),
        nullable=False,
        primary_key=True,
        comment="Short URL-safe public identifier.",
    ),
    Column("title", Text, nullable=False, comment="Free-text board title."),
    comment="Boards. Ownership is recorded in users_boards.",
)

users_boards = Table(
    "users_boards",
    metadata,
    Column(
        "user_id",
        String(ID_LENGTH),
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    ),
    Column(
        "board_id",
        String(ID_LENGTH),
        ForeignKey("boards.id"),
        nullable=False,
    ),
    PrimaryKeyConstraint("user_id", "board_id"),
    comment="Board ownership links.",
)
