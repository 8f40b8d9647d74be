"""Create users, boards and users_boards tables

Revision ID: 3f0c2a9d71be
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from corkboard.adapters.db.sa_types import BIGINT_PK, UTCDateTime

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f0c2a9d71be"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column(
            "index",
            BIGINT_PK,
            sa.Identity(always=False, start=1),
            nullable=False,
            comment="Monotonically increasing insertion sequence.",
        ),
        sa.Column(
            "id",
            sa.String(length=36),
            nullable=False,
            comment="Short URL-safe public identifier.",
        ),
        sa.Column(
            "username",
            sa.String(length=20),
            nullable=False,
            comment="Lowercased login name.",
        ),
        sa.Column(
            "email",
            sa.String(length=254),
            nullable=False,
            comment="Lowercased email address.",
        ),
        sa.Column(
            "hash", sa.String(length=64), nullable=False, comment="Hex password digest."
        ),
        sa.Column(
            "salt",
            sa.String(length=64),
            nullable=False,
            comment="Salt used for the digest.",
        ),
        sa.Column(
            "created_at",
            UTCDateTime(),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="Server-assigned UTC timestamp.",
        ),
        sa.CheckConstraint("length(hash) > 0", name=op.f("ck_users_hash_not_empty")),
        sa.PrimaryKeyConstraint("index", name=op.f("pk_users")),
        sa.UniqueConstraint("id", name=op.f("uq_users_id")),
        sa.UniqueConstraint("username", name=op.f("uq_users_username")),
        sa.UniqueConstraint("email", name=op.f("uq_users_email")),
        sqlite_autoincrement=True,
        comment="Registered users.",
    )
    op.create_table(
        "boards",
        sa.Column(
            "id",
            sa.String(length=36),
            nullable=False,
            comment="Short URL-safe public identifier.",
        ),
        sa.Column("title", sa.Text(), nullable=False, comment="Free-text board title."),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_boards")),
        comment="Boards. Ownership is recorded in users_boards.",
    )
    op.create_table(
        "users_boards",
        sa.Column("user_id", sa.String(length=36), nullable=False),
        sa.Column("board_id", sa.String(length=36), nullable=False),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"], name=op.f("fk_users_boards_user_id_users")
        ),
        sa.ForeignKeyConstraint(
            ["board_id"], ["boards.id"], name=op.f("fk_users_boards_board_id_boards")
        ),
        sa.PrimaryKeyConstraint("user_id", "board_id", name=op.f("pk_users_boards")),
        comment="Board ownership links.",
    )
    op.create_index(
        op.f("ix_users_boards_users_boards_user_id"),
        "users_boards",
        ["user_id"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_users_boards_users_boards_user_id"), table_name="users_boards")
    op.drop_table("users_boards")
    op.drop_table("boards")
    op.drop_table("users")
