"""initial_schema

Create the chatroom schema:
- Users (read for author attribution and moderation rights)
- Posts (text/image/video/file, with like counter and liked-by set)
- Comments (attached to a post or to another comment, unlimited depth)

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-19 10:12:44.418203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _create_enum(name: str, *values: str) -> None:
    labels = ", ".join(f"'{v}'" for v in values)
    op.execute(f"""
        DO $$ BEGIN
            CREATE TYPE {name} AS ENUM ({labels});
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    _create_enum("user_role", "user", "admin")
    _create_enum("post_type", "text", "image", "video", "file")
    _create_enum("reference_kind", "post", "comment")

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column(
            "role",
            postgresql.ENUM("user", "admin", name="user_role", create_type=False),
            nullable=False,
            server_default="user",
        ),
        sa.Column("active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_name", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "type",
            postgresql.ENUM(
                "text", "image", "video", "file", name="post_type", create_type=False
            ),
            nullable=False,
            server_default="text",
        ),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "liked_user_ids",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        *_timestamps(),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("likes >= 0", name="ck_posts_likes_non_negative"),
    )
    op.create_index(
        "idx_posts_created_at", "posts", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column(
            "reference",
            postgresql.ENUM("post", "comment", name="reference_kind", create_type=False),
            nullable=False,
        ),
        sa.Column("reference_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_name", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "liked_user_ids",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        *_timestamps(),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("likes >= 0", name="ck_comments_likes_non_negative"),
    )
    op.create_index(
        "idx_comments_reference",
        "comments",
        ["reference", "reference_id", "created_at"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_reference", table_name="comments")
    op.drop_table("comments")
    op.drop_index("idx_posts_created_at", table_name="posts")
    op.drop_table("posts")
    op.drop_table("users")
    op.execute("DROP TYPE IF EXISTS reference_kind")
    op.execute("DROP TYPE IF EXISTS post_type")
    op.execute("DROP TYPE IF EXISTS user_role")
