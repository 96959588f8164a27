"""announcements_and_suggestions

Add the administrator-facing tables:
- Announcements (news, events and notices, published or draft)
- Suggestions (member ideas with a review status)

Revision ID: 8e41b7c05d93
Revises: 3c1f0a9d2b7e
Create Date: 2026-10-19 16:40:02.731518

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "8e41b7c05d93"
down_revision: Union[str, Sequence[str], None] = "3c1f0a9d2b7e"
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
    _create_enum("announcement_type", "news", "event", "announcement")
    _create_enum(
        "suggestion_status",
        "pending",
        "reviewed",
        "approved",
        "implemented",
        "rejected",
    )

    # ========================================================================
    # ANNOUNCEMENTS table
    # ========================================================================
    op.create_table(
        "announcements",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_name", sa.String(255), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "type",
            postgresql.ENUM(
                "news",
                "event",
                "announcement",
                name="announcement_type",
                create_type=False,
            ),
            nullable=False,
            server_default="announcement",
        ),
        sa.Column(
            "attachments",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("published", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.Column("published_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_announcements_published_created_at",
        "announcements",
        ["published", sa.text("created_at DESC")],
    )

    # ========================================================================
    # SUGGESTIONS table
    # ========================================================================
    op.create_table(
        "suggestions",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_name", sa.String(255), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM(
                "pending",
                "reviewed",
                "approved",
                "implemented",
                "rejected",
                name="suggestion_status",
                create_type=False,
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("admin_notes", sa.Text(), nullable=True),
        sa.Column("reviewed_by", sa.UUID(), nullable=True),
        *_timestamps(),
        sa.Column("reviewed_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["reviewed_by"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_suggestions_status", "suggestions", ["status"])
    op.create_index("idx_suggestions_author_id", "suggestions", ["author_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_suggestions_author_id", table_name="suggestions")
    op.drop_index("idx_suggestions_status", table_name="suggestions")
    op.drop_table("suggestions")
    op.drop_index(
        "idx_announcements_published_created_at", table_name="announcements"
    )
    op.drop_table("announcements")
    op.execute("DROP TYPE IF EXISTS suggestion_status")
    op.execute("DROP TYPE IF EXISTS announcement_type")
