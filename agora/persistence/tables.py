"""SQLAlchemy table definitions for Agora.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the accounts service, read here)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=False),
    Column(
        "role",
        postgresql.ENUM("user", "admin", name="user_role", create_type=False),
        nullable=False,
        server_default="user",
    ),
    Column("active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_name", String(255), nullable=False),  # Denormalized from users
    Column("content", Text, nullable=False),
    Column(
        "type",
        postgresql.ENUM(
            "text", "image", "video", "file", name="post_type", create_type=False
        ),
        nullable=False,
        server_default="text",
    ),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column(
        "liked_user_ids",
        ARRAY(UUID),
        nullable=False,
        server_default="{}",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("likes >= 0", name="ck_posts_likes_non_negative"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "reference",
        postgresql.ENUM("post", "comment", name="reference_kind", create_type=False),
        nullable=False,
    ),
    Column("reference_id", UUID, nullable=False),  # posts.id or comments.id
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_name", String(255), nullable=False),  # Denormalized from users
    Column("content", Text, nullable=False),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column(
        "liked_user_ids",
        ARRAY(UUID),
        nullable=False,
        server_default="{}",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("likes >= 0", name="ck_comments_likes_non_negative"),
)

Index(
    "idx_comments_reference",
    comments_table.c.reference,
    comments_table.c.reference_id,
    comments_table.c.created_at,
)

# ============================================================================
# ANNOUNCEMENTS TABLE
# ============================================================================
announcements_table = Table(
    "announcements",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_name", String(255), nullable=False),  # Denormalized from users
    Column("title", String(255), nullable=False),
    Column("content", Text, nullable=False),
    Column(
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
    Column("attachments", ARRAY(Text), nullable=False, server_default="{}"),
    Column("published", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("published_at", TIMESTAMP(timezone=True), nullable=True),
)

Index(
    "idx_announcements_published_created_at",
    announcements_table.c.published,
    announcements_table.c.created_at.desc(),
)

# ============================================================================
# SUGGESTIONS TABLE
# ============================================================================
suggestions_table = Table(
    "suggestions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_name", String(255), nullable=False),  # Denormalized from users
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=False),
    Column(
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
    Column("admin_notes", Text, nullable=True),
    Column(
        "reviewed_by", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("reviewed_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_suggestions_status", suggestions_table.c.status)
Index("idx_suggestions_author_id", suggestions_table.c.author_id)
