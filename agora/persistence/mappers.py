"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. The author snapshot is
stored flattened as ``author_id`` / ``author_name``.
"""

from typing import Any, Dict
from uuid import UUID

from agora.domain.model import Announcement, Comment, Post, Suggestion, User
from agora.domain.value import (
    AnnouncementId,
    AnnouncementType,
    Author,
    CommentId,
    PostId,
    PostType,
    ReferenceKind,
    Role,
    SuggestionId,
    SuggestionStatus,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _author(row: Dict[str, Any]) -> Author:
    return Author(id=UserId(_uuid(row["author_id"])), name=row["author_name"])


def _liked_user_ids(row: Dict[str, Any]) -> list[UserId]:
    return [UserId(_uuid(u)) for u in row.get("liked_user_ids") or []]


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        role=Role(row["role"]),
        active=row["active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    The returned post has an empty comment tree.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        author=_author(row),
        content=row["content"],
        type=PostType(row["type"]),
        likes=row["likes"],
        liked_user_ids=_liked_user_ids(row),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update (comments excluded)
    """
    data = post.model_dump(exclude={"author", "comments"})
    data["author_id"] = post.author.id
    data["author_name"] = post.author.name
    data["type"] = post.type.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model with no replies attached
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        reference=ReferenceKind(row["reference"]),
        reference_id=_uuid(row["reference_id"]),
        author=_author(row),
        content=row["content"],
        likes=row["likes"],
        liked_user_ids=_liked_user_ids(row),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict (replies excluded)."""
    data = comment.model_dump(exclude={"author", "comments"})
    data["author_id"] = comment.author.id
    data["author_name"] = comment.author.name
    data["reference"] = comment.reference.value
    return data


def row_to_announcement(row: Dict[str, Any]) -> Announcement:
    """Convert database row to Announcement domain model."""
    return Announcement(
        id=AnnouncementId(_uuid(row["id"])),
        author=_author(row),
        title=row["title"],
        content=row["content"],
        type=AnnouncementType(row["type"]),
        attachments=list(row.get("attachments") or []),
        published=row["published"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        published_at=row.get("published_at"),
    )


def announcement_to_dict(announcement: Announcement) -> Dict[str, Any]:
    """Convert Announcement domain model to database dict."""
    data = announcement.model_dump(exclude={"author"})
    data["author_id"] = announcement.author.id
    data["author_name"] = announcement.author.name
    data["type"] = announcement.type.value
    return data


def row_to_suggestion(row: Dict[str, Any]) -> Suggestion:
    """Convert database row to Suggestion domain model."""
    reviewed_by = row.get("reviewed_by")
    return Suggestion(
        id=SuggestionId(_uuid(row["id"])),
        author=_author(row),
        title=row["title"],
        description=row["description"],
        status=SuggestionStatus(row["status"]),
        admin_notes=row.get("admin_notes"),
        reviewed_by=UserId(_uuid(reviewed_by)) if reviewed_by else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        reviewed_at=row.get("reviewed_at"),
    )


def suggestion_to_dict(suggestion: Suggestion) -> Dict[str, Any]:
    """Convert Suggestion domain model to database dict."""
    data = suggestion.model_dump(exclude={"author"})
    data["author_id"] = suggestion.author.id
    data["author_name"] = suggestion.author.name
    data["status"] = suggestion.status.value
    return data
