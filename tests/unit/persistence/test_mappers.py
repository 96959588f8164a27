"""Unit tests for row/domain mappers."""

from uuid import uuid4

from agora.domain.model import Announcement, Suggestion
from agora.domain.value import (
    AnnouncementId,
    AnnouncementType,
    Author,
    PostType,
    ReferenceKind,
    SuggestionId,
    SuggestionStatus,
)
from agora.persistence.mappers import (
    announcement_to_dict,
    comment_to_dict,
    post_to_dict,
    row_to_announcement,
    row_to_comment,
    row_to_post,
    row_to_suggestion,
    suggestion_to_dict,
)
from tests.conftest import make_comment, make_post, make_user


class TestPostMapping:
    """Tests for post_to_dict and row_to_post."""

    def test_author_is_flattened(self):
        author = make_user(name="alice")
        post = make_post(author=author)

        data = post_to_dict(post)

        assert data["author_id"] == author.id
        assert data["author_name"] == "alice"
        assert data["type"] == PostType.TEXT.value
        assert "author" not in data
        assert "comments" not in data

    def test_row_with_string_ids_builds_post(self):
        """Rows may carry UUIDs as strings; they are parsed."""
        post = make_post()
        liker = make_user()
        row = post_to_dict(post)
        row.update(
            id=str(post.id),
            author_id=str(post.author.id),
            liked_user_ids=[str(liker.id)],
            likes=1,
        )

        restored = row_to_post(row)

        assert restored.id == post.id
        assert restored.author == post.author
        assert restored.liked_user_ids == [liker.id]
        assert restored.comments == []

    def test_null_liked_set_is_empty(self):
        row = post_to_dict(make_post())
        row["liked_user_ids"] = None

        assert row_to_post(row).liked_user_ids == []


class TestCommentMapping:
    """Tests for comment_to_dict and row_to_comment."""

    def test_reference_survives_mapping(self):
        parent = make_comment(make_post())
        reply = make_comment(parent)

        restored = row_to_comment(comment_to_dict(reply))

        assert restored.reference == ReferenceKind.COMMENT
        assert restored.reference_id == parent.id
        assert restored == reply


class TestAnnouncementAndSuggestionMapping:
    """Tests for the announcement and suggestion mappers."""

    def test_announcement_round_trip_from_string_ids(self):
        author = make_user(name="mod")
        announcement = Announcement(
            id=AnnouncementId(uuid4()),
            author=Author(id=author.id, name=author.name),
            title="Meetup",
            content="Friday",
            type=AnnouncementType.EVENT,
        )
        row = announcement_to_dict(announcement)
        row.update(id=str(announcement.id), author_id=str(author.id), attachments=None)

        restored = row_to_announcement(row)

        assert row["type"] == "event"
        assert restored.author == announcement.author
        assert restored.attachments == []

    def test_unreviewed_suggestion_has_no_reviewer(self):
        author = make_user()
        suggestion = Suggestion(
            id=SuggestionId(uuid4()),
            author=Author(id=author.id, name=author.name),
            title="Idea",
            description="Details",
        )
        row = suggestion_to_dict(suggestion)

        restored = row_to_suggestion(row)

        assert row["status"] == SuggestionStatus.PENDING.value
        assert restored.reviewed_by is None
        assert restored == suggestion
