"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from agora.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from agora.domain.repository import CommentRepository
from agora.domain.service import CommentService
from agora.domain.value import CommentId, ReferenceKind, Role
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_comment_references_its_parent(self, unit_env):
        """Top-level comments point at the post; replies at the comment."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = make_post()
        author = make_user(name="carol")

        # Act
        top = await comment_service.create_comment(
            ReferenceKind.POST, post.id, author, "Nice post"
        )
        reply = await comment_service.create_comment(
            ReferenceKind.COMMENT, top.id, author, "Thanks"
        )

        # Assert
        assert top.reference == ReferenceKind.POST
        assert top.reference_id == post.id
        assert top.author.name == "carol"
        assert reply.reference == ReferenceKind.COMMENT
        assert reply.reference_id == top.id

    @pytest.mark.asyncio
    async def test_blank_content_is_rejected(self, unit_env):
        """Whitespace-only content raises ValidationError."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValidationError):
            await comment_service.create_comment(
                ReferenceKind.POST, make_post().id, make_user(), "  "
            )


class TestListComments:
    """Tests for list_comments method."""

    @pytest.mark.asyncio
    async def test_lists_direct_children_oldest_first(self, unit_env):
        """Only direct children are listed, in creation order."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = make_post()
        comments = [make_comment(post, content=f"c{i}", minutes=i) for i in range(3)]
        for comment in reversed(comments):
            await comment_repo.save(comment)
        await comment_repo.save(make_comment(comments[0], content="reply"))

        # Act
        page, total = await comment_service.list_comments(
            ReferenceKind.POST, post.id, page=1, limit=2
        )

        # Assert
        assert total == 3
        assert [c.content for c in page] == ["c0", "c1"]


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_delete_removes_replies(self, unit_env):
        """The comment and all replies below it are removed; siblings stay."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_user()
        post = make_post()
        target = make_comment(post, author=author, minutes=1)
        sibling = make_comment(post, minutes=2)
        replies = [make_comment(target, minutes=3)]
        replies.append(make_comment(replies[0], minutes=4))
        for comment in (target, sibling, *replies):
            await comment_repo.save(comment)

        # Act
        removed = await comment_service.delete_comment(target, author)

        # Assert
        assert removed == 2
        assert await comment_repo.find_by_id(target.id) is None
        assert await comment_repo.find_by_id(sibling.id) is not None
        for reply in replies:
            assert await comment_repo.find_by_id(reply.id) is None

    @pytest.mark.asyncio
    async def test_non_author_is_refused(self, unit_env):
        """Someone else's comment cannot be deleted by a regular user."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment(make_post())
        await comment_repo.save(comment)

        with pytest.raises(NotAuthorizedError):
            await comment_service.delete_comment(comment, make_user(name="eve"))

        assert await comment_repo.find_by_id(comment.id) is not None

    @pytest.mark.asyncio
    async def test_admin_may_delete(self, unit_env):
        """Administrators can remove anyone's comment."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment(make_post())
        await comment_repo.save(comment)

        await comment_service.delete_comment(comment, make_user(role=Role.ADMIN))

        assert await comment_repo.find_by_id(comment.id) is None


class TestToggleLike:
    """Tests for toggle_like method."""

    @pytest.mark.asyncio
    async def test_toggle_twice_is_idempotent_pair(self, unit_env):
        """Like then unlike leaves the counter and set as they were."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment(make_post())
        await comment_repo.save(comment)
        liker = make_user()

        _, first = await comment_service.toggle_like(comment.id, liker.id)
        updated, second = await comment_service.toggle_like(comment.id, liker.id)

        assert (first, second) == (True, False)
        assert updated.likes == 0
        assert updated.liked_user_ids == []

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env):
        """Unknown comments raise NotFoundError."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError, match="Comment not found"):
            await comment_service.toggle_like(CommentId(uuid4()), make_user().id)
